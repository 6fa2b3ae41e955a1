from __future__ import annotations

import logging

from goveectl.models import Device, DeviceRegistry

logger = logging.getLogger(__name__)


def resolve_device(registry: DeviceRegistry, query: str) -> Device | None:
    """Find the device a user means by ``query``.

    A case-insensitive name substring match wins over an exact IP match; among
    several matches the first one in registry order is used. Returns None when
    nothing matches or the query is blank.
    """
    if not query.strip():
        logger.debug("Blank device query")
        return None

    for finder in (registry.find_by_name_substring, registry.find_by_ip):
        matches = finder(query)
        if matches:
            if len(matches) > 1:
                logger.debug(
                    "%d devices match %r, using first: %s",
                    len(matches),
                    query,
                    matches[0].name,
                )
            return matches[0]

    logger.debug("No device matches %r", query)
    return None
