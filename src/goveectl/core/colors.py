from __future__ import annotations

import logging
from collections.abc import Mapping

from goveectl.config import DEFAULT_PALETTE
from goveectl.config.settings import HEX_COLOR_RE
from goveectl.errors import InvalidColor
from goveectl.models import Color

logger = logging.getLogger(__name__)


def resolve_color(token: str, palette: Mapping[str, str] = DEFAULT_PALETTE) -> Color:
    """Turn a color name or hex string into a Color.

    Names are looked up case-insensitively in ``palette``. Anything else must
    be exactly six hex digits, optionally prefixed with ``#``.
    """
    normalized = token.strip().lower()
    code = palette.get(normalized, normalized).removeprefix("#")

    if not HEX_COLOR_RE.fullmatch(code):
        raise InvalidColor(token)

    color = Color(
        hex=code,
        r=int(code[0:2], 16),
        g=int(code[2:4], 16),
        b=int(code[4:6], 16),
    )
    logger.debug("Resolved color %r to #%s %s", token, color.hex, color.rgb)
    return color
