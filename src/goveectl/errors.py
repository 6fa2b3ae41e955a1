"""Exceptions raised by goveectl."""

from __future__ import annotations


class GoveeCtlError(Exception):
    """Base exception for goveectl."""


class RegistryUnavailable(GoveeCtlError):
    """The device registry file is missing, unreadable or malformed."""


class DeviceNotFound(GoveeCtlError):
    """No registry entry matches the device query."""

    def __init__(self, query: str) -> None:
        super().__init__(f"Device not found: {query}")
        self.query = query


class InvalidColor(GoveeCtlError):
    """Color token is neither a known name nor 6 hex digits."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"Invalid color: {token!r} (use a name like 'red' or hex like ff5500)"
        )
        self.token = token


class InvalidBrightness(GoveeCtlError):
    """Brightness level is not an integer between 0 and 100."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Brightness must be 0-100, got {level!r}")
        self.level = level


class TransportError(GoveeCtlError):
    """A UDP socket operation failed."""
