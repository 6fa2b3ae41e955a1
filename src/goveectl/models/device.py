from __future__ import annotations

import ipaddress

from pydantic import BaseModel, field_validator


class Device(BaseModel):
    model_config = {"frozen": True, "extra": "ignore"}

    name: str
    ip: str
    model: str = ""

    @field_validator("ip")
    @classmethod
    def _check_ipv4(cls, value: str) -> str:
        ipaddress.IPv4Address(value)
        return value


class DeviceRegistry(BaseModel):
    """Ordered list of known devices; order is the tie-break for lookups."""

    model_config = {"frozen": True, "extra": "ignore"}

    devices: list[Device]

    def find_by_name_substring(self, query: str) -> list[Device]:
        needle = query.casefold()
        return [device for device in self.devices if needle in device.name.casefold()]

    def find_by_ip(self, query: str) -> list[Device]:
        return [device for device in self.devices if device.ip == query]


class DiscoveryReply(BaseModel):
    """Self-announcement of a device answering a scan request."""

    model_config = {"frozen": True, "extra": "ignore"}

    ip: str
    sku: str = ""
    device: str = ""
