from __future__ import annotations

import json

import pytest

from goveectl.errors import RegistryUnavailable
from goveectl.models import Device, DeviceRegistry
from goveectl.storage import RegistryStore


def test_load_keeps_file_order(registry_file):
    registry = RegistryStore(registry_file).load()

    assert [device.name for device in registry.devices] == [
        "Monitor Light",
        "TV",
        "Living Room",
    ]
    assert registry.devices[0] == Device(
        name="Monitor Light", ip="10.0.0.5", model="H6046"
    )


def test_load_missing_file(tmp_path):
    with pytest.raises(RegistryUnavailable, match="not found"):
        RegistryStore(tmp_path / "nope.json").load()


def test_load_invalid_json(tmp_path):
    path = tmp_path / "devices.json"
    path.write_text("{devices: [")

    with pytest.raises(RegistryUnavailable, match="Invalid JSON"):
        RegistryStore(path).load()


@pytest.mark.parametrize(
    "document",
    [
        {"devices": [{"name": "Lamp", "ip": "not-an-ip", "model": "H6001"}]},
        {"devices": [{"ip": "10.0.0.1"}]},
        {"devices": "Lamp"},
        ["Lamp"],
        {},
        {"device": [{"name": "Lamp", "ip": "10.0.0.1"}]},
    ],
)
def test_load_malformed_registry(tmp_path, document):
    path = tmp_path / "devices.json"
    path.write_text(json.dumps(document))

    with pytest.raises(RegistryUnavailable, match="Invalid device registry"):
        RegistryStore(path).load()


def test_load_ignores_unknown_fields(tmp_path):
    path = tmp_path / "devices.json"
    path.write_text(
        json.dumps(
            {
                "version": 2,
                "devices": [{"name": "Lamp", "ip": "10.0.0.1", "room": "office"}],
            }
        )
    )

    registry = RegistryStore(path).load()
    assert registry.devices == [Device(name="Lamp", ip="10.0.0.1")]


def test_find_by_name_substring_is_case_insensitive():
    registry = DeviceRegistry(
        devices=[
            Device(name="Living Room", ip="192.168.1.50"),
            Device(name="Bedroom", ip="192.168.1.51"),
        ]
    )

    assert [d.name for d in registry.find_by_name_substring("living")] == [
        "Living Room"
    ]
    assert [d.name for d in registry.find_by_name_substring("LIVING ROOM")] == [
        "Living Room"
    ]
    assert [d.name for d in registry.find_by_name_substring("room")] == [
        "Living Room",
        "Bedroom",
    ]
    assert registry.find_by_name_substring("kitchen") == []


def test_find_by_ip_is_exact():
    registry = DeviceRegistry(
        devices=[
            Device(name="A", ip="192.168.1.50"),
            Device(name="B", ip="192.168.1.5"),
        ]
    )

    assert [d.name for d in registry.find_by_ip("192.168.1.5")] == ["B"]
    assert registry.find_by_ip("192.168.1") == []
