from __future__ import annotations

import json
import socket

import pytest

from goveectl.config import get_settings
from goveectl.core import dispatcher

DEVICES = [
    {"name": "Monitor Light", "ip": "10.0.0.5", "model": "H6046"},
    {"name": "TV", "ip": "10.0.0.9", "model": "H6199"},
    {"name": "Living Room", "ip": "192.168.1.50", "model": "H6008"},
]


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.delenv("GOVEECTL_CONFIG", raising=False)
    monkeypatch.delenv("GOVEECTL_DEVICES", raising=False)
    monkeypatch.delenv("LOGLEVEL", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config-home"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data-home"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry_file(tmp_path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "devices.json"
    path.write_text(json.dumps({"devices": DEVICES}))
    monkeypatch.setenv("GOVEECTL_DEVICES", str(path))
    return path


@pytest.fixture
def sent(monkeypatch: pytest.MonkeyPatch) -> list[tuple[str, int, bytes]]:
    """Record unicast sends instead of touching the network."""
    calls: list[tuple[str, int, bytes]] = []

    def _fake_send_unicast(ip: str, port: int, payload: bytes) -> None:
        calls.append((ip, port, payload))

    monkeypatch.setattr(dispatcher, "send_unicast", _fake_send_unicast)
    return calls


class FakeSocket:
    """Stand-in for a UDP socket; ``replies`` are returned by recvfrom in order.

    Exceptions in ``replies`` are raised instead. Once replies run out,
    recvfrom times out.
    """

    def __init__(self, replies=(), sender: str = "192.168.1.77") -> None:
        self.replies = list(replies)
        self.sender = sender
        self.options: dict[int, int] = {}
        self.bound: tuple[str, int] | None = None
        self.sent: list[tuple[bytes, tuple[str, int]]] = []
        self.timeouts: list[float] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def setsockopt(self, _level: int, option: int, value: int) -> None:
        self.options[option] = value

    def bind(self, address: tuple[str, int]) -> None:
        self.bound = address

    def sendto(self, data: bytes, address: tuple[str, int]) -> int:
        self.sent.append((data, address))
        return len(data)

    def settimeout(self, value: float) -> None:
        self.timeouts.append(value)

    def recvfrom(self, _size: int):
        if not self.replies:
            raise socket.timeout("timed out")
        item = self.replies.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item, (self.sender, 4003)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_socket_factory():
    def _make(replies=()):
        sock = FakeSocket(replies)

        def _factory(_family: int, _type: int) -> FakeSocket:
            return sock

        return sock, _factory

    return _make
