from __future__ import annotations

import enum
import logging
import socket
import time
from collections.abc import Callable, Iterator

from goveectl.config import DiscoveryConfig, ProtocolConfig
from goveectl.errors import TransportError
from goveectl.models import DiscoveryReply

from .protocol import SCAN_REQUEST, parse_scan_reply

logger = logging.getLogger(__name__)

SocketFactory = Callable[[int, int], socket.socket]


def send_unicast(
    ip: str,
    port: int,
    payload: bytes,
    socket_factory: SocketFactory = socket.socket,
) -> None:
    """Hand one datagram to the OS for ``ip:port``. No reply is awaited."""
    logger.debug("Sending %d bytes to %s:%d: %r", len(payload), ip, port, payload)
    try:
        with socket_factory(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.sendto(payload, (ip, port))
    except OSError as exc:
        raise TransportError(f"Failed to send to {ip}:{port}: {exc}") from exc


class ScanState(enum.Enum):
    PROBING = "probing"
    LISTENING = "listening"
    DONE = "done"


class DiscoverySession:
    """One broadcast scan: probe once, then collect replies until quiet.

    The session moves PROBING -> LISTENING -> DONE. Each receive waits at most
    ``receive_timeout`` seconds (less when the session deadline is closer);
    a receive timeout or the session deadline ends the scan. The socket is
    released on every exit path, including when the consumer stops iterating
    early.
    """

    def __init__(
        self,
        protocol: ProtocolConfig,
        discovery: DiscoveryConfig,
        socket_factory: SocketFactory = socket.socket,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._protocol = protocol
        self._discovery = discovery
        self._socket_factory = socket_factory
        self._clock = clock
        self._sock: socket.socket | None = None
        self._deadline = 0.0
        self.state = ScanState.PROBING

    def __iter__(self) -> Iterator[DiscoveryReply]:
        if self.state is not ScanState.PROBING:
            raise RuntimeError("discovery session already used")
        try:
            self._probe()
            while self.state is ScanState.LISTENING:
                reply = self._receive()
                if reply is not None:
                    yield reply
        finally:
            self._close()

    def _probe(self) -> None:
        target = (self._protocol.broadcast_address, self._protocol.scan_port)
        try:
            sock = self._socket_factory(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as exc:
            self.state = ScanState.DONE
            raise TransportError(f"Cannot open discovery socket: {exc}") from exc
        self._sock = sock
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            sock.bind(("", self._protocol.listen_port))
            sock.sendto(SCAN_REQUEST, target)
        except OSError as exc:
            self.state = ScanState.DONE
            raise TransportError(
                f"Discovery probe to {target[0]}:{target[1]} failed: {exc}"
            ) from exc

        logger.info(
            "Sent scan request to %s:%d, listening on port %d",
            target[0],
            target[1],
            self._protocol.listen_port,
        )
        self._deadline = self._clock() + self._discovery.session_timeout
        self.state = ScanState.LISTENING

    def _receive(self) -> DiscoveryReply | None:
        assert self._sock is not None
        remaining = self._deadline - self._clock()
        if remaining <= 0:
            logger.debug("Discovery session timeout reached")
            self.state = ScanState.DONE
            return None

        self._sock.settimeout(min(self._discovery.receive_timeout, remaining))
        try:
            data, (sender, _port) = self._sock.recvfrom(self._discovery.buffer_size)
        except (socket.timeout, TimeoutError):
            logger.debug("No reply within receive timeout, scan finished")
            self.state = ScanState.DONE
            return None
        except OSError as exc:
            self.state = ScanState.DONE
            raise TransportError(f"Discovery receive failed: {exc}") from exc

        try:
            reply = parse_scan_reply(data)
        except ValueError as exc:
            logger.debug("Skipping malformed reply from %s: %s", sender, exc)
            return None

        logger.debug("Reply from %s: %s", sender, reply)
        return reply

    def _close(self) -> None:
        self.state = ScanState.DONE
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.debug("Discovery socket closed")


def discover(
    protocol: ProtocolConfig,
    discovery: DiscoveryConfig,
    socket_factory: SocketFactory = socket.socket,
) -> Iterator[DiscoveryReply]:
    """Broadcast a scan request and yield replies as they arrive."""
    yield from DiscoverySession(protocol, discovery, socket_factory)
