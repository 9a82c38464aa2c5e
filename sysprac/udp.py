"""UDP endpoints that acknowledge every datagram they receive."""

from __future__ import annotations

import socket
import sys
import threading
from typing import Optional, Union

BUFFER_SIZE = 65507
TIMEOUT_SECONDS = 10
PORT = "10000"
ACK = b"ack\0"
MESSAGES = ("first hello", "hello")

_SEND_LOCK = threading.Lock()

Peer = Optional[tuple]


class MessageTooLarge(ValueError):
    """A datagram exceeds the largest UDP payload."""

    def __init__(self, size: int):
        super().__init__(f"Exceed max buffer size: {size} > {BUFFER_SIZE}")
        self.size = size


def _is_ack(data: bytes) -> bool:
    return data.split(b"\0", 1)[0] == b"ack"


def _text(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode(errors="replace")


class UdpEndpoint:
    """A datagram socket bound (server) or connected (client) to host and port.

    Every datagram read that is not itself an acknowledgement is answered
    with one. Writes other than acknowledgements take turns through a
    shared lock, retrying each time *timeout* seconds pass without it.
    """

    def __init__(self, host: Optional[str], port: Union[str, int] = PORT,
                 server: bool = False, timeout: float = TIMEOUT_SECONDS):
        self.server = server
        self.timeout = timeout
        infos = socket.getaddrinfo(host, port, socket.AF_UNSPEC, socket.SOCK_DGRAM,
                                   0, socket.AI_PASSIVE)
        for family, kind, proto, _, address in infos:
            try:
                sock = socket.socket(family, kind, proto)
            except OSError:
                continue
            try:
                if server:
                    sock.bind(address)
                else:
                    sock.connect(address)
            except OSError:
                sock.close()
                continue
            self.sock = sock
            break
        else:
            raise OSError("Could not bind" if server else "Could not connect")

    def _wait_turn(self) -> None:
        while not _SEND_LOCK.acquire(timeout=self.timeout):
            pass
        _SEND_LOCK.release()

    def write(self, data: bytes, peer: Peer = None) -> int:
        """Send *data* to *peer* (or the connected address); return the bytes sent."""
        if len(data) > BUFFER_SIZE:
            raise MessageTooLarge(len(data))
        if not _is_ack(data):
            self._wait_turn()
        if peer is None:
            return self.sock.send(data)
        return self.sock.sendto(data, peer)

    def read(self) -> tuple[bytes, tuple]:
        """Receive one datagram, acknowledging it unless it is an acknowledgement."""
        data, peer = self.sock.recvfrom(BUFFER_SIZE)
        if data and not _is_ack(data):
            print("Send ack")
            self.write(ACK, peer if self.server else None)
        return data, peer

    def close(self) -> None:
        self.sock.close()

    def __enter__(self) -> UdpEndpoint:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def client_main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: UDP-client host", file=sys.stderr)
        return 1
    try:
        endpoint = UdpEndpoint(args[0], PORT)
    except socket.gaierror as exc:
        print(f"getaddrinfo: {exc.strerror}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    with endpoint:
        for message in MESSAGES:
            print(f"Send: {message}")
            payload = message.encode()
            if endpoint.write(payload) != len(payload):
                print("partial/failed write", file=sys.stderr)
                return 1
            try:
                data, _ = endpoint.read()
            except OSError as exc:
                print(f"read: {exc.strerror or exc}", file=sys.stderr)
                return 1
            print(f"Received {len(data)} bytes: {_text(data)}")
    return 0


def server_main(argv=None) -> int:
    try:
        endpoint = UdpEndpoint(None, PORT, server=True)
    except socket.gaierror as exc:
        print(f"getaddrinfo: {exc.strerror}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    with endpoint:
        try:
            while True:
                try:
                    data, peer = endpoint.read()
                except OSError:
                    continue
                try:
                    host, service = socket.getnameinfo(peer, socket.NI_NUMERICSERV)
                except OSError as exc:
                    print(f"getnameinfo: {exc}", file=sys.stderr)
                    continue
                print(f"Received {len(data)} bytes from {host}:{service}: {_text(data)}")
        except KeyboardInterrupt:
            return 0


if __name__ == "__main__":
    sys.exit(server_main())