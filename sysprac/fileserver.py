"""A TCP server that answers each request with the start of the named file."""

from __future__ import annotations

import os
import re
import selectors
import socket
import sys
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import IO, Optional

BUFFSIZE = 1024
PORT = 8080
LISTEN_BACKLOG = 80
_POLL_SECONDS = 0.05
_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _until_nul(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def _read_file(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read(BUFFSIZE)


class FileServer:
    """Serves one file per connection: the client sends a path, gets its first 1024 bytes.

    In synchronous mode each file is read while the loop waits; in
    asynchronous mode reads run in the background and finished ones are
    answered on later passes of the loop, padded to the full buffer size.
    """

    def __init__(self, host: str = "", port: int = PORT,
                 expected_requests: Optional[int] = None,
                 asynchronous: bool = False, out: Optional[IO[str]] = None):
        self.expected_requests = expected_requests
        self.asynchronous = asynchronous
        self.out = sys.stdout if out is None else out
        self._closed = threading.Event()
        self._serving = False
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._sock.bind((host, port))
            self._sock.listen(LISTEN_BACKLOG)
        except OSError:
            self._sock.close()
            raise

    def address(self) -> tuple[str, int]:
        """Return the (host, port) the server listens on."""
        host, port = self._sock.getsockname()[:2]
        return host, port

    def _emit(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _reply(self, conn: socket.socket, contents: bytes, padded: bool) -> None:
        text = _until_nul(contents)
        payload = contents.ljust(BUFFSIZE, b"\0") if padded else text
        self._emit(f"Send file contents {text.decode(errors='replace')}\n")
        conn.sendall(payload)

    def serve(self) -> Optional[float]:
        """Run the loop; return the seconds taken once the expected requests are done.

        Returns None when close() stops the loop first. Raises OSError when
        a requested file cannot be read or a socket call fails.
        """
        self._serving = True
        selector = selectors.DefaultSelector()
        selector.register(self._sock, selectors.EVENT_READ)
        clients: set[socket.socket] = set()
        pending: list[tuple[socket.socket, Future]] = []
        pool = ThreadPoolExecutor(max_workers=4) if self.asynchronous else None
        requests = 0
        open_requests = 0
        started: Optional[float] = None
        try:
            while not self._closed.is_set():
                for key, _ in selector.select(timeout=_POLL_SECONDS):
                    if key.fileobj is self._sock:
                        conn, _ = self._sock.accept()
                        clients.add(conn)
                        selector.register(conn, selectors.EVENT_READ)
                        if started is None:
                            started = time.perf_counter()
                        open_requests += 1
                        if not self.asynchronous:
                            requests += 1
                        continue
                    conn = key.fileobj
                    path = os.fsdecode(_until_nul(conn.recv(BUFFSIZE)))
                    selector.unregister(conn)
                    if pool is not None:
                        pending.append((conn, pool.submit(_read_file, path)))
                        requests += 1
                    else:
                        self._reply(conn, _read_file(path), padded=False)
                        clients.discard(conn)
                        conn.close()
                        open_requests -= 1

                finished = [item for item in pending if item[1].done()]
                for item in finished:
                    pending.remove(item)
                    conn, future = item
                    self._reply(conn, future.result(), padded=True)
                    clients.discard(conn)
                    conn.close()
                    open_requests -= 1

                if (self.expected_requests is not None
                        and requests == self.expected_requests
                        and open_requests == 0):
                    now = time.perf_counter()
                    elapsed = now - (now if started is None else started)
                    label = "Async" if self.asynchronous else "Sync"
                    self._emit(f"{label} I/O {self.expected_requests} requests, "
                               f"time (seconds): {elapsed:f}\n\n")
                    self._emit("exit")
                    return elapsed
            return None
        finally:
            if pool is not None:
                pool.shutdown(wait=False)
            for conn in clients:
                conn.close()
            selector.close()
            self._sock.close()
            self._serving = False

    def close(self) -> None:
        """Stop the loop and release the listening socket."""
        self._closed.set()
        if not self._serving:
            self._sock.close()


def request_file(path: str, host: str = "127.0.0.1", port: int = PORT,
                 delay: float = 0.0) -> bytes:
    """Ask the server at (host, port) for *path*; return the contents it sends."""
    if delay > 0:
        time.sleep(delay)
    chunks: list[bytes] = []
    received = 0
    with socket.create_connection((host, port)) as conn:
        conn.sendall(os.fsencode(path)[:BUFFSIZE])
        while received < BUFFSIZE:
            chunk = conn.recv(BUFFSIZE - received)
            if not chunk:
                break
            chunks.append(chunk)
            received += len(chunk)
    return _until_nul(b"".join(chunks))


def server_main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    asynchronous = "--async" in args
    rest = [arg for arg in args if arg != "--async"]
    expected = _atoi(rest[0]) if len(rest) == 1 else None
    try:
        server = FileServer(port=PORT, expected_requests=expected,
                            asynchronous=asynchronous)
    except OSError as exc:
        print(f"bind: {exc.strerror or exc}", file=sys.stderr)
        return 1
    try:
        server.serve()
    except OSError as exc:
        print(f"fileserver: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        server.close()
    return 0


def client_main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("Usage: TCPClient sleep_seconds file_path")
        return 1
    delay = _atoi(args[0])
    path = args[1]
    print(f"Request file contents: {path}")
    try:
        contents = request_file(path, delay=delay)
    except OSError as exc:
        print(f"connect: {exc.strerror or exc}", file=sys.stderr)
        return 1
    print(f"From server: {contents.decode(errors='replace')}")
    return 0


if __name__ == "__main__":
    sys.exit(server_main())