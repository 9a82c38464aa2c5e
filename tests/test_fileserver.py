import contextlib
import errno
import io
import socket
import threading

import pytest

from sysprac.fileserver import BUFFSIZE, FileServer, request_file


def _start(server):
    result = {}

    def run():
        try:
            result["value"] = server.serve()
        except BaseException as exc:  # recorded for the test to inspect
            result["error"] = exc

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread, result


def _raw_request(address, path):
    chunks = []
    with socket.create_connection(address) as conn:
        conn.sendall(str(path).encode())
        while True:
            chunk = conn.recv(4096)
            if not chunk:
                break
            chunks.append(chunk)
    return b"".join(chunks)


def _server(**kwargs):
    return FileServer(host="127.0.0.1", port=0, out=io.StringIO(), **kwargs)


@pytest.mark.parametrize("asynchronous", [False, True])
def test_request_returns_file_contents(tmp_path, asynchronous):
    target = tmp_path / "greeting.txt"
    target.write_bytes(b"hello world")
    server = _server(expected_requests=1, asynchronous=asynchronous)
    thread, result = _start(server)
    data = request_file(str(target), *server.address())
    thread.join(5)
    assert data == b"hello world"
    assert not thread.is_alive()
    assert result["value"] >= 0
    output = server.out.getvalue()
    assert "Send file contents hello world\n" in output
    label = "Async" if asynchronous else "Sync"
    assert f"{label} I/O 1 requests, time (seconds): " in output
    assert output.endswith("exit")


def test_sync_sends_only_the_contents(tmp_path):
    target = tmp_path / "short.txt"
    target.write_bytes(b"abc")
    server = _server(expected_requests=1)
    thread, _ = _start(server)
    raw = _raw_request(server.address(), target)
    thread.join(5)
    assert raw == b"abc"


def test_async_pads_to_buffer_size(tmp_path):
    target = tmp_path / "short.txt"
    target.write_bytes(b"abc")
    server = _server(expected_requests=1, asynchronous=True)
    thread, _ = _start(server)
    raw = _raw_request(server.address(), target)
    thread.join(5)
    assert len(raw) == BUFFSIZE
    assert raw == b"abc".ljust(BUFFSIZE, b"\0")


def test_contents_are_limited_to_buffer_size(tmp_path):
    target = tmp_path / "long.txt"
    target.write_bytes(b"a" * 2000)
    server = _server(expected_requests=1)
    thread, _ = _start(server)
    data = request_file(str(target), *server.address())
    thread.join(5)
    assert data == b"a" * BUFFSIZE


@pytest.mark.parametrize("asynchronous", [False, True])
def test_several_requests(tmp_path, asynchronous):
    files = []
    for index in range(3):
        path = tmp_path / f"file{index}.txt"
        path.write_bytes(f"contents {index}".encode())
        files.append(path)
    server = _server(expected_requests=3, asynchronous=asynchronous)
    thread, result = _start(server)
    host, port = server.address()
    answers = [request_file(str(path), host, port) for path in files]
    thread.join(5)
    assert answers == [path.read_bytes() for path in files]
    assert not thread.is_alive()
    assert "3 requests" in server.out.getvalue()


def test_missing_file_raises(tmp_path):
    server = _server(expected_requests=1)
    thread, result = _start(server)
    with contextlib.suppress(OSError):
        request_file(str(tmp_path / "absent.txt"), *server.address())
    thread.join(5)
    assert not thread.is_alive()
    assert "value" not in result
    error = result["error"]
    assert isinstance(error, FileNotFoundError)
    assert error.errno == errno.ENOENT


def test_close_stops_serving():
    server = _server()
    thread, result = _start(server)
    server.close()
    thread.join(5)
    assert not thread.is_alive()
    assert result == {"value": None}