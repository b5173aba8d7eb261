import socket
import threading

import pytest

from graphserve.algorithms import create_algorithm
from graphserve.graph import Graph
from graphserve.thread_server import (
    ALGORITHMS,
    CREATED,
    FAREWELL,
    GOODBYE,
    PROMPT,
    ThreadServer,
)


def _read_all(sock: socket.socket) -> str:
    chunks = []
    while True:
        data = sock.recv(4096)
        if not data:
            break
        chunks.append(data)
    return b"".join(chunks).decode()


def _exchange(server: ThreadServer, payload: bytes, close_write: bool = False) -> str:
    server_end, client_end = socket.socketpair()
    client_end.settimeout(10)
    worker = threading.Thread(target=server.handle_client, args=(server_end,))
    worker.start()
    try:
        if payload:
            client_end.sendall(payload)
        if close_write:
            client_end.shutdown(socket.SHUT_WR)
        reply = _read_all(client_end)
    finally:
        client_end.close()
        worker.join(10)
    return reply


def _expected_report(vertices: int, edges: int, seed: int) -> str:
    graph = Graph(vertices)
    graph.generate_random_undirected(edges, seed)
    sections = "".join(
        f"\n[{name}] Result:\n{create_algorithm(name).run(graph)}\n" for name in ALGORITHMS
    )
    return PROMPT + CREATED + sections + FAREWELL


@pytest.mark.parametrize("command", [b"exit\n", b"q\n", b"exit \r\n"])
def test_exit_commands_say_goodbye(command):
    server = ThreadServer(0)
    assert _exchange(server, command) == PROMPT + GOODBYE


@pytest.mark.parametrize("request_line", [b"4 3 7\n", b"6 10 42\r\n", b"1 0 5\n"])
def test_valid_request_runs_all_algorithms(request_line):
    vertices, edges, seed = (int(x) for x in request_line.split())
    server = ThreadServer(0)
    assert _exchange(server, request_line) == _expected_report(vertices, edges, seed)


def test_report_lists_algorithms_in_order():
    server = ThreadServer(0)
    reply = _exchange(server, b"5 4 3\n")
    positions = [reply.index(f"[{name}] Result:") for name in ALGORITHMS]
    assert positions == sorted(positions)
    assert reply.endswith(FAREWELL)


@pytest.mark.parametrize("bad", [b"abc 5 10\n", b"-1 5 10\n", b"3 -1 2\n", b"\n"])
def test_invalid_request_closes_silently(bad):
    server = ThreadServer(0)
    assert _exchange(server, bad) == PROMPT


def test_too_many_edges_closes_silently():
    server = ThreadServer(0)
    assert _exchange(server, b"3 5 1\n") == PROMPT


def test_eof_without_request_closes_after_prompt():
    server = ThreadServer(0)
    assert _exchange(server, b"", close_write=True) == PROMPT


def test_start_serves_clients_concurrently_and_stops():
    server = ThreadServer(0)
    runner = threading.Thread(target=server.start)
    runner.start()
    try:
        assert server.ready.wait(5)
        idle = socket.create_connection(("127.0.0.1", server.port), timeout=10)
        active = socket.create_connection(("127.0.0.1", server.port), timeout=10)
        try:
            active.sendall(b"4 3 7\n")
            assert _read_all(active) == _expected_report(4, 3, 7)
            idle.sendall(b"exit\n")
            assert _read_all(idle) == PROMPT + GOODBYE
        finally:
            idle.close()
            active.close()
    finally:
        server.stop()
        runner.join(5)
    assert not runner.is_alive()