"""TCP server that builds random graphs and reports Eulerian circuits."""

from __future__ import annotations

import argparse
import re
import socket
import sys

from .euler import eulerian_circuit, is_eulerian
from .graph import Graph, GraphError

DEFAULT_PORT = 9090
_BACKLOG = 5
_BUFFER_SIZE = 1024
_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

WELCOME_MESSAGE = (
    "Welcome to the Euler Graph Server!\n"
    "----------------------------------\n"
    "Please enter a request in the following format:\n"
    "   <vertices> <edges> <random_seed>\n"
    "Example: 6 10 42\n"
    "- vertices: number of nodes in the graph (must be > 0)\n"
    "- edges: number of edges (>= 0)\n"
    "- random_seed: any integer for reproducibility\n"
    "Type 'exit' or 'q' to quit.\n\n"
)


def _leading_ints(text: str, count: int) -> list[int] | None:
    """Read ``count`` whitespace-separated integers from the start of ``text``."""
    values = []
    pos = 0
    for _ in range(count):
        match = _INT.match(text, pos)
        if match is None:
            return None
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            return None
        values.append(value)
        pos = match.end()
    return values


def parse_request(request: str) -> tuple[int, int, int]:
    """Return ``(vertices, edges, seed)`` from a request line; ValueError if invalid."""
    values = _leading_ints(request, 3)
    if values is None:
        raise ValueError("Invalid input format. Usage: <vertices> <edges> <seed>")
    vertices, edges, seed = values
    if vertices <= 0 or edges < 0:
        raise ValueError("Vertices must be > 0 and edges >= 0")
    return vertices, edges, seed


def handle_request(request: str) -> str:
    """Build the graph a request describes and return the full text response."""
    try:
        vertices, edges, seed = parse_request(request)
        graph = Graph(vertices)
        graph.generate_random_undirected(edges, seed)
        parts = ["Generated Graph:\n", graph.format_adjacency()]
        if is_eulerian(graph):
            circuit = eulerian_circuit(graph)
            parts.append("\nEulerian Circuit Found:\n")
            parts.append("".join(f"{v} " for v in circuit) + "\n")
        else:
            parts.append("\nGraph is not Eulerian.\n")
        return "".join(parts)
    except (ValueError, GraphError, IndexError) as exc:
        return f"Error: {exc}\n"


class EulerServer:
    """Sequential TCP server answering graph requests one client at a time."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self.port = port

    def handle_client(self, conn: socket.socket) -> None:
        """Serve one connected client until it leaves, then close the connection."""
        with conn:
            conn.sendall(WELCOME_MESSAGE.encode())
            while True:
                try:
                    data = conn.recv(_BUFFER_SIZE - 1)
                except OSError:
                    print("Client disconnected unexpectedly (error during read).", file=sys.stderr)
                    break
                if not data:
                    print("Client disconnected gracefully.")
                    break
                text = data.decode("utf-8", errors="replace").split("\0", 1)[0]
                text = text.rstrip(" \n\r\t")
                if text in ("exit", "q"):
                    print("Client requested exit.")
                    conn.sendall(b"Goodbye!\n")
                    break
                conn.sendall(handle_request(text).encode())
        print("Closed connection with client.")

    def serve_forever(self) -> None:
        """Listen on the configured port and serve clients one after another."""
        with socket.create_server(("", self.port), backlog=_BACKLOG) as server:
            self.port = server.getsockname()[1]
            print(f"Server listening on port {self.port}...")
            while True:
                try:
                    conn, _ = server.accept()
                except OSError:
                    print("Error accepting connection.", file=sys.stderr)
                    continue
                self.handle_client(conn)


def main(argv: list[str] | None = None) -> int:
    """Start the Euler graph server."""
    parser = argparse.ArgumentParser(prog="graphserve-euler-server")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        EulerServer(args.port).serve_forever()
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Failed to start server: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())