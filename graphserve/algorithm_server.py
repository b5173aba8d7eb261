"""TCP server that builds a random graph and runs a chosen algorithm on it."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from collections.abc import Callable
from typing import BinaryIO

from .algorithms import GraphAlgorithm, create_algorithm
from .euler_server import parse_request
from .graph import Graph, GraphError

DEFAULT_PORT = 9091
_BACKLOG = 3
_ACCEPT_POLL = 0.5

HEADER = "Welcome to the Algorithm Server!\n===============================\n"
GRAPH_PROMPT = (
    "Welcome to the Algorithm Server!\n"
    "----------------------------------\n"
    "Please enter a request in the following format:\n"
    "   <vertices> <edges> <random_seed>\n"
    "Example: 6 10 42\n"
    "- vertices: number of nodes in the graph (must be > 0)\n"
    "- edges: number of edges (>= 0)\n"
    "- random_seed: any integer for reproducibility\n"
    "Type 'exit' or 'q' to quit.\n\n> "
)
ALGORITHM_PROMPT = (
    "\nNow enter the name of the algorithm you want to run "
    "(options: mst, hamilton, scc, maxclique):\n> "
)
NEXT_PROMPT = "\nYou may enter a new graph and algorithm now, or type 'exit' to quit.\n"
GOODBYE = "Goodbye! You have disconnected from the server.\n"
_USAGE = "Invalid input format. Usage: <vertices> <edges> <random_seed>"


class _SessionEnded(Exception):
    """The client left, asked to leave, or asked the server to stop."""


def parse_graph_request(line: str) -> Graph:
    """Build the random graph described by ``<vertices> <edges> <seed>``.

    Raises ValueError for a malformed line and GraphError when the edge count
    cannot fit in a simple graph of that size.
    """
    try:
        vertices, edges, seed = parse_request(line)
    except ValueError:
        raise ValueError(_USAGE) from None
    graph = Graph(vertices)
    graph.generate_random_undirected(edges, seed)
    return graph


class AlgorithmServer:
    """Sequential server: each client sends graphs and picks algorithms to run."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self.port = port
        self._stop = threading.Event()

    def stop(self) -> None:
        """Ask the accept loop to finish."""
        self._stop.set()

    def handle_client(self, conn: socket.socket) -> None:
        """Run the request dialogue with one client, then close the connection."""
        with conn, conn.makefile("rb") as reader:

            def send(message: str) -> None:
                conn.sendall(message.encode())

            try:
                send(HEADER)
                while not self._stop.is_set():
                    self._serve_round(send, reader)
            except (_SessionEnded, OSError):
                pass
            finally:
                try:
                    conn.shutdown(socket.SHUT_RDWR)
                except OSError:
                    pass
        print("[Server] Client disconnected.")

    def _serve_round(self, send: Callable[[str], None], reader: BinaryIO) -> None:
        send(GRAPH_PROMPT)
        line = self._receive(send, reader)
        try:
            graph = parse_graph_request(line)
        except (ValueError, GraphError) as exc:
            send(f"Error: {exc}\n")
            return
        send("Graph created successfully!\n")

        strategy: GraphAlgorithm
        while True:
            send(ALGORITHM_PROMPT)
            name = self._receive(send, reader)
            try:
                strategy = create_algorithm(name)
                break
            except ValueError:
                send(f"Error: Unknown algorithm: {name}\n")

        send(f"\nResult:\n{strategy.run(graph)}\n")
        send(NEXT_PROMPT)

    def _receive(self, send: Callable[[str], None], reader: BinaryIO) -> str:
        raw = reader.readline()
        if not raw:
            raise _SessionEnded
        line = raw.decode("utf-8", errors="replace")
        if line.endswith("\n"):
            line = line[:-1]
        line = line.rstrip(" \r\t")
        if line == "exit":
            send(GOODBYE)
            raise _SessionEnded
        if line == "q":
            self.stop()
            print("[Server] Server shutdown requested by client.")
            raise _SessionEnded
        return line

    def start(self) -> None:
        """Listen on the configured port and serve clients until stopped."""
        try:
            server = socket.create_server(("", self.port), backlog=_BACKLOG)
        except OSError as exc:
            print(f"bind failed: {exc}", file=sys.stderr)
            return
        with server:
            self.port = server.getsockname()[1]
            server.settimeout(_ACCEPT_POLL)
            print(f"Algorithm Server listening on port {self.port}...")
            try:
                while not self._stop.is_set():
                    try:
                        conn, _ = server.accept()
                    except TimeoutError:
                        continue
                    except OSError as exc:
                        if self._stop.is_set():
                            break
                        print(f"accept failed: {exc}", file=sys.stderr)
                        continue
                    conn.settimeout(None)
                    self.handle_client(conn)
            except KeyboardInterrupt:
                self.stop()
        print("\nServer shut down gracefully.")


def main(argv: list[str] | None = None) -> int:
    """Start the algorithm server."""
    parser = argparse.ArgumentParser(prog="graphserve-algorithm-server")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    AlgorithmServer(args.port).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())