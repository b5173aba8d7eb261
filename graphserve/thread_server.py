"""Multithreaded TCP server that runs every graph algorithm on one random graph."""

from __future__ import annotations

import socket
import sys
import threading

from .algorithms import create_algorithm
from .euler_server import parse_request
from .graph import Graph, GraphError

DEFAULT_PORT = 9092
_BACKLOG = 10
_ACCEPT_POLL = 0.5

ALGORITHMS = ("mst", "hamilton", "scc", "maxclique")

PROMPT = (
    "Welcome to the Multithreaded Algorithm Server!\n"
    "----------------------------------------------\n"
    "Please enter a request in the following format:\n"
    "   <vertices> <edges> <random_seed>\n"
    "Example: 6 10 42\n"
    "- vertices: number of nodes (> 0)\n"
    "- edges: number of edges (>= 0)\n"
    "- random_seed: integer for reproducibility\n"
    "Type 'exit' or 'q' to quit.\n\n> "
)
CREATED = "Graph created successfully! Running algorithms...\n"
GOODBYE = "Goodbye! Disconnecting...\n"
FAREWELL = "\nThank you! Connection will now close.\n"


class _SessionEnded(Exception):
    """The client left or sent an unusable request."""


class ThreadServer:
    """Server that serves each client on its own thread."""

    def __init__(self, port: int = DEFAULT_PORT) -> None:
        self.port = port
        self.ready = threading.Event()
        self._stop = threading.Event()

    def stop(self) -> None:
        """Ask the accept loop to finish."""
        self._stop.set()

    def handle_client(self, conn: socket.socket) -> None:
        """Read one graph request, run all algorithms, report, then close."""
        with conn, conn.makefile("rb") as reader:

            def send(message: str) -> None:
                conn.sendall(message.encode())

            try:
                graph = self._receive_graph(send, reader)
                for name in ALGORITHMS:
                    try:
                        result = create_algorithm(name).run(graph)
                    except (ValueError, GraphError, IndexError) as exc:
                        send(f"Error running {name}: {exc}\n")
                    else:
                        send(f"\n[{name}] Result:\n{result}\n")
                send(FAREWELL)
            except (_SessionEnded, OSError):
                pass
            finally:
                try:
                    conn.shutdown(socket.SHUT_RDWR)
                except OSError:
                    pass

    def _receive_graph(self, send, reader) -> Graph:
        send(PROMPT)
        raw = reader.readline()
        line = raw.decode("utf-8", errors="replace")
        if line.endswith("\n"):
            line = line[:-1]
        line = line.rstrip(" \r\t")
        if line in ("exit", "q"):
            send(GOODBYE)
            print("[Thread] Client disconnected or requested shutdown.")
            raise _SessionEnded
        try:
            vertices, edges, seed = parse_request(line)
            graph = Graph(vertices)
            graph.generate_random_undirected(edges, seed)
        except (ValueError, GraphError) as exc:
            raise _SessionEnded from exc
        send(CREATED)
        return graph

    def start(self) -> None:
        """Listen on the configured port and serve clients concurrently until stopped."""
        try:
            server = socket.create_server(("", self.port), backlog=_BACKLOG)
        except OSError as exc:
            print(f"bind failed: {exc}", file=sys.stderr)
            return
        with server:
            self.port = server.getsockname()[1]
            server.settimeout(_ACCEPT_POLL)
            print(f"Multithreaded Algorithm Server listening on port {self.port}...")
            self.ready.set()
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
                    threading.Thread(target=self.handle_client, args=(conn,), daemon=True).start()
            except KeyboardInterrupt:
                self.stop()
        print("\nServer shut down gracefully.")