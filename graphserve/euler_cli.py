"""Command line tool: build a random graph and look for an Eulerian circuit."""

from __future__ import annotations

import getopt
import re
import sys

from .euler import eulerian_circuit, is_eulerian
from .graph import Graph, GraphError
from .rng import GlibcRandom

_PROG = "graphserve-euler"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer from ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _usage() -> str:
    return f"Usage: {_PROG} -v <number_of_vertices> -e <number_of_edges> -s <random_seed>"


def build_graph(vertices: int, edges: int, seed: int) -> Graph:
    """Return a graph with ``edges`` distinct random edges drawn from a ``rand()`` stream."""
    graph = Graph(vertices)
    if edges > vertices * (vertices - 1) // 2:
        raise ValueError("Too many edges for a simple undirected graph.")
    rng = GlibcRandom(seed)
    added = 0
    while added < edges:
        u = rng.rand() % vertices
        v = rng.rand() % vertices
        if u != v and not graph.has_edge(u, v):
            graph.add_edge(u, v)
            added += 1
    return graph


def main(argv: list[str] | None = None) -> int:
    """Run the tool with ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else argv
    vertices = -1
    edges = -1
    seed = 0
    try:
        options, _ = getopt.getopt(args, "v:e:s:")
    except getopt.GetoptError:
        print(_usage(), file=sys.stderr)
        return 1
    for flag, value in options:
        if flag == "-v":
            vertices = _atoi(value)
        elif flag == "-e":
            edges = _atoi(value)
        else:
            seed = _atoi(value)

    if vertices <= 0 or edges < 0:
        print(_usage(), file=sys.stderr)
        return 1
    if edges > vertices * (vertices - 1) // 2:
        print("Too many edges for a simple undirected graph.", file=sys.stderr)
        return 1

    graph = build_graph(vertices, edges, seed)
    print("\nGenerated Graph:")
    print(graph.format_matrix(), end="")

    try:
        if is_eulerian(graph):
            circuit = eulerian_circuit(graph)
            print("\nEulerian circuit found:")
            print("".join(f"{node} " for node in circuit))
        else:
            print("\nGraph is not Eulerian.")
    except GraphError as exc:
        print(f"\nError: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())