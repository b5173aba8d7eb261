"""Eulerian circuit detection and construction for undirected graphs."""

from __future__ import annotations

import logging

from .graph import Graph, GraphError

_log = logging.getLogger(__name__)


def reachable(graph: Graph, start: int) -> set[int]:
    """Return every vertex reachable from ``start``, including ``start``."""
    seen = {start}
    pending = [start]
    while pending:
        v = pending.pop()
        for u in graph.neighbors(v):
            if u not in seen:
                seen.add(u)
                pending.append(u)
    return seen


def is_connected(graph: Graph) -> bool:
    """Return whether all vertices with edges lie in one component."""
    active = [v for v in range(len(graph)) if graph.degree(v) > 0]
    if not active:
        return True
    return set(active) <= reachable(graph, active[0])


def is_eulerian(graph: Graph) -> bool:
    """Return whether the graph has an Eulerian circuit."""
    if not is_connected(graph):
        return False
    return all(graph.degree(v) % 2 == 0 for v in range(len(graph)))


def eulerian_circuit(graph: Graph) -> list[int]:
    """Return an Eulerian circuit as a vertex sequence; the graph is left unchanged."""
    if len(graph) == 0:
        raise GraphError("Graph is empty")
    _log.debug("Graph before computing Eulerian Circuit:\n%s", graph.format_matrix())
    if not is_eulerian(graph):
        raise GraphError("Graph is not Eulerian: no Eulerian circuit exists")

    remaining = graph.copy()
    start = next((v for v in range(len(remaining)) if remaining.degree(v) > 0), 0)
    stack = [start]
    circuit: list[int] = []
    while stack:
        v = stack[-1]
        neighbours = remaining.neighbors(v)
        if neighbours:
            u = neighbours[0]
            stack.append(u)
            remaining.remove_edge(v, u)
        else:
            circuit.append(stack.pop())
    circuit.reverse()
    return circuit