"""Graph algorithms behind a common interface, with a name-based factory."""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from .graph import Graph

_EMPTY = "Graph is empty.\n"


class GraphAlgorithm(ABC):
    """An algorithm that runs on a graph and reports its result as text."""

    @abstractmethod
    def run(self, graph: Graph) -> str:
        """Run the algorithm on ``graph`` and return a printable report."""


class MSTAlgorithm(GraphAlgorithm):
    """Prim's algorithm from vertex 0, treating every edge as weight 1."""

    def run(self, graph: Graph) -> str:
        n = len(graph)
        if n == 0:
            return _EMPTY
        key: list[float] = [float("inf")] * n
        key[0] = 0
        in_tree = [False] * n
        heap = [(0, 0)]
        total = 0
        while heap:
            _, u = heapq.heappop(heap)
            if in_tree[u]:
                continue
            in_tree[u] = True
            total += int(key[u])
            for v in graph.neighbors(u):
                if not in_tree[v] and key[v] > 1:
                    key[v] = 1
                    heapq.heappush(heap, (1, v))
        return f"Total MST weight (Prim's Algorithm): {total}\n"


class HamiltonAlgorithm(GraphAlgorithm):
    """Backtracking search for a Hamiltonian circuit starting at vertex 0."""

    def run(self, graph: Graph) -> str:
        if len(graph) == 0:
            return _EMPTY
        path = [0]
        if self._extend(graph, path, {0}):
            members = "".join(f"{v} " for v in path)
            return f"Hamiltonian Circuit Found:\n{members}{path[0]}\n"
        return "No Hamiltonian Circuit exists.\n"

    def _extend(self, graph: Graph, path: list[int], visited: set[int]) -> bool:
        if len(path) == len(graph):
            return graph.has_edge(path[-1], path[0])
        for v in graph.neighbors(path[-1]):
            if v == 0 or v in visited:
                continue
            path.append(v)
            visited.add(v)
            if self._extend(graph, path, visited):
                return True
            path.pop()
            visited.discard(v)
        return False


class SCCAlgorithm(GraphAlgorithm):
    """Kosaraju's algorithm for strongly connected components."""

    def run(self, graph: Graph) -> str:
        n = len(graph)
        if n == 0:
            return _EMPTY
        adj = [graph.neighbors(u) for u in range(n)]

        visited = [False] * n
        finish: list[int] = []
        for v in range(n):
            if not visited[v]:
                finish.extend(self._postorder(adj, v, visited))

        reverse = self._transpose(adj)
        visited = [False] * n
        lines = []
        for v in reversed(finish):
            if not visited[v]:
                component = self._preorder(reverse, v, visited)
                members = "".join(f"{u} " for u in component)
                lines.append(f"SCC #{len(lines) + 1}: {members}\n")
        return "".join(lines)

    @staticmethod
    def _transpose(adj: Sequence[Sequence[int]]) -> list[list[int]]:
        reverse: list[list[int]] = [[] for _ in adj]
        for u, targets in enumerate(adj):
            for v in targets:
                reverse[v].append(u)
        return reverse

    @staticmethod
    def _preorder(adj: Sequence[Sequence[int]], start: int, visited: list[bool]) -> list[int]:
        visited[start] = True
        order = [start]
        stack: list[Iterator[int]] = [iter(adj[start])]
        while stack:
            for u in stack[-1]:
                if not visited[u]:
                    visited[u] = True
                    order.append(u)
                    stack.append(iter(adj[u]))
                    break
            else:
                stack.pop()
        return order

    @staticmethod
    def _postorder(adj: Sequence[Sequence[int]], start: int, visited: list[bool]) -> list[int]:
        visited[start] = True
        order: list[int] = []
        stack: list[tuple[int, Iterator[int]]] = [(start, iter(adj[start]))]
        while stack:
            v, targets = stack[-1]
            for u in targets:
                if not visited[u]:
                    visited[u] = True
                    stack.append((u, iter(adj[u])))
                    break
            else:
                stack.pop()
                order.append(v)
        return order


class MaxCliqueAlgorithm(GraphAlgorithm):
    """Exhaustive backtracking search for a largest clique."""

    def run(self, graph: Graph) -> str:
        n = len(graph)
        best: list[int] = []

        def grow(current: list[int], start: int) -> None:
            nonlocal best
            if len(current) > len(best):
                best = list(current)
            for i in range(start, n):
                if all(graph.has_edge(i, c) for c in current):
                    current.append(i)
                    grow(current, i + 1)
                    current.pop()

        grow([], 0)
        members = "".join(f"{v} " for v in best)
        return f"Maximum Clique Size: {len(best)}\nClique Members: {members}\n"


_REGISTRY: dict[str, type[GraphAlgorithm]] = {
    "mst": MSTAlgorithm,
    "hamilton": HamiltonAlgorithm,
    "scc": SCCAlgorithm,
    "maxclique": MaxCliqueAlgorithm,
    "clique": MaxCliqueAlgorithm,
}


def create_algorithm(name: str) -> GraphAlgorithm:
    """Return a new algorithm for ``name`` (case-insensitive); ValueError if unknown."""
    try:
        return _REGISTRY[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown algorithm: {name}") from None