"""Simple undirected graph without self-loops or parallel edges."""

from __future__ import annotations

from .rng import MT19937


class GraphError(Exception):
    """Raised when an operation conflicts with the current edges of a graph."""


class Graph:
    """Undirected simple graph on the vertices ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("Graph size must be positive")
        self._adjacent: list[set[int]] = [set() for _ in range(size)]

    def __len__(self) -> int:
        return len(self._adjacent)

    def _in_range(self, v: int) -> bool:
        return 0 <= v < len(self._adjacent)

    def _check_vertex(self, v: int) -> None:
        if not self._in_range(v):
            raise IndexError("Vertex index out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``."""
        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            raise ValueError("Self-loops are not allowed")
        if self.has_edge(u, v):
            raise GraphError("Edge already exists")
        self._adjacent[u].add(v)
        self._adjacent[v].add(u)

    def remove_edge(self, u: int, v: int) -> None:
        """Disconnect ``u`` and ``v``."""
        self._check_vertex(u)
        self._check_vertex(v)
        if not self.has_edge(u, v):
            raise GraphError("Edge does not exist")
        self._adjacent[u].discard(v)
        self._adjacent[v].discard(u)

    def has_edge(self, u: int, v: int) -> bool:
        """Return whether ``u`` and ``v`` are connected; False for unknown vertices."""
        if not (self._in_range(u) and self._in_range(v)):
            return False
        return v in self._adjacent[u]

    def degree(self, v: int) -> int:
        """Return the number of edges at ``v``."""
        self._check_vertex(v)
        return len(self._adjacent[v])

    def neighbors(self, v: int) -> list[int]:
        """Return the neighbours of ``v`` in ascending order."""
        self._check_vertex(v)
        return sorted(self._adjacent[v])

    def adjacency_matrix(self) -> list[list[int]]:
        """Return a fresh 0/1 adjacency matrix."""
        n = len(self._adjacent)
        return [[1 if j in row else 0 for j in range(n)] for row in self._adjacent]

    def copy(self) -> Graph:
        """Return an independent copy of this graph."""
        clone = Graph(len(self))
        clone._adjacent = [set(row) for row in self._adjacent]
        return clone

    def generate_random_undirected(self, num_edges: int, seed: int) -> None:
        """Add ``num_edges`` distinct random edges chosen reproducibly from ``seed``."""
        size = len(self)
        if num_edges > size * (size - 1) // 2:
            raise GraphError("Too many edges requested for the graph size.")
        rng = MT19937(seed)
        used: set[tuple[int, int]] = set()
        while len(used) < num_edges:
            u = rng.uniform_int(0, size - 1)
            v = rng.uniform_int(0, size - 1)
            if u == v:
                continue
            edge = (min(u, v), max(u, v))
            if edge not in used:
                self.add_edge(u, v)
                used.add(edge)

    def format_matrix(self) -> str:
        """Render the adjacency matrix as plain rows."""
        rows = ("".join(f"{value} " for value in row) + "\n" for row in self.adjacency_matrix())
        return "Adjacency Matrix:\n" + "".join(rows)

    def format_adjacency(self) -> str:
        """Render the adjacency matrix with row and column labels."""
        size = len(self)
        header = "".join(f"{i} " for i in range(size))
        lines = [f"Adjacency Matrix ({size} vertices):\n   {header}\n"]
        for i, row in enumerate(self.adjacency_matrix()):
            lines.append(f"{i}: " + "".join(f"{value} " for value in row) + "\n")
        return "".join(lines)