"""Undirected graphs as adjacency matrices and the smallest disconnecting cut."""

from __future__ import annotations

import itertools
import subprocess
from pathlib import Path
from typing import Optional, Union


class InvalidVertexPairError(ValueError):
    """Raised when an edge would join a vertex to itself."""

    def __init__(self, message: str = "Путь в себя невозможен!") -> None:
        super().__init__(message)


class AdjacencyMatrix:
    """Symmetric 0/1 adjacency matrix of an undirected graph."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.matrix: list[list[int]] = [[0] * size for _ in range(size)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, first: int, second: int) -> None:
        """Connect two distinct vertices (numbered from 0)."""
        self._check(first)
        self._check(second)
        if first == second:
            raise InvalidVertexPairError()
        self.matrix[first][second] = 1
        self.matrix[second][first] = 1

    def remove_edge(self, first: int, second: int) -> None:
        """Disconnect two vertices."""
        self._check(first)
        self._check(second)
        self.matrix[first][second] = 0
        self.matrix[second][first] = 0

    def copy(self) -> "AdjacencyMatrix":
        """Independent copy with every connection stored as 1."""
        duplicate = AdjacencyMatrix(self.size)
        duplicate.matrix = [[1 if cell else 0 for cell in row] for row in self.matrix]
        return duplicate

    def edges(self) -> list[tuple[int, int]]:
        """Each edge once, in row-major order of its first appearance."""
        remaining = [row[:] for row in self.matrix]
        found: list[tuple[int, int]] = []
        for i, row in enumerate(remaining):
            for j in range(self.size):
                if row[j]:
                    found.append((i, j))
                    row[j] = 0
                    remaining[j][i] = 0
        return found

    def reachable_from(self, vertex: int) -> set[int]:
        """Vertices reachable from ``vertex``, the vertex itself included."""
        self._check(vertex)
        visited = {vertex}
        pending = [vertex]
        while pending:
            current = pending.pop()
            for neighbour, linked in enumerate(self.matrix[current]):
                if linked and neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return visited

    def is_connected(self) -> bool:
        if self.size == 0:
            return True
        return len(self.reachable_from(0)) == self.size

    def format(self) -> str:
        """Matrix rows as text, each cell followed by a space."""
        return "".join("".join(f"{cell} " for cell in row) + "\n" for row in self.matrix)


def min_disconnecting_cut(matrix: AdjacencyMatrix) -> Optional[AdjacencyMatrix]:
    """Find the graph left after removing fewest edges so it falls apart.

    Edge sets are tried by increasing size in lexicographic order.  Each
    candidate is examined one step after it is built, so the last candidate of
    every size is never examined, and a graph that is already disconnected is
    returned unchanged.  Returns None when no examined candidate works.
    """
    edges = matrix.edges()
    for count in range(1, len(edges) + 1):
        candidate = matrix.copy()
        for chosen in itertools.combinations(edges, count):
            if not candidate.is_connected():
                return candidate
            candidate = matrix.copy()
            for first, second in chosen:
                candidate.remove_edge(first, second)
    return None


def to_dot(matrix: AdjacencyMatrix, result: AdjacencyMatrix) -> str:
    """Graphviz text of ``matrix`` with edges missing from ``result`` in red."""
    lines = ["graph OurGraph {"]
    for i in range(matrix.size):
        for j in range(i + 1, matrix.size):
            if not matrix.matrix[i][j]:
                continue
            if result.matrix[i][j]:
                lines.append(f"{i + 1} -- {j + 1};")
            else:
                lines.append(f"{i + 1} -- {j + 1}[color=red,penwidth=3.0];")
        lines.append(f"{i + 1};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def render_dot(
    dot_text: str,
    source_path: Union[str, Path] = "graph.txt",
    image_path: Union[str, Path] = "graph.png",
    viewer: Optional[str] = "gwenview",
) -> bool:
    """Write the graph description, render it to PNG and open a viewer.

    Returns True when the renderer ran and reported success.
    """
    source = Path(source_path)
    source.write_text(dot_text, encoding="utf-8")
    try:
        done = subprocess.run(
            ["dot", "-Tpng", str(source), "-o", str(image_path)], check=False
        )
        rendered = done.returncode == 0
    except FileNotFoundError:
        rendered = False
    if viewer:
        try:
            subprocess.run([viewer, str(image_path)], check=False)
        except FileNotFoundError:
            pass
    return rendered