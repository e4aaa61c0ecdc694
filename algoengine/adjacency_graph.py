"""Adjacency-matrix graph with BFS, DFS, Dijkstra and Prim.

The graph keeps a dense ``n x n`` matrix of integer weights where ``0`` means
"no edge" (so weight-0 edges cannot be represented). Undirected graphs keep the
matrix symmetric. The vertex count is fixed at construction; ``remove_vertex``
and ``add_vertex`` return a new, independently owned graph instead of resizing
in place.

Traversals return the canonical bracketed encodings rather than Python lists
because those strings are the contract existing consumers parse:

* ``bfs`` / ``dfs`` -> ``[v1,v2,...]`` in visitation order;
* ``dijkstra`` -> ``[d0,d1,...]`` with ``999999`` for unreachable vertices;
* ``prim_mst`` -> ``[p-c:w,...]`` in finalisation order.

Dijkstra and Prim share the lazy-deletion :class:`MinHeap`: a new entry is
pushed on every relaxation and stale entries are skipped when popped. The
emission order of ``prim_mst`` depends on that behaviour.

NetworkX is imported lazily by :meth:`Graph.to_networkx` so the algorithms
stay usable without it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, TypeAlias

from .config import INFINITY_DISTANCE, NO_PARENT
from .encoding import format_int_list, format_matrix, require_int
from .linked_primitives import MinHeap, Queue, Stack

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxGraph: TypeAlias = nx.Graph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxGraph: TypeAlias = Any

logger = logging.getLogger(__name__)

__all__ = ["Graph"]


class Graph:
    """Weighted graph over vertices ``0 .. n-1`` stored as a dense matrix."""

    __slots__ = ("_n", "_matrix", "_directed")

    def __init__(self, vertices: int, directed: bool = False) -> None:
        vertices = require_int(vertices, "vertices")
        if vertices < 0:
            raise ValueError("vertices must be non-negative")
        self._n = vertices
        self._matrix: List[List[int]] = [[0] * vertices for _ in range(vertices)]
        self._directed = bool(directed)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def add_edge(self, u: int, v: int, w: int = 1) -> None:
        """Set the weight of ``u -> v`` (both ways when undirected).

        Out-of-range endpoints are ignored.
        """

        u, v, w = require_int(u, "u"), require_int(v, "v"), require_int(w, "w")
        if not (self._in_range(u) and self._in_range(v)):
            logger.debug("add_edge(%d, %d) out of range for %d vertices", u, v, self._n)
            return
        self._matrix[u][v] = w
        if not self._directed and u != v:
            self._matrix[v][u] = w

    def remove_edge(self, u: int, v: int) -> None:
        u, v = require_int(u, "u"), require_int(v, "v")
        if not (self._in_range(u) and self._in_range(v)):
            logger.debug("remove_edge(%d, %d) out of range for %d vertices", u, v, self._n)
            return
        self._matrix[u][v] = 0
        if not self._directed:
            self._matrix[v][u] = 0

    def set_directed(self, directed: bool) -> None:
        """Switch directedness; going undirected re-symmetrises the matrix.

        For each unordered pair the ``(i, j)`` weight wins when non-zero,
        otherwise the ``(j, i)`` weight is copied across.
        """

        self._directed = bool(directed)
        if self._directed:
            return
        matrix = self._matrix
        for i in range(self._n):
            for j in range(i + 1, self._n):
                weight = matrix[i][j] or matrix[j][i]
                if weight:
                    matrix[i][j] = matrix[j][i] = weight

    @property
    def is_directed(self) -> bool:
        return self._directed

    def remove_vertex(self, vertex: int) -> "Graph":
        """Return a new graph without *vertex*, compacting higher indices.

        An out-of-range *vertex* returns this graph unchanged.
        """

        vertex = require_int(vertex, "vertex")
        if not self._in_range(vertex):
            logger.debug("remove_vertex(%d) out of range for %d vertices", vertex, self._n)
            return self
        survivors = [index for index in range(self._n) if index != vertex]
        reduced = Graph(self._n - 1, self._directed)
        for new_i, old_i in enumerate(survivors):
            for new_j, old_j in enumerate(survivors):
                weight = self._matrix[old_i][old_j]
                if weight:
                    reduced.add_edge(new_i, new_j, weight)
        return reduced

    def add_vertex(self) -> "Graph":
        """Return a new graph with one extra isolated vertex ``n``."""

        grown = Graph(self._n + 1, self._directed)
        for i, row in enumerate(self._matrix):
            grown._matrix[i][: self._n] = row
        return grown

    def get_matrix(self) -> str:
        return format_matrix(self._matrix)

    def get_vertex_count(self) -> int:
        return self._n

    def weight(self, u: int, v: int) -> int:
        """Return the ``u -> v`` weight, ``0`` when absent or out of range."""

        u, v = require_int(u, "u"), require_int(v, "v")
        if not (self._in_range(u) and self._in_range(v)):
            return 0
        return self._matrix[u][v]

    def clear(self) -> None:
        """Remove every edge while keeping the vertex count."""

        for row in self._matrix:
            row[:] = [0] * self._n

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def bfs(self, start: int) -> str:
        """Breadth-first order from *start*, neighbours in ascending index."""

        start = require_int(start, "start")
        if not self._in_range(start):
            return "[]"

        visited = [False] * self._n
        order: List[int] = []
        queue = Queue()
        visited[start] = True
        queue.enqueue(start)

        while not queue.empty():
            node = queue.front()
            queue.dequeue()
            order.append(node)
            for neighbor, weight in enumerate(self._matrix[node]):
                if weight != 0 and not visited[neighbor]:
                    visited[neighbor] = True
                    queue.enqueue(neighbor)

        return format_int_list(order)

    def dfs(self, start: int) -> str:
        """Depth-first pre-order from *start* using an explicit stack.

        Neighbours are pushed in descending index order so the lowest index is
        explored first. A vertex is marked visited when popped, so it may sit
        on the stack several times but is emitted once.
        """

        start = require_int(start, "start")
        if not self._in_range(start):
            return "[]"

        visited = [False] * self._n
        order: List[int] = []
        stack = Stack()
        stack.push(start)

        while not stack.empty():
            node = stack.top()
            stack.pop()
            if visited[node]:
                continue
            visited[node] = True
            order.append(node)
            row = self._matrix[node]
            for neighbor in range(self._n - 1, -1, -1):
                if row[neighbor] != 0 and not visited[neighbor]:
                    stack.push(neighbor)

        return format_int_list(order)

    def dijkstra(self, start: int) -> str:
        """Single-source shortest distances; unreachable vertices stay ``999999``."""

        start = require_int(start, "start")
        if not self._in_range(start):
            return "[]"

        dist = [INFINITY_DISTANCE] * self._n
        visited = [False] * self._n
        dist[start] = 0
        queue = MinHeap(self._n * self._n)
        queue.push(start, 0)

        while not queue.empty():
            u = queue.pop().vertex
            if visited[u]:
                continue
            visited[u] = True
            for v, weight in enumerate(self._matrix[u]):
                if weight != 0 and not visited[v] and dist[u] + weight < dist[v]:
                    dist[v] = dist[u] + weight
                    queue.push(v, dist[v])

        return format_int_list(dist)

    def prim_mst(self) -> str:
        """Minimum spanning tree edges grown from vertex 0.

        Directed graphs have no MST here and yield ``[]``. Vertices that are
        unreachable from 0 are simply left out.
        """

        if self._directed:
            logger.debug("prim_mst requested on a directed graph")
            return "[]"
        if self._n == 0:
            return "[]"

        key = [INFINITY_DISTANCE] * self._n
        parent = [NO_PARENT] * self._n
        in_mst = [False] * self._n
        key[0] = 0
        queue = MinHeap(self._n * self._n)
        queue.push(0, 0)
        edges: List[str] = []

        while not queue.empty():
            u = queue.pop().vertex
            if in_mst[u]:
                continue
            in_mst[u] = True
            if parent[u] != NO_PARENT:
                edges.append(f"{parent[u]}-{u}:{self._matrix[parent[u]][u]}")
            for v, weight in enumerate(self._matrix[u]):
                if weight != 0 and not in_mst[v] and weight < key[v]:
                    key[v] = weight
                    parent[v] = u
                    queue.push(v, weight)

        return "[" + ",".join(edges) + "]"

    # ------------------------------------------------------------------
    # Interop
    # ------------------------------------------------------------------
    def to_networkx(self) -> NxGraph:
        """Convert to ``networkx.Graph`` (or ``DiGraph`` when directed).

        Edge weights are stored under the ``weight`` attribute.
        """

        try:
            import networkx as nx  # type: ignore[import-not-found]
        except ImportError as exc:  # pragma: no cover - exercised via tests when missing
            raise ModuleNotFoundError(
                "NetworkX is required for graph export. Install it via 'pip install networkx'."
            ) from exc

        nx_graph = nx.DiGraph() if self._directed else nx.Graph()
        nx_graph.add_nodes_from(range(self._n))
        for u, row in enumerate(self._matrix):
            for v, weight in enumerate(row):
                if weight != 0:
                    nx_graph.add_edge(u, v, weight=weight)
        return nx_graph

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self._n
