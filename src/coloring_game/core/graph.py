"""
Undirected graphs on at most 64 vertices, stored as adjacency bitmasks.

Each vertex u owns one int mask: bit v is set iff {u, v} is an edge. The
representation is symmetric and loop-free. A graph is populated through
add_edge() by its builder (a generator or the graph6 decoder), then frozen:
after freeze() the edge set is fixed and the graph becomes hashable. Building
a coloring on a graph freezes it.
"""

from typing import Iterator, List, Tuple

from .bits import MAX_VERTICES, iter_bits, popcount


class BitGraph:
    """
    Simple undirected graph with bitmask adjacency.

    Vertices are 0..num_vertices-1.
    """

    __slots__ = ("_adj", "_num_edges", "_frozen")

    def __init__(self, num_vertices: int):
        """
        Create an edgeless graph.

        Args:
            num_vertices: Vertex count, 1 <= n <= 64
        """
        if not 1 <= num_vertices <= MAX_VERTICES:
            raise ValueError(
                f"Vertex count {num_vertices} out of range [1, {MAX_VERTICES}]"
            )
        self._adj: List[int] = [0] * num_vertices
        self._num_edges = 0
        self._frozen = False

    @property
    def num_vertices(self) -> int:
        return len(self._adj)

    @property
    def num_edges(self) -> int:
        return self._num_edges

    @property
    def adjacency(self) -> Tuple[int, ...]:
        """Adjacency masks, one per vertex."""
        return tuple(self._adj)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "BitGraph":
        """Fix the edge set. Returns self so builders can `return g.freeze()`."""
        self._frozen = True
        return self

    def _check_vertex(self, u: int) -> None:
        if not 0 <= u < len(self._adj):
            raise ValueError(f"Vertex {u} out of range [0, {len(self._adj)})")

    def add_edge(self, u: int, v: int) -> None:
        """
        Add undirected edge {u, v}.

        Raises:
            ValueError: on a frozen graph, a loop, an out-of-range endpoint,
                or an edge that is already present
        """
        if self._frozen:
            raise ValueError(f"Cannot add edge ({u}, {v}) to a frozen graph")
        self._check_vertex(u)
        self._check_vertex(v)
        if u == v:
            raise ValueError(f"Self-loop on vertex {u} not allowed")
        if (self._adj[u] >> v) & 1:
            raise ValueError(f"Edge ({u}, {v}) already present")

        self._adj[u] |= 1 << v
        self._adj[v] |= 1 << u
        self._num_edges += 1

    def has_edge(self, u: int, v: int) -> bool:
        self._check_vertex(u)
        self._check_vertex(v)
        return bool((self._adj[u] >> v) & 1)

    def neighbors(self, u: int) -> int:
        """Neighbor mask of u."""
        self._check_vertex(u)
        return self._adj[u]

    def degree(self, u: int) -> int:
        self._check_vertex(u)
        return popcount(self._adj[u])

    @property
    def max_degree(self) -> int:
        return max(popcount(adj) for adj in self._adj)

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield edges (u, v) with u < v, in increasing order."""
        for u, adj in enumerate(self._adj):
            for v in iter_bits(adj >> (u + 1)):
                yield u, u + 1 + v

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitGraph):
            return NotImplemented
        return self._adj == other._adj

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("Unfrozen BitGraph is not hashable")
        return hash(tuple(self._adj))

    def __repr__(self) -> str:
        return f"BitGraph(n={self.num_vertices}, m={self.num_edges})"

    def __str__(self) -> str:
        """Adjacency listing, one vertex per line."""
        lines = [f"n = {self.num_vertices}, m = {self.num_edges}"]
        for u, adj in enumerate(self._adj):
            neighbors = " ".join(str(v) for v in iter_bits(adj))
            lines.append(f"{u}: {neighbors}")
        return "\n".join(lines)


def complete_graph(n: int) -> BitGraph:
    """Complete graph K_n, 1 <= n <= 64."""
    g = BitGraph(n)
    for i in range(n):
        for j in range(i + 1, n):
            g.add_edge(i, j)
    return g.freeze()


def cycle_graph(n: int) -> BitGraph:
    """Cycle C_n on vertices 0..n-1 in order, 4 <= n <= 64."""
    if not 4 <= n <= MAX_VERTICES:
        raise ValueError(f"Cycle length {n} out of range [4, {MAX_VERTICES}]")
    g = BitGraph(n)
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    g.add_edge(0, n - 1)
    return g.freeze()


def star_graph(n: int) -> BitGraph:
    """Star on n vertices with center 0, 3 <= n <= 64."""
    if not 3 <= n <= MAX_VERTICES:
        raise ValueError(f"Star size {n} out of range [3, {MAX_VERTICES}]")
    g = BitGraph(n)
    for i in range(1, n):
        g.add_edge(0, i)
    return g.freeze()


def path_graph(n: int) -> BitGraph:
    """Path P_n on vertices 0..n-1 in order."""
    g = BitGraph(n)
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    return g.freeze()
