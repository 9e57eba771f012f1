"""
Incrementally maintained partial coloring.

For every (vertex, color) pair the coloring keeps an attack count: how many
colored neighbors of the vertex currently use that color. A color is legal
for a vertex exactly when its attack count is zero, so legality queries are
O(1) and assigning or removing a color costs O(degree).

State layout:
- colors[u]: assigned color of u, or None while u is uncolored
- attack[u][c]: number of neighbors of u colored c
- num_colored: number of vertices with a color
"""

from typing import List, NamedTuple, Optional, Tuple

from .bits import MAX_COLORS, iter_bits
from .graph import BitGraph


class ColoringSnapshot(NamedTuple):
    """Immutable copy of a coloring's full state."""

    colors: Tuple[Optional[int], ...]
    attack: Tuple[Tuple[int, ...], ...]
    num_colored: int


class ColoringState:
    """
    Mutable partial coloring of a BitGraph with a fixed palette.

    Only assign() and unassign() change the state, and they are exact
    inverses of each other.
    """

    __slots__ = ("graph", "num_colors", "_colors", "_attack", "_num_colored")

    def __init__(self, graph: BitGraph, num_colors: int):
        """
        Create an empty coloring.

        Args:
            graph: Graph to color (frozen here, edges can no longer change)
            num_colors: Palette size k, 1 <= k <= 63
        """
        if not 1 <= num_colors <= MAX_COLORS:
            raise ValueError(
                f"Palette size {num_colors} out of range [1, {MAX_COLORS}]"
            )
        n = graph.num_vertices
        self.graph = graph.freeze()
        self.num_colors = num_colors
        self._colors: List[Optional[int]] = [None] * n
        self._attack: List[List[int]] = [[0] * num_colors for _ in range(n)]
        self._num_colored = 0

    @property
    def num_vertices(self) -> int:
        return len(self._colors)

    @property
    def num_colored(self) -> int:
        return self._num_colored

    @property
    def colors(self) -> Tuple[Optional[int], ...]:
        return tuple(self._colors)

    def _check_vertex(self, u: int) -> None:
        if not 0 <= u < len(self._colors):
            raise ValueError(f"Vertex {u} out of range [0, {len(self._colors)})")

    def _check_color(self, c: int) -> None:
        if not 0 <= c < self.num_colors:
            raise ValueError(f"Color {c} out of range [0, {self.num_colors})")

    def assign(self, u: int, c: int) -> None:
        """
        Color vertex u with color c.

        Every neighbor of u gets one more attacker on c.

        Raises:
            ValueError: if u or c is out of range or u is already colored
        """
        self._check_vertex(u)
        self._check_color(c)
        if self._colors[u] is not None:
            raise ValueError(
                f"Vertex {u} already has color {self._colors[u]}, cannot assign {c}"
            )

        self._colors[u] = c
        self._num_colored += 1
        attack = self._attack
        for w in iter_bits(self.graph.neighbors(u)):
            attack[w][c] += 1

    def unassign(self, u: int, c: int) -> None:
        """
        Remove color c from vertex u, undoing assign(u, c).

        Raises:
            ValueError: if u or c is out of range or u is not colored c
        """
        self._check_vertex(u)
        self._check_color(c)
        if self._colors[u] != c:
            raise ValueError(
                f"Vertex {u} has color {self._colors[u]}, cannot unassign {c}"
            )

        self._colors[u] = None
        self._num_colored -= 1
        attack = self._attack
        for w in iter_bits(self.graph.neighbors(u)):
            attack[w][c] -= 1

    def get_color(self, u: int) -> Optional[int]:
        self._check_vertex(u)
        return self._colors[u]

    def is_colored(self, u: int) -> bool:
        self._check_vertex(u)
        return self._colors[u] is not None

    def attack_count(self, u: int, c: int) -> int:
        self._check_vertex(u)
        self._check_color(c)
        return self._attack[u][c]

    def is_allowed(self, u: int, c: int) -> bool:
        """True if no colored neighbor of u uses c."""
        return self.attack_count(u, c) == 0

    def allowed_colors(self, u: int) -> int:
        """Mask of colors that are legal for u."""
        self._check_vertex(u)
        allowed = 0
        for c, count in enumerate(self._attack[u]):
            if count == 0:
                allowed |= 1 << c
        return allowed

    def has_free_color(self, u: int) -> bool:
        self._check_vertex(u)
        return 0 in self._attack[u]

    def is_complete(self) -> bool:
        return self._num_colored == len(self._colors)

    def is_deadend(self) -> bool:
        """True if some uncolored vertex has no legal color left."""
        for u, color in enumerate(self._colors):
            if color is None and 0 not in self._attack[u]:
                return True
        return False

    def neighbor_has_color(self, u: int, c: int) -> bool:
        self._check_vertex(u)
        colors = self._colors
        return any(colors[w] == c for w in iter_bits(self.graph.neighbors(u)))

    def has_conflict(self) -> bool:
        """True if two adjacent colored vertices share a color."""
        for u, color in enumerate(self._colors):
            if color is not None and self.neighbor_has_color(u, color):
                return True
        return False

    def snapshot(self) -> ColoringSnapshot:
        return ColoringSnapshot(
            colors=tuple(self._colors),
            attack=tuple(tuple(row) for row in self._attack),
            num_colored=self._num_colored,
        )

    def __str__(self) -> str:
        lines = []
        for u, color in enumerate(self._colors):
            shown = "UNASSIGNED" if color is None else color
            lines.append(f"c({u}) = {shown}")
        for u, row in enumerate(self._attack):
            lines.append(f"attack[{u}] = " + " ".join(str(count) for count in row))
        return "\n".join(lines)
