"""
Game position representation for the vertex coloring game.

A position consists of:
- The partial coloring (ColoringState, the ground truth)
- A bitmask of still-uncolored vertices (UncoloredSet, a cache kept in
  lockstep with the coloring)

Whose turn it is travels alongside the position as the search's
`maximizing` flag: Alice (maximizer) always moves first.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .bits import all_ones, iter_bits, popcount
from .coloring import ColoringState
from .graph import BitGraph


@dataclass(frozen=True)
class Move:
    """One ply: give `vertex` the color `color`."""

    vertex: int
    color: int

    def __str__(self) -> str:
        return f"v = {self.vertex}, c = {self.color}"


class Victory(Enum):
    """Outcome of a finished game."""

    ALICE_WINS = 0
    BOB_WINS = 1

    @property
    def player(self) -> str:
        return "Alice" if self is Victory.ALICE_WINS else "Bob"


class UncoloredSet:
    """
    Bitmask of uncolored vertices.

    No validation is done here: the owner calls remove() once per assign and
    add() once per matching unassign.
    """

    __slots__ = ("mask",)

    def __init__(self, num_vertices: int):
        self.mask = all_ones(num_vertices)

    def remove(self, u: int) -> None:
        self.mask &= ~(1 << u)

    def add(self, u: int) -> None:
        self.mask |= 1 << u

    def __contains__(self, u: int) -> bool:
        return bool((self.mask >> u) & 1)

    def __iter__(self) -> Iterator[int]:
        return iter_bits(self.mask)

    def __len__(self) -> int:
        return popcount(self.mask)


class GameState:
    """
    Mutable game position shared by the search and the game driver.

    apply() and undo() keep the coloring and the uncolored mask in step.
    """

    __slots__ = ("coloring", "uncolored")

    def __init__(self, coloring: ColoringState, uncolored: UncoloredSet):
        self.coloring = coloring
        self.uncolored = uncolored

    @classmethod
    def initial(cls, graph: BitGraph, num_colors: int) -> "GameState":
        """Fresh position with every vertex uncolored."""
        return cls(ColoringState(graph, num_colors), UncoloredSet(graph.num_vertices))

    @property
    def graph(self) -> BitGraph:
        return self.coloring.graph

    @property
    def num_colors(self) -> int:
        return self.coloring.num_colors

    def apply(self, move: Move) -> None:
        self.coloring.assign(move.vertex, move.color)
        self.uncolored.remove(move.vertex)

    def undo(self, move: Move) -> None:
        self.coloring.unassign(move.vertex, move.color)
        self.uncolored.add(move.vertex)

    def candidate_moves(self) -> Iterator[Move]:
        """
        Yield legal moves, lowest vertex first, then lowest color.

        Allowed colors of a vertex are read when the generator reaches it, so
        the caller must have undone any trial move before asking for the next
        candidate.
        """
        coloring = self.coloring
        for u in iter_bits(self.uncolored.mask):
            for c in iter_bits(coloring.allowed_colors(u)):
                yield Move(u, c)

    def __str__(self) -> str:
        uncolored = ", ".join(str(u) for u in self.uncolored)
        return f"{self.coloring}\nuncolored = {{{uncolored}}}"
