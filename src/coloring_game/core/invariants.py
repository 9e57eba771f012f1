"""
Consistency checks for colorings and game states.

These recompute the incremental bookkeeping from scratch and compare. They
are meant for the test suite (run after every mutation), not for the search
hot path.
"""

from .bits import iter_bits
from .coloring import ColoringState
from .game_state import GameState


class InvariantViolation(AssertionError):
    """Incremental state no longer matches its definition."""


def check_invariants(coloring: ColoringState) -> None:
    """
    Verify every coloring invariant.

    Checks that each vertex holds at most one in-range color, that attack
    counts lie in [0, degree] and equal the recomputed neighbor counts, and
    that the colored count matches the assignment.

    Raises:
        InvariantViolation: on the first mismatch found
    """
    graph = coloring.graph
    n = graph.num_vertices
    k = coloring.num_colors
    snapshot = coloring.snapshot()

    for u, color in enumerate(snapshot.colors):
        if color is not None and not 0 <= color < k:
            raise InvariantViolation(f"Vertex {u} holds out-of-range color {color}")

    colored = sum(1 for color in snapshot.colors if color is not None)
    if not 0 <= snapshot.num_colored <= n:
        raise InvariantViolation(
            f"Colored count {snapshot.num_colored} out of range [0, {n}]"
        )
    if colored != snapshot.num_colored:
        raise InvariantViolation(
            f"Colored count {snapshot.num_colored} but {colored} vertices colored"
        )

    for u in range(n):
        degree = graph.degree(u)
        expected = [0] * k
        for w in iter_bits(graph.neighbors(u)):
            color = snapshot.colors[w]
            if color is not None:
                expected[color] += 1
        for c, count in enumerate(snapshot.attack[u]):
            if not 0 <= count <= degree:
                raise InvariantViolation(
                    f"attack[{u}][{c}] = {count} out of range [0, {degree}]"
                )
            if count != expected[c]:
                raise InvariantViolation(
                    f"attack[{u}][{c}] = {count}, expected {expected[c]}"
                )


def check_game_state(state: GameState) -> None:
    """Verify the coloring and that the uncolored mask mirrors it."""
    check_invariants(state.coloring)

    expected = 0
    for u, color in enumerate(state.coloring.colors):
        if color is None:
            expected |= 1 << u
    if state.uncolored.mask != expected:
        raise InvariantViolation(
            f"Uncolored mask {state.uncolored.mask:#x}, expected {expected:#x}"
        )
