"""
Minimax search with alpha-beta pruning for the coloring game.

Explores (vertex, color) assignments depth-first on one shared mutable
GameState, applying each trial move and undoing it before the next sibling.
Values are from Alice's perspective:
- Complete conflict-free coloring: level + 1 (Alice wins)
- Dead end or conflict: -(level + 1) (Bob wins)

where level is the ply depth below the search root.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..core import GameState, Move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Best move found at the root and its game-theoretic value."""

    move: Optional[Move]
    value: int  # ±(plies to the end of the game + 1)


class MinimaxSearcher:
    """
    Exhaustive alpha-beta searcher.

    Nothing is cached between calls: every search re-explores the remaining
    game from the given position.
    """

    def __init__(self):
        self.nodes = 0  # Positions visited over the searcher's lifetime

    def search(self, state: GameState, maximizing: bool = True) -> SearchResult:
        """
        Find the optimal move for the player to move.

        Args:
            state: Current position (restored before returning)
            maximizing: True if Alice is to move

        Returns:
            SearchResult with the best move (None at a terminal position)
        """
        start_nodes = self.nodes
        result = self._minimax(state, maximizing)
        logger.debug(
            f"Search ({'Alice' if maximizing else 'Bob'} to move): "
            f"best={result.move}, value={result.value}, "
            f"nodes={self.nodes - start_nodes:,}"
        )
        return result

    def _minimax(
        self,
        state: GameState,
        maximizing: bool,
        alpha: float = float("-inf"),
        beta: float = float("inf"),
        level: int = 0,
    ) -> SearchResult:
        self.nodes += 1
        coloring = state.coloring

        conflict = coloring.has_conflict()
        if coloring.is_complete() and not conflict:
            return SearchResult(None, level + 1)  # Alice wins
        if coloring.is_deadend() or conflict:
            return SearchResult(None, -(level + 1))  # Bob wins

        best_move: Optional[Move] = None
        best_value: Optional[int] = None

        for move in state.candidate_moves():
            state.apply(move)
            value = self._minimax(state, not maximizing, alpha, beta, level + 1).value
            state.undo(move)

            if maximizing:
                if best_value is None or value > best_value:
                    best_move, best_value = move, value
                if value >= beta:
                    break  # beta cut-off
                alpha = max(alpha, value)
            else:
                if best_value is None or value < best_value:
                    best_move, best_value = move, value
                if value <= alpha:
                    break  # alpha cut-off
                beta = min(beta, value)

        # Not complete and no dead end: some uncolored vertex has a legal color
        if best_value is None:
            raise RuntimeError("Non-terminal position has no legal move")
        return SearchResult(best_move, best_value)


def minimax(state: GameState, maximizing: bool = True) -> SearchResult:
    """Search `state` once with a fresh searcher."""
    return MinimaxSearcher().search(state, maximizing)
