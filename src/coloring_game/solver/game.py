"""
Full-game driver: both players follow the minimax search.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core import BitGraph, GameState, Move, Victory
from .minimax import MinimaxSearcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    """Winner and move sequence of one optimally played game."""

    victory: Victory
    moves: Tuple[Move, ...]
    num_colors: int
    nodes: int = 0

    @property
    def alice_wins(self) -> bool:
        return self.victory is Victory.ALICE_WINS

    def rounds(self) -> List[Tuple[int, str, Move]]:
        """(round, player, move) for every ply, Alice moving on even rounds."""
        return [
            (i, "Alice" if i % 2 == 0 else "Bob", move)
            for i, move in enumerate(self.moves)
        ]


def play_optimally(
    graph: BitGraph, num_colors: int, searcher: Optional[MinimaxSearcher] = None
) -> GameResult:
    """
    Play the coloring game on graph with num_colors colors.

    Each ply runs a fresh search from the current position and commits the
    chosen move. The game stops after n plies, or earlier once the position
    has a conflict or a dead end.

    Args:
        graph: Graph to color
        num_colors: Palette size, 1 <= k <= 63
        searcher: Searcher to use (its node counter accumulates)

    Returns:
        GameResult; Alice wins iff the final coloring is complete and proper
    """
    if searcher is None:
        searcher = MinimaxSearcher()

    state = GameState.initial(graph, num_colors)
    coloring = state.coloring
    start_nodes = searcher.nodes
    maximizing = True
    moves: List[Move] = []

    for ply in range(graph.num_vertices):
        result = searcher.search(state, maximizing)
        if result.move is None:
            raise RuntimeError(
                f"Search returned no move at ply {ply} from a non-terminal position"
            )

        moves.append(result.move)
        state.apply(result.move)
        logger.debug(
            f"Ply {ply}: {'Alice' if maximizing else 'Bob'} colors "
            f"vertex {result.move.vertex} with {result.move.color}"
        )
        maximizing = not maximizing

        if coloring.has_conflict() or coloring.is_deadend():
            break

    if coloring.is_complete() and not coloring.has_conflict():
        victory = Victory.ALICE_WINS
    else:
        victory = Victory.BOB_WINS

    nodes = searcher.nodes - start_nodes
    logger.debug(
        f"k={num_colors}: {victory.player} wins after {len(moves)} plies "
        f"({nodes:,} nodes)"
    )
    return GameResult(victory=victory, moves=tuple(moves), num_colors=num_colors, nodes=nodes)
