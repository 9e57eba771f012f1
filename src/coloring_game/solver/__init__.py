"""Game-tree search and game chromatic number solvers."""

from .minimax import MinimaxSearcher, SearchResult, minimax
from .game import GameResult, play_optimally
from .chromatic import GameChromaticSolver, game_chromatic_number

__all__ = [
    "MinimaxSearcher",
    "SearchResult",
    "minimax",
    "GameResult",
    "play_optimally",
    "GameChromaticSolver",
    "game_chromatic_number",
]
