"""Core graph, coloring and game position representation."""

from .bits import (
    MAX_COLORS,
    MAX_VERTICES,
    all_ones,
    iter_bits,
    lowest_bit,
    next_combination,
    popcount,
)
from .graph import BitGraph, complete_graph, cycle_graph, path_graph, star_graph
from .cliques import has_clique, has_k4, has_triangle, starting_palette_size
from .coloring import ColoringSnapshot, ColoringState
from .game_state import GameState, Move, UncoloredSet, Victory
from .invariants import InvariantViolation, check_game_state, check_invariants

__all__ = [
    "MAX_COLORS",
    "MAX_VERTICES",
    "all_ones",
    "iter_bits",
    "lowest_bit",
    "next_combination",
    "popcount",
    "BitGraph",
    "complete_graph",
    "cycle_graph",
    "path_graph",
    "star_graph",
    "has_clique",
    "has_k4",
    "has_triangle",
    "starting_palette_size",
    "ColoringSnapshot",
    "ColoringState",
    "GameState",
    "Move",
    "UncoloredSet",
    "Victory",
    "InvariantViolation",
    "check_game_state",
    "check_invariants",
]
