"""Tests for game positions and the uncolored-vertex mask."""

import pytest
from coloring_game.core import (
    BitGraph,
    GameState,
    InvariantViolation,
    Move,
    UncoloredSet,
    Victory,
    check_game_state,
    complete_graph,
    path_graph,
    star_graph,
)


def test_uncolored_set():
    """remove/add flip single bits and iteration is ordered."""
    s = UncoloredSet(5)
    assert s.mask == 0b11111
    assert len(s) == 5

    s.remove(3)
    s.remove(0)
    assert list(s) == [1, 2, 4]
    assert 3 not in s
    assert 4 in s

    s.add(3)
    assert list(s) == [1, 2, 3, 4]


def test_uncolored_set_full_width():
    s = UncoloredSet(64)
    assert len(s) == 64
    s.remove(63)
    assert 63 not in s


def test_initial_state():
    state = GameState.initial(star_graph(4), 2)

    assert state.num_colors == 2
    assert state.graph == star_graph(4)
    assert list(state.uncolored) == [0, 1, 2, 3]
    assert state.coloring.num_colored == 0
    check_game_state(state)


def test_apply_and_undo_keep_mask_in_step():
    state = GameState.initial(path_graph(4), 3)
    before = state.coloring.snapshot()

    state.apply(Move(1, 2))
    check_game_state(state)
    assert 1 not in state.uncolored
    assert state.coloring.get_color(1) == 2

    state.undo(Move(1, 2))
    check_game_state(state)
    assert state.uncolored.mask == 0b1111
    assert state.coloring.snapshot() == before


def test_candidate_move_order():
    """Lowest vertex first, then lowest allowed color."""
    state = GameState.initial(path_graph(3), 2)
    state.apply(Move(0, 0))

    moves = list(state.candidate_moves())
    assert moves == [Move(1, 1), Move(2, 0), Move(2, 1)]


def test_candidate_moves_empty_at_deadend():
    state = GameState.initial(complete_graph(3), 2)
    state.apply(Move(0, 0))
    state.apply(Move(1, 1))

    assert list(state.candidate_moves()) == []


def test_mask_mismatch_detected():
    state = GameState.initial(path_graph(3), 2)
    state.uncolored.remove(2)  # No matching assign

    with pytest.raises(InvariantViolation):
        check_game_state(state)


def test_move_and_victory():
    move = Move(3, 1)
    assert str(move) == "v = 3, c = 1"
    assert move == Move(3, 1)

    assert Victory.ALICE_WINS.player == "Alice"
    assert Victory.BOB_WINS.player == "Bob"


def test_graph_frozen_once_game_starts():
    """Edges cannot be added under a live coloring."""
    g = BitGraph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    state = GameState.initial(g, 2)
    state.apply(Move(0, 0))

    assert g.frozen
    with pytest.raises(ValueError):
        g.add_edge(0, 2)

    check_game_state(state)
    assert state.coloring.is_allowed(2, 0)
    assert g.num_edges == 2
