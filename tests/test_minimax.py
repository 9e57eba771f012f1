"""Tests for alpha-beta search and optimal play."""

import pytest
from coloring_game.core import (
    BitGraph,
    ColoringState,
    GameState,
    Move,
    Victory,
    check_game_state,
    complete_graph,
    cycle_graph,
    path_graph,
    star_graph,
)
from coloring_game.solver import MinimaxSearcher, minimax, play_optimally


def plain_minimax(state, maximizing, level=0):
    """Unpruned minimax with the same terminal values and tie-breaking."""
    coloring = state.coloring
    conflict = coloring.has_conflict()
    if coloring.is_complete() and not conflict:
        return None, level + 1
    if coloring.is_deadend() or conflict:
        return None, -(level + 1)

    best_move = None
    best_value = float("-inf") if maximizing else float("inf")
    for move in list(state.candidate_moves()):
        state.apply(move)
        _, value = plain_minimax(state, not maximizing, level + 1)
        state.undo(move)
        if (maximizing and value > best_value) or (not maximizing and value < best_value):
            best_move, best_value = move, value
    return best_move, best_value


@pytest.fixture
def small_games(chorded_cycle):
    return [
        (path_graph(4), 2),
        (path_graph(4), 3),
        (cycle_graph(4), 2),
        (cycle_graph(4), 3),
        (complete_graph(3), 2),
        (complete_graph(3), 3),
        (star_graph(5), 2),
        (chorded_cycle, 2),
        (chorded_cycle, 3),
    ]


def test_path_four_colors_alice_wins():
    result = play_optimally(path_graph(4), 4)
    assert result.victory is Victory.ALICE_WINS
    assert len(result.moves) == 4


@pytest.mark.parametrize("n", range(3, 8))
def test_star_two_colors_alice_wins(n):
    result = play_optimally(star_graph(n), 2)
    assert result.alice_wins


def test_four_cycle():
    """Bob wins with two colors, Alice with three."""
    assert play_optimally(cycle_graph(4), 2).victory is Victory.BOB_WINS
    assert play_optimally(cycle_graph(4), 3).victory is Victory.ALICE_WINS


def test_single_vertex():
    state = GameState.initial(BitGraph(1), 1)
    result = minimax(state)
    assert result.move == Move(0, 0)
    assert result.value == 2


def test_edgeless_pair_single_color():
    """Alice colors one vertex, Bob the other; complete at depth 2."""
    state = GameState.initial(BitGraph(2), 1)
    result = minimax(state)
    assert result.move == Move(0, 0)
    assert result.value == 3

    game = play_optimally(BitGraph(2), 1)
    assert game.alice_wins
    assert game.moves == (Move(0, 0), Move(1, 0))


def test_terminal_positions_return_no_move():
    complete = GameState.initial(complete_graph(3), 3)
    for u in range(3):
        complete.apply(Move(u, u))
    result = minimax(complete)
    assert result.move is None
    assert result.value == 1

    stuck = GameState.initial(complete_graph(3), 2)
    stuck.apply(Move(0, 0))
    stuck.apply(Move(1, 1))
    result = minimax(stuck, maximizing=True)
    assert result.move is None
    assert result.value == -1


def test_conflict_is_a_loss_for_alice():
    """A hand-built conflicting coloring scores as Bob's win even when complete."""
    g = BitGraph(2)
    g.add_edge(0, 1)
    coloring = ColoringState(g, 1)
    coloring.assign(0, 0)
    coloring.assign(1, 0)

    state = GameState.initial(g, 1)
    state.coloring = coloring
    state.uncolored.mask = 0
    assert minimax(state).value == -1


def test_search_restores_position(small_games):
    for graph, k in small_games:
        state = GameState.initial(graph, k)
        state.apply(Move(0, 0))
        before = state.coloring.snapshot()
        mask = state.uncolored.mask

        MinimaxSearcher().search(state, maximizing=False)

        assert state.coloring.snapshot() == before
        assert state.uncolored.mask == mask
        check_game_state(state)


def test_pruned_search_matches_plain_minimax(small_games):
    """Alpha-beta with a full window gives the same value and root move."""
    for graph, k in small_games:
        for maximizing in (True, False):
            state = GameState.initial(graph, k)
            expected_move, expected_value = plain_minimax(state, maximizing)

            searcher = MinimaxSearcher()
            result = searcher.search(state, maximizing)

            assert result.value == expected_value, (graph, k, maximizing)
            assert result.move == expected_move, (graph, k, maximizing)


def test_pruning_visits_fewer_nodes(chorded_cycle):
    searcher = MinimaxSearcher()
    searcher.search(GameState.initial(chorded_cycle, 3))

    def count_nodes(state, maximizing):
        count = 1
        coloring = state.coloring
        if coloring.is_complete() or coloring.is_deadend():
            return count
        for move in list(state.candidate_moves()):
            state.apply(move)
            count += count_nodes(state, not maximizing)
            state.undo(move)
        return count

    full = count_nodes(GameState.initial(chorded_cycle, 3), True)
    assert 0 < searcher.nodes < full


def test_played_games_are_legal(small_games):
    """Every committed move was legal when played and the result matches the final coloring."""
    for graph, k in small_games:
        game = play_optimally(graph, k)
        assert game.num_colors == k
        assert game.nodes > 0

        state = GameState.initial(graph, k)
        for move in game.moves:
            assert move.vertex in state.uncolored
            assert state.coloring.is_allowed(move.vertex, move.color)
            state.apply(move)
            check_game_state(state)

        coloring = state.coloring
        if game.alice_wins:
            assert coloring.is_complete()
            assert not coloring.has_conflict()
        else:
            assert coloring.is_deadend()
            assert len(game.moves) < graph.num_vertices


def test_alice_wins_above_max_degree():
    """With more colors than the max degree no vertex can be trapped."""
    for graph in (path_graph(5), cycle_graph(5), star_graph(4), complete_graph(4)):
        assert play_optimally(graph, graph.max_degree + 1).alice_wins


def test_rounds_alternate_players():
    game = play_optimally(path_graph(4), 3)
    rounds = game.rounds()
    assert [player for _, player, _ in rounds] == ["Alice", "Bob", "Alice", "Bob"]
    assert [move for _, _, move in rounds] == list(game.moves)


def test_searcher_node_counter_accumulates():
    searcher = MinimaxSearcher()
    first = play_optimally(path_graph(4), 2, searcher)
    after_first = searcher.nodes
    second = play_optimally(path_graph(4), 2, searcher)

    assert after_first == first.nodes
    assert searcher.nodes == first.nodes + second.nodes
    assert first.moves == second.moves


def test_values_are_integers(small_games):
    """Root values are plain ints, never the infinite starting bounds."""
    for graph, k in small_games:
        for maximizing in (True, False):
            result = MinimaxSearcher().search(GameState.initial(graph, k), maximizing)
            assert type(result.value) is int
            assert abs(result.value) <= graph.num_vertices + 1
