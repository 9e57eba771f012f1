"""Tests for the SQLite result cache."""

import pytest
from coloring_game.storage import GraphResult, SQLiteBackend


def make_result(graph6, n, k, m=0):
    return GraphResult(
        graph6=graph6,
        num_vertices=n,
        num_edges=m,
        game_chromatic_number=k,
        first_vertex=0,
        first_color=0,
        nodes=10,
    )


@pytest.fixture
def storage():
    backend = SQLiteBackend(":memory:")
    yield backend
    backend.close()


def test_insert_and_get(storage):
    result = make_result("Bw", 3, 3, 3)

    assert storage.insert(result)
    assert storage.exists("Bw")
    assert storage.get("Bw") == result
    assert storage.get("Ch") is None
    assert not storage.exists("Ch")


def test_duplicate_insert_is_ignored(storage):
    assert storage.insert(make_result("Bw", 3, 3))
    assert not storage.insert(make_result("Bw", 3, 99))
    assert storage.get("Bw").game_chromatic_number == 3


def test_insert_batch(storage):
    storage.insert(make_result("Bw", 3, 3))
    storage.insert_batch(
        [make_result("Bw", 3, 7), make_result("Ch", 4, 3), make_result("Cs", 4, 2)]
    )
    storage.flush()

    assert storage.count_results() == 3
    assert storage.count_results(num_vertices=4) == 2
    assert storage.get("Bw").game_chromatic_number == 3
    assert storage.insert_batch([]) == 0


def test_iter_results_ordered(storage):
    for result in (make_result("Cs", 4, 2), make_result("Bw", 3, 3), make_result("Ch", 4, 3)):
        storage.insert(result)

    assert [r.graph6 for r in storage.iter_results()] == ["Bw", "Ch", "Cs"]
    assert [r.graph6 for r in storage.iter_results(num_vertices=4)] == ["Ch", "Cs"]


def test_max_game_chromatic_number(storage):
    assert storage.get_max_game_chromatic_number() == -1
    storage.insert(make_result("Cs", 4, 2))
    storage.insert(make_result("C~", 4, 4))
    assert storage.get_max_game_chromatic_number() == 4


def test_missing_opening_move_round_trips(storage):
    result = GraphResult("@", 1, 0, 1)
    storage.insert(result)
    assert storage.get("@") == result


def test_persists_across_connections(tmp_path):
    db_path = str(tmp_path / "results.db")

    with SQLiteBackend(db_path) as backend:
        backend.insert(make_result("Bw", 3, 3))

    with SQLiteBackend(db_path, fast_mode=True) as backend:
        assert backend.get("Bw").game_chromatic_number == 3
