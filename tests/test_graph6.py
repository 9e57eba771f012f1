"""Tests for graph6, digraph6 and sparse6 decoding."""

import pytest
from coloring_game.core import BitGraph, complete_graph, cycle_graph, path_graph, star_graph
from coloring_game.formats import (
    GraphFormatError,
    count_graph_lines,
    parse_graph,
    read_graph_file,
    to_graph6,
)


@pytest.mark.parametrize(
    "text,edges",
    [
        ("@", []),
        ("A_", [(0, 1)]),
        ("Bw", [(0, 1), (0, 2), (1, 2)]),
        ("Ch", [(0, 1), (1, 2), (2, 3)]),
        ("Cl", [(0, 1), (0, 3), (1, 2), (2, 3)]),
        ("Cs", [(0, 1), (0, 2), (0, 3)]),
    ],
)
def test_parse_graph6(text, edges):
    graph = parse_graph(text)
    assert sorted(graph.edges()) == edges


def test_known_families():
    assert parse_graph("C~") == complete_graph(4)
    assert parse_graph("Ch") == path_graph(4)
    assert parse_graph("Cl") == cycle_graph(4)
    assert parse_graph("Cs") == star_graph(4)


def test_header_and_whitespace():
    assert parse_graph(">>graph6<<Bw\n") == complete_graph(3)
    assert parse_graph("  Ch  ") == path_graph(4)


def test_to_graph6():
    assert to_graph6(complete_graph(3)) == "Bw"
    assert to_graph6(path_graph(4)) == "Ch"
    assert to_graph6(BitGraph(1)) == "@"


def test_large_orders_use_long_header():
    """Orders above 62 need the four-byte size field."""
    g = complete_graph(63)
    text = to_graph6(g)
    assert text.startswith("~??~")
    assert len(text) == 4 + (63 * 62 // 2 + 5) // 6
    assert parse_graph(text) == g

    h = BitGraph(64)
    h.add_edge(0, 63)
    h.add_edge(31, 32)
    text = to_graph6(h)
    assert text.startswith("~?@?")
    assert parse_graph(text) == h


def test_parse_digraph6_drops_directions():
    graph = parse_graph("&BT?")
    assert sorted(graph.edges()) == [(0, 1), (1, 2)]


def test_parse_digraph6_skips_loops():
    """Loop on 0 and both arcs 0->1, 1->0 collapse to one edge."""
    graph = parse_graph("&Aw")
    assert list(graph.edges()) == [(0, 1)]


def test_parse_sparse6():
    graph = parse_graph(":Fa@x^")
    assert graph.num_vertices == 7
    assert sorted(graph.edges()) == [(0, 1), (0, 2), (1, 2), (5, 6)]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "?",  # Zero vertices
        "A",  # Missing data byte
        "A__",  # Extra data byte
        "B\x7f",  # Outside the printable range
        "~?@@",  # 65 vertices
        "~~",  # Truncated long header
        "&",
        ":",
    ],
)
def test_malformed_input(text):
    with pytest.raises(GraphFormatError):
        parse_graph(text)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        parse_graph("?")


def test_read_graph_file(tmp_path):
    path = tmp_path / "graphs.g6"
    path.write_text("Bw\n\nCh\n:Fa@x^\n")

    entries = list(read_graph_file(path))
    assert [line for line, _ in entries] == ["Bw", "Ch", ":Fa@x^"]
    assert entries[1][1] == path_graph(4)
    assert count_graph_lines(path) == 3


def test_read_graph_file_reports_line(tmp_path):
    path = tmp_path / "bad.g6"
    path.write_text("Bw\nA\n")

    with pytest.raises(GraphFormatError, match=r"bad\.g6:2"):
        list(read_graph_file(path))


def test_decoded_graphs_are_frozen():
    for text in ("Ch", "&BT?", ":Fa@x^"):
        graph = parse_graph(text)
        assert graph.frozen
        with pytest.raises(ValueError):
            graph.add_edge(0, graph.num_vertices - 1)
