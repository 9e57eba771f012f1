"""Shared fixtures."""

import pytest
from coloring_game.core import BitGraph


@pytest.fixture
def chorded_cycle() -> BitGraph:
    """A 4-cycle with a chord and a pendant."""
    g = BitGraph(5)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    g.add_edge(2, 4)
    return g
