"""
Small-clique detection by exhaustive subset enumeration.

Only used to pick a starting palette size for the game chromatic number
search: a graph containing K_r needs at least r colors, so palettes below r
can be skipped without playing a single game.
"""

from .bits import next_combination
from .graph import BitGraph


def has_clique(graph: BitGraph, size: int) -> bool:
    """
    Check whether graph contains a clique on `size` vertices.

    Walks all size-subsets in lexicographic order and tests pairwise
    adjacency.
    """
    n = graph.num_vertices
    if size < 1:
        raise ValueError(f"Clique size must be positive, got {size}")
    if size > n:
        return False

    adjacency = graph.adjacency
    combo = list(range(size))
    while True:
        if _is_clique(adjacency, combo):
            return True
        if not next_combination(combo, n):
            return False


def _is_clique(adjacency, combo) -> bool:
    for i, u in enumerate(combo):
        for v in combo[i + 1:]:
            if not (adjacency[u] >> v) & 1:
                return False
    return True


def has_triangle(graph: BitGraph) -> bool:
    return has_clique(graph, 3)


def has_k4(graph: BitGraph) -> bool:
    return has_clique(graph, 4)


def starting_palette_size(graph: BitGraph) -> int:
    """
    Lower bound on the game chromatic number from small cliques.

    Returns:
        4 with a K4, 3 with a triangle, 2 with any edge, otherwise 1
    """
    if has_k4(graph):
        return 4
    if has_triangle(graph):
        return 3
    if graph.num_edges > 0:
        return 2
    return 1
