"""
Game chromatic number search and batch driver.

The game chromatic number of G is the smallest palette size k for which
Alice wins the coloring game under optimal play. It is found by playing
complete optimal games for k = start, start + 1, ... where start is a clique
lower bound (palettes smaller than the largest clique cannot be proper).
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union
from tqdm import tqdm

from ..core import BitGraph, MAX_COLORS, starting_palette_size
from ..formats import count_graph_lines, parse_graph, read_graph_file, to_graph6
from ..storage import GraphResult, StorageBackend
from .game import GameResult, play_optimally
from .minimax import MinimaxSearcher

logger = logging.getLogger(__name__)


def game_chromatic_number(
    graph: BitGraph,
    start: Optional[int] = None,
    searcher: Optional[MinimaxSearcher] = None,
) -> Tuple[int, GameResult]:
    """
    Smallest palette size >= start for which Alice wins.

    Args:
        graph: Graph to analyse
        start: First palette size to try (default: clique lower bound)
        searcher: Searcher to use (its node counter accumulates)

    Returns:
        (game chromatic number, the winning game at that palette size)

    Raises:
        ValueError: if start is out of range or no palette up to 63 colors works
    """
    k = starting_palette_size(graph) if start is None else start
    if not 1 <= k <= MAX_COLORS:
        raise ValueError(f"Starting palette size {k} out of range [1, {MAX_COLORS}]")
    if searcher is None:
        searcher = MinimaxSearcher()

    while k <= MAX_COLORS:
        result = play_optimally(graph, k, searcher)
        logger.debug(f"{graph!r}, k={k}: {result.victory.player} wins")
        if result.alice_wins:
            return k, result
        k += 1

    raise ValueError(f"Alice cannot win on {graph!r} with at most {MAX_COLORS} colors")


class GameChromaticSolver:
    """
    Computes game chromatic numbers for graphs, caching results in storage.

    Graphs are keyed by canonical graph6, so a rerun over a corpus only
    solves graphs that have no stored result yet.
    """

    def __init__(
        self,
        storage: Optional[StorageBackend] = None,
        use_clique_bound: bool = True,
        flush_every: int = 100,
    ):
        """
        Initialize solver.

        Args:
            storage: Optional result cache
            use_clique_bound: Start at the clique lower bound instead of k = 1
            flush_every: Commit storage after this many newly solved graphs
        """
        self.storage = storage
        self.use_clique_bound = use_clique_bound
        self.flush_every = flush_every
        self.searcher = MinimaxSearcher()
        self.solved = 0
        self.cache_hits = 0

    def solve_graph(self, graph: BitGraph) -> GraphResult:
        """Game chromatic number of one graph, from cache when available."""
        key = to_graph6(graph)

        if self.storage is not None:
            cached = self.storage.get(key)
            if cached is not None:
                self.cache_hits += 1
                return cached

        start_nodes = self.searcher.nodes
        start = None if self.use_clique_bound else 1
        k, game = game_chromatic_number(graph, start=start, searcher=self.searcher)
        opening = game.moves[0] if game.moves else None

        result = GraphResult(
            graph6=key,
            num_vertices=graph.num_vertices,
            num_edges=graph.num_edges,
            game_chromatic_number=k,
            first_vertex=opening.vertex if opening else None,
            first_color=opening.color if opening else None,
            nodes=self.searcher.nodes - start_nodes,
        )
        self.solved += 1

        if self.storage is not None:
            self.storage.insert(result)
            if self.solved % self.flush_every == 0:
                self.storage.flush()

        return result

    def solve_line(self, line: str) -> GraphResult:
        return self.solve_graph(parse_graph(line))

    def solve_lines(
        self, lines: Iterable[str], total: Optional[int] = None, desc: str = "Graphs"
    ) -> List[Tuple[str, GraphResult]]:
        """
        Solve every non-blank line.

        Returns:
            (stripped input line, result) pairs in input order
        """
        results = []
        with tqdm(total=total, desc=desc, unit=" graph") as pbar:
            for raw in lines:
                line = raw.strip()
                if not line:
                    continue
                results.append((line, self.solve_line(line)))
                pbar.update(1)

        if self.storage is not None:
            self.storage.flush()
        return results

    def solve_file(self, path: Union[str, Path]) -> List[Tuple[str, GraphResult]]:
        """Solve a graph file with one encoded graph per line."""
        total = count_graph_lines(path)
        logger.info(f"Solving {total:,} graphs from {path}")

        results = []
        with tqdm(total=total, desc=Path(path).name, unit=" graph") as pbar:
            for line, graph in read_graph_file(path):
                results.append((line, self.solve_graph(graph)))
                pbar.update(1)

        if self.storage is not None:
            self.storage.flush()

        logger.info(
            f"{path}: {self.solved:,} solved, {self.cache_hits:,} cached "
            f"(totals for this solver)"
        )
        return results
