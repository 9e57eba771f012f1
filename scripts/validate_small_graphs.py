#!/usr/bin/env python3
"""
Validate the solver on graph families with known game chromatic numbers.

Checks:
1. Complete graphs K_n: n
2. Stars K_1,n-1: 2
3. Paths P_n (n >= 4): 3
4. Cycles C_n: 3
"""

import sys
import time
import logging
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from coloring_game.core import complete_graph, cycle_graph, path_graph, star_graph
from coloring_game.solver import MinimaxSearcher, game_chromatic_number

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,  # Force reconfiguration
)

logger = logging.getLogger(__name__)


def known_cases(max_order: int):
    """(label, graph, expected game chromatic number) for n = 4..max_order."""
    for n in range(4, max_order + 1):
        yield f"K{n}", complete_graph(n), n
        yield f"Star{n}", star_graph(n), 2
        yield f"P{n}", path_graph(n), 3
        yield f"C{n}", cycle_graph(n), 3


def main():
    parser = argparse.ArgumentParser(description="Validate game chromatic numbers of small graphs")
    parser.add_argument(
        "--max-order", type=int, default=6, help="Largest vertex count to check (default: 6)"
    )
    args = parser.parse_args()

    logger.info("=" * 70)
    logger.info(f"SOLVER VALIDATION - graphs on 4..{args.max_order} vertices")
    logger.info("=" * 70)

    searcher = MinimaxSearcher()
    start_time = time.time()
    failures = 0

    for label, graph, expected in known_cases(args.max_order):
        case_start = time.time()
        start_nodes = searcher.nodes
        k, _ = game_chromatic_number(graph, searcher=searcher)
        elapsed = time.time() - case_start

        if k == expected:
            logger.info(
                f"✅ {label:<8} game chromatic number {k} "
                f"({searcher.nodes - start_nodes:,} nodes, {elapsed:.2f}s)"
            )
        else:
            logger.error(f"❌ {label:<8} mismatch!")
            logger.error(f"   Expected: {expected}")
            logger.error(f"   Got:      {k}")
            failures += 1

    logger.info("")
    logger.info(f"Total nodes: {searcher.nodes:,}")
    logger.info(f"Total time:  {time.time() - start_time:.1f}s")
    logger.info("")

    if failures:
        logger.error(f"❌ VALIDATION FAILED - {failures} graph(s) don't match!")
        return 1

    logger.info("🎉 VALIDATION PASSED - Solver working correctly!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
