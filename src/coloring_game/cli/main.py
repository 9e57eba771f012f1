"""
Main CLI for the coloring game solver.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from rich.console import Console

from ..config import DEFAULT_DB_PATH, GRAPH_FAMILIES, family_file
from ..formats import GraphFormatError, parse_graph, to_graph6
from ..solver import GameChromaticSolver, game_chromatic_number, play_optimally
from ..storage import GraphResult, PostgreSQLBackend, SQLiteBackend, StorageBackend
from ..utils.rich_display import GameDisplay, setup_rich_logging

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def open_storage(args) -> Optional[StorageBackend]:
    """Open the result cache selected on the command line (None with --no-cache)."""
    if getattr(args, "no_cache", False):
        return None

    if args.backend == "postgresql":
        logger.info(f"Backend: PostgreSQL ({args.pg_user}@{args.pg_host}:{args.pg_port}/{args.pg_database})")
        return PostgreSQLBackend(
            host=args.pg_host,
            port=args.pg_port,
            database=args.pg_database,
            user=args.pg_user,
            password=args.pg_password,
        )

    db_path = Path(args.db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Backend: SQLite ({db_path})")
    return SQLiteBackend(str(db_path), fast_mode=args.fast_mode)


def write_results(results: List[Tuple[str, GraphResult]], out: TextIO) -> None:
    """One `<graph> <game chromatic number>` row per graph."""
    for line, result in results:
        out.write(f"{line} {result.game_chromatic_number}\n")
    out.flush()


def play_command(args):
    """Play one optimal game."""
    graph = parse_graph(args.graph)
    display = GameDisplay()
    display.show_header("Coloring game", graph, args.colors)

    game = play_optimally(graph, args.colors)
    display.show_gameplay(game)


def chromatic_command(args):
    """Game chromatic number of one graph."""
    graph = parse_graph(args.graph)
    display = GameDisplay()
    display.show_header("Game chromatic number", graph)

    k, game = game_chromatic_number(graph, start=args.start)
    display.show_gameplay(game)
    display.log_success(f"Game chromatic number: {k}")


def _run_batch(args, paths: List[Path]) -> None:
    storage = open_storage(args)
    solver = GameChromaticSolver(storage=storage, use_clique_bound=not args.no_clique_bound)
    summary = GameDisplay(Console(stderr=True))
    out = open(args.output, "w", encoding="ascii") if args.output else sys.stdout

    try:
        all_results = []
        for i, path in enumerate(paths):
            if i > 0:
                out.write("###\n")
            results = solver.solve_file(path)
            write_results(results, out)
            all_results.extend(results)

        summary.show_summary(all_results)
        logger.info(f"Solved {solver.solved:,} graphs, {solver.cache_hits:,} from cache")
    finally:
        if out is not sys.stdout:
            out.close()
        if storage is not None:
            storage.close()


def solve_command(args):
    """Solve every graph in a file."""
    _run_batch(args, [Path(args.file)])


def family_command(args):
    """Solve the stored corpus of a graph family."""
    if args.all:
        lo, hi = GRAPH_FAMILIES[args.type]
        orders = list(range(lo, hi + 1))
    elif args.order is None:
        raise ValueError("missing <order> (or pass --all)")
    else:
        orders = [args.order]

    paths = [family_file(args.type, order, args.data_dir) for order in orders]
    _run_batch(args, paths)


def query_command(args):
    """Look up a cached result."""
    graph = parse_graph(args.graph)
    key = to_graph6(graph)
    if args.backend == "sqlite" and not Path(args.db_path).exists():
        logger.warning(f"No database at {args.db_path}")
        print(f"{args.graph} unsolved")
        return

    storage = open_storage(args)

    try:
        result = storage.get(key)
        if result is None:
            logger.warning(f"No stored result for {key}")
            print(f"{args.graph} unsolved")
            return
        print(f"{args.graph} {result.game_chromatic_number}")
        logger.info(
            f"Alice opens with vertex {result.first_vertex}, color {result.first_color} "
            f"({result.nodes:,} nodes)"
        )
    finally:
        storage.close()


def _add_storage_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--backend",
        choices=["sqlite", "postgresql"],
        default="sqlite",
        help="Result cache backend",
    )
    parser.add_argument(
        "--db-path", default=DEFAULT_DB_PATH, help="Path to SQLite database file"
    )
    parser.add_argument(
        "--fast-mode", action="store_true", help="Disable SQLite durability for max speed (no crash recovery!)"
    )
    parser.add_argument("--pg-host", default="localhost")
    parser.add_argument("--pg-port", type=int, default=5432)
    parser.add_argument("--pg-database", default="coloring_game")
    parser.add_argument("--pg-user", default="postgres")
    parser.add_argument(
        "--pg-password",
        default=os.environ.get("PGPASSWORD", ""),
        help="PostgreSQL password (default: $PGPASSWORD)",
    )


def _add_batch_args(parser: argparse.ArgumentParser) -> None:
    _add_storage_args(parser)
    parser.add_argument(
        "--no-cache", action="store_true", help="Do not read or write the result cache"
    )
    parser.add_argument(
        "--no-clique-bound", action="store_true", help="Start every search at k = 1"
    )
    parser.add_argument("--output", default=None, help="Write results here instead of stdout")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vertex coloring game solver")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-logs", action="store_true", help="Render log records with rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play one optimal game")
    play_parser.add_argument("graph", help="Graph in graph6, digraph6 or sparse6")
    play_parser.add_argument("colors", type=int, help="Palette size (1-63)")
    play_parser.set_defaults(func=play_command)

    # Chromatic command
    chromatic_parser = subparsers.add_parser(
        "chromatic", help="Compute the game chromatic number of one graph"
    )
    chromatic_parser.add_argument("graph", help="Graph in graph6, digraph6 or sparse6")
    chromatic_parser.add_argument(
        "--start", type=int, default=None, help="First palette size to try (default: clique bound)"
    )
    chromatic_parser.set_defaults(func=chromatic_command)

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve every graph in a file")
    solve_parser.add_argument("file", help="File with one encoded graph per line")
    _add_batch_args(solve_parser)
    solve_parser.set_defaults(func=solve_command)

    # Family command
    family_parser = subparsers.add_parser("family", help="Solve a stored graph family")
    family_parser.add_argument("type", choices=sorted(GRAPH_FAMILIES), help="Graph family")
    family_parser.add_argument("order", type=int, nargs="?", help="Number of vertices")
    family_parser.add_argument(
        "--all", action="store_true", help="Ignore order, run every order of the family"
    )
    family_parser.add_argument(
        "--data-dir", default=None, help="Corpus root (default: $COLORING_GAME_DATA_DIR or data/graphs)"
    )
    _add_batch_args(family_parser)
    family_parser.set_defaults(func=family_command)

    # Query command
    query_parser = subparsers.add_parser("query", help="Look up a cached result")
    query_parser.add_argument("graph", help="Graph in graph6, digraph6 or sparse6")
    _add_storage_args(query_parser)
    query_parser.set_defaults(func=query_command)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.rich_logs:
        setup_rich_logging(args.log_level)
    else:
        setup_logging(args.log_level)

    try:
        args.func(args)
    except (GraphFormatError, ValueError, FileNotFoundError) as e:
        logger.error(f"{args.command}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
