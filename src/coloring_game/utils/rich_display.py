"""
Rich-based console output for games and batch results.

Provides:
- Run headers
- Move tables for single games
- Summary tables for batches
"""

import logging
from collections import Counter
from typing import List, Optional, Tuple
from rich.console import Console
from rich.table import Table

from ..core import BitGraph, Victory
from ..solver import GameResult
from ..storage import GraphResult

console = Console()
logger = logging.getLogger(__name__)


class GameDisplay:
    """
    Rich-based display for the CLI.

    Shows:
    - Graph and palette header
    - Move log (round, player, vertex, color) and winner
    - Distribution of game chromatic numbers over a batch
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, graph: BitGraph, num_colors: Optional[int] = None):
        """Show run header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(f"Graph: n = {graph.num_vertices}, m = {graph.num_edges}")
        if num_colors is not None:
            self.console.print(f"Colors: {num_colors}")
        self.console.print()

    def gameplay_table(self, game: GameResult) -> Table:
        """Create move table for one game."""
        table = Table(title=f"Optimal play with {game.num_colors} colors")
        table.add_column("Round", justify="right", style="cyan")
        table.add_column("Player")
        table.add_column("Vertex", justify="right")
        table.add_column("Color", justify="right")

        for round_no, player, move in game.rounds():
            style = "green" if player == "Alice" else "red"
            table.add_row(
                f"R{round_no}", f"[{style}]{player}[/{style}]", str(move.vertex), str(move.color)
            )
        return table

    def show_gameplay(self, game: GameResult):
        """Show move table and winner."""
        self.console.print(self.gameplay_table(game))
        if game.victory is Victory.ALICE_WINS:
            self.log_success("Alice WINS!")
        else:
            self.log_error("Bob WINS!")
        self.console.print(f"[dim]{game.nodes:,} search nodes[/dim]")

    def summary_table(self, results: List[Tuple[str, GraphResult]]) -> Table:
        """Count graphs per game chromatic number."""
        counts = Counter(result.game_chromatic_number for _, result in results)

        table = Table(title=f"{len(results):,} graphs")
        table.add_column("Game chromatic number", justify="right", style="cyan")
        table.add_column("Graphs", justify="right")
        for k in sorted(counts):
            table.add_row(str(k), f"{counts[k]:,}")
        return table

    def show_summary(self, results: List[Tuple[str, GraphResult]]):
        self.console.print(self.summary_table(results))


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
