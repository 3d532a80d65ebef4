"""
Rich-based console output for the command line.

Provides:
- Status lines (info/success/warning/error)
- Position and search summaries
- Arena result tables
"""

import logging

from rich.console import Console
from rich.table import Table

from ..core import GameState, generate_legal_moves, get_game_result, is_terminal
from ..solver import ArenaSummary, SearchResult

console = Console()
logger = logging.getLogger(__name__)


class GameDisplay:
    """Formats engine results on a rich console."""

    def __init__(self, output: Console = None):
        self.console = output or console

    def log(self, message: str, style: str = ""):
        """Log a message using rich console."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str):
        self.console.rule(f"[bold blue]{title}[/bold blue]")

    def position_table(self, state: GameState) -> Table:
        """Summary of a position: turn, score and legal moves."""
        black, white = state.score()

        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Board", f"{state.size}x{state.size}")
        if is_terminal(state):
            table.add_row("To move", "[bold]game over[/bold]")
            table.add_row("Result", get_game_result(state))
        else:
            table.add_row("To move", f"{state.player.display_name} ({state.player.symbol})")
            moves = " ".join(str(m) for m in generate_legal_moves(state))
            table.add_row("Legal moves", moves)
        table.add_row("Score", f"X = {black}, O = {white}")
        return table

    def show_position(self, state: GameState):
        self.console.print(self.position_table(state))

    def show_search(self, result: SearchResult):
        """Print the statistics of a computer move."""
        if result.move is None:
            self.log_warning("No move: the game is over")
            return

        timeout_note = " [yellow](deadline reached)[/yellow]" if result.timed_out else ""
        self.log_info(
            f"[bold]{result.move}[/bold] | score {result.score} | depth {result.depth} | "
            f"{result.nodes:,} nodes | {result.elapsed:.2f}s{timeout_note}"
        )

    def arena_table(self, summary: ArenaSummary) -> Table:
        table = Table(title=f"{summary.games} games")
        table.add_column("Side", style="cyan")
        table.add_column("Tactic")
        table.add_column("Wins", justify="right")
        table.add_column("Win %", justify="right")
        table.add_column("Avg discs", justify="right")

        games = summary.games or 1
        table.add_row(
            "X (black)",
            summary.black,
            str(summary.black_wins),
            f"{summary.black_wins / games * 100:.1f}",
            f"{summary.black_discs / games:.1f}",
        )
        table.add_row(
            "O (white)",
            summary.white,
            str(summary.white_wins),
            f"{summary.white_wins / games * 100:.1f}",
            f"{summary.white_discs / games:.1f}",
        )
        table.add_row("Ties", "", str(summary.ties), f"{summary.ties / games * 100:.1f}", "")
        return table

    def show_arena(self, summary: ArenaSummary):
        self.console.print(self.arena_table(summary))


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
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
