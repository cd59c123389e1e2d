"""Rich table formatting for terminal output."""

from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from poker_sim.formatters.text import TextFormatter
from poker_sim.models.game import GameResult
from poker_sim.simulation.evaluator import HandEvaluator


class TableFormatter:
    """Format game data as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.text = TextFormatter()

    def print_result(self, result: GameResult) -> None:
        """Print the showdown as a table followed by the winners."""
        self.console.print(Panel(
            f"Community cards: {self.text.format_cards(result.community_cards)}\n"
            f"Total pot: [bold]{result.pot}[/bold] chips",
            title="Showdown",
        ))

        if not result.has_winner:
            self.console.print("[yellow]Everyone folded. No winner.[/yellow]")
            return

        table = Table(title="Hands")
        table.add_column("Player", style="cyan")
        table.add_column("Hand")
        table.add_column("Strength", justify="right")
        table.add_column("Chips", justify="right")
        table.add_column("", justify="center")

        for score in result.scores:
            table.add_row(
                score.name,
                self.text.format_cards(score.hand),
                f"{score.strength} ({HandEvaluator.get_strength_name(score.strength)})",
                str(score.chips),
                "[green]winner[/green]" if score.is_winner else "",
            )

        self.console.print(table)
        best = HandEvaluator.get_strength_name(result.best_strength)
        self.console.print(f"[bold green]Winner(s): {', '.join(result.winners)}[/bold green] "
                           f"with {best.lower()}")

    def print_tally(self, wins: Dict[str, int], games: int, no_winner: int = 0) -> None:
        """Print win counts from several simulated games."""
        table = Table(title=f"Results over {games} games")
        table.add_column("Player", style="cyan")
        table.add_column("Wins", justify="right", style="green")
        table.add_column("Win %", justify="right")

        for name, count in sorted(wins.items(), key=lambda kv: (-kv[1], kv[0])):
            pct = 100.0 * count / games if games else 0.0
            table.add_row(name, str(count), f"{pct:.1f}%")

        self.console.print(table)
        if no_winner:
            self.console.print(f"[dim]{no_winner} game(s) ended with everyone folded.[/dim]")
        self.console.print("[dim]Tied games credit every winner.[/dim]")
