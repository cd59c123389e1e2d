"""Plain text formatting for terminal output."""

from typing import Sequence

from poker_sim.models.card import Card
from poker_sim.models.game import GameResult
from poker_sim.simulation.evaluator import HandEvaluator


class TextFormatter:
    """Format game data as plain text."""

    def format_cards(self, cards: Sequence[Card]) -> str:
        """Format cards compactly, e.g. ``K♦ 10♠``."""
        if not cards:
            return "-"
        return " ".join(str(c) for c in cards)

    def format_result(self, result: GameResult) -> str:
        """Format a finished game."""
        lines = []
        lines.append("=== Showdown ===")
        lines.append(f"Board: {self.format_cards(result.community_cards)}  |  "
                     f"Pot: {result.pot} chips")

        for score in result.scores:
            marker = " *" if score.is_winner else ""
            lines.append(f"  {score.name}: {self.format_cards(score.hand)} "
                         f"({HandEvaluator.get_strength_name(score.strength)}){marker}")

        lines.append("")
        if result.has_winner:
            best = HandEvaluator.get_strength_name(result.best_strength)
            lines.append(f"Winner(s): {', '.join(result.winners)} ({best})")
        else:
            lines.append("No winner, everyone folded.")

        return "\n".join(lines)
