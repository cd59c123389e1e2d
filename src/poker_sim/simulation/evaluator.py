"""Hand evaluation for poker simulation.

Scoring is deliberately coarse: only repeated ranks count, suits and
straights are ignored, and ties are not broken by kickers.
"""

from collections import Counter
from enum import IntEnum
from typing import Dict, List, Sequence

from poker_sim.models.card import Card
from poker_sim.models.player import Player


class HandStrength(IntEnum):
    """Hand strengths from worst to best."""
    HIGH_CARD = 1
    PAIR = 2
    THREE_OF_A_KIND = 3


class HandEvaluator:
    """Scores hands and picks showdown winners."""

    @staticmethod
    def evaluate_strength(hand: Sequence[Card]) -> HandStrength:
        """Score a hand by its most repeated rank.

        Args:
            hand: Any number of cards; an empty hand scores as high card.

        Returns:
            THREE_OF_A_KIND if some rank appears 3+ times, PAIR if some rank
            appears twice, otherwise HIGH_CARD.
        """
        counts = Counter(card.rank for card in hand)
        most = max(counts.values(), default=0)

        if most >= 3:
            return HandStrength.THREE_OF_A_KIND
        if most == 2:
            return HandStrength.PAIR
        return HandStrength.HIGH_CARD

    @staticmethod
    def score_players(players: Sequence[Player]) -> Dict[int, HandStrength]:
        """Score every in-game player's hole cards, keyed by position in ``players``."""
        return {
            i: HandEvaluator.evaluate_strength(p.hand)
            for i, p in enumerate(players)
            if p.in_game
        }

    @staticmethod
    def get_winners(players: Sequence[Player]) -> List[Player]:
        """Get every in-game player holding the best score.

        Community cards are not part of a player's hand and are not scored.

        Args:
            players: All players in registration order.

        Returns:
            Winning players in registration order; empty if everyone folded.
        """
        scores = HandEvaluator.score_players(players)
        if not scores:
            return []

        best = max(scores.values())
        return [players[i] for i, strength in scores.items() if strength == best]

    @staticmethod
    def get_strength_name(strength: int) -> str:
        """Get a human-readable name for a strength score."""
        names = {
            HandStrength.HIGH_CARD: "High card",
            HandStrength.PAIR: "Pair",
            HandStrength.THREE_OF_A_KIND: "Three of a kind",
        }
        return names.get(strength, "Unknown")
