"""Pot accounting for poker simulation."""

from typing import Dict, List, Tuple

from poker_sim.errors import InvalidBetError


class Pot:
    """Chips wagered across every betting round of a game.

    The pot only grows. Bets are added after the player's own ``bet()``
    succeeded, so ``total`` always equals the sum of debited chips.
    """

    def __init__(self):
        self.total: int = 0
        # (player name, amount) for every bet added, in order
        self.history: List[Tuple[str, int]] = []

    def add_bet(self, player_name: str, amount: int):
        """Add a bet from a player.

        Args:
            player_name: Who paid the chips.
            amount: Chips already taken from the player's stack.
        """
        if amount < 0:
            raise InvalidBetError(f"Cannot add a negative amount ({amount}) to the pot")
        self.total += amount
        self.history.append((player_name, amount))

    def contributions(self) -> Dict[str, int]:
        """Total chips put in per player name."""
        totals: Dict[str, int] = {}
        for name, amount in self.history:
            totals[name] = totals.get(name, 0) + amount
        return totals

    def __repr__(self) -> str:
        return f"Pot(total={self.total})"
