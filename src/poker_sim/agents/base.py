"""Base agent class for betting decisions."""

from abc import ABC, abstractmethod

from poker_sim.models.action import Decision
from poker_sim.models.player import Player


class BaseAgent(ABC):
    """Abstract base class for anything that decides a player's move."""

    @abstractmethod
    def decide(self, player: Player, highest_bet: int) -> Decision:
        """Decide what ``player`` does facing ``highest_bet``.

        Args:
            player: The player to act. Must not be mutated here.
            highest_bet: The largest cumulative bet in the current round.

        Returns:
            The decision. The betting engine applies it.
        """
        pass
