"""Human player driven by typed input."""

import logging
from typing import Callable, Optional

from poker_sim.agents.base import BaseAgent
from poker_sim.models.action import ActionType, Decision
from poker_sim.models.player import Player

logger = logging.getLogger(__name__)

# Given a prompt, returns one line of user input
InputProvider = Callable[[str], str]


def parse_raise_amount(text: str) -> Optional[int]:
    """Parse a raise amount; ``None`` if it is not a non-negative integer."""
    try:
        amount = int(text.strip())
    except ValueError:
        return None
    return amount if amount >= 0 else None


class InteractiveAgent(BaseAgent):
    """Asks an input provider for ``fold``, ``call`` or ``raise``.

    Anything unrecognised, including a bad raise amount, folds.
    """

    def __init__(self, input_provider: InputProvider):
        self.input_provider = input_provider

    def decide(self, player: Player, highest_bet: int) -> Decision:
        prompt = (f"{player.name} ({player.chips} chips), "
                  f"fold, call ({highest_bet}), or raise?")
        token = self.input_provider(prompt)

        try:
            action = ActionType.from_token(token)
        except ValueError:
            logger.info("Invalid action %r from %s, folding by default", token, player.name)
            return Decision.fold()

        if action != ActionType.RAISE:
            return Decision(action)

        raw_amount = self.input_provider("Enter the raise amount")
        amount = parse_raise_amount(raw_amount)
        if amount is None:
            logger.info("Invalid raise amount %r from %s, folding by default",
                        raw_amount, player.name)
            return Decision.fold()
        return Decision.raise_by(amount)
