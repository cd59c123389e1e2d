"""Computer player that calls or raises at random."""

import logging
import random
from typing import Optional

from poker_sim.agents.base import BaseAgent
from poker_sim.models.action import Decision
from poker_sim.models.player import Player

logger = logging.getLogger(__name__)


class RandomAgent(BaseAgent):
    """Never folds. Calls an unopened round, otherwise flips a coin between
    calling and raising by a random amount in ``[1, chips)``."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def decide(self, player: Player, highest_bet: int) -> Decision:
        if highest_bet == 0 or self.rng.randrange(2) == 0:
            return Decision.call()

        # randrange(1, chips) needs at least two chips
        if player.chips < 2:
            logger.debug("%s has %d chips, calling instead of raising",
                         player.name, player.chips)
            return Decision.call()

        return Decision.raise_by(self.rng.randrange(1, player.chips))
