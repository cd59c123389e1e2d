"""Single-pass betting rounds."""

import logging
from typing import Callable, List, Optional, Sequence

from poker_sim.agents.factory import AgentFactory
from poker_sim.errors import InsufficientChipsError
from poker_sim.models.action import ActionType, Decision, PlayerAction, Street
from poker_sim.models.player import Player
from poker_sim.simulation.pot import Pot

logger = logging.getLogger(__name__)


class BettingEngine:
    """Runs betting rounds and applies decisions to players and the pot.

    Each round starts with a highest bet of 0 and visits every player once
    in seat order. A raise does not give earlier players another turn.
    """

    def __init__(
        self,
        agents: Optional[AgentFactory] = None,
        strict: bool = False,
        on_action: Optional[Callable[[PlayerAction], None]] = None,
    ):
        """Initialize the engine.

        Args:
            agents: Supplies the decision strategy per player.
            strict: Let ``InsufficientChipsError`` propagate instead of
                folding the player who cannot cover the bet.
            on_action: Called with every applied action.
        """
        self.agents = agents or AgentFactory()
        self.strict = strict
        self.on_action = on_action
        self.actions: List[PlayerAction] = []

    def run_round(self, players: Sequence[Player], pot: Pot,
                  street: Street = Street.PREFLOP) -> None:
        """Run one betting round. Results are read from players and pot afterwards."""
        highest_bet = 0
        logger.info("Starting %s betting round", street.value)

        for player in players:
            if not player.in_game:
                continue
            decision = self.agents.agent_for(player).decide(player, highest_bet)
            highest_bet = self.apply_decision(player, decision, highest_bet, pot, street)

        for player in players:
            player.reset_bet()

    def apply_decision(
        self,
        player: Player,
        decision: Decision,
        highest_bet: int,
        pot: Pot,
        street: Street = Street.PREFLOP,
    ) -> int:
        """Apply one decision.

        The player's chips are debited before the pot is credited, so a
        failed bet never reaches the pot.

        Returns:
            The highest bet after this decision.

        Raises:
            InvalidBetError: If the computed bet is negative.
            InsufficientChipsError: In strict mode, if the player cannot cover the bet.
        """
        if decision.action == ActionType.FOLD:
            player.fold()
            self._record(PlayerAction(player.name, ActionType.FOLD, 0, highest_bet, street))
            return highest_bet

        if decision.action == ActionType.CALL:
            target = highest_bet
        else:
            target = highest_bet + decision.amount
        delta = target - player.current_bet

        try:
            player.bet(delta)
        except InsufficientChipsError as e:
            if self.strict:
                raise
            logger.warning("%s; folding", e)
            player.fold()
            self._record(PlayerAction(player.name, ActionType.FOLD, 0, highest_bet,
                                      street, forced=True))
            return highest_bet

        pot.add_bet(player.name, delta)
        self._record(PlayerAction(player.name, decision.action, delta, target, street))
        return target

    def _record(self, action: PlayerAction):
        logger.info("%s", action)
        self.actions.append(action)
        if self.on_action is not None:
            self.on_action(action)
