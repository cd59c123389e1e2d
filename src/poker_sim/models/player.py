"""Player state: hand, chip stack and the bet for the current round."""

import logging
from typing import List, Optional

from poker_sim import config
from poker_sim.errors import InsufficientChipsError, InvalidBetError
from poker_sim.models.card import Card

logger = logging.getLogger(__name__)


class Player:
    """A seat at the table.

    State is read through properties and changed only through
    ``receive_card``, ``bet``, ``fold`` and ``reset_bet``.
    """

    def __init__(self, name: str, is_ai: bool = False, chips: Optional[int] = None):
        """Initialize the player.

        Args:
            name: Display name. Does not need to be unique.
            is_ai: Whether decisions come from the computer strategy.
            chips: Starting stack, defaults to ``config.DEFAULT_STARTING_CHIPS``.
        """
        if chips is None:
            chips = config.DEFAULT_STARTING_CHIPS
        if chips < 0:
            raise ValueError(f"Starting chips must be non-negative, got {chips}")
        self._name = name
        self._is_ai = is_ai
        self._hand: List[Card] = []
        self._chips = chips
        self._current_bet = 0
        self._in_game = True

    @classmethod
    def from_spec(cls, spec: str, chips: Optional[int] = None) -> "Player":
        """Build a player from ``"Name"`` or ``"Name*"`` (computer player)."""
        spec = spec.strip()
        is_ai = spec.endswith(config.AI_MARKER)
        name = spec[:-len(config.AI_MARKER)].strip() if is_ai else spec
        if not name:
            raise ValueError(f"Empty player name in spec {spec!r}")
        return cls(name, is_ai=is_ai, chips=chips)

    @property
    def name(self) -> str:
        return self._name

    @property
    def hand(self) -> List[Card]:
        return list(self._hand)

    @property
    def chips(self) -> int:
        return self._chips

    @property
    def current_bet(self) -> int:
        return self._current_bet

    @property
    def in_game(self) -> bool:
        return self._in_game

    @property
    def is_ai(self) -> bool:
        return self._is_ai

    def receive_card(self, card: Card) -> None:
        self._hand.append(card)

    def show_hand(self) -> str:
        return ", ".join(card.name for card in self._hand)

    def bet(self, amount: int) -> None:
        """Move ``amount`` chips from the stack into the current bet.

        Raises:
            InvalidBetError: If ``amount`` is negative.
            InsufficientChipsError: If ``amount`` exceeds the stack.
        """
        if amount < 0:
            raise InvalidBetError(f"{self._name} cannot bet a negative amount ({amount})")
        if amount > self._chips:
            raise InsufficientChipsError(self._name, amount, self._chips)

        self._chips -= amount
        self._current_bet += amount
        logger.debug("%s bets %d (stack %d, round bet %d)",
                     self._name, amount, self._chips, self._current_bet)

    def fold(self) -> None:
        self._in_game = False

    def reset_bet(self) -> None:
        self._current_bet = 0

    def __repr__(self) -> str:
        kind = "AI" if self._is_ai else "human"
        status = "in" if self._in_game else "folded"
        return f"Player({self._name!r}, {kind}, chips={self._chips}, {status})"
