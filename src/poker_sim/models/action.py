"""Betting actions and streets."""

from dataclasses import dataclass
from enum import Enum


class Street(str, Enum):
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"


class ActionType(str, Enum):
    FOLD = "fold"
    CALL = "call"
    RAISE = "raise"

    @classmethod
    def from_token(cls, token: str) -> "ActionType":
        """Parse a typed action such as ' Raise '. Raises ValueError if unknown."""
        return cls(token.strip().lower())


@dataclass(frozen=True)
class Decision:
    """What a player chose to do. ``amount`` is the raise size on top of the highest bet."""
    action: ActionType
    amount: int = 0

    @classmethod
    def fold(cls) -> "Decision":
        return cls(ActionType.FOLD)

    @classmethod
    def call(cls) -> "Decision":
        return cls(ActionType.CALL)

    @classmethod
    def raise_by(cls, amount: int) -> "Decision":
        return cls(ActionType.RAISE, amount)


@dataclass
class PlayerAction:
    """A single applied betting action."""
    player_name: str
    action_type: ActionType
    amount: int = 0
    highest_bet: int = 0
    street: Street = Street.PREFLOP
    forced: bool = False

    def __str__(self) -> str:
        if self.action_type == ActionType.FOLD:
            suffix = " (cannot cover the bet)" if self.forced else ""
            return f"{self.player_name} folds{suffix}"
        if self.action_type == ActionType.CALL:
            return f"{self.player_name} calls with {self.amount} chips"
        return f"{self.player_name} raises to {self.highest_bet} chips"
