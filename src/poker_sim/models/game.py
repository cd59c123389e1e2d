"""Game configuration and result models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from poker_sim import config
from poker_sim.models.action import PlayerAction
from poker_sim.models.card import Card


class GamePhase(str, Enum):
    """Game phase enumeration."""
    WAITING = "waiting"
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"
    SHOWDOWN = "showdown"
    COMPLETE = "complete"


@dataclass
class GameConfig:
    """Table settings for one game."""
    starting_chips: int = config.DEFAULT_STARTING_CHIPS
    seed: Optional[int] = None
    strict_chips: bool = False
    player_specs: List[str] = field(
        default_factory=lambda: config.DEFAULT_PLAYERS.split(",")
    )

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config from ``POKER_*`` environment variables."""
        return cls(
            starting_chips=config.starting_chips(),
            seed=config.random_seed(),
            strict_chips=config.strict_chips(),
            player_specs=[s for s in config.default_players().split(",") if s.strip()],
        )


@dataclass
class PlayerScore:
    """A player's hand at showdown and its strength."""
    name: str
    hand: List[Card]
    strength: int
    chips: int = 0
    is_winner: bool = False


@dataclass
class GameResult:
    """Everything a finished game reports."""
    pot: int
    community_cards: List[Card]
    scores: List[PlayerScore]
    winners: List[str]
    actions: List[PlayerAction] = field(default_factory=list)
    action_history: List[str] = field(default_factory=list)

    @property
    def has_winner(self) -> bool:
        return bool(self.winners)

    @property
    def best_strength(self) -> Optional[int]:
        if not self.scores:
            return None
        return max(s.strength for s in self.scores)
