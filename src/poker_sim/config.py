"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from poker_sim.errors import ConfigError

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Defaults
DEFAULT_STARTING_CHIPS = 100
DEFAULT_PLAYERS = "Alice,Cat,Dog,Bob (AI)*"

# Suffix on a player spec that marks a computer player
AI_MARKER = "*"

LOG_LEVEL = os.getenv("POKER_LOG_LEVEL", "WARNING").upper()

# Deal sizes
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1


def int_env(name: str, default: Optional[int]) -> Optional[int]:
    """Read an integer environment variable, falling back to ``default`` when unset."""
    raw = os.getenv(name, "")
    if raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def starting_chips() -> int:
    chips = int_env("POKER_STARTING_CHIPS", DEFAULT_STARTING_CHIPS)
    if chips < 0:
        raise ConfigError(f"POKER_STARTING_CHIPS must be non-negative, got {chips}")
    return chips


def random_seed() -> Optional[int]:
    return int_env("POKER_SEED", None)


def strict_chips() -> bool:
    """Whether an unaffordable bet aborts the game instead of folding the player."""
    return bool_env("POKER_STRICT_CHIPS", False)


def default_players() -> str:
    return os.getenv("POKER_DEFAULT_PLAYERS", DEFAULT_PLAYERS)
