"""Data models for the poker simulation."""

from poker_sim.models.card import Card, Rank, Suit
from poker_sim.models.action import ActionType, Decision, PlayerAction, Street
from poker_sim.models.player import Player
from poker_sim.models.game import GameConfig, GamePhase, GameResult, PlayerScore

__all__ = [
    "Card", "Rank", "Suit",
    "ActionType", "Decision", "PlayerAction", "Street",
    "Player",
    "GameConfig", "GamePhase", "GameResult", "PlayerScore",
]
