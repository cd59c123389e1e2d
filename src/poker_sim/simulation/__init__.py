"""Poker simulation module."""

from poker_sim.simulation.deck import Deck
from poker_sim.simulation.pot import Pot
from poker_sim.simulation.evaluator import HandEvaluator, HandStrength
from poker_sim.simulation.betting import BettingEngine
from poker_sim.simulation.engine import PokerGame

__all__ = ["Deck", "Pot", "HandEvaluator", "HandStrength", "BettingEngine", "PokerGame"]
