"""Test helpers: scripted decisions and card shorthand."""

from typing import Iterable, List, Optional

from poker_sim.agents.base import BaseAgent
from poker_sim.agents.factory import AgentFactory
from poker_sim.models.action import Decision
from poker_sim.models.card import Card
from poker_sim.models.player import Player


class ScriptedAgent(BaseAgent):
    """Returns queued decisions in order, then calls."""

    def __init__(self, decisions: Optional[Iterable[Decision]] = None):
        self.decisions: List[Decision] = list(decisions or [])
        self.asked: List[str] = []

    def decide(self, player: Player, highest_bet: int) -> Decision:
        self.asked.append(player.name)
        if self.decisions:
            return self.decisions.pop(0)
        return Decision.call()


def scripted(decisions: Iterable[Decision]) -> AgentFactory:
    """An agent factory that plays the same script for every seat."""
    agent = ScriptedAgent(decisions)
    return AgentFactory(ai_agent=agent, human_agent=agent)


def cards(text: str) -> List[Card]:
    """``cards("2h 2d 5s")`` -> list of Card."""
    return [Card.parse(s) for s in text.split()]


def deal(player: Player, text: str) -> Player:
    for card in cards(text):
        player.receive_card(card)
    return player
