"""Agent factory: picks the decision strategy for each player."""

import random
from typing import Optional

from poker_sim.agents.base import BaseAgent
from poker_sim.agents.interactive import InputProvider, InteractiveAgent
from poker_sim.agents.random_agent import RandomAgent
from poker_sim.models.action import Decision
from poker_sim.models.player import Player


class _FoldingAgent(BaseAgent):
    """Stand-in for human seats when no input provider is wired up."""

    def decide(self, player: Player, highest_bet: int) -> Decision:
        return Decision.fold()


class AgentFactory:
    """Holds one computer agent and one human agent for a game."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        input_provider: Optional[InputProvider] = None,
        ai_agent: Optional[BaseAgent] = None,
        human_agent: Optional[BaseAgent] = None,
    ):
        """Initialize the factory.

        Args:
            rng: Random source shared with the computer agent.
            input_provider: Source of typed input for human players. Without
                one, human players fold whenever they are asked to act.
            ai_agent: Overrides the default ``RandomAgent``.
            human_agent: Overrides the default ``InteractiveAgent``.
        """
        self.ai_agent = ai_agent or RandomAgent(rng)
        if human_agent is not None:
            self.human_agent = human_agent
        elif input_provider is not None:
            self.human_agent = InteractiveAgent(input_provider)
        else:
            self.human_agent = _FoldingAgent()

    def agent_for(self, player: Player) -> BaseAgent:
        return self.ai_agent if player.is_ai else self.human_agent
