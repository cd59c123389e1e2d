"""Decision strategies for computer and human players."""

from poker_sim.agents.base import BaseAgent
from poker_sim.agents.random_agent import RandomAgent
from poker_sim.agents.interactive import InteractiveAgent, InputProvider, parse_raise_amount
from poker_sim.agents.factory import AgentFactory

__all__ = ["BaseAgent", "RandomAgent", "InteractiveAgent", "InputProvider",
           "parse_raise_amount", "AgentFactory"]
