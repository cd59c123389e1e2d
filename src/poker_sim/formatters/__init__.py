"""Output formatting for terminal and tables."""

from poker_sim.formatters.text import TextFormatter
from poker_sim.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
