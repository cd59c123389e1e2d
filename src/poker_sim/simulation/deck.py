"""Deck management for poker simulation."""

import logging
import random
from typing import List, Optional

from poker_sim.errors import EmptyDeckError
from poker_sim.models.card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class Deck:
    """A standard 52-card deck, shuffled on creation.

    The end of ``cards`` is the top of the deck.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize a new shuffled deck with all 52 cards.

        Args:
            rng: Random source for shuffling. A fresh ``random.Random`` is used if omitted.
        """
        self.rng = rng if rng is not None else random.Random()
        self.cards: List[Card] = []
        self._reset()
        self.shuffle()

    def _reset(self):
        """Reset the deck to all 52 cards."""
        self.cards = []
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank, suit))

    def shuffle(self):
        """Shuffle the deck in place (Fisher-Yates)."""
        cards = self.cards
        for n in range(len(cards) - 1, 0, -1):
            k = self.rng.randint(0, n)
            cards[k], cards[n] = cards[n], cards[k]
        logger.debug("Shuffled %d cards", len(cards))

    def deal_card(self) -> Card:
        """Deal the top card.

        Raises:
            EmptyDeckError: If no cards are left.
        """
        if not self.cards:
            raise EmptyDeckError("Cannot deal from an empty deck")
        return self.cards.pop()

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards, in dealing order.
        """
        if count > len(self.cards):
            raise EmptyDeckError(f"Not enough cards in deck. Need {count}, have {len(self.cards)}")
        return [self.deal_card() for _ in range(count)]

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
