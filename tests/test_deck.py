"""Tests for the deck and its shuffle."""

import itertools
import random
from collections import Counter

import pytest

from poker_sim.errors import EmptyDeckError
from poker_sim.models.card import Card, Rank, Suit
from poker_sim.simulation.deck import Deck


def _chi_square(observed, expected):
    return sum((o - expected) ** 2 / expected for o in observed)


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_initialization(self):
        """A new deck has one card per suit and rank."""
        deck = Deck(random.Random(1))
        assert len(deck) == 52
        assert set(deck.cards) == {Card(r, s) for s in Suit for r in Rank}

    def test_new_deck_is_shuffled(self):
        """The constructor shuffles before returning."""
        ordered = [Card(r, s) for s in Suit for r in Rank]
        deck = Deck(random.Random(7))
        assert deck.cards != ordered

    def test_same_seed_same_order(self):
        assert Deck(random.Random(42)).cards == Deck(random.Random(42)).cards

    def test_shuffle_is_permutation(self):
        """Shuffling never loses or duplicates a card."""
        deck = Deck(random.Random(3))
        for _ in range(50):
            before = Counter(deck.cards)
            deck.shuffle()
            assert Counter(deck.cards) == before
            assert len(set(deck.cards)) == 52

    def test_shuffle_partial_deck(self):
        """Shuffling after dealing only reorders what is left."""
        deck = Deck(random.Random(5))
        deck.deal(10)
        before = sorted(deck.cards, key=repr)
        deck.shuffle()
        assert sorted(deck.cards, key=repr) == before
        assert len(deck) == 42

    def test_deal_card_takes_top(self):
        """Dealing removes the last card and shrinks the deck by one."""
        deck = Deck(random.Random(9))
        top = deck.cards[-1]
        card = deck.deal_card()
        assert card == top
        assert len(deck) == 51
        assert card not in deck.cards

    def test_deal_monotonic(self):
        """Every deal returns a card that was in the deck and removes it."""
        deck = Deck(random.Random(11))
        seen = set()
        for expected in range(51, -1, -1):
            before = set(deck.cards)
            card = deck.deal_card()
            assert card in before
            assert card not in seen
            seen.add(card)
            assert deck.remaining == expected

    def test_deal_from_empty_deck(self):
        deck = Deck(random.Random(1))
        deck.deal(52)
        with pytest.raises(EmptyDeckError):
            deck.deal_card()
        assert len(deck) == 0

    def test_deal_too_many(self):
        """Asking for more cards than remain deals nothing."""
        deck = Deck(random.Random(1))
        deck.deal(50)
        with pytest.raises(EmptyDeckError):
            deck.deal(3)
        assert len(deck) == 2


class TestShuffleUniformity:
    """Statistical checks on the shuffle."""

    def test_all_orderings_equally_likely(self):
        """Every ordering of four cards shows up about equally often."""
        deck = Deck(random.Random(2024))
        base = deck.cards[:4]
        trials = 24000
        counts = Counter()
        for _ in range(trials):
            deck.cards = list(base)
            deck.shuffle()
            counts[tuple(deck.cards)] += 1

        assert set(counts) == set(itertools.permutations(base))
        # 23 degrees of freedom; 60 is far beyond the 0.01% tail
        assert _chi_square(counts.values(), trials / 24) < 60

    def test_card_position_uniform(self):
        """A given card lands in each of the 52 positions about equally often."""
        rng = random.Random(99)
        deck = Deck(rng)
        target = deck.cards[0]
        trials = 10400
        positions = Counter()
        for _ in range(trials):
            deck.shuffle()
            positions[deck.cards.index(target)] += 1

        observed = [positions.get(i, 0) for i in range(52)]
        # 51 degrees of freedom; 100 is far beyond the 0.01% tail
        assert _chi_square(observed, trials / 52) < 100
