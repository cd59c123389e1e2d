"""Shared fixtures for poker-sim tests."""

import random

import pytest

from poker_sim.models.player import Player


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def players():
    return [Player("Alice"), Player("Cat"), Player("Dog"), Player("Bob (AI)", is_ai=True)]
