"""Tests for full game orchestration."""

import random

import pytest

from poker_sim.errors import InsufficientChipsError
from poker_sim.models.action import Decision
from poker_sim.models.game import GameConfig, GamePhase
from poker_sim.models.player import Player
from poker_sim.simulation.engine import PokerGame

from .helpers import deal, scripted


def _ai_players(count=4, chips=100):
    return [Player(f"Bot {i}", is_ai=True, chips=chips) for i in range(1, count + 1)]


class TestDealing:
    """Tests for hole and community cards."""

    def test_deal_hands(self, players, rng):
        game = PokerGame(players, rng=rng)
        game.deal_hands()
        assert all(len(p.hand) == 2 for p in players)
        assert game.deck.remaining == 44

    def test_deal_alternates_players(self, players, rng):
        """One card to each player, then a second round."""
        game = PokerGame(players, rng=rng)
        order = list(reversed(game.deck.cards[-8:]))
        game.deal_hands()
        assert [p.hand[0] for p in players] == order[:4]
        assert [p.hand[1] for p in players] == order[4:]

    def test_community_cards(self, players, rng):
        game = PokerGame(players, rng=rng)
        game.deal_community_cards(3)
        game.deal_community_cards(1)
        assert len(game.community_cards) == 4
        assert game.deck.remaining == 48
        assert game.show_community_cards().count(" of ") == 4


class TestPlay:
    """Tests for PokerGame.play."""

    def test_full_game(self, rng):
        players = _ai_players()
        result = PokerGame(players, rng=rng).play()

        assert len(result.community_cards) == 5
        assert all(len(p.hand) == 2 for p in players)
        assert all(p.current_bet == 0 for p in players)
        assert result.pot == 400 - sum(p.chips for p in players)
        assert result.winners

    def test_cards_never_duplicated(self, rng):
        players = _ai_players()
        game = PokerGame(players, rng=rng)
        result = game.play()
        dealt = [c for p in players for c in p.hand] + result.community_cards
        assert len(set(dealt)) == 13
        assert not set(dealt) & set(game.deck.cards)
        assert game.deck.remaining == 39

    def test_phase_complete(self, rng):
        game = PokerGame(_ai_players(), rng=rng)
        assert game.phase == GamePhase.WAITING
        game.play()
        assert game.phase == GamePhase.COMPLETE

    def test_seeded_games_repeat(self):
        first = PokerGame(_ai_players(), game_config=GameConfig(seed=7)).play()
        second = PokerGame(_ai_players(), game_config=GameConfig(seed=7)).play()
        assert first.action_history == second.action_history
        assert first.winners == second.winners

    def test_four_betting_rounds(self, players, rng):
        game = PokerGame(players, rng=rng, agents=scripted([]))
        game.play()
        starts = [m for m in game.action_history if m.startswith("Starting the")]
        assert starts == [
            "Starting the preflop betting round",
            "Starting the flop betting round",
            "Starting the turn betting round",
            "Starting the river betting round",
        ]

    def test_reporter_receives_history(self, players, rng):
        lines = []
        game = PokerGame(players, rng=rng, agents=scripted([]), reporter=lines.append)
        game.play()
        assert lines == game.action_history
        assert "Total pot: 0 chips" in lines

    def test_everyone_folds(self, rng):
        """All humans without input fold; there is no winner and nothing raises."""
        players = [Player("Alice"), Player("Cat")]
        result = PokerGame(players, rng=rng).play()
        assert result.winners == []
        assert result.scores == []
        assert not result.has_winner
        assert result.best_strength is None
        assert "Everyone folded, there is no winner" in result.action_history

    def test_pot_accumulates_across_rounds(self, players, rng):
        """One raise of 10 per round, everyone calls: 4 rounds x 4 players x 10."""
        decisions = []
        for _ in range(4):
            decisions += [Decision.raise_by(10), Decision.call(), Decision.call(), Decision.call()]
        result = PokerGame(players, rng=rng, agents=scripted(decisions)).play()
        assert result.pot == 160
        assert all(p.chips == 60 for p in players)
        assert len(result.actions) == 16

    def test_strict_mode_aborts(self, rng):
        players = [Player("Alice"), Player("Cat", chips=5)]
        game = PokerGame(players, game_config=GameConfig(strict_chips=True), rng=rng,
                         agents=scripted([Decision.raise_by(10)]))
        with pytest.raises(InsufficientChipsError):
            game.play()
        assert game.pot.total == 10


class TestShowdown:
    """Tests for PokerGame.showdown."""

    def test_ties_reported(self, rng):
        a = deal(Player("A"), "2h 3d")
        b = deal(Player("B"), "4h 4d")
        c = deal(Player("C"), "9s 9c")
        game = PokerGame([a, b, c], rng=rng)
        scores, winners = game.showdown()
        assert [s.strength for s in scores] == [1, 2, 2]
        assert winners == [b, c]
        assert [s.is_winner for s in scores] == [False, True, True]
        assert game.action_history[-2:] == ["The winner is B", "The winner is C"]

    def test_community_cards_not_scored(self, rng):
        """Board cards never pair with hole cards."""
        a = deal(Player("A"), "Ah Kd")
        b = deal(Player("B"), "2h 3d")
        game = PokerGame([a, b], rng=rng)
        game.community_cards.extend(a.hand)
        scores, winners = game.showdown()
        assert [s.strength for s in scores] == [1, 1]
        assert winners == [a, b]


class TestFromSpecs:
    """Tests for building a game from player specs."""

    def test_specs(self):
        game = PokerGame.from_specs(["Alice", "Bob*", " "],
                                    game_config=GameConfig(starting_chips=50, seed=1))
        assert [p.name for p in game.players] == ["Alice", "Bob"]
        assert [p.is_ai for p in game.players] == [False, True]
        assert all(p.chips == 50 for p in game.players)

    def test_same_rng_gives_different_games(self):
        rng = random.Random(5)
        one = PokerGame.from_specs(["A*", "B*"], rng=rng)
        two = PokerGame.from_specs(["A*", "B*"], rng=rng)
        assert one.deck.cards != two.deck.cards
