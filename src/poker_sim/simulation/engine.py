"""Poker game orchestration: deal, bet, reveal, showdown."""

import logging
import random
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from poker_sim import config
from poker_sim.agents.factory import AgentFactory
from poker_sim.agents.interactive import InputProvider
from poker_sim.models.action import PlayerAction, Street
from poker_sim.models.card import Card
from poker_sim.models.game import GameConfig, GamePhase, GameResult, PlayerScore
from poker_sim.models.player import Player
from poker_sim.simulation.betting import BettingEngine
from poker_sim.simulation.deck import Deck
from poker_sim.simulation.evaluator import HandEvaluator
from poker_sim.simulation.pot import Pot

logger = logging.getLogger(__name__)

# Cards revealed before each post-flop betting round
REVEALS = [
    (Street.FLOP, GamePhase.FLOP, config.FLOP_CARDS, "Flop"),
    (Street.TURN, GamePhase.TURN, config.TURN_CARDS, "Turn"),
    (Street.RIVER, GamePhase.RIVER, config.RIVER_CARDS, "River"),
]


class PokerGame:
    """One game of simplified poker among a fixed list of players."""

    def __init__(
        self,
        players: Sequence[Player],
        game_config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        agents: Optional[AgentFactory] = None,
        input_provider: Optional[InputProvider] = None,
        reporter: Optional[Callable[[str], None]] = None,
    ):
        """Initialize the game.

        Args:
            players: Players in seat order. Betting always follows this order.
            game_config: Table settings; only ``seed`` and ``strict_chips`` are read here.
            rng: Random source for the deck and the computer agent. Built
                from ``game_config.seed`` if omitted.
            agents: Decision strategies. Built from ``rng`` and ``input_provider`` if omitted.
            input_provider: Typed input for human players.
            reporter: Receives every status line as it happens.
        """
        self.config = game_config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.players: List[Player] = list(players)
        self.reporter = reporter

        self.deck = Deck(self.rng)
        self.pot = Pot()
        self.evaluator = HandEvaluator()
        self.betting = BettingEngine(
            agents or AgentFactory(self.rng, input_provider),
            strict=self.config.strict_chips,
            on_action=self._on_action,
        )

        self.community_cards: List[Card] = []
        self.phase = GamePhase.WAITING
        self.action_history: List[str] = []

    @classmethod
    def from_specs(cls, specs: Iterable[str], game_config: Optional[GameConfig] = None,
                   **kwargs) -> "PokerGame":
        """Create a game from player specs like ``"Alice"`` and ``"Bob*"`` (computer)."""
        game_config = game_config or GameConfig()
        players = [Player.from_spec(s, chips=game_config.starting_chips)
                   for s in specs if s.strip()]
        return cls(players, game_config=game_config, **kwargs)

    @property
    def actions(self) -> List[PlayerAction]:
        return self.betting.actions

    def deal_hands(self):
        """Deal hole cards one at a time around the table."""
        for _ in range(config.HOLE_CARDS):
            for player in self.players:
                player.receive_card(self.deck.deal_card())
        logger.debug("Dealt hole cards, %d left in deck", self.deck.remaining)

    def deal_community_cards(self, count: int):
        self.community_cards.extend(self.deck.deal(count))

    def show_community_cards(self) -> str:
        return ", ".join(card.name for card in self.community_cards)

    def betting_round(self, street: Street):
        self._add_action_log(f"Starting the {street.value} betting round")
        self.betting.run_round(self.players, self.pot, street)

    def showdown(self) -> Tuple[List[PlayerScore], List[Player]]:
        """Score the remaining players and report the winners.

        Returns:
            Scores of in-game players and the winning players. Both are
            empty if everyone folded.
        """
        self.phase = GamePhase.SHOWDOWN
        winners = self.evaluator.get_winners(self.players)
        scores = []
        for player in self.players:
            if not player.in_game:
                continue
            strength = self.evaluator.evaluate_strength(player.hand)
            scores.append(PlayerScore(
                name=player.name,
                hand=player.hand,
                strength=int(strength),
                chips=player.chips,
                is_winner=any(player is w for w in winners),
            ))
            self._add_action_log(f"{player.name}'s hand strength: {int(strength)} "
                                 f"({self.evaluator.get_strength_name(strength)})")

        if not winners:
            self._add_action_log("Everyone folded, there is no winner")
        for winner in winners:
            self._add_action_log(f"The winner is {winner.name}")

        return scores, winners

    def play(self) -> GameResult:
        """Play a full game and return its result."""
        self.phase = GamePhase.PREFLOP
        self.deal_hands()
        for player in self.players:
            self._add_action_log(f"{player.name}'s hand: {player.show_hand()}")

        self.betting_round(Street.PREFLOP)

        for street, phase, count, label in REVEALS:
            self.phase = phase
            self.deal_community_cards(count)
            self._add_action_log(f"Dealing the {label}... "
                                 f"Community cards: {self.show_community_cards()}")
            self.betting_round(street)

        for player in self.players:
            if player.in_game:
                self._add_action_log(f"{player.name}'s final hand: {player.show_hand()}")
        self._add_action_log(f"Total pot: {self.pot.total} chips")

        scores, winners = self.showdown()
        self.phase = GamePhase.COMPLETE

        return GameResult(
            pot=self.pot.total,
            community_cards=list(self.community_cards),
            scores=scores,
            winners=[w.name for w in winners],
            actions=list(self.actions),
            action_history=list(self.action_history),
        )

    def _on_action(self, action: PlayerAction):
        self._add_action_log(str(action))

    def _add_action_log(self, message: str):
        """Add a message to the action history and pass it to the reporter."""
        logger.debug("%s", message)
        self.action_history.append(message)
        if self.reporter is not None:
            self.reporter(message)
