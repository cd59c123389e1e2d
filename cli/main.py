"""Poker simulator CLI, a Typer-based command line interface."""

import logging
import random
from collections import Counter
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="poker-sim",
    help="Simplified multi-player poker simulator",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(level: Optional[str] = None):
    from poker_sim import config
    level_name = (level or config.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        console.print(f"[red]Unknown log level:[/red] {level_name}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config():
    from poker_sim.errors import ConfigError
    from poker_sim.models.game import GameConfig
    try:
        return GameConfig.from_env()
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)


def _report(message: str):
    console.print(message, markup=False, highlight=False)


def _prompt(message: str) -> str:
    return typer.prompt(message)


@app.command()
def play(
    player: Optional[List[str]] = typer.Option(None, "--player", "-p",
                                               help="Human player name (repeatable)"),
    ai: Optional[List[str]] = typer.Option(None, "--ai", "-a",
                                           help="Computer player name (repeatable)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    chips: Optional[int] = typer.Option(None, "--chips", help="Starting chips per player",
                                        min=0),
    strict: bool = typer.Option(False, "--strict",
                                help="Abort when a bet cannot be covered instead of folding"),
    plain: bool = typer.Option(False, "--plain", help="Plain text result instead of tables"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level"),
):
    """Play one game at the console."""
    from poker_sim import config
    from poker_sim.errors import PokerError
    from poker_sim.formatters.table import TableFormatter
    from poker_sim.formatters.text import TextFormatter
    from poker_sim.simulation.engine import PokerGame

    _setup_logging(log_level)
    game_config = _load_config()
    if seed is not None:
        game_config.seed = seed
    if chips is not None:
        game_config.starting_chips = chips
    game_config.strict_chips = strict or game_config.strict_chips

    if player or ai:
        specs = list(player or []) + [f"{name}{config.AI_MARKER}" for name in ai or []]
    else:
        specs = game_config.player_specs

    if not specs:
        console.print("[red]No players configured.[/red]")
        raise typer.Exit(1)

    game = PokerGame.from_specs(
        specs,
        game_config=game_config,
        input_provider=_prompt,
        reporter=_report,
    )

    try:
        result = game.play()
    except PokerError as e:
        console.print(f"[red]Game aborted:[/red] {e}")
        raise typer.Exit(1)

    console.print()
    if plain:
        console.print(TextFormatter().format_result(result))
    else:
        TableFormatter(console).print_result(result)


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="Cards like 2h 2d 5s 9c Kd"),
):
    """Score a hand."""
    from poker_sim.models.card import Card
    from poker_sim.simulation.evaluator import HandEvaluator

    try:
        hand = [Card.parse(c) for c in cards]
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    strength = HandEvaluator.evaluate_strength(hand)
    console.print(f"{' '.join(str(c) for c in hand)}: "
                  f"[bold]{int(strength)}[/bold] ({HandEvaluator.get_strength_name(strength)})")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-n", help="Number of games", min=1),
    players: int = typer.Option(4, "--players", help="Number of computer players",
                                min=1, max=20),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    chips: Optional[int] = typer.Option(None, "--chips", help="Starting chips per player",
                                        min=0),
):
    """Run many all-computer games and tally the winners."""
    from poker_sim import config
    from poker_sim.formatters.table import TableFormatter
    from poker_sim.simulation.engine import PokerGame

    _setup_logging()
    game_config = _load_config()
    if chips is not None:
        game_config.starting_chips = chips
    game_config.strict_chips = False

    rng = random.Random(seed if seed is not None else game_config.seed)
    specs = [f"Bot {i}{config.AI_MARKER}" for i in range(1, players + 1)]

    wins: Counter = Counter({f"Bot {i}": 0 for i in range(1, players + 1)})
    no_winner = 0
    for _ in range(games):
        result = PokerGame.from_specs(specs, game_config=game_config, rng=rng).play()
        if not result.has_winner:
            no_winner += 1
        wins.update(result.winners)

    TableFormatter(console).print_tally(dict(wins), games, no_winner)


if __name__ == "__main__":
    app()
