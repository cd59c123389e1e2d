"""Exception types raised by the poker simulation."""


class PokerError(Exception):
    """Base class for all poker simulation errors."""


class InsufficientChipsError(PokerError):
    """A bet asked for more chips than the player holds."""

    def __init__(self, player_name: str, amount: int, chips: int):
        self.player_name = player_name
        self.amount = amount
        self.chips = chips
        super().__init__(
            f"{player_name} cannot bet {amount} chips, only {chips} available"
        )


class InvalidBetError(PokerError, ValueError):
    """A bet amount was negative."""


class EmptyDeckError(PokerError):
    """Tried to deal from a deck with no cards left."""


class ConfigError(PokerError, ValueError):
    """An environment setting could not be parsed."""
