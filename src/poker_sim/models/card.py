"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "h": cls.HEARTS, "hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "clubs": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "spades": cls.SPADES, "♠": cls.SPADES,
        }
        key = s.lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}[self.value]

    @property
    def full_name(self) -> str:
        return self.name.capitalize()


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def label(self) -> str:
        return "10" if self is Rank.TEN else self.value

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        if c == "10":
            return cls.TEN
        for r in cls:
            if r.value == c.upper():
                return r
        raise ValueError(f"Unknown rank: {c}")


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10s' or '2C'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @property
    def name(self) -> str:
        """Long form, e.g. 'K of Diamonds'."""
        return f"{self.rank.label} of {self.suit.full_name}"

    def __repr__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"
