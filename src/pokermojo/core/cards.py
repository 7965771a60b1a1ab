"""Card model and deck.

Cards are immutable values: two cards are equal iff rank and suit match.
The deck is rebuilt fresh for every deal and shuffled with the caller's RNG.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from enum import Enum, IntEnum

__all__ = [
    "Rank",
    "Suit",
    "Card",
    "parse_card",
    "parse_cards",
    "full_deck",
    "shuffled_deck",
]


class Rank(IntEnum):
    """Card ranks, Ace high. Value is the rank's numeric strength."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        return _RANK_SYMBOLS[self]


_RANK_SYMBOLS: dict[Rank, str] = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# "T" is accepted on input as the usual one-letter ten
_RANK_BY_SYMBOL: dict[str, Rank] = {s: r for r, s in _RANK_SYMBOLS.items()}
_RANK_BY_SYMBOL["T"] = Rank.TEN


class Suit(Enum):
    """The four suits. Equality only; suits never rank against each other."""

    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"

    @property
    def glyph(self) -> str:
        return _SUIT_GLYPHS[self]


_SUIT_GLYPHS: dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

_SUIT_BY_CODE: dict[str, Suit] = {s.value: s for s in Suit}
_SUIT_BY_CODE.update({g: s for s, g in _SUIT_GLYPHS.items()})


@dataclass(frozen=True)
class Card:
    """A playing card with rank and suit."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.value}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def display(self) -> str:
        """Rank symbol plus suit glyph, e.g. ``A♠``."""
        return f"{self.rank.symbol}{self.suit.glyph}"


def parse_card(text: str) -> Card:
    """Parse ``'Ah'``, ``'Th'``, ``'10h'`` or ``'A♥'`` into a Card."""
    text = text.strip()
    if len(text) < 2:
        raise ValueError(f"Not a card: {text!r}")
    rank_part, suit_part = text[:-1].upper(), text[-1].lower()
    rank = _RANK_BY_SYMBOL.get(rank_part)
    if rank is None:
        raise ValueError(f"Unknown rank in {text!r}")
    suit = _SUIT_BY_CODE.get(suit_part)
    if suit is None:
        raise ValueError(f"Unknown suit in {text!r}")
    return Card(rank=rank, suit=suit)


def parse_cards(text: str) -> list[Card]:
    """Parse a whitespace- or comma-separated list: ``'As Kd 10c'``."""
    return [parse_card(tok) for tok in re.split(r"[\s,]+", text.strip()) if tok]


def full_deck() -> list[Card]:
    """Return the 52 unique cards in canonical (suit-major) order."""
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def shuffled_deck(rng: random.Random) -> list[Card]:
    """Return a freshly built deck in uniformly random order."""
    deck = full_deck()
    rng.shuffle(deck)
    return deck
