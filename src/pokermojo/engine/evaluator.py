"""Five-card poker hand evaluator.

Classifies a hand into one of ten categories plus a tiebreak key.
Hands of the same category always carry keys of the same length, so
two keys of one category compare position by position.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from pokermojo.core.cards import Card, Rank, Suit, parse_card

__all__ = ["Category", "EvaluatedHand", "evaluate", "WHEEL"]

WHEEL = (14, 5, 4, 3, 2)


class Category(IntEnum):
    """Hand categories ordered from weakest to strongest."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def key_length(self) -> int:
        """Number of integers in this category's tiebreak key."""
        return _KEY_LENGTHS[self]


_LABELS: dict[Category, str] = {
    Category.HIGH_CARD: "High Card",
    Category.PAIR: "Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.ROYAL_FLUSH: "Royal Flush",
}

_KEY_LENGTHS: dict[Category, int] = {
    Category.HIGH_CARD: 5,
    Category.PAIR: 4,
    Category.TWO_PAIR: 3,
    Category.THREE_OF_A_KIND: 3,
    Category.STRAIGHT: 1,
    Category.FLUSH: 5,
    Category.FULL_HOUSE: 2,
    Category.FOUR_OF_A_KIND: 2,
    Category.STRAIGHT_FLUSH: 1,
    Category.ROYAL_FLUSH: 1,
}


@dataclass(frozen=True)
class EvaluatedHand:
    """Five cards with their category and tiebreak key.

    ``cards`` keeps the order the hand was dealt/displayed in.
    """

    cards: tuple[Card, ...]
    category: Category
    key: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.key) != self.category.key_length:
            raise ValueError(
                f"{self.category.label} key must have {self.category.key_length} "
                f"values, got {list(self.key)}"
            )

    @property
    def name(self) -> str:
        return self.category.label

    def to_dict(self) -> dict:
        return {
            "cards": [str(c) for c in self.cards],
            "category": self.category.name,
            "key": list(self.key),
        }

    @classmethod
    def from_dict(cls, data: dict) -> EvaluatedHand:
        """Rebuild from ``to_dict`` output, re-evaluating the cards.

        Raises ValueError if the stored category or key disagrees with
        what the cards actually evaluate to.
        """
        hand = evaluate([parse_card(c) for c in data["cards"]])
        if hand.category.name != data["category"] or list(hand.key) != list(data["key"]):
            raise ValueError(
                f"Stored evaluation {data['category']} {data['key']} does not match "
                f"{hand.category.name} {list(hand.key)} for {data['cards']}"
            )
        return hand


def _is_flush(cards: list[Card]) -> bool:
    """Check if all five cards share the same suit."""
    suits: set[Suit] = {c.suit for c in cards}
    return len(suits) == 1


def _is_straight(values: list[int]) -> bool:
    """Check if descending values are consecutive, or exactly the wheel."""
    if tuple(values) == WHEEL:
        return True
    return all(a - b == 1 for a, b in zip(values, values[1:]))


def evaluate(cards: list[Card] | tuple[Card, ...]) -> EvaluatedHand:
    """Classify a 5-card hand.

    Raises ValueError for anything other than five distinct cards.
    """
    cards = tuple(cards)
    if len(cards) != 5:
        raise ValueError(f"Expected 5 cards, got {len(cards)}")
    if len(set(cards)) != 5:
        raise ValueError(f"Duplicate card in {list(cards)}")

    ordered = sorted(cards, key=lambda c: c.rank, reverse=True)
    values = [int(c.rank) for c in ordered]
    flush = _is_flush(ordered)
    straight = _is_straight(values)
    straight_high = Rank.FIVE if tuple(values) == WHEEL else values[0]

    # (count desc, value desc): groups first, higher rank wins ties in count
    groups = sorted(Counter(values).items(), key=lambda g: (g[1], g[0]), reverse=True)
    counts = [g[1] for g in groups]
    group_values = [g[0] for g in groups]

    if flush and straight:
        if values[0] == Rank.ACE and values[1] == Rank.KING:
            return EvaluatedHand(cards, Category.ROYAL_FLUSH, (int(Rank.ACE),))
        return EvaluatedHand(cards, Category.STRAIGHT_FLUSH, (int(straight_high),))

    if counts[0] == 4:
        return EvaluatedHand(cards, Category.FOUR_OF_A_KIND, tuple(group_values[:2]))

    if counts[0] == 3 and counts[1] == 2:
        return EvaluatedHand(cards, Category.FULL_HOUSE, tuple(group_values[:2]))

    if flush:
        return EvaluatedHand(cards, Category.FLUSH, tuple(values))

    if straight:
        return EvaluatedHand(cards, Category.STRAIGHT, (int(straight_high),))

    # group order already yields [group ranks..., kickers descending]
    if counts[0] == 3:
        return EvaluatedHand(cards, Category.THREE_OF_A_KIND, tuple(group_values))

    if counts[0] == 2 and counts[1] == 2:
        return EvaluatedHand(cards, Category.TWO_PAIR, tuple(group_values))

    if counts[0] == 2:
        return EvaluatedHand(cards, Category.PAIR, tuple(group_values))

    return EvaluatedHand(cards, Category.HIGH_CARD, tuple(values))
