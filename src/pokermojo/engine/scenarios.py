"""Curated hard-mode scenarios and the suit randomizer.

Each template is a pair of hands built to teach one comparison: a flush
decided on its fourth card, the wheel against a six-high straight, a
"straight flush" that is one suit short, and so on. Suits written in the
templates are placeholders. Only whether a hand is a flush matters;
``randomize_suits`` picks fresh concrete suits every time a template is
dealt.

The winner is not stored. It is recomputed from the re-suited cards by
the evaluator, so a template can never disagree with the rules.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass

from pokermojo.core.cards import Card, Suit, parse_cards
from pokermojo.engine.comparator import Outcome, compare
from pokermojo.engine.evaluator import evaluate

__all__ = [
    "ScenarioTemplate",
    "ScenarioDefect",
    "SCENARIOS",
    "is_flush",
    "randomize_suits",
    "resuit_template",
    "audit_library",
]

logger = logging.getLogger(__name__)

SUITS: tuple[Suit, ...] = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


@dataclass(frozen=True)
class ScenarioTemplate:
    """Two literal hands exercising one comparison edge case."""

    name: str
    hand_a: tuple[Card, ...]
    hand_b: tuple[Card, ...]


def _t(name: str, hand_a: str, hand_b: str) -> ScenarioTemplate:
    return ScenarioTemplate(name, tuple(parse_cards(hand_a)), tuple(parse_cards(hand_b)))


SCENARIOS: tuple[ScenarioTemplate, ...] = (
    _t("Flush vs flush, high card decides", "Ks Js 8s 5s 3s", "Qh Jh 9h 6h 2h"),
    _t("Flush vs flush, kicker decides", "Ad 10d 8d 4d 2d", "Ac 10c 7c 5c 3c"),
    _t("Full house vs full house, trips decide", "Js Jh Jd 4c 4s", "9s 9h 9d Ac As"),
    _t("Full house vs four of a kind", "7s 7h 7d Kc Kh", "8c 8s 8h 8d Qc"),
    _t("Straight vs straight, different high", "9s 8h 7d 6c 5s", "8s 7h 6d 5c 4s"),
    _t("Six-high straight vs wheel", "6s 5h 4d 3c 2s", "5c 4s 3h 2d Ac"),
    _t("Same pair, kicker decides", "Qs Qh Jd 8c 3s", "Qd Qc 10s 9h 4d"),
    _t("Pair vs pair, different pairs", "10s 10h Ad Kc 5s", "Js Jh 7d 4c 2s"),
    _t("Two pair, same top pair", "Ks Kh 8d 8c 3s", "Kd Kc 6s 6h Ad"),
    _t("Two pair, different top pairs", "Qs Qh 5d 5c 9s", "Jd Jc 10s 10h Ad"),
    _t("Trips vs trips", "8s 8h 8d Kc 4s", "6d 6c 6s Ah Qd"),
    _t("High card vs high card, fourth card", "As Jh 9d 6c 3s", "Ad Jc 9s 5h 4d"),
    _t("Straight flush vs flush", "8h 7h 6h 5h 4h", "As Ks Qs Js 3s"),
    _t("Straight flush vs straight flush", "9d 8d 7d 6d 5d", "7c 6c 5c 4c 3c"),
    _t("Four of a kind vs full house", "5s 5h 5d 5c 2s", "As Ah Ad Kc Ks"),
    _t("Four of a kind vs four of a kind", "9s 9h 9d 9c 3s", "7s 7h 7d 7c As"),
    _t("Low straight vs trip aces", "6s 5h 4d 3c 2s", "Ad Ac As Kh Qd"),
    _t("Flush vs broadway straight", "9h 7h 5h 3h 2h", "As Kh Qd Jc 10s"),
    _t("Flush vs flush, third card decides", "As Qs 10s 6s 2s", "Ah Qh 9h 7h 4h"),
    _t("Flush vs flush, fourth card decides", "Kd Jd 9d 7d 3d", "Kc Jc 9c 5c 4c"),
    _t("Broadway vs king-high straight", "As Kh Qd Jc 10s", "Kd Qc Js 10h 9d"),
    _t("Queen-high vs jack-high straight", "Qs Jh 10d 9c 8s", "Jd 10c 9s 8h 7d"),
    _t("Seven-high straight vs wheel", "7s 6h 5d 4c 3s", "5c 4s 3h 2d Ac"),
    _t("Same two pair, kicker decides", "As Ah 9d 9c Ks", "Ad Ac 9s 9h Qd"),
    _t("Aces up vs kings up", "As Ah 4d 4c 7s", "Kd Kc Qs Qh Jd"),
    _t("Low two pair vs low two pair", "6s 6h 4d 4c As", "5d 5c 3s 3h Kd"),
    _t("Pair of aces, second kicker decides", "As Ah Kd 10c 4s", "Ad Ac Ks 9h 5d"),
    _t("Low pairs, last kicker decides", "3s 3h Ad Kc Qs", "3d 3c As Kh Jd"),
    _t("Consecutive pairs, same kickers", "8s 8h Ad Kc Qs", "7d 7c As Kh Qd"),
    _t("Trips close in rank", "10s 10h 10d 5c 2s", "9d 9c 9s Ah Kd"),
    _t("Trip aces vs trip kings", "As Ah Ad 4c 2s", "Kd Kc Ks Qh Jd"),
    _t("Ace high, second card decides", "As Kh 8d 5c 3s", "Ad Qc Js 10h 4d"),
    _t("King high vs king high", "Ks Qh 10d 6c 2s", "Kd Qc 9s 7h 3d"),
    _t("High card, fifth card decides", "As Jh 9d 7c 4s", "Ad Jc 9s 7h 3d"),
    _t("Kings full vs queens full", "Ks Kh Kd 6c 6s", "Qd Qc Qs Ah Ad"),
    _t("Threes full of aces vs twos full of kings", "3s 3h 3d Ac As", "2d 2c 2s Kh Kd"),
    _t("Steel wheel vs broadway straight", "5h 4h 3h 2h Ah", "As Kh Qd Jc 10s"),
    _t("Low quads vs lower quads", "4s 4h 4d 4c As", "3d 3c 3s 3h Kd"),
    _t("Small full house vs big flush", "6s 6h 6d 2c 2s", "Ac Kc Qc Jc 9c"),
    _t("Small two pair vs pair of aces", "5s 5h 3d 3c 2s", "Ad Ac Ks Qh Jd"),
    _t("Pair of twos vs ace high", "2s 2h 7d 5c 3s", "Ad Kc Qs Jh 9d"),
    _t("Small trips vs big two pair", "4s 4h 4d 3c 2s", "Ad Ac Ks Kh Qd"),
    _t("Off-suit straight vs flush", "9h 8h 7h 6h 5s", "Ad Kd Jd 8d 3d"),
    _t("Gapped flush vs straight", "Jc 10c 8c 7c 6c", "10s 9h 8d 7c 6s"),
)


@dataclass(frozen=True)
class ScenarioDefect:
    """A template that fails to teach a single, stable answer."""

    scenario: str
    reason: str


def is_flush(cards: tuple[Card, ...] | list[Card]) -> bool:
    """True if every card shares one suit."""
    return len({c.suit for c in cards}) == 1


def randomize_suits(
    cards: tuple[Card, ...] | list[Card],
    flush: bool,
    rng: random.Random,
) -> list[Card]:
    """Reassign suits, keeping ranks and flush-ness.

    A required flush gets one random suit for all five cards. Otherwise
    each card takes a suit not yet used by its rank in this hand (so no
    duplicate cards appear), and an accidental five-of-a-suit is broken
    by recoloring one card.
    """
    if flush:
        suit = rng.choice(SUITS)
        return [Card(c.rank, suit) for c in cards]

    used: dict[int, set[Suit]] = {}
    result: list[Card] = []
    for card in cards:
        taken = used.setdefault(card.rank, set())
        available = [s for s in SUITS if s not in taken] or list(SUITS)
        suit = rng.choice(available)
        taken.add(suit)
        result.append(Card(card.rank, suit))

    top_suit, count = Counter(c.suit for c in result).most_common(1)[0]
    if count >= 5:
        # five of one suit means five distinct ranks; recoloring can't duplicate
        index = next(i for i, c in enumerate(result) if c.suit == top_suit)
        other = rng.choice([s for s in SUITS if s != top_suit])
        result[index] = Card(result[index].rank, other)
    return result


def resuit_template(
    template: ScenarioTemplate, rng: random.Random
) -> tuple[list[Card], list[Card]]:
    """Re-suit both hands of a template, preserving each hand's flush-ness."""
    cards_a = randomize_suits(template.hand_a, is_flush(template.hand_a), rng)
    cards_b = randomize_suits(template.hand_b, is_flush(template.hand_b), rng)
    return cards_a, cards_b


def audit_library(
    rng: random.Random,
    trials: int = 50,
    scenarios: tuple[ScenarioTemplate, ...] = SCENARIOS,
) -> list[ScenarioDefect]:
    """Re-suit every template ``trials`` times and report what goes wrong.

    A template is defective if re-suiting changes a hand's category, if
    its hands tie, or if the winning side depends on the suits drawn.
    """
    defects: list[ScenarioDefect] = []
    for template in scenarios:
        literal_a = evaluate(template.hand_a)
        literal_b = evaluate(template.hand_b)
        expected = compare(literal_a, literal_b)
        reasons: set[str] = set()
        if expected is Outcome.TIE:
            reasons.add("hands tie")

        for _ in range(trials):
            cards_a, cards_b = resuit_template(template, rng)
            hand_a, hand_b = evaluate(cards_a), evaluate(cards_b)
            if hand_a.category != literal_a.category:
                reasons.add(f"hand A became {hand_a.name}, expected {literal_a.name}")
            if hand_b.category != literal_b.category:
                reasons.add(f"hand B became {hand_b.name}, expected {literal_b.name}")
            outcome = compare(hand_a, hand_b)
            if outcome is Outcome.TIE:
                reasons.add("re-suited hands tie")
            elif outcome is not expected:
                reasons.add("winner depends on suits")

        for reason in sorted(reasons):
            logger.error("Scenario %r is defective: %s", template.name, reason)
            defects.append(ScenarioDefect(template.name, reason))
    return defects
