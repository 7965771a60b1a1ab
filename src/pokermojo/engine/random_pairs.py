"""Random hand-pair generator.

Deals two disjoint hands off a freshly shuffled deck and keeps only
pairs whose categories differ (so a standard round is always decided by
category, never by kickers). Rejected pairs are redealt from a new deck.

Rejection is capped at ``max_attempts`` deals. Past the cap the
different-category constraint is dropped and only ties are rejected,
so a winner always exists. With the default cap the relaxed path is
practically unreachable: fewer than half of random pairs share a category.
"""

from __future__ import annotations

import logging
import random

from pokermojo.core.cards import shuffled_deck
from pokermojo.engine.comparator import Outcome, compare
from pokermojo.engine.evaluator import EvaluatedHand, evaluate

__all__ = ["DEFAULT_MAX_ATTEMPTS", "deal_two", "generate_random_pair"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


def deal_two(rng: random.Random) -> tuple[EvaluatedHand, EvaluatedHand]:
    """Deal and evaluate two 5-card hands from one shuffled deck."""
    deck = shuffled_deck(rng)
    return evaluate(deck[:5]), evaluate(deck[5:10])


def generate_random_pair(
    rng: random.Random,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> tuple[EvaluatedHand, EvaluatedHand, Outcome]:
    """Return ``(hand_a, hand_b, outcome)``; outcome is never TIE.

    The two hands differ in category unless ``max_attempts`` strict deals
    were all rejected.
    """
    if max_attempts < 0:
        raise ValueError(f"max_attempts must be >= 0, got {max_attempts}")
    for attempt in range(1, max_attempts + 1):
        hand_a, hand_b = deal_two(rng)
        outcome = compare(hand_a, hand_b)
        if outcome is not Outcome.TIE and hand_a.category != hand_b.category:
            return hand_a, hand_b, outcome
        logger.debug(
            "Rejected deal %d: %s vs %s (%s)",
            attempt, hand_a.name, hand_b.name, outcome.value,
        )

    logger.warning(
        "No different-category pair in %d deals; accepting any non-tied pair",
        max_attempts,
    )
    while True:
        hand_a, hand_b = deal_two(rng)
        outcome = compare(hand_a, hand_b)
        if outcome is not Outcome.TIE:
            return hand_a, hand_b, outcome
