"""Total ordering between two evaluated hands."""

from __future__ import annotations

from enum import Enum

from pokermojo.engine.evaluator import EvaluatedHand

__all__ = ["Outcome", "compare"]


class Outcome(Enum):
    FIRST_WINS = "first"
    SECOND_WINS = "second"
    TIE = "tie"

    def mirror(self) -> Outcome:
        """The outcome seen with the two hands swapped."""
        if self is Outcome.FIRST_WINS:
            return Outcome.SECOND_WINS
        if self is Outcome.SECOND_WINS:
            return Outcome.FIRST_WINS
        return Outcome.TIE


def compare(first: EvaluatedHand, second: EvaluatedHand) -> Outcome:
    """Compare category, then tiebreak keys left to right.

    Keys of equal categories have equal length, so the first differing
    position decides.
    """
    if first.category != second.category:
        return Outcome.FIRST_WINS if first.category > second.category else Outcome.SECOND_WINS

    for a, b in zip(first.key, second.key):
        if a != b:
            return Outcome.FIRST_WINS if a > b else Outcome.SECOND_WINS
    return Outcome.TIE
