"""Hand evaluation, comparison and pair generation.

Usage:
    from pokermojo.engine import Mode, generate_pair

    result = generate_pair(Mode.HARD, rng)
    print(result.hand_a.name, result.hand_b.name, result.winner)
"""

from .comparator import Outcome, compare
from .evaluator import Category, EvaluatedHand, evaluate
from .generator import GenerationResult, Mode, Side, generate_pair

__all__ = [
    "Category",
    "EvaluatedHand",
    "evaluate",
    "Outcome",
    "compare",
    "GenerationResult",
    "Mode",
    "Side",
    "generate_pair",
]
