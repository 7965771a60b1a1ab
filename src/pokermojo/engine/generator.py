"""Top-level hand-pair generator.

``generate_pair`` is the one entry point a game loop calls per round.
Standard mode always deals random pairs that differ in category. Hard
mode flips a coin between a curated scenario (re-suited, randomly
mirrored, card order shuffled) and a random pair.

The returned winner is always side A or side B, never a tie.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from pokermojo.engine.comparator import Outcome, compare
from pokermojo.engine.evaluator import EvaluatedHand, evaluate
from pokermojo.engine.random_pairs import DEFAULT_MAX_ATTEMPTS, generate_random_pair
from pokermojo.engine.scenarios import SCENARIOS, resuit_template

__all__ = ["Mode", "Side", "GenerationResult", "generate_pair"]

logger = logging.getLogger(__name__)

SOURCE_RANDOM = "random"
SOURCE_SCENARIO = "scenario"


class Mode(Enum):
    """Difficulty modes."""

    STANDARD = "standard"
    HARD = "hard"


class Side(Enum):
    A = "A"
    B = "B"


@dataclass(frozen=True)
class GenerationResult:
    """One round's pair of hands and which side wins."""

    hand_a: EvaluatedHand
    hand_b: EvaluatedHand
    winner: Side
    source: str = SOURCE_RANDOM
    scenario: str | None = None

    @property
    def winning_hand(self) -> EvaluatedHand:
        return self.hand_a if self.winner is Side.A else self.hand_b

    @property
    def losing_hand(self) -> EvaluatedHand:
        return self.hand_b if self.winner is Side.A else self.hand_a

    def to_dict(self) -> dict:
        return {
            "hand_a": self.hand_a.to_dict(),
            "hand_b": self.hand_b.to_dict(),
            "winner": self.winner.value,
            "source": self.source,
            "scenario": self.scenario,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GenerationResult:
        """Rebuild a result, re-deriving the winner from the cards.

        Raises ValueError if the stored winner is wrong.
        """
        hand_a = EvaluatedHand.from_dict(data["hand_a"])
        hand_b = EvaluatedHand.from_dict(data["hand_b"])
        winner = _winner_side(compare(hand_a, hand_b))
        if winner is None or winner.value != data["winner"]:
            raise ValueError(
                f"Stored winner {data['winner']!r} does not match "
                f"{hand_a.name} vs {hand_b.name}"
            )
        return cls(
            hand_a=hand_a,
            hand_b=hand_b,
            winner=winner,
            source=data.get("source", SOURCE_RANDOM),
            scenario=data.get("scenario"),
        )


def _winner_side(outcome: Outcome) -> Side | None:
    if outcome is Outcome.FIRST_WINS:
        return Side.A
    if outcome is Outcome.SECOND_WINS:
        return Side.B
    return None


def _random_result(rng: random.Random, max_attempts: int) -> GenerationResult:
    hand_a, hand_b, outcome = generate_random_pair(rng, max_attempts)
    return GenerationResult(hand_a, hand_b, _winner_side(outcome), SOURCE_RANDOM)


def _scenario_result(rng: random.Random) -> GenerationResult | None:
    template = rng.choice(SCENARIOS)
    cards_a, cards_b = resuit_template(template, rng)

    # mirror half the time so the template's side never hints the answer
    if rng.random() < 0.5:
        cards_a, cards_b = cards_b, cards_a

    rng.shuffle(cards_a)
    rng.shuffle(cards_b)

    hand_a, hand_b = evaluate(cards_a), evaluate(cards_b)
    winner = _winner_side(compare(hand_a, hand_b))
    if winner is None:
        logger.error("Scenario %r produced a tie; dealing a random pair", template.name)
        return None
    logger.debug("Scenario %r: %s vs %s", template.name, hand_a.name, hand_b.name)
    return GenerationResult(hand_a, hand_b, winner, SOURCE_SCENARIO, template.name)


def generate_pair(
    mode: Mode,
    rng: random.Random | None = None,
    *,
    max_random_attempts: int = DEFAULT_MAX_ATTEMPTS,
    scenario_share: float = 0.5,
) -> GenerationResult:
    """Produce one round's hands.

    Parameters
    ----------
    mode : Mode
        STANDARD deals random different-category pairs only. HARD uses a
        curated scenario with probability ``scenario_share``.
    rng : random.Random, optional
        Source of all randomness for this call. A private OS-seeded
        instance is created when omitted; global ``random`` is never used.
    max_random_attempts : int
        Strict rejection-sampling cap for random pairs.
    scenario_share : float
        Hard-mode probability of dealing a scenario (0.5 = fair coin).
    """
    if rng is None:
        rng = random.Random()

    if mode is Mode.HARD and rng.random() < scenario_share:
        result = _scenario_result(rng)
        if result is not None:
            return result

    return _random_result(rng, max_random_attempts)
