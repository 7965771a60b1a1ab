"""SessionDealer — deals a reproducible batch of rounds from a config.

Each round gets its own HMAC-derived seed, so any round of a session can
be re-dealt on its own. Optionally logs every pair to JSONL.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pokermojo.config import SessionConfig, validate_config
from pokermojo.core.pairlog import PairLogger
from pokermojo.core.seed import SeedManager
from pokermojo.engine.generator import GenerationResult, generate_pair


@dataclass
class DealtRound:
    """One dealt round and the seed that reproduces it."""

    round_num: int
    seed: int
    result: GenerationResult


@dataclass
class SessionResult:
    rounds: list[DealtRound]
    log_path: Path | None = None


class SessionDealer:
    """Deals the rounds described by a SessionConfig."""

    def __init__(self, config: SessionConfig) -> None:
        validate_config(config)
        self.config = config
        self.seed_mgr = SeedManager(config.seed)

    def deal_round(self, round_num: int) -> DealtRound:
        """Deal a single round. Same config + round number, same hands."""
        seed, rng = self.seed_mgr.round_rng(
            self.config.mode.value, self.config.name, round_num
        )
        result = generate_pair(
            self.config.mode,
            rng,
            max_random_attempts=self.config.generator.max_random_attempts,
            scenario_share=self.config.generator.scenario_share,
        )
        return DealtRound(round_num=round_num, seed=seed, result=result)

    def run(self) -> SessionResult:
        """Deal every round, logging to ``output_dir`` when configured."""
        pair_log = None
        if self.config.output_dir:
            pair_log = PairLogger(self.config.output_dir, self.config.name)

        rounds: list[DealtRound] = []
        for round_num in range(1, self.config.rounds + 1):
            dealt = self.deal_round(round_num)
            rounds.append(dealt)
            if pair_log:
                pair_log.log_pair(
                    round_num, self.config.mode.value, dealt.result, seed=dealt.seed
                )

        if pair_log:
            pair_log.finalize_session(
                extra={"mode": self.config.mode.value, "session_seed": self.config.seed}
            )
        return SessionResult(
            rounds=rounds,
            log_path=pair_log.file_path if pair_log else None,
        )
