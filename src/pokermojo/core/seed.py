"""SeedManager — one reproducible RNG per dealt round.

Round seeds are HMAC-SHA256 digests of (mode, session, round) keyed by
the session seed, so replaying round 7 of a session never requires
dealing rounds 1-6 first, and inserting a round never reshuffles the rest.
"""

import hashlib
import hmac
import random


class SeedManager:
    """Derives per-round seeds and hands out isolated Random instances."""

    def __init__(self, session_seed: int):
        self._session_seed = session_seed

    @property
    def session_seed(self) -> int:
        return self._session_seed

    def get_round_seed(self, mode: str, session: str, round_num: int) -> int:
        key = self._session_seed.to_bytes(8, byteorder="big", signed=True)
        msg = f"{mode}:{session}:{round_num}".encode("utf-8")
        digest = hmac.new(key, msg, hashlib.sha256).digest()
        return int.from_bytes(digest[:8], byteorder="big")

    def get_rng(self, round_seed: int) -> random.Random:
        """Return an isolated Random instance. Never touches global state."""
        return random.Random(round_seed)

    def round_rng(self, mode: str, session: str, round_num: int) -> tuple[int, random.Random]:
        """Return ``(round_seed, rng)`` for one round of a session."""
        seed = self.get_round_seed(mode, session, round_num)
        return seed, self.get_rng(seed)
