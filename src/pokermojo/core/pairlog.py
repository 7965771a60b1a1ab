"""PairLogger — JSONL log of generated hand pairs.

One logger per session. Writes one JSONL line per round plus a session
summary as the final line. Every line carries the schema version and
session ID. ``read_pairs`` replays a log, validating each pair record
and re-deriving its winner from the cards.
"""

import json
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path

import pokermojo
from pokermojo.core.schemas import validate_record
from pokermojo.engine.generator import GenerationResult

_SCHEMA_VERSION = "1.0.0"


class PairLogger:
    """Writes JSONL pair records for a single session."""

    def __init__(self, output_dir: Path, session_id: str):
        self._output_dir = Path(output_dir)
        self._session_id = session_id
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{session_id}.jsonl"
        # one file per session: a rerun under the same id replaces the old log
        self._file_path.unlink(missing_ok=True)
        self._sources: Counter = Counter()
        self._winning_categories: Counter = Counter()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def log_pair(
        self,
        round_num: int,
        mode: str,
        result: GenerationResult,
        seed: int | None = None,
    ) -> None:
        record = {
            "schema_version": _SCHEMA_VERSION,
            "session_id": self._session_id,
            "round": round_num,
            "mode": mode,
            "seed": seed,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "pair": result.to_dict(),
        }
        validate_record(record)
        self._sources[result.source] += 1
        self._winning_categories[result.winning_hand.category.name] += 1
        self._append(record)

    def finalize_session(self, extra: dict | None = None) -> None:
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "session_summary",
            "session_id": self._session_id,
            "rounds": sum(self._sources.values()),
            "sources": dict(self._sources),
            "winning_categories": dict(self._winning_categories),
            "engine_version": pokermojo.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if extra:
            record.update(extra)
        self._append(record)

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record) + "\n")


def read_pairs(path: Path) -> list[GenerationResult]:
    """Load every pair record from a session log, in file order.

    Summary lines are skipped. Raises jsonschema.ValidationError for a
    malformed record and ValueError for one whose stored evaluation or
    winner disagrees with its cards.
    """
    results = []
    with open(path) as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            record = json.loads(line)
            if record.get("record_type") == "session_summary":
                continue
            validate_record(record)
            results.append(GenerationResult.from_dict(record["pair"]))
    return results
