"""Session configuration loader."""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path

from pokermojo.engine.generator import Mode
from pokermojo.engine.random_pairs import DEFAULT_MAX_ATTEMPTS

SEED_ENV = "POKERMOJO_SEED"


@dataclass
class GeneratorConfig:
    max_random_attempts: int = DEFAULT_MAX_ATTEMPTS
    scenario_share: float = 0.5  # hard mode only


@dataclass
class SessionConfig:
    name: str
    seed: int
    mode: Mode = Mode.STANDARD
    rounds: int = 20
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    output_dir: Path | None = None


def parse_mode(value: str) -> Mode:
    try:
        return Mode(str(value).lower())
    except ValueError:
        raise ValueError(
            f"Unknown mode {value!r}; expected one of {[m.value for m in Mode]}"
        ) from None


def validate_config(config: SessionConfig) -> None:
    """Raise ValueError for settings no session can be dealt with."""
    if config.rounds < 1:
        raise ValueError(f"session.rounds must be at least 1, got {config.rounds}")
    share = config.generator.scenario_share
    if not 0.0 <= share <= 1.0:
        raise ValueError(f"generator.scenario_share must be within [0, 1], got {share}")
    attempts = config.generator.max_random_attempts
    if attempts < 0:
        raise ValueError(f"generator.max_random_attempts must be >= 0, got {attempts}")


def load_config(path: Path) -> SessionConfig:
    """Load session config from YAML file.

    ``$POKERMOJO_SEED``, when set, overrides ``session.seed``.
    """
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    s = raw.get("session", {})
    gen = raw.get("generator", {})
    log = raw.get("logging", {})

    seed = s.get("seed", 0)
    if os.environ.get(SEED_ENV):
        seed = int(os.environ[SEED_ENV])

    output_dir = raw.get("output_dir")

    config = SessionConfig(
        name=s.get("name", Path(path).stem),
        seed=seed,
        mode=parse_mode(s.get("mode", "standard")),
        rounds=s.get("rounds", 20),
        generator=GeneratorConfig(
            max_random_attempts=gen.get("max_random_attempts", DEFAULT_MAX_ATTEMPTS),
            scenario_share=gen.get("scenario_share", 0.5),
        ),
        log_level=str(log.get("level", "INFO")).upper(),
        output_dir=Path(output_dir) if output_dir else None,
    )
    validate_config(config)
    return config
