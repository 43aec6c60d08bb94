"""Run configuration for termlife.

Values come from dataclass defaults, then ``TERMLIFE_*`` environment
variables, then command-line flags.
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Dict, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMLIFE_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LifeConfig:
    """Settings for one terminal run.

    Attributes:
        frame_delay: Pause between frames in seconds
        density: Probability of a cell starting alive
        seed: Random seed for the initial board (None for a fresh one)
        max_generations: Stop after this many rendered generations (None = until stable)
        log_level: Logging level name
        log_file: Log destination; stderr when None
    """
    frame_delay: float = 0.06
    density: float = 0.3
    seed: Optional[int] = None
    max_generations: Optional[int] = None
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    def validate(self) -> 'LifeConfig':
        """Check value ranges.

        Raises:
            ValueError: If any setting is out of range
        """
        if self.frame_delay < 0:
            raise ValueError(f"frame_delay must be non-negative, got {self.frame_delay}")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be between 0 and 1, got {self.density}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
        if self.max_generations is not None and self.max_generations <= 0:
            raise ValueError(f"max_generations must be positive, got {self.max_generations}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'LifeConfig':
        """Build a config from ``TERMLIFE_*`` variables over the defaults.

        Raises:
            ValueError: If a variable cannot be parsed
        """
        environ = os.environ if environ is None else environ
        parsers: Dict[str, Callable[[str], Any]] = {
            "frame_delay": float,
            "density": float,
            "seed": int,
            "max_generations": int,
            "log_level": str.upper,
            "log_file": str,
        }

        values = {}
        for field in fields(cls):
            name = ENV_PREFIX + field.name.upper()
            raw = environ.get(name)
            if raw is None or raw == "":
                continue
            try:
                values[field.name] = parsers[field.name](raw)
            except ValueError as e:
                raise ValueError(f"Invalid value for {name}: {raw!r}") from e

        if values:
            logger.debug(f"Config from environment: {values}")
        return cls(**values)

    def merged(self, **overrides: Any) -> 'LifeConfig':
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
