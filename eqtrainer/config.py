"""Engine configuration and accuracy modes."""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import InputViolation


MODES = ("fast", "accurate")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise InputViolation(f"{name} must be an integer, got {value!r}")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class EquityConfig:
    """Configuration for equity and outs calculations."""
    fast_iterations: int = 800       # Quick feedback while picking cards
    accurate_iterations: int = 4000  # Default budget
    max_opponents: int = 9

    # Credit 1/group_size per shared win instead of a flat half
    split_ties: bool = False

    def iterations_for(self, mode: str) -> int:
        """Iteration budget for an accuracy mode ('fast' or 'accurate')."""
        if mode == "fast":
            return self.fast_iterations
        if mode == "accurate":
            return self.accurate_iterations
        raise InputViolation(f"Unknown mode: {mode}")

    @classmethod
    def from_env(cls, defaults: Optional["EquityConfig"] = None) -> "EquityConfig":
        """Build a config, overriding defaults with EQTRAINER_* variables."""
        base = defaults or cls()
        return cls(
            fast_iterations=_env_int("EQTRAINER_FAST_ITERATIONS", base.fast_iterations),
            accurate_iterations=_env_int(
                "EQTRAINER_ACCURATE_ITERATIONS", base.accurate_iterations
            ),
            max_opponents=_env_int("EQTRAINER_MAX_OPPONENTS", base.max_opponents),
            split_ties=_env_bool("EQTRAINER_SPLIT_TIES", base.split_ties),
        )
