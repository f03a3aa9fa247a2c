"""YAML configuration for Dice Chess hosts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger("dicechess.config")

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """Settings for building a TurnEngine."""
    seed: Optional[int] = None  # None = nondeterministic dice
    auto_end_turn: bool = False  # End the turn as soon as the budget hits 0
    skip_roll_animation: bool = False  # Grant the budget in the same call as the roll
    log_level: str = "INFO"

    def __post_init__(self):
        if self.seed is not None and (isinstance(self.seed, bool)
                                      or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")
        for name in ("auto_end_turn", "skip_roll_animation"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false, got {getattr(self, name)!r}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> EngineConfig:
        """Build from a parsed YAML mapping; missing keys keep their defaults."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown config key: {key}")
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """Load the ``engine`` section of a YAML config file.

    With no path, the bundled ``configs/default.yaml`` is used if present,
    otherwise built-in defaults.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return EngineConfig()
        path = DEFAULT_CONFIG_PATH

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return EngineConfig.from_dict(config.get("engine", {}))
