"""Lightweight session configuration helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from shapeworld.config.persistence import DEFAULT_SAVE_DIR, SAVE_DIR_ENV_VAR, SAVE_FILE_NAME
from shapeworld.config.shapes import LEVEL_COUNT
from shapeworld.config.spawning import (
    DEFAULT_CREATION_SPEED,
    DEFAULT_DESTRUCTION_SPEED,
    MAX_SPAWN_SPEED,
    SCALE_MAX,
    SCALE_MIN,
)
from shapeworld.exceptions import ConfigurationError


@dataclass
class SpawnConfig:
    """Rates and ranges for rate-driven spawning."""

    creation_speed: float = DEFAULT_CREATION_SPEED
    destruction_speed: float = DEFAULT_DESTRUCTION_SPEED
    scale_min: float = SCALE_MIN
    scale_max: float = SCALE_MAX

    def validate(self) -> None:
        for name in ("creation_speed", "destruction_speed"):
            value = getattr(self, name)
            if not 0.0 <= value <= MAX_SPAWN_SPEED:
                raise ConfigurationError(
                    f"{name} must be between 0 and {MAX_SPAWN_SPEED}, got {value}"
                )
        if not 0.0 < self.scale_min <= self.scale_max:
            raise ConfigurationError(
                f"Invalid scale range [{self.scale_min}, {self.scale_max}]"
            )


@dataclass
class GameConfig:
    """Configuration for one game session.

    Attributes:
        save_dir: Directory holding the save file.
        save_file_name: Name of the single save file.
        level_count: Number of selectable levels (numbered from 1).
        seed: Optional seed for the session RNG.
    """

    save_dir: Path = DEFAULT_SAVE_DIR
    save_file_name: str = SAVE_FILE_NAME
    level_count: int = LEVEL_COUNT
    seed: Optional[int] = None
    spawn: SpawnConfig = field(default_factory=SpawnConfig)

    @property
    def save_path(self) -> Path:
        return Path(self.save_dir) / self.save_file_name

    def validate(self) -> None:
        if self.level_count < 1:
            raise ConfigurationError(f"level_count must be at least 1, got {self.level_count}")
        if not self.save_file_name:
            raise ConfigurationError("save_file_name must not be empty")
        self.spawn.validate()

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """Build a config, taking the save directory from the environment if set."""
        env_dir = os.getenv(SAVE_DIR_ENV_VAR)
        if env_dir and "save_dir" not in overrides:
            overrides["save_dir"] = Path(env_dir)
        config = cls(**overrides)
        config.validate()
        return config
