"""Configuration constants and session config objects."""

from shapeworld.config.game_config import GameConfig, SpawnConfig

__all__ = ["GameConfig", "SpawnConfig"]
