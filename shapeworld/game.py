"""Game session: one roster, one save file, rate-driven spawning.

A ``Game`` is an explicitly constructed context object. Nothing here is
global, so several independent sessions can live side by side (tests do
this all the time).

    game = Game(GameConfig(seed=7))
    game.start()
    game.create_shape()
    game.save()
    game.load()
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, Optional

from shapeworld.color import random_shape_color
from shapeworld.config.game_config import GameConfig
from shapeworld.config.persistence import DEFAULT_LEVEL_INDEX
from shapeworld.entities.shape import Shape
from shapeworld.exceptions import PersistenceError
from shapeworld.levels import AsyncLevelLoader
from shapeworld.math_utils import Quaternion, Vector3
from shapeworld.object_pool import ShapePool
from shapeworld.persistence.storage import LoadReport, PersistentStorage
from shapeworld.protocols import LevelTransitions, ShapeProvider, SpawnZone
from shapeworld.result import Result
from shapeworld.roster import Roster
from shapeworld.spawning import default_spawn_zones

logger = logging.getLogger(__name__)


class Game:
    """A single play session."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        pool: Optional[ShapeProvider] = None,
        levels: Optional[LevelTransitions] = None,
        storage: Optional[PersistentStorage] = None,
        spawn_zones: Optional[Dict[int, SpawnZone]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.config.validate()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.pool: ShapeProvider = pool if pool is not None else ShapePool(rng=self.rng)
        self.levels: LevelTransitions = levels if levels is not None else AsyncLevelLoader()
        self.storage = storage if storage is not None else PersistentStorage(self.config.save_path)
        self.spawn_zones = (
            spawn_zones if spawn_zones is not None else default_spawn_zones(self.config.level_count)
        )
        self.roster = Roster(self.pool, self.levels)

        self.creation_speed = self.config.spawn.creation_speed
        self.destruction_speed = self.config.spawn.destruction_speed
        self._creation_progress = 0.0
        self._destruction_progress = 0.0

    @property
    def spawn_zone(self) -> Optional[SpawnZone]:
        """Spawn zone of the active level."""
        return self.spawn_zones.get(self.roster.level_index)

    @property
    def paused(self) -> bool:
        """True while a level transition is still running."""
        return not getattr(self.levels, "enabled", True)

    def start(self) -> None:
        """Open the starting level."""
        self.roster.change_level(DEFAULT_LEVEL_INDEX)

    # -- Roster mutation --

    def create_shape(self) -> Shape:
        """Take a random shape from the pool and place it in the active level."""
        shape = self.pool.get_random()
        transform = shape.transform
        zone = self.spawn_zone
        transform.position = zone.spawn_point(self.rng) if zone is not None else Vector3()
        transform.rotation = Quaternion.random(self.rng)
        transform.scale = Vector3.one() * self.rng.uniform(
            self.config.spawn.scale_min, self.config.spawn.scale_max
        )
        shape.set_color(random_shape_color(self.rng))
        self.roster.add(shape)
        return shape

    def destroy_shape(self) -> Optional[Shape]:
        """Remove a random shape; no-op on an empty roster."""
        return self.roster.destroy_random(self.rng)

    def begin_new_game(self) -> None:
        self.roster.clear()

    def select_level(self, level_index: int) -> bool:
        """Start a new game in *level_index* (1..level_count).

        Returns:
            False if the level does not exist
        """
        if not 1 <= level_index <= self.config.level_count:
            logger.warning(
                "Ignoring unknown level %d (have %d)", level_index, self.config.level_count
            )
            return False
        self.begin_new_game()
        self.roster.change_level(level_index)
        return True

    def update(self, dt: float) -> None:
        """Advance rate-driven creation and destruction by *dt* seconds."""
        if self.paused:
            return

        self._creation_progress += dt * self.creation_speed
        while self._creation_progress >= 1.0:
            self._creation_progress -= 1.0
            self.create_shape()

        self._destruction_progress += dt * self.destruction_speed
        while self._destruction_progress >= 1.0:
            self._destruction_progress -= 1.0
            self.destroy_shape()

    # -- Persistence --

    def save(self) -> Result[Path, PersistenceError]:
        return self.storage.save(self.roster)

    def load(self) -> Result[LoadReport, PersistenceError]:
        """Replace the session with the saved one.

        On any failure the current roster and level stay as they were.
        """
        return self.storage.load(self.roster)
