"""Spawn zones: where new shapes appear.

Each level owns one spawn zone. The session asks the zone of the active
level for a point whenever it creates a shape.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict

from shapeworld.config.spawning import DEFAULT_SPAWN_CUBE_SIZE, DEFAULT_SPAWN_RADIUS
from shapeworld.math_utils import Vector3, random_in_unit_sphere, random_on_unit_sphere
from shapeworld.protocols import SpawnZone


@dataclass
class SphereSpawnZone:
    """Spawn points inside (or on the surface of) a sphere."""

    center: Vector3 = field(default_factory=Vector3)
    radius: float = DEFAULT_SPAWN_RADIUS
    surface_only: bool = False

    def spawn_point(self, rng: random.Random) -> Vector3:
        direction = random_on_unit_sphere(rng) if self.surface_only else random_in_unit_sphere(rng)
        return self.center + direction * self.radius


@dataclass
class CubeSpawnZone:
    """Spawn points inside (or on the faces of) an axis-aligned cube."""

    center: Vector3 = field(default_factory=Vector3)
    size: float = DEFAULT_SPAWN_CUBE_SIZE
    surface_only: bool = False

    def spawn_point(self, rng: random.Random) -> Vector3:
        half = self.size / 2.0
        coords = [rng.uniform(-half, half) for _ in range(3)]
        if self.surface_only:
            # Push one random axis out to a face
            axis = rng.randrange(3)
            coords[axis] = half if rng.random() < 0.5 else -half
        return self.center + Vector3(*coords)


def default_spawn_zones(level_count: int) -> Dict[int, SpawnZone]:
    """Build one spawn zone per level, alternating spheres and cubes.

    Args:
        level_count: Number of levels, numbered from 1

    Returns:
        Mapping of level index to spawn zone
    """
    zones: Dict[int, SpawnZone] = {}
    for level_index in range(1, level_count + 1):
        if level_index % 2:
            zones[level_index] = SphereSpawnZone(surface_only=level_index > 2)
        else:
            zones[level_index] = CubeSpawnZone(surface_only=level_index > 2)
    return zones
