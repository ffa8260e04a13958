"""Protocol-based contracts for the collaborators the roster depends on.

The roster and game session only ever talk to these structural interfaces,
so tests can hand in small fakes and the concrete pool, level loader and
spawn zones stay replaceable.

Protocol Hierarchy:
------------------
    ShapeProvider - Hands out shapes by prototype/material and takes them back
    LevelTransitions - Starts a level change without waiting for it
    SpawnZone - Picks spawn points for new shapes
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shapeworld.entities.shape import Shape
    from shapeworld.math_utils import Vector3


@runtime_checkable
class ShapeProvider(Protocol):
    """Pooling collaborator.

    ``reclaim`` must be called exactly once for each shape obtained through
    ``get`` or ``get_random``; a shape is never reclaimed twice without an
    intervening acquisition.
    """

    def get(self, shape_id: int, material_id: int) -> "Shape":
        """Return an active shape built from the given prototype and material."""
        ...

    def get_random(self) -> "Shape":
        """Return an active shape with a random prototype and material."""
        ...

    def reclaim(self, shape: "Shape") -> None:
        """Take a shape back once it leaves the roster."""
        ...


@runtime_checkable
class LevelTransitions(Protocol):
    """Scene transition collaborator (fire-and-forget)."""

    def begin_transition(self, level_index: int) -> None:
        """Start switching to *level_index* and return immediately."""
        ...


@runtime_checkable
class SpawnZone(Protocol):
    """Source of spawn points for newly created shapes."""

    def spawn_point(self, rng: random.Random) -> "Vector3":
        ...
