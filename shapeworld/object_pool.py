"""Object pooling for shapes.

Shapes are created and destroyed constantly while the session runs. The pool
keeps reclaimed instances in one list per (prototype, material) pair and
hands them out again instead of building new ones. A recycled instance keeps
its shape id, which is why the id is write-once.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple

from shapeworld.color import WHITE
from shapeworld.config.shapes import MATERIALS, SHAPE_PROTOTYPES
from shapeworld.entities.shape import Shape

logger = logging.getLogger(__name__)

PoolKey = Tuple[int, int]


class ShapePool:
    """Object pool for Shape entities.

    Implements the ``ShapeProvider`` protocol.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        shape_count: int = len(SHAPE_PROTOTYPES),
        material_count: int = len(MATERIALS),
        recycle: bool = True,
    ):
        """Initialize the shape pool.

        Args:
            rng: Random number generator used by ``get_random``
            shape_count: Number of known shape prototypes
            material_count: Number of known materials
            recycle: When False, reclaimed shapes are dropped instead of reused
        """
        self._rng = rng if rng is not None else random.Random()
        self.shape_count = shape_count
        self.material_count = material_count
        self.recycle = recycle
        self._pools: Dict[PoolKey, List[Shape]] = {}
        self._active: Dict[int, Shape] = {}
        self._created = 0

    def get(self, shape_id: int, material_id: int) -> Shape:
        """Get a shape from the pool or create a new one.

        Args:
            shape_id: Prototype index
            material_id: Material index

        Returns:
            An active Shape with the requested identity
        """
        key = (shape_id, material_id)
        pool = self._pools.get(key)
        if pool:
            shape = pool.pop()
            shape.active = True
        else:
            shape = Shape(material_id=material_id)
            shape.assign_shape_id(shape_id)
            self._created += 1

        shape.transform.reset()
        shape.set_color(WHITE)
        self._active[id(shape)] = shape
        return shape

    def get_random(self) -> Shape:
        """Get a shape with a random prototype and material."""
        return self.get(
            self._rng.randrange(self.shape_count),
            self._rng.randrange(self.material_count),
        )

    def reclaim(self, shape: Shape) -> None:
        """Return a shape to the pool for reuse.

        Args:
            shape: A shape previously handed out by this pool
        """
        if id(shape) not in self._active:
            logger.warning("Ignoring reclaim of a shape this pool does not hold: %r", shape)
            return
        del self._active[id(shape)]
        shape.active = False
        if not self.recycle:
            return
        key = (shape.shape_id if shape.shape_id is not None else 0, shape.material_id)
        self._pools.setdefault(key, []).append(shape)

    def get_stats(self) -> dict:
        """Get pool statistics for monitoring.

        Returns:
            Dictionary with pooled count, active count and total created
        """
        return {
            "pool_size": sum(len(p) for p in self._pools.values()),
            "active_count": len(self._active),
            "total_created": self._created,
        }
