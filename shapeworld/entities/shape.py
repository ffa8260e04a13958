"""Shape entity: one spawned, persisted object in the scene."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from shapeworld.color import WHITE, Color
from shapeworld.config.shapes import MATERIALS, SHAPE_PROTOTYPES
from shapeworld.entity_ids import ShapeIdentity
from shapeworld.exceptions import IdentityReassignmentError
from shapeworld.math_utils import Quaternion, Vector3
from shapeworld.result import Result

logger = logging.getLogger(__name__)


@dataclass
class Transform:
    """Position, rotation and scale of a shape.

    The transform belongs to the shape but is not part of its save record.
    """

    position: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion.identity)
    scale: Vector3 = field(default_factory=Vector3.one)

    def reset(self) -> None:
        self.position = Vector3()
        self.rotation = Quaternion.identity()
        self.scale = Vector3.one()


class Shape:
    """A spawned shape with identity, transform and color.

    Attributes:
        material_id: Index into ``MATERIALS``, fixed when the pool builds the
            instance.
        transform: Placement in the scene (not persisted).
        color: Current RGBA color (persisted from version 2).
        active: False while the instance sits in the pool.
    """

    def __init__(self, material_id: int = 0, shape_id: Optional[int] = None) -> None:
        self._identity = ShapeIdentity(shape_id)
        self._material_id = int(material_id)
        self.transform = Transform()
        self.color: Color = WHITE
        self.active = True

    @property
    def shape_id(self) -> Optional[int]:
        """Prototype index, or None until the pool assigns one."""
        return self._identity.value

    @property
    def material_id(self) -> int:
        return self._material_id

    @property
    def prototype_name(self) -> str:
        shape_id = self._identity.value
        if shape_id is None or not 0 <= shape_id < len(SHAPE_PROTOTYPES):
            return "unknown"
        return SHAPE_PROTOTYPES[shape_id]

    @property
    def material_name(self) -> str:
        if not 0 <= self._material_id < len(MATERIALS):
            return "unknown"
        return MATERIALS[self._material_id]

    def assign_shape_id(self, shape_id: int) -> Result[int, IdentityReassignmentError]:
        """Assign the prototype id; rejected (and logged) once already set."""
        result = self._identity.assign(shape_id)
        if result.is_err():
            logger.warning("Not allowed to change shape id: %s", result.error)
        return result

    def set_color(self, color: Color) -> None:
        self.color = color

    def __repr__(self) -> str:
        return (
            f"Shape(shape_id={self.shape_id}, material_id={self._material_id}, "
            f"color={self.color.as_tuple()})"
        )
