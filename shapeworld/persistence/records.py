"""Per-shape save records.

A record is the shape's identity (shape id, material id) followed by the
fields its codec owns. Identity is handled separately because the roster has
to know which prototype to ask the pool for *before* the rest of the record
can be applied to an instance.

Record layout by save version:

    version <= 0   (nothing)                      ids (0, 0), white
    version == 1   shape_id, material_id          white
    version >= 2   shape_id, material_id, color

Codecs never look at ambient state to decide what to read: the version is
passed in explicitly and each codec branches on it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, Tuple

from shapeworld.color import WHITE
from shapeworld.contracts import COLOR_VERSION, IDENTITY_VERSION

if TYPE_CHECKING:
    from shapeworld.entities.shape import Shape
    from shapeworld.persistence.binary_io import GameDataReader, GameDataWriter

logger = logging.getLogger(__name__)


class ShapeRecordCodec(Protocol):
    """Codec interface for the version-dependent part of a shape record."""

    def save(self, shape: "Shape", writer: "GameDataWriter") -> None:
        """Write the shape's fields at the current save version."""

    def load(self, shape: "Shape", reader: "GameDataReader", version: int) -> None:
        """Apply the fields stored at *version* to an acquired shape."""


class ShapeCodec:
    """Default codec: persists the shape's color."""

    def save(self, shape: "Shape", writer: "GameDataWriter") -> None:
        writer.write_color(shape.color)

    def load(self, shape: "Shape", reader: "GameDataReader", version: int) -> None:
        if version >= COLOR_VERSION:
            shape.set_color(reader.read_color())
        else:
            shape.set_color(WHITE)


def write_identity(shape: "Shape", writer: "GameDataWriter") -> None:
    """Write the shape id and material id that lead every record."""
    shape_id = shape.shape_id
    if shape_id is None:
        # A shape only gets into the roster through the pool, which assigns it.
        logger.warning("Saving shape with unassigned id as 0: %r", shape)
        shape_id = 0
    writer.write_int(shape_id)
    writer.write_int(shape.material_id)


def read_identity(reader: "GameDataReader", version: int) -> Tuple[int, int]:
    """Read a record's identity, or the legacy default ``(0, 0)``."""
    if version >= IDENTITY_VERSION:
        shape_id = reader.read_int()
        material_id = reader.read_int()
        return shape_id, material_id
    return 0, 0
