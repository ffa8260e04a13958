"""Roster: the live shapes of a session plus the active level.

The roster is the root of everything a save file holds. Its body layout
(after the envelope tag) is:

    int32 count         only for version >= 1; legacy files encode it in the tag
    int32 level_index   only for version >= 2
    count x record      see ``shapeworld.persistence.records``

Shapes come from and go back to a ``ShapeProvider``. Removal swaps the last
shape into the freed slot and truncates, so order is not stable across
removals; order only matters as serialization order.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional

from shapeworld.config.persistence import DEFAULT_LEVEL_INDEX
from shapeworld.contracts import LEVEL_INDEX_VERSION, is_legacy, legacy_shape_count
from shapeworld.entities.shape import Shape
from shapeworld.exceptions import StreamExhaustedError
from shapeworld.persistence.binary_io import GameDataReader, GameDataWriter
from shapeworld.persistence.records import (
    ShapeCodec,
    ShapeRecordCodec,
    read_identity,
    write_identity,
)
from shapeworld.persistence.storage import LoadReport
from shapeworld.protocols import LevelTransitions, ShapeProvider

logger = logging.getLogger(__name__)


class Roster:
    """Ordered collection of live shapes and the active level index."""

    def __init__(
        self,
        pool: ShapeProvider,
        levels: Optional[LevelTransitions] = None,
        codec: Optional[ShapeRecordCodec] = None,
        level_index: int = DEFAULT_LEVEL_INDEX,
    ) -> None:
        self.pool = pool
        self.levels = levels
        self.codec: ShapeRecordCodec = codec if codec is not None else ShapeCodec()
        self.level_index = level_index
        self._shapes: List[Shape] = []

    # -- Collection --

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def __getitem__(self, index: int) -> Shape:
        return self._shapes[index]

    @property
    def shapes(self) -> List[Shape]:
        """A copy of the shapes in roster order."""
        return list(self._shapes)

    def add(self, shape: Shape) -> None:
        self._shapes.append(shape)

    def remove_at(self, index: int) -> Shape:
        """Remove the shape at *index* by swapping the last one into its slot.

        The removed shape goes back to the pool.
        """
        shape = self._shapes[index]
        last_index = len(self._shapes) - 1
        self._shapes[index] = self._shapes[last_index]
        self._shapes.pop()
        self.pool.reclaim(shape)
        return shape

    def destroy_random(self, rng: random.Random) -> Optional[Shape]:
        """Remove a random shape, or return None when the roster is empty."""
        if not self._shapes:
            return None
        return self.remove_at(rng.randrange(len(self._shapes)))

    def clear(self) -> None:
        """Return every shape to the pool and empty the roster."""
        for shape in self._shapes:
            self.pool.reclaim(shape)
        self._shapes.clear()

    def change_level(self, level_index: int) -> None:
        """Make *level_index* the active level and start its transition."""
        self.level_index = level_index
        if self.levels is not None:
            self.levels.begin_transition(level_index)

    # -- Persistence --

    def save(self, writer: GameDataWriter) -> None:
        writer.write_int(len(self._shapes))
        writer.write_int(self.level_index)
        for shape in self._shapes:
            write_identity(shape, writer)
            self.codec.save(shape, writer)

    def load(self, reader: GameDataReader) -> LoadReport:
        """Replace the roster content with the shapes stored in *reader*.

        Shapes are restored into a staging list first. If the data runs out
        part way, the staged shapes go back to the pool, the current roster
        is left as it was and ``StreamExhaustedError`` propagates.
        """
        version = reader.version
        legacy = is_legacy(version)
        count = legacy_shape_count(version) if legacy else reader.read_int()

        restored: List[Shape] = []
        try:
            level_index = (
                reader.read_int() if version >= LEVEL_INDEX_VERSION else DEFAULT_LEVEL_INDEX
            )
            for _ in range(count):
                shape_id, material_id = read_identity(reader, version)
                shape = self.pool.get(shape_id, material_id)
                restored.append(shape)
                self.codec.load(shape, reader, version)
        except StreamExhaustedError:
            logger.error(
                "Save data ended after %d of %d shapes; keeping current roster",
                len(restored),
                count,
            )
            for shape in restored:
                self.pool.reclaim(shape)
            raise

        self.clear()
        self._shapes = restored
        self.change_level(level_index)

        logger.info(
            "Restored %d shapes in level %d from save version %d%s",
            count,
            level_index,
            version,
            " (legacy)" if legacy else "",
        )
        return LoadReport(
            version=version, legacy=legacy, shape_count=count, level_index=level_index
        )
