"""Read-only save file inspection.

Decodes a save file into a report without acquiring shapes or touching any
roster. Used by the ``inspect`` command and handy when a player sends in a
save that will not load.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel

from shapeworld.config.persistence import DEFAULT_LEVEL_INDEX
from shapeworld.contracts import (
    COLOR_VERSION,
    LEVEL_INDEX_VERSION,
    SAVE_VERSION,
    is_legacy,
    legacy_shape_count,
)
from shapeworld.exceptions import StreamExhaustedError
from shapeworld.persistence.records import read_identity
from shapeworld.persistence.storage import open_envelope

logger = logging.getLogger(__name__)


class ShapeRecordSummary(BaseModel):
    """One decoded shape record."""

    shape_id: int
    material_id: int
    color: Optional[Tuple[float, float, float, float]] = None


class SaveFileSummary(BaseModel):
    """Everything a save file says about itself."""

    path: str
    size_bytes: int
    tag: int
    version: int
    legacy: bool
    supported: bool
    shape_count: Optional[int] = None
    level_index: Optional[int] = None
    records: List[ShapeRecordSummary] = []
    truncated: bool = False


def inspect_save_file(path: Union[str, Path]) -> SaveFileSummary:
    """Decode the save file at *path*.

    Files from a newer build are reported with ``supported=False`` and no
    body. A file that ends early is reported with ``truncated=True`` and the
    records read so far.

    Raises:
        FileNotFoundError: If there is no file at *path*
        StreamExhaustedError: If the file is too short to hold a tag
    """
    path = Path(path)
    size = path.stat().st_size
    with open(path, "rb") as f:
        reader = open_envelope(f)
        version = reader.version
        summary = SaveFileSummary(
            path=str(path),
            size_bytes=size,
            tag=-version,
            version=version,
            legacy=is_legacy(version),
            supported=version <= SAVE_VERSION,
        )
        if not summary.supported:
            return summary

        try:
            summary.shape_count = (
                legacy_shape_count(version) if summary.legacy else reader.read_int()
            )
            summary.level_index = (
                reader.read_int() if version >= LEVEL_INDEX_VERSION else DEFAULT_LEVEL_INDEX
            )
            for _ in range(summary.shape_count):
                shape_id, material_id = read_identity(reader, version)
                color = reader.read_color().as_tuple() if version >= COLOR_VERSION else None
                summary.records.append(
                    ShapeRecordSummary(shape_id=shape_id, material_id=material_id, color=color)
                )
        except StreamExhaustedError as e:
            logger.warning("Save file %s is truncated: %s", path, e)
            summary.truncated = True
    return summary
