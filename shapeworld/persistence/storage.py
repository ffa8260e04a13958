"""Save file envelope.

``PersistentStorage`` owns the save file and the leading tag that makes the
format self-describing:

* Saving writes ``-SAVE_VERSION`` as the first int32 and then lets the
  persistable write its body. Bodies are only ever written in the current
  layout, so no other version can be saved. The tag is always negative.
* Loading reads the first int32 ``tag`` and binds the reader to
  ``version = -tag``. Files from before versioning began with the shape
  count instead, which is never negative, so they come out as
  ``version <= 0`` and the roster reads them as legacy data with
  ``count = -version``.
* A version newer than ``SAVE_VERSION`` is rejected before the persistable
  sees it, so nothing in memory changes.

The file is opened and closed inside each call. A save is staged completely
in memory, written to a temp file next to the target and then moved over it,
so a failed save leaves the previous file intact.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Protocol, TypeVar, Union

from shapeworld.config.persistence import STAGING_SUFFIX
from shapeworld.contracts import SAVE_VERSION, decode_tag, encode_tag, validate_save_version
from shapeworld.exceptions import (
    PersistenceError,
    SaveFileNotFoundError,
    StreamExhaustedError,
    UnsupportedFutureVersionError,
)
from shapeworld.persistence.binary_io import GameDataReader, GameDataWriter, read_leading_int
from shapeworld.result import Err, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T", covariant=True)


@dataclass(frozen=True)
class LoadReport:
    """What a successful load restored."""

    version: int
    legacy: bool
    shape_count: int
    level_index: int


class Persistable(Protocol[T]):
    """Anything that can write its body to, and rebuild itself from, a save."""

    def save(self, writer: GameDataWriter) -> None:
        ...

    def load(self, reader: GameDataReader) -> T:
        ...


def open_envelope(stream: BinaryIO) -> GameDataReader:
    """Read the leading tag and return a reader bound to the recovered version."""
    return GameDataReader(stream, decode_tag(read_leading_int(stream)))


class PersistentStorage:
    """Single-file, single-writer save storage."""

    def __init__(self, save_path: Union[str, Path]) -> None:
        self.save_path = Path(save_path)

    def exists(self) -> bool:
        return self.save_path.is_file()

    def save(self, persistable: Persistable) -> Result[Path, PersistenceError]:
        """Write *persistable* to the save file at ``SAVE_VERSION``.

        Returns:
            Ok(path) once the file has been replaced, Err if writing failed
        """
        buffer = io.BytesIO()
        writer = GameDataWriter(buffer)
        writer.write_int(encode_tag(SAVE_VERSION))
        persistable.save(writer)
        data = buffer.getvalue()

        staging = self.save_path.with_name(self.save_path.name + STAGING_SUFFIX)
        try:
            self.save_path.parent.mkdir(parents=True, exist_ok=True)
            with open(staging, "wb") as f:
                f.write(data)
            staging.replace(self.save_path)
        except OSError as e:
            logger.error("Failed to save to %s: %s", self.save_path, e, exc_info=True)
            return Err(PersistenceError(f"Failed to save to {self.save_path}: {e}"))

        logger.info("Saved %d bytes at version %d to %s", len(data), SAVE_VERSION, self.save_path)
        return Ok(self.save_path)

    def load(self, persistable: Persistable[T]) -> Result[T, PersistenceError]:
        """Rebuild *persistable* from the save file.

        Returns:
            Ok with whatever ``persistable.load`` returned, or Err when there
            is no file, the file is from a newer build, or it ends early.
        """
        try:
            with open(self.save_path, "rb") as f:
                reader = open_envelope(f)
                validate_save_version(reader.version)
                result = persistable.load(reader)
        except FileNotFoundError:
            logger.info("No save file found at %s", self.save_path)
            return Err(SaveFileNotFoundError(str(self.save_path)))
        except UnsupportedFutureVersionError as e:
            logger.warning("Unsupported future save version %d", e.version)
            return Err(e)
        except StreamExhaustedError as e:
            logger.error("Save file %s ended early, load aborted: %s", self.save_path, e)
            return Err(e)
        except OSError as e:
            logger.error("Failed to read %s: %s", self.save_path, e, exc_info=True)
            return Err(PersistenceError(f"Failed to read {self.save_path}: {e}"))

        logger.info("Loaded %s", self.save_path)
        return Ok(result)
