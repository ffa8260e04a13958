"""Pytest configuration and fixtures for Shape World tests."""

import random
import struct

import pytest

from shapeworld.object_pool import ShapePool
from shapeworld.persistence.storage import PersistentStorage
from shapeworld.roster import Roster


class RecordingLevels:
    """Level transition fake that only records requests."""

    def __init__(self):
        self.requested = []
        self.enabled = True

    def begin_transition(self, level_index: int) -> None:
        self.requested.append(level_index)


class RawSave:
    """Builds save bytes field by field, for hand-crafted (legacy, broken) files."""

    def __init__(self):
        self._data = bytearray()

    def int(self, value: int) -> "RawSave":
        self._data += struct.pack("<i", value)
        return self

    def color(self, r: float, g: float, b: float, a: float = 1.0) -> "RawSave":
        self._data += struct.pack("<4f", r, g, b, a)
        return self

    def raw(self, data: bytes) -> "RawSave":
        self._data += data
        return self

    def to_bytes(self) -> bytes:
        return bytes(self._data)

    def write(self, path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.to_bytes())


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def pool(seeded_rng):
    return ShapePool(rng=seeded_rng)


@pytest.fixture
def levels():
    return RecordingLevels()


@pytest.fixture
def roster(pool, levels):
    return Roster(pool, levels)


@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "saves" / "saveFile"


@pytest.fixture
def storage(save_path):
    return PersistentStorage(save_path)


@pytest.fixture
def raw_save():
    return RawSave()
