"""Save format version constants for Shape World.

This module is the single source of truth for the binary save schema.

Version history:
    - 0 (implicit): legacy files with no version field. The file starts with
      the shape count and every record is empty (no ids, no color).
    - 1: the file starts with ``-1``; an explicit shape count follows and
      every record carries its shape id and material id.
    - 2: the active level index follows the shape count and every record
      carries an RGBA color after its ids.

The leading integer doubles as the legacy shape count. A versioned file
stores ``-SAVE_VERSION`` there (always negative) while a legacy file stores
a count (never negative), so ``version = -tag`` is ``<= 0`` exactly for
legacy data. This relies on ``SAVE_VERSION >= 1`` and must not change, or
existing legacy saves stop loading.
"""

from __future__ import annotations

from shapeworld.exceptions import UnsupportedFutureVersionError

SAVE_VERSION = 2

# First version that stores shape and material ids per record
IDENTITY_VERSION = 1

# First version that stores the active level index and per-shape color
LEVEL_INDEX_VERSION = 2
COLOR_VERSION = 2


def encode_tag(version: int) -> int:
    """Return the leading integer written for a file at *version*."""
    if version < 1:
        raise ValueError(f"Cannot write a versioned file at version {version}")
    return -version


def decode_tag(tag: int) -> int:
    """Recover the read version from a leading integer.

    Legacy files yield ``-count``, which is never positive.
    """
    return -tag


def is_legacy(version: int) -> bool:
    """Return True for data written before the version field existed."""
    return version <= 0


def legacy_shape_count(version: int) -> int:
    """Return the shape count a legacy file encoded in its leading integer."""
    return -version


def validate_save_version(version: int) -> None:
    """Reject data written by a newer build.

    Raises:
        UnsupportedFutureVersionError: If *version* exceeds ``SAVE_VERSION``
    """
    if version > SAVE_VERSION:
        raise UnsupportedFutureVersionError(version, SAVE_VERSION)
