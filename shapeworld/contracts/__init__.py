"""Contract definitions for Shape World.

Version constants and validation for the binary save format.
"""

from shapeworld.contracts.version import (COLOR_VERSION, IDENTITY_VERSION,
                                          LEVEL_INDEX_VERSION, SAVE_VERSION,
                                          decode_tag, encode_tag, is_legacy,
                                          legacy_shape_count,
                                          validate_save_version)

__all__ = [
    "COLOR_VERSION",
    "IDENTITY_VERSION",
    "LEVEL_INDEX_VERSION",
    "SAVE_VERSION",
    "decode_tag",
    "encode_tag",
    "is_legacy",
    "legacy_shape_count",
    "validate_save_version",
]
