"""Binary save format: typed codec, record layouts and the file envelope."""

from shapeworld.persistence.binary_io import GameDataReader, GameDataWriter
from shapeworld.persistence.inspector import SaveFileSummary, inspect_save_file
from shapeworld.persistence.records import ShapeCodec, ShapeRecordCodec
from shapeworld.persistence.storage import LoadReport, PersistentStorage

__all__ = [
    "GameDataReader",
    "GameDataWriter",
    "LoadReport",
    "PersistentStorage",
    "SaveFileSummary",
    "ShapeCodec",
    "ShapeRecordCodec",
    "inspect_save_file",
]
