"""Typed binary reader/writer for save data.

Every value is little-endian and fixed width with no padding, and values are
read back in exactly the order they were written:

    int         int32            ``<i``
    vector3     3 x float32      ``<3f``  (x, y, z)
    quaternion  4 x float32      ``<4f``  (x, y, z, w)
    color       4 x float32      ``<4f``  (r, g, b, a)

A reader is bound to the save version recovered from the file's leading tag.
The version is fixed for the life of the reader.
"""

from __future__ import annotations

import struct
from typing import BinaryIO

from shapeworld.color import Color
from shapeworld.exceptions import StreamExhaustedError
from shapeworld.math_utils import Quaternion, Vector3

_INT = struct.Struct("<i")
_VECTOR3 = struct.Struct("<3f")
_FLOAT4 = struct.Struct("<4f")


class GameDataWriter:
    """Writes typed values to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write_int(self, value: int) -> None:
        self._stream.write(_INT.pack(int(value)))

    def write_vector3(self, value: Vector3) -> None:
        self._stream.write(_VECTOR3.pack(value.x, value.y, value.z))

    def write_quaternion(self, value: Quaternion) -> None:
        self._stream.write(_FLOAT4.pack(value.x, value.y, value.z, value.w))

    def write_color(self, value: Color) -> None:
        self._stream.write(_FLOAT4.pack(value.r, value.g, value.b, value.a))


class GameDataReader:
    """Reads typed values from a binary stream written by ``GameDataWriter``."""

    def __init__(self, stream: BinaryIO, version: int) -> None:
        self._stream = stream
        self._version = int(version)

    @property
    def version(self) -> int:
        """Save version of the data being read."""
        return self._version

    def _read(self, codec: struct.Struct) -> tuple:
        offset = self._stream.tell()
        data = self._stream.read(codec.size)
        if len(data) < codec.size:
            raise StreamExhaustedError(codec.size, len(data), offset)
        return codec.unpack(data)

    def read_int(self) -> int:
        return self._read(_INT)[0]

    def read_vector3(self) -> Vector3:
        return Vector3(*self._read(_VECTOR3))

    def read_quaternion(self) -> Quaternion:
        return Quaternion(*self._read(_FLOAT4))

    def read_color(self) -> Color:
        return Color(*self._read(_FLOAT4))


def read_leading_int(stream: BinaryIO) -> int:
    """Read the envelope tag before any version is known."""
    data = stream.read(_INT.size)
    if len(data) < _INT.size:
        raise StreamExhaustedError(_INT.size, len(data), 0)
    return _INT.unpack(data)[0]
