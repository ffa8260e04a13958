"""Centralized math utilities for shape transforms.

Pure Python vector and rotation types. Only what transforms and spawn zones
need lives here.
"""

from __future__ import annotations

import math
import random


class Vector3:
    """A 3D vector class for positions and scales."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3":
        length = self.length()
        if length == 0:
            return Vector3(0, 0, 0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def copy(self) -> "Vector3":
        """Return a copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not Vector3:
            return False
        return (
            abs(self.x - other.x) < 1e-6
            and abs(self.y - other.y) < 1e-6
            and abs(self.z - other.z) < 1e-6
        )

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class Quaternion:
    """A rotation stored as a unit quaternion (x, y, z, w)."""

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)
        self.w: float = float(w)

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def random(cls, rng: random.Random) -> "Quaternion":
        """Return a rotation drawn uniformly from all orientations.

        Uses Shoemake's subgroup algorithm.
        """
        u1, u2, u3 = rng.random(), rng.random(), rng.random()
        a = math.sqrt(1.0 - u1)
        b = math.sqrt(u1)
        return cls(
            a * math.sin(2.0 * math.pi * u2),
            a * math.cos(2.0 * math.pi * u2),
            b * math.sin(2.0 * math.pi * u3),
            b * math.cos(2.0 * math.pi * u3),
        )

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def copy(self) -> "Quaternion":
        return Quaternion(self.x, self.y, self.z, self.w)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not Quaternion:
            return False
        return all(abs(a - b) < 1e-6 for a, b in zip(self.as_tuple(), other.as_tuple()))

    def __repr__(self) -> str:
        return f"Quaternion({self.x}, {self.y}, {self.z}, {self.w})"


def random_on_unit_sphere(rng: random.Random) -> Vector3:
    """Return a uniformly distributed point on the unit sphere."""
    z = rng.uniform(-1.0, 1.0)
    theta = rng.uniform(0.0, 2.0 * math.pi)
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(theta), r * math.sin(theta), z)


def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """Return a uniformly distributed point inside the unit sphere."""
    return random_on_unit_sphere(rng) * (rng.random() ** (1.0 / 3.0))


__all__ = ["Quaternion", "Vector3", "random_in_unit_sphere", "random_on_unit_sphere"]
