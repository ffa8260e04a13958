"""Write-once shape identifiers.

A shape's id names the prototype it was built from (cube, sphere, ...). The
pool assigns it once when the instance is first created and the instance
keeps it through every recycle, so a pooled cube can never come back as a
sphere. The unassigned state is an explicit ``None`` rather than a magic
integer, and assignment is a checked transition.

Usage:
------
    identity = ShapeIdentity()
    identity.is_assigned          # False
    identity.assign(2)            # Ok(2)
    identity.assign(0)            # Err(IdentityReassignmentError(...))
    identity.value                # 2
"""

from __future__ import annotations

from typing import Optional

from shapeworld.exceptions import IdentityReassignmentError
from shapeworld.result import Err, Ok, Result


class ShapeIdentity:
    """Holds a shape id that can be set exactly once."""

    __slots__ = ("_value",)

    def __init__(self, value: Optional[int] = None) -> None:
        self._value: Optional[int] = None
        if value is not None:
            self.assign(value)

    @property
    def value(self) -> Optional[int]:
        return self._value

    @property
    def is_assigned(self) -> bool:
        return self._value is not None

    def assign(self, value: int) -> Result[int, IdentityReassignmentError]:
        """Assign the id if it has not been assigned yet.

        Returns:
            Ok(value) on the first assignment, Err otherwise. A rejected
            assignment leaves the stored id untouched.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Shape id must be int, got {type(value).__name__}")
        if self._value is not None:
            return Err(IdentityReassignmentError(self._value, value))
        self._value = value
        return Ok(value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ShapeIdentity):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if self._value is None:
            return "Shape#unassigned"
        return f"Shape#{self._value}"
