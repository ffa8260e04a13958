"""Result type for outcomes the caller must check.

Loading a save and assigning a shape id can both fail in ways that are
expected during normal play (an old build reading a new file, a pool handing
out a recycled shape). Those operations return a ``Result`` instead of
raising, so the failure is logged where it happens and the caller still
decides what to do with it.

Usage:
------
    result = storage.load(roster)
    if result.is_ok():
        report = result.unwrap()
    else:
        logger.warning("Load skipped: %s", result.error)

    # Pattern matching style
    match shape.assign_shape_id(3):
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful outcome carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    @property
    def error(self) -> None:
        """Ok has no error, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value."""
        return Ok(f(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed outcome carrying ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise, since Err has no success value.

        When the error is itself an exception it is chained so the original
        traceback survives.
        """
        if isinstance(self.error, BaseException):
            raise ValueError(f"Called unwrap on Err: {self.error}") from self.error
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    @property
    def value(self) -> None:
        """Err has no value, returns None."""
        return None

    def map(self, f: Callable[[T], U]) -> "Err[E]":
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
