"""Shape World exception hierarchy.

Every failure the persistence protocol can hit has its own class so callers
can catch narrowly. None of these are meant to take the process down: the
storage and entity layers log them and hand them back inside an ``Err``.
"""

from typing import Optional


class ShapeWorldError(Exception):
    """Root of all Shape World domain exceptions."""


class ConfigurationError(ShapeWorldError):
    """Invalid or missing configuration."""


class EntityError(ShapeWorldError):
    """An entity-level failure (identity, lifecycle)."""


class IdentityReassignmentError(EntityError):
    """Raised when an already assigned shape id would be overwritten."""

    def __init__(self, current: int, attempted: Optional[int]):
        self.current = current
        self.attempted = attempted
        super().__init__(
            f"Not allowed to change shape id: already {current}, attempted {attempted}"
        )


class PersistenceError(ShapeWorldError):
    """Errors during save / load operations."""


class SaveFileNotFoundError(PersistenceError):
    """No save file exists at the configured path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No save file at {path}")


class StreamExhaustedError(PersistenceError):
    """A read ran past the end of the save data."""

    def __init__(self, wanted: int, available: int, offset: int):
        self.wanted = wanted
        self.available = available
        self.offset = offset
        super().__init__(
            f"Save data exhausted at offset {offset}: wanted {wanted} bytes, "
            f"{available} available"
        )


class UnsupportedFutureVersionError(PersistenceError):
    """The save file was written by a newer build than this one."""

    def __init__(self, version: int, supported: int):
        self.version = version
        self.supported = supported
        super().__init__(f"Unsupported future save version {version} (supported: {supported})")
