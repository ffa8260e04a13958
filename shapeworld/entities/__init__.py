"""Scene entities."""

from shapeworld.entities.shape import Shape, Transform

__all__ = ["Shape", "Transform"]
