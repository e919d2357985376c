"""Exception types raised by the network engine."""
from __future__ import annotations


class ShapeError(ValueError):
    """Raised when matrix dimensions are incompatible for an operation."""


class UninitializedModelError(RuntimeError):
    """Raised when the network is used before its weights were allocated."""


__all__ = ["ShapeError", "UninitializedModelError"]
