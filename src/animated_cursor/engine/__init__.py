"""Cursor resolution and animation engine."""

from __future__ import annotations

from .resolver import CursorResolver
from .controller import AnimationController

__all__ = [
    "CursorResolver",
    "AnimationController",
]
