"""Display sinks for animated cursors."""

from __future__ import annotations

from .display import CursorDisplay, CanvasDisplay
from .headless import DisplayCall, HeadlessDisplay

__all__ = [
    "CursorDisplay",
    "CanvasDisplay",
    "DisplayCall",
    "HeadlessDisplay",
]
