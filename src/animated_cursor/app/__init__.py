"""Host-side drivers for the cursor engine."""

from __future__ import annotations

from .cursor_loop import CursorLoop
from .switcher import CursorSwitcher

__all__ = [
    "CursorLoop",
    "CursorSwitcher",
]
