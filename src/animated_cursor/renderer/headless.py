"""Headless display sink for testing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PIL import Image

from animated_cursor.types import CursorMode, Hotspot


@dataclass
class DisplayCall:
    """One cursor dispatch received by a display."""

    image: Optional[Image.Image]
    hotspot: Hotspot
    mode: CursorMode


class HeadlessDisplay:
    """A display that records cursor dispatches instead of presenting them.

    Used for testing and demo environments.
    """

    def __init__(self):
        self.calls: list[DisplayCall] = []

    def set_cursor(
        self,
        image: Optional[Image.Image],
        hotspot: Hotspot,
        mode: CursorMode,
    ) -> None:
        """Record a cursor dispatch."""
        self.calls.append(DisplayCall(image=image, hotspot=hotspot, mode=mode))

    @property
    def render_count(self) -> int:
        """Get the number of recorded dispatches.

        Returns:
            How many times set_cursor was called.
        """
        return len(self.calls)

    @property
    def last_call(self) -> Optional[DisplayCall]:
        """Get the most recent dispatch.

        Returns:
            The last recorded call, or None if nothing was recorded.
        """
        return self.calls[-1] if self.calls else None

    def clear(self) -> None:
        """Forget all recorded dispatches."""
        self.calls.clear()
