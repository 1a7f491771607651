"""Toggle between two cursors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from animated_cursor.engine import AnimationController
    from animated_cursor.types import CursorReference


class CursorSwitcher:
    """Flips a controller between a first and a second cursor."""

    def __init__(
        self,
        controller: AnimationController,
        first: CursorReference,
        second: CursorReference,
    ):
        self.controller = controller
        self.first = first
        self.second = second
        self._current = 0

    @property
    def current(self) -> int:
        """0 while the first cursor is selected, 1 for the second."""
        return self._current

    def toggle(self) -> bool:
        """Select the other cursor.

        Returns:
            Whether the controller accepted the new cursor.
        """
        if self._current == 0:
            self._current = 1
            return self.controller.set_active(self.second)
        self._current = 0
        return self.controller.set_active(self.first)
