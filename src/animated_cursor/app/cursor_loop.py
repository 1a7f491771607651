"""Host update loop that ticks the cursor animation."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from animated_cursor.engine import AnimationController


class CursorLoop:
    """Drives an animation controller once per display refresh."""

    def __init__(
        self,
        controller: AnimationController,
        target_fps: int = 60,
        max_dt: Optional[float] = None,
    ):
        """Initialize the cursor loop.

        Args:
            controller: The animation controller to tick.
            target_fps: Target frames per second.
            max_dt: Upper bound on a measured delta, None for no cap.
        """
        self.controller = controller
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps
        self.max_dt = max_dt

        self._running = False
        self._last_time = 0.0
        self._frame_count = 0
        self._fps = 0.0
        self._fps_update_time = 0.0

    def tick(self, dt: float) -> None:
        """Process a single tick.

        Args:
            dt: Delta time in seconds.
        """
        self.controller.tick(dt)

        # Track FPS
        self._frame_count += 1
        self._fps_update_time += dt
        if self._fps_update_time >= 1.0:
            self._fps = self._frame_count / self._fps_update_time
            self._frame_count = 0
            self._fps_update_time = 0.0

    def start(self) -> None:
        """Start the loop."""
        self._running = True
        self._last_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the loop."""
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if loop is running.

        Returns:
            True if running.
        """
        return self._running

    @property
    def fps(self) -> float:
        """Get current FPS.

        Returns:
            Current frames per second.
        """
        return self._fps

    def process_frame(self) -> float:
        """Measure elapsed time and tick once.

        Returns:
            The delta time passed to the controller.
        """
        current_time = time.perf_counter()
        dt = current_time - self._last_time
        self._last_time = current_time

        if self.max_dt is not None and dt > self.max_dt:
            dt = self.max_dt

        self.tick(dt)

        return dt

    async def run_async(self) -> None:
        """Run the loop until stopped."""
        self.start()
        while self._running:
            frame_start = time.perf_counter()

            self.process_frame()

            # Sleep off the rest of the frame to hold the target FPS
            frame_time = time.perf_counter() - frame_start
            sleep_time = max(0, self.target_frame_time - frame_time)

            await asyncio.sleep(sleep_time)
