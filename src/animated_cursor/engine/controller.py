"""Animation controller driving the active cursor."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Optional

from PIL import Image

from animated_cursor.types import (
    AnimationClock,
    CursorMode,
    CursorReference,
    Hotspot,
    ResolverContext,
)

from .resolver import CursorResolver

if TYPE_CHECKING:
    from animated_cursor.renderer import CursorDisplay


logger = logging.getLogger(__name__)


class AnimationController:
    """Owns the active cursor reference and advances its frames over time.

    The controller starts uninitialized. It becomes ready through
    ``initialize`` or through ``set_active`` once a context is bound, and
    every lookup after that goes through the resolver again. Call ``tick``
    once per display refresh from the host's update loop.
    """

    def __init__(
        self,
        display: CursorDisplay,
        context: Optional[ResolverContext] = None,
        mode: CursorMode = CursorMode.AUTO,
        resolver: Optional[CursorResolver] = None,
    ):
        """Initialize the controller.

        Args:
            display: Sink that presents the resolved cursor.
            context: Backing collections, if already available.
            mode: Presentation mode passed to the display on every render.
            resolver: Resolver to use, a fresh one by default.
        """
        self.display = display
        self.mode = mode
        self.resolver = resolver or CursorResolver()
        self._context = context
        self._clock = AnimationClock()

    def initialize(self, context: Optional[ResolverContext] = None) -> None:
        """Bind backing collections and make the controller ready.

        Args:
            context: Collections to bind. Keeps an already bound context,
                or binds empty collections when there is none.
        """
        if context is not None:
            self._context = context
        elif self._context is None:
            self._context = ResolverContext()
        self._clock.ready = True
        self._clock.reset()

    @property
    def context(self) -> Optional[ResolverContext]:
        """Get the bound backing collections.

        Returns:
            The resolver context, or None before one is bound.
        """
        return self._context

    @property
    def ready(self) -> bool:
        """Check if the controller can resolve cursors.

        Returns:
            True once initialized with a context.
        """
        return self._clock.ready

    @property
    def active_reference(self) -> CursorReference:
        """Get the cursor currently being animated.

        Returns:
            The active reference, including its current frame.
        """
        return self._clock.active_reference

    @property
    def elapsed(self) -> float:
        """Seconds accumulated on the current frame."""
        return self._clock.elapsed_since_frame_start

    def get_clock(self) -> AnimationClock:
        """Get a copy of the animation clock."""
        return self._clock.copy()

    def _lookup_context(self) -> Optional[ResolverContext]:
        return self._context if self._clock.ready else None

    def set_active(self, ref: CursorReference) -> bool:
        """Make a reference the active cursor and render it immediately.

        Args:
            ref: The cursor to show.

        Returns:
            True if the reference was applied, False if it was rejected.
        """
        self._clock.ready = self._context is not None
        if not self.resolver.is_valid(ref, self._lookup_context()):
            logger.debug("Ignoring out of bounds cursor reference %r", ref)
            return False

        self._clock.active_reference = ref
        self._clock.reset()
        self._render()
        return True

    def tick(self, dt: float) -> None:
        """Advance the active animation by dt seconds and render.

        Args:
            dt: Delta time in seconds.
        """
        if not self._clock.ready:
            logger.debug("Tick before initialization ignored")
            return

        if not math.isfinite(dt):
            logger.debug("Delta time %s is not finite, holding frame", dt)
            self._render()
            return

        clock = self._clock
        context = self._context
        ref = clock.active_reference
        clock.elapsed_since_frame_start += dt

        # Re-read every tick, the frame set may have been edited
        duration = self.resolver.frame_duration(ref, context)
        frame_count = self.resolver.frame_count(ref, context)

        if not duration > 0:
            logger.debug("Frame duration %s is not positive, holding frame", duration)
        elif clock.elapsed_since_frame_start >= duration:
            steps, remainder = divmod(clock.elapsed_since_frame_start, duration)
            if not math.isfinite(steps):
                logger.debug(
                    "Cannot step %s by %s, restarting frame",
                    clock.elapsed_since_frame_start,
                    duration,
                )
                clock.reset()
            else:
                clock.elapsed_since_frame_start = remainder
                # Frames cycle with period frame_count, the last one wraps to 0
                if frame_count == 0:
                    frame_index = 0
                else:
                    frame_index = (ref.frame_index + int(steps)) % frame_count
                if frame_index != ref.frame_index:
                    clock.active_reference = ref.with_frame(frame_index)

        self._render()

    def current_image(self) -> Optional[Image.Image]:
        """Image of the active frame, None if the reference does not resolve."""
        return self.resolver.image(self._clock.active_reference, self._lookup_context())

    def current_hotspot(self) -> Hotspot:
        """Hotspot of the active frame, (0, 0) if the reference does not resolve."""
        return self.resolver.hotspot(self._clock.active_reference, self._lookup_context())

    def _render(self) -> None:
        self.display.set_cursor(self.current_image(), self.current_hotspot(), self.mode)
