"""Resolution of cursor references into display data."""

from __future__ import annotations

from typing import Optional

from PIL import Image

from animated_cursor.types import (
    DEFAULT_FRAME_DURATION,
    DEFAULT_HOTSPOT,
    CursorReference,
    ExternalReference,
    FrameSet,
    Hotspot,
    ResolverContext,
)


def _in_bounds(index: int, items: list) -> bool:
    return 0 <= index < len(items)


class CursorResolver:
    """Stateless lookups of a reference against a resolver context.

    Every accessor walks the full index chain again, so a reference that was
    valid on one frame may resolve to the defaults on the next if the
    context shrank in between. A context of None means the owner is not
    ready yet and nothing resolves.
    """

    def resolve(
        self, ref: CursorReference, context: Optional[ResolverContext]
    ) -> Optional[FrameSet]:
        """Find the frame set a reference points into.

        Args:
            ref: The reference to resolve.
            context: Backing collections, or None when not ready.

        Returns:
            The frame set, or None if any index in the chain is out of bounds.
        """
        if context is None:
            return None

        if isinstance(ref, ExternalReference):
            if not _in_bounds(ref.bundle_index, context.bundles):
                return None
            sets = context.bundles[ref.bundle_index].sets
        else:
            sets = context.inline_sets

        if not _in_bounds(ref.set_index, sets):
            return None
        frame_set = sets[ref.set_index]

        if not _in_bounds(ref.frame_index, frame_set.images):
            return None
        return frame_set

    def is_valid(self, ref: CursorReference, context: Optional[ResolverContext]) -> bool:
        """Check that every index of the reference is in bounds."""
        return self.resolve(ref, context) is not None

    def frame_count(self, ref: CursorReference, context: Optional[ResolverContext]) -> int:
        """Number of frames in the referenced set, 0 if invalid."""
        frame_set = self.resolve(ref, context)
        if frame_set is None:
            return 0
        return len(frame_set.images)

    def frame_duration(
        self, ref: CursorReference, context: Optional[ResolverContext]
    ) -> float:
        """Seconds per frame of the referenced set, 1.0 if invalid."""
        frame_set = self.resolve(ref, context)
        if frame_set is None:
            return DEFAULT_FRAME_DURATION
        return frame_set.duration

    def image(
        self, ref: CursorReference, context: Optional[ResolverContext]
    ) -> Optional[Image.Image]:
        """The referenced frame image, None if invalid."""
        frame_set = self.resolve(ref, context)
        if frame_set is None:
            return None
        return frame_set.images[ref.frame_index]

    def hotspot(self, ref: CursorReference, context: Optional[ResolverContext]) -> Hotspot:
        """Hotspot of the referenced set, (0, 0) if invalid."""
        frame_set = self.resolve(ref, context)
        if frame_set is None:
            return DEFAULT_HOTSPOT
        return frame_set.hotspot
