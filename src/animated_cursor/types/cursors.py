"""Cursor data types: frame sets, definition bundles and references."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from PIL import Image


Hotspot = tuple[float, float]

DEFAULT_HOTSPOT: Hotspot = (0.0, 0.0)
DEFAULT_FRAME_DURATION = 1.0


class CursorKind(Enum):
    """Which backing collection a reference points into."""

    INLINE = "inline"
    EXTERNAL = "external"


class CursorMode(Enum):
    """How the display sink should present the cursor."""

    AUTO = "auto"
    FORCE_SOFTWARE = "force_software"


@dataclass
class FrameSet:
    """One cursor style: ordered frames sharing a hotspot and frame duration."""

    images: list[Image.Image] = field(default_factory=list)
    hotspot: Hotspot = DEFAULT_HOTSPOT
    duration: float = DEFAULT_FRAME_DURATION  # seconds per frame

    @property
    def frame_count(self) -> int:
        return len(self.images)


@dataclass
class DefinitionSet:
    """A named, reusable bundle of frame sets."""

    name: str
    sets: list[FrameSet] = field(default_factory=list)


@dataclass(frozen=True)
class InlineReference:
    """Points at a frame of a frame set declared directly on the context."""

    set_index: int = 0
    frame_index: int = 0

    @property
    def kind(self) -> CursorKind:
        return CursorKind.INLINE

    def with_frame(self, frame_index: int) -> "InlineReference":
        """Return a copy pointing at another frame of the same set."""
        return replace(self, frame_index=frame_index)


@dataclass(frozen=True)
class ExternalReference:
    """Points at a frame of a frame set inside a definition bundle."""

    bundle_index: int = 0
    set_index: int = 0
    frame_index: int = 0

    @property
    def kind(self) -> CursorKind:
        return CursorKind.EXTERNAL

    def with_frame(self, frame_index: int) -> "ExternalReference":
        """Return a copy pointing at another frame of the same set."""
        return replace(self, frame_index=frame_index)


CursorReference = Union[InlineReference, ExternalReference]


@dataclass
class ResolverContext:
    """The two backing collections a reference is resolved against.

    Both lists may be edited at any time by the authoring path; nothing
    resolved from them is cached.
    """

    inline_sets: list[FrameSet] = field(default_factory=list)
    bundles: list[DefinitionSet] = field(default_factory=list)

    def add_frame_set(self, frame_set: FrameSet) -> InlineReference:
        """Append an inline frame set.

        Returns:
            A reference to its first frame.
        """
        self.inline_sets.append(frame_set)
        return InlineReference(set_index=len(self.inline_sets) - 1)

    def add_definition_set(self, definition_set: DefinitionSet) -> int:
        """Append a definition bundle and return its bundle index."""
        self.bundles.append(definition_set)
        return len(self.bundles) - 1

    def remove_definition_set(self, bundle_index: int) -> Optional[DefinitionSet]:
        """Remove a bundle, shifting later bundles down by one.

        Returns:
            The removed bundle, or None if the index was out of range.
        """
        if 0 <= bundle_index < len(self.bundles):
            return self.bundles.pop(bundle_index)
        return None


@dataclass
class AnimationClock:
    """Running state of the active cursor animation."""

    active_reference: CursorReference = field(default_factory=InlineReference)
    elapsed_since_frame_start: float = 0.0
    ready: bool = False

    def reset(self) -> None:
        """Restart timing of the current frame."""
        self.elapsed_since_frame_start = 0.0

    def copy(self) -> "AnimationClock":
        """Create a copy of this clock."""
        return AnimationClock(
            active_reference=self.active_reference,
            elapsed_since_frame_start=self.elapsed_since_frame_start,
            ready=self.ready,
        )
