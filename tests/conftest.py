"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest
from PIL import Image

from animated_cursor.engine import AnimationController, CursorResolver
from animated_cursor.renderer import HeadlessDisplay
from animated_cursor.types import (
    DefinitionSet,
    FrameSet,
    ResolverContext,
)


def _solid_frames(count: int, size: int = 8) -> list[Image.Image]:
    return [
        Image.new("RGBA", (size, size), (index * 40 % 256, 0, 0, 255))
        for index in range(count)
    ]


@pytest.fixture
def make_frames():
    """Factory for distinguishable solid-color frames."""
    return _solid_frames


@pytest.fixture
def two_frame_set() -> FrameSet:
    """Inline set with 2 frames, hotspot (4, 4), half-second frames."""
    return FrameSet(images=_solid_frames(2), hotspot=(4, 4), duration=0.5)


@pytest.fixture
def three_frame_set() -> FrameSet:
    """Set with 3 frames lasting one second each."""
    return FrameSet(images=_solid_frames(3), hotspot=(1, 2), duration=1.0)


@pytest.fixture
def bundle(three_frame_set) -> DefinitionSet:
    """A definition set holding a 3-frame set and an empty set."""
    return DefinitionSet(name="bundle", sets=[three_frame_set, FrameSet()])


@pytest.fixture
def context(two_frame_set, bundle) -> ResolverContext:
    """Context with one inline set and one bundle."""
    return ResolverContext(inline_sets=[two_frame_set], bundles=[bundle])


@pytest.fixture
def resolver() -> CursorResolver:
    return CursorResolver()


@pytest.fixture
def display() -> HeadlessDisplay:
    return HeadlessDisplay()


@pytest.fixture
def controller(display, context) -> AnimationController:
    """A ready controller bound to the shared context."""
    controller = AnimationController(display=display)
    controller.initialize(context)
    return controller
