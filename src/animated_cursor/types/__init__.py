"""Type definitions for animated cursors."""

from .cursors import (
    Hotspot,
    DEFAULT_HOTSPOT,
    DEFAULT_FRAME_DURATION,
    CursorKind,
    CursorMode,
    FrameSet,
    DefinitionSet,
    InlineReference,
    ExternalReference,
    CursorReference,
    ResolverContext,
    AnimationClock,
)

__all__ = [
    "Hotspot",
    "DEFAULT_HOTSPOT",
    "DEFAULT_FRAME_DURATION",
    "CursorKind",
    "CursorMode",
    # Cursor data
    "FrameSet",
    "DefinitionSet",
    # References
    "InlineReference",
    "ExternalReference",
    "CursorReference",
    # Runtime state
    "ResolverContext",
    "AnimationClock",
]
