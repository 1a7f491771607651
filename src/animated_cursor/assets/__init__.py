"""Asset authoring helpers for animated cursors."""

from __future__ import annotations

from .cursor_definitions import (
    CURSOR_DEFINITIONS,
    DEFAULT_DEFINITION_SET,
    create_default_definition_set,
    create_frame_set,
    get_cursor_definition,
    style_index,
)
from .placeholder_generator import PlaceholderGenerator

__all__ = [
    "CURSOR_DEFINITIONS",
    "DEFAULT_DEFINITION_SET",
    "create_default_definition_set",
    "create_frame_set",
    "get_cursor_definition",
    "style_index",
    "PlaceholderGenerator",
]
