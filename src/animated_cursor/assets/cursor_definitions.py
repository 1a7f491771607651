"""Built-in cursor style definitions."""

from __future__ import annotations

from typing import Optional

from animated_cursor.types import DefinitionSet, FrameSet

from .placeholder_generator import PlaceholderGenerator


# Durations are seconds per frame; hotspots are pixels from the top-left
CURSOR_DEFINITIONS: dict[str, dict] = {
    "arrow": {
        "size": 32,
        "hotspot": (1, 1),
        "duration": 1.0,
        "frames": 1,
        "style": "arrow",
        "color": (255, 255, 255),
    },
    "crosshair": {
        "size": 32,
        "hotspot": (16, 16),
        "duration": 1.0,
        "frames": 1,
        "style": "crosshair",
        "color": (255, 80, 80),
    },
    "busy": {
        "size": 32,
        "hotspot": (16, 16),
        "duration": 0.1,
        "frames": 8,
        "style": "spinner",
        "color": (100, 200, 255),
    },
    "pulse": {
        "size": 32,
        "hotspot": (1, 1),
        "duration": 0.25,
        "frames": 4,
        "style": "arrow",
        "color": (255, 220, 100),
    },
}

DEFAULT_DEFINITION_SET = "default"


def get_cursor_definition(style_name: str) -> Optional[dict]:
    """Get a cursor definition by name.

    Args:
        style_name: The cursor style name.

    Returns:
        Definition dict or None.
    """
    return CURSOR_DEFINITIONS.get(style_name)


def create_frame_set(
    style_name: str, generator: Optional[PlaceholderGenerator] = None
) -> FrameSet:
    """Build a frame set for a built-in cursor style.

    Raises:
        KeyError: If the style is not defined.
    """
    definition = CURSOR_DEFINITIONS[style_name]
    generator = generator or PlaceholderGenerator()
    images = generator.draw_frames(
        definition["style"],
        definition["size"],
        definition["frames"],
        definition["color"],
    )
    return FrameSet(
        images=images,
        hotspot=(float(definition["hotspot"][0]), float(definition["hotspot"][1])),
        duration=definition["duration"],
    )


def create_default_definition_set(
    generator: Optional[PlaceholderGenerator] = None,
) -> DefinitionSet:
    """Bundle every built-in style, in definition order."""
    generator = generator or PlaceholderGenerator()
    return DefinitionSet(
        name=DEFAULT_DEFINITION_SET,
        sets=[create_frame_set(name, generator) for name in CURSOR_DEFINITIONS],
    )


def style_index(style_name: str) -> int:
    """Position of a style inside the default definition set.

    Raises:
        KeyError: If the style is not defined.
    """
    if style_name not in CURSOR_DEFINITIONS:
        raise KeyError(style_name)
    return list(CURSOR_DEFINITIONS).index(style_name)
