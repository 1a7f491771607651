"""Generate placeholder cursor images."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw


Color = tuple[int, int, int]

OUTLINE_COLOR: Color = (0, 0, 0)


class PlaceholderGenerator:
    """Draws simple cursor frames for demos and tests."""

    def __init__(self, output_dir: Optional[Path] = None):
        """Initialize the generator.

        Args:
            output_dir: Output directory for saved frames.
        """
        self.output_dir = output_dir or Path("assets/cursors")

    def draw_frames(
        self,
        style: str,
        size: int,
        frame_count: int,
        color: Color,
    ) -> list[Image.Image]:
        """Draw every frame of one cursor style.

        Args:
            style: One of "arrow", "crosshair" or "spinner".
            size: Side length in pixels.
            frame_count: Number of frames to draw.
            color: RGB fill color.

        Returns:
            RGBA images, one per frame.

        Raises:
            ValueError: If the style is unknown.
        """
        draw_fn = {
            "arrow": self._draw_arrow,
            "crosshair": self._draw_crosshair,
            "spinner": self._draw_spinner,
        }.get(style)
        if draw_fn is None:
            raise ValueError(f"Unknown cursor style: {style}")

        frames = []
        for index in range(frame_count):
            img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
            draw_fn(ImageDraw.Draw(img), size, index, frame_count, color)
            frames.append(img)
        return frames

    def save_frames(self, name: str, frames: list[Image.Image]) -> list[Path]:
        """Save frames as numbered PNG files.

        Returns:
            Paths of the written files.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        paths = []
        for index, frame in enumerate(frames):
            path = self.output_dir / f"{name}_{index:02d}.png"
            frame.save(path)
            paths.append(path)
        return paths

    def _draw_arrow(
        self,
        draw: ImageDraw.ImageDraw,
        size: int,
        index: int,
        frame_count: int,
        color: Color,
    ) -> None:
        # Frames fade the fill so multi-frame arrows pulse
        alpha = 255 - (index * 128 // max(frame_count, 1))
        points = [
            (1, 1),
            (1, size * 3 // 4),
            (size // 4, size * 9 // 16),
            (size * 3 // 8, size - 2),
            (size // 2, size * 15 // 16),
            (size * 3 // 8, size * 9 // 16),
            (size * 5 // 8, size * 9 // 16),
        ]
        draw.polygon(points, fill=(*color, alpha), outline=OUTLINE_COLOR)

    def _draw_crosshair(
        self,
        draw: ImageDraw.ImageDraw,
        size: int,
        index: int,
        frame_count: int,
        color: Color,
    ) -> None:
        mid = size // 2
        gap = size // 8
        draw.line([(0, mid), (mid - gap, mid)], fill=color, width=2)
        draw.line([(mid + gap, mid), (size - 1, mid)], fill=color, width=2)
        draw.line([(mid, 0), (mid, mid - gap)], fill=color, width=2)
        draw.line([(mid, mid + gap), (mid, size - 1)], fill=color, width=2)

    def _draw_spinner(
        self,
        draw: ImageDraw.ImageDraw,
        size: int,
        index: int,
        frame_count: int,
        color: Color,
    ) -> None:
        center = size / 2
        radius = size / 2 - 3
        dot = max(size // 10, 1)
        dots = max(frame_count, 1)
        for i in range(dots):
            angle = 2 * math.pi * i / dots
            px = center + radius * math.cos(angle)
            py = center + radius * math.sin(angle)
            # Brightest dot marks the current frame
            alpha = 255 if i == index else 80
            draw.ellipse(
                [px - dot, py - dot, px + dot, py + dot],
                fill=(*color, alpha),
            )
