"""Display sinks that present a resolved cursor."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Union

from PIL import Image

from animated_cursor.types import DEFAULT_HOTSPOT, CursorMode, Hotspot


class CursorDisplay(Protocol):
    """Anything that can present a cursor image with its hotspot."""

    def set_cursor(
        self,
        image: Optional[Image.Image],
        hotspot: Hotspot,
        mode: CursorMode,
    ) -> None:
        ...


class CanvasDisplay:
    """Presents the cursor by compositing it over a Pillow canvas."""

    def __init__(
        self,
        width: int = 320,
        height: int = 240,
        background: tuple[int, int, int, int] = (0, 0, 0, 255),
    ):
        """Initialize the canvas display.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            background: RGBA fill of the canvas.
        """
        self.width = width
        self.height = height
        self.background = background
        self.image: Optional[Image.Image] = None
        self.hotspot: Hotspot = DEFAULT_HOTSPOT
        self.mode = CursorMode.AUTO

    def set_cursor(
        self,
        image: Optional[Image.Image],
        hotspot: Hotspot,
        mode: CursorMode,
    ) -> None:
        """Store the cursor shown by the next composed frame."""
        self.image = image
        self.hotspot = hotspot
        self.mode = mode

    def compose(self, pointer: tuple[int, int]) -> Image.Image:
        """Draw the current cursor with its hotspot on the pointer position.

        Args:
            pointer: Pointer position in canvas pixels.

        Returns:
            A new RGBA canvas image.
        """
        frame = Image.new("RGBA", (self.width, self.height), self.background)
        if self.image is None:
            return frame

        cursor = self.image.convert("RGBA")
        x = int(round(pointer[0] - self.hotspot[0]))
        y = int(round(pointer[1] - self.hotspot[1]))

        # alpha_composite needs a layer the size of the canvas
        layer = Image.new("RGBA", frame.size, (0, 0, 0, 0))
        layer.paste(cursor, (x, y))
        return Image.alpha_composite(frame, layer)

    def save(self, path: Union[Path, str], pointer: tuple[int, int]) -> Path:
        """Compose a frame and write it as PNG.

        Returns:
            The path written to.
        """
        path = Path(path)
        frame = self.compose(pointer)
        try:
            frame.save(path, format="PNG")
        finally:
            frame.close()
        return path
