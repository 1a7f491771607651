#!/usr/bin/env python3
"""Save a composed cursor frame to view."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from animated_cursor.assets import CURSOR_DEFINITIONS, create_frame_set
from animated_cursor.engine import AnimationController
from animated_cursor.renderer import CanvasDisplay
from animated_cursor.types import ResolverContext


def main():
    parser = argparse.ArgumentParser(description="Save a cursor frame as PNG")
    parser.add_argument("--style", choices=sorted(CURSOR_DEFINITIONS), default="busy")
    parser.add_argument("--time", type=float, default=0.0, help="Seconds of animation before saving")
    parser.add_argument("--output", type=Path, default=Path(__file__).parent.parent / "frame.png")
    args = parser.parse_args()

    context = ResolverContext()
    ref = context.add_frame_set(create_frame_set(args.style))

    display = CanvasDisplay(width=128, height=128, background=(40, 40, 60, 255))
    controller = AnimationController(display=display)
    controller.initialize(context)
    controller.set_active(ref)
    controller.tick(args.time)

    output = display.save(args.output, pointer=(64, 64))
    print(f"Saved frame {controller.active_reference.frame_index} of {args.style} to {output}")


if __name__ == "__main__":
    main()
