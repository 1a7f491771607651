#!/usr/bin/env python3
"""Run a headless demo of the animated cursor engine."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from animated_cursor.app import CursorLoop, CursorSwitcher
from animated_cursor.assets import create_default_definition_set, create_frame_set, style_index
from animated_cursor.engine import AnimationController
from animated_cursor.renderer import HeadlessDisplay
from animated_cursor.types import ExternalReference, ResolverContext


def main():
    parser = argparse.ArgumentParser(description="Animated cursor demo")
    parser.add_argument("--fps", type=int, default=30, help="Simulated frames per second")
    parser.add_argument("--seconds", type=float, default=2.0, help="Simulated run time")
    parser.add_argument("--switch-every", type=float, default=1.0, help="Seconds between cursor switches")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    context = ResolverContext()
    arrow = context.add_frame_set(create_frame_set("arrow"))
    bundle_index = context.add_definition_set(create_default_definition_set())
    busy = ExternalReference(bundle_index, style_index("busy"), 0)

    display = HeadlessDisplay()
    controller = AnimationController(display=display)
    controller.initialize(context)
    controller.set_active(arrow)

    switcher = CursorSwitcher(controller, arrow, busy)
    loop = CursorLoop(controller=controller, target_fps=args.fps)

    print("Animated Cursor Demo")
    print("=" * 40)

    dt = 1.0 / args.fps
    elapsed = 0.0
    since_switch = 0.0
    while elapsed < args.seconds:
        loop.tick(dt)
        elapsed += dt
        since_switch += dt
        if since_switch >= args.switch_every:
            since_switch = 0.0
            switcher.toggle()
        ref = controller.active_reference
        print(f"t={elapsed:5.2f}s  {ref.kind.value:8s}  frame={ref.frame_index}  hotspot={controller.current_hotspot()}")

    print("=" * 40)
    print(f"Display calls: {display.render_count}")
    print(f"FPS: {loop.fps:.1f}")


if __name__ == "__main__":
    main()
