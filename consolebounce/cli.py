"""Command-line entry point that animates bouncing balls in the console."""

from __future__ import annotations

import argparse
import itertools
from typing import Sequence

from consolebounce.renderer import Scene
from consolebounce.shapes import Ball


def build_scene() -> Scene:
    """Return the demo scene with its two balls."""
    scene = Scene()
    scene.add_ball(Ball(30, 10, 8, 0, 2.3))
    scene.add_ball(Ball(30, 50, 10, 0, 1.7))
    return scene


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{text} is not a positive integer")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Run the animation; forever unless a frame count is given."""
    parser = argparse.ArgumentParser(
        prog="consolebounce", description="Balls bouncing in the console."
    )
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="stop after this many frames"
    )
    args = parser.parse_args(argv)

    scene = build_scene()
    frames = itertools.count() if args.frames is None else range(args.frames)
    try:
        for _ in frames:
            scene.make_frame()
            scene.draw_frame()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())