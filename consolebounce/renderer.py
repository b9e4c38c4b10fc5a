"""A scene of circles and balls drawn as text in the console."""

from __future__ import annotations

import os
import subprocess
import sys
from itertools import chain
from typing import TextIO

from consolebounce.shapes import Ball, Circle
from consolebounce.vector import distance

GRADIENT = " .:;+#"


def _clear_screen() -> None:
    subprocess.run("cls" if os.name == "nt" else "clear", shell=True, check=False)


class Scene:
    """Objects on a character grid, updated and drawn one frame at a time."""

    def __init__(
        self,
        frame_h: int = 90,
        frame_w: int = 180,
        symb_h: float = 10.0,
        symb_w: float = 5.0,
    ) -> None:
        self.frame_h = frame_h
        self.frame_w = frame_w
        self.symb_mod = symb_h / symb_w
        self.circles: list[Circle] = []
        self.balls: list[Ball] = []
        self.frame: list[list[int]] = [[0] * frame_w for _ in range(frame_h)]

    def add_circle(self, circle: Circle) -> None:
        """Place a circle in the scene."""
        self.circles.append(circle)

    def add_ball(self, ball: Ball) -> None:
        """Place a ball in the scene."""
        self.balls.append(ball)

    def remove_circle(self, index: int) -> Circle:
        """Remove and return the circle at ``index``."""
        return self.circles.pop(index)

    def remove_ball(self, index: int) -> Ball:
        """Remove and return the ball at ``index``."""
        return self.balls.pop(index)

    def _overlaps(self, x: float, y: float) -> int:
        return sum(
            1
            for shape in chain(self.circles, self.balls)
            if abs(distance(shape.cx, shape.cy, x, y) - shape.r) <= shape.thickness
        )

    def make_frame(self) -> None:
        """Count overlapping outlines for every cell, then advance the balls."""
        self.frame = [
            [self._overlaps(col, row * self.symb_mod) for col in range(self.frame_w)]
            for row in range(self.frame_h)
        ]
        for index, ball in enumerate(self.balls):
            ball.move()
            ball.bounce(
                self.circles, self.balls, index, self.symb_mod, self.frame_h, self.frame_w
            )

    def render(self) -> str:
        """Return the current frame as text, with a border on the right and bottom."""
        darkest = len(GRADIENT) - 1
        rows = (
            "".join(GRADIENT[min(count, darkest)] for count in row) + "|\n"
            for row in self.frame
        )
        return "".join(rows) + "-" * self.frame_w + "+"

    def draw_frame(self, stream: TextIO | None = None) -> None:
        """Write the rendered frame, clearing the terminal first when there is one."""
        stream = sys.stdout if stream is None else stream
        if stream.isatty():
            _clear_screen()
        stream.write(self.render())
        stream.flush()