"""Static circles and moving balls, with collision handling."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from consolebounce.vector import Vector2D, distance


class CollisionError(RuntimeError):
    """Raised when no valid time of contact exists for two colliding balls."""


def _reflect(velocity: Vector2D, normal: Vector2D) -> Vector2D:
    """Reflect ``velocity`` about a surface with unit ``normal``: v - 2(v.n)n."""
    return velocity + normal.scaled(-2 * velocity.dot(normal))


@dataclass
class Circle:
    """A ring with a centre, a radius and an outline thickness."""

    cx: float = 0.0
    cy: float = 0.0
    r: float = 50.0
    thickness: float = 4.0


@dataclass(init=False)
class Ball(Circle):
    """A moving point-like ball (radius 0) drawn with a given thickness."""

    spd_x: float = 0.0
    spd_y: float = 0.0

    def __init__(
        self,
        cx: float = 0.0,
        cy: float = 0.0,
        thickness: float = 4.0,
        spd_x: float = 0.0,
        spd_y: float = 0.0,
    ) -> None:
        super().__init__(cx, cy, 0.0, thickness)
        self.spd_x = spd_x
        self.spd_y = spd_y

    def move(self) -> None:
        """Advance the position by one step of the current speed."""
        self.cx += self.spd_x
        self.cy += self.spd_y

    def bounce(
        self,
        circles: Sequence[Circle],
        balls: Sequence[Ball],
        index: int,
        symb_mod: float,
        frame_h: int,
        frame_w: int,
    ) -> None:
        """Resolve collisions with the frame walls, the circles and later balls.

        ``index`` is this ball's position in ``balls``; only balls after it
        are checked, so each pair is handled once per frame.
        """
        self._bounce_walls(symb_mod, frame_h, frame_w)
        self._bounce_circles(circles)
        for other in balls[index + 1:]:
            self._bounce_ball(other)

    def _bounce_walls(self, symb_mod: float, frame_h: int, frame_w: int) -> None:
        reach = self.r + self.thickness
        if self.cx - reach <= 0:
            self.cx += 2 * (reach - self.cx)
            self.spd_x = -self.spd_x
        if self.cx + reach >= frame_w:
            self.cx -= 2 * (reach - frame_w + self.cx)
            self.spd_x = -self.spd_x

        top = frame_h * symb_mod
        if self.cy - reach <= 0:
            self.cy += 2 * (reach - self.cy)
            self.spd_y = -self.spd_y
        if self.cy + reach >= top:
            self.cy -= 2 * (reach - top + self.cy)
            self.spd_y = -self.spd_y

    def _bounce_circles(self, circles: Sequence[Circle]) -> None:
        for circle in circles:
            gap = distance(circle.cx, circle.cy, self.cx, self.cy)
            if abs(gap - circle.r - self.r) <= circle.thickness + self.thickness:
                normal = Vector2D(self.cx - circle.cx, self.cy - circle.cy).normalized()
                new_velocity = _reflect(Vector2D(self.spd_x, self.spd_y), normal)
                self.spd_x, self.spd_y = new_velocity.x, new_velocity.y
                break

    def _bounce_ball(self, other: Ball) -> None:
        gap = distance(other.cx, other.cy, self.cx, self.cy)
        if abs(gap - other.r - self.r) > other.thickness + self.thickness:
            return

        velocity = Vector2D(self.spd_x, self.spd_y)
        velocity_k = Vector2D(other.spd_x, other.spd_y)
        # Positions before this step's move.
        start = Vector2D(self.cx - self.spd_x, self.cy - self.spd_y)
        start_k = Vector2D(other.cx - other.spd_x, other.cy - other.spd_y)

        # Solve ||(c1 + t*v1) - (c2 + t*v2)|| = r1 + r2 for the time of contact t.
        delta_c0 = start + -start_k
        delta_v = velocity + -velocity_k
        reach = self.r + self.thickness + other.r + other.thickness
        a = delta_v.length() ** 2
        b = 2 * delta_c0.dot(delta_v)
        c = delta_c0.length() ** 2 - reach ** 2
        discriminant = b * b - 4 * a * c
        if a == 0 or discriminant < 0:
            raise CollisionError("colliding balls have no time of contact")
        root = math.sqrt(discriminant)
        t = min((-b + root) / (2 * a), (-b - root) / (2 * a))
        if t <= 0:
            raise CollisionError(f"time of contact {t} is not positive")

        contact = start + velocity.scaled(t)
        contact_k = start_k + velocity_k.scaled(t)
        normal = (contact + -contact_k).normalized()
        normal_k = normal

        rel_dir = normal.scaled(velocity.dot(normal))
        rel_dir_k = normal.scaled(velocity_k.dot(normal))
        faster_k = rel_dir.length() < rel_dir_k.length()
        if rel_dir.dot(rel_dir_k) < 0:
            # Projections point in opposite directions: flip the faster ball's normal.
            if faster_k:
                normal = -normal
            else:
                normal_k = -normal_k

        new_velocity = _reflect(velocity, normal)
        new_velocity_k = _reflect(velocity_k, normal_k)

        after = contact + new_velocity.scaled(1 - t)
        after_k = contact_k + new_velocity_k.scaled(1 - t)
        self.cx, self.cy = after.x, after.y
        other.cx, other.cy = after_k.x, after_k.y
        self.spd_x, self.spd_y = new_velocity.x, new_velocity.y
        other.spd_x, other.spd_y = new_velocity_k.x, new_velocity_k.y