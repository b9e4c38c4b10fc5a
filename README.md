# consolebounce

Balls bouncing around the terminal, drawn with ASCII characters.

Each ball moves in a straight line and bounces off the edges of the frame,
off fixed circles, and off the other balls. Where several shapes overlap,
the character gets darker, running through ` .:;+#`. The frame has a `|`
border on the right and a `-` border along the bottom, meeting in a `+`.

## Installation

```
pip install .
```

## Running the animation

```
consolebounce
```

This animates a demo scene of two balls on a 180 by 90 character grid.
When the output is a terminal, the screen is cleared before each frame is
drawn. The animation runs until you stop it with Ctrl+C.

To stop after a fixed number of frames, pass a positive count:

```
consolebounce --frames 100
```

## Using it as a library

```python
import sys

from consolebounce.renderer import Scene
from consolebounce.shapes import Ball, Circle

scene = Scene(frame_h=90, frame_w=180, symb_h=10, symb_w=5)
scene.add_circle(Circle(90, 90, 0, 30))
scene.add_ball(Ball(30, 10, 8, 0, 2.3))
scene.add_ball(Ball(30, 50, 10, 0, 1.7))

scene.make_frame()          # rasterise the shapes, then advance the simulation
print(scene.render())       # the frame as text
scene.draw_frame(sys.stdout)
```

- `Scene(frame_h, frame_w, symb_h, symb_w)` holds the shapes on a grid of
  `frame_h` rows and `frame_w` columns. `symb_h / symb_w` is the height to
  width ratio of a character cell, used to stretch rows so shapes look round.
  The defaults are 90, 180, 10 and 5.
- `Scene.make_frame()` counts, for every cell, how many shape outlines cover
  it, then moves every ball and resolves its collisions.
- `Scene.render()` returns the current frame as a string;
  `Scene.draw_frame(stream)` writes it to `stream` (standard output by
  default), clearing the screen first if the stream is a terminal.
- `Scene.remove_circle(index)` and `Scene.remove_ball(index)` take a shape
  off the scene and return it.
- `Circle(cx, cy, r, thickness)` is a fixed ring.
- `Ball(cx, cy, thickness, spd_x, spd_y)` is a moving dot with radius 0.
  `Ball.move()` adds its speed to its position.
  `Ball.bounce(circles, balls, index, symb_mod, frame_h, frame_w)` handles
  collisions with the walls, the circles, and the balls after position
  `index` in `balls`.
- A collision between two balls that has no positive time of contact raises
  `CollisionError`.

`consolebounce.cli.build_scene()` returns the demo scene that the command
animates.

`consolebounce.vector` provides the small immutable `Vector2D` type that the
physics uses (`length`, `scaled`, `normalized`, `dot`, `+` and unary `-`),
and a `distance(x1, y1, x2, y2)` helper.

## Running the tests

```
pip install .[test]
pytest
```