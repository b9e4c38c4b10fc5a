"""Bouncing balls and circles rendered as ASCII art in the terminal."""

__version__ = "0.1.0"
__all__ = ["cli", "renderer", "shapes", "vector"]