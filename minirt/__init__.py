"""Scene parsing, ray intersection, camera rays and BMP output for a ray tracer."""

__version__ = "0.1.0"
__all__ = [
    "bmp",
    "camera",
    "colors",
    "intersect",
    "lineparse",
    "numparse",
    "parser",
    "scene",
    "vectors",
]