"""A small ray tracer rendering text scene files to BMP and TGA images."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "colour",
    "config",
    "imageio",
    "intersection",
    "lighting",
    "render",
    "scene",
    "texturing",
    "vectors",
]