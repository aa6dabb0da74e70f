"""In-memory raster canvas, colour conversions, shapes and BMP/XWD image files."""

__version__ = "0.1.0"
__all__ = ["canvas", "colors", "drawing", "imagefiles"]