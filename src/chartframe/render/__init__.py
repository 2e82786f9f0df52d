"""Backends that turn frames into pixels.

The raster backend only needs OpenCV and NumPy. The painter backend needs
PySide6 and is imported lazily so headless users never load Qt.
"""

from .raster import raster_text_width, render_frame_bgr

__all__ = ["render_frame_bgr", "raster_text_width"]
