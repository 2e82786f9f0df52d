"""Qt helper utilities."""

from PySide6 import QtGui
import numpy as np

from ..colors import Color


def to_qcolor(color: Color) -> QtGui.QColor:
    """Convert a :class:`~chartframe.colors.Color` into a ``QColor``."""
    return QtGui.QColor(color.r, color.g, color.b, color.a)


def qimage_to_bgr(image: QtGui.QImage) -> np.ndarray:
    """Convert a :class:`~PySide6.QtGui.QImage` into a BGR NumPy array."""
    fmt = getattr(QtGui.QImage, "Format_RGBA8888", None)
    if fmt is None:
        fmt = QtGui.QImage.Format.Format_RGBA8888
    img: QtGui.QImage = image.convertToFormat(fmt)
    width = img.width()
    height = img.height()
    bytes_per_line = img.bytesPerLine()
    buf = img.constBits()  # memoryview in PySide6
    arr = np.frombuffer(buf, np.uint8)
    arr = arr.reshape((height, bytes_per_line))  # include stride
    arr = arr[:, : width * 4]  # crop padding
    arr = arr.reshape((height, width, 4))
    rgb = arr[..., :3]
    bgr = rgb[..., ::-1]
    return np.ascontiguousarray(bgr)


__all__ = ["to_qcolor", "qimage_to_bgr"]
