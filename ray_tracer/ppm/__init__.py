"""
PPM Output
==========

``P3`` is an 8-bit RGB pixel; ``Ppm`` is the row-major image buffer that
serializes to the plain-text PPM format::

    P3
    <width> <height>
    255
    <r> <g> <b>
    ...

one pixel per line, row 0 first, left to right.

Color to pixel conversion clamps each channel to [0, 1], multiplies by
255.999 and truncates, so 1.0 maps to 255 and 0.5 maps to 127.
"""

from .p3 import P3, unit_to_channel
from .image import Ppm, Row, Rows

__all__ = ['P3', 'Ppm', 'Row', 'Rows', 'unit_to_channel']
