"""ray_tracer: vector math, colors and PPM output for a software renderer."""

from .vectors.v3 import V3
from .colors.color import Color
from .ppm.p3 import P3, unit_to_channel
from .ppm.image import Ppm, Row, Rows
from .gradient import fill_gradient, render_gradient

__all__ = [
    # algebra
    "V3",
    "Color",
    # output
    "P3",
    "Ppm",
    "Row",
    "Rows",
    "unit_to_channel",
    # driver
    "fill_gradient",
    "render_gradient",
]
