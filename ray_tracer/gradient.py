"""
Gradient Rendering
==================

The first image the renderer produces: red grows left to right, green grows
bottom to top and blue stays fixed.
"""

import numpy as np

from .colors.color import Color
from .ppm.image import Ppm

DEFAULT_WIDTH = 255
DEFAULT_HEIGHT = 255
DEFAULT_BLUE = 0.25


def fill_gradient(ppm: Ppm, blue: float = DEFAULT_BLUE) -> Ppm:
    """
    Paint a two-axis gradient into ``ppm`` and return it.

    Rows are painted bottom-up, so the first row in the output document holds
    the brightest green. Each channel is ``index / (extent - 1)``; with an
    extent of 1 that is 0/0, which follows IEEE rules and ends up as 0. The
    whole image is converted to pixels in one pass.
    """
    scale = Color(ppm.width - 1, ppm.height - 1, 1.0)
    colors = np.empty((ppm.height, ppm.width, 3), dtype=np.float64)
    for row, stored_row in enumerate(reversed(range(ppm.height))):
        for col in range(ppm.width):
            colors[stored_row, col] = (Color(col, row, blue) / scale).channels()
    return ppm.paint(colors)


def render_gradient(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    blue: float = DEFAULT_BLUE,
) -> Ppm:
    return fill_gradient(Ppm(width, height), blue)
