"""
Colors
======

``Color`` gives the ``V3`` algebra red/green/blue names.

>>> from ray_tracer.colors import Color
>>> c = Color(0.5, 0.25, 1.0)
>>> c += Color(1.0, 0.0, 0.0)
>>> c.r
1.5

Colors are never clamped. A value above 1.0 or below 0.0 is legal and only
gets squashed into range by ``ray_tracer.ppm.P3.from_color``.
"""

from .color import Color

__all__ = ['Color']
