"""
Vector Algebra
==============

``V3`` is the three component float vector every other piece of the renderer
is built on.

>>> from ray_tracer.vectors import V3
>>> v = V3(1.0, 2.0, 3.0)
>>> v + 1.0
V3(2.0, 3.0, 4.0)
>>> v * V3(2.0, 0.5, 0.0)  # component-wise
V3(2.0, 1.0, 0.0)
>>> V3(1.0, 0.0, 0.0) / 0.0  # IEEE-754, no exception
V3(inf, nan, nan)

Notes
-----
- Equality is exact; there is no tolerance.
- ``v[i]`` accepts 0, 1 and 2 only. Negative indices raise ``IndexError``.
"""

from .v3 import V3

__all__ = ['V3']
