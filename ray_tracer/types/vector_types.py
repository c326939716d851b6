from __future__ import annotations
from numbers import Real
from typing import Tuple, Union
import numpy as np

Scalar = Union[int, float, np.floating, np.integer]
Components = Tuple[float, float, float]
Channels = Tuple[int, int, int]

NUM_COMPONENTS = 3


def is_scalar(value: object) -> bool:
    """
    Check whether a value can be broadcast to all three components.

    Booleans are rejected even though they are ``Real``.
    """
    return isinstance(value, (Real, np.floating, np.integer)) and not isinstance(value, (bool, np.bool_))
