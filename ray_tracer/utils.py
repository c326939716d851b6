from typing import Any
import numpy as np


def check_index(index: Any, size: int) -> int:
    """
    Validate a positional index against a fixed size.

    Negative indices are rejected instead of wrapping around.
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"indices must be integers, not {type(index).__name__}")
    if not 0 <= index < size:
        raise IndexError(f"index {index} out of range for size {size}")
    return int(index)


def check_dimension(name: str, value: Any) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return int(value)
