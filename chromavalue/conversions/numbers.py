import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from ..types.component_types import BYTE_MAX, HUE_MAX

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (``floor(x + 0.5)``), unlike ``round``."""
    return int(math.floor(value + 0.5))

def np_round_half_up(values: NDArray) -> NDArray:
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(np.int64)

def unit_to_byte(value: float) -> int:
    """Convert a value in [0, 1] to a byte in [0, 255]."""
    return int(clamp(round_half_up(value * BYTE_MAX), 0, BYTE_MAX))

def np_unit_to_byte(values: NDArray) -> NDArray:
    return np.clip(np_round_half_up(np.asarray(values, dtype=float) * BYTE_MAX), 0, BYTE_MAX)

def byte_to_unit(value: int) -> float:
    return value / BYTE_MAX

def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % HUE_MAX
    # -1e-20 % 360 rounds to 360.0
    if h >= HUE_MAX:
        h = 0.0
    return h
