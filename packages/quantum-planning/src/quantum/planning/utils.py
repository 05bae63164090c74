"""
Numeric helpers shared by the estimators.
"""

import math
from typing import Tuple

import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, bounds: Tuple[float, float]) -> float:
    """Clip ``value`` into the closed interval ``bounds``."""
    return float(np.clip(value, bounds[0], bounds[1]))


def mean_score(*scores: float) -> float:
    return float(np.mean(scores))
