"""
Time, accuracy and precision-tier estimators.
"""

from .accuracy_estimator import AccuracyEstimator, format_error
from .precision_calculator import PrecisionCalculator
from .time_estimator import TimeEstimator, format_duration

__all__ = [
    "TimeEstimator",
    "AccuracyEstimator",
    "PrecisionCalculator",
    "format_duration",
    "format_error",
]
