"""
Accuracy benchmarks and error multipliers.

Benchmark entries are keyed by ``"functional/basis"`` and hold the mean
absolute error against experiment for the calculation type.
"""

from typing import Dict, Set, Tuple

from ..models.core_models import (
    AccuracyBenchmark,
    CalculationType,
    DefaultAccuracy,
    FunctionalCorrection,
    PrecisionAccuracy,
    PrecisionLevel,
)


def _entries(unit: str, values: Dict[str, Tuple[float, float]]) -> Dict[str, AccuracyBenchmark]:
    return {
        key: AccuracyBenchmark(mean_error=mean, std_dev=std, unit=unit)
        for key, (mean, std) in values.items()
    }


def default_accuracy_benchmarks() -> Dict[CalculationType, Dict[str, AccuracyBenchmark]]:
    return {
        CalculationType.ABSORPTION_SPECTRUM: _entries(
            "eV",
            {
                "B3LYP/def2-SVP": (0.35, 0.25),
                "B3LYP/def2-TZVP": (0.25, 0.20),
                "B3LYP/def2-QZVP": (0.20, 0.18),
                "CAM-B3LYP/def2-SVP": (0.25, 0.22),
                "CAM-B3LYP/def2-TZVP": (0.18, 0.18),
                "CAM-B3LYP/def2-QZVP": (0.15, 0.15),
            },
        ),
        CalculationType.GEOMETRY_OPTIMIZATION: _entries(
            "Å",
            {
                "B3LYP/def2-SVP": (0.015, 0.012),
                "B3LYP/def2-TZVP": (0.008, 0.008),
                "B3LYP/def2-QZVP": (0.005, 0.006),
            },
        ),
        CalculationType.FREQUENCY_ANALYSIS: _entries(
            "cm⁻¹",
            {
                "B3LYP/def2-SVP": (35, 25),
                "B3LYP/def2-TZVP": (25, 20),
                "B3LYP/def2-QZVP": (20, 18),
            },
        ),
        CalculationType.HOMO_LUMO: _entries(
            "eV",
            {
                "B3LYP/def2-SVP": (0.4, 0.3),
                "B3LYP/def2-TZVP": (0.3, 0.25),
                "B3LYP/def2-QZVP": (0.25, 0.22),
            },
        ),
    }


def default_precision_accuracy() -> Dict[PrecisionLevel, PrecisionAccuracy]:
    return {
        PrecisionLevel.LOW: PrecisionAccuracy(
            multiplier=2.5, description="Significant quantitative errors expected"
        ),
        PrecisionLevel.HALF: PrecisionAccuracy(
            multiplier=1.0, description="Good quantitative accuracy"
        ),
        PrecisionLevel.FULL: PrecisionAccuracy(
            multiplier=0.7, description="Best available accuracy"
        ),
    }


def default_functional_corrections() -> Dict[str, FunctionalCorrection]:
    return {
        "B3LYP": FunctionalCorrection(charge_transfer=1.0, general_accuracy=1.0),
        "CAM-B3LYP": FunctionalCorrection(charge_transfer=0.7, general_accuracy=0.9),
        "M06-2X": FunctionalCorrection(charge_transfer=0.8, general_accuracy=0.95),
        "wB97XD": FunctionalCorrection(charge_transfer=0.75, general_accuracy=0.9),
        "PBE": FunctionalCorrection(charge_transfer=1.3, general_accuracy=1.1),
        "HF": FunctionalCorrection(charge_transfer=0.9, general_accuracy=1.2),
    }


def default_basis_set_quality() -> Dict[str, float]:
    """Relative completeness of each basis set (1.0 = best)."""
    return {
        "STO-3G": 0.2,
        "def2-SVP": 0.7,
        "def2-TZVP": 0.9,
        "def2-QZVP": 1.0,
        "cc-pVDZ": 0.8,
        "cc-pVTZ": 0.95,
        "aug-cc-pVDZ": 0.85,
        "aug-cc-pVTZ": 0.98,
    }


def default_synthetic_accuracy() -> Dict[CalculationType, DefaultAccuracy]:
    """Coefficients scaled by ``1.5 - basis quality`` when no benchmark exists."""
    return {
        CalculationType.ABSORPTION_SPECTRUM: DefaultAccuracy(
            mean_coefficient=0.4, std_coefficient=0.3, unit="eV"
        ),
        CalculationType.GEOMETRY_OPTIMIZATION: DefaultAccuracy(
            mean_coefficient=0.02, std_coefficient=0.015, unit="Å"
        ),
        CalculationType.FREQUENCY_ANALYSIS: DefaultAccuracy(
            mean_coefficient=50, std_coefficient=35, unit="cm⁻¹"
        ),
        CalculationType.HOMO_LUMO: DefaultAccuracy(
            mean_coefficient=0.5, std_coefficient=0.4, unit="eV"
        ),
    }


def default_relative_accuracy_factors() -> Dict[Tuple[PrecisionLevel, PrecisionLevel], float]:
    """Error ratio of a tier relative to a more precise reference tier."""
    return {
        (PrecisionLevel.LOW, PrecisionLevel.HALF): 1.8,
        (PrecisionLevel.LOW, PrecisionLevel.FULL): 2.5,
        (PrecisionLevel.HALF, PrecisionLevel.FULL): 1.4,
    }


def default_trusted_combinations() -> Set[Tuple[str, str]]:
    """Functional/basis pairs with extensive validation."""
    return {("B3LYP", "def2-TZVP")}
