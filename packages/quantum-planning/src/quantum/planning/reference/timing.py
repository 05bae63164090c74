"""
Timing benchmarks and cost multipliers.

Base times are wall minutes for a 10 heavy-atom reference molecule with a
def2-SVP-class basis; the exponent gives the power-law scaling with size.
"""

from typing import Dict, Set, Tuple

from ..models.core_models import CalculationType, PrecisionLevel, SoftwareName, TimeBenchmark


def default_time_benchmarks() -> Dict[CalculationType, Dict[SoftwareName, TimeBenchmark]]:
    return {
        CalculationType.GEOMETRY_OPTIMIZATION: {
            SoftwareName.XTB: TimeBenchmark(base_minutes=0.5, scaling=1.2),
            SoftwareName.PSI4: TimeBenchmark(base_minutes=5, scaling=2.0),
            SoftwareName.ORCA: TimeBenchmark(base_minutes=3, scaling=1.8),
            SoftwareName.PYSCF: TimeBenchmark(base_minutes=8, scaling=2.2),
        },
        CalculationType.ABSORPTION_SPECTRUM: {
            SoftwareName.PSI4: TimeBenchmark(base_minutes=15, scaling=3.0),
            SoftwareName.ORCA: TimeBenchmark(base_minutes=12, scaling=2.5),
            SoftwareName.PYSCF: TimeBenchmark(base_minutes=25, scaling=3.5),
        },
        CalculationType.FREQUENCY_ANALYSIS: {
            SoftwareName.XTB: TimeBenchmark(base_minutes=2, scaling=1.5),
            SoftwareName.PSI4: TimeBenchmark(base_minutes=20, scaling=3.5),
            SoftwareName.ORCA: TimeBenchmark(base_minutes=15, scaling=3.0),
        },
        CalculationType.NMR_PREDICTION: {
            SoftwareName.PSI4: TimeBenchmark(base_minutes=30, scaling=3.0),
            SoftwareName.ORCA: TimeBenchmark(base_minutes=25, scaling=2.8),
        },
    }


def default_basis_set_time_factors() -> Dict[str, float]:
    return {
        "STO-3G": 1.0,
        "def2-SVP": 1.5,
        "def2-TZVP": 3.0,
        "def2-QZVP": 8.0,
        "cc-pVDZ": 2.0,
        "cc-pVTZ": 5.0,
        "aug-cc-pVDZ": 3.5,
        "aug-cc-pVTZ": 12.0,
    }


def default_precision_time_factors() -> Dict[PrecisionLevel, float]:
    return {
        PrecisionLevel.LOW: 0.5,
        PrecisionLevel.HALF: 1.0,
        PrecisionLevel.FULL: 2.5,
    }


def default_functional_time_factors() -> Dict[str, float]:
    return {
        "B3LYP": 1.0,
        "CAM-B3LYP": 1.3,
        "M06-2X": 1.2,
        "wB97XD": 1.4,
        "HF": 0.8,
        "xtb": 0.1,
    }


def default_time_estimates() -> Dict[CalculationType, Dict[PrecisionLevel, float]]:
    """Fallback minutes when no benchmark exists for the software."""
    return {
        CalculationType.GEOMETRY_OPTIMIZATION: {
            PrecisionLevel.LOW: 15,
            PrecisionLevel.HALF: 45,
            PrecisionLevel.FULL: 120,
        },
        CalculationType.ABSORPTION_SPECTRUM: {
            PrecisionLevel.LOW: 30,
            PrecisionLevel.HALF: 90,
            PrecisionLevel.FULL: 300,
        },
        CalculationType.FREQUENCY_ANALYSIS: {
            PrecisionLevel.LOW: 45,
            PrecisionLevel.HALF: 120,
            PrecisionLevel.FULL: 360,
        },
        CalculationType.NMR_PREDICTION: {
            PrecisionLevel.LOW: 60,
            PrecisionLevel.HALF: 180,
            PrecisionLevel.FULL: 480,
        },
    }


def default_well_benchmarked_pairs() -> Set[Tuple[CalculationType, SoftwareName]]:
    """Type/software pairs whose timings earn high confidence."""
    return {(CalculationType.GEOMETRY_OPTIMIZATION, SoftwareName.PSI4)}


def default_queue_times() -> Dict[str, Dict[str, int]]:
    """Queue wait in minutes by cluster load and job priority."""
    return {
        "low": {"normal": 5, "high": 2, "low": 15},
        "medium": {"normal": 30, "high": 10, "low": 60},
        "high": {"normal": 120, "high": 45, "low": 240},
    }
