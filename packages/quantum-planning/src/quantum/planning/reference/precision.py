"""
Precision tier definitions: basis hierarchy, convergence and resources.
"""

from typing import Dict

from ..models.core_models import (
    ConvergenceCriteria,
    PrecisionLevel,
    PrecisionTierInfo,
    ResourceEstimate,
    SizeCategory,
)


def default_precision_tiers() -> Dict[PrecisionLevel, PrecisionTierInfo]:
    return {
        PrecisionLevel.FULL: PrecisionTierInfo(
            name="Full Precision",
            description="Maximum accuracy using large basis sets and tight convergence",
            priority=1,
            use_cases=[
                "Publication-quality results",
                "Benchmark calculations",
                "Method validation",
                "Critical decision making",
            ],
        ),
        PrecisionLevel.HALF: PrecisionTierInfo(
            name="Balanced Precision",
            description="Good accuracy with reasonable computational cost",
            priority=2,
            use_cases=[
                "Routine research calculations",
                "Parameter optimization",
                "Comparative studies",
                "Educational purposes",
            ],
        ),
        PrecisionLevel.LOW: PrecisionTierInfo(
            name="Fast Preview",
            description="Quick results using smaller basis sets for initial screening",
            priority=3,
            use_cases=[
                "Initial screening",
                "Method testing",
                "Proof of concept",
                "Large dataset generation",
            ],
        ),
    }


def default_basis_set_hierarchy() -> Dict[PrecisionLevel, Dict[SizeCategory, str]]:
    return {
        PrecisionLevel.FULL: {
            SizeCategory.SMALL: "def2-QZVP",
            SizeCategory.MEDIUM: "def2-TZVP",
            SizeCategory.LARGE: "def2-SVP",
        },
        PrecisionLevel.HALF: {
            SizeCategory.SMALL: "def2-TZVP",
            SizeCategory.MEDIUM: "def2-SVP",
            SizeCategory.LARGE: "def2-SVP",
        },
        PrecisionLevel.LOW: {
            SizeCategory.SMALL: "def2-SVP",
            SizeCategory.MEDIUM: "STO-3G",
            SizeCategory.LARGE: "STO-3G",
        },
    }


def default_convergence_criteria() -> Dict[PrecisionLevel, ConvergenceCriteria]:
    return {
        PrecisionLevel.FULL: ConvergenceCriteria(
            energy=1e-8, gradient=1e-6, density=1e-8, max_iterations=200
        ),
        PrecisionLevel.HALF: ConvergenceCriteria(
            energy=1e-6, gradient=1e-4, density=1e-6, max_iterations=100
        ),
        PrecisionLevel.LOW: ConvergenceCriteria(
            energy=1e-4, gradient=1e-3, density=1e-4, max_iterations=50
        ),
    }


def default_resource_estimates() -> Dict[PrecisionLevel, Dict[SizeCategory, ResourceEstimate]]:
    def res(memory_gb: int, cores: int, disk_gb: int) -> ResourceEstimate:
        return ResourceEstimate(memory_gb=memory_gb, cores=cores, disk_gb=disk_gb)

    return {
        PrecisionLevel.FULL: {
            SizeCategory.SMALL: res(8, 8, 5),
            SizeCategory.MEDIUM: res(16, 16, 10),
            SizeCategory.LARGE: res(32, 24, 20),
        },
        PrecisionLevel.HALF: {
            SizeCategory.SMALL: res(4, 4, 2),
            SizeCategory.MEDIUM: res(8, 8, 5),
            SizeCategory.LARGE: res(16, 12, 10),
        },
        PrecisionLevel.LOW: {
            SizeCategory.SMALL: res(2, 2, 1),
            SizeCategory.MEDIUM: res(4, 4, 2),
            SizeCategory.LARGE: res(8, 6, 3),
        },
    }
