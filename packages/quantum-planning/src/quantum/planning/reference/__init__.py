"""
Static reference tables for calculation planning.

All tables are bundled in a single immutable :class:`ReferenceTables`
instance. :func:`load_reference_tables` builds the default instance once per
process; components accept an instance in their constructor so tests can
substitute their own tables.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.core_models import (
    AccuracyBenchmark,
    CalculationType,
    CalculationTypeInfo,
    ConvergenceCriteria,
    DefaultAccuracy,
    FunctionalCorrection,
    PrecisionAccuracy,
    PrecisionLevel,
    PrecisionTierInfo,
    ResourceEstimate,
    SizeCategory,
    SoftwareName,
    SoftwareProfile,
    TimeBenchmark,
)
from .accuracy import (
    default_accuracy_benchmarks,
    default_basis_set_quality,
    default_functional_corrections,
    default_precision_accuracy,
    default_relative_accuracy_factors,
    default_synthetic_accuracy,
    default_trusted_combinations,
)
from .calculation_types import (
    DEFAULT_FUNCTIONAL,
    default_calculation_types,
    default_functionals,
    default_method_notes,
    default_step_descriptions,
)
from .precision import (
    default_basis_set_hierarchy,
    default_convergence_criteria,
    default_precision_tiers,
    default_resource_estimates,
)
from .software import (
    default_comparison_methods,
    default_expected_accuracy,
    default_functional_benchmarks,
    default_method_software_mapping,
    default_software_profiles,
    default_strength_labels,
    default_weakness_labels,
)
from .timing import (
    default_basis_set_time_factors,
    default_functional_time_factors,
    default_precision_time_factors,
    default_queue_times,
    default_time_benchmarks,
    default_time_estimates,
    default_well_benchmarked_pairs,
)


class ReferenceTables(BaseModel):
    """Immutable bundle of every static table used by the planners.

    Every mapping is exposed as a read-only view so the process-wide default
    instance cannot be altered by a caller.
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    # Research planning
    calculation_types: Dict[CalculationType, CalculationTypeInfo] = Field(
        default_factory=default_calculation_types
    )
    functionals: Dict[CalculationType, str] = Field(default_factory=default_functionals)
    default_functional: str = DEFAULT_FUNCTIONAL
    step_descriptions: Dict[str, str] = Field(default_factory=default_step_descriptions)
    method_notes: Dict[str, Dict[str, str]] = Field(default_factory=default_method_notes)

    # Software selection
    software_profiles: Dict[SoftwareName, SoftwareProfile] = Field(
        default_factory=default_software_profiles
    )
    method_software_mapping: Dict[str, List[SoftwareName]] = Field(
        default_factory=default_method_software_mapping
    )
    strength_labels: Dict[str, str] = Field(default_factory=default_strength_labels)
    weakness_labels: Dict[str, str] = Field(default_factory=default_weakness_labels)
    expected_accuracy: Dict[SoftwareName, Dict[CalculationType, str]] = Field(
        default_factory=default_expected_accuracy
    )
    comparison_methods: Dict[CalculationType, List[str]] = Field(
        default_factory=default_comparison_methods
    )
    functional_benchmarks: Dict[CalculationType, Dict[str, str]] = Field(
        default_factory=default_functional_benchmarks
    )

    # Time estimation
    time_benchmarks: Dict[CalculationType, Dict[SoftwareName, TimeBenchmark]] = Field(
        default_factory=default_time_benchmarks
    )
    basis_set_time_factors: Dict[str, float] = Field(default_factory=default_basis_set_time_factors)
    precision_time_factors: Dict[PrecisionLevel, float] = Field(
        default_factory=default_precision_time_factors
    )
    functional_time_factors: Dict[str, float] = Field(
        default_factory=default_functional_time_factors
    )
    default_time_estimates: Dict[CalculationType, Dict[PrecisionLevel, float]] = Field(
        default_factory=default_time_estimates
    )
    well_benchmarked_pairs: Set[Tuple[CalculationType, SoftwareName]] = Field(
        default_factory=default_well_benchmarked_pairs
    )
    queue_times: Dict[str, Dict[str, int]] = Field(default_factory=default_queue_times)

    # Accuracy estimation
    accuracy_benchmarks: Dict[CalculationType, Dict[str, AccuracyBenchmark]] = Field(
        default_factory=default_accuracy_benchmarks
    )
    precision_accuracy: Dict[PrecisionLevel, PrecisionAccuracy] = Field(
        default_factory=default_precision_accuracy
    )
    functional_corrections: Dict[str, FunctionalCorrection] = Field(
        default_factory=default_functional_corrections
    )
    basis_set_quality: Dict[str, float] = Field(default_factory=default_basis_set_quality)
    synthetic_accuracy: Dict[CalculationType, DefaultAccuracy] = Field(
        default_factory=default_synthetic_accuracy
    )
    relative_accuracy_factors: Dict[Tuple[PrecisionLevel, PrecisionLevel], float] = Field(
        default_factory=default_relative_accuracy_factors
    )
    trusted_combinations: Set[Tuple[str, str]] = Field(default_factory=default_trusted_combinations)

    # Precision tiers
    precision_tiers: Dict[PrecisionLevel, PrecisionTierInfo] = Field(
        default_factory=default_precision_tiers
    )
    basis_set_hierarchy: Dict[PrecisionLevel, Dict[SizeCategory, str]] = Field(
        default_factory=default_basis_set_hierarchy
    )
    convergence_criteria: Dict[PrecisionLevel, ConvergenceCriteria] = Field(
        default_factory=default_convergence_criteria
    )
    resource_estimates: Dict[PrecisionLevel, Dict[SizeCategory, ResourceEstimate]] = Field(
        default_factory=default_resource_estimates
    )

    @field_validator("*", mode="after")
    @classmethod
    def freeze_tables(cls, value: Any) -> Any:
        return _freeze(value)


def _freeze(value: Any) -> Any:
    """Convert nested dicts, lists and sets into read-only equivalents."""
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, set):
        return frozenset(value)
    return value


@lru_cache(maxsize=1)
def load_reference_tables() -> ReferenceTables:
    """Default reference tables, constructed once per process."""
    return ReferenceTables()


__all__ = [
    "ReferenceTables",
    "load_reference_tables",
]
