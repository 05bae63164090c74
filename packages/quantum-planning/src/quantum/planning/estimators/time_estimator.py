"""
Wall-time estimation for quantum chemistry calculations.

Estimates follow a power-law in molecule size anchored on per-software
benchmarks, scaled by basis-set, precision and functional multipliers.
Combinations without a benchmark fall back to per-type default times.
"""

from __future__ import annotations

import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Union

from ..config import PlannerConfig
from ..models.core_models import (
    CalculationType,
    ConfidenceLevel,
    PrecisionLevel,
    SoftwareName,
)
from ..models.results import (
    Bottleneck,
    QueueEstimate,
    TimeComparison,
    TimeEstimate,
    TimeRange,
)
from ..reference import ReferenceTables, load_reference_tables
from ..resolvers import FallbackChain
from ..utils import round_half_up

logger = logging.getLogger(__name__)

BENCHMARK_SOURCE = "benchmark"
DEFAULT_SOURCE = "default"


class _RawTime(NamedTuple):
    minutes: float
    low_factor: float
    high_factor: float


def format_duration(minutes: float) -> str:
    """
    Human-readable duration.

    Examples: "45 seconds", "13 minutes", "2 hours", "1h 24m", "2 days 3h".
    """
    if minutes < 1:
        return f"{round_half_up(minutes * 60)} seconds"
    if minutes < 60:
        return f"{round_half_up(minutes)} minutes"
    if minutes < 1440:
        hours = math.floor(minutes / 60)
        remaining = round_half_up(minutes % 60)
        if remaining == 0:
            return f"{hours} hour{'s' if hours != 1 else ''}"
        return f"{hours}h {remaining}m"

    days = math.floor(minutes / 1440)
    remaining_hours = math.floor((minutes % 1440) / 60)
    return f"{days} day{'s' if days != 1 else ''} {remaining_hours}h"


class TimeEstimator:
    """
    Estimates calculation wall time from benchmark scaling laws.

    Lookup order for the base time is benchmark (type, software), then the
    per-type default table, then a flat default.
    """

    def __init__(
        self,
        tables: Optional[ReferenceTables] = None,
        config: Optional[PlannerConfig] = None,
    ):
        """
        Initialize time estimator.

        Args:
            tables: Reference tables (defaults to the bundled tables)
            config: Planner configuration
        """
        self.tables = tables or load_reference_tables()
        self.config = config or PlannerConfig()
        self._chain: FallbackChain[_RawTime] = FallbackChain(
            "time",
            [
                (BENCHMARK_SOURCE, self._from_benchmark),
                (DEFAULT_SOURCE, self._from_defaults),
            ],
        )

    def estimate(
        self,
        calculation_type: CalculationType,
        software: Union[SoftwareName, str],
        molecule_size: float,
        basis_set: str,
        functional: str,
        precision_level: PrecisionLevel,
    ) -> TimeEstimate:
        """
        Estimate wall time for a calculation.

        Args:
            calculation_type: Type of calculation
            software: Package that will run it; a name without a benchmark
                falls through to the default estimates
            molecule_size: Estimated heavy-atom count
            basis_set: Basis set name
            functional: Functional name
            precision_level: Precision tier

        Returns:
            TimeEstimate with point estimate, range, confidence and notes
        """
        resolution = self._chain.resolve(
            calculation_type, software, molecule_size, basis_set, functional, precision_level
        )
        raw = resolution.value
        total = raw.minutes
        low = total * raw.low_factor
        high = total * raw.high_factor

        if resolution.source == BENCHMARK_SOURCE:
            confidence = self._confidence(calculation_type, software, molecule_size, basis_set)
            factors = self._factors(calculation_type, molecule_size, basis_set, precision_level)
            bottlenecks = self._bottlenecks(calculation_type, molecule_size, basis_set, total)
        else:
            confidence = ConfidenceLevel.LOW
            factors = ["Using default timing estimates - actual times may vary significantly"]
            bottlenecks = []

        return TimeEstimate(
            minutes=round_half_up(total),
            hours=total / 60,
            range=TimeRange(
                min=round_half_up(low),
                max=round_half_up(high),
                min_hours=low / 60,
                max_hours=high / 60,
            ),
            formatted=format_duration(total),
            range_formatted=f"{format_duration(low)} - {format_duration(high)}",
            confidence=confidence,
            factors=factors,
            bottlenecks=bottlenecks,
            source=resolution.source,
        )

    def _from_benchmark(
        self,
        calculation_type: CalculationType,
        software: Union[SoftwareName, str],
        molecule_size: float,
        basis_set: str,
        functional: str,
        precision_level: PrecisionLevel,
    ) -> Optional[_RawTime]:
        benchmark = self.tables.time_benchmarks.get(calculation_type, {}).get(software)
        if benchmark is None:
            return None

        size_scale = (molecule_size / 10) ** benchmark.scaling
        basis_factor = self.tables.basis_set_time_factors.get(basis_set, 1.5)
        precision_factor = self.tables.precision_time_factors.get(precision_level, 1.0)
        functional_factor = self.tables.functional_time_factors.get(functional, 1.0)

        total = benchmark.base_minutes * size_scale * basis_factor * precision_factor * functional_factor
        uncertainty = self.config.time_uncertainty
        return _RawTime(total, 1 - uncertainty, 1 + uncertainty)

    def _from_defaults(
        self,
        calculation_type: CalculationType,
        software: Union[SoftwareName, str],
        molecule_size: float,
        basis_set: str,
        functional: str,
        precision_level: PrecisionLevel,
    ) -> _RawTime:
        minutes = self.tables.default_time_estimates.get(calculation_type, {}).get(
            precision_level, self.config.default_time_minutes
        )
        low_factor, high_factor = self.config.default_time_band
        return _RawTime(minutes, low_factor, high_factor)

    def _confidence(
        self,
        calculation_type: CalculationType,
        software: Union[SoftwareName, str],
        molecule_size: float,
        basis_set: str,
    ) -> ConfidenceLevel:
        confidence = ConfidenceLevel.MEDIUM

        if (calculation_type, software) in self.tables.well_benchmarked_pairs:
            confidence = ConfidenceLevel.HIGH

        # Large molecules and very large basis sets extrapolate far beyond the benchmarks
        if molecule_size > 100:
            confidence = ConfidenceLevel.LOW
        basis_factor = self.tables.basis_set_time_factors.get(basis_set)
        if basis_factor is not None and basis_factor > 5:
            confidence = ConfidenceLevel.LOW

        return confidence

    def _factors(
        self,
        calculation_type: CalculationType,
        molecule_size: float,
        basis_set: str,
        precision_level: PrecisionLevel,
    ) -> List[str]:
        factors = []
        if molecule_size > 30:
            factors.append(f"Large molecule ({molecule_size:g} atoms) increases time significantly")

        basis_factor = self.tables.basis_set_time_factors.get(basis_set)
        if basis_factor is not None and basis_factor > 3:
            factors.append(f"Large basis set ({basis_set}) is computationally expensive")

        if calculation_type == CalculationType.ABSORPTION_SPECTRUM:
            factors.append("TD-DFT calculations require solving many excited states")

        if precision_level == PrecisionLevel.FULL:
            factors.append("Full precision uses tight convergence criteria")

        return factors

    def _bottlenecks(
        self,
        calculation_type: CalculationType,
        molecule_size: float,
        basis_set: str,
        total_minutes: float,
    ) -> List[Bottleneck]:
        bottlenecks = []
        if total_minutes > 120:
            bottlenecks.append(
                Bottleneck(
                    type="CPU",
                    description="Long calculation time - consider using more CPU cores",
                    suggestion="Use parallel execution with 8-16 cores",
                )
            )

        basis_factor = self.tables.basis_set_time_factors.get(basis_set)
        if molecule_size > 50 or (basis_factor is not None and basis_factor > 5):
            bottlenecks.append(
                Bottleneck(
                    type="Memory",
                    description="Large basis set or molecule may require significant memory",
                    suggestion="Ensure 16+ GB RAM available, consider memory-efficient algorithms",
                )
            )

        if calculation_type == CalculationType.ABSORPTION_SPECTRUM and molecule_size > 30:
            bottlenecks.append(
                Bottleneck(
                    type="Convergence",
                    description="TD-DFT convergence can be challenging for large molecules",
                    suggestion="May need to adjust convergence criteria or initial guess",
                )
            )

        return bottlenecks

    def estimate_queue_time(self, priority: str = "normal", cluster_load: str = "medium") -> QueueEstimate:
        """
        Estimate scheduler queue wait.

        Args:
            priority: Job priority ("low", "normal", "high")
            cluster_load: Current cluster load ("low", "medium", "high")

        Returns:
            QueueEstimate; an unknown load uses the "medium" row and an
            unknown priority waits 30 minutes
        """
        row = self.tables.queue_times.get(cluster_load) or self.tables.queue_times.get("medium", {})
        minutes = row.get(priority, 30)
        return QueueEstimate(
            minutes=minutes,
            formatted=format_duration(minutes),
            priority=priority,
            cluster_load=cluster_load,
        )

    def compare_options(self, estimates: Sequence[TimeEstimate]) -> TimeComparison:
        """
        Compare several time estimates.

        Args:
            estimates: Estimates to compare (not modified)

        Returns:
            TimeComparison with fastest, slowest and median estimates

        Raises:
            ValueError: If no estimates are given
        """
        if not estimates:
            raise ValueError("At least one time estimate is required for comparison")

        ordered = sorted(estimates, key=lambda estimate: estimate.exact_minutes)
        fastest, slowest = ordered[0], ordered[-1]
        median = ordered[len(ordered) // 2]

        if fastest.exact_minutes > 0:
            ratio = slowest.exact_minutes / fastest.exact_minutes
        else:
            ratio = math.inf

        recommendations = []
        if fastest.exact_minutes < 30:
            recommendations.append(
                "Fastest option completes in under 30 minutes - good for interactive work"
            )
        if slowest.exact_minutes > 1440:
            recommendations.append(
                "Slowest option takes over 24 hours - consider overnight or weekend runs"
            )
        if math.isfinite(ratio) and ratio > 10:
            recommendations.append(
                f"Slowest option is {round_half_up(ratio)}x slower - "
                "consider if the extra accuracy is worth the time"
            )

        return TimeComparison(
            fastest=fastest,
            slowest=slowest,
            median=median,
            min_minutes=fastest.minutes,
            max_minutes=slowest.minutes,
            ratio=ratio,
            recommendations=recommendations,
        )
