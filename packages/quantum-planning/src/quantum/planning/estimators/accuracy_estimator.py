"""
Accuracy estimation against experiment and between precision tiers.

Expected errors come from a benchmark database keyed by functional and
basis set; combinations without benchmark data receive a synthetic error
derived from basis-set quality.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from ..config import PlannerConfig
from ..models.core_models import (
    AccuracyBenchmark,
    CalculationType,
    ConfidenceLevel,
    PrecisionLevel,
)
from ..models.results import (
    AccuracyComparison,
    AccuracyEstimate,
    BenchmarkReference,
    ConfidenceAssessment,
    ErrorEstimate,
    ExperimentalAccuracy,
    RelativeAccuracy,
    ReliabilityAssessment,
)
from ..reference import ReferenceTables, load_reference_tables
from ..resolvers import FallbackChain
from ..utils import clamp, round_half_up

logger = logging.getLogger(__name__)

EXPERIMENT = "experiment"


def format_error(mean: float, unit: str) -> str:
    """Format a mean error with precision matched to its magnitude."""
    if mean < 0.01:
        return f"±{mean * 1000:.1f} m{unit}"
    if mean < 1:
        return f"±{mean:.2f} {unit}"
    return f"±{round_half_up(mean)} {unit}"


class AccuracyEstimator:
    """
    Estimates expected errors and confidence for a calculation setup.

    The base error is resolved benchmark-first, then synthesized from
    basis-set quality, then taken from a generic default for types with no
    accuracy model at all.
    """

    def __init__(
        self,
        tables: Optional[ReferenceTables] = None,
        config: Optional[PlannerConfig] = None,
    ):
        self.tables = tables or load_reference_tables()
        self.config = config or PlannerConfig()
        self._chain: FallbackChain[AccuracyBenchmark] = FallbackChain(
            "accuracy",
            [
                ("benchmark", self._from_benchmark),
                ("synthetic", self._from_basis_quality),
                ("generic", self._generic_default),
            ],
        )

    def estimate(
        self,
        calculation_type: CalculationType,
        precision_level: PrecisionLevel,
        basis_set: str,
        functional: str,
        reference_level: Union[PrecisionLevel, str] = EXPERIMENT,
    ) -> AccuracyEstimate:
        """
        Estimate accuracy of a calculation setup.

        Args:
            calculation_type: Type of calculation
            precision_level: Precision tier of the setup
            basis_set: Basis set name
            functional: Functional name
            reference_level: "experiment" or a precision tier to compare against

        Returns:
            AccuracyEstimate with expected error, confidence and reliability
        """
        resolution = self._chain.resolve(calculation_type, functional, basis_set)
        error = self._expected_error(resolution.value, precision_level, functional)

        return AccuracyEstimate(
            vs_experiment=self._experimental_accuracy(error, calculation_type),
            vs_full=self._relative_accuracy(precision_level, reference_level, error),
            expected_error=format_error(error.mean, error.unit),
            error=error,
            confidence=self.confidence(calculation_type, precision_level, basis_set, functional),
            reliability=self.reliability(calculation_type, precision_level, basis_set, functional),
            limitations=self.limitations(calculation_type, precision_level, basis_set, functional),
            benchmark_data=self._benchmark_reference(calculation_type, functional, basis_set),
            source=resolution.source,
        )

    def _lookup_benchmark(
        self, calculation_type: CalculationType, functional: str, basis_set: str
    ) -> Optional[AccuracyBenchmark]:
        return self.tables.accuracy_benchmarks.get(calculation_type, {}).get(
            f"{functional}/{basis_set}"
        )

    def _from_benchmark(
        self, calculation_type: CalculationType, functional: str, basis_set: str
    ) -> Optional[AccuracyBenchmark]:
        return self._lookup_benchmark(calculation_type, functional, basis_set)

    def _from_basis_quality(
        self, calculation_type: CalculationType, functional: str, basis_set: str
    ) -> Optional[AccuracyBenchmark]:
        coefficients = self.tables.synthetic_accuracy.get(calculation_type)
        if coefficients is None:
            return None
        scale = 1.5 - self.basis_set_quality(basis_set)
        return AccuracyBenchmark(
            mean_error=coefficients.mean_coefficient * scale,
            std_dev=coefficients.std_coefficient * scale,
            unit=coefficients.unit,
        )

    def _generic_default(
        self, calculation_type: CalculationType, functional: str, basis_set: str
    ) -> AccuracyBenchmark:
        return AccuracyBenchmark(mean_error=0.1, std_dev=0.1, unit="a.u.")

    def basis_set_quality(self, basis_set: str) -> float:
        """Relative basis-set completeness in [0, 1]; unknown sets score 0.5."""
        return self.tables.basis_set_quality.get(basis_set, 0.5)

    def _expected_error(
        self, base: AccuracyBenchmark, precision_level: PrecisionLevel, functional: str
    ) -> ErrorEstimate:
        precision_multiplier = self.tables.precision_accuracy[precision_level].multiplier
        correction = self.tables.functional_corrections.get(functional)
        functional_multiplier = correction.general_accuracy if correction else 1.0

        mean = base.mean_error * precision_multiplier * functional_multiplier
        low_factor, high_factor = self.config.accuracy_interval
        return ErrorEstimate(
            mean=mean,
            std_dev=base.std_dev * precision_multiplier,
            unit=base.unit,
            range_low=mean * low_factor,
            range_high=mean * high_factor,
        )

    def _experimental_accuracy(
        self, error: ErrorEstimate, calculation_type: CalculationType
    ) -> ExperimentalAccuracy:
        magnitude = error.mean
        unit = error.unit

        if calculation_type == CalculationType.ABSORPTION_SPECTRUM:
            if magnitude < 0.2:
                category, description = "Excellent", "Quantitative agreement with experiment expected"
            elif magnitude < 0.4:
                category, description = "Good", "Good agreement with experimental trends"
            elif magnitude < 0.8:
                category, description = "Fair", "Qualitative agreement expected"
            else:
                category, description = "Poor", "Large deviations from experiment likely"
        else:
            if magnitude < 0.1:
                category = "Excellent"
            elif magnitude < 0.3:
                category = "Good"
            elif magnitude < 0.6:
                category = "Fair"
            else:
                category = "Poor"
            description = f"Expected error: ±{magnitude:.2f} {unit}"

        return ExperimentalAccuracy(
            category=category,
            description=description,
            expected_deviation=f"±{magnitude:.2f} {unit}",
            confidence_interval=f"{error.range_low:.2f} - {error.range_high:.2f} {unit}",
        )

    def _relative_accuracy(
        self,
        precision_level: PrecisionLevel,
        reference_level: Union[PrecisionLevel, str],
        error: ErrorEstimate,
    ) -> Optional[RelativeAccuracy]:
        if reference_level == EXPERIMENT:
            return None

        reference = PrecisionLevel(reference_level)
        factor = self.tables.relative_accuracy_factors.get((precision_level, reference), 1.0)
        return RelativeAccuracy(
            relative_difference=f"{(factor - 1) * 100:.0f}%",
            description=(
                f"Expected to be {'less' if factor > 1 else 'more'} accurate "
                f"than {reference.value} precision"
            ),
            expected_deviation=f"±{error.mean * factor:.2f} {error.unit}",
        )

    def confidence(
        self,
        calculation_type: CalculationType,
        precision_level: PrecisionLevel,
        basis_set: str,
        functional: str,
    ) -> ConfidenceAssessment:
        """
        Confidence percentage in the estimate, clamped to the configured bounds.
        """
        confidence = 70

        if (functional, basis_set) in self.tables.trusted_combinations:
            confidence += 20

        if calculation_type == CalculationType.GEOMETRY_OPTIMIZATION:
            confidence += 10
        elif calculation_type == CalculationType.ABSORPTION_SPECTRUM:
            confidence -= 5

        if precision_level == PrecisionLevel.FULL:
            confidence += 15
        elif precision_level == PrecisionLevel.LOW:
            confidence -= 20

        percentage = int(clamp(confidence, self.config.confidence_bounds))

        if percentage > 80:
            level = ConfidenceLevel.HIGH
        elif percentage > 60:
            level = ConfidenceLevel.MEDIUM
        else:
            level = ConfidenceLevel.LOW

        if percentage > 85:
            description = "Results should be quantitatively reliable"
        elif percentage > 70:
            description = "Results should capture major trends accurately"
        elif percentage > 50:
            description = "Results useful for qualitative comparisons"
        else:
            description = "Results should be interpreted with caution"

        return ConfidenceAssessment(percentage=percentage, level=level, description=description)

    def reliability(
        self,
        calculation_type: CalculationType,
        precision_level: PrecisionLevel,
        basis_set: str,
        functional: str,
    ) -> ReliabilityAssessment:
        """Reliability score on a 1-10 scale with contributing factors."""
        factors: List[str] = []
        quality = self.basis_set_quality(basis_set)
        score = 5 + quality * 2

        if quality > 0.8:
            factors.append("High-quality basis set")
        elif quality < 0.5:
            factors.append("Small basis set may limit accuracy")

        if calculation_type == CalculationType.ABSORPTION_SPECTRUM:
            if "CAM" in functional:
                score += 1
                factors.append("Range-separated functional good for excitations")
            elif functional == "B3LYP":
                score -= 0.5
                factors.append("B3LYP may struggle with charge-transfer excitations")

        if precision_level == PrecisionLevel.FULL:
            score += 1.5
            factors.append("Full precision settings improve reliability")
        elif precision_level == PrecisionLevel.LOW:
            score -= 1
            factors.append("Low precision may affect convergence")

        score = clamp(score, self.config.reliability_bounds)

        if score > 7.5:
            level = ConfidenceLevel.HIGH
        elif score > 5:
            level = ConfidenceLevel.MEDIUM
        else:
            level = ConfidenceLevel.LOW

        return ReliabilityAssessment(
            score=round_half_up(score * 10) / 10,
            level=level,
            factors=factors,
        )

    def limitations(
        self,
        calculation_type: CalculationType,
        precision_level: PrecisionLevel,
        basis_set: str,
        functional: str,
    ) -> List[str]:
        limitations = []

        if calculation_type == CalculationType.ABSORPTION_SPECTRUM:
            limitations.append("TD-DFT may not capture double excitations")
            if functional == "B3LYP":
                limitations.append("B3LYP tends to underestimate charge-transfer excitation energies")

        if basis_set == "STO-3G":
            limitations.append("Minimal basis set - quantitative accuracy limited")
        elif basis_set == "def2-SVP":
            limitations.append("Double-zeta basis - consider larger basis for high accuracy")

        if precision_level == PrecisionLevel.LOW:
            limitations.append("Loose convergence criteria may affect accuracy")
            limitations.append("Results should be used for trends rather than absolute values")

        limitations.append("All DFT calculations have inherent approximations")
        limitations.append("Solvent effects may not be fully captured in gas-phase calculations")
        return limitations

    def _benchmark_reference(
        self, calculation_type: CalculationType, functional: str, basis_set: str
    ) -> BenchmarkReference:
        benchmark = self._lookup_benchmark(calculation_type, functional, basis_set)
        if benchmark is not None:
            return BenchmarkReference(
                available=True,
                source="Compiled benchmark database",
                n_molecules="50-200 molecules",
                reference=benchmark,
            )
        return BenchmarkReference(
            available=False,
            source="No specific benchmark data",
            recommendation="Consider validating against experimental data",
        )

    def compare_accuracy_options(self, estimates: Sequence[AccuracyEstimate]) -> AccuracyComparison:
        """
        Rank accuracy estimates by expected error.

        Raises:
            ValueError: If no estimates are given
        """
        if not estimates:
            raise ValueError("At least one accuracy estimate is required for comparison")

        ordered = sorted(estimates, key=lambda estimate: estimate.error.mean)
        best, worst = ordered[0], ordered[-1]

        recommendations = []
        if best.confidence.percentage > 80:
            recommendations.append("Most accurate option has high confidence level")
        if worst.confidence.percentage < 50:
            recommendations.append("Least accurate option should be used only for screening")
        if best.confidence.percentage - worst.confidence.percentage > 30:
            recommendations.append(
                "Significant accuracy differences between options - choose carefully based on needs"
            )

        return AccuracyComparison(
            most_accurate=best,
            least_accurate=worst,
            recommendations=recommendations,
        )
