"""
Precision tier generation.

For every calculation the planner offers three tiers (full, half, low).
Each tier picks a basis set from a size-dependent hierarchy and carries
time, resource and accuracy projections plus a cost-benefit score.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from ..config import PlannerConfig
from ..models.core_models import (
    CalculationType,
    MoleculeInfo,
    PrecisionLevel,
    SizeCategory,
    SoftwareName,
    TheoryLevel,
)
from ..models.results import (
    AccuracyEstimate,
    CostBenefit,
    OverallRecommendation,
    PrecisionOption,
    PrecisionSummary,
    QuickComparison,
    TimeEstimate,
)
from ..molecules import estimate_molecule_size
from ..reference import ReferenceTables, load_reference_tables
from ..utils import mean_score, round_half_up
from .accuracy_estimator import AccuracyEstimator
from .time_estimator import TimeEstimator

logger = logging.getLogger(__name__)


class PrecisionCalculator:
    """
    Builds the full/half/low precision options for a calculation.

    Example:
        >>> calculator = PrecisionCalculator()
        >>> options = calculator.calculate_precision_options(
        ...     CalculationType.ABSORPTION_SPECTRUM, benzene, theory_level
        ... )
        >>> [option.level.value for option in options]
        ['full', 'half', 'low']
    """

    def __init__(
        self,
        tables: Optional[ReferenceTables] = None,
        config: Optional[PlannerConfig] = None,
        time_estimator: Optional[TimeEstimator] = None,
        accuracy_estimator: Optional[AccuracyEstimator] = None,
    ):
        """
        Initialize precision calculator.

        Args:
            tables: Reference tables (defaults to the bundled tables)
            config: Planner configuration
            time_estimator: Wall-time estimator sharing the same tables
            accuracy_estimator: Accuracy estimator sharing the same tables
        """
        self.tables = tables or load_reference_tables()
        self.config = config or PlannerConfig()
        self.time_estimator = time_estimator or TimeEstimator(self.tables, self.config)
        self.accuracy_estimator = accuracy_estimator or AccuracyEstimator(self.tables, self.config)

    def molecule_size(self, molecule_info: Optional[MoleculeInfo]) -> float:
        return estimate_molecule_size(molecule_info, default=self.config.default_molecule_size)

    def size_category(self, molecule_size: float) -> SizeCategory:
        small_limit, medium_limit = self.config.size_category_limits
        return SizeCategory.from_size(molecule_size, small_limit, medium_limit)

    def calculate_precision_options(
        self,
        calculation_type: CalculationType,
        molecule_info: Optional[MoleculeInfo],
        theory_level: TheoryLevel,
        software: Union[SoftwareName, str, None] = None,
    ) -> List[PrecisionOption]:
        """
        Calculate the three precision options for a calculation.

        Args:
            calculation_type: Type of calculation
            molecule_info: Target molecule (size drives basis and resources)
            theory_level: Recommended theory level (functional is reused)
            software: Package the time estimate assumes (default from config)

        Returns:
            Options ordered full, half, low
        """
        software = self._resolve_software(software)
        molecule_size = self.molecule_size(molecule_info)
        size_category = self.size_category(molecule_size)

        logger.debug(
            f"Precision options for {calculation_type.value}: size={molecule_size:g} "
            f"({size_category.value}), software={getattr(software, 'value', software)}"
        )

        options = [
            self._generate_option(
                level, calculation_type, molecule_size, size_category, theory_level, software
            )
            for level in PrecisionLevel
        ]
        return sorted(options, key=lambda option: option.priority)

    def _resolve_software(
        self, software: Union[SoftwareName, str, None]
    ) -> Union[SoftwareName, str]:
        """Normalize a package name; unknown names are kept for default timings."""
        if not software:
            return self.config.default_software
        name = getattr(software, "value", str(software)).strip().lower()
        try:
            return SoftwareName(name)
        except ValueError:
            logger.debug(f"No profile for software {name!r}; time estimates use defaults")
            return name

    def _generate_option(
        self,
        level: PrecisionLevel,
        calculation_type: CalculationType,
        molecule_size: float,
        size_category: SizeCategory,
        theory_level: TheoryLevel,
        software: Union[SoftwareName, str],
    ) -> PrecisionOption:
        tier = self.tables.precision_tiers[level]
        basis_set = self.tables.basis_set_hierarchy[level][size_category]

        time_estimate = self.time_estimator.estimate(
            calculation_type,
            software,
            molecule_size,
            basis_set,
            theory_level.functional,
            level,
        )
        accuracy = self.accuracy_estimator.estimate(
            calculation_type,
            level,
            basis_set,
            theory_level.functional,
            reference_level=self.config.accuracy_reference_level,
        )

        return PrecisionOption(
            level=level,
            name=tier.name,
            description=tier.description,
            priority=tier.priority,
            basis_set=basis_set,
            convergence=self.tables.convergence_criteria[level],
            time_estimate=time_estimate,
            resources=self.tables.resource_estimates[level][size_category],
            accuracy=accuracy,
            recommended=self.recommendation(level, calculation_type, molecule_size),
            warnings=self.warnings(level, calculation_type, molecule_size),
            cost_benefit=self.analyze_cost_benefit(level, time_estimate, accuracy),
            use_cases=list(tier.use_cases),
        )

    def recommendation(
        self, level: PrecisionLevel, calculation_type: CalculationType, molecule_size: float
    ) -> str:
        """One-line recommendation for a tier."""
        if calculation_type == CalculationType.ABSORPTION_SPECTRUM:
            if level == PrecisionLevel.FULL:
                if molecule_size < 20:
                    return "Recommended for publication-quality results"
                return "Use only if high accuracy is critical"
            if level == PrecisionLevel.HALF:
                return "Good balance of accuracy and speed - recommended for most studies"
            return "Good for initial screening and method testing"

        if calculation_type == CalculationType.GEOMETRY_OPTIMIZATION:
            if level == PrecisionLevel.FULL:
                if molecule_size < 30:
                    return "Best for accurate geometric parameters"
                return "May be too expensive"
            if level == PrecisionLevel.HALF:
                return "Recommended for most optimization tasks"
            return "Good for initial structure generation"

        general = {
            PrecisionLevel.FULL: "Use when highest accuracy is required and computational resources allow",
            PrecisionLevel.HALF: "Recommended balance of accuracy and computational efficiency",
            PrecisionLevel.LOW: "Good for initial screening and rapid results",
        }
        return general[level]

    def warnings(
        self, level: PrecisionLevel, calculation_type: CalculationType, molecule_size: float
    ) -> List[str]:
        warnings = []

        if level == PrecisionLevel.FULL and molecule_size > 50:
            warnings.append("Very large molecule - calculation may take days or fail")

        if level == PrecisionLevel.LOW:
            if calculation_type == CalculationType.ABSORPTION_SPECTRUM:
                warnings.append("Low precision may not capture charge-transfer excitations accurately")
            warnings.append("Results may have significant quantitative errors - use for trends only")

        if calculation_type == CalculationType.NMR_PREDICTION and level == PrecisionLevel.LOW:
            warnings.append("NMR predictions require higher precision for reliable chemical shifts")

        return warnings

    def analyze_cost_benefit(
        self,
        level: PrecisionLevel,
        time_estimate: TimeEstimate,
        accuracy: AccuracyEstimate,
    ) -> CostBenefit:
        """
        Score a tier on accuracy, speed and efficiency (0-10 each).

        The full tier's speed and efficiency depend on projected hours; the
        other tiers use fixed scores.
        """
        hours = time_estimate.hours

        if level == PrecisionLevel.FULL:
            accuracy_score = 10
            speed = 6 if hours < 4 else 4 if hours < 12 else 2
            efficiency = 8 if hours < 2 else 6 if hours < 8 else 4
        elif level == PrecisionLevel.HALF:
            accuracy_score, speed, efficiency = 8, 8, 9
        else:
            accuracy_score, speed, efficiency = 5, 10, 7

        overall = round_half_up(mean_score(accuracy_score, speed, efficiency))

        if overall >= 8:
            recommendation = "Highly recommended"
        elif overall >= 6:
            recommendation = "Good choice"
        elif overall >= 4:
            recommendation = "Consider alternatives"
        else:
            recommendation = "Not recommended"

        return CostBenefit(
            accuracy=accuracy_score,
            speed=speed,
            efficiency=efficiency,
            overall=overall,
            recommendation=recommendation,
        )

    def overall_recommendation(self, options: Sequence[PrecisionOption]) -> OverallRecommendation:
        """
        Pick the tier with the highest overall cost-benefit score.

        Ties keep the earlier (more precise) tier.
        """
        best = options[0]
        for option in options[1:]:
            if option.cost_benefit.overall > best.cost_benefit.overall:
                best = option

        return OverallRecommendation(
            recommended=best.level,
            reason=f"{best.name} offers the best balance of accuracy and computational efficiency",
            alternatives=[
                f"{option.name}: {option.cost_benefit.recommendation}"
                for option in options
                if option.level != best.level
            ],
        )

    def format_precision_summary(
        self,
        options: Sequence[PrecisionOption],
        calculation_type: CalculationType,
        molecule_name: str,
    ) -> PrecisionSummary:
        """
        Summarize precision options for presentation.

        Args:
            options: Options from :meth:`calculate_precision_options`
            calculation_type: Type of calculation
            molecule_name: Name shown in the title

        Returns:
            PrecisionSummary with quick comparison and overall recommendation

        Raises:
            ValueError: If no options are given
        """
        if not options:
            raise ValueError("Cannot summarize an empty list of precision options")

        errors = [option.accuracy.error.mean for option in options]
        quick_comparison = QuickComparison(
            fastest_minutes=min(option.time_range.min for option in options),
            slowest_minutes=max(option.time_range.max for option in options),
            lowest_error=min(errors),
            highest_error=max(errors),
            error_unit=options[0].accuracy.error.unit,
        )

        return PrecisionSummary(
            title=f"Precision Options for {calculation_type.value} of {molecule_name}",
            total_options=len(options),
            options=list(options),
            quick_comparison=quick_comparison,
            recommendation=self.overall_recommendation(options),
        )
