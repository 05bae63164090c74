"""
Execution planning: software ranking and execution-plan assembly.

Each package is scored with additive weights for support, performance,
method fit, molecule size, licensing and installation effort. The best
supported package is selected and an execution plan is built around it.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..config import PlannerConfig
from ..models.core_models import (
    CalculationType,
    LicenseClass,
    MoleculeInfo,
    PerformanceRating,
    SoftwareName,
    SoftwareProfile,
    TheoryLevel,
)
from ..models.results import (
    AlternativeSoftware,
    ComputationalSetup,
    ExecutionPlan,
    Installation,
    ResourceRequirements,
    Risk,
    ScoreDetails,
    SelectedSoftware,
    SoftwareScore,
    SoftwareSelection,
    ValidationPlan,
)
from ..reference import ReferenceTables, load_reference_tables

logger = logging.getLogger(__name__)

PERFORMANCE_SCORES: Dict[PerformanceRating, int] = {
    PerformanceRating.EXCELLENT: 25,
    PerformanceRating.GOOD: 20,
    PerformanceRating.FAIR: 10,
    PerformanceRating.POOR: 0,
}


class ExecutionPlanner:
    """
    Selects quantum chemistry software and plans its execution.

    Ranking is by descending score; equal scores are ordered by software
    name so the result does not depend on table order.
    """

    def __init__(
        self,
        tables: Optional[ReferenceTables] = None,
        config: Optional[PlannerConfig] = None,
    ):
        self.tables = tables or load_reference_tables()
        self.config = config or PlannerConfig()

    def calculate_software_score(
        self,
        profile: SoftwareProfile,
        calculation_type: CalculationType,
        theory_level: TheoryLevel,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> SoftwareScore:
        """
        Score one package for a calculation.

        Args:
            profile: Software capability profile
            calculation_type: Type of calculation
            theory_level: Recommended theory level
            molecule_info: Target molecule; size terms apply only when it has a size

        Returns:
            SoftwareScore (exactly 0 for unsupported calculation types)
        """
        support = profile.support_for(calculation_type)
        if not support.supported:
            return SoftwareScore(
                software=profile.software, score=0, details=ScoreDetails(supported=False)
            )

        score = 30 if support.recommended else 10
        score += PERFORMANCE_SCORES[support.performance]

        method_match = (
            theory_level.preferred_method in profile.strengths
            or calculation_type.value in profile.strengths
        )
        if method_match:
            score += 20

        size_compatible = None
        if molecule_info is not None and molecule_info.estimated_size:
            size = molecule_info.estimated_size
            size_compatible = size <= profile.max_atoms
            if size_compatible:
                score += 15
                if size > 50 and profile.memory_efficient:
                    score += 10
            else:
                logger.debug(
                    f"{profile.display_name}: {size} atoms exceeds ceiling of {profile.max_atoms}"
                )
                score -= 20

        open_source = profile.license_class == LicenseClass.OPEN_SOURCE
        if open_source:
            score += 15

        easy_install = not profile.manual_install
        if easy_install:
            score += 10

        return SoftwareScore(
            software=profile.software,
            score=score,
            details=ScoreDetails(
                supported=True,
                performance=support.performance.value,
                method_match=method_match,
                size_compatible=size_compatible,
                open_source=open_source,
                easy_install=easy_install,
            ),
        )

    def rank_software(
        self,
        calculation_type: CalculationType,
        theory_level: TheoryLevel,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> List[SoftwareScore]:
        """Score every known package, best first."""
        scores = [
            self.calculate_software_score(profile, calculation_type, theory_level, molecule_info)
            for profile in self.tables.software_profiles.values()
        ]
        return sorted(scores, key=lambda entry: (-entry.score, entry.software.value))

    def plan(
        self,
        calculation_type: CalculationType,
        theory_level: TheoryLevel,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> SoftwareSelection:
        """
        Select software and build the execution plan.

        Only packages that support the calculation type can be selected.
        Alternatives are the next best ranked packages.
        """
        ranking = self.rank_software(calculation_type, theory_level, molecule_info)
        selected = next((entry for entry in ranking if entry.details.supported), None)

        if selected is None:
            logger.warning(f"No software supports {calculation_type.value}")
            return SoftwareSelection(selected=None, alternatives=[], ranking=ranking)

        alternatives = [entry for entry in ranking if entry is not selected][
            : self.config.max_alternatives
        ]
        logger.info(
            f"Selected {selected.software.value} (score {selected.score:g}) "
            f"for {calculation_type.value}"
        )

        execution_plan = self.generate_execution_plan(
            calculation_type, theory_level, selected, alternatives, molecule_info
        )
        return SoftwareSelection(
            selected=selected,
            alternatives=alternatives,
            ranking=ranking,
            execution_plan=execution_plan,
        )

    def generate_execution_plan(
        self,
        calculation_type: CalculationType,
        theory_level: TheoryLevel,
        selected: SoftwareScore,
        alternatives: List[SoftwareScore],
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> ExecutionPlan:
        profile = self.tables.software_profiles[selected.software]
        support = profile.support_for(calculation_type)

        return ExecutionPlan(
            title=f"Execution Plan: {profile.display_name} for {calculation_type.value}",
            selected_software=SelectedSoftware(
                name=profile.display_name,
                license=profile.license,
                reasons=self.selection_reasons(selected.details),
                installation=Installation(
                    command=profile.install_command,
                    difficulty="Manual" if profile.manual_install else "Automatic",
                ),
            ),
            computational_setup=ComputationalSetup(
                method=theory_level.preferred_method,
                functional=theory_level.functional,
                basis_set=theory_level.basis_set,
                estimated_performance=support.performance.value,
                parallelization=profile.parallelization,
            ),
            resource_requirements=self.estimate_resource_requirements(
                calculation_type, molecule_info
            ),
            alternative_software=[
                self._describe_alternative(entry) for entry in alternatives
            ],
            risk_assessment=self.assess_risks(calculation_type, theory_level, profile, molecule_info),
            validation=ValidationPlan(
                benchmark_data=self.tables.functional_benchmarks.get(calculation_type, {}).get(
                    theory_level.functional, "No specific benchmark data available"
                ),
                expected_accuracy=self.tables.expected_accuracy.get(profile.software, {}).get(
                    calculation_type, "Standard DFT accuracy expected"
                ),
                comparison_methods=list(
                    self.tables.comparison_methods.get(
                        calculation_type, ["Experimental data", "Alternative methods"]
                    )
                ),
            ),
        )

    @staticmethod
    def selection_reasons(details: ScoreDetails) -> List[str]:
        reasons = []
        if details.method_match:
            reasons.append("Excellent compatibility with chosen method")
        if details.performance == PerformanceRating.EXCELLENT.value:
            reasons.append("Outstanding performance for this calculation type")
        if details.open_source:
            reasons.append("Open source and freely available")
        if details.easy_install:
            reasons.append("Easy installation via package manager")
        if details.size_compatible:
            reasons.append("Suitable for molecule size")
        return reasons or ["Best available option for this calculation"]

    @staticmethod
    def estimate_resource_requirements(
        calculation_type: CalculationType,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> ResourceRequirements:
        """Coarse hardware requirements for the selected package."""
        memory_gb = 4
        estimated_time = "30 minutes"

        if molecule_info is not None and molecule_info.estimated_size:
            size = molecule_info.estimated_size
            if size > 20:
                memory_gb = 8
                estimated_time = "1-2 hours"
            if size > 50:
                memory_gb = 16
                estimated_time = "2-6 hours"

        # excited-state calculations keep many response vectors in memory
        if calculation_type.is_spectrum:
            memory_gb = max(8, memory_gb * 2)

        return ResourceRequirements(
            memory=f"{memory_gb} GB",
            cpu_cores=4,
            disk_space="1 GB",
            estimated_time=estimated_time,
        )

    def _describe_alternative(self, entry: SoftwareScore) -> AlternativeSoftware:
        profile = self.tables.software_profiles[entry.software]
        return AlternativeSoftware(
            name=profile.display_name,
            score=entry.score,
            pros=self.software_pros(profile),
            cons=self.software_cons(profile),
            reason=self.alternative_reason(entry.details),
        )

    def software_pros(self, profile: SoftwareProfile) -> List[str]:
        labels = self.tables.strength_labels
        return [labels.get(strength, strength.replace("_", " ")) for strength in profile.strengths]

    def software_cons(self, profile: SoftwareProfile) -> List[str]:
        labels = self.tables.weakness_labels
        return [labels.get(weakness, weakness.replace("_", " ")) for weakness in profile.weaknesses]

    @staticmethod
    def alternative_reason(details: ScoreDetails) -> str:
        if not details.supported:
            return "Does not support this calculation type"
        if details.performance == PerformanceRating.POOR.value:
            return "Poor performance for this calculation"
        if details.size_compatible is False:
            return "Cannot handle molecule of this size"
        return "Lower overall score than selected software"

    @staticmethod
    def assess_risks(
        calculation_type: CalculationType,
        theory_level: TheoryLevel,
        profile: SoftwareProfile,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> List[Risk]:
        risks = []

        if profile.manual_install:
            risks.append(
                Risk(
                    risk="Manual installation required",
                    severity="medium",
                    mitigation=f"Follow {profile.display_name} installation guide carefully",
                )
            )

        if (
            calculation_type == CalculationType.ABSORPTION_SPECTRUM
            and theory_level.functional == "B3LYP"
        ):
            risks.append(
                Risk(
                    risk="B3LYP may underestimate charge-transfer excitations",
                    severity="low",
                    mitigation="Consider CAM-B3LYP for charge-transfer systems",
                )
            )

        if molecule_info is not None and (molecule_info.estimated_size or 0) > 100:
            risks.append(
                Risk(
                    risk="Large molecule may require excessive computational resources",
                    severity="high",
                    mitigation="Consider lower theory level or semi-empirical methods",
                )
            )

        return risks

    def software_for_method(self, method: str) -> List[SoftwareName]:
        """Packages implementing an electronic-structure method."""
        return list(self.tables.method_software_mapping.get(method, []))
