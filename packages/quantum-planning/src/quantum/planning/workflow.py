"""
High-level workflow for planning quantum chemistry calculations.

This module provides the main interface of the package: classify a
request and plan its theory level, select software, and compute the three
precision tiers. :class:`CalculationPlanningWorkflow` composes the
individual planners around shared reference tables; the module-level
functions run the same steps with default components.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from .config import PlannerConfig
from .estimators import PrecisionCalculator
from .exceptions import MoleculeNotIdentifiedError
from .models.core_models import CalculationType, MoleculeInfo, SoftwareName, TheoryLevel
from .models.results import (
    CalculationPlan,
    ClassificationFailure,
    PlanningFailure,
    PrecisionOption,
    SoftwareSelection,
    TheoryPlan,
)
from .molecules import CommonMoleculeProvider, MoleculeProvider, extract_molecule_name
from .planning import ExecutionPlanner, ResearchPlanner
from .reference import ReferenceTables, load_reference_tables

logger = logging.getLogger(__name__)

CALCULATION_REQUEST_KEYWORDS = (
    "calculate",
    "absorption",
    "spectrum",
    "excitation",
    "optimize",
    "frequency",
    "homo",
    "lumo",
    "nmr",
    "uv-vis",
    "td-dft",
    "dft",
    "molecular orbital",
)


def is_calculation_request(request_text: str) -> bool:
    """Whether free text asks for a calculation rather than general help."""
    request = request_text.lower()
    return any(keyword in request for keyword in CALCULATION_REQUEST_KEYWORDS)


class CalculationPlanningWorkflow:
    """
    End-to-end calculation planner.

    Runs molecule identification, classification and theory planning,
    software selection and precision-tier estimation. All components share
    one set of reference tables and one configuration.
    """

    def __init__(
        self,
        tables: Optional[ReferenceTables] = None,
        config: Optional[PlannerConfig] = None,
        molecule_provider: Optional[MoleculeProvider] = None,
        research_planner: Optional[ResearchPlanner] = None,
        execution_planner: Optional[ExecutionPlanner] = None,
        precision_calculator: Optional[PrecisionCalculator] = None,
    ):
        """
        Initialize the workflow.

        Args:
            tables: Reference tables shared by all components
            config: Planner configuration
            molecule_provider: Resolves molecule names or SMILES
            research_planner: Classification and theory-level planner
            execution_planner: Software selection planner
            precision_calculator: Precision-tier calculator
        """
        self.tables = tables or load_reference_tables()
        self.config = config or PlannerConfig()
        self.molecule_provider = molecule_provider or CommonMoleculeProvider()
        self.research_planner = research_planner or ResearchPlanner(self.tables, self.config)
        self.execution_planner = execution_planner or ExecutionPlanner(self.tables, self.config)
        self.precision_calculator = precision_calculator or PrecisionCalculator(
            self.tables, self.config
        )

    def classify_and_plan_theory(
        self, request_text: str, molecule_info: Optional[MoleculeInfo] = None
    ) -> Union[TheoryPlan, ClassificationFailure]:
        return self.research_planner.analyze(request_text, molecule_info)

    def select_software(
        self,
        calculation_type: CalculationType,
        theory_level: TheoryLevel,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> SoftwareSelection:
        return self.execution_planner.plan(calculation_type, theory_level, molecule_info)

    def compute_precision_tiers(
        self,
        calculation_type: CalculationType,
        molecule_info: Optional[MoleculeInfo],
        theory_level: TheoryLevel,
        software: Union[SoftwareName, str, None] = None,
    ) -> List[PrecisionOption]:
        return self.precision_calculator.calculate_precision_options(
            calculation_type, molecule_info, theory_level, software
        )

    def identify_molecule(self, request_text: str) -> MoleculeInfo:
        """
        Identify the molecule named in a request.

        Raises:
            MoleculeNotIdentifiedError: If no molecule is named or it cannot be resolved
        """
        name = extract_molecule_name(request_text)
        if name is None:
            raise MoleculeNotIdentifiedError(
                "Please specify which molecule you would like to analyze."
            )

        molecule_info = self.molecule_provider.identify(name)
        if molecule_info is None:
            raise MoleculeNotIdentifiedError(
                f"Could not find molecule: {name}. Try providing a SMILES string instead."
            )
        return molecule_info

    def plan_calculation(
        self, request_text: str, molecule_info: Optional[MoleculeInfo] = None
    ) -> Union[CalculationPlan, PlanningFailure]:
        """
        Run the complete planning pipeline for a request.

        Args:
            request_text: Free-text request, e.g. "absorption spectrum of benzene"
            molecule_info: Target molecule; identified from the request if omitted

        Returns:
            CalculationPlan, or a PlanningFailure explaining what is missing
        """
        if molecule_info is None:
            try:
                molecule_info = self.identify_molecule(request_text)
            except MoleculeNotIdentifiedError as e:
                logger.warning(str(e))
                return PlanningFailure(error=str(e))

        theory = self.classify_and_plan_theory(request_text, molecule_info)
        if isinstance(theory, PlanningFailure):
            return theory

        software = self.select_software(theory.calculation_type, theory.theory_level, molecule_info)
        selected = (
            software.selected.software if software.selected else self.config.default_software
        )

        options = self.compute_precision_tiers(
            theory.calculation_type, molecule_info, theory.theory_level, selected
        )
        summary = self.precision_calculator.format_precision_summary(
            options, theory.calculation_type, molecule_info.name
        )

        logger.info(
            f"Plan ready for {molecule_info.name}: {theory.calculation_type.value} "
            f"with {selected.value}, recommended tier {summary.recommendation.recommended.value}"
        )
        return CalculationPlan(
            request=request_text,
            molecule=molecule_info,
            calculation_type=theory.calculation_type,
            theory_level=theory.theory_level,
            research_plan=theory.research_plan,
            software=software,
            precision_options=options,
            summary=summary,
        )


def classify_and_plan_theory(
    request_text: str,
    molecule_info: Optional[MoleculeInfo] = None,
    tables: Optional[ReferenceTables] = None,
) -> Union[TheoryPlan, ClassificationFailure]:
    """
    Classify a request and recommend its theory level.

    Args:
        request_text: Free-text request
        molecule_info: Target molecule (drives basis-set size)
        tables: Reference tables (defaults to the bundled tables)

    Returns:
        TheoryPlan on success, ClassificationFailure with suggestions otherwise
    """
    return ResearchPlanner(tables).analyze(request_text, molecule_info)


def select_software(
    calculation_type: CalculationType,
    theory_level: TheoryLevel,
    molecule_info: Optional[MoleculeInfo] = None,
    tables: Optional[ReferenceTables] = None,
) -> SoftwareSelection:
    """Rank packages and select the best one supporting the calculation."""
    return ExecutionPlanner(tables).plan(calculation_type, theory_level, molecule_info)


def compute_precision_tiers(
    calculation_type: CalculationType,
    molecule_info: Optional[MoleculeInfo],
    theory_level: TheoryLevel,
    software: Union[SoftwareName, str, None] = None,
    tables: Optional[ReferenceTables] = None,
) -> List[PrecisionOption]:
    """Compute the full, half and low precision options."""
    return PrecisionCalculator(tables).calculate_precision_options(
        calculation_type, molecule_info, theory_level, software
    )
