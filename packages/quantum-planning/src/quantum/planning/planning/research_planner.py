"""
Research planning: request classification and theory-level selection.

This module maps a natural-language request onto a calculation type by
keyword matching, recommends a functional and basis set, and assembles a
narrative research plan (background, steps, expected results and
limitations).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from ..config import PlannerConfig
from ..exceptions import ClassificationError
from ..models.core_models import CalculationType, MoleculeInfo, TheoryLevel
from ..models.results import (
    AlternativeMethod,
    CalculationStep,
    CalculationSuggestion,
    ClassificationFailure,
    ComputationalApproach,
    ResearchPlan,
    TheoreticalBackground,
    TheoryPlan,
)
from ..molecules import estimate_molecule_size
from ..reference import ReferenceTables, load_reference_tables

logger = logging.getLogger(__name__)

CLASSIFICATION_FAILURE_MESSAGE = "Could not determine calculation type from request"


class ResearchPlanner:
    """
    Classifies calculation requests and recommends a level of theory.

    Classification walks the calculation types in declaration order and
    each type's keywords in table order; the first keyword contained in the
    lowercased request decides the type.
    """

    def __init__(
        self,
        tables: Optional[ReferenceTables] = None,
        config: Optional[PlannerConfig] = None,
    ):
        self.tables = tables or load_reference_tables()
        self.config = config or PlannerConfig()

    def classify(self, request_text: str) -> CalculationType:
        """
        Identify the calculation type requested.

        Args:
            request_text: Free-text user request

        Returns:
            Matched calculation type

        Raises:
            ClassificationError: If no keyword matches
        """
        request = request_text.lower()
        for calculation_type in CalculationType:
            info = self.tables.calculation_types.get(calculation_type)
            if info is None:
                continue
            for keyword in info.keywords:
                if keyword in request:
                    logger.debug(f"Keyword '{keyword}' matched {calculation_type.value}")
                    return calculation_type

        raise ClassificationError(
            CLASSIFICATION_FAILURE_MESSAGE, suggestions=self.suggest_calculation_types()
        )

    def recommend_theory_level(
        self,
        calculation_type: CalculationType,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> TheoryLevel:
        """
        Recommend functional, basis set and candidate methods.

        Large molecules get smaller basis sets; without a molecule the
        double-zeta default is used.
        """
        info = self.tables.calculation_types[calculation_type]
        functional = self.tables.functionals.get(calculation_type, self.tables.default_functional)

        basis_set = "def2-SVP"
        if molecule_info is not None:
            size = estimate_molecule_size(molecule_info, default=self.config.default_molecule_size)
            if size > 50:
                basis_set = "def2-SVP"
            elif size > 20:
                basis_set = "def2-TZVP"
            else:
                basis_set = "def2-QZVP"

        return TheoryLevel(functional=functional, basis_set=basis_set, methods=list(info.methods))

    def analyze(
        self,
        request_text: str,
        molecule_info: Optional[MoleculeInfo] = None,
    ) -> Union[TheoryPlan, ClassificationFailure]:
        """
        Classify a request and plan its theory level.

        Unclassifiable requests yield a ClassificationFailure carrying
        suggestions instead of raising.
        """
        try:
            calculation_type = self.classify(request_text)
        except ClassificationError as e:
            logger.warning(f"{e}: {request_text!r}")
            return ClassificationFailure(error=str(e), suggestions=e.suggestions)

        theory_level = self.recommend_theory_level(calculation_type, molecule_info)
        research_plan = self.generate_research_plan(
            calculation_type, theory_level, molecule_info, request_text
        )

        logger.info(
            f"Planned {calculation_type.value} with {theory_level.functional}/{theory_level.basis_set}"
        )
        return TheoryPlan(
            calculation_type=calculation_type,
            theory_level=theory_level,
            research_plan=research_plan,
        )

    def generate_research_plan(
        self,
        calculation_type: CalculationType,
        theory_level: TheoryLevel,
        molecule_info: Optional[MoleculeInfo],
        request_text: str,
    ) -> ResearchPlan:
        """Assemble the narrative research plan for a classified request."""
        info = self.tables.calculation_types[calculation_type]

        limitation_templates = info.limitations or ["Standard DFT limitations apply"]
        limitations = [
            template.format(functional=theory_level.functional) for template in limitation_templates
        ]

        return ResearchPlan(
            title=f"Research Plan: {info.name}",
            objective=request_text,
            molecule=molecule_info.name if molecule_info else "User-provided molecule",
            calculation_type=calculation_type,
            theoretical_background=TheoreticalBackground(
                method=info.name,
                description=info.description,
                theory=info.theory or "Standard quantum chemical calculation.",
                references=list(info.references) or ["Standard quantum chemistry references"],
            ),
            computational_approach=ComputationalApproach(
                method=theory_level.preferred_method,
                functional=theory_level.functional,
                basis_set=theory_level.basis_set,
                steps=[self.describe_step(step) for step in info.required_steps],
            ),
            expected_results=list(info.expected_results) or ["Standard quantum chemical results"],
            limitations=limitations,
            alternative_methods=[self._alternative(method) for method in info.methods[1:]],
        )

    def describe_step(self, step: str) -> CalculationStep:
        description = self.tables.step_descriptions.get(step, f"Perform {step} calculation")
        return CalculationStep(step=step, description=description)

    def _alternative(self, method: str) -> AlternativeMethod:
        notes = self.tables.method_notes.get(method, {})
        return AlternativeMethod(
            method=method,
            description=f"Alternative approach using {method}",
            advantages=notes.get("advantages", "Standard advantages"),
            disadvantages=notes.get("disadvantages", "Standard disadvantages"),
        )

    def suggest_calculation_types(self) -> List[CalculationSuggestion]:
        """List every calculation type with its first three keywords."""
        return [
            CalculationSuggestion(type=calculation_type, name=info.name, keywords=info.keywords[:3])
            for calculation_type, info in self.tables.calculation_types.items()
        ]
