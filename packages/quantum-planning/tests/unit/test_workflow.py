"""
End-to-end tests for the planning workflow.
"""

from typing import Optional

import pytest

from quantum.planning import (
    CalculationPlan,
    CalculationPlanningWorkflow,
    CalculationType,
    ClassificationFailure,
    MoleculeInfo,
    MoleculeNotIdentifiedError,
    PlanningFailure,
    PrecisionLevel,
    SoftwareName,
    TheoryPlan,
    classify_and_plan_theory,
    compute_precision_tiers,
    is_calculation_request,
    select_software,
)


class StaticMoleculeProvider:
    """Provider returning one fixed molecule for every query."""

    def __init__(self, molecule: Optional[MoleculeInfo]):
        self.molecule = molecule
        self.queries = []

    def identify(self, query: str) -> Optional[MoleculeInfo]:
        self.queries.append(query)
        return self.molecule


class TestExternalInterfaces:
    """Test the module-level planning functions."""

    def test_benzene_absorption_scenario(self, benzene_info):
        """Classification, selection and tiers for the benzene absorption spectrum."""
        theory = classify_and_plan_theory("Calculate the absorption spectrum of benzene", benzene_info)
        assert isinstance(theory, TheoryPlan)
        assert theory.calculation_type == CalculationType.ABSORPTION_SPECTRUM
        assert theory.theory_level.functional == "CAM-B3LYP"

        selection = select_software(theory.calculation_type, theory.theory_level, benzene_info)
        assert selection.selected.software == SoftwareName.PSI4
        xtb = next(entry for entry in selection.ranking if entry.software == SoftwareName.XTB)
        assert xtb.score == 0

        options = compute_precision_tiers(
            theory.calculation_type, benzene_info, theory.theory_level, selection.selected.software
        )
        assert [option.level for option in options] == list(PrecisionLevel)
        assert options[1].basis_set == "def2-TZVP"

    def test_classification_failure(self):
        result = classify_and_plan_theory("hello there")
        assert isinstance(result, ClassificationFailure)
        assert result.suggestions

    def test_compute_precision_tiers_idempotent(self, benzene_info, absorption_theory):
        first = compute_precision_tiers(
            CalculationType.ABSORPTION_SPECTRUM, benzene_info, absorption_theory, "psi4"
        )
        second = compute_precision_tiers(
            CalculationType.ABSORPTION_SPECTRUM, benzene_info, absorption_theory, "psi4"
        )
        assert first == second


class TestPlanCalculation:
    """Test the full pipeline."""

    def test_plan_with_named_molecule(self, workflow):
        """The molecule is identified from the request text."""
        plan = workflow.plan_calculation("Calculate the absorption spectrum of benzene")

        assert isinstance(plan, CalculationPlan)
        assert plan.molecule.name == "benzene"
        assert plan.molecule.estimated_size == 6
        assert plan.calculation_type == CalculationType.ABSORPTION_SPECTRUM
        assert plan.software.selected.software == SoftwareName.PSI4
        assert [option.basis_set for option in plan.precision_options] == [
            "def2-QZVP",
            "def2-TZVP",
            "def2-SVP",
        ]
        assert plan.summary.recommendation.recommended == PrecisionLevel.FULL
        assert plan.summary.title == "Precision Options for absorption_spectrum of benzene"

    def test_plan_with_explicit_molecule(self, workflow, large_molecule_info):
        plan = workflow.plan_calculation("optimize the geometry", large_molecule_info)
        assert plan.software.selected.software == SoftwareName.XTB
        assert plan.precision_options[0].time_estimate.source == "benchmark"

    def test_missing_molecule_is_soft_failure(self, workflow):
        result = workflow.plan_calculation("calculate something")
        assert isinstance(result, PlanningFailure)
        assert result.success is False
        assert result.error == "Please specify which molecule you would like to analyze."

    def test_unknown_molecule_is_soft_failure(self, workflow):
        result = workflow.plan_calculation("absorption spectrum of unobtainium")
        assert isinstance(result, PlanningFailure)
        assert result.error.startswith("Could not find molecule: unobtainium")

    @pytest.mark.parametrize("name", ["Aspirin", "Naphthalene"])
    def test_capitalized_unknown_molecule_is_soft_failure(self, workflow, name):
        """A capitalized name outside the table is not planned as SMILES."""
        result = workflow.plan_calculation(f"calculate the absorption spectrum of {name}")
        assert isinstance(result, PlanningFailure)
        assert result.error.startswith(f"Could not find molecule: {name}")

    def test_unclassifiable_request(self, workflow, benzene_info):
        result = workflow.plan_calculation("tell me about benzene", benzene_info)
        assert isinstance(result, ClassificationFailure)

    def test_custom_provider(self, tables, config, benzene_info):
        """Any object with identify() can supply molecules."""
        provider = StaticMoleculeProvider(benzene_info)
        workflow = CalculationPlanningWorkflow(tables, config, molecule_provider=provider)

        plan = workflow.plan_calculation("HOMO-LUMO gap of my-dye")

        assert provider.queries == ["my-dye"]
        assert plan.calculation_type == CalculationType.HOMO_LUMO

    def test_identify_molecule_raises(self, tables, config):
        workflow = CalculationPlanningWorkflow(
            tables, config, molecule_provider=StaticMoleculeProvider(None)
        )
        with pytest.raises(MoleculeNotIdentifiedError):
            workflow.identify_molecule("spectrum of something")


class TestRequestDetection:
    """Test calculation-request detection."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Calculate the absorption spectrum of benzene", True),
            ("What is the HOMO energy of water?", True),
            ("Run a TD-DFT job", True),
            ("How are you today?", False),
        ],
    )
    def test_is_calculation_request(self, text, expected):
        assert is_calculation_request(text) is expected
