"""
Tests for software scoring, selection and execution plans.
"""

import pytest

from quantum.planning import CalculationType, MoleculeInfo, SoftwareName, TheoryLevel
from quantum.planning.models import ScoreDetails


class TestSoftwareScoring:
    """Test the additive software score."""

    def test_benzene_absorption_scores(
        self, execution_planner, tables, benzene_info, absorption_theory
    ):
        """Scores for a small absorption calculation."""
        scores = {
            name: execution_planner.calculate_software_score(
                profile, CalculationType.ABSORPTION_SPECTRUM, absorption_theory, benzene_info
            ).score
            for name, profile in tables.software_profiles.items()
        }
        assert scores == {
            SoftwareName.PSI4: 110,
            SoftwareName.PYSCF: 110,
            SoftwareName.ORCA: 90,
            SoftwareName.XTB: 0,
        }

    def test_unsupported_scores_exactly_zero(
        self, execution_planner, tables, absorption_theory, benzene_info
    ):
        """Unsupported types score zero regardless of other terms."""
        result = execution_planner.calculate_software_score(
            tables.software_profiles[SoftwareName.XTB],
            CalculationType.ABSORPTION_SPECTRUM,
            absorption_theory,
            benzene_info,
        )
        assert result.score == 0
        assert result.details.supported is False

    def test_size_terms_skipped_without_size(self, execution_planner, tables, absorption_theory):
        """Molecules without a size get neither bonus nor penalty."""
        result = execution_planner.calculate_software_score(
            tables.software_profiles[SoftwareName.PSI4],
            CalculationType.ABSORPTION_SPECTRUM,
            absorption_theory,
            MoleculeInfo(name="unknown"),
        )
        assert result.score == 95
        assert result.details.size_compatible is None


class TestRanking:
    """Test ranking and selection."""

    def test_tie_broken_by_name(self, execution_planner, benzene_info, absorption_theory):
        """Psi4 and PySCF tie; Psi4 sorts first by name."""
        ranking = execution_planner.rank_software(
            CalculationType.ABSORPTION_SPECTRUM, absorption_theory, benzene_info
        )
        assert [entry.software for entry in ranking] == [
            SoftwareName.PSI4,
            SoftwareName.PYSCF,
            SoftwareName.ORCA,
            SoftwareName.XTB,
        ]

    def test_large_molecule_ranking(self, execution_planner, large_molecule_info, geometry_theory):
        """Oversized molecules are penalized and xTB wins."""
        ranking = execution_planner.rank_software(
            CalculationType.GEOMETRY_OPTIMIZATION, geometry_theory, large_molecule_info
        )
        assert [(entry.software, entry.score) for entry in ranking] == [
            (SoftwareName.XTB, 105),
            (SoftwareName.ORCA, 80),
            (SoftwareName.PSI4, 80),
            (SoftwareName.PYSCF, 60),
        ]
        psi4 = ranking[2]
        assert psi4.details.size_compatible is False

    def test_selection_and_alternatives(self, execution_planner, benzene_info, absorption_theory):
        """The best supported package is selected; the next two are alternatives."""
        selection = execution_planner.plan(
            CalculationType.ABSORPTION_SPECTRUM, absorption_theory, benzene_info
        )
        assert selection.selected.software == SoftwareName.PSI4
        assert [alt.software for alt in selection.alternatives] == [
            SoftwareName.PYSCF,
            SoftwareName.ORCA,
        ]
        assert len(selection.ranking) == 4

    @pytest.mark.parametrize("calculation_type", list(CalculationType))
    def test_unsupported_never_selected(
        self, execution_planner, benzene_info, geometry_theory, calculation_type
    ):
        selection = execution_planner.plan(calculation_type, geometry_theory, benzene_info)
        assert selection.selected is not None
        assert selection.selected.details.supported

    def test_nothing_supported(self, tables, config, benzene_info, geometry_theory):
        """With no supporting package the selection is empty."""
        from quantum.planning import ExecutionPlanner

        xtb_only = tables.model_copy(
            update={"software_profiles": {SoftwareName.XTB: tables.software_profiles[SoftwareName.XTB]}}
        )
        selection = ExecutionPlanner(xtb_only, config).plan(
            CalculationType.NMR_PREDICTION, geometry_theory, benzene_info
        )
        assert selection.selected is None
        assert selection.execution_plan is None
        assert selection.ranking[0].score == 0


class TestExecutionPlan:
    """Test execution plan assembly."""

    def test_psi4_absorption_plan(self, execution_planner, benzene_info, absorption_theory):
        selection = execution_planner.plan(
            CalculationType.ABSORPTION_SPECTRUM, absorption_theory, benzene_info
        )
        plan = selection.execution_plan

        assert plan.title == "Execution Plan: Psi4 for absorption_spectrum"
        assert plan.selected_software.name == "Psi4"
        assert plan.selected_software.installation.difficulty == "Automatic"
        assert "Open source and freely available" in plan.selected_software.reasons
        assert plan.computational_setup.method == "TD-DFT"
        assert plan.resource_requirements.memory == "8 GB"
        assert plan.validation.benchmark_data.startswith("Mean absolute error ~0.2 eV")
        assert [alt.name for alt in plan.alternative_software] == ["PySCF", "ORCA"]
        assert plan.alternative_software[1].cons == ["Requires manual installation"]

    def test_manual_install_risk(self, execution_planner, tables, geometry_theory, benzene_info):
        """Manually installed packages carry an installation risk."""
        risks = execution_planner.assess_risks(
            CalculationType.GEOMETRY_OPTIMIZATION,
            geometry_theory,
            tables.software_profiles[SoftwareName.ORCA],
            benzene_info,
        )
        assert risks[0].risk == "Manual installation required"
        assert risks[0].mitigation == "Follow ORCA installation guide carefully"

    def test_b3lyp_absorption_and_size_risks(self, execution_planner, tables, large_molecule_info):
        theory = TheoryLevel(functional="B3LYP", basis_set="def2-SVP", methods=["TD-DFT"])
        risks = execution_planner.assess_risks(
            CalculationType.ABSORPTION_SPECTRUM,
            theory,
            tables.software_profiles[SoftwareName.PSI4],
            large_molecule_info,
        )
        assert [risk.severity for risk in risks] == ["low", "high"]

    @pytest.mark.parametrize(
        "details,reason",
        [
            (ScoreDetails(supported=False), "Does not support this calculation type"),
            (ScoreDetails(supported=True, performance="poor"), "Poor performance for this calculation"),
            (
                ScoreDetails(supported=True, performance="good", size_compatible=False),
                "Cannot handle molecule of this size",
            ),
            (
                ScoreDetails(supported=True, performance="good"),
                "Lower overall score than selected software",
            ),
        ],
    )
    def test_alternative_reason(self, execution_planner, details, reason):
        assert execution_planner.alternative_reason(details) == reason

    def test_software_for_method(self, execution_planner):
        assert execution_planner.software_for_method("xTB") == [SoftwareName.XTB]
        assert execution_planner.software_for_method("unknown") == []
