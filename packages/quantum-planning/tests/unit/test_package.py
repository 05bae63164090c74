"""
Tests for the package layout and its public exports.
"""

import importlib

import pytest


class TestPackageImports:
    """Test that every submodule imports on its own."""

    @pytest.mark.parametrize(
        "module",
        [
            "quantum.planning.planning.research_planner",
            "quantum.planning.planning.execution_planner",
            "quantum.planning.estimators.precision_calculator",
            "quantum.planning.reference",
            "quantum.planning.workflow",
        ],
    )
    def test_submodule_imports(self, module):
        assert importlib.import_module(module) is not None

    def test_planners_reexported(self):
        import quantum.planning
        from quantum.planning.planning import execution_planner, research_planner

        assert quantum.planning.ExecutionPlanner is execution_planner.ExecutionPlanner
        assert quantum.planning.ResearchPlanner is research_planner.ResearchPlanner

    def test_version(self):
        import quantum.planning

        assert quantum.planning.__version__ == "0.1.0"
