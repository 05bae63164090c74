"""
Tests for planner configuration.
"""

import pytest
from pydantic import ValidationError

from quantum.planning import (
    CalculationType,
    ExecutionPlanner,
    PlannerConfig,
    PrecisionLevel,
    SoftwareName,
)


class TestPlannerConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self, config):
        assert config.default_software == SoftwareName.PSI4
        assert config.accuracy_reference_level == PrecisionLevel.FULL
        assert config.max_alternatives == 2
        assert config.time_uncertainty == 0.3
        assert config.default_time_band == (0.7, 1.5)
        assert config.accuracy_interval == (0.5, 1.8)
        assert config.confidence_bounds == (20, 95)
        assert config.reliability_bounds == (1.0, 10.0)
        assert config.default_molecule_size == 10

    def test_frozen(self, config):
        with pytest.raises(ValidationError):
            config.max_alternatives = 5

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            PlannerConfig(max_alternates=1)

    def test_unordered_bounds_rejected(self):
        with pytest.raises(ValidationError):
            PlannerConfig(confidence_bounds=(95, 20))

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("QUANTUM_PLANNER_DEFAULT_SOFTWARE", " ORCA ")
        monkeypatch.setenv("QUANTUM_PLANNER_MAX_ALTERNATIVES", "1")

        config = PlannerConfig.from_env()

        assert config.default_software == SoftwareName.ORCA
        assert config.max_alternatives == 1

    def test_from_env_overrides_win(self, monkeypatch):
        monkeypatch.setenv("QUANTUM_PLANNER_MAX_ALTERNATIVES", "1")
        assert PlannerConfig.from_env(max_alternatives=3).max_alternatives == 3

    def test_max_alternatives_applied(self, tables, benzene_info, absorption_theory):
        planner = ExecutionPlanner(tables, PlannerConfig(max_alternatives=1))
        selection = planner.plan(CalculationType.ABSORPTION_SPECTRUM, absorption_theory, benzene_info)
        assert len(selection.alternatives) == 1

    def test_confidence_bounds_applied(self, tables):
        from quantum.planning import AccuracyEstimator

        estimator = AccuracyEstimator(tables, PlannerConfig(confidence_bounds=(30, 90)))
        confidence = estimator.confidence(
            CalculationType.GEOMETRY_OPTIMIZATION, PrecisionLevel.FULL, "def2-TZVP", "B3LYP"
        )
        assert confidence.percentage == 90
