"""
Tests for accuracy estimation.
"""

import itertools

import pytest

from quantum.planning import CalculationType, PrecisionLevel, format_error
from quantum.planning.models import ConfidenceLevel


class TestFormatError:
    """Test error formatting by magnitude."""

    @pytest.mark.parametrize(
        "mean,unit,expected",
        [
            (0.005, "Å", "±5.0 mÅ"),
            (0.162, "eV", "±0.16 eV"),
            (25.0, "cm⁻¹", "±25 cm⁻¹"),
            (2.5, "eV", "±3 eV"),
        ],
    )
    def test_format(self, mean, unit, expected):
        assert format_error(mean, unit) == expected


class TestErrorEstimates:
    """Test the benchmark, synthetic and generic error paths."""

    def test_benchmark_error(self, accuracy_estimator):
        """CAM-B3LYP/def2-TZVP half: 0.18 * 1.0 * 0.9."""
        estimate = accuracy_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM, PrecisionLevel.HALF, "def2-TZVP", "CAM-B3LYP"
        )
        assert estimate.source == "benchmark"
        assert estimate.error.mean == pytest.approx(0.162)
        assert estimate.error.unit == "eV"
        assert estimate.expected_error == "±0.16 eV"
        assert estimate.vs_experiment.category == "Excellent"
        assert estimate.vs_full is None
        assert estimate.benchmark_data.available
        assert estimate.benchmark_data.reference.mean_error == pytest.approx(0.18)

    def test_confidence_interval(self, accuracy_estimator):
        estimate = accuracy_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM, PrecisionLevel.HALF, "def2-TZVP", "CAM-B3LYP"
        )
        assert estimate.error.range_low == pytest.approx(0.081)
        assert estimate.error.range_high == pytest.approx(0.2916)
        assert estimate.vs_experiment.confidence_interval == "0.08 - 0.29 eV"

    def test_synthetic_error(self, accuracy_estimator):
        """Combinations without benchmark data are synthesized from basis quality."""
        estimate = accuracy_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM, PrecisionLevel.HALF, "cc-pVDZ", "B3LYP"
        )
        assert estimate.source == "synthetic"
        assert estimate.error.mean == pytest.approx(0.4 * 0.7)
        assert estimate.benchmark_data.available is False
        assert estimate.benchmark_data.recommendation

    def test_generic_error_for_types_without_model(self, accuracy_estimator):
        estimate = accuracy_estimator.estimate(
            CalculationType.NMR_PREDICTION, PrecisionLevel.HALF, "def2-TZVP", "B3LYP"
        )
        assert estimate.source == "generic"
        assert estimate.error.unit == "a.u."
        assert estimate.error.mean == pytest.approx(0.1)

    def test_relative_to_full(self, accuracy_estimator):
        """Comparison against the full tier reports the error ratio."""
        estimate = accuracy_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM,
            PrecisionLevel.HALF,
            "def2-TZVP",
            "CAM-B3LYP",
            reference_level=PrecisionLevel.FULL,
        )
        assert estimate.vs_full.relative_difference == "40%"
        assert estimate.vs_full.description == "Expected to be less accurate than full precision"


class TestConfidence:
    """Test confidence and reliability assessments."""

    def test_half_tier_confidence(self, accuracy_estimator):
        confidence = accuracy_estimator.confidence(
            CalculationType.ABSORPTION_SPECTRUM, PrecisionLevel.HALF, "def2-TZVP", "CAM-B3LYP"
        )
        assert confidence.percentage == 65
        assert confidence.level == ConfidenceLevel.MEDIUM
        assert confidence.description == "Results useful for qualitative comparisons"

    def test_upper_clamp(self, accuracy_estimator):
        """70 + 20 + 10 + 15 is clamped to 95."""
        confidence = accuracy_estimator.confidence(
            CalculationType.GEOMETRY_OPTIMIZATION, PrecisionLevel.FULL, "def2-TZVP", "B3LYP"
        )
        assert confidence.percentage == 95
        assert confidence.level == ConfidenceLevel.HIGH

    def test_confidence_always_within_bounds(self, accuracy_estimator, tables):
        """Every combination stays within [20, 95]."""
        basis_sets = list(tables.basis_set_quality) + ["unknown-basis"]
        functionals = list(tables.functional_corrections) + ["unknown-functional"]
        for calculation_type, level, basis_set, functional in itertools.product(
            CalculationType, PrecisionLevel, basis_sets, functionals
        ):
            percentage = accuracy_estimator.confidence(
                calculation_type, level, basis_set, functional
            ).percentage
            assert 20 <= percentage <= 95

    def test_reliability(self, accuracy_estimator):
        """def2-TZVP with a range-separated functional: 5 + 1.8 + 1."""
        reliability = accuracy_estimator.reliability(
            CalculationType.ABSORPTION_SPECTRUM, PrecisionLevel.HALF, "def2-TZVP", "CAM-B3LYP"
        )
        assert reliability.score == pytest.approx(7.8)
        assert reliability.level == ConfidenceLevel.HIGH
        assert "Range-separated functional good for excitations" in reliability.factors

    def test_low_reliability_for_minimal_basis(self, accuracy_estimator):
        reliability = accuracy_estimator.reliability(
            CalculationType.ABSORPTION_SPECTRUM, PrecisionLevel.LOW, "STO-3G", "B3LYP"
        )
        assert reliability.score == pytest.approx(3.9)
        assert reliability.level == ConfidenceLevel.LOW
        assert "Small basis set may limit accuracy" in reliability.factors

    def test_limitations(self, accuracy_estimator):
        limitations = accuracy_estimator.limitations(
            CalculationType.ABSORPTION_SPECTRUM, PrecisionLevel.LOW, "def2-SVP", "B3LYP"
        )
        assert limitations[0] == "TD-DFT may not capture double excitations"
        assert "Loose convergence criteria may affect accuracy" in limitations
        assert limitations[-1].startswith("Solvent effects")


class TestComparison:
    """Test accuracy comparison across tiers."""

    def test_compare_accuracy_options(self, accuracy_estimator, benzene_absorption_options):
        estimates = [option.accuracy for option in benzene_absorption_options]
        comparison = accuracy_estimator.compare_accuracy_options(estimates)

        assert comparison.most_accurate == benzene_absorption_options[0].accuracy
        assert comparison.least_accurate == benzene_absorption_options[2].accuracy
        assert "Least accurate option should be used only for screening" in comparison.recommendations

    def test_compare_empty_raises(self, accuracy_estimator):
        with pytest.raises(ValueError):
            accuracy_estimator.compare_accuracy_options([])
