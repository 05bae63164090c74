"""
Tests for wall-time estimation.
"""

import math

import pytest

from quantum.planning import CalculationType, PrecisionLevel, SoftwareName, format_duration
from quantum.planning.estimators.time_estimator import BENCHMARK_SOURCE, DEFAULT_SOURCE
from quantum.planning.models import ConfidenceLevel


class TestFormatDuration:
    """Test human-readable durations."""

    @pytest.mark.parametrize(
        "minutes,expected",
        [
            (0.75, "45 seconds"),
            (12.636, "13 minutes"),
            (3.159, "3 minutes"),
            (60, "1 hour"),
            (120, "2 hours"),
            (84.24, "1h 24m"),
            (1440 + 185, "1 day 3h"),
            (2 * 1440, "2 days 0h"),
        ],
    )
    def test_format(self, minutes, expected):
        assert format_duration(minutes) == expected

    def test_halves_round_up(self):
        """2.5 minutes rounds to 3, not to the even 2."""
        assert format_duration(2.5) == "3 minutes"


class TestBenchmarkEstimates:
    """Test benchmark-driven estimates."""

    def test_benzene_absorption_full(self, time_estimator):
        """15 * 0.6**3 * 8.0 * 2.5 * 1.3 = 84.24 minutes."""
        estimate = time_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM,
            SoftwareName.PSI4,
            6,
            "def2-QZVP",
            "CAM-B3LYP",
            PrecisionLevel.FULL,
        )
        assert estimate.exact_minutes == pytest.approx(84.24)
        assert estimate.minutes == 84
        assert estimate.formatted == "1h 24m"
        assert estimate.range.min == 59
        assert estimate.range.max == 110
        assert estimate.source == BENCHMARK_SOURCE
        # def2-QZVP time factor exceeds 5
        assert estimate.confidence == ConfidenceLevel.LOW
        assert "TD-DFT calculations require solving many excited states" in estimate.factors
        assert "Full precision uses tight convergence criteria" in estimate.factors
        assert [b.type for b in estimate.bottlenecks] == ["Memory"]

    def test_benzene_absorption_half_and_low(self, time_estimator):
        half = time_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM,
            SoftwareName.PSI4,
            6,
            "def2-TZVP",
            "CAM-B3LYP",
            PrecisionLevel.HALF,
        )
        low = time_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM,
            SoftwareName.PSI4,
            6,
            "def2-SVP",
            "CAM-B3LYP",
            PrecisionLevel.LOW,
        )
        assert half.exact_minutes == pytest.approx(12.636)
        assert half.formatted == "13 minutes"
        assert half.confidence == ConfidenceLevel.MEDIUM
        assert low.exact_minutes == pytest.approx(3.159)
        assert low.formatted == "3 minutes"

    def test_well_benchmarked_pair_has_high_confidence(self, time_estimator):
        estimate = time_estimator.estimate(
            CalculationType.GEOMETRY_OPTIMIZATION,
            SoftwareName.PSI4,
            10,
            "def2-SVP",
            "B3LYP",
            PrecisionLevel.HALF,
        )
        assert estimate.confidence == ConfidenceLevel.HIGH
        assert estimate.exact_minutes == pytest.approx(7.5)

    def test_large_molecule_lowers_confidence(self, time_estimator):
        estimate = time_estimator.estimate(
            CalculationType.GEOMETRY_OPTIMIZATION,
            SoftwareName.PSI4,
            150,
            "def2-SVP",
            "B3LYP",
            PrecisionLevel.HALF,
        )
        assert estimate.confidence == ConfidenceLevel.LOW
        assert {b.type for b in estimate.bottlenecks} == {"CPU", "Memory"}

    def test_unknown_basis_set_uses_default_factor(self, time_estimator):
        """Unknown basis sets cost 1.5x."""
        estimate = time_estimator.estimate(
            CalculationType.GEOMETRY_OPTIMIZATION,
            SoftwareName.XTB,
            10,
            "6-31G*",
            "B3LYP",
            PrecisionLevel.HALF,
        )
        assert estimate.exact_minutes == pytest.approx(0.75)
        assert estimate.formatted == "45 seconds"


class TestDefaultEstimates:
    """Test the fallback when no benchmark exists."""

    def test_unbenchmarked_software(self, time_estimator):
        """xTB has no absorption benchmark; the per-type default applies."""
        estimate = time_estimator.estimate(
            CalculationType.ABSORPTION_SPECTRUM,
            SoftwareName.XTB,
            6,
            "def2-TZVP",
            "CAM-B3LYP",
            PrecisionLevel.HALF,
        )
        assert estimate.source == DEFAULT_SOURCE
        assert estimate.minutes == 90
        assert estimate.range.min == 63
        assert estimate.range.max == 135
        assert estimate.confidence == ConfidenceLevel.LOW
        assert estimate.bottlenecks == []

    def test_unknown_type_uses_flat_default(self, time_estimator):
        estimate = time_estimator.estimate(
            CalculationType.EMISSION_SPECTRUM,
            SoftwareName.PSI4,
            6,
            "def2-TZVP",
            "CAM-B3LYP",
            PrecisionLevel.FULL,
        )
        assert estimate.minutes == 60
        assert estimate.formatted == "1 hour"


class TestQueueAndComparison:
    """Test queue estimates and option comparison."""

    def test_queue_time(self, time_estimator):
        assert time_estimator.estimate_queue_time().minutes == 30
        assert time_estimator.estimate_queue_time("high", "high").formatted == "45 minutes"
        assert time_estimator.estimate_queue_time("urgent", "extreme").minutes == 30

    def test_unknown_load_uses_medium_row(self, time_estimator):
        """An unrecognized cluster load is treated as medium."""
        assert time_estimator.estimate_queue_time("high", "extreme").minutes == 10
        assert time_estimator.estimate_queue_time("low", "extreme").minutes == 60
        estimate = time_estimator.estimate_queue_time("normal", "extreme")
        assert estimate.minutes == 30
        assert estimate.cluster_load == "extreme"

    def test_compare_options(self, benzene_absorption_options, time_estimator):
        estimates = [option.time_estimate for option in benzene_absorption_options]
        comparison = time_estimator.compare_options(estimates)

        assert comparison.fastest.minutes == 3
        assert comparison.slowest.minutes == 84
        assert comparison.median.minutes == 13
        assert comparison.ratio == pytest.approx(84.24 / 3.159)
        assert any("27x slower" in text for text in comparison.recommendations)

    def test_compare_does_not_reorder_input(self, benzene_absorption_options, time_estimator):
        estimates = [option.time_estimate for option in benzene_absorption_options]
        before = list(estimates)
        time_estimator.compare_options(estimates)
        assert estimates == before

    def test_compare_empty_raises(self, time_estimator):
        with pytest.raises(ValueError):
            time_estimator.compare_options([])

    def test_zero_fastest_gives_infinite_ratio(self, time_estimator, benzene_absorption_options):
        fastest = benzene_absorption_options[2].time_estimate.model_copy(update={"hours": 0.0})
        comparison = time_estimator.compare_options(
            [fastest, benzene_absorption_options[0].time_estimate]
        )
        assert math.isinf(comparison.ratio)
