"""
Data models for calculation planning.
"""

from .core_models import (
    AccuracyBenchmark,
    CalculationType,
    CalculationTypeInfo,
    ConfidenceLevel,
    ConvergenceCriteria,
    DefaultAccuracy,
    FunctionalCorrection,
    LicenseClass,
    MoleculeInfo,
    PerformanceRating,
    PrecisionAccuracy,
    PrecisionLevel,
    PrecisionTierInfo,
    ResourceEstimate,
    SizeCategory,
    SoftwareName,
    SoftwareProfile,
    SoftwareSupport,
    TheoryLevel,
    TimeBenchmark,
)
from .results import (
    AccuracyComparison,
    AccuracyEstimate,
    AlternativeMethod,
    AlternativeSoftware,
    BenchmarkReference,
    Bottleneck,
    CalculationPlan,
    CalculationStep,
    CalculationSuggestion,
    ClassificationFailure,
    ComputationalApproach,
    ComputationalSetup,
    ConfidenceAssessment,
    CostBenefit,
    ErrorEstimate,
    ExecutionPlan,
    ExperimentalAccuracy,
    Installation,
    OverallRecommendation,
    PlanningFailure,
    PrecisionOption,
    PrecisionSummary,
    QueueEstimate,
    QuickComparison,
    RelativeAccuracy,
    ReliabilityAssessment,
    ResearchPlan,
    ResourceRequirements,
    Risk,
    ScoreDetails,
    SelectedSoftware,
    SoftwareScore,
    SoftwareSelection,
    TheoreticalBackground,
    TheoryPlan,
    TimeComparison,
    TimeEstimate,
    TimeRange,
    ValidationPlan,
)

__all__ = [
    # Enumerations
    "CalculationType",
    "SoftwareName",
    "PrecisionLevel",
    "SizeCategory",
    "LicenseClass",
    "PerformanceRating",
    "ConfidenceLevel",
    # Inputs and reference records
    "MoleculeInfo",
    "TheoryLevel",
    "CalculationTypeInfo",
    "SoftwareProfile",
    "SoftwareSupport",
    "TimeBenchmark",
    "AccuracyBenchmark",
    "DefaultAccuracy",
    "FunctionalCorrection",
    "PrecisionAccuracy",
    "ConvergenceCriteria",
    "ResourceEstimate",
    "PrecisionTierInfo",
    # Estimates
    "TimeEstimate",
    "TimeRange",
    "Bottleneck",
    "QueueEstimate",
    "TimeComparison",
    "AccuracyEstimate",
    "AccuracyComparison",
    "ErrorEstimate",
    "ExperimentalAccuracy",
    "RelativeAccuracy",
    "ConfidenceAssessment",
    "ReliabilityAssessment",
    "BenchmarkReference",
    # Precision tiers
    "CostBenefit",
    "PrecisionOption",
    "PrecisionSummary",
    "QuickComparison",
    "OverallRecommendation",
    # Software selection
    "ScoreDetails",
    "SoftwareScore",
    "SoftwareSelection",
    "ExecutionPlan",
    "SelectedSoftware",
    "Installation",
    "ComputationalSetup",
    "ResourceRequirements",
    "AlternativeSoftware",
    "Risk",
    "ValidationPlan",
    # Research planning
    "ResearchPlan",
    "CalculationStep",
    "TheoreticalBackground",
    "ComputationalApproach",
    "AlternativeMethod",
    "CalculationSuggestion",
    "TheoryPlan",
    "PlanningFailure",
    "ClassificationFailure",
    "CalculationPlan",
]
