"""
Result models produced by the planners and estimators.

Every result is built fresh for a request and never mutated afterwards.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .core_models import (
    AccuracyBenchmark,
    CalculationType,
    ConfidenceLevel,
    ConvergenceCriteria,
    MoleculeInfo,
    PrecisionLevel,
    ResourceEstimate,
    SoftwareName,
    TheoryLevel,
)


class FrozenModel(BaseModel):
    """Immutable base for result records."""

    model_config = ConfigDict(frozen=True)


# Time estimation


class TimeRange(FrozenModel):
    min: int = Field(..., description="Lower bound in minutes")
    max: int = Field(..., description="Upper bound in minutes")
    min_hours: float
    max_hours: float


class Bottleneck(FrozenModel):
    type: str = Field(..., description="CPU, Memory or Convergence")
    description: str
    suggestion: str


class TimeEstimate(FrozenModel):
    """Projected wall time for a single calculation."""

    minutes: int = Field(..., description="Rounded point estimate in minutes")
    hours: float = Field(..., description="Unrounded point estimate in hours")
    range: TimeRange
    formatted: str
    range_formatted: str
    confidence: ConfidenceLevel
    factors: List[str] = Field(default_factory=list)
    bottlenecks: List[Bottleneck] = Field(default_factory=list)
    source: str = Field("benchmark", description="Resolver that produced the estimate")

    @property
    def exact_minutes(self) -> float:
        return self.hours * 60


class QueueEstimate(FrozenModel):
    minutes: int
    formatted: str
    priority: str
    cluster_load: str


class TimeComparison(FrozenModel):
    fastest: TimeEstimate
    slowest: TimeEstimate
    median: TimeEstimate
    min_minutes: int
    max_minutes: int
    ratio: float
    recommendations: List[str] = Field(default_factory=list)


# Accuracy estimation


class ErrorEstimate(FrozenModel):
    """Numeric expected error with its confidence interval."""

    mean: float
    std_dev: float
    unit: str
    range_low: float
    range_high: float


class ExperimentalAccuracy(FrozenModel):
    category: str = Field(..., description="Excellent, Good, Fair or Poor")
    description: str
    expected_deviation: str
    confidence_interval: str


class RelativeAccuracy(FrozenModel):
    relative_difference: str
    description: str
    expected_deviation: str


class ConfidenceAssessment(FrozenModel):
    percentage: int = Field(..., ge=0, le=100)
    level: ConfidenceLevel
    description: str


class ReliabilityAssessment(FrozenModel):
    score: float = Field(..., ge=0, le=10)
    level: ConfidenceLevel
    factors: List[str] = Field(default_factory=list)


class BenchmarkReference(FrozenModel):
    available: bool
    source: str
    n_molecules: Optional[str] = None
    reference: Optional[AccuracyBenchmark] = None
    recommendation: Optional[str] = None


class AccuracyEstimate(FrozenModel):
    """Projected accuracy of a calculation setup."""

    vs_experiment: ExperimentalAccuracy
    vs_full: Optional[RelativeAccuracy] = Field(
        None, description="Accuracy relative to the reference tier; absent for experiment"
    )
    expected_error: str
    error: ErrorEstimate
    confidence: ConfidenceAssessment
    reliability: ReliabilityAssessment
    limitations: List[str] = Field(default_factory=list)
    benchmark_data: BenchmarkReference
    source: str = "benchmark"


class AccuracyComparison(FrozenModel):
    most_accurate: AccuracyEstimate
    least_accurate: AccuracyEstimate
    recommendations: List[str] = Field(default_factory=list)


# Precision tiers


class CostBenefit(FrozenModel):
    accuracy: int = Field(..., ge=0, le=10)
    speed: int = Field(..., ge=0, le=10)
    efficiency: int = Field(..., ge=0, le=10)
    overall: int = Field(..., ge=0, le=10)
    recommendation: str


class PrecisionOption(FrozenModel):
    """One precision/cost tier for a planned calculation."""

    level: PrecisionLevel
    name: str
    description: str
    priority: int
    basis_set: str
    convergence: ConvergenceCriteria
    time_estimate: TimeEstimate
    resources: ResourceEstimate
    accuracy: AccuracyEstimate
    recommended: str
    warnings: List[str] = Field(default_factory=list)
    cost_benefit: CostBenefit
    use_cases: List[str] = Field(default_factory=list)

    @property
    def estimated_time(self) -> str:
        return self.time_estimate.formatted

    @property
    def time_range(self) -> TimeRange:
        return self.time_estimate.range

    @property
    def memory_requirement(self) -> str:
        return self.resources.memory

    @property
    def cpu_cores(self) -> int:
        return self.resources.cores

    @property
    def disk_space(self) -> str:
        return self.resources.disk

    @property
    def accuracy_vs_experiment(self) -> ExperimentalAccuracy:
        return self.accuracy.vs_experiment

    @property
    def expected_error(self) -> str:
        return self.accuracy.expected_error


class QuickComparison(FrozenModel):
    fastest_minutes: int
    slowest_minutes: int
    lowest_error: float
    highest_error: float
    error_unit: str


class OverallRecommendation(FrozenModel):
    recommended: PrecisionLevel
    reason: str
    alternatives: List[str] = Field(default_factory=list)


class PrecisionSummary(BaseModel):
    """
    Presentation-ready summary of the precision tiers.

    The timestamp records when the summary was produced and takes no part
    in equality.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    timestamp: datetime = Field(default_factory=datetime.now)
    total_options: int
    options: List[PrecisionOption]
    quick_comparison: QuickComparison
    recommendation: OverallRecommendation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrecisionSummary):
            return NotImplemented
        return self.model_dump(exclude={"timestamp"}) == other.model_dump(exclude={"timestamp"})

    __hash__ = None


# Software selection


class ScoreDetails(FrozenModel):
    supported: bool
    performance: Optional[str] = None
    method_match: bool = False
    size_compatible: Optional[bool] = None
    open_source: bool = False
    easy_install: bool = False


class SoftwareScore(FrozenModel):
    software: SoftwareName
    score: float
    details: ScoreDetails


class Installation(FrozenModel):
    required: bool = True
    command: str
    difficulty: str = Field(..., description="Manual or Automatic")


class SelectedSoftware(FrozenModel):
    name: str
    version: str = "Latest"
    license: str
    reasons: List[str] = Field(default_factory=list)
    installation: Installation


class ComputationalSetup(FrozenModel):
    method: str
    functional: str
    basis_set: str
    estimated_performance: str
    parallelization: bool


class ResourceRequirements(FrozenModel):
    memory: str
    cpu_cores: int
    disk_space: str
    estimated_time: str


class AlternativeSoftware(FrozenModel):
    name: str
    score: float
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    reason: str


class Risk(FrozenModel):
    risk: str
    severity: str
    mitigation: str


class ValidationPlan(FrozenModel):
    benchmark_data: str
    expected_accuracy: str
    comparison_methods: List[str] = Field(default_factory=list)


class ExecutionPlan(FrozenModel):
    """How and where the calculation should be run."""

    title: str
    selected_software: SelectedSoftware
    computational_setup: ComputationalSetup
    resource_requirements: ResourceRequirements
    alternative_software: List[AlternativeSoftware] = Field(default_factory=list)
    risk_assessment: List[Risk] = Field(default_factory=list)
    validation: ValidationPlan


class SoftwareSelection(FrozenModel):
    """Ranked software choice for a calculation."""

    selected: Optional[SoftwareScore] = Field(
        None, description="Best supported package; None when nothing supports the type"
    )
    alternatives: List[SoftwareScore] = Field(default_factory=list)
    ranking: List[SoftwareScore] = Field(default_factory=list)
    execution_plan: Optional[ExecutionPlan] = None


# Research planning


class CalculationStep(FrozenModel):
    step: str
    description: str


class TheoreticalBackground(FrozenModel):
    method: str
    description: str
    theory: str
    references: List[str] = Field(default_factory=list)


class ComputationalApproach(FrozenModel):
    method: str
    functional: str
    basis_set: str
    software: str = "To be determined in execution planning"
    steps: List[CalculationStep] = Field(default_factory=list)


class AlternativeMethod(FrozenModel):
    method: str
    description: str
    advantages: str
    disadvantages: str


class ResearchPlan(FrozenModel):
    """Narrative plan describing the scientific approach."""

    title: str
    objective: str
    molecule: Optional[str] = None
    calculation_type: CalculationType
    theoretical_background: TheoreticalBackground
    computational_approach: ComputationalApproach
    expected_results: List[str] = Field(default_factory=list)
    limitations: List[str] = Field(default_factory=list)
    alternative_methods: List[AlternativeMethod] = Field(default_factory=list)


class CalculationSuggestion(FrozenModel):
    type: CalculationType
    name: str
    keywords: List[str]


class TheoryPlan(FrozenModel):
    """Successful classification with the recommended theory level."""

    success: bool = True
    calculation_type: CalculationType
    theory_level: TheoryLevel
    research_plan: ResearchPlan


class PlanningFailure(FrozenModel):
    """Soft failure returned when a request cannot be planned."""

    success: bool = False
    error: str
    suggestions: List[CalculationSuggestion] = Field(default_factory=list)


class ClassificationFailure(PlanningFailure):
    """The calculation type could not be determined from the request."""


class CalculationPlan(FrozenModel):
    """Complete plan: theory, software and the three precision tiers."""

    request: str
    molecule: MoleculeInfo
    calculation_type: CalculationType
    theory_level: TheoryLevel
    research_plan: ResearchPlan
    software: SoftwareSelection
    precision_options: List[PrecisionOption]
    summary: PrecisionSummary
