"""Heuristic planning of quantum chemistry calculations."""

from .config import PlannerConfig
from .estimators import (
    AccuracyEstimator,
    PrecisionCalculator,
    TimeEstimator,
    format_duration,
    format_error,
)
from .exceptions import (
    ClassificationError,
    MoleculeNotIdentifiedError,
    PlanningError,
    PrecisionChoiceError,
)
from .models import (
    AccuracyEstimate,
    CalculationPlan,
    CalculationType,
    ClassificationFailure,
    MoleculeInfo,
    PlanningFailure,
    PrecisionLevel,
    PrecisionOption,
    PrecisionSummary,
    SoftwareName,
    SoftwareSelection,
    TheoryLevel,
    TheoryPlan,
    TimeEstimate,
)
from .molecules import (
    COMMON_MOLECULES,
    CommonMoleculeProvider,
    MoleculeProvider,
    count_heavy_atoms,
    estimate_molecule_size,
    extract_molecule_name,
)
from .planning import ExecutionPlanner, ResearchPlanner
from .reference import ReferenceTables, load_reference_tables
from .reporting import format_plan_response, format_tier_menu, parse_precision_choice
from .workflow import (
    CalculationPlanningWorkflow,
    classify_and_plan_theory,
    compute_precision_tiers,
    is_calculation_request,
    select_software,
)

__version__ = "0.1.0"

__all__ = [
    # Workflow
    "CalculationPlanningWorkflow",
    "classify_and_plan_theory",
    "select_software",
    "compute_precision_tiers",
    "is_calculation_request",
    # Planners and estimators
    "ResearchPlanner",
    "ExecutionPlanner",
    "TimeEstimator",
    "AccuracyEstimator",
    "PrecisionCalculator",
    "format_duration",
    "format_error",
    # Reporting
    "format_plan_response",
    "format_tier_menu",
    "parse_precision_choice",
    # Molecules
    "COMMON_MOLECULES",
    "CommonMoleculeProvider",
    "MoleculeProvider",
    "count_heavy_atoms",
    "estimate_molecule_size",
    "extract_molecule_name",
    # Configuration and reference data
    "PlannerConfig",
    "ReferenceTables",
    "load_reference_tables",
    # Models
    "CalculationType",
    "SoftwareName",
    "PrecisionLevel",
    "MoleculeInfo",
    "TheoryLevel",
    "TheoryPlan",
    "ClassificationFailure",
    "PlanningFailure",
    "SoftwareSelection",
    "TimeEstimate",
    "AccuracyEstimate",
    "PrecisionOption",
    "PrecisionSummary",
    "CalculationPlan",
    # Exceptions
    "PlanningError",
    "ClassificationError",
    "MoleculeNotIdentifiedError",
    "PrecisionChoiceError",
]
