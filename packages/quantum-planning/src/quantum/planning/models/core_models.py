"""
Core data models for calculation planning.

This module defines the enumerations and reference records shared by the
planners and estimators: calculation types, software packages, precision
tiers, molecule descriptions and the static benchmark records that make up
the reference tables.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CalculationType(str, Enum):
    """
    Supported calculation types.

    Declaration order is significant: request classification walks the
    types in this order and the first keyword hit wins.
    """

    ABSORPTION_SPECTRUM = "absorption_spectrum"
    EMISSION_SPECTRUM = "emission_spectrum"
    GEOMETRY_OPTIMIZATION = "geometry_optimization"
    FREQUENCY_ANALYSIS = "frequency_analysis"
    HOMO_LUMO = "homo_lumo"
    NMR_PREDICTION = "nmr_prediction"
    REACTION_ENERGY = "reaction_energy"

    @property
    def is_spectrum(self) -> bool:
        """Whether the calculation produces an electronic spectrum."""
        return self in (CalculationType.ABSORPTION_SPECTRUM, CalculationType.EMISSION_SPECTRUM)


class SoftwareName(str, Enum):
    """Quantum chemistry packages known to the planner."""

    PSI4 = "psi4"
    ORCA = "orca"
    XTB = "xtb"
    PYSCF = "pyscf"


_PRECISION_PRIORITY = {"full": 1, "half": 2, "low": 3}


class PrecisionLevel(str, Enum):
    """
    Precision/cost tiers offered for every calculation.

    - full: large basis sets and tight convergence
    - half: balanced accuracy and cost
    - low: fast preview for screening
    """

    FULL = "full"
    HALF = "half"
    LOW = "low"

    @property
    def priority(self) -> int:
        """Presentation order (1 = most precise)."""
        return _PRECISION_PRIORITY[self.value]


class SizeCategory(str, Enum):
    """Molecule size buckets based on heavy-atom count."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def from_size(cls, size: float, small_limit: int = 10, medium_limit: int = 30) -> "SizeCategory":
        if size < small_limit:
            return cls.SMALL
        if size < medium_limit:
            return cls.MEDIUM
        return cls.LARGE


class LicenseClass(str, Enum):
    """Licensing model of a software package."""

    OPEN_SOURCE = "open_source"
    FREE_ACADEMIC = "free_academic"


class PerformanceRating(str, Enum):
    """Qualitative performance of a package for a calculation type."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ConfidenceLevel(str, Enum):
    """Three-level confidence scale used by the estimators."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class MoleculeInfo(BaseModel):
    """
    Description of the target molecule as supplied by a molecule provider.

    Only the estimated size is used by the estimators; the remaining fields
    are carried through to plans and summaries.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Common name or identifier of the molecule")
    smiles: Optional[str] = Field(None, description="SMILES string, if known")
    formula: Optional[str] = Field(None, description="Molecular formula, if known")
    estimated_size: Optional[int] = Field(
        None, ge=0, description="Estimated number of heavy atoms"
    )
    n_atoms: Optional[int] = Field(None, ge=0, description="Total atom count, if known")


class TheoryLevel(BaseModel):
    """Recommended level of theory for a calculation."""

    model_config = ConfigDict(frozen=True)

    functional: str = Field(..., description="Exchange-correlation functional")
    basis_set: str = Field(..., description="Gaussian basis set")
    methods: List[str] = Field(..., min_length=1, description="Candidate methods, preferred first")

    @property
    def preferred_method(self) -> str:
        return self.methods[0]


class CalculationTypeInfo(BaseModel):
    """Reference entry describing one calculation type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name")
    description: str
    methods: List[str] = Field(..., min_length=1, description="Candidate methods, preferred first")
    required_steps: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(..., description="Lowercase classification keywords")
    theory: Optional[str] = Field(None, description="Theoretical background text")
    references: List[str] = Field(default_factory=list)
    expected_results: List[str] = Field(default_factory=list)
    limitations: List[str] = Field(
        default_factory=list,
        description="Limitation templates; '{functional}' is substituted",
    )

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v):
        """Classification needs at least one lowercase keyword."""
        if not v:
            raise ValueError("Calculation type must define at least one keyword")
        return [keyword.lower() for keyword in v]


class SoftwareSupport(BaseModel):
    """Support level of a package for one calculation type."""

    model_config = ConfigDict(frozen=True)

    supported: bool
    recommended: bool
    performance: PerformanceRating


class SoftwareProfile(BaseModel):
    """Capability profile of a quantum chemistry package."""

    model_config = ConfigDict(frozen=True)

    software: SoftwareName
    display_name: str
    license_class: LicenseClass
    license: str
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    calculation_types: Dict[CalculationType, SoftwareSupport] = Field(default_factory=dict)
    max_atoms: int = Field(..., gt=0, description="Practical heavy-atom ceiling")
    parallelization: bool = True
    memory_efficient: bool = True
    manual_install: bool = Field(False, description="Installation needs manual steps")
    install_command: str

    def support_for(self, calculation_type: CalculationType) -> SoftwareSupport:
        """Support entry for a type; types missing from the profile are unsupported."""
        return self.calculation_types.get(
            calculation_type,
            SoftwareSupport(supported=False, recommended=False, performance=PerformanceRating.POOR),
        )


class TimeBenchmark(BaseModel):
    """Reference timing: base minutes at 10 heavy atoms and a power-law exponent."""

    model_config = ConfigDict(frozen=True)

    base_minutes: float = Field(..., gt=0)
    scaling: float = Field(..., gt=0)


class AccuracyBenchmark(BaseModel):
    """Benchmark error statistics for a functional/basis combination."""

    model_config = ConfigDict(frozen=True)

    mean_error: float = Field(..., ge=0)
    std_dev: float = Field(..., ge=0)
    unit: str


class DefaultAccuracy(BaseModel):
    """Synthetic error coefficients used when no benchmark exists."""

    model_config = ConfigDict(frozen=True)

    mean_coefficient: float
    std_coefficient: float
    unit: str


class FunctionalCorrection(BaseModel):
    """Relative error multipliers for an exchange-correlation functional."""

    model_config = ConfigDict(frozen=True)

    charge_transfer: float
    general_accuracy: float


class PrecisionAccuracy(BaseModel):
    """Error multiplier associated with a precision tier."""

    model_config = ConfigDict(frozen=True)

    multiplier: float
    description: str


class ConvergenceCriteria(BaseModel):
    """SCF/geometry convergence thresholds for a precision tier."""

    model_config = ConfigDict(frozen=True)

    energy: float
    gradient: float
    density: float
    max_iterations: int


class ResourceEstimate(BaseModel):
    """Hardware requirement estimate."""

    model_config = ConfigDict(frozen=True)

    memory_gb: int
    cores: int
    disk_gb: int

    @property
    def memory(self) -> str:
        return f"{self.memory_gb} GB"

    @property
    def disk(self) -> str:
        return f"{self.disk_gb} GB"


class PrecisionTierInfo(BaseModel):
    """Static description of a precision tier."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    priority: int
    use_cases: List[str] = Field(default_factory=list)
