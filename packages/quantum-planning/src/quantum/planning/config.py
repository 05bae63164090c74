"""
Configuration for the planning components.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models.core_models import PrecisionLevel, SoftwareName


class PlannerConfig(BaseModel):
    """
    Policy settings shared by the planners and estimators.

    The defaults reproduce the calibrated heuristics; override them only
    for experiments or tests.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_software: SoftwareName = Field(
        SoftwareName.PSI4, description="Software assumed when none is selected"
    )
    accuracy_reference_level: PrecisionLevel = Field(
        PrecisionLevel.FULL, description="Tier the precision options are compared against"
    )
    max_alternatives: int = Field(2, ge=0, description="Alternative packages to report")

    # Time estimation
    time_uncertainty: float = Field(
        0.3, ge=0.0, lt=1.0, description="Relative half-width of benchmark time ranges"
    )
    default_time_band: Tuple[float, float] = Field(
        (0.7, 1.5), description="Range multipliers for default (unbenchmarked) estimates"
    )
    default_time_minutes: float = Field(
        60.0, gt=0, description="Fallback when no default estimate exists"
    )

    # Accuracy estimation
    accuracy_interval: Tuple[float, float] = Field(
        (0.5, 1.8), description="Confidence interval multipliers of the mean error"
    )
    confidence_bounds: Tuple[int, int] = Field((20, 95))
    reliability_bounds: Tuple[float, float] = Field((1.0, 10.0))

    # Molecule size
    default_molecule_size: int = Field(
        10, gt=0, description="Heavy-atom count assumed when nothing better is known"
    )
    size_category_limits: Tuple[int, int] = Field(
        (10, 30), description="Upper bounds of the small and medium size categories"
    )

    @field_validator("default_time_band", "accuracy_interval", "confidence_bounds", "reliability_bounds")
    @classmethod
    def validate_ordered_pair(cls, v):
        """Lower bound must not exceed upper bound."""
        if v[0] > v[1]:
            raise ValueError(f"Invalid bounds {v}: lower bound exceeds upper bound")
        return v

    @classmethod
    def from_env(cls, prefix: str = "QUANTUM_PLANNER_", **overrides) -> "PlannerConfig":
        """
        Build a configuration from environment variables.

        Recognised variables are ``{prefix}DEFAULT_SOFTWARE`` and
        ``{prefix}MAX_ALTERNATIVES``. Explicit keyword overrides win.
        """
        values = {}
        software: Optional[str] = os.environ.get(f"{prefix}DEFAULT_SOFTWARE")
        if software:
            values["default_software"] = software.strip().lower()
        alternatives = os.environ.get(f"{prefix}MAX_ALTERNATIVES")
        if alternatives:
            values["max_alternatives"] = int(alternatives)
        values.update(overrides)
        return cls(**values)
