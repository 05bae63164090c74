"""
Text reporting for calculation plans.

Renders a plan and its precision tiers as Markdown and parses the user's
tier choice ("1", "run full", "full", ...).
"""

from __future__ import annotations

import logging
from typing import Dict, Sequence

from jinja2 import Environment, Template

from .exceptions import PrecisionChoiceError
from .models.core_models import PrecisionLevel
from .models.results import CalculationPlan, PrecisionOption

logger = logging.getLogger(__name__)

INVALID_CHOICE_MESSAGE = 'Invalid choice. Please select 1, 2, 3, or use "run full/half/low"'

_TIER_HINTS: Dict[PrecisionLevel, str] = {
    PrecisionLevel.FULL: "Maximum accuracy (may take hours/days)",
    PrecisionLevel.HALF: "Balanced accuracy and speed (recommended)",
    PrecisionLevel.LOW: "Quick preview (minutes to hours)",
}

_environment = Environment(trim_blocks=True, lstrip_blocks=True, autoescape=False)

_PLAN_TEMPLATE = """\
## Calculation Plan for {{ molecule_name }}

**Calculation Type:** {{ calculation_type }}
**Recommended Software:** {{ software_name }}
**Method:** {{ functional }}

## Precision Options

{{ options|length }} precision levels are available for this calculation:

{% for option in options %}
### {{ loop.index }}. {{ option.name }} ({{ option.level.value }})
- **Description:** {{ option.description }}
- **Estimated Time:** {{ option.estimated_time }}
- **Accuracy vs Experiment:** {{ option.accuracy_vs_experiment.category }}
- **Memory Required:** {{ option.memory_requirement }}
- **Basis Set:** {{ option.basis_set }}
{% if option.recommended %}
- **{{ option.recommended }}**
{% endif %}
{% if option.warnings %}
- **Warnings:** {{ option.warnings|join(", ") }}
{% endif %}

{% endfor %}
## Next Steps

{{ menu }}
"""

_MENU_TEMPLATE = """\
Please choose your preferred precision level by typing one of:
{% for option in options %}
- `{{ loop.index }}` or `run {{ option.level.value }}` - {{ hints[option.level] }}
{% endfor %}
"""


def _template(source: str) -> Template:
    return _environment.from_string(source)


def format_tier_menu(options: Sequence[PrecisionOption]) -> str:
    """List the accepted choices for each precision tier."""
    return _template(_MENU_TEMPLATE).render(options=options, hints=_TIER_HINTS).rstrip()


def format_plan_response(plan: CalculationPlan) -> str:
    """
    Render a calculation plan as Markdown.

    Args:
        plan: Complete plan from the planning workflow

    Returns:
        Markdown text with the plan summary and the tier menu
    """
    execution_plan = plan.software.execution_plan
    if execution_plan is not None:
        software_name = execution_plan.selected_software.name
    else:
        software_name = "None available"

    return _template(_PLAN_TEMPLATE).render(
        molecule_name=plan.molecule.name or "your molecule",
        calculation_type=plan.calculation_type.value.replace("_", " ").upper(),
        software_name=software_name,
        functional=plan.theory_level.functional,
        options=plan.precision_options,
        menu=format_tier_menu(plan.precision_options),
    )


def parse_precision_choice(choice: str) -> PrecisionLevel:
    """
    Parse a precision tier choice.

    Accepts the tier number, "run <level>" or the bare level name,
    ignoring case and surrounding whitespace.

    Raises:
        PrecisionChoiceError: If the choice is not recognised
    """
    normalized = " ".join(choice.strip().lower().split())
    for index, level in enumerate(sorted(PrecisionLevel, key=lambda tier: tier.priority), 1):
        if normalized in (str(index), f"run {level.value}", level.value):
            return level

    logger.debug(f"Unrecognised precision choice: {choice!r}")
    raise PrecisionChoiceError(INVALID_CHOICE_MESSAGE)
