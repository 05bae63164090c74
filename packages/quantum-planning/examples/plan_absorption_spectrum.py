#!/usr/bin/env python3
"""
Plan an absorption spectrum calculation and walk through the precision tiers.

Shows the end-to-end workflow, the software ranking behind the selection,
and how a user's tier choice is parsed.
"""

import logging

from quantum.planning import (
    CalculationPlan,
    CalculationPlanningWorkflow,
    format_plan_response,
    parse_precision_choice,
)


def demonstrate_plan(workflow: CalculationPlanningWorkflow) -> CalculationPlan:
    """Plan the benzene absorption spectrum and print the response."""
    print("=" * 60)
    print("CALCULATION PLAN")
    print("=" * 60)

    plan = workflow.plan_calculation("Calculate the UV-Vis absorption spectrum of benzene")
    print(format_plan_response(plan))
    return plan


def demonstrate_software_ranking(plan: CalculationPlan):
    """Print the score of every package."""
    print("\n" + "=" * 60)
    print("SOFTWARE RANKING")
    print("=" * 60)

    for entry in plan.software.ranking:
        status = "supported" if entry.details.supported else "unsupported"
        print(f"  {entry.software.value:<8} {entry.score:>6g}  ({status})")


def demonstrate_tier_choice(plan: CalculationPlan):
    """Parse a user choice and show the chosen tier."""
    print("\n" + "=" * 60)
    print("TIER CHOICE")
    print("=" * 60)

    level = parse_precision_choice("run half")
    option = next(option for option in plan.precision_options if option.level == level)
    print(f"  {option.name}: {option.basis_set}, {option.estimated_time}, {option.expected_error}")
    print(f"  Confidence: {option.accuracy.confidence.percentage}%")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    workflow = CalculationPlanningWorkflow()
    plan = demonstrate_plan(workflow)
    demonstrate_software_ranking(plan)
    demonstrate_tier_choice(plan)


if __name__ == "__main__":
    main()
