"""
Research and execution planners.
"""

from .execution_planner import ExecutionPlanner
from .research_planner import ResearchPlanner

__all__ = [
    "ResearchPlanner",
    "ExecutionPlanner",
]
