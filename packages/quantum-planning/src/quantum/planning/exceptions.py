"""
Exceptions raised by the planning components.
"""

from typing import List, Optional


class PlanningError(Exception):
    """Base exception for calculation planning errors."""
    pass


class ClassificationError(PlanningError):
    """Raised when a request cannot be mapped to a calculation type."""

    def __init__(self, message: str, suggestions: Optional[List] = None):
        super().__init__(message)
        self.suggestions = suggestions or []


class MoleculeNotIdentifiedError(PlanningError):
    """Raised when no molecule can be identified for a request."""
    pass


class PrecisionChoiceError(PlanningError, ValueError):
    """Raised when a precision tier choice cannot be parsed."""
    pass
