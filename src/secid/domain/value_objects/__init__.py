"""Domain value objects."""

from __future__ import annotations

from .match import Match
from .validation import ErrorDetail, ValidationResult

__all__ = ["ErrorDetail", "Match", "ValidationResult"]
