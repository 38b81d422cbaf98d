"""Application DTOs."""

from __future__ import annotations

from .base import BaseDTO
from .identifiers import (
    ErrorDetailDTO,
    ExplainCandidateDTO,
    ExplainResultDTO,
    IdentifierDTO,
    MatchDTO,
)

__all__ = [
    "BaseDTO",
    "ErrorDetailDTO",
    "ExplainCandidateDTO",
    "ExplainResultDTO",
    "IdentifierDTO",
    "MatchDTO",
]
