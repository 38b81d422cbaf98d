"""Domain enumerations."""

from __future__ import annotations

from .identifier_type import IdentifierType
from .validation import ErrorCode, OnAmbiguous

__all__ = ["ErrorCode", "IdentifierType", "OnAmbiguous"]
