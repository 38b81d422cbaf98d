"""Application services."""

from __future__ import annotations

from .identifier_service import IdentifierService

__all__ = ["IdentifierService"]
