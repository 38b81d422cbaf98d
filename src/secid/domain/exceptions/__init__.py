"""Domain exceptions."""

from __future__ import annotations

from .identifiers import (
    AmbiguousMatchError,
    InvalidCheckDigitError,
    InvalidFormatError,
    InvalidStructureError,
    SecIdError,
    UnknownIdentifierTypeError,
    error_class_for,
)

__all__ = [
    "AmbiguousMatchError",
    "InvalidCheckDigitError",
    "InvalidFormatError",
    "InvalidStructureError",
    "SecIdError",
    "UnknownIdentifierTypeError",
    "error_class_for",
]
