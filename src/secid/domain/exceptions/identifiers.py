# src/secid/domain/exceptions/identifiers.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""
Identifier domain exceptions.

Purpose:
    Provide the error taxonomy raised by strict identifier entry points:
    format, check-digit and structural failures, ambiguous matches, and
    programmer errors such as unknown family keys.

Layer:
    domain

Notes:
    - Per-instance validation never raises; these types are raised only by
      ``validate()``/``parse()``-style entry points and by the facade.
    - Messages always quote the offending trimmed input so failures can be
      diagnosed from logs alone.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from secid.domain.enums.validation import ErrorCode


class SecIdError(Exception):
    """Base class for identifier-related domain errors.

    Args:
        message: Human-readable error message (safe for clients).
        details: Optional machine-readable diagnostic payload.
    """

    code: str = "secid_error"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidFormatError(SecIdError):
    """Raised when an identifier has the wrong length, characters or layout.

    Also raised by the facade when no family matches the input at all.
    """

    code = "invalid_format"


class InvalidCheckDigitError(SecIdError):
    """Raised when a well-formed identifier carries a wrong check digit."""

    code = "invalid_check_digit"


class InvalidStructureError(SecIdError):
    """Raised when a sub-field (prefix, category, group, BBAN, date) is invalid."""

    code = "invalid_structure"


class AmbiguousMatchError(SecIdError):
    """Raised under the ``raise`` policy when several families match.

    Args:
        message: Human-readable error message.
        candidates: Family keys that validated the input, in specificity order.
        details: Optional machine-readable diagnostic payload.
    """

    code = "ambiguous_match"

    def __init__(
        self,
        message: str,
        *,
        candidates: Sequence[str] = (),
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.candidates: tuple[str, ...] = tuple(candidates)


class UnknownIdentifierTypeError(SecIdError, ValueError):
    """Raised when a caller names an identifier family that is not registered."""

    code = "unknown_identifier_type"


_ERROR_CLASSES: Final[dict[ErrorCode, type[SecIdError]]] = {
    ErrorCode.INVALID_CHECK_DIGIT: InvalidCheckDigitError,
    ErrorCode.INVALID_PREFIX: InvalidStructureError,
    ErrorCode.INVALID_CATEGORY: InvalidStructureError,
    ErrorCode.INVALID_GROUP: InvalidStructureError,
    ErrorCode.INVALID_BBAN: InvalidStructureError,
    ErrorCode.INVALID_DATE: InvalidStructureError,
}


def error_class_for(code: ErrorCode | str) -> type[SecIdError]:
    """Map a validation error code to the exception kind raised for it.

    Args:
        code: Validation error code.

    Returns:
        type[SecIdError]: Exception class; ``InvalidFormatError`` for length,
        character and layout codes.
    """
    return _ERROR_CLASSES.get(ErrorCode(code), InvalidFormatError)
