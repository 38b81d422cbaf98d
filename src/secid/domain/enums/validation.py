# src/secid/domain/enums/validation.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Validation error codes and ambiguity policies.

Purpose:
    Enumerate the machine-readable validation error codes emitted by identifier
    families, and the policies available to resolve inputs that validate under
    more than one family.

Layer:
    domain
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Machine-readable validation error codes.

    Codes are reported in pipeline order; at most one structural class of
    error is reported for a single identifier.
    """

    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_FORMAT = "invalid_format"
    INVALID_PREFIX = "invalid_prefix"
    INVALID_CATEGORY = "invalid_category"
    INVALID_GROUP = "invalid_group"
    INVALID_BBAN = "invalid_bban"
    INVALID_DATE = "invalid_date"
    INVALID_CHECK_DIGIT = "invalid_check_digit"

    def __str__(self) -> str:
        return self.value


class OnAmbiguous(str, Enum):
    """Policy applied when several families validate the same input."""

    FIRST = "first"
    RAISE = "raise"
    ALL = "all"

    @classmethod
    def coerce(cls, value: OnAmbiguous | str) -> OnAmbiguous:
        """Resolve a policy name into a member.

        Args:
            value: Member or its string value.

        Returns:
            OnAmbiguous: The resolved policy.

        Raises:
            ValueError: If ``value`` names no policy.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unknown on_ambiguous mode: {value!r} (expected one of {allowed})"
            ) from None
