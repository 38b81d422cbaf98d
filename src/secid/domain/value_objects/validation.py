# src/secid/domain/value_objects/validation.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Validation result value objects.

Purpose:
    Carry the outcome of validating one identifier: an ordered, duplicate-free
    sequence of ``(code, message)`` details that is empty iff the identifier is
    valid.

Layer:
    domain
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from secid.domain.enums.validation import ErrorCode


@dataclass(frozen=True)
class ErrorDetail:
    """A single validation failure.

    Args:
        code: Machine-readable error code.
        message: Human-readable explanation.
    """

    code: ErrorCode
    message: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", ErrorCode(self.code))

    def as_dict(self) -> dict[str, str]:
        """Return a JSON-ready mapping with ``error`` and ``message`` keys."""
        return {"error": self.code.value, "message": self.message}


@dataclass(frozen=True)
class ValidationResult:
    """Ordered collection of validation failures for one identifier.

    Duplicate codes are dropped on construction, keeping the first occurrence.

    Args:
        details: Error details in the order they were detected.
    """

    details: tuple[ErrorDetail, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        seen: set[ErrorCode] = set()
        unique: list[ErrorDetail] = []
        for detail in self.details:
            if detail.code in seen:
                continue
            seen.add(detail.code)
            unique.append(detail)
        object.__setattr__(self, "details", tuple(unique))

    @classmethod
    def of(cls, details: Iterable[ErrorDetail]) -> ValidationResult:
        """Build a result from any iterable of details."""
        return cls(tuple(details))

    @property
    def valid(self) -> bool:
        """True when no errors were recorded."""
        return not self.details

    @property
    def codes(self) -> tuple[ErrorCode, ...]:
        """Error codes in detection order."""
        return tuple(d.code for d in self.details)

    @property
    def messages(self) -> tuple[str, ...]:
        """Human-readable messages in detection order."""
        return tuple(d.message for d in self.details)

    @property
    def first(self) -> ErrorDetail | None:
        """The first (most specific) error, or ``None`` when valid."""
        return self.details[0] if self.details else None

    def as_list(self) -> list[dict[str, str]]:
        """Return the details as JSON-ready dictionaries."""
        return [d.as_dict() for d in self.details]

    def __len__(self) -> int:
        return len(self.details)

    def __iter__(self) -> Iterator[ErrorDetail]:
        return iter(self.details)
