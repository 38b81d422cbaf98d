# src/secid/domain/entities/base.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Identifier family base entities.

Purpose:
    Provide the shared structural contract every identifier family follows:
    input cleaning, the validation pipeline, strict validation, normalization,
    serialization and, for families that carry one, check-digit calculation
    and restoration.

Layer:
    domain

Notes:
    - Each family is a subclass carrying an immutable ``FamilyMetadata``
      descriptor and a layout regex with named groups; the pipeline itself is
      shared and data driven.
    - Errors are computed eagerly in ``__init__``; instances are value
      objects compared by ``(family, full_id)``.
    - Construction never raises. Only ``validate()``, ``normalized()`` and the
      check-digit helpers raise, using the taxonomy in
      ``secid.domain.exceptions.identifiers``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Final, TypeVar

from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.enums.validation import ErrorCode
from secid.domain.exceptions.identifiers import InvalidFormatError, error_class_for
from secid.domain.value_objects.validation import ErrorDetail, ValidationResult

_T = TypeVar("_T", bound="SecurityIdentifier")
_C = TypeVar("_C", bound="CheckDigitIdentifier")

# Whitespace of any kind plus hyphen; removed anywhere in the body.
DEFAULT_SEPARATORS: Final[str] = " \t\n\r\f\v-"


@dataclass(frozen=True)
class FamilyMetadata:
    """Immutable description of one identifier family.

    Args:
        type: Family tag.
        short_name: Display acronym (``"ISIN"``).
        full_name: Full standard name.
        id_length: Fixed length, or an inclusive ``(min, max)`` range.
        chars: Character-class pattern the cleaned body must fully match.
        example: A representative valid identifier.
        check_digit_width: Width of the check digit field, 0 when absent.
        separators: Characters removed from the input while cleaning.
        has_normalization: Whether the canonical form can differ from the
            cleaned input (zero padding, OCC underlying padding).
    """

    type: IdentifierType
    short_name: str
    full_name: str
    id_length: int | tuple[int, int]
    chars: re.Pattern[str]
    example: str
    check_digit_width: int = 0
    separators: str = DEFAULT_SEPARATORS
    has_normalization: bool = False

    @property
    def has_check_digit(self) -> bool:
        """True when the family carries a check digit."""
        return self.check_digit_width > 0

    @property
    def min_length(self) -> int:
        """Shortest cleaned body the pipeline accepts past the length stage.

        Fixed-length check-digit families also accept the body without its
        check digit so that it can be restored.
        """
        if isinstance(self.id_length, tuple):
            return self.id_length[0]
        return self.id_length - self.check_digit_width

    @property
    def max_length(self) -> int:
        """Longest cleaned body the pipeline accepts past the length stage."""
        if isinstance(self.id_length, tuple):
            return self.id_length[1]
        return self.id_length

    @property
    def full_lengths(self) -> range:
        """Lengths of complete identifiers (check digit included)."""
        if isinstance(self.id_length, tuple):
            return range(self.id_length[0], self.id_length[1] + 1)
        return range(self.id_length, self.id_length + 1)

    @property
    def length_label(self) -> str:
        """Human-readable length used in error messages (``"12"`` or ``"15-34"``)."""
        if isinstance(self.id_length, tuple):
            return f"{self.id_length[0]}-{self.id_length[1]}"
        return str(self.id_length)

    def accepts_char(self, char: str) -> bool:
        """True if ``char`` belongs to the family's character class."""
        return bool(self.chars.fullmatch(char))

    def clean(self, raw: object) -> str:
        """Strip, remove separators and upper-case a raw value."""
        if raw is None:
            return ""
        cleaned = str(raw).strip()
        for separator in self.separators:
            cleaned = cleaned.replace(separator, "")
        return cleaned.upper()


class SecurityIdentifier:
    """Base class for identifier families.

    Subclasses set ``metadata`` and ``ID_PATTERN``; the pattern is matched
    against the whole cleaned body and its named groups become the parsed
    sub-fields. Structural rules beyond the layout are added by overriding
    :meth:`_structure_error`.

    Args:
        raw: Raw value (string, integer or ``None``).
    """

    metadata: ClassVar[FamilyMetadata]
    ID_PATTERN: ClassVar[re.Pattern[str]]

    def __init__(self, raw: object = None) -> None:
        self._raw_input = raw
        self._full_id = self.metadata.clean(raw)
        self._parts: dict[str, str] = self._parse(self._full_id)
        self._errors = ValidationResult.of(self._detect_errors())

    # ------------------------------------------------------------------ #
    # Class-level sugar                                                  #
    # ------------------------------------------------------------------ #

    @classmethod
    def is_valid(cls, raw: object) -> bool:
        """Return True if ``raw`` is a valid identifier of this family."""
        return cls(raw).valid

    @classmethod
    def from_string(cls: type[_T], raw: object) -> _T:
        """Build an instance with its errors computed (never raises)."""
        return cls(raw)

    @classmethod
    def parse(cls: type[_T], raw: object) -> _T:
        """Build an instance and raise if it is invalid."""
        return cls(raw).validate()

    @classmethod
    def normalize(cls, raw: object) -> str:
        """Return the canonical form of ``raw``; raises if invalid."""
        return cls(raw).normalized()

    @classmethod
    def format_pretty(cls, raw: object) -> str | None:
        """Return the display form of ``raw``, or ``None`` if invalid."""
        return cls(raw).pretty()

    # ------------------------------------------------------------------ #
    # Instance API                                                       #
    # ------------------------------------------------------------------ #

    @property
    def type(self) -> IdentifierType:
        """Family tag of this identifier."""
        return self.metadata.type

    @property
    def raw_input(self) -> object:
        """The value this instance was built from, unmodified."""
        return self._raw_input

    @property
    def full_id(self) -> str:
        """Cleaned body: stripped, separators removed, upper-cased."""
        return self._full_id

    @property
    def identifier(self) -> str | None:
        """Main identifier portion (without check digit), ``None`` when unparsable."""
        return self._parts.get("identifier")

    @property
    def errors(self) -> ValidationResult:
        """Validation failures, in pipeline order."""
        return self._errors

    @property
    def valid(self) -> bool:
        """True iff no validation errors were recorded."""
        return self._errors.valid

    def validate(self: _T) -> _T:
        """Return ``self`` when valid, otherwise raise for the first error.

        Raises:
            InvalidFormatError: Length, character or layout failures.
            InvalidStructureError: Prefix, category, group, BBAN or date failures.
            InvalidCheckDigitError: Check-digit mismatch.
        """
        first = self._errors.first
        if first is None:
            return self
        raise error_class_for(first.code)(
            f'{self.metadata.short_name} "{self._full_id}" is invalid: {first.message}',
            details={
                "type": self.metadata.type.value,
                "input": self._full_id,
                "error": first.code.value,
            },
        )

    def normalized(self) -> str:
        """Canonical form of this identifier; raises if invalid."""
        self.validate()
        return self._canonical()

    def pretty(self) -> str | None:
        """Human-friendly display form, or ``None`` when invalid."""
        if not self.valid:
            return None
        return self._pretty()

    def components(self) -> dict[str, Any]:
        """Parsed sub-fields of a valid identifier (empty when invalid)."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready description of this identifier."""
        valid = self.valid
        return {
            "type": self.metadata.type.value,
            "full_id": self._full_id,
            "normalized": self._canonical() if valid else None,
            "valid": valid,
            "components": self.components() if valid else {},
        }

    # ------------------------------------------------------------------ #
    # Hooks                                                              #
    # ------------------------------------------------------------------ #

    def _parse(self, full_id: str) -> dict[str, str]:
        """Split a cleaned body into named sub-fields (empty when no match)."""
        match = self.ID_PATTERN.fullmatch(full_id) if full_id else None
        if match is None:
            return {}
        return {k: v for k, v in match.groupdict().items() if v is not None}

    def _structure_error(self) -> ErrorDetail | None:
        """Family-specific sub-field rule; runs after the layout matched."""
        return None

    def _check_error(self) -> ErrorDetail | None:
        """Check-digit stage; only check-digit families implement it."""
        return None

    def _format_errors(self) -> list[ErrorDetail]:
        """Run every pipeline stage that precedes the check-digit stage."""
        length = len(self._full_id)
        meta = self.metadata
        if length == 0 or not meta.min_length <= length <= meta.max_length:
            return [self._error(ErrorCode.INVALID_LENGTH)]
        if not meta.chars.fullmatch(self._full_id):
            return [self._error(ErrorCode.INVALID_CHARACTERS)]
        if not self._parts:
            return [self._error(ErrorCode.INVALID_FORMAT)]
        structural = self._structure_error()
        return [structural] if structural is not None else []

    def _detect_errors(self) -> list[ErrorDetail]:
        errors = self._format_errors()
        if errors:
            return errors
        check = self._check_error()
        return [check] if check is not None else []

    def _error(self, code: ErrorCode, message: str | None = None) -> ErrorDetail:
        return ErrorDetail(code=code, message=message or self._message(code))

    def _message(self, code: ErrorCode) -> str:
        name = self.metadata.short_name
        if code is ErrorCode.INVALID_LENGTH:
            return f"Expected {self.metadata.length_label} characters, got {len(self._full_id)}"
        if code is ErrorCode.INVALID_CHARACTERS:
            return f"Contains invalid characters for {name}"
        return f"Does not match {name} format"

    def _canonical(self) -> str:
        return str(self)

    def _pretty(self) -> str:
        return self._canonical()

    # ------------------------------------------------------------------ #
    # Dunder                                                             #
    # ------------------------------------------------------------------ #

    def __str__(self) -> str:
        return self.identifier if self.identifier is not None else self._full_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._full_id!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecurityIdentifier):
            return NotImplemented
        return (self.metadata.type, self._full_id) == (other.metadata.type, other._full_id)

    def __hash__(self) -> int:
        return hash((self.metadata.type, self._full_id))


class CheckDigitIdentifier(SecurityIdentifier):
    """Base class for families whose body ends with a check digit.

    Subclasses implement :meth:`_compute_check_digit` over the body without
    the check field. The layout regex must expose ``identifier`` and an
    optional ``check_digit`` group.
    """

    @classmethod
    def compute_check_digit(cls, raw: object) -> int:
        """Calculate the check digit for ``raw`` (with or without its check digit).

        Raises:
            InvalidFormatError: If the body is not well formed.
        """
        return cls(raw).calculate_check_digit()

    @classmethod
    def restore_id(cls, raw: object) -> str:
        """Return ``raw`` with a freshly computed check digit.

        Raises:
            InvalidFormatError: If the body is not well formed.
        """
        return cls(raw).restore()

    @property
    def check_digit(self) -> int | None:
        """Check digit carried by the input, ``None`` when absent."""
        value = self._parts.get("check_digit")
        return int(value) if value is not None else None

    @property
    def valid_check_digit(self) -> bool:
        """True when the body is well formed and its check digit verifies."""
        return not self._format_errors() and self._check_digit_verifies()

    def calculate_check_digit(self) -> int:
        """Compute the expected check digit for this body.

        Raises:
            InvalidFormatError: If the body fails any pre-check stage.
        """
        if self._format_errors():
            raise InvalidFormatError(
                f'{self.metadata.short_name} "{self._full_id}" is invalid and its check digit '
                "cannot be calculated",
                details={"type": self.metadata.type.value, "input": self._full_id},
            )
        return self._compute_check_digit()

    def restore(self) -> str:
        """Return the identifier with the correct check digit in place."""
        return self._compose(self._format_check(self.calculate_check_digit()))

    def restored(self: _C) -> _C:
        """Return a new instance carrying the correct check digit."""
        return type(self)(self.restore())

    def components(self) -> dict[str, Any]:
        if not self.valid:
            return {}
        parts = self._components()
        parts["check_digit"] = self.check_digit
        return parts

    def _components(self) -> dict[str, Any]:
        return {}

    def _compute_check_digit(self) -> int:
        raise NotImplementedError

    def _format_check(self, value: int) -> str:
        return str(value).zfill(self.metadata.check_digit_width)

    def _compose(self, check: str) -> str:
        return f"{self.identifier}{check}"

    def _check_digit_verifies(self) -> bool:
        return self.check_digit == self._compute_check_digit()

    def _check_error(self) -> ErrorDetail | None:
        actual = self.check_digit
        if actual is not None and self._check_digit_verifies():
            return None
        expected = self._format_check(self._compute_check_digit())
        if actual is None:
            return self._error(
                ErrorCode.INVALID_CHECK_DIGIT,
                f"Check digit is missing, expected '{expected}'",
            )
        return self._error(
            ErrorCode.INVALID_CHECK_DIGIT,
            f"Check digit '{self._format_check(actual)}' is invalid, expected '{expected}'",
        )

    def __str__(self) -> str:
        if self.identifier is None:
            return self._full_id
        check = self.check_digit
        return self._compose(self._format_check(check) if check is not None else "")
