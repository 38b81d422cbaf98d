# src/secid/application/schemas/dto/identifiers.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Application DTOs for identifier validation, explanation and extraction.

Synopsis:
    Strict (Pydantic v2) DTOs returned by the identifier service and rendered
    by the CLI. Builders translate domain objects into DTOs so outer layers
    never depend on entity internals.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from secid.application.schemas.dto.base import BaseDTO
from secid.domain.entities.base import SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.enums.validation import ErrorCode
from secid.domain.value_objects.match import Match
from secid.domain.value_objects.validation import ErrorDetail


class ErrorDetailDTO(BaseDTO):
    """One validation failure.

    Attributes:
        error: Machine-readable error code.
        message: Human-readable explanation.
    """

    error: ErrorCode
    message: str

    @classmethod
    def from_domain(cls, detail: ErrorDetail) -> ErrorDetailDTO:
        return cls(error=detail.code, message=detail.message)


class ExplainCandidateDTO(BaseDTO):
    """Validation outcome of one family for an explained input.

    Attributes:
        type: Family tag.
        valid: Whether the input validates under this family.
        errors: Ordered failures (empty when valid).
    """

    type: IdentifierType
    valid: bool
    errors: list[ErrorDetailDTO] = Field(default_factory=list)

    @classmethod
    def from_identifier(cls, identifier: SecurityIdentifier) -> ExplainCandidateDTO:
        return cls(
            type=identifier.type,
            valid=identifier.valid,
            errors=[ErrorDetailDTO.from_domain(d) for d in identifier.errors],
        )


class ExplainResultDTO(BaseDTO):
    """Per-family diagnostic view of an input.

    Attributes:
        input: Trimmed input string.
        candidates: One entry per family considered, in registration order
            (or the caller's type order when restricted).
    """

    input: str
    candidates: list[ExplainCandidateDTO]

    @property
    def valid_types(self) -> list[IdentifierType]:
        """Families under which the input is valid."""
        return [c.type for c in self.candidates if c.valid]


class IdentifierDTO(BaseDTO):
    """Serialized identifier.

    Attributes:
        type: Family tag.
        full_id: Cleaned body.
        normalized: Canonical form, ``None`` when invalid.
        valid: Validity flag.
        components: Parsed sub-fields of a valid identifier.
    """

    type: IdentifierType
    full_id: str
    normalized: str | None = None
    valid: bool
    components: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_identifier(cls, identifier: SecurityIdentifier) -> IdentifierDTO:
        return cls.model_validate(identifier.to_dict())


class MatchDTO(BaseDTO):
    """Serialized scanner match.

    Attributes:
        type: Family tag.
        raw: Substring as found in the text.
        value: Cleaned identifier.
        start: Start offset in the text.
        end: End offset (exclusive).
    """

    type: IdentifierType
    raw: str
    value: str
    start: int
    end: int

    @classmethod
    def from_match(cls, match: Match) -> MatchDTO:
        return cls.model_validate(match.to_dict())
