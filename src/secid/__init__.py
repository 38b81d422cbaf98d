# src/secid/__init__.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""secid: securities identifier validation, detection and extraction.

Typical usage:
    import secid

    secid.detect("514000")                  # (wkn, valoren, cik)
    secid.parse("US5949181045").country_code  # "US"
    secid.extract("Buy US5949181045 now")   # [Match(type=isin, ...)]

The module-level functions delegate to a lazily built default
:class:`~secid.application.services.identifier_service.IdentifierService`
over the thirteen built-in families. Its default ambiguity policy comes from
``SECID_DEFAULT_ON_AMBIGUOUS``.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache

from secid.application.schemas.dto.identifiers import ExplainResultDTO
from secid.application.services.identifier_service import (
    IdentifierService,
    ParseResult,
    TypesArg,
)
from secid.config.settings import get_settings
from secid.domain.entities import (
    CEI,
    CFI,
    CIK,
    CUSIP,
    FIGI,
    FISN,
    IBAN,
    ISIN,
    LEI,
    OCC,
    SEDOL,
    WKN,
    CheckDigitIdentifier,
    SecurityIdentifier,
    Valoren,
)
from secid.domain.enums import ErrorCode, IdentifierType, OnAmbiguous
from secid.domain.exceptions import (
    AmbiguousMatchError,
    InvalidCheckDigitError,
    InvalidFormatError,
    InvalidStructureError,
    SecIdError,
    UnknownIdentifierTypeError,
)
from secid.domain.services.identifier_registry import FamilyClass, TypeKey
from secid.domain.value_objects.match import Match

__all__ = [
    "CEI",
    "CFI",
    "CIK",
    "CUSIP",
    "FIGI",
    "FISN",
    "IBAN",
    "ISIN",
    "LEI",
    "OCC",
    "SEDOL",
    "WKN",
    "AmbiguousMatchError",
    "CheckDigitIdentifier",
    "ErrorCode",
    "IdentifierService",
    "IdentifierType",
    "InvalidCheckDigitError",
    "InvalidFormatError",
    "InvalidStructureError",
    "Match",
    "OnAmbiguous",
    "SecIdError",
    "SecurityIdentifier",
    "UnknownIdentifierTypeError",
    "Valoren",
    "default_service",
    "detect",
    "explain",
    "extract",
    "get_type",
    "identifiers",
    "is_valid",
    "parse",
    "parse_strict",
    "scan",
]

__version__ = "0.1.0"


@lru_cache(maxsize=1)
def default_service() -> IdentifierService:
    """Return the process-wide service over the built-in families."""
    return IdentifierService(default_on_ambiguous=get_settings().default_on_ambiguous)


def detect(raw: object, types: TypesArg = None) -> tuple[IdentifierType, ...]:
    """Families ``raw`` validates under, most specific first."""
    return default_service().detect(raw, types)


def is_valid(raw: object, types: TypesArg = None) -> bool:
    """True if ``raw`` validates under any (allowed) family."""
    return default_service().is_valid(raw, types)


def parse(
    raw: object,
    types: TypesArg = None,
    *,
    on_ambiguous: OnAmbiguous | str | None = None,
) -> ParseResult:
    """Parse ``raw``; see :meth:`IdentifierService.parse`."""
    return default_service().parse(raw, types, on_ambiguous=on_ambiguous)


def parse_strict(
    raw: object,
    types: TypesArg = None,
    *,
    on_ambiguous: OnAmbiguous | str | None = None,
) -> SecurityIdentifier | list[SecurityIdentifier]:
    """Parse ``raw`` or raise; see :meth:`IdentifierService.parse_strict`."""
    return default_service().parse_strict(raw, types, on_ambiguous=on_ambiguous)


def scan(text: str | None, types: TypesArg = None) -> Iterator[Match]:
    """Lazily yield identifier matches found in ``text``."""
    return default_service().scan(text, types)


def extract(text: str | None, types: TypesArg = None) -> list[Match]:
    """Every identifier match found in ``text``."""
    return default_service().extract(text, types)


def explain(raw: object, types: TypesArg = None) -> ExplainResultDTO:
    """Per-family validity and errors for ``raw``."""
    return default_service().explain(raw, types)


def get_type(key: TypeKey) -> FamilyClass:
    """Family class registered under ``key``."""
    return default_service().get_type(key)


def identifiers() -> tuple[FamilyClass, ...]:
    """Built-in families in registration order."""
    return default_service().identifiers()
