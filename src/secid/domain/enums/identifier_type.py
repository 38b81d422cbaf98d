# src/secid/domain/enums/identifier_type.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Identifier family enumeration.

Purpose:
    Provide the closed set of identifier families understood by secid. Every
    family key accepted by the public API resolves to exactly one member.

Layer:
    domain

Notes:
    - Member order is the registration order of the default registry.
    - Values are the lowercase keys used by callers (``"isin"``, ``"cusip"``).
"""

from __future__ import annotations

from enum import Enum


class IdentifierType(str, Enum):
    """Supported security and entity identifier families."""

    ISIN = "isin"
    CUSIP = "cusip"
    SEDOL = "sedol"
    FIGI = "figi"
    LEI = "lei"
    IBAN = "iban"
    CIK = "cik"
    OCC = "occ"
    WKN = "wkn"
    VALOREN = "valoren"
    CEI = "cei"
    CFI = "cfi"
    FISN = "fisn"

    def __str__(self) -> str:
        return self.value
