# src/secid/domain/entities/iban_country_rules.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Country-specific BBAN rules for IBAN validation.

Purpose:
    Static registry of Basic Bank Account Number (BBAN) layouts. EU/EEA
    countries (plus a few neighbours) carry a full structural rule with
    component positions; other IBAN countries are validated on BBAN length
    only.

Layer:
    domain

Notes:
    Component positions are ``(start, length)`` offsets into the BBAN.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final


@dataclass(frozen=True)
class BbanRule:
    """Structural rule for one country's BBAN.

    Args:
        length: Exact BBAN length.
        pattern: Regex the whole BBAN must match.
        components: Named ``(start, length)`` slices of the BBAN.
    """

    length: int
    pattern: re.Pattern[str]
    components: Mapping[str, tuple[int, int]] = field(default_factory=dict)

    def matches(self, bban: str) -> bool:
        """True if ``bban`` has the expected length and layout."""
        return len(bban) == self.length and bool(self.pattern.fullmatch(bban))

    def extract(self, bban: str) -> dict[str, str]:
        """Slice the named components out of ``bban``."""
        return {name: bban[start : start + size] for name, (start, size) in self.components.items()}


def _rule(length: int, pattern: str, **components: tuple[int, int]) -> BbanRule:
    return BbanRule(length=length, pattern=re.compile(pattern), components=components)


_FRANCE: Final[BbanRule] = _rule(
    23,
    r"\d{10}[A-Z0-9]{11}\d{2}",
    bank_code=(0, 5),
    branch_code=(5, 5),
    account_number=(10, 11),
    national_check=(21, 2),
)
_ITALY: Final[BbanRule] = _rule(
    23,
    r"[A-Z]\d{10}[A-Z0-9]{12}",
    national_check=(0, 1),
    bank_code=(1, 5),
    branch_code=(6, 5),
    account_number=(11, 12),
)

COUNTRY_RULES: Final[dict[str, BbanRule]] = {
    "AT": _rule(16, r"\d{16}", bank_code=(0, 5), account_number=(5, 11)),
    "BE": _rule(12, r"\d{12}", bank_code=(0, 3), account_number=(3, 7), national_check=(10, 2)),
    "BG": _rule(
        18, r"[A-Z]{4}\d{14}", bank_code=(0, 4), branch_code=(4, 4), account_number=(10, 8)
    ),
    "HR": _rule(17, r"\d{17}", bank_code=(0, 7), account_number=(7, 10)),
    "CY": _rule(
        24, r"\d{8}[A-Z0-9]{16}", bank_code=(0, 3), branch_code=(3, 5), account_number=(8, 16)
    ),
    "CZ": _rule(20, r"\d{20}", bank_code=(0, 4), account_number=(4, 16)),
    "DK": _rule(14, r"\d{14}", bank_code=(0, 4), account_number=(4, 10)),
    "EE": _rule(16, r"\d{16}", bank_code=(0, 2), account_number=(2, 14)),
    "FI": _rule(14, r"\d{14}", bank_code=(0, 3), account_number=(3, 11)),
    "FR": _FRANCE,
    "DE": _rule(18, r"\d{18}", bank_code=(0, 8), account_number=(8, 10)),
    "GR": _rule(23, r"\d{23}", bank_code=(0, 3), branch_code=(3, 4), account_number=(7, 16)),
    "HU": _rule(
        24,
        r"\d{24}",
        bank_code=(0, 3),
        branch_code=(3, 4),
        account_number=(7, 16),
        national_check=(23, 1),
    ),
    "IS": _rule(22, r"\d{22}", bank_code=(0, 4), branch_code=(4, 2), account_number=(6, 6)),
    "IE": _rule(
        18, r"[A-Z]{4}\d{14}", bank_code=(0, 4), branch_code=(4, 6), account_number=(10, 8)
    ),
    "IT": _ITALY,
    "LV": _rule(17, r"[A-Z]{4}[A-Z0-9]{13}", bank_code=(0, 4), account_number=(4, 13)),
    "LI": _rule(17, r"\d{5}[A-Z0-9]{12}", bank_code=(0, 5), account_number=(5, 12)),
    "LT": _rule(16, r"\d{16}", bank_code=(0, 5), account_number=(5, 11)),
    "LU": _rule(16, r"\d{3}[A-Z0-9]{13}", bank_code=(0, 3), account_number=(3, 13)),
    "MT": _rule(
        27,
        r"[A-Z]{4}\d{5}[A-Z0-9]{18}",
        bank_code=(0, 4),
        branch_code=(4, 5),
        account_number=(9, 18),
    ),
    "MC": _FRANCE,
    "NL": _rule(14, r"[A-Z]{4}\d{10}", bank_code=(0, 4), account_number=(4, 10)),
    "NO": _rule(11, r"\d{11}", bank_code=(0, 4), account_number=(4, 6), national_check=(10, 1)),
    "PL": _rule(
        24,
        r"\d{24}",
        bank_code=(0, 3),
        branch_code=(3, 4),
        national_check=(7, 1),
        account_number=(8, 16),
    ),
    "PT": _rule(
        21,
        r"\d{21}",
        bank_code=(0, 4),
        branch_code=(4, 4),
        account_number=(8, 11),
        national_check=(19, 2),
    ),
    "RO": _rule(20, r"[A-Z]{4}[A-Z0-9]{16}", bank_code=(0, 4), account_number=(4, 16)),
    "SM": _ITALY,
    "SK": _rule(20, r"\d{20}", bank_code=(0, 4), account_number=(4, 16)),
    "SI": _rule(15, r"\d{15}", bank_code=(0, 5), account_number=(5, 8), national_check=(13, 2)),
    "ES": _rule(
        20,
        r"\d{20}",
        bank_code=(0, 4),
        branch_code=(4, 4),
        national_check=(8, 2),
        account_number=(10, 10),
    ),
    "SE": _rule(20, r"\d{20}", bank_code=(0, 3), account_number=(3, 17)),
    "CH": _rule(17, r"\d{5}[A-Z0-9]{12}", bank_code=(0, 5), account_number=(5, 12)),
    "GB": _rule(
        18, r"[A-Z]{4}\d{14}", bank_code=(0, 4), branch_code=(4, 6), account_number=(10, 8)
    ),
}

# BBAN lengths for countries validated on length only.
LENGTH_ONLY_COUNTRIES: Final[dict[str, int]] = {
    "AD": 20,
    "AE": 19,
    "AL": 24,
    "AZ": 24,
    "BA": 16,
    "BY": 24,
    "DO": 24,
    "EG": 25,
    "GE": 18,
    "GI": 19,
    "GT": 24,
    "IL": 19,
    "IQ": 19,
    "JO": 26,
    "KW": 26,
    "KZ": 16,
    "LB": 24,
    "LC": 28,
    "MD": 20,
    "ME": 18,
    "MK": 15,
    "MR": 23,
    "MU": 26,
    "PS": 25,
    "QA": 25,
    "RS": 18,
    "SA": 20,
    "SC": 27,
    "ST": 21,
    "SV": 24,
    "TL": 19,
    "TN": 20,
    "TR": 22,
    "UA": 25,
    "VA": 18,
    "VG": 20,
    "XK": 16,
}


def expected_bban_length(country_code: str | None) -> int | None:
    """Return the BBAN length registered for a country, if any."""
    if country_code is None:
        return None
    rule = COUNTRY_RULES.get(country_code)
    if rule is not None:
        return rule.length
    return LENGTH_ONLY_COUNTRIES.get(country_code)


def supported_countries() -> tuple[str, ...]:
    """Sorted country codes with a structural or length-only rule."""
    return tuple(sorted({*COUNTRY_RULES, *LENGTH_ONLY_COUNTRIES}))
