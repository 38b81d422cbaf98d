# src/secid/domain/entities/iban.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""International Bank Account Number entity (ISO 13616).

Purpose:
    Represent an IBAN: a two-letter country code, two mod 97 check digits in
    positions three and four, and a country-specific BBAN.

Layer:
    domain

Notes:
    - Unlike the other families the check digits are not trailing, so the
      body is split here rather than by the layout regex alone.
    - Input without check digits is accepted when the remaining length equals
      the registered BBAN length, so that check digits can be restored.
    - Countries without a registered rule are accepted on the mod 97 check
      alone.
"""

from __future__ import annotations

import re
from typing import Any

from secid.domain.entities.base import CheckDigitIdentifier, FamilyMetadata
from secid.domain.entities.iban_country_rules import (
    COUNTRY_RULES,
    LENGTH_ONLY_COUNTRIES,
    BbanRule,
    expected_bban_length,
    supported_countries,
)
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.enums.validation import ErrorCode
from secid.domain.services import check_digits
from secid.domain.value_objects.validation import ErrorDetail


class IBAN(CheckDigitIdentifier):
    """International Bank Account Number."""

    metadata = FamilyMetadata(
        type=IdentifierType.IBAN,
        short_name="IBAN",
        full_name="International Bank Account Number",
        id_length=(15, 34),
        chars=re.compile(r"[A-Z0-9]+"),
        example="GB29NWBK60161331926819",
        check_digit_width=2,
    )
    ID_PATTERN = re.compile(r"(?P<country_code>[A-Z]{2})(?P<rest>[A-Z0-9]{13,32})")

    @staticmethod
    def supported_countries() -> tuple[str, ...]:
        """Sorted country codes with a registered BBAN rule."""
        return supported_countries()

    @property
    def country_code(self) -> str | None:
        """ISO 3166-1 alpha-2 country code."""
        return self._parts.get("country_code")

    @property
    def bban(self) -> str | None:
        """Basic Bank Account Number."""
        return self._parts.get("bban")

    @property
    def bank_code(self) -> str | None:
        """Bank code, when the country rule defines one."""
        return self._bban_component("bank_code")

    @property
    def branch_code(self) -> str | None:
        """Branch (sort) code, when the country rule defines one."""
        return self._bban_component("branch_code")

    @property
    def account_number(self) -> str | None:
        """Account number, when the country rule defines one."""
        return self._bban_component("account_number")

    @property
    def national_check(self) -> str | None:
        """National check digits, when the country rule defines them."""
        return self._bban_component("national_check")

    @property
    def country_rule(self) -> BbanRule | None:
        """Structural BBAN rule for the country, if registered."""
        if self.country_code is None:
            return None
        return COUNTRY_RULES.get(self.country_code)

    @property
    def known_country(self) -> bool:
        """True when the country has a structural or length-only rule."""
        return self.country_code in COUNTRY_RULES or self.country_code in LENGTH_ONLY_COUNTRIES

    @property
    def valid_bban_format(self) -> bool:
        """True when the BBAN satisfies the country rule (or no rule exists)."""
        bban = self.bban
        if bban is None:
            return False
        rule = self.country_rule
        if rule is not None:
            return rule.matches(bban)
        expected = LENGTH_ONLY_COUNTRIES.get(self.country_code or "")
        return expected is None or len(bban) == expected

    def _parse(self, full_id: str) -> dict[str, str]:
        parts = super()._parse(full_id)
        if not parts:
            return {}
        country = parts["country_code"]
        rest = parts["rest"]
        expected = expected_bban_length(country)
        # Positions 3-4 are check digits unless the remainder is exactly a BBAN.
        has_check = rest[:2].isdigit() and (
            expected is None or len(rest) == expected + 2 or len(rest) != expected
        )
        if has_check:
            parsed = {"country_code": country, "check_digit": rest[:2], "bban": rest[2:]}
        else:
            parsed = {"country_code": country, "bban": rest}
        parsed["identifier"] = country + parsed["bban"]
        return parsed

    def _bban_component(self, name: str) -> str | None:
        rule = self.country_rule
        bban = self.bban
        if rule is None or bban is None or not self.valid_bban_format:
            return None
        return rule.extract(bban).get(name)

    def _structure_error(self) -> ErrorDetail | None:
        if self.valid_bban_format:
            return None
        return self._error(
            ErrorCode.INVALID_BBAN,
            f"BBAN format is invalid for country '{self.country_code}'",
        )

    def _compose(self, check: str) -> str:
        return f"{self.country_code}{check}{self.bban}"

    def _components(self) -> dict[str, Any]:
        parts: dict[str, Any] = {"country_code": self.country_code, "bban": self.bban}
        rule = self.country_rule
        if rule is not None and self.bban is not None:
            parts.update(rule.extract(self.bban))
        return parts

    def _pretty(self) -> str:
        canonical = self._canonical()
        return " ".join(canonical[i : i + 4] for i in range(0, len(canonical), 4))

    def _compute_check_digit(self) -> int:
        return check_digits.compute_iban(self.country_code or "", self.bban or "")

    def _check_digit_verifies(self) -> bool:
        return check_digits.verify_iban(self.full_id)
