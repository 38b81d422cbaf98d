# src/secid/domain/entities/cusip.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""CUSIP identifier entity.

Purpose:
    Represent a 9-character CUSIP: a six-character issuer code, a
    two-character issue number and a "double add double" check digit.

Layer:
    domain
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from secid.domain.entities.base import CheckDigitIdentifier, FamilyMetadata
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.exceptions.identifiers import InvalidFormatError
from secid.domain.services import check_digits

if TYPE_CHECKING:
    from secid.domain.entities.isin import ISIN


class CUSIP(CheckDigitIdentifier):
    """Committee on Uniform Securities Identification Procedures number."""

    metadata = FamilyMetadata(
        type=IdentifierType.CUSIP,
        short_name="CUSIP",
        full_name="Committee on Uniform Securities Identification Procedures",
        id_length=9,
        chars=re.compile(r"[A-Z0-9*@#]+"),
        example="037833100",
        check_digit_width=1,
    )
    ID_PATTERN = re.compile(
        r"(?P<identifier>(?P<cusip6>[A-Z0-9]{5}[A-Z0-9*@#])(?P<issue>[A-Z0-9*@#]{2}))"
        r"(?P<check_digit>\d)?"
    )

    @property
    def cusip6(self) -> str | None:
        """Six-character issuer code."""
        return self._parts.get("cusip6")

    @property
    def issue(self) -> str | None:
        """Two-character issue number."""
        return self._parts.get("issue")

    @property
    def cins(self) -> bool:
        """True for CUSIP International Numbering System codes (leading letter)."""
        cusip6 = self.cusip6
        return cusip6 is not None and not cusip6[0].isdigit()

    def to_isin(self, country_code: str = "US") -> ISIN:
        """Build the ISIN for this CUSIP in a CGS country.

        Args:
            country_code: CUSIP Global Services country code.

        Returns:
            ISIN: ISIN with a computed check digit.

        Raises:
            InvalidFormatError: If the country is not a CGS country or the
                CUSIP body is malformed.
        """
        from secid.domain.entities.isin import CGS_COUNTRY_CODES, ISIN

        country = country_code.upper()
        if country not in CGS_COUNTRY_CODES:
            raise InvalidFormatError(
                f"'{country_code}' is not a CGS country code",
                details={"cusip": self.full_id},
            )
        return ISIN(country + self.restore()).restored()

    def _components(self) -> dict[str, Any]:
        return {"cusip6": self.cusip6, "issue": self.issue}

    def _compute_check_digit(self) -> int:
        return check_digits.compute_cusip(self.identifier or "")

    def _check_digit_verifies(self) -> bool:
        return check_digits.verify_cusip(self.full_id)
