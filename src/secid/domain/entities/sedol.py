# src/secid/domain/entities/sedol.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""SEDOL identifier entity.

Purpose:
    Represent a 7-character Stock Exchange Daily Official List code: a
    six-character body drawn from digits and consonants, plus a weighted
    mod 10 check digit.

Layer:
    domain

Notes:
    Vowels are excluded by the layout, so a vowel is an ``invalid_format``
    failure rather than an ``invalid_characters`` one.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from secid.domain.entities.base import CheckDigitIdentifier, FamilyMetadata
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.exceptions.identifiers import InvalidFormatError
from secid.domain.services import check_digits

if TYPE_CHECKING:
    from secid.domain.entities.isin import ISIN


class SEDOL(CheckDigitIdentifier):
    """Stock Exchange Daily Official List code."""

    metadata = FamilyMetadata(
        type=IdentifierType.SEDOL,
        short_name="SEDOL",
        full_name="Stock Exchange Daily Official List",
        id_length=7,
        chars=re.compile(r"[A-Z0-9]+"),
        example="B0YBKJ7",
        check_digit_width=1,
    )
    ID_PATTERN = re.compile(r"(?P<identifier>[0-9BCDFGHJKLMNPQRSTVWXYZ]{6})(?P<check_digit>\d)?")

    def to_isin(self, country_code: str = "GB") -> ISIN:
        """Build the ISIN embedding this SEDOL (``GB`` + ``00`` + SEDOL + check).

        Raises:
            InvalidFormatError: If the country does not use SEDOL numbers or the
                SEDOL body is malformed.
        """
        from secid.domain.entities.isin import ISIN, SEDOL_COUNTRY_CODES

        country = country_code.upper()
        if country not in SEDOL_COUNTRY_CODES:
            raise InvalidFormatError(
                f"'{country_code}' is not a valid SEDOL country code",
                details={"sedol": self.full_id},
            )
        return ISIN(f"{country}00{self.restore()}").restored()

    def _compute_check_digit(self) -> int:
        return check_digits.compute_sedol(self.identifier or "")

    def _check_digit_verifies(self) -> bool:
        return check_digits.verify_sedol(self.full_id)
