# src/secid/domain/entities/wkn.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Wertpapierkennnummer entity.

Purpose:
    Represent a German WKN: six digits or letters, excluding ``I`` and ``O``
    to avoid confusion with ``1`` and ``0``. There is no check digit.

Layer:
    domain
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from secid.domain.entities.base import FamilyMetadata, SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.exceptions.identifiers import InvalidFormatError

if TYPE_CHECKING:
    from secid.domain.entities.isin import ISIN


class WKN(SecurityIdentifier):
    """German securities identification code."""

    metadata = FamilyMetadata(
        type=IdentifierType.WKN,
        short_name="WKN",
        full_name="Wertpapierkennnummer",
        id_length=6,
        chars=re.compile(r"[0-9A-HJ-NP-Z]+"),
        example="514000",
    )
    ID_PATTERN = re.compile(r"(?P<identifier>[0-9A-HJ-NP-Z]{6})")

    def to_isin(self, country_code: str = "DE") -> ISIN:
        """Build the German ISIN embedding this WKN (``DE000`` + WKN + check).

        Raises:
            InvalidFormatError: If the country is not DE or the WKN is invalid.
        """
        from secid.domain.entities.isin import ISIN, WKN_COUNTRY_CODES

        country = country_code.upper()
        if country not in WKN_COUNTRY_CODES:
            raise InvalidFormatError(
                f"'{country_code}' is not a valid WKN country code",
                details={"wkn": self.full_id},
            )
        return ISIN(f"{country}000{self.normalized()}").restored()
