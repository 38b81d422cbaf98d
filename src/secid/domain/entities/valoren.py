# src/secid/domain/entities/valoren.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Valoren (Swiss security number) entity.

Purpose:
    Represent a Valoren: five to nine digits, not starting the significant
    part with zero. The canonical form is zero-padded to nine digits, which is
    also the NSIN used by Swiss and Liechtenstein ISINs.

Layer:
    domain
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from secid.domain.entities.base import FamilyMetadata, SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.exceptions.identifiers import InvalidFormatError

if TYPE_CHECKING:
    from secid.domain.entities.isin import ISIN

VALOREN_WIDTH: Final[int] = 9
ISIN_COUNTRY_CODES: Final[frozenset[str]] = frozenset({"CH", "LI"})


class Valoren(SecurityIdentifier):
    """Swiss Valoren number."""

    metadata = FamilyMetadata(
        type=IdentifierType.VALOREN,
        short_name="Valoren",
        full_name="Valoren Number",
        id_length=(5, VALOREN_WIDTH),
        chars=re.compile(r"[0-9]+"),
        example="3886335",
        has_normalization=True,
    )
    ID_PATTERN = re.compile(r"(?P<padding>0*)(?P<identifier>[1-9]\d{4,8})")

    @property
    def padding(self) -> str | None:
        """Leading zeros carried by the input."""
        return self._parts.get("padding")

    def to_isin(self, country_code: str = "CH") -> ISIN:
        """Build the ISIN embedding this Valoren.

        Raises:
            InvalidFormatError: If the country is not CH or LI, or the Valoren
                is invalid.
        """
        from secid.domain.entities.isin import ISIN

        country = country_code.upper()
        if country not in ISIN_COUNTRY_CODES:
            raise InvalidFormatError(
                f"'{country_code}' is not a valid Valoren country code",
                details={"valoren": self.full_id},
            )
        return ISIN(country + self.normalized()).restored()

    def _canonical(self) -> str:
        return (self.identifier or "").rjust(VALOREN_WIDTH, "0")

    def _pretty(self) -> str:
        return f"{int(self.identifier or 0):,}".replace(",", " ")

    def __str__(self) -> str:
        return self.full_id
