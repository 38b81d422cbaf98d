# src/secid/domain/entities/isin.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""International Securities Identification Number (ISO 6166).

Purpose:
    Represent a 12-character ISIN: a two-letter country code, a nine-character
    national security identifier (NSIN) and a Luhn check digit computed over
    the letter-expanded body.

Layer:
    domain

Notes:
    NSIN conversions are only defined where the national scheme is embedded
    verbatim in the ISIN (CUSIP for CGS countries, SEDOL for GB/IE, WKN for DE,
    Valoren for CH/LI).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

from secid.domain.entities.base import CheckDigitIdentifier, FamilyMetadata
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.exceptions.identifiers import InvalidFormatError
from secid.domain.services import check_digits

if TYPE_CHECKING:
    from secid.domain.entities.cusip import CUSIP
    from secid.domain.entities.sedol import SEDOL
    from secid.domain.entities.valoren import Valoren
    from secid.domain.entities.wkn import WKN

# Countries whose national numbers are allocated by CUSIP Global Services.
CGS_COUNTRY_CODES: Final[frozenset[str]] = frozenset(
    {
        "US", "CA", "KY", "BM", "VI", "VG", "UM", "TT", "SR", "GS", "SX", "VC",
        "MF", "LC", "KN", "BL", "PR", "PH", "PW", "MP", "FM", "YT", "MH", "HT",
        "GY", "GU", "GD", "DM", "CW", "BQ", "BZ", "BS", "AW", "AG", "AI", "AS",
        "AN",
    }
)  # fmt: skip

SEDOL_COUNTRY_CODES: Final[frozenset[str]] = frozenset({"GB", "IE", "IM", "JE", "GG"})
WKN_COUNTRY_CODES: Final[frozenset[str]] = frozenset({"DE"})
VALOREN_COUNTRY_CODES: Final[frozenset[str]] = frozenset({"CH", "LI"})


class ISIN(CheckDigitIdentifier):
    """International Securities Identification Number."""

    metadata = FamilyMetadata(
        type=IdentifierType.ISIN,
        short_name="ISIN",
        full_name="International Securities Identification Number",
        id_length=12,
        chars=re.compile(r"[A-Z0-9]+"),
        example="US5949181045",
        check_digit_width=1,
    )
    ID_PATTERN = re.compile(
        r"(?P<identifier>(?P<country_code>[A-Z]{2})(?P<nsin>[A-Z0-9]{9}))(?P<check_digit>\d)?"
    )

    @property
    def country_code(self) -> str | None:
        """ISO 3166-1 alpha-2 country code."""
        return self._parts.get("country_code")

    @property
    def nsin(self) -> str | None:
        """National Securities Identifying Number (9 characters)."""
        return self._parts.get("nsin")

    @property
    def cgs(self) -> bool:
        """True when the country is served by CUSIP Global Services."""
        return self.country_code in CGS_COUNTRY_CODES

    def to_cusip(self) -> CUSIP:
        """Return the CUSIP embedded in a CGS-country ISIN.

        Raises:
            InvalidFormatError: If the ISIN is invalid or not a CGS ISIN.
        """
        from secid.domain.entities.cusip import CUSIP

        return CUSIP(self._nsin_for(CGS_COUNTRY_CODES, "CGS"))

    def to_sedol(self) -> SEDOL:
        """Return the SEDOL embedded in a GB/IE/IM/JE/GG ISIN."""
        from secid.domain.entities.sedol import SEDOL

        return SEDOL(self._nsin_for(SEDOL_COUNTRY_CODES, "SEDOL")[2:])

    def to_wkn(self) -> WKN:
        """Return the WKN embedded in a German ISIN."""
        from secid.domain.entities.wkn import WKN

        return WKN(self._nsin_for(WKN_COUNTRY_CODES, "WKN")[3:])

    def to_valoren(self) -> Valoren:
        """Return the Valoren embedded in a Swiss or Liechtenstein ISIN."""
        from secid.domain.entities.valoren import Valoren

        return Valoren(self._nsin_for(VALOREN_COUNTRY_CODES, "Valoren"))

    def _nsin_for(self, countries: frozenset[str], scheme: str) -> str:
        self.validate()
        if self.country_code not in countries:
            raise InvalidFormatError(
                f"'{self.country_code}' is not a {scheme} country code",
                details={"isin": self.full_id, "scheme": scheme},
            )
        return self.nsin or ""

    def _components(self) -> dict[str, Any]:
        return {"country_code": self.country_code, "nsin": self.nsin}

    def _compute_check_digit(self) -> int:
        return check_digits.compute_isin(self.identifier or "")

    def _check_digit_verifies(self) -> bool:
        return check_digits.verify_isin(self.full_id)
