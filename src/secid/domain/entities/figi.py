# src/secid/domain/entities/figi.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Financial Instrument Global Identifier entity.

Purpose:
    Represent a 12-character FIGI: a two-character prefix, the literal ``G``,
    eight random characters and an index-doubling Luhn check digit.

Layer:
    domain

Notes:
    Prefixes that collide with ISIN country codes (BS, BM, GG, GB, GH, KY, VG)
    are reserved and reported as ``invalid_prefix``.
    Vowels pass the character stage and are rejected by the layout.
"""

from __future__ import annotations

import re
from typing import Any, Final

from secid.domain.entities.base import CheckDigitIdentifier, FamilyMetadata
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.enums.validation import ErrorCode
from secid.domain.services import check_digits
from secid.domain.value_objects.validation import ErrorDetail

RESTRICTED_PREFIXES: Final[frozenset[str]] = frozenset({"BS", "BM", "GG", "GB", "GH", "KY", "VG"})

_CONSONANT_OR_DIGIT: Final[str] = "[B-DF-HJ-NP-TV-Z0-9]"


class FIGI(CheckDigitIdentifier):
    """Financial Instrument Global Identifier."""

    metadata = FamilyMetadata(
        type=IdentifierType.FIGI,
        short_name="FIGI",
        full_name="Financial Instrument Global Identifier",
        id_length=12,
        chars=re.compile(r"[A-Z0-9]+"),
        example="BBG000BLNNH6",
        check_digit_width=1,
    )
    ID_PATTERN = re.compile(
        f"(?P<identifier>(?P<prefix>{_CONSONANT_OR_DIGIT}{{2}})G"
        f"(?P<random_part>{_CONSONANT_OR_DIGIT}{{8}}))(?P<check_digit>\\d)?"
    )

    @property
    def prefix(self) -> str | None:
        """Two-character prefix."""
        return self._parts.get("prefix")

    @property
    def random_part(self) -> str | None:
        """Eight characters following the ``G``."""
        return self._parts.get("random_part")

    def _structure_error(self) -> ErrorDetail | None:
        if self.prefix in RESTRICTED_PREFIXES:
            return self._error(
                ErrorCode.INVALID_PREFIX,
                f"Prefix '{self.prefix}' is restricted for FIGI",
            )
        return None

    def _components(self) -> dict[str, Any]:
        return {"prefix": self.prefix, "random_part": self.random_part}

    def _compute_check_digit(self) -> int:
        return check_digits.compute_figi(self.identifier or "")

    def _check_digit_verifies(self) -> bool:
        return check_digits.verify_figi(self.full_id)
