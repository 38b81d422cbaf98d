# src/secid/domain/entities/cei.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""CUSIP Entity Identifier entity.

Purpose:
    Represent a 10-character CEI used for syndicated-loan market entities: a
    letter, a digit, seven alphanumerics and a CUSIP-style check digit.

Layer:
    domain
"""

from __future__ import annotations

import re
from typing import Any

from secid.domain.entities.base import CheckDigitIdentifier, FamilyMetadata
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.services import check_digits


class CEI(CheckDigitIdentifier):
    """CUSIP Entity Identifier."""

    metadata = FamilyMetadata(
        type=IdentifierType.CEI,
        short_name="CEI",
        full_name="CUSIP Entity Identifier",
        id_length=10,
        chars=re.compile(r"[A-Z0-9]+"),
        example="A0BCDEFGH1",
        check_digit_width=1,
    )
    ID_PATTERN = re.compile(
        r"(?P<identifier>(?P<prefix>[A-Z])(?P<numeric>[0-9])(?P<entity_id>[A-Z0-9]{7}))"
        r"(?P<check_digit>\d)?"
    )

    @property
    def prefix(self) -> str | None:
        """Leading letter."""
        return self._parts.get("prefix")

    @property
    def numeric(self) -> str | None:
        """Second character (a digit)."""
        return self._parts.get("numeric")

    @property
    def entity_id(self) -> str | None:
        """Seven-character entity part."""
        return self._parts.get("entity_id")

    def _components(self) -> dict[str, Any]:
        return {"prefix": self.prefix, "numeric": self.numeric, "entity_id": self.entity_id}

    def _compute_check_digit(self) -> int:
        return check_digits.compute_cei(self.identifier or "")

    def _check_digit_verifies(self) -> bool:
        return check_digits.verify_cei(self.full_id)
