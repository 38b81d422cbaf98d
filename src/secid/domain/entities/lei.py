# src/secid/domain/entities/lei.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Legal Entity Identifier entity (ISO 17442).

Purpose:
    Represent a 20-character LEI: a four-character LOU prefix, two reserved
    characters, a twelve-character entity part and two ISO 7064 mod 97-10
    check digits.

Layer:
    domain
"""

from __future__ import annotations

import re
from typing import Any

from secid.domain.entities.base import CheckDigitIdentifier, FamilyMetadata
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.services import check_digits


class LEI(CheckDigitIdentifier):
    """Legal Entity Identifier."""

    metadata = FamilyMetadata(
        type=IdentifierType.LEI,
        short_name="LEI",
        full_name="Legal Entity Identifier",
        id_length=20,
        chars=re.compile(r"[A-Z0-9]+"),
        example="7LTWFZYICNSX8D621K86",
        check_digit_width=2,
    )
    ID_PATTERN = re.compile(
        r"(?P<identifier>(?P<lou_id>[0-9A-Z]{4})(?P<reserved>[0-9A-Z]{2})"
        r"(?P<entity_id>[0-9A-Z]{12}))(?P<check_digit>\d{2})?"
    )

    @property
    def lou_id(self) -> str | None:
        """Local Operating Unit prefix."""
        return self._parts.get("lou_id")

    @property
    def reserved(self) -> str | None:
        """Two reserved characters."""
        return self._parts.get("reserved")

    @property
    def entity_id(self) -> str | None:
        """Entity-specific part."""
        return self._parts.get("entity_id")

    def _components(self) -> dict[str, Any]:
        return {"lou_id": self.lou_id, "reserved": self.reserved, "entity_id": self.entity_id}

    def _compute_check_digit(self) -> int:
        return check_digits.compute_lei(self.identifier or "")

    def _check_digit_verifies(self) -> bool:
        return check_digits.verify_lei(self.full_id)
