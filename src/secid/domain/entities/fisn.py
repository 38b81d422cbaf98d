# src/secid/domain/entities/fisn.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Financial Instrument Short Name entity (ISO 18774).

Purpose:
    Represent a FISN: an issuer short name of up to 15 characters, a ``/``
    and an abbreviated instrument description of up to 19 characters.

Layer:
    domain
"""

from __future__ import annotations

import re
from typing import Any

from secid.domain.entities.base import FamilyMetadata, SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType


class FISN(SecurityIdentifier):
    """Financial Instrument Short Name."""

    metadata = FamilyMetadata(
        type=IdentifierType.FISN,
        short_name="FISN",
        full_name="Financial Instrument Short Name",
        id_length=(3, 35),
        chars=re.compile(r"[A-Z0-9 /]+"),
        example="APPLE INC/SH",
        separators="-",
    )
    ID_PATTERN = re.compile(
        r"(?P<identifier>(?P<issuer>[A-Z0-9 ]{1,15})/(?P<description>[A-Z0-9 ]{1,19}))"
    )

    @property
    def issuer(self) -> str | None:
        """Issuer short name (before the slash)."""
        return self._parts.get("issuer")

    @property
    def description(self) -> str | None:
        """Abbreviated instrument description (after the slash)."""
        return self._parts.get("description")

    def components(self) -> dict[str, Any]:
        if not self.valid:
            return {}
        return {"issuer": self.issuer, "description": self.description}
