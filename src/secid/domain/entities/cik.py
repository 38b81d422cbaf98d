# src/secid/domain/entities/cik.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Central Index Key entity.

Purpose:
    Represent an SEC Central Index Key: one to ten digits, not all zeros.
    The canonical form is zero-padded to ten digits.

Layer:
    domain
"""

from __future__ import annotations

import re

from secid.domain.entities.base import FamilyMetadata, SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType

CIK_WIDTH = 10


class CIK(SecurityIdentifier):
    """SEC Central Index Key."""

    metadata = FamilyMetadata(
        type=IdentifierType.CIK,
        short_name="CIK",
        full_name="Central Index Key",
        id_length=(1, CIK_WIDTH),
        chars=re.compile(r"[0-9]+"),
        example="0001521365",
        has_normalization=True,
    )
    ID_PATTERN = re.compile(r"(?P<padding>0*)(?P<identifier>[1-9]\d{0,9})")

    @property
    def padding(self) -> str | None:
        """Leading zeros carried by the input."""
        return self._parts.get("padding")

    def _canonical(self) -> str:
        return (self.identifier or "").rjust(CIK_WIDTH, "0")

    def __str__(self) -> str:
        return self.full_id
