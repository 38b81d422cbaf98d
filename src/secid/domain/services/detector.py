# src/secid/domain/services/detector.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Identifier family detection.

Purpose:
    Decide which registered families a raw string validates under, ordered
    most specific first.

Layer:
    domain

Notes:
    A cheap pre-filter narrows the candidate families before any full
    validation runs:

    1. Inputs containing ``/`` can only be families whose alphabet accepts a
       slash; inputs containing ``*``, ``@`` or ``#`` only families accepting
       those characters.
    2. The input is cleaned per family and must have a complete length for
       that family and fit its character class.

    Survivors are validated in full and ranked by the registry's specificity
    table. Results are never cached across calls.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

from secid.domain.entities.base import SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType

if TYPE_CHECKING:
    from secid.domain.services.identifier_registry import FamilyClass, IdentifierRegistry

_SPECIAL_CHARS_RE: Final[re.Pattern[str]] = re.compile(r"[*@#]")


def is_plausible(family: FamilyClass, text: str) -> bool:
    """True if ``text`` has a complete length and fitting alphabet for ``family``.

    Args:
        family: Candidate family.
        text: Raw (uncleaned) candidate string.
    """
    meta = family.metadata
    cleaned = meta.clean(text)
    return len(cleaned) in meta.full_lengths and bool(meta.chars.fullmatch(cleaned))


class Detector:
    """Rank the families a string validates under.

    Args:
        registry: Registry supplying the family list and specificity order.
    """

    def __init__(self, registry: IdentifierRegistry) -> None:
        self._registry = registry
        self._families = registry.families
        self._slash_families = frozenset(f for f in self._families if f.metadata.accepts_char("/"))
        self._special_families = frozenset(
            f for f in self._families if f.metadata.accepts_char("*")
        )

    @property
    def families(self) -> tuple[FamilyClass, ...]:
        """Families this detector evaluates, in registration order."""
        return self._families

    def detect(
        self, raw: object, families: Sequence[FamilyClass] | None = None
    ) -> tuple[IdentifierType, ...]:
        """Return the tags of every family ``raw`` validates under.

        Args:
            raw: Candidate string (``None`` and blanks yield no match).
            families: Optional restriction of the families to consider.

        Returns:
            tuple[IdentifierType, ...]: Matching tags, most specific first.
        """
        return tuple(m.metadata.type for m in self.candidates(raw, families))

    def candidates(
        self, raw: object, families: Sequence[FamilyClass] | None = None
    ) -> list[SecurityIdentifier]:
        """Return valid instances for every matching family, most specific first."""
        text = "" if raw is None else str(raw).strip()
        if not text:
            return []

        matches: list[SecurityIdentifier] = []
        for family in self._prefilter(text, self._families if families is None else families):
            if not is_plausible(family, text):
                continue
            instance = family(text)
            if instance.valid:
                matches.append(instance)
        matches.sort(key=lambda m: self._registry.specificity_rank(type(m)))
        return matches

    def _prefilter(
        self, text: str, families: Sequence[FamilyClass]
    ) -> Sequence[FamilyClass]:
        if "/" in text:
            return [f for f in families if f in self._slash_families]
        if _SPECIAL_CHARS_RE.search(text):
            return [f for f in families if f in self._special_families]
        return families
