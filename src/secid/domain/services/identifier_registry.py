# src/secid/domain/services/identifier_registry.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Identifier family registry.

Purpose:
    Own the ordered list of identifier families and the explicit specificity
    table used to rank families that validate the same input. The registry is
    the composition root handed to the detector, scanner and facade.

Layer:
    domain

Notes:
    - Registration is serialized by a lock. Every registration clears the
      cached detector and scanner under the same lock, so readers never see a
      stale family list.
    - ``SPECIFICITY_ORDER`` is a fixed constant covering every family:
      check-digit families first, narrower length before wider, then
      registration order.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import Final

from secid.domain.entities import (
    CEI,
    CFI,
    CIK,
    CUSIP,
    FIGI,
    FISN,
    IBAN,
    ISIN,
    LEI,
    OCC,
    SEDOL,
    WKN,
    SecurityIdentifier,
    Valoren,
)
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.exceptions.identifiers import UnknownIdentifierTypeError
from secid.domain.services.detector import Detector
from secid.domain.services.scanner import Scanner

FamilyClass = type[SecurityIdentifier]

DEFAULT_FAMILIES: Final[tuple[FamilyClass, ...]] = (
    ISIN,
    CUSIP,
    SEDOL,
    FIGI,
    LEI,
    IBAN,
    CIK,
    OCC,
    WKN,
    Valoren,
    CEI,
    CFI,
    FISN,
)

SPECIFICITY_ORDER: Final[tuple[IdentifierType, ...]] = (
    IdentifierType.ISIN,
    IdentifierType.CUSIP,
    IdentifierType.SEDOL,
    IdentifierType.FIGI,
    IdentifierType.LEI,
    IdentifierType.CEI,
    IdentifierType.IBAN,
    IdentifierType.WKN,
    IdentifierType.CFI,
    IdentifierType.VALOREN,
    IdentifierType.OCC,
    IdentifierType.CIK,
    IdentifierType.FISN,
)

TypeKey = IdentifierType | str


class IdentifierRegistry:
    """Ordered registry of identifier families.

    Args:
        families: Families to register, in registration order.
    """

    def __init__(self, families: Iterable[FamilyClass] = ()) -> None:
        self._lock = threading.Lock()
        self._families: dict[IdentifierType, FamilyClass] = {}
        self._detector: Detector | None = None
        self._scanner: Scanner | None = None
        for family in families:
            self.register(family)

    def register(self, family: FamilyClass) -> None:
        """Register (or replace) a family and invalidate cached services.

        Replacing a family keeps its original registration position.
        """
        with self._lock:
            self._families[family.metadata.type] = family
            self._detector = None
            self._scanner = None

    def get(self, key: TypeKey) -> FamilyClass:
        """Resolve a family key (``"isin"``, ``IdentifierType.ISIN``) to its class.

        Raises:
            UnknownIdentifierTypeError: If the key names no registered family.
        """
        try:
            return self._families[IdentifierType(str(key).lower())]
        except (ValueError, KeyError):
            known = ", ".join(t.value for t in self._families)
            raise UnknownIdentifierTypeError(
                f"Unknown identifier type: {key!r} (known types: {known})",
                details={"type": str(key)},
            ) from None

    def resolve(self, keys: Iterable[TypeKey] | None) -> tuple[FamilyClass, ...]:
        """Resolve an optional key list; ``None`` means every registered family.

        Raises:
            UnknownIdentifierTypeError: If any key is unknown.
        """
        if keys is None:
            return self.families
        if isinstance(keys, (str, IdentifierType)):
            keys = [keys]
        resolved: list[FamilyClass] = []
        for key in keys:
            family = self.get(key)
            if family not in resolved:
                resolved.append(family)
        return tuple(resolved)

    @property
    def families(self) -> tuple[FamilyClass, ...]:
        """Registered families in registration order."""
        return tuple(self._families.values())

    @property
    def types(self) -> tuple[IdentifierType, ...]:
        """Registered family tags in registration order."""
        return tuple(self._families)

    def specificity_rank(self, family: FamilyClass) -> int:
        """Sort key ranking ``family`` by specificity (lower is more specific)."""
        return SPECIFICITY_ORDER.index(family.metadata.type)

    def by_specificity(self, families: Iterable[FamilyClass]) -> list[FamilyClass]:
        """Return ``families`` ordered most specific first."""
        return sorted(families, key=self.specificity_rank)

    def detector(self) -> Detector:
        """Return the cached detector, building it on first use."""
        with self._lock:
            if self._detector is None:
                self._detector = Detector(self)
            return self._detector

    def scanner(self) -> Scanner:
        """Return the cached scanner, building it on first use."""
        with self._lock:
            if self._scanner is None:
                self._scanner = Scanner(self)
            return self._scanner

    def __contains__(self, key: object) -> bool:
        try:
            self.get(key)  # type: ignore[arg-type]
        except UnknownIdentifierTypeError:
            return False
        return True

    def __iter__(self) -> Iterator[FamilyClass]:
        return iter(self.families)

    def __len__(self) -> int:
        return len(self._families)


def build_default_registry() -> IdentifierRegistry:
    """Build a registry holding the thirteen built-in families."""
    return IdentifierRegistry(DEFAULT_FAMILIES)
