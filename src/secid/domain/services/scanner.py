# src/secid/domain/services/scanner.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Free-text identifier scanner.

Purpose:
    Find non-overlapping identifier occurrences embedded in longer text.

Layer:
    domain

Notes:
    - Candidate tokens come from one permissive regex with three
      alternatives: FISN-like spans containing ``/``, OCC-like spans with
      structural spaces, and simple alphanumeric runs that may contain
      ``*@#`` and embedded hyphens.
    - Boundary assertions keep the regex from matching inside words, URLs,
      e-mail addresses and currency amounts.
    - A validated candidate consumes its span; a rejected one advances the
      cursor by a single character so shorter overlapping tokens are still
      considered.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Final

from secid.domain.services.detector import is_plausible
from secid.domain.value_objects.match import Match

if TYPE_CHECKING:
    from secid.domain.services.identifier_registry import FamilyClass, IdentifierRegistry

CANDIDATE_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?<![A-Za-z0-9*@\#/.$])
    (?:
        (?P<fisn>
            [A-Za-z0-9](?:[A-Za-z0-9\ ]{0,33}[A-Za-z0-9])?
            /
            [A-Za-z0-9](?:[A-Za-z0-9\ ]{0,33}[A-Za-z0-9])?
        )
        |
        (?P<occ>[A-Za-z]{1,6}\ {1,5}\d{6}[CcPp]\d{8})
        |
        (?P<simple>[A-Za-z0-9*@\#](?:[A-Za-z0-9*@\#-]{0,40}[A-Za-z0-9*@\#])?)
    )
    (?![A-Za-z0-9*@\#.])
    """,
    re.VERBOSE,
)


class Scanner:
    """Extract identifier matches from text.

    Args:
        registry: Registry supplying the family list and specificity order.
    """

    def __init__(self, registry: IdentifierRegistry) -> None:
        self._registry = registry
        self._families = registry.families

    def scan(
        self, text: str | None, families: Sequence[FamilyClass] | None = None
    ) -> Iterator[Match]:
        """Lazily yield matches from left to right.

        Args:
            text: Text to scan; ``None`` or empty text yields nothing.
            families: Optional restriction of the families to accept.

        Returns:
            Iterator[Match]: Non-overlapping matches in text order.
        """
        allowed = tuple(self._families if families is None else families)
        return self._scan(text or "", allowed)

    def extract(
        self, text: str | None, families: Sequence[FamilyClass] | None = None
    ) -> list[Match]:
        """Return every match as a list."""
        return list(self.scan(text, families))

    def _scan(self, text: str, families: tuple[FamilyClass, ...]) -> Iterator[Match]:
        slash = tuple(f for f in families if f.metadata.accepts_char("/"))
        spaced = tuple(f for f in families if f.metadata.accepts_char(" ") and f not in slash)
        simple = tuple(f for f in families if f not in slash)

        pos = 0
        while pos < len(text):
            found = CANDIDATE_RE.search(text, pos)
            if found is None:
                return

            raw = found.group(0)
            if found.group("fisn") is not None:
                match = self._identify(raw, raw.upper(), found.start(), slash)
            elif found.group("occ") is not None:
                match = self._identify(raw, raw.upper(), found.start(), spaced)
            else:
                match = self._identify(raw, raw.replace("-", "").upper(), found.start(), simple)

            if match is not None:
                yield match
                pos = found.end()
            else:
                pos = found.start() + 1

    def _identify(
        self, raw: str, cleaned: str, start: int, families: Sequence[FamilyClass]
    ) -> Match | None:
        valid = [
            instance
            for instance in (f(cleaned) for f in families if is_plausible(f, cleaned))
            if instance.valid
        ]
        if not valid:
            return None
        best = min(valid, key=lambda m: self._registry.specificity_rank(type(m)))
        return Match(
            type=best.metadata.type,
            raw=raw,
            start=start,
            end=start + len(raw),
            identifier=best,
        )
