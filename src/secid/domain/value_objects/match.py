# src/secid/domain/value_objects/match.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Scanner match value object.

Purpose:
    Describe one identifier occurrence found in free-form text: which family it
    belongs to, the exact substring, its offsets and the validated instance.

Layer:
    domain
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from secid.domain.enums.identifier_type import IdentifierType

if TYPE_CHECKING:
    from secid.domain.entities.base import SecurityIdentifier


@dataclass(frozen=True)
class Match:
    """Identifier occurrence in scanned text.

    Args:
        type: Family the occurrence was attributed to.
        raw: Substring exactly as it appears in the text.
        start: Offset of the first character of ``raw``.
        end: Offset one past the last character, so ``text[start:end] == raw``.
        identifier: Validated identifier instance built from the cleaned token.
    """

    type: IdentifierType
    raw: str
    start: int
    end: int
    identifier: SecurityIdentifier

    @property
    def value(self) -> str:
        """Cleaned identifier value (separators removed, upper-cased)."""
        return self.identifier.full_id

    @property
    def offset(self) -> int:
        """Alias of :attr:`start`."""
        return self.start

    @property
    def length(self) -> int:
        """Length of the matched substring in the source text."""
        return self.end - self.start

    @property
    def span(self) -> tuple[int, int]:
        """``(start, end)`` pair suitable for slicing."""
        return (self.start, self.end)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation of the match."""
        return {
            "type": self.type.value,
            "raw": self.raw,
            "value": self.value,
            "start": self.start,
            "end": self.end,
        }
