"""Identifier family entities."""

from __future__ import annotations

from .base import CheckDigitIdentifier, FamilyMetadata, SecurityIdentifier
from .cei import CEI
from .cfi import CFI
from .cik import CIK
from .cusip import CUSIP
from .figi import FIGI
from .fisn import FISN
from .iban import IBAN
from .isin import ISIN
from .lei import LEI
from .occ import OCC
from .sedol import SEDOL
from .valoren import Valoren
from .wkn import WKN

__all__ = [
    "CEI",
    "CFI",
    "CIK",
    "CUSIP",
    "FIGI",
    "FISN",
    "IBAN",
    "ISIN",
    "LEI",
    "OCC",
    "SEDOL",
    "WKN",
    "CheckDigitIdentifier",
    "FamilyMetadata",
    "SecurityIdentifier",
    "Valoren",
]
