# src/secid/domain/entities/cfi.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Classification of Financial Instruments entity (ISO 10962).

Purpose:
    Represent a six-letter CFI code: a category, a group valid for that
    category, and four attribute letters (``X`` meaning not applicable).

Layer:
    domain

Notes:
    Attribute letters are not validated against per-group tables; only the
    category and group are structural. Equity attribute predicates are
    exposed for convenience and are ``False`` for non-equity codes.
"""

from __future__ import annotations

import re
from typing import Any, Final

from secid.domain.entities.base import FamilyMetadata, SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.enums.validation import ErrorCode
from secid.domain.value_objects.validation import ErrorDetail

CATEGORIES: Final[dict[str, str]] = {
    "E": "equity",
    "C": "collective_investment_vehicles",
    "D": "debt_instruments",
    "R": "entitlements",
    "O": "listed_options",
    "F": "futures",
    "S": "swaps",
    "H": "non_listed_options",
    "I": "spot",
    "J": "forwards",
    "K": "strategies",
    "L": "financing",
    "T": "referential_instruments",
    "M": "miscellaneous",
}

GROUPS: Final[dict[str, dict[str, str]]] = {
    "E": {
        "S": "common_shares",
        "P": "preferred_shares",
        "C": "convertible_common_shares",
        "F": "convertible_preferred_shares",
        "L": "limited_partnership_units",
        "D": "depositary_receipts",
        "Y": "structured_instruments",
        "M": "miscellaneous",
    },
    "C": {
        "I": "standard_investment_funds",
        "H": "hedge_funds",
        "B": "real_estate_investment_trusts",
        "E": "exchange_traded_funds",
        "S": "pension_funds",
        "F": "funds_of_funds",
        "P": "private_equity_funds",
        "M": "miscellaneous",
    },
    "D": {
        "B": "bonds",
        "C": "convertible_bonds",
        "W": "bonds_with_warrants",
        "T": "medium_term_notes",
        "Y": "money_market_instruments",
        "S": "structured_instruments",
        "E": "mortgage_backed_securities",
        "G": "asset_backed_securities",
        "A": "municipal_bonds",
        "N": "municipal_notes",
        "D": "depositary_receipts",
        "M": "miscellaneous",
    },
    "R": {
        "A": "allotment_rights",
        "S": "subscription_rights",
        "P": "purchase_rights",
        "W": "warrants",
        "F": "mini_future_certificates",
        "D": "depositary_receipts",
        "M": "miscellaneous",
    },
    "O": {"C": "call_options", "P": "put_options", "M": "miscellaneous"},
    "F": {"F": "financial_futures", "C": "commodities_futures", "M": "miscellaneous"},
    "S": {
        "R": "rates",
        "T": "commodities",
        "E": "equity",
        "C": "credit",
        "F": "foreign_exchange",
        "M": "miscellaneous",
    },
    "H": {"C": "call_options", "P": "put_options", "M": "miscellaneous"},
    "I": {"F": "foreign_exchange", "T": "commodities", "M": "miscellaneous"},
    "J": {
        "F": "foreign_exchange",
        "R": "rates",
        "T": "commodities",
        "E": "equity",
        "C": "credit",
        "M": "miscellaneous",
    },
    "K": {
        "R": "rates",
        "T": "commodities",
        "E": "equity",
        "C": "credit",
        "F": "foreign_exchange",
        "Y": "mixed",
        "M": "miscellaneous",
    },
    "L": {
        "S": "loan_lease",
        "R": "repurchase_agreements",
        "P": "securities_lending",
        "M": "miscellaneous",
    },
    "T": {
        "I": "currencies",
        "C": "commodities",
        "R": "interest_rates",
        "N": "indices",
        "B": "baskets",
        "D": "stock_dividends",
        "M": "miscellaneous",
    },
    "M": {"C": "combined_instruments", "M": "miscellaneous"},
}


class CFI(SecurityIdentifier):
    """ISO 10962 classification code."""

    metadata = FamilyMetadata(
        type=IdentifierType.CFI,
        short_name="CFI",
        full_name="Classification of Financial Instruments",
        id_length=6,
        chars=re.compile(r"[A-Z]+"),
        example="ESVUFR",
    )
    ID_PATTERN = re.compile(
        r"(?P<identifier>(?P<category_code>[A-Z])(?P<group_code>[A-Z])(?P<attributes>[A-Z]{4}))"
    )

    @property
    def category_code(self) -> str | None:
        """Category letter (position 1)."""
        return self._parts.get("category_code")

    @property
    def group_code(self) -> str | None:
        """Group letter (position 2)."""
        return self._parts.get("group_code")

    @property
    def attributes(self) -> str | None:
        """Attribute letters (positions 3-6)."""
        return self._parts.get("attributes")

    @property
    def category(self) -> str | None:
        """Category name, ``None`` when the letter is unknown."""
        return CATEGORIES.get(self.category_code or "")

    @property
    def group(self) -> str | None:
        """Group name within the category, ``None`` when unknown."""
        return GROUPS.get(self.category_code or "", {}).get(self.group_code or "")

    @property
    def equity(self) -> bool:
        """True for the equity category."""
        return self.category_code == "E"

    def _equity_attribute(self, position: int, letter: str) -> bool:
        attributes = self.attributes
        return self.equity and attributes is not None and attributes[position] == letter

    @property
    def voting(self) -> bool:
        """Equity with voting rights."""
        return self._equity_attribute(0, "V")

    @property
    def non_voting(self) -> bool:
        """Equity without voting rights."""
        return self._equity_attribute(0, "N")

    @property
    def restricted_voting(self) -> bool:
        """Equity with restricted voting rights."""
        return self._equity_attribute(0, "R")

    @property
    def enhanced_voting(self) -> bool:
        """Equity with enhanced voting rights."""
        return self._equity_attribute(0, "E")

    @property
    def restrictions(self) -> bool:
        """Equity with ownership or transfer restrictions."""
        return self._equity_attribute(1, "T")

    @property
    def no_restrictions(self) -> bool:
        """Equity free of ownership restrictions."""
        return self._equity_attribute(1, "U")

    @property
    def fully_paid(self) -> bool:
        return self._equity_attribute(2, "F")

    @property
    def nil_paid(self) -> bool:
        return self._equity_attribute(2, "O")

    @property
    def partly_paid(self) -> bool:
        return self._equity_attribute(2, "P")

    @property
    def bearer(self) -> bool:
        return self._equity_attribute(3, "B")

    @property
    def registered(self) -> bool:
        return self._equity_attribute(3, "R")

    def components(self) -> dict[str, Any]:
        if not self.valid:
            return {}
        return {
            "category_code": self.category_code,
            "group_code": self.group_code,
            "attributes": self.attributes,
            "category": self.category,
            "group": self.group,
        }

    def _structure_error(self) -> ErrorDetail | None:
        if self.category is None:
            return self._error(
                ErrorCode.INVALID_CATEGORY,
                f"Category '{self.category_code}' is not a valid CFI category",
            )
        if self.group is None:
            return self._error(
                ErrorCode.INVALID_GROUP,
                f"Group '{self.group_code}' is not valid for category '{self.category_code}'",
            )
        return None
