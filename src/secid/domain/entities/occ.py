# src/secid/domain/entities/occ.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""OCC option symbol entity.

Purpose:
    Represent an Options Clearing Corporation option symbol: an underlying
    root padded with spaces to six characters, the expiration as ``YYMMDD``,
    ``C`` or ``P``, and the strike price in thousandths as eight digits.

Layer:
    domain

Notes:
    - Spaces are structural, so no separators are removed while cleaning.
    - Input with missing or short padding is accepted; the canonical form
      restores the six-character padded root.
    - An expiration that is not a calendar date is ``invalid_date``.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Final

from secid.domain.entities.base import FamilyMetadata, SecurityIdentifier
from secid.domain.enums.identifier_type import IdentifierType
from secid.domain.enums.validation import ErrorCode
from secid.domain.value_objects.validation import ErrorDetail

ROOT_WIDTH: Final[int] = 6
_DATE_FORMAT: Final[str] = "%y%m%d"
_STRIKE_RE: Final[re.Pattern[str]] = re.compile(r"\d{8}")


class OCC(SecurityIdentifier):
    """OCC standardized option symbol."""

    metadata = FamilyMetadata(
        type=IdentifierType.OCC,
        short_name="OCC",
        full_name="OCC Option Symbol",
        id_length=(16, 21),
        chars=re.compile(r"[A-Z0-9 ]+"),
        example="AAPL  210917C00150000",
        separators="",
        has_normalization=True,
    )
    ID_PATTERN = re.compile(
        r"(?P<underlying>\d?[A-Z]{1,5}\d?)(?P<padding> *)(?P<date>\d{6})"
        r"(?P<option_type>[CP])(?P<strike>\d{8})"
    )

    @classmethod
    def build(
        cls,
        underlying: str,
        expiration: date | str,
        option_type: str,
        strike: int | float | Decimal | str,
    ) -> OCC:
        """Compose a symbol from its parts.

        Args:
            underlying: Underlying root symbol.
            expiration: Expiration as a ``date``, ``YYMMDD`` or ISO ``YYYY-MM-DD`` string.
            option_type: ``"C"`` or ``"P"``.
            strike: Strike price as a number, or the eight-digit mills field.

        Returns:
            OCC: The composed symbol (not validated).

        Raises:
            ValueError: If the expiration is not a date or the strike is not
                numeric or an eight-digit string.
        """
        if isinstance(expiration, date):
            expiry = expiration
        elif len(expiration) == 6 and expiration.isdigit():
            expiry = datetime.strptime(expiration, _DATE_FORMAT).date()
        else:
            expiry = date.fromisoformat(expiration)

        if isinstance(strike, str):
            if not _STRIKE_RE.fullmatch(strike):
                raise ValueError("Strike must be numeric or an 8-digit string")
            mills = strike
        else:
            try:
                mills = f"{int(Decimal(str(strike)) * 1000):08d}"
            except InvalidOperation as exc:
                raise ValueError("Strike must be numeric or an 8-digit string") from exc

        root = str(underlying).strip().upper().ljust(ROOT_WIDTH)
        return cls(f"{root}{expiry.strftime(_DATE_FORMAT)}{str(option_type).upper()}{mills}")

    @property
    def underlying(self) -> str | None:
        """Underlying root symbol, without padding."""
        return self._parts.get("underlying")

    @property
    def date_str(self) -> str | None:
        """Expiration as ``YYMMDD``."""
        return self._parts.get("date")

    @property
    def option_type(self) -> str | None:
        """``"C"`` for calls, ``"P"`` for puts."""
        return self._parts.get("option_type")

    @property
    def strike_mills(self) -> str | None:
        """Eight-digit strike field, in thousandths of a currency unit."""
        return self._parts.get("strike")

    @property
    def expiration(self) -> date | None:
        """Expiration date, ``None`` when absent or not a calendar date."""
        if self.date_str is None:
            return None
        try:
            return datetime.strptime(self.date_str, _DATE_FORMAT).date()
        except ValueError:
            return None

    @property
    def strike(self) -> Decimal | None:
        """Strike price."""
        if self.strike_mills is None:
            return None
        return Decimal(int(self.strike_mills)) / 1000

    @property
    def identifier(self) -> str | None:
        return self.full_id if self._parts else None

    def components(self) -> dict[str, Any]:
        if not self.valid:
            return {}
        expiration = self.expiration
        return {
            "underlying": self.underlying,
            "expiration": expiration.isoformat() if expiration else None,
            "option_type": self.option_type,
            "strike": str(self.strike),
        }

    def _structure_error(self) -> ErrorDetail | None:
        if self.expiration is None:
            return self._error(
                ErrorCode.INVALID_DATE,
                f"Expiration date '{self.date_str}' is not a valid date",
            )
        return None

    def _canonical(self) -> str:
        root = (self.underlying or "").ljust(ROOT_WIDTH)
        return f"{root}{self.date_str}{self.option_type}{self.strike_mills}"
