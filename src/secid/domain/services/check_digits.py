# src/secid/domain/services/check_digits.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""Check-digit algorithms.

Purpose:
    Pure checksum functions shared by identifier families. Two algorithm
    families are provided:

    * Weighted-digit-sum mod 10 (Luhn variants): standard Luhn over a
      letter-expanded digit stream (ISIN), "double add double" (CUSIP, CEI),
      index doubling (FIGI) and positional weights (SEDOL).
    * ISO 7064 mod 97-10 (LEI, IBAN), computed incrementally so arbitrarily
      long numerals never become big integers.

Layer:
    domain

Notes:
    - ``compute_*`` functions take the body without check digits and return
      the expected check value.
    - ``verify_*`` functions take the body including check digits and return
      a bool. They are total: any input outside the family alphabet or of the
      wrong size yields ``False`` rather than raising. Identifier entities
      decide check-digit validity through them.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from itertools import zip_longest
from typing import Final

CHAR_TO_DIGIT: Final[dict[str, int]] = {
    **{str(d): d for d in range(10)},
    **{chr(ord("A") + i): 10 + i for i in range(26)},
    "*": 36,
    "@": 37,
    "#": 38,
}

SEDOL_WEIGHTS: Final[tuple[int, ...]] = (1, 3, 1, 7, 3, 9)

_ALNUM_RE: Final = re.compile(r"[A-Z0-9]+")


# --------------------------------------------------------------------------- #
# Primitives                                                                  #
# --------------------------------------------------------------------------- #


def char_value(char: str) -> int:
    """Return the single numeric value of a character (A=10 ... Z=35, *=36, @=37, #=38)."""
    return CHAR_TO_DIGIT[char]


def reversed_values(body: str) -> list[int]:
    """Map every character to its single value and reverse the sequence."""
    return [char_value(c) for c in reversed(body)]


def reversed_expanded_digits(body: str) -> list[int]:
    """Expand letters to two decimal digits and return the reversed digit stream.

    Parity for the Luhn doubling is computed over this expanded stream, which
    matters because letters contribute two digits.
    """
    digits: list[int] = []
    for char in body:
        digits.extend(int(d) for d in str(CHAR_TO_DIGIT[char]))
    digits.reverse()
    return digits


def numeric_string(body: str) -> str:
    """Render a body as a decimal numeral with letters replaced by their values."""
    return "".join(str(char_value(c)) for c in body)


def mod10(total: int) -> int:
    """Return the digit that tops ``total`` up to the next multiple of ten."""
    return (10 - total % 10) % 10


def div10mod10(number: int) -> int:
    """Return the sum of the tens and units digits of ``number``."""
    return number // 10 + number % 10


def luhn_sum_standard(digits: Sequence[int]) -> int:
    """Standard Luhn sum over a reversed digit stream (subtract nine when doubling overflows)."""
    total = 0
    it = iter(digits)
    for even, odd in zip_longest(it, it, fillvalue=0):
        doubled = even * 2
        if doubled > 9:
            doubled -= 9
        total += doubled + odd
    return total


def luhn_sum_double_add_double(values: Sequence[int]) -> int:
    """Double-add-double sum over reversed single values (CUSIP, CEI)."""
    total = 0
    it = iter(values)
    for even, odd in zip_longest(it, it, fillvalue=0):
        total += div10mod10(even * 2) + div10mod10(odd)
    return total


def luhn_sum_indexed(values: Sequence[int]) -> int:
    """Index-doubling sum over reversed single values (FIGI)."""
    total = 0
    for index, value in enumerate(values):
        if index % 2 == 1:
            value *= 2
        total += div10mod10(value)
    return total


def weighted_sum(values: Sequence[int], weights: Sequence[int]) -> int:
    """Sum of ``values`` multiplied position-wise by ``weights``."""
    return sum(v * w for v, w in zip(values, weights, strict=True))


def mod97(numeral: str) -> int:
    """Remainder of a decimal numeral modulo 97, computed digit by digit."""
    remainder = 0
    for char in numeral:
        remainder = (remainder * 10 + int(char)) % 97
    return remainder


def _in_alphabet(body: str) -> bool:
    return bool(body) and all(c in CHAR_TO_DIGIT for c in body)


# --------------------------------------------------------------------------- #
# Family algorithms                                                           #
# --------------------------------------------------------------------------- #


def compute_isin(body: str) -> int:
    """Check digit for an 11-character ISIN body."""
    return mod10(luhn_sum_standard(reversed_expanded_digits(body)))


def compute_cusip(body: str) -> int:
    """Check digit for an 8-character CUSIP body (also used by CEI bodies)."""
    return mod10(luhn_sum_double_add_double(reversed_values(body)))


def compute_cei(body: str) -> int:
    """Check digit for a 9-character CEI body."""
    return compute_cusip(body)


def compute_sedol(body: str) -> int:
    """Check digit for a 6-character SEDOL body."""
    return mod10(weighted_sum([CHAR_TO_DIGIT[c] for c in body], SEDOL_WEIGHTS))


def compute_figi(body: str) -> int:
    """Check digit for an 11-character FIGI body."""
    return mod10(luhn_sum_indexed(reversed_values(body)))


def compute_lei(body: str) -> int:
    """Two-digit check value (2..98) for an 18-character LEI body."""
    return 98 - mod97(numeric_string(body) + "00")


def compute_iban(country_code: str, bban: str) -> int:
    """Two-digit check value (2..98) for an IBAN country code and BBAN."""
    return 98 - mod97(numeric_string(bban + country_code) + "00")


def _verify_mod10(full: str, size: int, compute: Callable[[str], int]) -> bool:
    if len(full) != size or not _in_alphabet(full) or not full[-1].isdigit():
        return False
    return compute(full[:-1]) == int(full[-1])


def verify_isin(full: str) -> bool:
    """True if a 12-character ISIN carries a self-consistent check digit."""
    return _verify_mod10(full, 12, compute_isin)


def verify_cusip(full: str) -> bool:
    """True if a 9-character CUSIP carries a self-consistent check digit."""
    return _verify_mod10(full, 9, compute_cusip)


def verify_cei(full: str) -> bool:
    """True if a 10-character CEI carries a self-consistent check digit."""
    return _verify_mod10(full, 10, compute_cei)


def verify_sedol(full: str) -> bool:
    """True if a 7-character SEDOL carries a self-consistent check digit."""
    return _verify_mod10(full, 7, compute_sedol)


def verify_figi(full: str) -> bool:
    """True if a 12-character FIGI carries a self-consistent check digit."""
    return _verify_mod10(full, 12, compute_figi)


def verify_lei(full: str) -> bool:
    """True if a 20-character LEI carries exactly the computed check value."""
    if len(full) != 20 or not _ALNUM_RE.fullmatch(full) or not full[-2:].isdigit():
        return False
    return compute_lei(full[:-2]) == int(full[-2:])


def verify_iban(full: str) -> bool:
    """True if an IBAN carries exactly the check value computed from its BBAN.

    Check values ``00``, ``01`` and ``99`` also leave remainder 1 once the
    country and check digits move to the end; they are rejected.
    """
    if len(full) < 5 or not _ALNUM_RE.fullmatch(full) or not full[2:4].isdigit():
        return False
    return compute_iban(full[:2], full[4:]) == int(full[2:4])
