# tests/unit/domain/entities/test_occ.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from secid.domain.entities import OCC
from secid.domain.enums.validation import ErrorCode


@pytest.mark.parametrize(
    "raw",
    [
        "EQX   260116C00005500",
        "CZOO1 240517P00000000",
        "TWTR  230120C00040000",
        "1GOOGL251219P00131000",
    ],
)
def test_occ_valid(raw: str) -> None:
    occ = OCC(raw)

    assert occ.valid, occ.errors.as_list()
    assert str(occ) == raw


def test_occ_parts() -> None:
    occ = OCC("EQX   260116C00005500")

    assert occ.underlying == "EQX"
    assert occ.date_str == "260116"
    assert occ.expiration == date(2026, 1, 16)
    assert occ.option_type == "C"
    assert occ.strike_mills == "00005500"
    assert occ.strike == Decimal("5.5")
    assert occ.components() == {
        "underlying": "EQX",
        "expiration": "2026-01-16",
        "option_type": "C",
        "strike": "5.5",
    }


@pytest.mark.parametrize(
    ("raw", "canonical"),
    [
        ("PAAS1250919C00022500", "PAAS1 250919C00022500"),
        ("X250620C00050000", "X     250620C00050000"),
        ("1AMD250919P00085010", "1AMD  250919P00085010"),
        ("aapl  210917c00150000", "AAPL  210917C00150000"),
    ],
)
def test_occ_normalize_pads_underlying_to_six(raw: str, canonical: str) -> None:
    assert OCC.normalize(raw) == canonical
    assert OCC.normalize(canonical) == canonical


@pytest.mark.parametrize("bad_date", ["141199", "140022"])
def test_occ_rejects_impossible_dates(bad_date: str) -> None:
    occ = OCC(f"AAPL  {bad_date}C00150000")

    assert occ.errors.codes == (ErrorCode.INVALID_DATE,)
    assert occ.errors.messages == (f"Expiration date '{bad_date}' is not a valid date",)
    assert occ.expiration is None


@pytest.mark.parametrize(
    ("raw", "code"),
    [
        ("GOOGLE251219P00131000", ErrorCode.INVALID_FORMAT),
        ("ZVZZT", ErrorCode.INVALID_LENGTH),
        ("AAPL  210917X00150000", ErrorCode.INVALID_FORMAT),
        ("AAPL--210917C00150000", ErrorCode.INVALID_CHARACTERS),
    ],
)
def test_occ_errors(raw: str, code: ErrorCode) -> None:
    assert OCC(raw).errors.codes == (code,)


def test_occ_length_message() -> None:
    assert OCC("ZVZZT").errors.messages == ("Expected 16-21 characters, got 5",)


def test_occ_build_from_parts() -> None:
    assert OCC.build("X", "250620", "C", 50).full_id == "X     250620C00050000"
    assert OCC.build("eqx", date(2026, 1, 16), "c", Decimal("5.5")).full_id == (
        "EQX   260116C00005500"
    )
    assert OCC.build("TWTR", "2023-01-20", "C", "00040000").valid
    assert OCC.build("AAPL", "210917", "P", 150.25).strike == Decimal("150.25")


@pytest.mark.parametrize(
    ("expiration", "strike"),
    [("not-a-date", 50), ("250620", "fifty"), ("250620", "5000")],
)
def test_occ_build_rejects_bad_parts(expiration: str, strike: object) -> None:
    with pytest.raises(ValueError):
        OCC.build("X", expiration, "C", strike)  # type: ignore[arg-type]
