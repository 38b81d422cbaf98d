# tests/unit/domain/entities/test_sedol.py
from __future__ import annotations

import pytest

from secid.domain.entities import ISIN, SEDOL
from secid.domain.enums.validation import ErrorCode
from secid.domain.exceptions.identifiers import InvalidFormatError


@pytest.mark.parametrize("raw", ["B0YBKJ7", "B19GKT4", "0263494"])
def test_sedol_valid(raw: str) -> None:
    sedol = SEDOL(raw)

    assert sedol.valid
    assert sedol.components() == {"check_digit": int(raw[-1])}


@pytest.mark.parametrize(
    ("raw", "code"),
    [
        ("B19GKT0", ErrorCode.INVALID_CHECK_DIGIT),
        ("A61351", ErrorCode.INVALID_FORMAT),
        ("B19GK", ErrorCode.INVALID_LENGTH),
        ("B19GK!4", ErrorCode.INVALID_CHARACTERS),
    ],
)
def test_sedol_errors(raw: str, code: ErrorCode) -> None:
    assert SEDOL(raw).errors.codes == (code,)


def test_sedol_restore() -> None:
    assert SEDOL("B19GKT").calculate_check_digit() == 4
    assert SEDOL("B19GKT").restore() == "B19GKT4"


def test_sedol_to_isin_defaults_to_gb() -> None:
    isin = SEDOL("B02H2F7").to_isin()

    assert isinstance(isin, ISIN)
    assert str(isin) == "GB00B02H2F76"
    assert isin.country_code == "GB"


def test_sedol_to_isin_other_country_and_missing_check_digit() -> None:
    assert str(SEDOL("B02H2F7").to_isin("IE")) == "IE00B02H2F76"
    assert str(SEDOL("B02H2F").to_isin()) == "GB00B02H2F76"


def test_sedol_round_trips_through_isin() -> None:
    sedol = SEDOL("B02H2F7")

    assert sedol.to_isin().to_sedol() == sedol


def test_sedol_to_isin_rejects_foreign_country() -> None:
    with pytest.raises(InvalidFormatError, match="'US' is not a valid SEDOL country code"):
        SEDOL("B02H2F7").to_isin("US")
