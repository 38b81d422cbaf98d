# tests/unit/domain/entities/test_wkn.py
from __future__ import annotations

import pytest

from secid.domain.entities import WKN
from secid.domain.enums.validation import ErrorCode
from secid.domain.exceptions.identifiers import InvalidFormatError


@pytest.mark.parametrize("raw", ["514000", "716460", "CBK100", "A0B9ZP"])
def test_wkn_valid(raw: str) -> None:
    wkn = WKN(raw)

    assert wkn.valid
    assert str(wkn) == raw
    assert wkn.components() == {}


@pytest.mark.parametrize(
    ("raw", "code"),
    [
        ("51", ErrorCode.INVALID_LENGTH),
        ("51400I", ErrorCode.INVALID_CHARACTERS),
        ("5140O0", ErrorCode.INVALID_CHARACTERS),
    ],
)
def test_wkn_errors(raw: str, code: ErrorCode) -> None:
    assert WKN(raw).errors.codes == (code,)


def test_wkn_to_isin() -> None:
    assert str(WKN("716460").to_isin()) == "DE0007164600"
    assert str(WKN("CBK100").to_isin()) == "DE000CBK1001"


def test_wkn_to_isin_rejects_non_german_country() -> None:
    with pytest.raises(InvalidFormatError):
        WKN("716460").to_isin("US")
