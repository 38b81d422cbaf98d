# tests/unit/domain/entities/test_valoren.py
from __future__ import annotations

import pytest

from secid.domain.entities import Valoren
from secid.domain.enums.validation import ErrorCode
from secid.domain.exceptions.identifiers import InvalidFormatError


@pytest.mark.parametrize("raw", ["3886335", "003886335", "12345", "000012345", "24476758"])
def test_valoren_valid(raw: str) -> None:
    assert Valoren(raw).valid


def test_valoren_normalization_and_display() -> None:
    valoren = Valoren("3886335")

    assert valoren.normalized() == "003886335"
    assert Valoren.normalize("24476758") == "024476758"
    assert valoren.pretty() == "3 886 335"
    assert str(valoren) == "3886335"
    assert Valoren("003886335").padding == "00"


@pytest.mark.parametrize(
    ("raw", "code"),
    [
        ("0000", ErrorCode.INVALID_LENGTH),
        ("12", ErrorCode.INVALID_LENGTH),
        ("0123456789", ErrorCode.INVALID_LENGTH),
        ("00000", ErrorCode.INVALID_FORMAT),
        ("00001", ErrorCode.INVALID_FORMAT),
        ("ABCDE", ErrorCode.INVALID_CHARACTERS),
    ],
)
def test_valoren_errors(raw: str, code: ErrorCode) -> None:
    assert Valoren(raw).errors.codes == (code,)


def test_valoren_to_isin() -> None:
    assert str(Valoren("1222171").to_isin()) == "CH0012221716"
    assert str(Valoren("1222171").to_isin("LI")) == "LI0012221714"
    assert str(Valoren("3886335").to_isin()) == "CH0038863350"


def test_valoren_to_isin_rejects_other_countries() -> None:
    with pytest.raises(InvalidFormatError, match="not a valid Valoren country code"):
        Valoren("1222171").to_isin("DE")
