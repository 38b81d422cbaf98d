# tests/unit/domain/entities/test_lei.py
from __future__ import annotations

import pytest

from secid.domain.entities import LEI
from secid.domain.enums.validation import ErrorCode


@pytest.mark.parametrize(
    "raw", ["7LTWFZYICNSX8D621K86", "529900T8BM49AURSDO55", "5493006MHB84DD0ZWV18"]
)
def test_lei_valid(raw: str) -> None:
    assert LEI(raw).valid


def test_lei_accepts_spaced_lower_case_input() -> None:
    lei = LEI("5299 00t8 bm49 aurs do55")

    assert lei.full_id == "529900T8BM49AURSDO55"
    assert lei.valid


def test_lei_components_and_two_digit_check() -> None:
    lei = LEI("7LTWFZYICNSX8D621K86")

    assert lei.components() == {
        "lou_id": "7LTW",
        "reserved": "FZ",
        "entity_id": "YICNSX8D621K",
        "check_digit": 86,
    }
    assert LEI("7LTWFZYICNSX8D621K").restore() == "7LTWFZYICNSX8D621K86"


def test_lei_check_digit_errors_are_two_wide() -> None:
    lei = LEI("5493006MHB84DD0ZWV99")

    assert lei.errors.codes == (ErrorCode.INVALID_CHECK_DIGIT,)
    assert lei.errors.messages == ("Check digit '99' is invalid, expected '18'",)


def test_lei_missing_check_digits() -> None:
    lei = LEI("5493006MHB84DD0ZWV")

    assert lei.errors.messages == ("Check digit is missing, expected '18'",)
    assert lei.restored() == LEI("5493006MHB84DD0ZWV18")


@pytest.mark.parametrize(
    ("raw", "code"),
    [
        ("5493006MHB84DD0ZWV!!", ErrorCode.INVALID_CHARACTERS),
        ("INVALID", ErrorCode.INVALID_LENGTH),
        ("5493006MHB84DD0ZWVAB", ErrorCode.INVALID_FORMAT),
    ],
)
def test_lei_errors(raw: str, code: ErrorCode) -> None:
    assert LEI(raw).errors.codes == (code,)
