# tests/unit/domain/entities/test_iban.py
from __future__ import annotations

import pytest

from secid.domain.entities import IBAN
from secid.domain.enums.validation import ErrorCode


@pytest.mark.parametrize(
    "raw",
    [
        "DE89370400440532013000",
        "GB29NWBK60161331926819",
        "FR1420041010050500013M02606",
        "ES9121000418450200051332",
        "NL91ABNA0417164300",
        "BE68539007547034",
        "IT60X0542811101000000123456",
        "CH9300762011623852957",
        "AT611904300234573201",
    ],
)
def test_iban_valid(raw: str) -> None:
    iban = IBAN(raw)

    assert iban.valid, iban.errors.as_list()
    assert iban.known_country


def test_iban_german_components() -> None:
    iban = IBAN("DE89370400440532013000")

    assert iban.country_code == "DE"
    assert iban.check_digit == 89
    assert iban.bban == "370400440532013000"
    assert iban.bank_code == "37040044"
    assert iban.account_number == "0532013000"
    assert iban.branch_code is None
    assert iban.components() == {
        "country_code": "DE",
        "bban": "370400440532013000",
        "bank_code": "37040044",
        "account_number": "0532013000",
        "check_digit": 89,
    }


def test_iban_british_sort_code() -> None:
    iban = IBAN("GB29NWBK60161331926819")

    assert iban.bank_code == "NWBK"
    assert iban.branch_code == "601613"
    assert iban.account_number == "31926819"


def test_iban_spaced_lower_case_input_and_pretty_form() -> None:
    iban = IBAN("de89 3704 0044 0532 0130 00")

    assert iban.valid
    assert iban.normalized() == "DE89370400440532013000"
    assert iban.pretty() == "DE89 3704 0044 0532 0130 00"


@pytest.mark.parametrize("raw", ["DE89ABCD00440532013000", "DE8937040044053201"])
def test_iban_bban_structure_errors(raw: str) -> None:
    iban = IBAN(raw)

    assert iban.errors.codes == (ErrorCode.INVALID_BBAN,)
    assert iban.errors.messages == ("BBAN format is invalid for country 'DE'",)
    assert iban.valid_bban_format is False
    assert iban.bank_code is None


@pytest.mark.parametrize(
    ("raw", "code", "message"),
    [
        ("DE89", ErrorCode.INVALID_LENGTH, "Expected 15-34 characters, got 4"),
        (
            "DE89370400440532013!!!",
            ErrorCode.INVALID_CHARACTERS,
            "Contains invalid characters for IBAN",
        ),
        ("1234567890123456", ErrorCode.INVALID_FORMAT, "Does not match IBAN format"),
        (
            "DE88370400440532013000",
            ErrorCode.INVALID_CHECK_DIGIT,
            "Check digit '88' is invalid, expected '89'",
        ),
    ],
)
def test_iban_errors(raw: str, code: ErrorCode, message: str) -> None:
    iban = IBAN(raw)

    assert iban.errors.codes == (code,)
    assert iban.errors.messages == (message,)


def test_iban_transposed_digits_fail_mod97() -> None:
    assert IBAN("DE89370400440523013000").errors.codes == (ErrorCode.INVALID_CHECK_DIGIT,)


def test_iban_restores_check_digits() -> None:
    assert IBAN("DE00370400440532013000").restore() == "DE89370400440532013000"

    bare = IBAN("DE370400440532013000")
    assert bare.check_digit is None
    assert bare.bban == "370400440532013000"
    assert bare.errors.messages == ("Check digit is missing, expected '89'",)
    assert bare.restore() == "DE89370400440532013000"


def test_iban_unknown_country_validates_on_checksum_alone() -> None:
    restored = IBAN(IBAN.restore_id("XX00123456789012345"))

    assert restored.valid
    assert restored.known_country is False
    assert restored.country_rule is None
    assert restored.components()["bban"] == "123456789012345"


def test_iban_supported_countries_are_sorted() -> None:
    countries = IBAN.supported_countries()

    assert list(countries) == sorted(countries)
    assert {"DE", "GB", "FR", "MC", "SM", "TR"} <= set(countries)


def test_iban_check_value_alias_is_rejected() -> None:
    for n in range(10_000):
        bban = f"{n:018d}"
        check = IBAN.compute_check_digit(f"DE{bban}")
        if check in (97, 98):
            break
    alias = check - 97

    iban = IBAN(f"DE{alias:02d}{bban}")

    assert iban.errors.codes == (ErrorCode.INVALID_CHECK_DIGIT,)
    assert iban.errors.messages == (
        f"Check digit '{alias:02d}' is invalid, expected '{check:02d}'",
    )
    assert not iban.valid_check_digit
    assert IBAN(f"DE{check:02d}{bban}").valid
