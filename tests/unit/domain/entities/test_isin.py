# tests/unit/domain/entities/test_isin.py
from __future__ import annotations

import pytest

from secid.domain.entities import CUSIP, ISIN, SEDOL, WKN, Valoren
from secid.domain.enums.validation import ErrorCode
from secid.domain.exceptions.identifiers import (
    InvalidCheckDigitError,
    InvalidFormatError,
)


@pytest.mark.parametrize("raw", ["US5949181045", "US0378331005", "AU0000XVGZA3", "GB0002634946"])
def test_isin_valid(raw: str) -> None:
    isin = ISIN(raw)

    assert isin.valid
    assert isin.errors.codes == ()
    assert str(isin) == raw
    assert ISIN.is_valid(raw)


def test_isin_parses_components() -> None:
    isin = ISIN.parse("US5949181045")

    assert isin.country_code == "US"
    assert isin.nsin == "594918104"
    assert isin.identifier == "US594918104"
    assert isin.check_digit == 5
    assert isin.cgs is True
    assert isin.components() == {"country_code": "US", "nsin": "594918104", "check_digit": 5}


def test_isin_input_is_cleaned_and_upper_cased() -> None:
    isin = ISIN("  us-5949 1810-45 ")

    assert isin.full_id == "US5949181045"
    assert isin.raw_input == "  us-5949 1810-45 "
    assert isin.valid


@pytest.mark.parametrize("raw", ["US59491\t81045", "US5949\n181045", "US 5949\r\n1810 45"])
def test_isin_embedded_whitespace_is_removed(raw: str) -> None:
    isin = ISIN(raw)

    assert isin.full_id == "US5949181045"
    assert isin.valid


@pytest.mark.parametrize(
    ("raw", "code", "message"),
    [
        ("", ErrorCode.INVALID_LENGTH, "Expected 12 characters, got 0"),
        ("US594918", ErrorCode.INVALID_LENGTH, "Expected 12 characters, got 8"),
        ("US59491810455", ErrorCode.INVALID_LENGTH, "Expected 12 characters, got 13"),
        ("US59491810$5", ErrorCode.INVALID_CHARACTERS, "Contains invalid characters for ISIN"),
        ("1S5949181045", ErrorCode.INVALID_FORMAT, "Does not match ISIN format"),
        (
            "US5949181040",
            ErrorCode.INVALID_CHECK_DIGIT,
            "Check digit '0' is invalid, expected '5'",
        ),
    ],
)
def test_isin_reports_first_failing_stage(raw: str, code: ErrorCode, message: str) -> None:
    isin = ISIN(raw)

    assert not isin.valid
    assert isin.errors.codes == (code,)
    assert isin.errors.first is not None
    assert isin.errors.first.message == message


def test_isin_without_check_digit_can_be_restored() -> None:
    isin = ISIN("US037833100")

    assert isin.errors.messages == ("Check digit is missing, expected '5'",)
    assert isin.calculate_check_digit() == 5
    assert isin.restore() == "US0378331005"
    assert isin.restored() == ISIN("US0378331005")
    assert ISIN.restore_id("US5949181040") == "US5949181045"
    assert ISIN.compute_check_digit("US594918104") == 5


def test_isin_check_digit_calculation_requires_well_formed_body() -> None:
    with pytest.raises(InvalidFormatError):
        ISIN("US59").calculate_check_digit()


def test_isin_validate_raises_typed_error_with_quoted_input() -> None:
    with pytest.raises(InvalidCheckDigitError) as excinfo:
        ISIN.parse("US5949181040")

    assert str(excinfo.value) == (
        "ISIN \"US5949181040\" is invalid: Check digit '0' is invalid, expected '5'"
    )
    assert excinfo.value.details["error"] == "invalid_check_digit"

    with pytest.raises(InvalidFormatError):
        ISIN.normalize("US594918")


def test_isin_converts_to_national_numbers() -> None:
    cusip = ISIN("US0378331005").to_cusip()
    sedol = ISIN("GB0002634946").to_sedol()
    wkn = ISIN("DE0007164600").to_wkn()
    valoren = ISIN("CH0012221716").to_valoren()

    assert isinstance(cusip, CUSIP) and str(cusip) == "037833100" and cusip.valid
    assert isinstance(sedol, SEDOL) and str(sedol) == "0263494" and sedol.valid
    assert isinstance(wkn, WKN) and str(wkn) == "716460"
    assert isinstance(valoren, Valoren) and valoren.normalized() == "001222171"


def test_isin_conversion_rejects_foreign_country() -> None:
    with pytest.raises(InvalidFormatError, match="not a CGS country code"):
        ISIN("GB0002634946").to_cusip()
    with pytest.raises(InvalidFormatError):
        ISIN("US5949181045").to_wkn()


def test_isin_equality_and_hash_use_family_and_cleaned_body() -> None:
    assert ISIN("us5949181045") == ISIN("US5949181045")
    assert hash(ISIN("us5949181045")) == hash(ISIN("US5949181045"))
    assert ISIN("US5949181045") != ISIN("US0378331005")
    assert repr(ISIN("US5949181045")) == "ISIN('US5949181045')"


def test_isin_to_dict() -> None:
    assert ISIN("US5949181045").to_dict() == {
        "type": "isin",
        "full_id": "US5949181045",
        "normalized": "US5949181045",
        "valid": True,
        "components": {"country_code": "US", "nsin": "594918104", "check_digit": 5},
    }
    assert ISIN("US594918").to_dict()["normalized"] is None
