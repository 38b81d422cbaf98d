# tests/unit/domain/test_identifier_exceptions.py
from __future__ import annotations

import pytest

from secid.domain.enums.validation import ErrorCode
from secid.domain.exceptions.identifiers import (
    AmbiguousMatchError,
    InvalidCheckDigitError,
    InvalidFormatError,
    InvalidStructureError,
    SecIdError,
    UnknownIdentifierTypeError,
    error_class_for,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (ErrorCode.INVALID_LENGTH, InvalidFormatError),
        (ErrorCode.INVALID_CHARACTERS, InvalidFormatError),
        (ErrorCode.INVALID_FORMAT, InvalidFormatError),
        (ErrorCode.INVALID_CHECK_DIGIT, InvalidCheckDigitError),
        (ErrorCode.INVALID_PREFIX, InvalidStructureError),
        (ErrorCode.INVALID_CATEGORY, InvalidStructureError),
        (ErrorCode.INVALID_GROUP, InvalidStructureError),
        (ErrorCode.INVALID_BBAN, InvalidStructureError),
        ("invalid_date", InvalidStructureError),
    ],
)
def test_error_class_for_maps_codes_to_exception_kinds(code: object, expected: type) -> None:
    assert error_class_for(code) is expected  # type: ignore[arg-type]


def test_errors_carry_message_and_details() -> None:
    exc = InvalidFormatError("bad input", details={"input": "X"})

    assert str(exc) == "bad input"
    assert exc.message == "bad input"
    assert exc.details == {"input": "X"}
    assert exc.code == "invalid_format"
    assert isinstance(exc, SecIdError)


def test_details_default_to_empty_mapping() -> None:
    assert InvalidCheckDigitError("x").details == {}


def test_ambiguous_match_error_lists_candidates() -> None:
    exc = AmbiguousMatchError("ambiguous", candidates=["wkn", "valoren", "cik"])

    assert exc.candidates == ("wkn", "valoren", "cik")
    assert exc.code == "ambiguous_match"


def test_unknown_type_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        raise UnknownIdentifierTypeError("Unknown identifier type: 'x'")
