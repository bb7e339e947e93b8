"""Test that the top-level quickstart API works for numconv."""
from __future__ import annotations


def test_quickstart_imports() -> None:
    import numconv

    assert callable(numconv.convert)
    assert callable(numconv.to_roman)
    assert callable(numconv.from_roman)


def test_version(expected_version: str) -> None:
    import numconv

    assert numconv.__version__ == expected_version


def test_quickstart_convert() -> None:
    import numconv

    outcome = numconv.convert("255", numconv.Notation.DECIMAL)
    assert isinstance(outcome, numconv.ConversionResult)
    assert outcome.hexadecimal == "FF"


def test_quickstart_error_is_returned_not_raised() -> None:
    import numconv

    outcome = numconv.convert("G", "hex")
    assert isinstance(outcome, numconv.ConversionError)
    assert outcome.kind is numconv.ErrorKind.INVALID_DIGIT


def test_quickstart_roman_helpers() -> None:
    import numconv

    assert numconv.to_roman(1994) == "MCMXCIV"
    assert numconv.to_roman(0) == numconv.ROMAN_OUT_OF_RANGE
    assert numconv.from_roman(" iv ") == 4
    assert numconv.from_roman("IIII") is None


def test_quickstart_radix_helpers() -> None:
    import numconv

    assert numconv.parse_radix("FF", 16) == 255
    assert numconv.format_radix(255, 2) == "11111111"
