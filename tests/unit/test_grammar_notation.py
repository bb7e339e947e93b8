"""Unit tests for numconv.grammar — the Notation enum and grammar patterns."""
from __future__ import annotations

import pytest

from numconv.grammar import (
    DECIMAL_PREFIX,
    DIGIT_PATTERNS,
    GRAMMAR_ROMAN,
    ROMAN_PATTERN,
    ROMAN_SYMBOL_VALUES,
    Notation,
    digit_pattern,
)


class TestNotationMembers:
    def test_has_five_members(self) -> None:
        assert len(list(Notation)) == 5

    def test_positional_bases(self) -> None:
        assert Notation.BINARY.base == 2
        assert Notation.OCTAL.base == 8
        assert Notation.DECIMAL.base == 10
        assert Notation.HEXADECIMAL.base == 16

    def test_roman_has_no_base(self) -> None:
        assert Notation.ROMAN.base is None
        assert not Notation.ROMAN.is_positional

    def test_labels(self) -> None:
        assert [n.label for n in Notation] == [
            "Binary",
            "Octal",
            "Decimal",
            "Hexadecimal",
            "Roman",
        ]

    def test_values_are_cli_tokens(self) -> None:
        assert [n.value for n in Notation] == ["2", "8", "10", "16", "roman"]


class TestNotationParse:
    @pytest.mark.parametrize(
        "token",
        ["16", "hex", "HEX", "hexadecimal", "Hexadecimal", " 16 "],
    )
    def test_hexadecimal_aliases(self, token: str) -> None:
        assert Notation.parse(token) is Notation.HEXADECIMAL

    def test_roman_token(self) -> None:
        assert Notation.parse("ROMAN") is Notation.ROMAN

    def test_member_passes_through(self) -> None:
        assert Notation.parse(Notation.OCTAL) is Notation.OCTAL

    def test_unknown_token_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown notation"):
            Notation.parse("base64")


class TestNotationFromBase:
    def test_known_bases(self) -> None:
        assert Notation.from_base(2) is Notation.BINARY
        assert Notation.from_base(16) is Notation.HEXADECIMAL

    def test_unknown_base_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported base"):
            Notation.from_base(3)


class TestDigitPatterns:
    def test_only_three_character_class_notations(self) -> None:
        assert set(DIGIT_PATTERNS) == {
            Notation.BINARY,
            Notation.OCTAL,
            Notation.HEXADECIMAL,
        }

    def test_hex_pattern_is_case_insensitive(self) -> None:
        assert digit_pattern(Notation.HEXADECIMAL).fullmatch("deadBEEF")

    def test_octal_rejects_eight(self) -> None:
        assert digit_pattern(Notation.OCTAL).fullmatch("178") is None

    @pytest.mark.parametrize(
        ("notation", "text"),
        [
            (Notation.BINARY, "１"),
            (Notation.OCTAL, "７"),
            (Notation.HEXADECIMAL, "Ａ"),
        ],
    )
    def test_fullwidth_digits_do_not_match(self, notation: Notation, text: str) -> None:
        assert digit_pattern(notation).fullmatch(text) is None

    def test_decimal_has_no_character_class(self) -> None:
        with pytest.raises(KeyError):
            digit_pattern(Notation.DECIMAL)


class TestDecimalPrefix:
    def test_captures_sign_fraction_and_exponent(self) -> None:
        match = DECIMAL_PREFIX.match("  -1.5e3xyz")
        assert match is not None
        assert match.group(1) == "-1.5e3"

    def test_leading_dot(self) -> None:
        match = DECIMAL_PREFIX.match(".25")
        assert match is not None
        assert match.group(1) == ".25"

    def test_no_numeral(self) -> None:
        assert DECIMAL_PREFIX.match("abc") is None


class TestRomanGrammar:
    def test_grammar_allows_four_thousands(self) -> None:
        assert GRAMMAR_ROMAN.startswith("M{0,4}")
        assert ROMAN_PATTERN.fullmatch("MMMM")

    def test_grammar_rejects_five_thousands(self) -> None:
        assert ROMAN_PATTERN.fullmatch("MMMMM") is None

    def test_grammar_rejects_non_canonical_repetition(self) -> None:
        assert ROMAN_PATTERN.fullmatch("IIII") is None
        assert ROMAN_PATTERN.fullmatch("VV") is None
        assert ROMAN_PATTERN.fullmatch("IC") is None

    @pytest.mark.parametrize("text", ["İ", "ı", "İV", "ıx"])
    def test_case_folding_is_ascii_only(self, text: str) -> None:
        assert ROMAN_PATTERN.fullmatch(text) is None

    def test_symbol_values(self) -> None:
        assert ROMAN_SYMBOL_VALUES == {
            "I": 1,
            "V": 5,
            "X": 10,
            "L": 50,
            "C": 100,
            "D": 500,
            "M": 1000,
        }
