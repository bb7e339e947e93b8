"""Roman numeral codec.

Decoding checks the whole string against the structural grammar in
``numconv.grammar.patterns`` and then sums symbol values left to right,
subtracting a symbol whose value is smaller than its successor's.

Encoding is the greedy algorithm over the subtractive table below.  It is
canonical for the closed interval ``[ROMAN_MIN, ROMAN_MAX]``; any other
value yields the ``ROMAN_OUT_OF_RANGE`` sentinel instead of a numeral.

Usage
-----
::

    from numconv.roman import RomanNumeralCodec

    codec = RomanNumeralCodec()
    codec.decode("xiv")   # 14
    codec.encode(1994)    # 'MCMXCIV'
    codec.encode(0)       # 'Out of range (1-3999)'
"""
from __future__ import annotations

import logging
from typing import Final

from numconv.grammar.patterns import ROMAN_PATTERN, ROMAN_SYMBOL_VALUES

logger = logging.getLogger(__name__)

ROMAN_MIN: Final[int] = 1
ROMAN_MAX: Final[int] = 3999
ROMAN_OUT_OF_RANGE: Final[str] = f"Out of range ({ROMAN_MIN}-{ROMAN_MAX})"

_ENCODE_TABLE: Final[tuple[tuple[str, int], ...]] = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)


class RomanNumeralCodec:
    """Stateless Roman numeral encoder/decoder."""

    def is_valid(self, roman: str) -> bool:
        """Return True if ``roman`` matches the structural grammar.

        The empty string is rejected even though every grammar group is
        optional.  Case folding is ASCII-only, so "ı" and "İ" are not "I".
        """
        return bool(roman) and ROMAN_PATTERN.fullmatch(roman) is not None

    def decode(self, roman: str) -> int | None:
        """Decode a Roman numeral, case-insensitively.

        Parameters
        ----------
        roman:
            The numeral text, already stripped of surrounding whitespace.

        Returns
        -------
        int | None
            The numeral's value, or ``None`` if ``roman`` does not match the
            grammar.  No range clamp is applied, so ``"MMMM"`` decodes to
            4000.
        """
        if not self.is_valid(roman):
            logger.debug("Rejected %r: not a well-formed Roman numeral", roman)
            return None

        text = roman.upper()
        total = 0
        for i, symbol in enumerate(text):
            current = ROMAN_SYMBOL_VALUES[symbol]
            following = ROMAN_SYMBOL_VALUES[text[i + 1]] if i + 1 < len(text) else 0
            if current < following:
                total -= current
            else:
                total += current
        return total

    def encode(self, value: int) -> str:
        """Encode ``value`` as an uppercase Roman numeral.

        Returns
        -------
        str
            The numeral, or ``ROMAN_OUT_OF_RANGE`` if ``value`` lies outside
            ``[ROMAN_MIN, ROMAN_MAX]``.
        """
        if not ROMAN_MIN <= value <= ROMAN_MAX:
            return ROMAN_OUT_OF_RANGE

        parts: list[str] = []
        remainder = value
        for symbol, amount in _ENCODE_TABLE:
            while remainder >= amount:
                parts.append(symbol)
                remainder -= amount
        return "".join(parts)


_DEFAULT_CODEC = RomanNumeralCodec()


def decode_roman(roman: str) -> int | None:
    """Convenience function: decode with the default codec."""
    return _DEFAULT_CODEC.decode(roman)


def encode_roman(value: int) -> str:
    """Convenience function: encode with the default codec."""
    return _DEFAULT_CODEC.encode(value)
