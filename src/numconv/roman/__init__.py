"""numconv Roman numeral module.

Exports the ``RomanNumeralCodec`` class, the ``encode_roman`` and
``decode_roman`` convenience functions, and the range constants.
"""
from __future__ import annotations

from numconv.roman.codec import (
    ROMAN_MAX,
    ROMAN_MIN,
    ROMAN_OUT_OF_RANGE,
    RomanNumeralCodec,
    decode_roman,
    encode_roman,
)

__all__ = [
    "RomanNumeralCodec",
    "decode_roman",
    "encode_roman",
    "ROMAN_MIN",
    "ROMAN_MAX",
    "ROMAN_OUT_OF_RANGE",
]
