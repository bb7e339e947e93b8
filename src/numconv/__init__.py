"""numconv — numeral-system conversion: binary, octal, decimal, hexadecimal, Roman.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import numconv

    outcome = numconv.convert("255", numconv.Notation.DECIMAL)
    outcome.hexadecimal      # 'FF'
    outcome.roman            # 'CCLV'

    failure = numconv.convert("G", "hex")
    failure.kind             # ErrorKind.INVALID_DIGIT

    numconv.to_roman(1994)   # 'MCMXCIV'
    numconv.from_roman("iv") # 4

    numconv.__version__
    '0.1.0'
"""
from __future__ import annotations

from numconv.grammar.notation import Notation
from numconv.result import ConversionError, ConversionResult, ErrorKind, Outcome
from numconv.roman.codec import ROMAN_OUT_OF_RANGE

__version__: str = "0.1.0"


def convert(raw: str, notation: Notation | str) -> Outcome:
    """Convert ``raw``, written in ``notation``, to every supported notation.

    Parameters
    ----------
    raw:
        The input text.  Surrounding whitespace is ignored.
    notation:
        A ``Notation`` member or a token such as ``"16"`` or ``"roman"``.

    Returns
    -------
    ConversionResult | ConversionError
        All five renderings, or a typed error.  Invalid input never raises.
    """
    from numconv.engine.engine import convert as _convert

    return _convert(raw, notation)


def to_roman(value: int) -> str:
    """Encode ``value`` as a Roman numeral, or return ``ROMAN_OUT_OF_RANGE``."""
    from numconv.roman.codec import encode_roman

    return encode_roman(value)


def from_roman(text: str) -> int | None:
    """Decode a Roman numeral; ``None`` if it is not well formed."""
    from numconv.roman.codec import decode_roman

    return decode_roman(text.strip())


def parse_radix(text: str, base: int) -> int | None:
    """Parse ``text`` in base 2, 8, 10 or 16; ``None`` if it is not a number."""
    from numconv.radix.converter import parse_radix as _parse_radix

    return _parse_radix(text, base)


def format_radix(value: int, base: int) -> str:
    """Render ``value`` in base 2, 8, 10 or 16."""
    from numconv.radix.converter import format_radix as _format_radix

    return _format_radix(value, base)


__all__ = [
    "__version__",
    "convert",
    "to_roman",
    "from_roman",
    "parse_radix",
    "format_radix",
    "Notation",
    "ConversionResult",
    "ConversionError",
    "ErrorKind",
    "ROMAN_OUT_OF_RANGE",
]
