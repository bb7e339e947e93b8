"""Positional (radix) parsing and formatting.

``RadixConverter`` turns a string in base 2, 8, 10 or 16 into an ``int``
and back.  Base 10 is parsed leniently, the way a browser's
``parseFloat`` reads a number: the longest leading numeral is taken
(sign, fraction and exponent allowed), the rest of the string is ignored,
and the result is floored.  Bases 2, 8 and 16 are parsed strictly over
the whole string.

Parsing never raises for bad input; it returns ``None`` and leaves the
classification of the failure to the caller.
"""
from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Final

from numconv.grammar.notation import Notation
from numconv.grammar.patterns import DECIMAL_PREFIX, digit_pattern

logger = logging.getLogger(__name__)

SUPPORTED_BASES: Final[tuple[int, ...]] = (2, 8, 10, 16)

# Largest magnitude accepted, in bits.  Keeps decimal rendering well inside
# the interpreter's int-to-str digit limit.
MAX_BITS: Final[int] = 4096

# 2**4096 has 1234 decimal digits.
_MAX_DECIMAL_EXPONENT: Final[int] = 1234

_FORMAT_SPECS: Final[dict[int, str]] = {2: "b", 8: "o", 10: "d", 16: "X"}


def _check_base(base: int) -> None:
    if base not in SUPPORTED_BASES:
        raise ValueError(f"Unsupported base {base!r}; expected one of {SUPPORTED_BASES}")


class RadixConverter:
    """Stateless converter between strings and integers in bases 2/8/10/16."""

    def parse(self, value: str, base: int) -> int | None:
        """Parse ``value`` in ``base``.

        Parameters
        ----------
        value:
            Input text.  For bases 2/8/16 it must consist solely of that
            base's digits (either case for hex).
        base:
            One of ``SUPPORTED_BASES``.

        Returns
        -------
        int | None
            The parsed integer, or ``None`` if the text holds no valid
            numeral or its magnitude exceeds ``MAX_BITS``.

        Raises
        ------
        ValueError
            If ``base`` is not supported.
        """
        _check_base(base)
        if base == 10:
            result = self._parse_decimal(value)
        else:
            result = self._parse_strict(value, base)

        if result is not None and abs(result).bit_length() > MAX_BITS:
            logger.debug("Rejected %d-bit value parsed from base %d", abs(result).bit_length(), base)
            return None
        return result

    def format(self, value: int, base: int) -> str:  # noqa: A003
        """Render ``value`` in ``base`` without leading zeros.

        Hexadecimal digits are uppercase.  Negative values are rendered as
        ``-`` followed by the magnitude.

        Raises
        ------
        ValueError
            If ``base`` is not supported.
        """
        _check_base(base)
        sign = "-" if value < 0 else ""
        return sign + format(abs(value), _FORMAT_SPECS[base])

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_decimal(value: str) -> int | None:
        match = DECIMAL_PREFIX.match(value)
        if match is None:
            return None
        try:
            number = Decimal(match.group(1))
        except InvalidOperation:
            return None
        if number.adjusted() > _MAX_DECIMAL_EXPONENT:
            return None
        return math.floor(number)

    @staticmethod
    def _parse_strict(value: str, base: int) -> int | None:
        if digit_pattern(Notation.from_base(base)).fullmatch(value) is None:
            return None
        return int(value, base)


_DEFAULT_CONVERTER = RadixConverter()


def parse_radix(value: str, base: int) -> int | None:
    """Convenience function: parse with the default converter."""
    return _DEFAULT_CONVERTER.parse(value, base)


def format_radix(value: int, base: int) -> str:
    """Convenience function: format with the default converter."""
    return _DEFAULT_CONVERTER.format(value, base)
