"""Input validation: character-grammar checks run before numeric parsing.

The ``InputValidator`` answers one question: may this raw string be
handed to the parser for the requested notation?  It returns ``None``
when the answer is yes and a ``ConversionError`` describing the problem
otherwise.

Per-notation rules
------------------
BINARY, OCTAL, HEXADECIMAL
    The stripped text must consist solely of the base's digits (``[0-1]``,
    ``[0-7]``, ``[0-9A-F]``, any case).  Signs, fractions, prefixes and
    separators are rejected.
DECIMAL
    Only the empty check applies.  Signs and fractions are the parser's
    concern.
ROMAN
    Delegated to ``RomanNumeralCodec.is_valid``.

Usage
-----
::

    from numconv.grammar import Notation
    from numconv.validator import InputValidator

    error = InputValidator().validate("1F", Notation.OCTAL)
    if error is not None:
        print(error.reason)
"""
from __future__ import annotations

import logging

from numconv.grammar.notation import Notation
from numconv.grammar.patterns import DIGIT_PATTERNS
from numconv.result import ConversionError, ErrorKind
from numconv.roman.codec import RomanNumeralCodec

logger = logging.getLogger(__name__)


class InputValidator:
    """Character-grammar validator for raw input.

    Parameters
    ----------
    roman_codec:
        Codec used for the Roman grammar check.  Defaults to a fresh
        ``RomanNumeralCodec``.
    """

    def __init__(self, roman_codec: RomanNumeralCodec | None = None) -> None:
        self._roman_codec = roman_codec if roman_codec is not None else RomanNumeralCodec()

    def validate(self, raw: str, notation: Notation) -> ConversionError | None:
        """Check ``raw`` against the grammar of ``notation``.

        Parameters
        ----------
        raw:
            Input text; surrounding whitespace is ignored.
        notation:
            The notation the text claims to be written in.

        Returns
        -------
        ConversionError | None
            ``None`` if the text may be parsed, otherwise the failure.
        """
        text = raw.strip()
        if not text:
            return ConversionError(
                kind=ErrorKind.EMPTY_INPUT,
                notation=notation,
                reason="input is empty",
                raw=text,
            )

        if notation is Notation.DECIMAL:
            return None

        if notation is Notation.ROMAN:
            if self._roman_codec.is_valid(text):
                return None
            return ConversionError(
                kind=ErrorKind.INVALID_ROMAN,
                notation=notation,
                reason=f"{text!r} is not a well-formed Roman numeral",
                raw=text,
            )

        if DIGIT_PATTERNS[notation].fullmatch(text) is not None:
            return None

        offending = next(
            ch for ch in text if DIGIT_PATTERNS[notation].fullmatch(ch) is None
        )
        logger.debug("Rejected %r as %s: bad digit %r", text, notation.label, offending)
        return ConversionError(
            kind=ErrorKind.INVALID_DIGIT,
            notation=notation,
            reason=f"{offending!r} is not a valid {notation.label.lower()} digit",
            raw=text,
        )

    def is_valid(self, raw: str, notation: Notation) -> bool:
        """Return True if ``raw`` passes validation for ``notation``."""
        return self.validate(raw, notation) is None


def validate(raw: str, notation: Notation) -> ConversionError | None:
    """Convenience function: validate with a default ``InputValidator``."""
    return InputValidator().validate(raw, notation)
