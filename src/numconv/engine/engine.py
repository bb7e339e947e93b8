"""Conversion engine: raw text in one notation to renderings in all five.

``ConversionEngine.convert`` is a single-pass pipeline:

1. strip the input and reject it if empty;
2. Roman input is decoded by ``RomanNumeralCodec``;
3. positional input is checked by ``InputValidator`` and parsed by
   ``RadixConverter`` in the notation's base;
4. the canonical value is rendered in bases 10, 2, 8 and 16, and as a
   Roman numeral (or the out-of-range sentinel).

The engine keeps no state between calls.  Expected failures come back as
``ConversionError`` values; a result is never partially populated.

Usage
-----
::

    from numconv.engine import ConversionEngine
    from numconv.grammar import Notation

    outcome = ConversionEngine().convert("255", Notation.DECIMAL)
    if outcome.is_error:
        print(outcome.kind)
    else:
        print(outcome.hexadecimal)   # 'FF'
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from numconv.grammar.notation import Notation
from numconv.radix.converter import RadixConverter
from numconv.result import ConversionError, ConversionResult, ErrorKind, Outcome
from numconv.roman.codec import RomanNumeralCodec
from numconv.validator.validator import InputValidator

logger = logging.getLogger(__name__)


class ConversionEngine:
    """Orchestrates validation, parsing and rendering.

    Parameters
    ----------
    validator:
        Character-grammar validator.  Defaults to an ``InputValidator``
        sharing this engine's Roman codec.
    radix:
        Positional parser/formatter.  Defaults to ``RadixConverter()``.
    roman:
        Roman numeral codec.  Defaults to ``RomanNumeralCodec()``.
    """

    def __init__(
        self,
        validator: InputValidator | None = None,
        radix: RadixConverter | None = None,
        roman: RomanNumeralCodec | None = None,
    ) -> None:
        self._roman: RomanNumeralCodec = roman if roman is not None else RomanNumeralCodec()
        self._radix: RadixConverter = radix if radix is not None else RadixConverter()
        self._validator: InputValidator = (
            validator if validator is not None else InputValidator(roman_codec=self._roman)
        )

    def convert(self, raw: str, source_notation: Notation | str) -> Outcome:
        """Convert ``raw`` written in ``source_notation`` to every notation.

        Parameters
        ----------
        raw:
            The input text.  Surrounding whitespace is ignored.
        source_notation:
            A ``Notation`` or any token accepted by ``Notation.parse``.

        Returns
        -------
        ConversionResult | ConversionError
            All five renderings, or the reason the input was rejected.

        Raises
        ------
        TypeError
            If ``raw`` is not a string.
        ValueError
            If ``source_notation`` does not name a notation.
        """
        if not isinstance(raw, str):
            raise TypeError(f"raw input must be str, not {type(raw).__name__}")
        notation = Notation.parse(source_notation)
        text = raw.strip()

        if not text:
            return ConversionError(
                kind=ErrorKind.EMPTY_INPUT,
                notation=notation,
                reason="input is empty",
            )

        if notation is Notation.ROMAN:
            value = self._roman.decode(text)
            if value is None:
                return ConversionError(
                    kind=ErrorKind.INVALID_ROMAN,
                    notation=notation,
                    reason=f"{text!r} is not a well-formed Roman numeral",
                    raw=text,
                )
        else:
            error = self._validator.validate(text, notation)
            if error is not None:
                return error
            assert notation.base is not None
            value = self._radix.parse(text, notation.base)
            if value is None:
                return ConversionError(
                    kind=ErrorKind.INVALID_DIGIT,
                    notation=notation,
                    reason=f"{text!r} is not a valid {notation.label.lower()} number",
                    raw=text,
                )

        logger.debug("Parsed %r as %s: canonical value %d", text, notation.label, value)
        return self.render(value, source=notation)

    def render(self, value: int, source: Notation = Notation.DECIMAL) -> ConversionResult:
        """Render a canonical ``value`` in all five notations."""
        return ConversionResult(
            value=value,
            source=source,
            decimal=self._radix.format(value, 10),
            binary=self._radix.format(value, 2),
            octal=self._radix.format(value, 8),
            hexadecimal=self._radix.format(value, 16),
            roman=self._roman.encode(value),
        )

    def convert_many(
        self, items: Iterable[str], source_notation: Notation | str
    ) -> list[Outcome]:
        """Convert each item independently; one outcome per item, in order."""
        notation = Notation.parse(source_notation)
        return [self.convert(item, notation) for item in items]


_DEFAULT_ENGINE = ConversionEngine()


def convert(raw: str, source_notation: Notation | str) -> Outcome:
    """Convenience function: convert with the default engine."""
    return _DEFAULT_ENGINE.convert(raw, source_notation)
