"""Formal grammars for the supported notations.

Positional notations are described by a single character class that must
cover the whole input.  Roman numerals are described by a structural
grammar: one group per decimal place, thousands first.

Grammar notation used here:
    ``{m,n}``   between m and n repetitions
    ``|``       alternation
    ``?``       optional (zero or one)
"""
from __future__ import annotations

import re
from typing import Final

from numconv.grammar.notation import Notation

# ---------------------------------------------------------------------------
# Positional notations
# ---------------------------------------------------------------------------

# ASCII-only case folding: no non-ASCII letter may stand in for a digit.
DIGIT_PATTERNS: Final[dict[Notation, re.Pattern[str]]] = {
    Notation.BINARY: re.compile(r"[0-1]+", re.IGNORECASE | re.ASCII),
    Notation.OCTAL: re.compile(r"[0-7]+", re.IGNORECASE | re.ASCII),
    Notation.HEXADECIMAL: re.compile(r"[0-9A-F]+", re.IGNORECASE | re.ASCII),
}

# Leading numeral accepted for decimal input; anything after it is ignored.
DECIMAL_PREFIX: Final[re.Pattern[str]] = re.compile(
    r"\s*([+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)

# ---------------------------------------------------------------------------
# Roman numerals
# ---------------------------------------------------------------------------

# Four leading Ms are allowed, so the grammar admits MMMM (4000).
GRAMMAR_ROMAN: Final[str] = (
    "M{0,4}"
    "(CM|CD|D?C{0,3})"
    "(XC|XL|L?X{0,3})"
    "(IX|IV|V?I{0,3})"
)

# ASCII-only case folding: "İ" must not match "I".
ROMAN_PATTERN: Final[re.Pattern[str]] = re.compile(GRAMMAR_ROMAN, re.IGNORECASE | re.ASCII)

ROMAN_SYMBOL_VALUES: Final[dict[str, int]] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def digit_pattern(notation: Notation) -> re.Pattern[str]:
    """Return the character-class pattern for a binary, octal or hex notation.

    Raises
    ------
    KeyError
        If ``notation`` has no character-class grammar (decimal, Roman).
    """
    return DIGIT_PATTERNS[notation]
