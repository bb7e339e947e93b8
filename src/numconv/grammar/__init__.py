"""numconv grammar module.

Exports the ``Notation`` enumeration and the compiled character-class and
Roman-numeral grammar patterns.
"""
from __future__ import annotations

from numconv.grammar.notation import Notation
from numconv.grammar.patterns import (
    DECIMAL_PREFIX,
    DIGIT_PATTERNS,
    GRAMMAR_ROMAN,
    ROMAN_PATTERN,
    ROMAN_SYMBOL_VALUES,
    digit_pattern,
)

__all__ = [
    "Notation",
    "DECIMAL_PREFIX",
    "DIGIT_PATTERNS",
    "GRAMMAR_ROMAN",
    "ROMAN_PATTERN",
    "ROMAN_SYMBOL_VALUES",
    "digit_pattern",
]
