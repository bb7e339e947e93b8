"""User-facing messages for conversion errors.

The engine reports only an ``ErrorKind`` and the offending notation; the
wording shown to people lives here.
"""
from __future__ import annotations

from numconv.result import ConversionError, ErrorKind


def error_message(error: ConversionError) -> str:
    """Return the display message for ``error``.

    ``EMPTY_INPUT`` reads "Please enter a number", ``INVALID_ROMAN`` reads
    "Invalid Roman numeral" and ``INVALID_DIGIT`` names the notation, e.g.
    "Invalid Hexadecimal number".
    """
    if error.kind is ErrorKind.EMPTY_INPUT:
        return "Please enter a number"
    if error.kind is ErrorKind.INVALID_ROMAN:
        return "Invalid Roman numeral"
    label = error.notation.label if error.notation is not None else "Unknown"
    return f"Invalid {label} number"
