"""Result and error types returned by the conversion engine.

A conversion either succeeds with a ``ConversionResult`` carrying every
rendering of the canonical value, or fails with a single
``ConversionError``.  Both are plain values: the engine returns them and
never raises for invalid input.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from numconv.grammar.notation import Notation
from numconv.roman.codec import ROMAN_OUT_OF_RANGE


class ErrorKind(Enum):
    """Reasons a conversion can fail."""

    EMPTY_INPUT = auto()
    INVALID_DIGIT = auto()
    INVALID_ROMAN = auto()


@dataclass(frozen=True)
class ConversionError:
    """A failed conversion.

    Parameters
    ----------
    kind:
        What went wrong.
    notation:
        The input notation that triggered the failure, if known.
    reason:
        Short human-readable explanation, e.g.
        ``"'G' is not a valid hexadecimal digit"``.
    raw:
        The stripped input text.
    """

    kind: ErrorKind
    notation: Notation | None
    reason: str = field(default="")
    raw: str = field(default="")

    is_error = True

    def __str__(self) -> str:
        where = f" ({self.notation.label})" if self.notation is not None else ""
        reason_part = f": {self.reason}" if self.reason else ""
        return f"{self.kind.name}{where}{reason_part}"


@dataclass(frozen=True)
class ConversionResult:
    """A successful conversion: one canonical value, five renderings.

    Parameters
    ----------
    value:
        The canonical integer.
    source:
        The notation the input was written in.
    decimal, binary, octal, hexadecimal:
        Positional renderings of ``value``.
    roman:
        Roman rendering, or ``ROMAN_OUT_OF_RANGE`` when ``value`` cannot be
        written as a Roman numeral.
    """

    value: int
    source: Notation
    decimal: str
    binary: str
    octal: str
    hexadecimal: str
    roman: str

    is_error = False

    @property
    def roman_in_range(self) -> bool:
        """Return True if the Roman field holds a numeral, not the sentinel."""
        return self.roman != ROMAN_OUT_OF_RANGE

    def render(self, notation: Notation) -> str:
        """Return the rendering for ``notation``."""
        return getattr(self, notation.name.lower())

    def as_dict(self) -> dict[str, str]:
        """Return the five renderings keyed by field name, in display order."""
        return {
            "decimal": self.decimal,
            "binary": self.binary,
            "octal": self.octal,
            "hexadecimal": self.hexadecimal,
            "roman": self.roman,
        }


Outcome = ConversionResult | ConversionError
