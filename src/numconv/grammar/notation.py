"""Notation definitions for numconv.

Every textual numeral system the converter understands is a member of the
``Notation`` enum.  Positional notations carry their radix; Roman numerals
have no radix and are handled by a dedicated codec.
"""
from __future__ import annotations

from enum import Enum


class Notation(Enum):
    """The five supported numeral systems.

    The member value is the token used on the command line (``"2"``,
    ``"8"``, ``"10"``, ``"16"`` or ``"roman"``).
    """

    BINARY = "2"
    OCTAL = "8"
    DECIMAL = "10"
    HEXADECIMAL = "16"
    ROMAN = "roman"

    @property
    def base(self) -> int | None:
        """Return the radix of a positional notation, or ``None`` for Roman."""
        if self is Notation.ROMAN:
            return None
        return int(self.value)

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Hexadecimal"``."""
        return self.name.capitalize()

    @property
    def is_positional(self) -> bool:
        return self.base is not None

    @classmethod
    def from_base(cls, base: int) -> Notation:
        """Return the positional notation for ``base``.

        Raises
        ------
        ValueError
            If ``base`` is not one of 2, 8, 10 or 16.
        """
        for member in cls:
            if member.base == base:
                return member
        raise ValueError(f"Unsupported base {base!r}; expected one of 2, 8, 10, 16")

    @classmethod
    def parse(cls, token: str | Notation) -> Notation:
        """Resolve a CLI token, member name, label or alias to a ``Notation``.

        Matching is case-insensitive.  ``"16"``, ``"hex"``, ``"hexadecimal"``
        and ``"HEXADECIMAL"`` all resolve to ``Notation.HEXADECIMAL``.

        Raises
        ------
        ValueError
            If ``token`` does not name a notation.
        """
        if isinstance(token, Notation):
            return token
        key = str(token).strip().lower()
        notation = _ALIASES.get(key)
        if notation is None:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown notation {token!r}; expected one of {choices}")
        return notation


_ALIASES: dict[str, Notation] = {
    **{member.value: member for member in Notation},
    **{member.name.lower(): member for member in Notation},
    "bin": Notation.BINARY,
    "oct": Notation.OCTAL,
    "dec": Notation.DECIMAL,
    "hex": Notation.HEXADECIMAL,
}
