"""numconv radix module.

Exports the ``RadixConverter`` class and the ``parse_radix`` /
``format_radix`` convenience functions.
"""
from __future__ import annotations

from numconv.radix.converter import (
    MAX_BITS,
    SUPPORTED_BASES,
    RadixConverter,
    format_radix,
    parse_radix,
)

__all__ = [
    "RadixConverter",
    "parse_radix",
    "format_radix",
    "SUPPORTED_BASES",
    "MAX_BITS",
]
