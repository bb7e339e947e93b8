"""numconv engine module.

Exports the ``ConversionEngine`` class and the ``convert`` convenience
function.
"""
from __future__ import annotations

from numconv.engine.engine import ConversionEngine, Outcome, convert

__all__ = [
    "ConversionEngine",
    "Outcome",
    "convert",
]
