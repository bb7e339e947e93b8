"""numconv validator module.

Exports the ``InputValidator`` class and the ``validate`` convenience
function.
"""
from __future__ import annotations

from numconv.validator.validator import InputValidator, validate

__all__ = [
    "InputValidator",
    "validate",
]
