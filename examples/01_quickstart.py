#!/usr/bin/env python3
"""Example: Quickstart — numconv

Minimal working example: convert a few values between notations and
show how failures come back as values.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install numconv
"""
from __future__ import annotations

import numconv
from numconv import Notation

INPUTS: list[tuple[str, Notation]] = [
    ("255", Notation.DECIMAL),
    ("XIV", Notation.ROMAN),
    ("deadbeef", Notation.HEXADECIMAL),
    ("MMMM", Notation.ROMAN),
    ("G", Notation.HEXADECIMAL),
    ("", Notation.DECIMAL),
]


def main() -> None:
    print(f"numconv version: {numconv.__version__}")

    for raw, notation in INPUTS:
        outcome = numconv.convert(raw, notation)
        print(f"\n{raw!r} as {notation.label}:")

        if isinstance(outcome, numconv.ConversionError):
            print(f"  error: {outcome.kind.name} ({outcome.reason})")
            continue

        for name, rendering in outcome.as_dict().items():
            print(f"  {name:<12} {rendering}")

    # The Roman helpers work on their own too
    print(f"\n1994 -> {numconv.to_roman(1994)}")
    print(f"mcmxciv -> {numconv.from_roman('mcmxciv')}")


if __name__ == "__main__":
    main()
