"""Serialization of conversion outcomes.

Converts ``ConversionResult`` and ``ConversionError`` values to and from
plain dicts, and from there to JSON and YAML.  The dict form carries a
``"kind"`` discriminator so that ``from_dict`` can tell the two apart.

Usage
-----
::

    from numconv.engine import convert
    from numconv.serializer import ResultSerializer

    serializer = ResultSerializer()
    text = serializer.to_json(convert("255", "10"))
    outcome = serializer.from_json(text)
"""
from __future__ import annotations

import json
from collections.abc import Sequence

import yaml

from numconv.grammar.notation import Notation
from numconv.result import ConversionError, ConversionResult, ErrorKind, Outcome


class ResultSerializer:
    """Converts between conversion outcomes and JSON/YAML-compatible dicts."""

    # ------------------------------------------------------------------
    # Serialization (outcome → dict)
    # ------------------------------------------------------------------

    def to_dict(self, outcome: Outcome) -> dict[str, object]:
        """Serialize a single outcome to a JSON-compatible dict."""
        if isinstance(outcome, ConversionError):
            return {
                "kind": "ConversionError",
                "error": outcome.kind.name,
                "notation": outcome.notation.value if outcome.notation is not None else None,
                "reason": outcome.reason,
                "input": outcome.raw,
            }
        return {
            "kind": "ConversionResult",
            "source": outcome.source.value,
            "value": outcome.value,
            **outcome.as_dict(),
        }

    def to_list(self, outcomes: Sequence[Outcome]) -> list[dict[str, object]]:
        return [self.to_dict(o) for o in outcomes]

    # ------------------------------------------------------------------
    # Deserialization (dict → outcome)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Outcome:
        """Rebuild an outcome from the output of ``to_dict``.

        Raises
        ------
        ValueError
            If ``data`` has an unknown ``"kind"``.
        """
        kind = data.get("kind")
        if kind == "ConversionError":
            notation = data.get("notation")
            return ConversionError(
                kind=ErrorKind[str(data["error"])],
                notation=Notation.parse(str(notation)) if notation is not None else None,
                reason=str(data.get("reason", "")),
                raw=str(data.get("input", "")),
            )
        if kind == "ConversionResult":
            return ConversionResult(
                value=int(data["value"]),  # type: ignore[arg-type]
                source=Notation.parse(str(data["source"])),
                decimal=str(data["decimal"]),
                binary=str(data["binary"]),
                octal=str(data["octal"]),
                hexadecimal=str(data["hexadecimal"]),
                roman=str(data["roman"]),
            )
        raise ValueError(f"Unknown outcome kind: {kind!r}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, outcome: Outcome | Sequence[Outcome], indent: int = 2) -> str:
        """Serialize one outcome, or a list of them, to a JSON string."""
        return json.dumps(self._plain(outcome), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Outcome:
        """Deserialize a single outcome from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, outcome: Outcome | Sequence[Outcome]) -> str:
        """Serialize one outcome, or a list of them, to a YAML string."""
        return yaml.dump(
            self._plain(outcome),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def from_yaml(self, text: str) -> Outcome:
        """Deserialize a single outcome from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)

    def _plain(self, outcome: Outcome | Sequence[Outcome]) -> object:
        if isinstance(outcome, (ConversionResult, ConversionError)):
            return self.to_dict(outcome)
        return self.to_list(outcome)
