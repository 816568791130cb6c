"""AST serialization and deserialization for phpexpr.

Provides round-trip serialization of ``Expression`` trees to and from
JSON and YAML.  The serialized form is a plain dict/list structure that
maps naturally to both formats.

Source text is stored as a ``str`` when it is valid UTF-8 and as
``{"base64": ...}`` otherwise, so arbitrary byte strings survive the
round trip.  Deserialized ``Slice`` values point into fresh buffers,
not into the original source.

Usage
-----
::

    from phpexpr.ast.serializer import AstSerializer

    serializer = AstSerializer()
    data = serializer.to_dict(expression)
    json_text = serializer.to_json(expression)
    expression2 = serializer.from_json(json_text)
    assert expression == expression2
"""
from __future__ import annotations

import base64
import binascii
import json

import yaml

from phpexpr.ast.nodes import (
    BoolLit,
    Echo,
    Empty,
    Expression,
    IntegerLit,
    Name,
    NameKind,
    NullLit,
    RealLit,
    Slice,
    StringLit,
    Unset,
    Variable,
)


class AstSerializer:
    """Converts between ``Expression`` AST objects and plain Python dicts.

    The serialized representation uses ``"kind"`` discriminator fields on
    union types so that deserialization is unambiguous.
    """

    # ------------------------------------------------------------------
    # Serialization (AST → dict)
    # ------------------------------------------------------------------

    def to_dict(self, expr: Expression) -> dict[str, object]:
        """Serialize an ``Expression`` to a JSON-compatible dict."""
        if isinstance(expr, Variable):
            return {"kind": "Variable", "name": self._text_to_data(bytes(expr.name))}
        if isinstance(expr, Name):
            return {
                "kind": "Name",
                "name_kind": expr.kind.name,
                "parts": [self._text_to_data(bytes(p)) for p in expr.parts],
            }
        if isinstance(expr, NullLit):
            return {"kind": "NullLit"}
        if isinstance(expr, BoolLit):
            return {"kind": "BoolLit", "value": expr.value}
        if isinstance(expr, IntegerLit):
            return {"kind": "IntegerLit", "value": expr.value}
        if isinstance(expr, RealLit):
            return {"kind": "RealLit", "value": expr.value}
        if isinstance(expr, StringLit):
            return {"kind": "StringLit", "value": self._text_to_data(expr.value)}
        if isinstance(expr, Echo):
            return {"kind": "Echo", "expressions": [self.to_dict(e) for e in expr.expressions]}
        if isinstance(expr, Unset):
            return {"kind": "Unset", "variables": [self.to_dict(v) for v in expr.variables]}
        if isinstance(expr, Empty):
            return {"kind": "Empty", "expression": self.to_dict(expr.expression)}
        raise TypeError(f"Unknown expression type: {type(expr)}")

    def _text_to_data(self, data: bytes) -> object:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return {"base64": base64.b64encode(data).decode("ascii")}

    # ------------------------------------------------------------------
    # Deserialization (dict → AST)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> Expression:
        """Deserialize an ``Expression`` from a plain dict."""
        kind = data["kind"]
        if kind == "Variable":
            return Variable(name=Slice.of(self._data_to_text(data["name"])))
        if kind == "Name":
            return Name(
                kind=NameKind[data["name_kind"]],
                parts=tuple(Slice.of(self._data_to_text(p)) for p in data["parts"]),
            )
        if kind == "NullLit":
            return NullLit()
        if kind == "BoolLit":
            return BoolLit(value=bool(data["value"]))
        if kind == "IntegerLit":
            return IntegerLit(value=int(data["value"]))
        if kind == "RealLit":
            return RealLit(value=float(data["value"]))
        if kind == "StringLit":
            return StringLit(value=self._data_to_text(data["value"]))
        if kind == "Echo":
            return Echo(expressions=tuple(self.from_dict(e) for e in data["expressions"]))
        if kind == "Unset":
            variables = tuple(self.from_dict(v) for v in data["variables"])
            if not all(isinstance(v, Variable) for v in variables):
                raise ValueError("Unset may only hold Variable nodes")
            return Unset(variables=variables)
        if kind == "Empty":
            return Empty(expression=self.from_dict(data["expression"]))
        raise ValueError(f"Unknown expression kind: {kind!r}")

    def _data_to_text(self, value: object) -> bytes:
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, dict) and "base64" in value:
            try:
                return base64.b64decode(value["base64"], validate=True)
            except binascii.Error as exc:
                raise ValueError(f"Invalid base64 payload: {exc}") from exc
        raise ValueError(f"Cannot decode source text from {value!r}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, expr: Expression, indent: int = 2) -> str:
        """Serialize an ``Expression`` to a JSON string."""
        return json.dumps(self.to_dict(expr), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> Expression:
        """Deserialize an ``Expression`` from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, expr: Expression) -> str:
        """Serialize an ``Expression`` to a YAML string."""
        return yaml.safe_dump(self.to_dict(expr), default_flow_style=False, allow_unicode=True, sort_keys=False)

    def from_yaml(self, text: str) -> Expression:
        """Deserialize an ``Expression`` from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)
