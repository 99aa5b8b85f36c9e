"""
Serialization helpers for expressions and truth tables.

Truth table rows use the wire shape consumed by display layers:

    {"Result": true, "Variables": [{"Name": "A", "Value": false}, ...]}

Key names and their order are part of the contract and must not change.
Expressions round-trip losslessly through an explicit dict form.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

import yaml

from truthtable.expressions import (
    Expression,
    BinaryExpression,
    VariableReference,
    Literal,
    UnaryExpression,
    BinaryOperator,
    UnaryOperator,
)
from truthtable.table import TruthTableRow, TruthTableVariable


def expr_to_dict(expr: Expression) -> Dict[str, Any]:
    if isinstance(expr, BinaryExpression):
        return {
            "type": "binary",
            "operator": expr.operator.value,
            "left": expr_to_dict(expr.left),
            "right": expr_to_dict(expr.right),
        }
    if isinstance(expr, VariableReference):
        return {"type": "var", "name": expr.name}
    if isinstance(expr, Literal):
        return {"type": "lit", "value": expr.value}
    if isinstance(expr, UnaryExpression):
        return {
            "type": "unary",
            "operator": expr.operator.value,
            "operand": expr_to_dict(expr.operand),
        }
    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def expr_from_dict(d: Dict[str, Any]) -> Expression:
    t = d.get("type")
    if t == "binary":
        op = BinaryOperator(d["operator"])
        left = expr_from_dict(d["left"])
        right = expr_from_dict(d["right"])
        return BinaryExpression(operator=op, left=left, right=right)
    if t == "var":
        return VariableReference(d["name"])
    if t == "lit":
        return Literal(bool(d["value"]))
    if t == "unary":
        op = UnaryOperator(d["operator"])
        operand = expr_from_dict(d["operand"])
        return UnaryExpression(operator=op, operand=operand)
    raise TypeError(f"Unsupported expression dict type: {t}")


def expr_to_json(expr: Expression) -> str:
    return json.dumps(expr_to_dict(expr))


def expr_from_json(s: str) -> Expression:
    return expr_from_dict(json.loads(s))


def row_to_dict(row: TruthTableRow) -> Dict[str, Any]:
    return {
        "Result": row.result,
        "Variables": [{"Name": v.name, "Value": v.value} for v in row.variables],
    }


def row_from_dict(d: Dict[str, Any]) -> TruthTableRow:
    return TruthTableRow(
        result=bool(d["Result"]),
        variables=tuple(
            TruthTableVariable(name=v["Name"], value=bool(v["Value"]))
            for v in d.get("Variables", [])
        ),
    )


def table_to_dicts(rows: Sequence[TruthTableRow]) -> List[Dict[str, Any]]:
    return [row_to_dict(r) for r in rows]


def table_from_dicts(data: Sequence[Dict[str, Any]]) -> List[TruthTableRow]:
    return [row_from_dict(d) for d in data]


def table_to_json(rows: Sequence[TruthTableRow]) -> str:
    # Key order is the contract, so no sort_keys here
    return json.dumps(table_to_dicts(rows))


def table_from_json(s: str) -> List[TruthTableRow]:
    return table_from_dicts(json.loads(s))


def table_to_yaml(rows: Sequence[TruthTableRow]) -> str:
    return yaml.safe_dump(table_to_dicts(rows), sort_keys=False)


def table_from_yaml(s: str) -> List[TruthTableRow]:
    return table_from_dicts(yaml.safe_load(s) or [])


__all__ = [
    "expr_to_dict",
    "expr_from_dict",
    "expr_to_json",
    "expr_from_json",
    "row_to_dict",
    "row_from_dict",
    "table_to_dicts",
    "table_from_dicts",
    "table_to_json",
    "table_from_json",
    "table_to_yaml",
    "table_from_yaml",
]
