"""
どこで: `src/shinkit/core/controls/numeric.py`。数値入力要素の登録。
何を: 範囲が任意（None 可）の数値入力の既定値と検証を定義する。
"""

from __future__ import annotations

from typing import Any

from shinkit.core.elements.kind_registry import element_kind

from ._checks import as_number, as_optional_number, check_bounds, check_step


@element_kind(
    "numeric",
    defaults={"min": None, "max": None, "value": 0.0, "step": None},
    value_type="float",
)
def numeric(element_id: str, fields: dict[str, Any]) -> dict[str, Any]:
    lo = as_optional_number(element_id, "min", fields["min"])
    hi = as_optional_number(element_id, "max", fields["max"])
    value = as_number(element_id, "value", fields["value"])
    step = as_optional_number(element_id, "step", fields["step"])
    check_bounds(element_id, lo=lo, hi=hi, value=value)
    check_step(element_id, step)
    return {"min": lo, "max": hi, "value": value, "step": step}
