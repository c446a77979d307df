"""
どこで: `src/shinkit/core/controls/slider.py`。スライダー要素の登録。
何を: min/max/value/step を持つ数値スライダーの既定値と検証を定義する。
なぜ: 同じレンジのスライダーを多数並べる UI で、既定値を 1 箇所から引けるようにするため。
"""

from __future__ import annotations

from typing import Any

from shinkit.core.elements.kind_registry import element_kind

from ._checks import as_number, check_bounds, check_step

slider_defaults = {
    "min": 0.0,
    "max": 1.0,
    "value": 0.5,
    "step": 0.1,
}


@element_kind("slider", defaults=slider_defaults, value_type="float")
def slider(element_id: str, fields: dict[str, Any]) -> dict[str, Any]:
    """スライダーのフィールドを検証して返す。

    Raises
    ------
    ElementConfigError
        数値でないフィールド、min > max、value が範囲外、step <= 0 の場合。
    """
    lo = as_number(element_id, "min", fields["min"])
    hi = as_number(element_id, "max", fields["max"])
    value = as_number(element_id, "value", fields["value"])
    step = as_number(element_id, "step", fields["step"])
    check_bounds(element_id, lo=lo, hi=hi, value=value)
    check_step(element_id, step)
    return {"min": lo, "max": hi, "value": value, "step": step}
