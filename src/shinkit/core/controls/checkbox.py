"""
どこで: `src/shinkit/core/controls/checkbox.py`。チェックボックス要素の登録。
"""

from __future__ import annotations

from typing import Any

from shinkit.core.elements.descriptor import ElementConfigError
from shinkit.core.elements.kind_registry import element_kind


@element_kind("checkbox", defaults={"value": False}, value_type="bool")
def checkbox(element_id: str, fields: dict[str, Any]) -> dict[str, Any]:
    value = fields["value"]
    if not isinstance(value, bool):
        raise ElementConfigError(f"{element_id}: value は bool である必要があります: got={value!r}")
    return {"value": value}
