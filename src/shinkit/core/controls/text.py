"""
どこで: `src/shinkit/core/controls/text.py`。テキスト入力要素の登録。
"""

from __future__ import annotations

from typing import Any

from shinkit.core.elements.kind_registry import element_kind

from ._checks import as_text


@element_kind("text", defaults={"value": "", "placeholder": ""}, value_type="str")
def text(element_id: str, fields: dict[str, Any]) -> dict[str, Any]:
    return {
        "value": as_text(element_id, "value", fields["value"]),
        "placeholder": as_text(element_id, "placeholder", fields["placeholder"]),
    }
