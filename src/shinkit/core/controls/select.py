"""
どこで: `src/shinkit/core/controls/select.py`。選択肢要素の登録。
何を: choices と選択値を持つセレクトボックスの既定値と検証を定義する。
なぜ: value 省略時に先頭の選択肢を採用する規則を 1 箇所に置くため。
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from shinkit.core.elements.descriptor import ElementConfigError
from shinkit.core.elements.kind_registry import element_kind


@element_kind("select", defaults={"choices": (), "value": None}, value_type="choice")
def select(element_id: str, fields: dict[str, Any]) -> dict[str, Any]:
    """セレクトボックスのフィールドを検証して返す。

    choices は tuple[str, ...] に正規化する。value が None の場合は先頭の選択肢を使う。
    """
    raw_choices = fields["choices"]
    if isinstance(raw_choices, (str, bytes)) or not isinstance(raw_choices, Sequence):
        raise ElementConfigError(
            f"{element_id}: choices は Sequence[str] である必要があります: got={raw_choices!r}"
        )
    choices = tuple(str(c) for c in raw_choices)
    if not choices:
        raise ElementConfigError(f"{element_id}: choices が空です")

    value = fields["value"]
    if value is None:
        value = choices[0]
    elif str(value) not in choices:
        raise ElementConfigError(f"{element_id}: value が choices にありません: {value!r}")
    return {"choices": choices, "value": str(value)}
