# どこで: `src/shinkit/core/controls/_checks.py`。
# 何を: 組み込み要素の検証関数で共通に使う型変換・範囲チェックを提供する。
# なぜ: kind ごとの検証で同じエラーメッセージと変換規則を使うため。

from __future__ import annotations

import math
from typing import Any

from shinkit.core.elements.descriptor import ElementConfigError


def as_number(element_id: str, name: str, value: Any) -> float | int:
    """数値フィールドを検証して返す（bool は数値として扱わない）。"""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ElementConfigError(f"{element_id}: {name} は数値である必要があります: got={value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ElementConfigError(f"{element_id}: {name} は有限値である必要があります: got={value!r}")
    return value


def as_optional_number(element_id: str, name: str, value: Any) -> float | int | None:
    if value is None:
        return None
    return as_number(element_id, name, value)


def check_bounds(
    element_id: str,
    *,
    lo: float | int | None,
    hi: float | int | None,
    value: float | int | None,
) -> None:
    """min <= value <= max を検証する（None の端は無制限）。"""

    if lo is not None and hi is not None and lo > hi:
        raise ElementConfigError(f"{element_id}: min は max 以下である必要があります: min={lo} max={hi}")
    if value is None:
        return
    if lo is not None and value < lo:
        raise ElementConfigError(f"{element_id}: value が min を下回っています: value={value} min={lo}")
    if hi is not None and value > hi:
        raise ElementConfigError(f"{element_id}: value が max を上回っています: value={value} max={hi}")


def check_step(element_id: str, step: float | int | None) -> None:
    if step is not None and step <= 0:
        raise ElementConfigError(f"{element_id}: step は正の値である必要があります: got={step}")


def as_text(element_id: str, name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ElementConfigError(f"{element_id}: {name} は str である必要があります: got={value!r}")
    return value
