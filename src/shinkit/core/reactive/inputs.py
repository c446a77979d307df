# どこで: `src/shinkit/core/reactive/inputs.py`。
# 何を: 要素 id をキーにした入力値ストア（InputStore）と、UI 入力の正規化関数を提供する。
# なぜ: 計算のバインド側が id から現在値と版数を引けるようにし、型変換・検証を単体テスト可能に保つため。

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

from shinkit.core.elements.descriptor import ElementDescriptor
from shinkit.core.elements.kind_registry import element_kind_registry
from shinkit.core.layout.composition import Composition, DuplicateIdError

from .context import guard_reactive_read
from .value import ReactiveValue

_logger = logging.getLogger(__name__)


def normalize_input(
    value: Any,
    value_type: str,
    *,
    choices: Sequence[str] | None = None,
) -> tuple[Any | None, str | None]:
    """value_type に応じて UI 入力を正規化し、(正規化値, エラー種別) を返す。"""

    if value_type == "bool":
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"true", "1", "on", "yes"}:
                return True, None
            if lowered in {"false", "0", "off", "no"}:
                return False, None
            return None, "invalid_bool"
        return bool(value), None

    if value_type == "int":
        try:
            return int(value), None
        except (TypeError, ValueError):
            return None, "invalid_int"

    if value_type == "float":
        if isinstance(value, bool):
            return None, "invalid_float"
        try:
            f = float(value)
        except (TypeError, ValueError):
            return None, "invalid_float"
        if not math.isfinite(f):
            return None, "invalid_float"
        return f, None

    if value_type == "str":
        if value is None:
            return "", None
        return str(value), None

    if value_type == "choice":
        # choice は str として扱い、choices 外の場合は先頭に丸める
        text = str(value)
        options = list(choices) if choices is not None else []
        if options and text not in options:
            return options[0], "choice_coerced"
        return text, None

    # 未知 type はそのまま返す
    return value, None


def _out_of_bounds(descriptor: ElementDescriptor, value: Any) -> bool:
    """descriptor の min / max（存在し None でないもの）の外側なら True を返す。"""

    lo = descriptor.get("min")
    hi = descriptor.get("max")
    if lo is not None and value < lo:
        return True
    if hi is not None and value > hi:
        return True
    return False


class InputStore:
    """要素 id -> ReactiveValue を保持する入力値ストア。

    Notes
    -----
    - 初期値は descriptor の `value` フィールド。
    - `set()` は descriptor の kind に応じて入力を正規化してから反映する。
    """

    def __init__(self) -> None:
        self._values: dict[str, ReactiveValue] = {}
        self._descriptors: dict[str, ElementDescriptor] = {}

    @classmethod
    def from_elements(cls, elements: Iterable[ElementDescriptor]) -> "InputStore":
        store = cls()
        for d in elements:
            store.add(d)
        return store

    @classmethod
    def from_composition(cls, composition: Composition) -> "InputStore":
        """コンポジション内の全要素を初期値つきで登録したストアを返す。"""
        return cls.from_elements(composition.iter_elements())

    def add(self, descriptor: ElementDescriptor) -> ReactiveValue:
        """descriptor を登録し、対応する ReactiveValue を返す。

        Raises
        ------
        DuplicateIdError
            同じ id が既に登録されている場合。
        """

        if descriptor.id in self._values:
            raise DuplicateIdError(f"入力ストアに同じ id が既に登録されています: {descriptor.id}")
        reactive = ReactiveValue(descriptor.get("value"), name=f"input[{descriptor.id!r}]")
        self._values[descriptor.id] = reactive
        self._descriptors[descriptor.id] = descriptor
        return reactive

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._values

    def __len__(self) -> int:
        return len(self._values)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._values)

    def descriptor(self, element_id: str) -> ElementDescriptor:
        return self._descriptors[element_id]

    def reactive(self, element_id: str) -> ReactiveValue:
        """id に対応する ReactiveValue を返す。

        Raises
        ------
        KeyError
            未登録の id の場合。
        """
        try:
            return self._values[element_id]
        except KeyError:
            raise KeyError(f"入力ストアに未登録の id です: {element_id!r}") from None

    def value(self, element_id: str) -> Any:
        """id の現在値を返す。"""
        return self.reactive(element_id).get()

    def snapshot(self, ids: Iterable[str] | None = None) -> dict[str, Any]:
        """指定 id（省略時は全 id）の現在値を dict で返す。"""

        guard_reactive_read("InputStore.snapshot")
        keys = self.ids() if ids is None else tuple(ids)
        return {k: self.reactive(k)._peek()[0] for k in keys}

    def set(self, element_id: str, raw_value: Any) -> tuple[bool, str | None]:
        """UI から渡された入力を正規化して反映し、(成功, エラー種別) を返す。

        数値型の要素では、非有限値と descriptor の min / max の外側の値を拒否し、
        現在値は変更しない（エラー種別は "invalid_float" / "out_of_range"）。
        """

        reactive = self.reactive(element_id)
        d = self._descriptors[element_id]
        value_type = element_kind_registry.get(d.kind).value_type
        normalized, err = normalize_input(raw_value, value_type, choices=d.get("choices"))
        if normalized is None and err is not None:
            _logger.warning("入力値を正規化できませんでした: id=%s value=%r err=%s", element_id, raw_value, err)
            return False, err
        if value_type in {"float", "int"} and _out_of_bounds(d, normalized):
            _logger.warning(
                "入力値が範囲外です: id=%s value=%r min=%r max=%r",
                element_id,
                normalized,
                d.get("min"),
                d.get("max"),
            )
            return False, "out_of_range"
        reactive.set(normalized)
        return True, err


__all__ = ["InputStore", "normalize_input"]
