# どこで: `src/shinkit/core/reactive/value.py`。
# 何を: スナップショット読み取りと版数（version）を持つ ReactiveValue を定義する。
# なぜ: 計算のバインド側が「前回から値が変わったか」を版数だけで判定できるようにするため。

from __future__ import annotations

import logging
from typing import Any

from .context import guard_reactive_read

_logger = logging.getLogger(__name__)


class ReactiveValue:
    """現在値を読み取れ、変更時に版数が進む値。

    Notes
    -----
    - `get()` は計算関数の本体内から呼ぶと UndeclaredDependencyError になる。
    - 値が等しい `set()` では版数を進めない。
    """

    def __init__(self, value: Any = None, *, name: str | None = None) -> None:
        self._value = value
        self._version = 0
        self._name = name

    @property
    def name(self) -> str:
        return self._name if self._name is not None else f"<reactive {id(self):#x}>"

    @property
    def version(self) -> int:
        return self._version

    def get(self) -> Any:
        """現在値を返す。"""
        guard_reactive_read(self.name)
        return self._value

    def set(self, value: Any) -> bool:
        """値を更新し、変化した場合 True を返す。"""
        if same_value(self._value, value):
            return False
        self._value = value
        self._version += 1
        _logger.debug("reactive value changed: %s version=%d", self.name, self._version)
        return True

    def _peek(self) -> tuple[Any, int]:
        """ガード無しで (値, 版数) を返す（バインド側の内部用）。"""
        return self._value, self._version

    def __repr__(self) -> str:
        return f"ReactiveValue({self._value!r}, name={self._name!r})"


def same_value(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # numpy 配列など、== が真偽値にならない値は常に変化扱いにする。
        return False


__all__ = ["ReactiveValue"]
