# どこで: `src/shinkit/core/reactive/context.py`。
# 何を: 計算関数の本体実行中であることを contextvar で保持し、リアクティブ読み取りを禁止する。
# なぜ: 宣言していない依存を「古い値の黙読」ではなく即時エラーとして表面化させるため。

from __future__ import annotations

import contextlib
import contextvars
from typing import Iterator


class UndeclaredDependencyError(NameError):
    """計算関数が引数として宣言していないリアクティブ値に依存しようとした。"""


_calculation_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "calculation", default=None
)


def current_calculation() -> str | None:
    """実行中の計算関数名を返す。計算の外なら None。"""
    return _calculation_var.get()


@contextlib.contextmanager
def calculation_body(name: str) -> Iterator[None]:
    """計算関数の本体を実行する区間を示すコンテキストマネージャ。"""

    token = _calculation_var.set(str(name))
    try:
        yield
    finally:
        _calculation_var.reset(token)


def guard_reactive_read(source: str) -> None:
    """計算関数の本体内からのリアクティブ読み取りなら UndeclaredDependencyError を送出する。"""

    calc = _calculation_var.get()
    if calc is None:
        return
    raise UndeclaredDependencyError(
        f"計算関数 {calc!r} が宣言していないリアクティブ値を読もうとしました: {source}"
        "（引数として宣言し、bind() で渡してください）"
    )


__all__ = [
    "UndeclaredDependencyError",
    "calculation_body",
    "current_calculation",
    "guard_reactive_read",
]
