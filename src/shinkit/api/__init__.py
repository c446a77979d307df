# どこで: `src/shinkit/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして UI/コンテナ/計算バインドを再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from .controls import UI
from shinkit.core.elements import (
    ElementFactory,
    element_factory,
    element_kind,
    elements_from_table,
    make_element,
    make_elements,
)
from shinkit.core.layout import column, page, row
from shinkit.core.reactive import InputStore, ReactiveValue, bind, calculation

__all__ = [
    "ElementFactory",
    "InputStore",
    "ReactiveValue",
    "UI",
    "bind",
    "calculation",
    "column",
    "element_factory",
    "element_kind",
    "elements_from_table",
    "make_element",
    "make_elements",
    "page",
    "row",
]
