# どこで: `src/shinkit/__init__.py`。
# 何を: ルート `shinkit` パッケージを定義する。
# なぜ: import 起点を `shinkit` に統一するため。

from __future__ import annotations

from shinkit.api import (
    UI,
    ElementFactory,
    InputStore,
    ReactiveValue,
    bind,
    calculation,
    column,
    element_factory,
    element_kind,
    elements_from_table,
    make_element,
    make_elements,
    page,
    row,
)
from shinkit.core.elements.descriptor import ElementConfigError, ElementDescriptor
from shinkit.core.layout.composition import Composition, DuplicateIdError
from shinkit.core.reactive.calculation import BoundCalculation, Calculation
from shinkit.core.reactive.context import UndeclaredDependencyError

__version__ = "0.1.0"

__all__ = [
    "BoundCalculation",
    "Calculation",
    "Composition",
    "DuplicateIdError",
    "ElementConfigError",
    "ElementDescriptor",
    "ElementFactory",
    "InputStore",
    "ReactiveValue",
    "UI",
    "UndeclaredDependencyError",
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
