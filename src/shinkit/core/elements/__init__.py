# どこで: `src/shinkit/core/elements/__init__.py`。
# 何を: 要素 descriptor とファクトリの公開エイリアスをまとめる。
# なぜ: API 層から最小インポートで使えるようにするため。

from .descriptor import ElementConfigError, ElementDescriptor
from .factory import (
    ElementFactory,
    element_factory,
    elements_from_table,
    make_element,
    make_elements,
)
from .kind_registry import ElementKind, element_kind, element_kind_registry

__all__ = [
    "ElementConfigError",
    "ElementDescriptor",
    "ElementFactory",
    "ElementKind",
    "element_factory",
    "element_kind",
    "element_kind_registry",
    "elements_from_table",
    "make_element",
    "make_elements",
]
