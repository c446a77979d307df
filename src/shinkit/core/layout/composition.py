# どこで: `src/shinkit/core/layout/composition.py`。
# 何を: row/column/page のコンテナと、構築時の重複 id 検出を提供する。
# なぜ: 生成した要素列をそのまま子として渡せるようにし、id 衝突を描画前に確定させるため。

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Union

from shinkit.core.elements.descriptor import ElementConfigError, ElementDescriptor

_logger = logging.getLogger(__name__)


class DuplicateIdError(ValueError):
    """1 つのコンポジション内で要素 id が重複している。"""


@dataclass(frozen=True, slots=True)
class Composition:
    """要素 descriptor（または入れ子のコンポジション）の順序付き集約。

    Attributes
    ----------
    kind : str
        コンテナ種別（"row" | "column" | "page"）。
    children : tuple[ElementDescriptor | Composition, ...]
        子要素。入力順を保つ。
    attrs : tuple[tuple[str, Any], ...]
        コンテナ属性（column の width など）。
    """

    kind: str
    children: tuple["Child", ...]
    attrs: tuple[tuple[str, Any], ...] = ()

    def __post_init__(self) -> None:
        check_unique_ids(self)

    def iter_elements(self) -> Iterator[ElementDescriptor]:
        """部分木の ElementDescriptor を深さ優先・入力順で返す。"""

        for child in self.children:
            if isinstance(child, Composition):
                yield from child.iter_elements()
            else:
                yield child

    def element_ids(self) -> tuple[str, ...]:
        return tuple(d.id for d in self.iter_elements())

    def find(self, element_id: str) -> ElementDescriptor:
        """id に対応する ElementDescriptor を返す。

        Raises
        ------
        KeyError
            部分木に id が無い場合。
        """

        for d in self.iter_elements():
            if d.id == element_id:
                return d
        raise KeyError(element_id)

    def attr(self, name: str, default: Any = None) -> Any:
        for key, value in self.attrs:
            if key == name:
                return value
        return default


Child = Union[ElementDescriptor, Composition]


def check_unique_ids(composition: Composition) -> None:
    """部分木の要素 id が一意であることを確認する。

    Raises
    ------
    DuplicateIdError
        同じ id が 2 回以上現れる場合。
    """

    seen: set[str] = set()
    duplicates: list[str] = []
    for d in composition.iter_elements():
        if d.id in seen and d.id not in duplicates:
            duplicates.append(d.id)
        seen.add(d.id)
    if duplicates:
        raise DuplicateIdError(
            f"{composition.kind} 内で要素 id が重複しています: {', '.join(duplicates)}"
        )


def _flatten_children(children: Iterable[object]) -> tuple[Child, ...]:
    """子の並びを 1 段だけ平坦化する（生成したリストをそのまま渡せるようにする）。"""

    out: list[Child] = []
    for child in children:
        if isinstance(child, (ElementDescriptor, Composition)):
            out.append(child)
            continue
        if isinstance(child, (str, bytes)) or not isinstance(child, Iterable):
            raise TypeError(
                f"子要素は ElementDescriptor / Composition またはその列である必要があります: got={child!r}"
            )
        for item in child:
            if not isinstance(item, (ElementDescriptor, Composition)):
                raise TypeError(
                    f"子要素の列に不正な値があります: got={item!r}"
                )
            out.append(item)
    return tuple(out)


def compose(kind: str, children: Iterable[object], **attrs: Any) -> Composition:
    """任意種別のコンテナを構築する（row/column/page の共通実装）。"""

    flat = _flatten_children(children)
    attr_items = tuple((k, v) for k, v in attrs.items() if v is not None)
    composition = Composition(kind=str(kind), children=flat, attrs=attr_items)
    _logger.debug("composed %s with %d children", kind, len(flat))
    return composition


def row(*children: Child | Iterable[Child], **attrs: Any) -> Composition:
    """子要素を横に並べる row コンテナを返す。

    Examples
    --------
    sliders = UI.slider.many(["alpha", "beta"])
    ui = row(sliders)
    """

    return compose("row", children, **attrs)


def column(*children: Child | Iterable[Child], width: int | None = None) -> Composition:
    """column コンテナを返す。width は 12 分割グリッド上の幅（1..12）。"""

    if width is not None:
        if isinstance(width, bool) or not isinstance(width, int) or not 1 <= width <= 12:
            raise ElementConfigError(f"column の width は 1..12 の整数である必要があります: got={width!r}")
    return compose("column", children, width=width)


def page(*children: Child | Iterable[Child], title: str | None = None) -> Composition:
    """最上位の page コンテナを返す。"""

    return compose("page", children, title=title)


__all__ = [
    "Child",
    "Composition",
    "DuplicateIdError",
    "check_unique_ids",
    "column",
    "compose",
    "page",
    "row",
]
