# どこで: `src/shinkit/core/elements/factory.py`。
# 何を: 宣言的な要素ファクトリ（単体生成・バッチ生成・テーブル生成・ヘルパ生成）を提供する。
# なぜ: ほぼ同じ要素を並べるときに既定引数の繰り返しを無くし、既定値の変更を 1 箇所で済ませるため。

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .descriptor import ElementConfigError, ElementDescriptor
from .kind_registry import element_kind_registry
from .record_spec import (
    ElementRecord,
    check_element_id,
    records_from_specs,
    records_from_table,
)

_logger = logging.getLogger(__name__)


def _check_field_names(kind: str, names: Iterable[str], fields: Sequence[str]) -> None:
    unknown = set(names) - set(fields)
    if unknown:
        bad = ", ".join(sorted(unknown))
        raise ElementConfigError(f"{kind} に未知フィールドがあります: {bad}")


def _build(
    kind: str,
    element_id: str,
    *,
    label: str | None,
    baseline: Mapping[str, Any],
    overrides: Mapping[str, Any],
) -> ElementDescriptor:
    """baseline に overrides を重ね、kind の検証を通した descriptor を返す。"""

    kind_def = element_kind_registry.get(kind)
    element_id = check_element_id(element_id)
    if label is not None and not isinstance(label, str):
        raise ElementConfigError(f"label は str である必要があります: got={label!r}")
    _check_field_names(kind, overrides.keys(), kind_def.fields)

    fields = dict(baseline)
    fields.update(overrides)
    normalized = kind_def.validator(element_id, fields)

    # フィールド順は kind の宣言順に固定する（同一入力なら field-wise に等しくなる）
    options = tuple((name, normalized[name]) for name in kind_def.fields)
    return ElementDescriptor(
        kind=kind_def.name,
        id=element_id,
        label=element_id if label is None else label,
        options=options,
    )


def make_element(
    kind: str,
    id: str,
    *,
    label: str | None = None,
    **overrides: Any,
) -> ElementDescriptor:
    """1 つの ElementDescriptor を生成する。

    Parameters
    ----------
    kind : str
        要素種別。
    id : str
        要素 id。label 省略時は表示ラベルにもなる。
    label : str | None, optional
        表示ラベル。
    **overrides : Any
        kind の宣言フィールドの上書き。指定が無いフィールドは基準既定値を使う。

    Returns
    -------
    ElementDescriptor
        全フィールドが確定した descriptor。

    Raises
    ------
    ElementConfigError
        未知フィールドや範囲の矛盾など、設定が不正な場合。
    """

    return _build(
        kind,
        id,
        label=label,
        baseline=element_kind_registry.baseline(kind),
        overrides=overrides,
    )


def _build_records(
    kind: str,
    records: Sequence[ElementRecord],
    baseline: Mapping[str, Any],
) -> list[ElementDescriptor]:
    out = [
        _build(
            kind,
            record.id,
            label=record.label,
            baseline=baseline,
            overrides=dict(record.overrides),
        )
        for record in records
    ]
    _logger.debug("built %d %s elements: %s", len(out), kind, [d.id for d in out])
    return out


def make_elements(
    kind: str,
    records: Iterable[str | Mapping[str, object]],
) -> list[ElementDescriptor]:
    """レコード列から ElementDescriptor 列を入力順のまま生成する。

    各レコードは id 文字列、または `{"id": ..., "label": ..., <field>: ...}` の dict。
    並べ替えや重複除去は行わない（重複 id はレイアウト構築時に検出する）。
    """

    kind_def = element_kind_registry.get(kind)
    return _build_records(
        kind,
        records_from_specs(records, fields=kind_def.fields),
        element_kind_registry.baseline(kind),
    )


def elements_from_table(
    kind: str,
    table: Mapping[str, Sequence[object]],
) -> list[ElementDescriptor]:
    """列指向テーブルの各行から ElementDescriptor を生成する。

    Examples
    --------
    elements_from_table("slider", {"id": ["a", "b"], "max": [1.0, 10.0]})
    """

    kind_def = element_kind_registry.get(kind)
    return _build_records(
        kind,
        records_from_table(table, fields=kind_def.fields),
        element_kind_registry.baseline(kind),
    )


class ElementFactory:
    """既定値を固定した再利用可能な要素ファクトリ。

    `element_factory("slider", max=10)` のように作り、
    `factory("alpha")` / `factory.many([...])` / `factory.from_table({...})` で使う。

    Notes
    -----
    基準既定値（組み込み既定値 + config.yaml）は呼び出しのたびに引き直し、
    その上に factory の既定値、最後に呼び出し時の上書きを重ねる。
    """

    def __init__(self, kind: str, defaults: Mapping[str, Any] | None = None) -> None:
        kind_def = element_kind_registry.get(kind)
        defaults = {} if defaults is None else dict(defaults)
        _check_field_names(kind, defaults.keys(), kind_def.fields)
        self._kind = kind_def.name
        self._defaults = defaults

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def defaults(self) -> dict[str, Any]:
        """factory が固定している既定値のコピー。"""
        return dict(self._defaults)

    def _baseline(self) -> dict[str, Any]:
        baseline = element_kind_registry.baseline(self._kind)
        baseline.update(self._defaults)
        return baseline

    def __call__(self, id: str, *, label: str | None = None, **overrides: Any) -> ElementDescriptor:
        return _build(
            self._kind,
            id,
            label=label,
            baseline=self._baseline(),
            overrides=overrides,
        )

    def many(self, records: Iterable[str | Mapping[str, object]]) -> list[ElementDescriptor]:
        """レコード列から入力順のまま descriptor 列を生成する。"""

        kind_def = element_kind_registry.get(self._kind)
        return _build_records(
            self._kind,
            records_from_specs(records, fields=kind_def.fields),
            self._baseline(),
        )

    def from_table(self, table: Mapping[str, Sequence[object]]) -> list[ElementDescriptor]:
        """列指向テーブルの各行から descriptor を生成する。"""

        kind_def = element_kind_registry.get(self._kind)
        return _build_records(
            self._kind,
            records_from_table(table, fields=kind_def.fields),
            self._baseline(),
        )

    def with_defaults(self, **defaults: Any) -> "ElementFactory":
        """既定値を追加・上書きした新しい factory を返す。"""

        merged = dict(self._defaults)
        merged.update(defaults)
        return ElementFactory(self._kind, merged)

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._defaults.items())
        return f"ElementFactory({self._kind!r}{', ' if args else ''}{args})"


def element_factory(kind: str, **defaults: Any) -> ElementFactory:
    """既定値を固定した ElementFactory を返す。"""

    return ElementFactory(kind, defaults)


__all__ = [
    "ElementFactory",
    "element_factory",
    "elements_from_table",
    "make_element",
    "make_elements",
]
