# どこで: `src/shinkit/core/elements/kind_registry.py`。
# 何を: 要素種別（slider/select など）の宣言フィールド・既定値・検証関数を引けるレジストリを提供する。
# なぜ: 既定値の解決と検証を kind ごとに 1 箇所へ閉じ込め、ファクトリを kind 非依存に保つため。

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from shinkit.core.runtime_config import runtime_config

from .descriptor import ElementConfigError

_logger = logging.getLogger(__name__)

# 検証関数は (id, 解決済みフィールド) を受け取り、正規化済みフィールドを返す。
ElementValidator = Callable[[str, dict[str, Any]], dict[str, Any]]

_VALUE_TYPES = {"float", "int", "str", "choice", "bool"}


@dataclass(frozen=True, slots=True)
class ElementKind:
    """1 つの要素種別の登録情報。

    value_type は入力ストアが UI 入力を正規化する際の型
    （"float" | "int" | "str" | "choice" | "bool"）。
    """

    name: str
    fields: tuple[str, ...]
    defaults: Mapping[str, Any]
    value_type: str
    validator: ElementValidator


class ElementKindRegistry:
    """kind 名と ElementKind を対応付けるレジストリ。"""

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[str, ElementKind] = {}

    def _register(self, kind: ElementKind, *, overwrite: bool = True) -> None:
        """kind を登録する（内部用）。

        Notes
        -----
        登録は `@element_kind` デコレータ経由に統一する。
        """
        if not overwrite and kind.name in self._items:
            raise ValueError(f"element kind '{kind.name}' は既に登録されている")
        self._items[kind.name] = kind

    def get(self, name: str) -> ElementKind:
        """kind 名に対応する ElementKind を取得する。

        Raises
        ------
        ElementConfigError
            未登録の kind 名が指定された場合。
        """
        try:
            return self._items[name]
        except KeyError:
            known = ", ".join(sorted(self._items))
            raise ElementConfigError(
                f"未登録の element kind です: {name!r}（登録済み: {known}）"
            ) from None

    def __contains__(self, name: object) -> bool:
        """指定された名前が登録済みかどうかを返す。"""
        return name in self._items

    def names(self) -> tuple[str, ...]:
        """登録済み kind 名を登録順で返す。"""
        return tuple(self._items)

    def baseline(self, name: str) -> dict[str, Any]:
        """kind の基準既定値（組み込み既定値に config.yaml を重ねたもの）を返す。

        Raises
        ------
        RuntimeError
            config.yaml が kind の宣言に無いフィールドを設定している場合。
        """
        kind = self.get(name)
        out = dict(kind.defaults)
        configured = runtime_config().defaults_for(name)
        unknown = set(configured) - set(kind.fields)
        if unknown:
            names = ", ".join(sorted(unknown))
            raise RuntimeError(
                f"config.yaml の elements.defaults.{name} に未知フィールドがあります: {names}"
            )
        out.update(configured)
        return out


element_kind_registry = ElementKindRegistry()
"""グローバルな element kind レジストリインスタンス。"""


def element_kind(
    name: str,
    *,
    defaults: Mapping[str, Any],
    value_type: str,
    overwrite: bool = True,
) -> Callable[[ElementValidator], ElementValidator]:
    """検証関数を element kind として登録するデコレータ。

    Parameters
    ----------
    name : str
        kind 名。ファクトリや `UI.<name>` で使う。
    defaults : Mapping[str, Any]
        宣言フィールドと組み込み既定値。キーの順序が descriptor のフィールド順になる。
    value_type : str
        入力値の型（"float" | "int" | "str" | "choice" | "bool"）。
    overwrite : bool, optional
        既存エントリがある場合に上書きするかどうか。

    Examples
    --------
    @element_kind("slider", defaults={"min": 0.0, "max": 1.0}, value_type="float")
    def slider(element_id, fields):
        ...
        return fields
    """

    if value_type not in _VALUE_TYPES:
        raise ValueError(f"未知の value_type です: {value_type!r}")
    if {"id", "label", "kind"} & set(defaults):
        raise ValueError("defaults に id/label/kind は含められません")

    frozen_defaults = MappingProxyType(dict(defaults))

    def decorator(func: ElementValidator) -> ElementValidator:
        element_kind_registry._register(
            ElementKind(
                name=str(name),
                fields=tuple(str(k) for k in frozen_defaults),
                defaults=frozen_defaults,
                value_type=value_type,
                validator=func,
            ),
            overwrite=overwrite,
        )
        _logger.debug("element kind registered: %s", name)
        return func

    return decorator


__all__ = ["ElementKind", "ElementKindRegistry", "ElementValidator", "element_kind", "element_kind_registry"]
