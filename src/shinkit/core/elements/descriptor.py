# どこで: `src/shinkit/core/elements/descriptor.py`。
# 何を: ElementDescriptor（1 つの UI 要素の確定済み設定）と ElementConfigError を定義する。
# なぜ: 要素の構築結果を不変な値として扱い、レイアウトや入力ストアから安全に共有するため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ElementOptions = tuple[tuple[str, Any], ...]


class ElementConfigError(ValueError):
    """要素の構築時に検出された設定エラー。"""


@dataclass(frozen=True, slots=True)
class ElementDescriptor:
    """1 つの UI 要素を完全に記述する不変レコード。

    Attributes
    ----------
    kind : str
        要素種別（"slider" など）。
    id : str
        コンポジション内で一意な識別子。入力ストアのキーにもなる。
    label : str
        表示ラベル。省略時は id と同じ。
    options : tuple[tuple[str, Any], ...]
        kind が宣言したフィールド順の (name, value) 列。
    """

    kind: str
    id: str
    label: str
    options: ElementOptions = ()

    def __getitem__(self, name: str) -> Any:
        for key, value in self.options:
            if key == name:
                return value
        raise KeyError(f"{self.kind} {self.id!r} にフィールドがありません: {name!r}")

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _value in self.options)

    def get(self, name: str, default: Any = None) -> Any:
        """フィールド値を返す。無ければ default。"""

        for key, value in self.options:
            if key == name:
                return value
        return default

    def as_dict(self) -> dict[str, Any]:
        """id/label/kind と全フィールドを 1 つの dict にまとめて返す。"""

        out: dict[str, Any] = {"kind": self.kind, "id": self.id, "label": self.label}
        out.update(self.options)
        return out

    def replace(self, **overrides: Any) -> "ElementDescriptor":
        """フィールドを上書きした新しい descriptor を返す（kind の検証を再実行する）。"""

        from .factory import make_element

        default_label = None if self.label == self.id else self.label
        label = overrides.pop("label", default_label)
        element_id = overrides.pop("id", self.id)
        fields = dict(self.options)
        fields.update(overrides)
        return make_element(self.kind, element_id, label=label, **fields)


__all__ = ["ElementConfigError", "ElementDescriptor", "ElementOptions"]
