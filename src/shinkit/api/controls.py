# どこで: `src/shinkit/api/controls.py`。
# 何を: 登録済み element kind ごとの ElementFactory を返す公開名前空間 UI を提供する。
# なぜ: `UI.slider("alpha")` / `UI.slider.many([...])` の形で、kind ごとの生成 API を統一するため。

from __future__ import annotations

# 組み込み kind モジュールをインポートしてレジストリに登録させる。
from shinkit.core.controls import checkbox as _control_checkbox  # noqa: F401
from shinkit.core.controls import numeric as _control_numeric  # noqa: F401
from shinkit.core.controls import select as _control_select  # noqa: F401
from shinkit.core.controls import slider as _control_slider  # noqa: F401
from shinkit.core.controls import text as _control_text  # noqa: F401
from shinkit.core.elements.factory import ElementFactory
from shinkit.core.elements.kind_registry import element_kind_registry


class ControlNamespace:
    """要素 descriptor を生成する名前空間。

    Attributes
    ----------
    <kind> : ElementFactory
        登録済み kind 名ごとのファクトリ。
        例: UI.slider("alpha", max=10) -> ElementDescriptor(kind="slider", id="alpha", ...)
    """

    def __getattr__(self, name: str) -> ElementFactory:
        """kind 名に対応する ElementFactory を返す。

        Raises
        ------
        AttributeError
            未登録の kind 名が指定された場合。
        """
        if name.startswith("_"):
            raise AttributeError(name)

        if name not in element_kind_registry:
            raise AttributeError(f"未登録の element kind: {name!r}")
        return ElementFactory(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(element_kind_registry.names()))


UI = ControlNamespace()
"""要素 descriptor を生成する公開名前空間。"""

__all__ = ["UI"]
