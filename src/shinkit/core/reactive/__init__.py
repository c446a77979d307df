# どこで: `src/shinkit/core/reactive/__init__.py`。
# 何を: 入力ストアと計算バインドの公開エイリアスをまとめる。

from .calculation import BoundCalculation, Calculation, bind, calculation
from .context import UndeclaredDependencyError, calculation_body, current_calculation
from .inputs import InputStore, normalize_input
from .value import ReactiveValue

__all__ = [
    "BoundCalculation",
    "Calculation",
    "InputStore",
    "ReactiveValue",
    "UndeclaredDependencyError",
    "bind",
    "calculation",
    "calculation_body",
    "current_calculation",
    "normalize_input",
]
