# どこで: `src/shinkit/core/reactive/calculation.py`。
# 何を: `@calculation`（閉じた引数リストを持つ純粋関数）と、入力値へのバインド `bind()` を提供する。
# なぜ: 計算本体からリアクティブ値への暗黙依存を排除し、依存を引数として静的に読めるようにするため。

from __future__ import annotations

import dis
import functools
import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from types import CodeType
from typing import Any, Union

from .context import UndeclaredDependencyError, calculation_body, guard_reactive_read
from .inputs import InputStore
from .value import ReactiveValue, same_value

_logger = logging.getLogger(__name__)

_GLOBAL_LOAD_OPS = frozenset({"LOAD_GLOBAL", "LOAD_NAME"})


def _is_reactive(obj: object) -> bool:
    return isinstance(obj, (ReactiveValue, InputStore, BoundCalculation))


def _global_names(code: CodeType) -> set[str]:
    """code（と入れ子の関数・内包表記）がグローバルとして読み込む名前を返す。

    `co_names` は属性名・メソッド名も含むため、LOAD_GLOBAL / LOAD_NAME 命令だけを見る。
    """

    names = {
        ins.argval
        for ins in dis.get_instructions(code)
        if ins.opname in _GLOBAL_LOAD_OPS and isinstance(ins.argval, str)
    }
    for const in code.co_consts:
        if isinstance(const, CodeType):
            names |= _global_names(const)
    return names


def _captured_reactives(func: Callable[..., Any]) -> list[str]:
    """クロージャ変数・参照グローバルのうちリアクティブなものの名前を返す。"""

    found: list[str] = []
    code = getattr(func, "__code__", None)
    if code is None:
        return found

    closure = getattr(func, "__closure__", None) or ()
    for name, cell in zip(code.co_freevars, closure):
        try:
            value = cell.cell_contents
        except ValueError:
            # まだ代入されていないセル
            continue
        if _is_reactive(value):
            found.append(name)

    func_globals = getattr(func, "__globals__", {})
    for name in sorted(_global_names(code)):
        if name in func_globals and _is_reactive(func_globals[name]):
            found.append(name)
    return found


class Calculation:
    """閉じた引数リストを持つ純粋な計算関数のラッパ。

    Notes
    -----
    - 定義時に、リアクティブ値をクロージャやグローバルとして参照していないかを確認する。
    - 呼び出し時は本体を `calculation_body` 内で実行するため、
      本体からのリアクティブ読み取りは UndeclaredDependencyError になる。
    - 未定義の名前への参照は Python の NameError としてそのまま失敗する。
    """

    def __init__(self, func: Callable[..., Any], *, name: str | None = None) -> None:
        if isinstance(func, Calculation):
            func = func.func
        if not callable(func):
            raise TypeError(f"calculation には callable が必要です: got={func!r}")

        self._func = func
        self._name = str(name) if name is not None else getattr(func, "__qualname__", repr(func))
        self._signature = inspect.signature(func)

        for param in self._signature.parameters.values():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                raise ValueError(
                    f"calculation {self._name!r} は *args/**kwargs を持てません"
                    "（依存は名前付き引数として宣言してください）"
                )

        captured = _captured_reactives(func)
        if captured:
            raise UndeclaredDependencyError(
                f"calculation {self._name!r} がリアクティブ値を引数以外から参照しています: "
                f"{', '.join(captured)}（引数として宣言し、bind() で渡してください）"
            )
        functools.update_wrapper(self, func)

    @property
    def func(self) -> Callable[..., Any]:
        return self._func

    @property
    def name(self) -> str:
        return self._name

    @property
    def params(self) -> tuple[str, ...]:
        """宣言順の引数名。"""
        return tuple(self._signature.parameters)

    @property
    def required(self) -> tuple[str, ...]:
        """デフォルト値を持たない引数名。"""
        return tuple(
            name
            for name, p in self._signature.parameters.items()
            if p.default is inspect.Parameter.empty
        )

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        with calculation_body(self._name):
            return self._func(*args, **kwargs)

    def __repr__(self) -> str:
        return f"Calculation({self._name}{self._signature})"


def calculation(
    func: Callable[..., Any] | None = None,
    *,
    name: str | None = None,
):
    """関数を Calculation として包むデコレータ。

    Examples
    --------
    @calculation
    def total(x, y, z):
        return x + y + z
    """

    def decorator(f: Callable[..., Any]) -> Calculation:
        return Calculation(f, name=name)

    if func is None:
        return decorator
    return decorator(func)


Source = Union[str, ReactiveValue, "BoundCalculation"]


class BoundCalculation:
    """Calculation と入力ソースの組。`get()` で現在のスナップショットから値を得る。

    Notes
    -----
    - 宣言したソースの版数がすべて前回と同じなら、再計算せずキャッシュを返す。
    - 結果が前回と等しい場合は版数を進めない（下流の再計算を抑える）。
    - 再計算のタイミング（いつ get() するか）は呼び出し側の責務。
    """

    def __init__(self, calc: Calculation, sources: Mapping[str, ReactiveValue | "BoundCalculation"]) -> None:
        self._calc = calc
        self._sources = dict(sources)
        self._seen_versions: tuple[int, ...] | None = None
        self._value: Any = None
        self._version = 0
        self._evaluations = 0

    @property
    def calculation(self) -> Calculation:
        return self._calc

    @property
    def name(self) -> str:
        return f"bound[{self._calc.name}]"

    @property
    def inputs(self) -> dict[str, str]:
        """引数名 -> ソース名。"""
        return {param: src.name for param, src in self._sources.items()}

    @property
    def version(self) -> int:
        return self._version

    @property
    def evaluations(self) -> int:
        """計算本体を実行した回数。"""
        return self._evaluations

    def invalidate(self) -> None:
        """次回の get() で必ず再計算させる。"""
        self._seen_versions = None

    def _peek(self) -> tuple[Any, int]:
        """ガード無しで (値, 版数) を返す。必要なら再計算する。"""

        values: dict[str, Any] = {}
        versions: list[int] = []
        for param, source in self._sources.items():
            value, version = source._peek()
            values[param] = value
            versions.append(version)

        snapshot_versions = tuple(versions)
        if self._seen_versions == snapshot_versions:
            return self._value, self._version

        result = self._calc(**values)
        self._evaluations += 1
        if self._evaluations == 1 or not same_value(self._value, result):
            self._version += 1
        self._value = result
        self._seen_versions = snapshot_versions
        _logger.debug(
            "recomputed %s: evaluations=%d version=%d",
            self._calc.name,
            self._evaluations,
            self._version,
        )
        return self._value, self._version

    def get(self) -> Any:
        """宣言した入力の現在値で計算した結果を返す。"""
        guard_reactive_read(self.name)
        return self._peek()[0]

    def __call__(self) -> Any:
        return self.get()

    def __repr__(self) -> str:
        return f"BoundCalculation({self._calc.name}, inputs={self.inputs})"


def _resolve_source(param: str, source: object, store: InputStore | None) -> ReactiveValue | BoundCalculation:
    if isinstance(source, (ReactiveValue, BoundCalculation)):
        return source
    if isinstance(source, str):
        if store is None:
            raise ValueError(f"引数 {param!r} を id {source!r} で束縛するには store が必要です")
        return store.reactive(source)
    raise TypeError(
        f"引数 {param!r} のソースは id(str) / ReactiveValue / BoundCalculation である必要があります: got={source!r}"
    )


def bind(
    calc: Calculation | Callable[..., Any],
    inputs: Mapping[str, Source] | Sequence[Source] | None = None,
    *,
    store: InputStore | None = None,
) -> BoundCalculation:
    """計算関数を入力ソースへ束縛した BoundCalculation を返す。

    Parameters
    ----------
    calc : Calculation | Callable
        束縛する計算。素の関数は Calculation で包む。
    inputs : Mapping[str, Source] | Sequence[Source] | None
        引数名 -> ソース。sequence の場合は宣言順に対応させる。
        None の場合は必須引数名をそのまま store の id として使う。
    store : InputStore | None
        id(str) で指定したソースの解決先。

    Raises
    ------
    ValueError
        未知の引数名を束縛した場合、必須引数が未束縛の場合。
    KeyError
        store に存在しない id を指定した場合。
    """

    if not isinstance(calc, Calculation):
        calc = Calculation(calc)

    params = calc.params
    if inputs is None:
        mapping: dict[str, object] = {name: name for name in calc.required}
    elif isinstance(inputs, Mapping):
        mapping = dict(inputs)
    elif isinstance(inputs, (str, bytes)):
        raise TypeError("inputs に str を直接渡すことはできません（[id] で包んでください）")
    else:
        seq = list(inputs)
        if len(seq) > len(params):
            raise ValueError(
                f"calculation {calc.name!r} の引数は {len(params)} 個ですが {len(seq)} 個のソースが渡されました"
            )
        mapping = dict(zip(params, seq))

    unknown = set(mapping) - set(params)
    if unknown:
        raise ValueError(
            f"calculation {calc.name!r} に存在しない引数を束縛しようとしました: {', '.join(sorted(unknown))}"
        )
    missing = [name for name in calc.required if name not in mapping]
    if missing:
        raise ValueError(f"calculation {calc.name!r} の必須引数が未束縛です: {', '.join(missing)}")

    sources = {
        name: _resolve_source(name, mapping[name], store)
        for name in params
        if name in mapping
    }
    return BoundCalculation(calc, sources)


__all__ = ["BoundCalculation", "Calculation", "bind", "calculation"]
