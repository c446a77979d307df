"""
どこで: `src/shinkit/calcs.py`。
何を: 入力値から描画用データを作る、よく使う純粋計算（ヒストグラム・正規乱数・要約統計）を提供する。
なぜ: UI 側の入力を引数で受け取るだけの関数として切り出し、bind() でそのまま再利用できるようにするため。
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from shinkit.core.reactive.calculation import calculation


def _as_float_array(x: Any) -> np.ndarray:
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"x は 1 次元の数値列である必要があります: shape={arr.shape}")
    return arr


@calculation
def histogram(
    x: Sequence[float] | np.ndarray,
    bins: int = 10,
    range: tuple[float, float] | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """x の度数分布を返す。

    Parameters
    ----------
    x : Sequence[float] | np.ndarray
        1 次元の数値列。
    bins : int, optional
        ビン数（1 以上）。float はスライダー入力を想定して丸める。
    range : tuple[float, float] | None, optional
        ビンの範囲 (lo, hi)。None の場合は x の最小・最大。

    Returns
    -------
    counts : np.ndarray
        各ビンの度数（int64, 長さ bins）。
    edges : np.ndarray
        ビン境界（float64, 長さ bins + 1）。
    """
    arr = _as_float_array(x)
    n_bins = int(round(float(bins)))
    if n_bins < 1:
        raise ValueError(f"bins は 1 以上である必要があります: got={bins!r}")
    if range is not None:
        lo, hi = float(range[0]), float(range[1])
        if lo >= hi:
            raise ValueError(f"range は lo < hi である必要があります: got={range!r}")
        counts, edges = np.histogram(arr, bins=n_bins, range=(lo, hi))
    else:
        counts, edges = np.histogram(arr, bins=n_bins)
    return counts.astype(np.int64), edges.astype(np.float64)


@calculation
def sample_normal(n: int, mean: float = 0.0, sd: float = 1.0, seed: int | None = None) -> np.ndarray:
    """正規分布から n 個をサンプリングして返す。

    seed を与えた場合は同じ引数で同じ配列を返す。
    """
    count = int(round(float(n)))
    if count < 0:
        raise ValueError(f"n は 0 以上である必要があります: got={n!r}")
    if float(sd) < 0:
        raise ValueError(f"sd は 0 以上である必要があります: got={sd!r}")
    rng = np.random.default_rng(seed)
    return rng.normal(loc=float(mean), scale=float(sd), size=count)


@calculation
def summary(x: Sequence[float] | np.ndarray) -> dict[str, float]:
    """件数・平均・標準偏差（不偏）・最小・最大を返す。空列は count=0 と NaN。"""
    arr = _as_float_array(x)
    if arr.size == 0:
        nan = float("nan")
        return {"count": 0.0, "mean": nan, "sd": nan, "min": nan, "max": nan}
    sd = float(np.std(arr, ddof=1)) if arr.size > 1 else 0.0
    return {
        "count": float(arr.size),
        "mean": float(np.mean(arr)),
        "sd": sd,
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
    }


__all__ = ["histogram", "sample_normal", "summary"]
