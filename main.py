"""
どこで: リポジトリ直下 `main.py`。
何を: スライダー列の生成・row への配置・入力値への計算バインドを一通り実行して表示する。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import logging
import sys

sys.path.append("src")

from shinkit import UI, InputStore, bind, column, element_factory, page, row
from shinkit.calcs import histogram, sample_normal, summary

slider01 = element_factory("slider")

PARAMS = {
    "id": ["alpha", "beta", "gamma", "delta"],
    "min": [None, None, -1.0, None],
}


def build_ui():
    return page(
        row(slider01.from_table(PARAMS)),
        row(
            column(UI.numeric("n", min=1, max=10_000, value=500, step=1), width=6),
            column(UI.slider("bins", min=1, max=100, value=20, step=1), width=6),
        ),
        title="shinkit demo",
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    ui = build_ui()
    store = InputStore.from_composition(ui)

    data = bind(sample_normal, {"n": "n"}, store=store)
    hist = bind(histogram, {"x": data, "bins": "bins"}, store=store)
    stats = bind(summary, {"x": data})

    for d in ui.iter_elements():
        print(d.as_dict())

    counts, edges = hist.get()
    print("counts:", counts.tolist())
    print("summary:", stats.get())

    store.set("bins", "5")
    counts, edges = hist.get()
    print("counts (bins=5):", counts.tolist())
