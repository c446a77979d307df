import numpy as np
import pytest

from shinkit import (
    UI,
    BoundCalculation,
    Calculation,
    InputStore,
    ReactiveValue,
    UndeclaredDependencyError,
    bind,
    calculation,
    row,
)
from shinkit.core.reactive.context import current_calculation

# 属性名と同名のモジュールグローバル、および本体から直接読むモジュールグローバル
mean = ReactiveValue(1.0, name="mean")
threshold = ReactiveValue(0.5, name="threshold")


def _store() -> InputStore:
    return InputStore.from_composition(row(UI.slider.many(["x", "y", "z"])))


def test_calculation_is_callable_with_plain_values():
    @calculation
    def total(x, y, z):
        return x + y + z

    assert isinstance(total, Calculation)
    assert total(1, 2, 3) == 6
    assert total.params == ("x", "y", "z")
    assert total.required == ("x", "y", "z")
    assert total.__name__ == "total"


def test_reference_to_undeclared_name_fails_at_invocation():
    @calculation
    def total(x, y, z):
        return x + y + z + w  # noqa: F821

    with pytest.raises(NameError):
        total(1, 2, 3)


def test_closure_over_reactive_value_is_rejected_at_definition():
    w = ReactiveValue(1.0, name="w")

    with pytest.raises(UndeclaredDependencyError, match="w"):

        @calculation
        def total(x, y, z):
            return x + y + z + w.get()


def test_closure_over_store_is_rejected_at_definition():
    store = _store()

    with pytest.raises(UndeclaredDependencyError, match="store"):

        @calculation
        def total(x, y, z):
            return x + y + z + store.value("x")


def test_reactive_read_smuggled_in_at_runtime_fails_fast():
    holder = {}

    @calculation
    def total(x, y, z):
        return x + y + z + holder["w"].get()

    holder["w"] = ReactiveValue(1.0, name="w")
    with pytest.raises(UndeclaredDependencyError, match="total"):
        total(1, 2, 3)

    # 計算の外からは普通に読める
    assert holder["w"].get() == 1.0


def test_var_args_are_rejected():
    with pytest.raises(ValueError, match=r"\*args"):

        @calculation
        def total(*values):
            return sum(values)


def test_bind_reads_snapshot_by_parameter_name():
    store = _store()

    @calculation
    def weighted(x, y, z, scale=10):
        return (x + y + z) * scale

    bound = bind(weighted, store=store)
    assert isinstance(bound, BoundCalculation)
    assert bound.inputs == {"x": "input['x']", "y": "input['y']", "z": "input['z']"}
    assert bound.get() == pytest.approx(15.0)

    store.set("x", 1.0)
    assert bound.get() == pytest.approx(20.0)


def test_bind_with_mapping_and_sequence():
    store = _store()

    def diff(a, b):
        return a - b

    by_name = bind(diff, {"a": "x", "b": "y"}, store=store)
    positional = bind(diff, ["y", "x"], store=store)
    store.set("x", 1.0)

    assert by_name.get() == pytest.approx(0.5)
    assert positional.get() == pytest.approx(-0.5)


def test_unchanged_inputs_do_not_recompute():
    store = _store()

    @calculation
    def total(x, y, z):
        return x + y + z

    bound = bind(total, store=store)
    first = bound.get()
    second = bound()

    assert first == second
    assert bound.evaluations == 1

    store.set("y", 0.5)
    bound.get()
    assert bound.evaluations == 1

    store.set("y", 0.25)
    assert bound.get() == pytest.approx(1.25)
    assert bound.evaluations == 2


def test_invalidate_forces_recompute():
    bound = bind(lambda x: x * 2, {"x": ReactiveValue(2)})
    assert bound.get() == 4
    bound.invalidate()
    assert bound.get() == 4
    assert bound.evaluations == 2
    # 結果が同じなら版数は進まない
    assert bound.version == 1


def test_bound_calculations_chain_and_skip_unchanged_downstream():
    n = ReactiveValue(3, name="n")

    @calculation
    def parity(n):
        return n % 2

    @calculation
    def label(p):
        return "odd" if p else "even"

    upstream = bind(parity, {"n": n})
    downstream = bind(label, {"p": upstream})
    assert downstream.get() == "odd"

    n.set(5)
    assert downstream.get() == "odd"
    assert upstream.evaluations == 2
    assert downstream.evaluations == 1

    n.set(4)
    assert downstream.get() == "even"
    assert downstream.evaluations == 2


def test_bound_get_inside_calculation_body_fails():
    inner = bind(lambda x: x, {"x": ReactiveValue(1)})
    holder = {"inner": inner}

    @calculation
    def outer(y):
        return y + holder["inner"].get()

    with pytest.raises(UndeclaredDependencyError):
        outer(1)


@pytest.mark.parametrize(
    "inputs, exc, match",
    [
        ({"x": "x", "q": "y"}, ValueError, "存在しない引数"),
        ({"x": "x"}, ValueError, "未束縛"),
        (["x", "y", "z", "x"], ValueError, "個のソース"),
        ({"x": "x", "y": "y", "z": "nope"}, KeyError, "nope"),
        ({"x": 1, "y": "y", "z": "z"}, TypeError, "ソース"),
        ("xyz", TypeError, "str"),
    ],
)
def test_bind_validation(inputs, exc, match):
    store = _store()

    def total(x, y, z):
        return x + y + z

    with pytest.raises(exc, match=match):
        bind(total, inputs, store=store)


def test_bind_by_id_requires_store():
    with pytest.raises(ValueError, match="store"):
        bind(lambda x: x, {"x": "x"})


def test_attribute_named_like_reactive_global_is_accepted():
    @calculation
    def spread(x):
        arr = np.asarray(x, dtype=float)
        return float(arr.max() - arr.mean())

    assert spread([1.0, 2.0, 3.0]) == 1.0


def test_reactive_module_global_is_rejected_at_definition():
    with pytest.raises(UndeclaredDependencyError, match="threshold"):

        @calculation
        def above(x):
            return x > threshold.get()


def test_reactive_global_read_in_nested_comprehension_is_rejected():
    with pytest.raises(UndeclaredDependencyError, match="threshold"):

        @calculation
        def count_above(xs):
            return sum(1 for v in xs if v > threshold.get())


def test_current_calculation_names_the_running_body():
    @calculation(name="whoami")
    def whoami():
        return current_calculation()

    assert whoami() == "whoami"
    assert current_calculation() is None
