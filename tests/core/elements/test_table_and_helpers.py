import pytest

from shinkit import UI, ElementConfigError, element_factory, elements_from_table


def test_elements_from_table_builds_one_element_per_row():
    table = {
        "id": ["alpha", "beta", "gamma"],
        "label": ["Alpha", None, "Gamma"],
        "min": [0, -1, None],
        "max": [1, 1, 10],
    }

    out = elements_from_table("slider", table)

    assert [d.id for d in out] == ["alpha", "beta", "gamma"]
    assert [d.label for d in out] == ["Alpha", "beta", "Gamma"]
    assert out[1]["min"] == -1
    # None セルは上書きなし
    assert out[2]["min"] == 0.0
    assert out[2]["max"] == 10


def test_table_requires_id_column():
    with pytest.raises(ElementConfigError, match="'id' 列"):
        elements_from_table("slider", {"min": [0, 1]})


def test_table_columns_must_have_equal_length():
    with pytest.raises(ElementConfigError, match="長さが一致しません"):
        elements_from_table("slider", {"id": ["a", "b"], "max": [1.0]})


def test_table_rejects_string_column():
    with pytest.raises(ElementConfigError, match="sequence"):
        elements_from_table("slider", {"id": "abc"})


def test_element_factory_fixes_baseline_once():
    slider10 = element_factory("slider", max=10.0, step=1.0)

    d = slider10("alpha")
    assert (d["min"], d["max"], d["value"], d["step"]) == (0.0, 10.0, 0.5, 1.0)
    assert slider10("beta", value=7.0)["value"] == 7.0
    assert slider10.defaults == {"max": 10.0, "step": 1.0}


def test_element_factory_many_and_table():
    slider10 = element_factory("slider", max=10.0)

    many = slider10.many(["a", {"id": "b", "value": 9.0}])
    assert [d["max"] for d in many] == [10.0, 10.0]
    assert many[1]["value"] == 9.0

    rows = slider10.from_table({"id": ["c", "d"], "value": [1.0, None]})
    assert [d["value"] for d in rows] == [1.0, 0.5]


def test_with_defaults_returns_new_factory():
    base = element_factory("slider", max=10.0)
    fine = base.with_defaults(step=0.01)

    assert fine("a")["step"] == 0.01
    assert base("a")["step"] == 0.1
    assert fine.kind == "slider"


def test_element_factory_rejects_unknown_default():
    with pytest.raises(ElementConfigError, match="未知フィールド"):
        element_factory("slider", colour="red")


def test_ui_namespace_exposes_registered_kinds():
    d = UI.slider("alpha")
    assert d.kind == "slider"
    assert [x.id for x in UI.checkbox.many(["on", "off"])] == ["on", "off"]
    assert "select" in dir(UI)


def test_ui_namespace_rejects_unknown_kind():
    with pytest.raises(AttributeError, match="未登録"):
        UI.knob
    with pytest.raises(AttributeError):
        UI._private
