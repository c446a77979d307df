import pytest

from shinkit import UI, ElementConfigError, element_kind, make_element
from shinkit.core.elements.kind_registry import element_kind_registry


def test_numeric_allows_open_bounds():
    d = UI.numeric("n")
    assert (d["min"], d["max"], d["value"], d["step"]) == (None, None, 0.0, None)

    bounded = UI.numeric("m", min=0, max=100, value=50, step=5)
    assert bounded["max"] == 100


@pytest.mark.parametrize(
    "overrides",
    [
        {"min": 10, "max": 0},
        {"min": 1, "value": 0},
        {"max": -1, "value": 0},
        {"step": -1},
    ],
)
def test_numeric_validation(overrides):
    with pytest.raises(ElementConfigError):
        UI.numeric("n", **overrides)


def test_text_defaults_and_validation():
    d = UI.text("name", placeholder="your name")
    assert d["value"] == ""
    assert d["placeholder"] == "your name"

    with pytest.raises(ElementConfigError, match="str"):
        UI.text("name", value=3)


def test_select_defaults_value_to_first_choice_and_freezes_choices():
    d = UI.select("dist", choices=["norm", "unif", "exp"])
    assert d["choices"] == ("norm", "unif", "exp")
    assert d["value"] == "norm"
    assert hash(d) == hash(UI.select("dist", choices=("norm", "unif", "exp")))


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({}, "choices が空"),
        ({"choices": "abc"}, "Sequence"),
        ({"choices": ["a", "b"], "value": "c"}, "choices にありません"),
    ],
)
def test_select_validation(overrides, match):
    with pytest.raises(ElementConfigError, match=match):
        UI.select("s", **overrides)


def test_checkbox_requires_bool():
    assert UI.checkbox("flag")["value"] is False
    assert UI.checkbox("flag", value=True)["value"] is True
    with pytest.raises(ElementConfigError, match="bool"):
        UI.checkbox("flag", value=1)


def test_user_defined_kind_is_usable_through_factory():
    @element_kind("rating", defaults={"stars": 5, "value": 3}, value_type="int")
    def rating(element_id, fields):
        if not 0 <= fields["value"] <= fields["stars"]:
            raise ElementConfigError(f"{element_id}: value out of range")
        return dict(fields)

    try:
        d = make_element("rating", "quality", value=4)
        assert d.options == (("stars", 5), ("value", 4))
        assert UI.rating("q2")["value"] == 3
        with pytest.raises(ElementConfigError):
            make_element("rating", "quality", value=9)
    finally:
        element_kind_registry._items.pop("rating", None)  # type: ignore[attr-defined]


def test_element_kind_rejects_reserved_or_unknown_declarations():
    with pytest.raises(ValueError, match="id/label/kind"):
        element_kind("bad", defaults={"id": "x"}, value_type="str")
    with pytest.raises(ValueError, match="value_type"):
        element_kind("bad", defaults={}, value_type="complex")
