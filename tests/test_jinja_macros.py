from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

import config
from core.exceptions import RenderError
from core.jinja import render_fragment, templates
from recipe_quantities.models import (
    FloatNumber,
    FractionNumber,
    NumberValue,
    Quantity,
    RangeValue,
    TextValue,
)
from recipe_ui.toasts import Toast


def _render(source: str, **context: Any) -> str:
    template = templates.env.from_string('{% import "macros.html" as m %}' + source)
    return template.render(**context)


def _fraction_quantity(unit: str | None = "cup", err: float = 0.0) -> Quantity:
    return Quantity(
        value=NumberValue(value=FractionNumber(whole=2, num=1, den=2, err=err)),
        unit=unit,
    )


def test_quantity_macro_splits_value_and_unit() -> None:
    html = _render("{{ m.quantity(q) }}", q=_fraction_quantity())
    assert html == (
        '<span class="quantity convertible" data-unit="cup">'
        '<span class="quantity-value">'
        '<span class="number-whole">2</span><span class="number-fraction">½</span>'
        "</span>"
        ' <span class="quantity-unit">cup</span>'
        "</span>"
    )


def test_quantity_macro_hides_error_annotation() -> None:
    html = _render("{{ m.quantity(q) }}", q=_fraction_quantity(err=0.002))
    assert '<span class="quantity-error" hidden>+0.002</span>' in html

    html = _render("{{ m.quantity(q) }}", q=_fraction_quantity(err=0.0005))
    assert "quantity-error" not in html


def test_quantity_without_unit_is_not_convertible() -> None:
    html = _render("{{ m.quantity(q) }}", q=_fraction_quantity(unit=None))
    assert html.startswith('<span class="quantity">')
    assert "convertible" not in html
    assert "quantity-unit" not in html


def test_zero_fraction_shows_zero() -> None:
    html = _render("{{ m.number(n) }}", n=FractionNumber(whole=0, num=0, den=1))
    assert html == '<span class="number-whole">0</span>'


def test_range_macro() -> None:
    value = RangeValue(start=FloatNumber(value=3.0), end=FloatNumber(value=5.0))
    html = _render("{{ m.value(v) }}", v=value)
    assert html == (
        '<span class="number-whole">3</span>-<span class="number-whole">5</span>'
    )


def test_text_value_is_escaped_verbatim() -> None:
    html = _render("{{ m.value(v) }}", v=TextValue(value="a <b>pinch</b>"))
    assert html == "a &lt;b&gt;pinch&lt;/b&gt;"


def test_macros_accept_serialized_quantities() -> None:
    data = {
        "value": {
            "type": "number",
            "value": {"type": "fraction", "value": {"whole": 0, "num": 1, "den": 3, "err": 0.0}},
        },
        "unit": "tsp",
    }
    html = _render("{{ m.quantity(q) }}", q=data)
    assert '<span class="number-fraction">⅓</span>' in html
    assert 'data-unit="tsp"' in html


def test_text_filters() -> None:
    html = _render(
        "{{ q | format_quantity }}|{{ q.value | format_value(false) }}",
        q=_fraction_quantity(err=0.01),
    )
    assert html == "2½ (+0.01) cup|2½"


def test_tag_macro(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAG_EMOJIS", "vegan=🌱")
    html = _render("{{ m.tag('vegan') }}|{{ m.tag('dinner') }}")
    vegan, dinner = html.split("|")
    assert vegan == (
        '<a class="tag" href="/?search=tag:vegan">'
        '<span class="tag-emoji">🌱</span> <span class="tag-name">vegan</span></a>'
    )
    assert "tag-emoji" not in dinner
    assert '<span class="tag-name">dinner</span>' in dinner


def test_toast_macro() -> None:
    toast = Toast(level="error", message="Could not save", title="Oops", timeout_ms=0)
    html = _render("{{ m.toast(t) }}", t=toast)
    assert 'class="toast toast-error" role="alert" data-timeout="0"' in html
    assert '<strong class="toast-title">Oops</strong>' in html
    assert '<p class="toast-message">Could not save</p>' in html
    assert 'class="toast-close"' in html


def test_render_fragment() -> None:
    html = render_fragment("fragments/quantity.html", quantity=_fraction_quantity())
    assert '<span class="quantity-unit">cup</span>' in html


def test_render_fragment_missing_template() -> None:
    with pytest.raises(RenderError) as excinfo:
        render_fragment("fragments/missing.html")
    assert excinfo.value.details["template"] == "fragments/missing.html"


def test_quantity_with_empty_unit_is_not_convertible() -> None:
    html = _render("{{ m.quantity(q) }}", q=_fraction_quantity(unit=""))
    assert html.startswith('<span class="quantity">')
    assert "convertible" not in html
    assert "data-unit" not in html
    assert "quantity-unit" not in html


def test_value_macro_renders_nothing_for_unknown_variant() -> None:
    unknown = SimpleNamespace(type="percent", value="50")
    assert _render("{{ m.value(v) }}", v=unknown) == ""


def test_templates_ship_inside_core_package() -> None:
    templates_dir = Path(config.TEMPLATES_DIR)
    assert templates_dir.parent.name == "core"
    assert (templates_dir / "macros.html").is_file()
    assert (templates_dir / "fragments" / "quantity.html").is_file()
