import logging
from typing import Any

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from pydantic import TypeAdapter

from config import TEMPLATES_DIR
from core.exceptions import RenderError
from recipe_quantities.formatting import (
    NumberParts,
    format_number,
    format_quantity,
    format_value,
    number_parts,
)
from recipe_quantities.glyphs import fraction_glyph
from recipe_quantities.models import Number, Quantity, Value
from recipe_ui.tags import tag_context

logger = logging.getLogger(__name__)

# Single shared template environment; routers import this instead of
# creating separate Jinja2Templates instances.
templates = Jinja2Templates(directory=TEMPLATES_DIR)

_number_adapter: TypeAdapter = TypeAdapter(Number)
_value_adapter: TypeAdapter = TypeAdapter(Value)


# Templates may receive serialized quantities straight from JSON context, so
# the filters accept plain dicts as well as models.


def _as_number(value: Any) -> Any:
    if isinstance(value, dict):
        return _number_adapter.validate_python(value)
    return value


def _as_value(value: Any) -> Any:
    if isinstance(value, dict):
        return _value_adapter.validate_python(value)
    return value


def _as_quantity(value: Any) -> Quantity:
    if isinstance(value, dict):
        return Quantity.model_validate(value)
    return value


def format_number_filter(value: Any, show_error: bool = True) -> str:
    """Format a number (fraction or decimal) as plain text."""
    return format_number(_as_number(value), show_error=show_error)


def format_value_filter(value: Any, show_error: bool = True) -> str:
    """Format a number, range or text value as plain text."""
    return format_value(_as_value(value), show_error=show_error)


def format_quantity_filter(value: Any, show_error: bool = True) -> str:
    """Format a quantity and its unit as plain text."""
    return format_quantity(_as_quantity(value), show_error=show_error)


def number_parts_filter(value: Any) -> NumberParts:
    return number_parts(_as_number(value))


def as_value_filter(value: Any) -> Any:
    return _as_value(value)


def as_quantity_filter(value: Any) -> Quantity:
    return _as_quantity(value)


_FILTERS = {
    "format_number": format_number_filter,
    "format_value": format_value_filter,
    "format_quantity": format_quantity_filter,
    "number_parts": number_parts_filter,
    "fraction_glyph": fraction_glyph,
    "as_value": as_value_filter,
    "as_quantity": as_quantity_filter,
}

_GLOBALS = {
    "tag_context": tag_context,
}


def register_template_filters(tpl: Jinja2Templates | None = None) -> None:
    """Register shared Jinja filters and globals on the template environment."""
    target = tpl or templates
    for name, func in _FILTERS.items():
        if name not in target.env.filters:
            target.env.filters[name] = func
    for name, func in _GLOBALS.items():
        if name not in target.env.globals:
            target.env.globals[name] = func


def render_fragment(
    template_name: str,
    tpl: Jinja2Templates | None = None,
    **context: Any,
) -> str:
    """Render a template to a string, raising RenderError on template failures."""
    target = tpl or templates
    try:
        return target.get_template(template_name).render(**context)
    except TemplateError as exc:
        logger.error("Failed to render %s: %s", template_name, exc)
        raise RenderError(
            f"Failed to render {template_name}",
            {"template": template_name, "reason": str(exc)},
        ) from exc


# Auto-register on the shared instance at import time.
register_template_filters()
