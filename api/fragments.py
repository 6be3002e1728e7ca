"""HTML fragment endpoints for quantities, tags and toasts.

The page swaps these fragments in place, e.g. after a unit conversion
returns a new quantity or when the server reports an action result.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, PlainTextResponse

from core.jinja import render_fragment
from recipe_quantities.formatting import format_quantity
from recipe_quantities.models import Quantity
from recipe_ui.toasts import Toast

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/fragments", tags=["fragments"])


@router.post("/quantity", response_class=HTMLResponse)
async def quantity_fragment(quantity: Quantity, plain: bool = False):
    """Render a quantity as markup, or as plain text with ``?plain=true``."""
    logger.debug("Rendering quantity fragment (plain=%s)", plain)
    if plain:
        return PlainTextResponse(format_quantity(quantity))
    return HTMLResponse(render_fragment("fragments/quantity.html", quantity=quantity))


@router.get("/tags", response_class=HTMLResponse)
async def tags_fragment(tag: Annotated[list[str] | None, Query()] = None):
    """Render a list of recipe tags."""
    tags = [name for name in (tag or []) if name.strip()]
    logger.debug("Rendering %d tags", len(tags))
    return HTMLResponse(render_fragment("fragments/tags.html", tags=tags))


@router.post("/toast", response_class=HTMLResponse)
async def toast_fragment(toast: Toast):
    """Render a toast notification."""
    logger.debug("Rendering %s toast", toast.level.value)
    return HTMLResponse(render_fragment("fragments/toast.html", toast=toast))
