"""Small reusable UI pieces rendered by the shared macros."""

from recipe_ui.tags import TagContext, tag_context
from recipe_ui.toasts import Toast, ToastLevel

__all__ = ["TagContext", "Toast", "ToastLevel", "tag_context"]
