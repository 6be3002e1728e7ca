"""
Centralized exception hierarchy for view-layer errors.

Formatting itself never raises; these cover configuration problems and
template rendering failures so the application can map them to responses.
"""


class RecipeViewError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(RecipeViewError):
    """Exception raised when view input fails validation."""


class RenderError(RecipeViewError):
    """Exception raised when a template cannot be rendered."""


class ConfigurationError(RecipeViewError):
    """Exception raised when an environment setting is unusable."""


RecipeViewException = RecipeViewError
ValidationException = ValidationError
RenderException = RenderError
ConfigurationException = ConfigurationError
