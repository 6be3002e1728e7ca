"""Toast notification model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config import get_toast_timeout_ms


class ToastLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Toast(BaseModel):
    """A transient message shown in the page's toast area."""

    level: ToastLevel = ToastLevel.INFO
    message: str = Field(..., min_length=1)
    title: str | None = None
    # 0 keeps the toast until the user dismisses it
    timeout_ms: int = Field(default_factory=get_toast_timeout_ms, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def role(self) -> str:
        """ARIA role: problems interrupt, everything else is announced politely."""
        if self.level in (ToastLevel.WARNING, ToastLevel.ERROR):
            return "alert"
        return "status"
