"""Recipe tag display context."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict

from config import get_tag_emojis, get_tag_search_url


class TagContext(BaseModel):
    """Everything the tag macro needs to render one tag."""

    name: str
    emoji: str | None = None
    href: str

    model_config = ConfigDict(frozen=True)


def tag_href(name: str) -> str:
    """Search link for a tag, with the tag percent-encoded."""
    return get_tag_search_url().replace("{tag}", quote(name, safe=""))


def tag_context(name: str) -> TagContext:
    """Build the display context for a tag using the configured emojis."""
    emoji = get_tag_emojis().get(name.lower())
    return TagContext(name=name, emoji=emoji, href=tag_href(name))
