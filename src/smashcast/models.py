"""Pydantic models for Smashcast API payload elements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .client import SmashcastClient
    from .logo import Logo


class EditorRecord(BaseModel):
    """An entry of a channel's editor list."""

    model_config = ConfigDict(extra="allow")

    user_name: str
    user_id: str | int | None = None
    user_logo: str | None = None


class HosterRecord(BaseModel):
    """A channel currently hosting another channel."""

    model_config = ConfigDict(extra="allow")

    user_name: str
    user_id: str | int | None = None


class Emoji(BaseModel):
    """A chat emote available in a channel."""

    model_config = ConfigDict(extra="allow")

    icon_name: str
    icon_short: str
    icon_path: str
    icon_id: str | int | None = None

    def get_image(self, client: SmashcastClient | None = None) -> Logo:
        from .logo import Logo

        return Logo(self.icon_path, client=client)
