from __future__ import annotations

import logging

from pydantic import ValidationError

from .cache import CachedValue
from .client import SmashcastClient
from .errors import SmashcastApiError
from .models import Emoji

LOGGER = logging.getLogger(__name__)


class SmashcastChannelEmojis:
    """Chat emotes registered for a channel."""

    def __init__(self, channel_name: str, client: SmashcastClient) -> None:
        self.channel_name = channel_name
        self._client = client
        self._emojis: CachedValue[list[Emoji]] = CachedValue()

    def get_emojis(self, skip_cache: bool = False) -> list[Emoji] | None:
        if not skip_cache and self._emojis.is_present:
            return self._emojis.get()

        try:
            response = self._client.request(
                "GET", f"chat/emotes/{self.channel_name}", append_auth_token=False
            )
        except SmashcastApiError as exc:
            LOGGER.debug("Fetching emotes for %s failed: %s", self.channel_name, exc)
            return None

        items = response.get("items") if isinstance(response, dict) else None
        if not isinstance(items, list):
            return None
        try:
            emojis = [Emoji.model_validate(item) for item in items]
        except ValidationError as exc:
            LOGGER.warning("Unexpected emote payload for %s: %s", self.channel_name, exc)
            return None

        self._emojis.set(emojis)
        return emojis

    def find(self, shortcut: str) -> Emoji | None:
        """Look up an emote by its chat shortcut, ignoring case."""
        emojis = self.get_emojis() or []
        shortcut = shortcut.lower()
        for emoji in emojis:
            if emoji.icon_short.lower() == shortcut:
                return emoji
        return None
