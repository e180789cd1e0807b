from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from .cache import CachedValue
from .client import SmashcastClient
from .errors import SmashcastApiError
from .logo import Logo

LOGGER = logging.getLogger(__name__)

MEDIA_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SmashcastLiveMedia:
    """The live stream media object of a channel."""

    def __init__(self, channel_name: str, client: SmashcastClient) -> None:
        self.channel_name = channel_name
        self._client = client
        self._media: CachedValue[dict[str, Any]] = CachedValue()

    def get_media(self, skip_cache: bool = False) -> dict[str, Any] | None:
        """Return the first ``livestream`` entry for this channel, or None on failure."""
        if not skip_cache and self._media.is_present:
            return self._media.get()

        try:
            response = self._client.request(
                "GET", f"media/live/{self.channel_name}", append_auth_token=False
            )
        except SmashcastApiError as exc:
            LOGGER.debug("Fetching live media for %s failed: %s", self.channel_name, exc)
            return None

        entries = response.get("livestream") if isinstance(response, dict) else None
        if not entries or not isinstance(entries[0], dict):
            return None

        self._media.set(entries[0])
        return entries[0]

    def get_time_created(self) -> datetime | None:
        """When the media was added. None when unknown or unparsable."""
        media = self.get_media()
        if media is None:
            return None
        raw = media.get("media_date_added")
        if not isinstance(raw, str):
            return None
        try:
            return datetime.strptime(raw, MEDIA_DATE_FORMAT).replace(tzinfo=UTC)
        except ValueError:
            LOGGER.debug("Unparsable media_date_added for %s: %r", self.channel_name, raw)
            return None

    def is_live(self) -> bool:
        media = self.get_media()
        if media is None:
            return False
        return str(media.get("media_is_live", "0")) == "1"

    def get_logo(self) -> Logo | None:
        """The channel logo referenced by the media, if any."""
        media = self.get_media()
        if media is None:
            return None
        channel = media.get("channel")
        if not isinstance(channel, dict):
            return None
        path = channel.get("user_logo")
        if not path:
            return None
        return Logo(path, client=self._client)
