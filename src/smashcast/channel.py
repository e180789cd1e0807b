"""Channel-scoped operations against the Smashcast API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal, Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from .cache import CachedValue
from .client import SmashcastClient, get_default_client
from .emojis import SmashcastChannelEmojis
from .errors import InvalidArgumentError, InvalidOperationError, SmashcastApiError
from .live_media import SmashcastLiveMedia
from .models import EditorRecord, HosterRecord

LOGGER = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

TWEET_SUFFIX = " via @smashcast_tv"
TWEET_MAX_LENGTH = 144
SUCCESS_MESSAGE = "success"


@dataclass(frozen=True, slots=True)
class ToggleResult:
    success: bool
    action: Literal["added", "removed"]


def _is_success(response: Any) -> bool:
    return isinstance(response, dict) and response.get("message") == SUCCESS_MESSAGE


def _parse_records(response: Any, key: str, model: type[M]) -> list[M] | None:
    entries = response.get(key) if isinstance(response, dict) else None
    if not isinstance(entries, list):
        return None
    try:
        return [model.model_validate(entry) for entry in entries]
    except ValidationError as exc:
        LOGGER.warning("Unexpected '%s' payload: %s", key, exc)
        return None


def _parse_view_count(value: Any) -> int | None:
    # The API sends `false` instead of 0 for channels without views.
    if value is False:
        return 0
    if isinstance(value, bool) or value is None:
        return None
    try:
        count = int(value)
    except (TypeError, ValueError):
        return None
    return count if count >= 0 else None


def _contains_user(records: Sequence[EditorRecord | HosterRecord] | None, user_name: str) -> bool:
    if not records:
        return False
    user_name = user_name.lower()
    for record in records:
        if record.user_name.lower() == user_name:
            return True
    return False


class SmashcastChannel:
    """A channel on Smashcast, identified by its lowercased name.

    Editor and hoster lists and the total view count are memoized per
    instance. Remote failures come back as ``None`` or ``False``; only
    misuse (editing yourself, redundant add/remove, over-long tweets) raises.

    Privileged calls put the user auth token into the request body, so the
    client must have one configured via ``set_user_auth_token``.
    """

    def __init__(self, name: str, *, client: Optional[SmashcastClient] = None) -> None:
        if not name or not name.strip():
            raise ValueError("Channel name must not be empty")
        self._channel_name = name.strip().lower()
        self._client = client
        self._editors: CachedValue[list[EditorRecord]] = CachedValue()
        self._hosters: CachedValue[list[HosterRecord]] = CachedValue()
        self._total_views: CachedValue[int] = CachedValue()
        self._live_media: Optional[SmashcastLiveMedia] = None
        self._chat_emojis: Optional[SmashcastChannelEmojis] = None

    @property
    def client(self) -> SmashcastClient:
        if self._client is None:
            self._client = get_default_client()
        return self._client

    @property
    def channel_name(self) -> str:
        return self._channel_name

    def get_channel_name(self) -> str:
        return self._channel_name

    def get_live_media(self) -> SmashcastLiveMedia:
        if self._live_media is None:
            self._live_media = SmashcastLiveMedia(self._channel_name, self.client)
        return self._live_media

    def get_chat_emojis(self) -> SmashcastChannelEmojis:
        if self._chat_emojis is None:
            self._chat_emojis = SmashcastChannelEmojis(self._channel_name, self.client)
        return self._chat_emojis

    def get_time_created(self) -> datetime | None:
        """Shortcut for the live media creation time. None when it cannot be determined."""
        return self.get_live_media().get_time_created()

    # -- stream key -------------------------------------------------------

    def get_stream_key(self) -> str | None:
        """Return the plain stream key, or None on failure.

        The key alone is not a full ingest target; prepend ``<channel>?key=``.
        """
        return self._stream_key_request("GET")

    def reset_stream_key(self) -> str | None:
        """Rotate the stream key and return the new one, or None on failure.

        Do not call this while streaming.
        """
        return self._stream_key_request("PUT")

    def _stream_key_request(self, method: str) -> str | None:
        try:
            response = self.client.request(
                method,
                f"mediakey/{self._channel_name}",
                append_auth_token=False,
                requires_auth=True,
            )
        except SmashcastApiError as exc:
            LOGGER.debug("Stream key %s for %s failed: %s", method, self._channel_name, exc)
            return None

        key = response.get("streamKey") if isinstance(response, dict) else None
        return key if isinstance(key, str) else None

    # -- editors ----------------------------------------------------------

    def invalidate_cache(self) -> SmashcastChannel:
        """Forget cached editor and hoster lists."""
        self._editors.clear()
        self._hosters.clear()
        return self

    def get_editors(self, skip_cache: bool = False) -> list[EditorRecord] | None:
        """Return the channel's editors, or None on failure.

        Only the channel owner may read this list.
        """
        if not skip_cache and self._editors.is_present:
            return self._editors.get()

        try:
            response = self.client.request(
                "GET",
                f"editors/{self._channel_name}",
                append_auth_token=False,
                requires_auth=True,
            )
        except SmashcastApiError as exc:
            LOGGER.debug("Fetching editors of %s failed: %s", self._channel_name, exc)
            return None

        editors = _parse_records(response, "list", EditorRecord)
        if editors is not None:
            self._editors.set(editors)
        return editors

    def is_editor(self, user_name: str) -> bool:
        return _contains_user(self.get_editors(), user_name)

    def add_editor(self, user_name: str) -> bool:
        """Grant ``user_name`` editor rights. Returns whether the API confirmed it.

        Raises:
            InvalidOperationError: ``user_name`` is this channel or already an editor.
        """
        if self._channel_name == user_name.lower():
            raise InvalidOperationError("A channel cannot add itself as an editor")
        if self.is_editor(user_name):
            raise InvalidOperationError(f"{user_name} is already an editor of {self._channel_name}")
        return self._update_editor(user_name, remove=False)

    def remove_editor(self, user_name: str) -> bool:
        """Revoke editor rights from ``user_name``. Returns whether the API confirmed it.

        Raises:
            InvalidOperationError: ``user_name`` is this channel or not an editor.
        """
        if self._channel_name == user_name.lower():
            raise InvalidOperationError("A channel cannot remove itself as an editor")
        if not self.is_editor(user_name):
            raise InvalidOperationError(f"{user_name} is not an editor of {self._channel_name}")
        return self._update_editor(user_name, remove=True)

    def toggle_editor(self, user_name: str) -> ToggleResult:
        if self.is_editor(user_name):
            return ToggleResult(success=self.remove_editor(user_name), action="removed")
        return ToggleResult(success=self.add_editor(user_name), action="added")

    def _update_editor(self, user_name: str, *, remove: bool) -> bool:
        try:
            response = self.client.request(
                "POST",
                f"editors/{self._channel_name}",
                json={
                    "authToken": self.client.get_user_auth_token().get_token(),
                    "editor": user_name,
                    "remove": remove,
                },
                append_auth_token=False,
                requires_auth=True,
            )
        except SmashcastApiError as exc:
            LOGGER.warning(
                "%s editor %s on %s failed: %s",
                "Removing" if remove else "Adding",
                user_name,
                self._channel_name,
                exc,
            )
            return False

        if not _is_success(response):
            return False

        self.invalidate_cache()
        return True

    # -- social -----------------------------------------------------------

    def send_tweet(self, message: str) -> bool:
        """Post ``message`` to the channel's linked Twitter account.

        The platform appends a fixed attribution suffix, which counts against
        the length limit.

        Raises:
            InvalidArgumentError: The message plus suffix is too long.
        """
        length = len(message + TWEET_SUFFIX)
        if length > TWEET_MAX_LENGTH:
            raise InvalidArgumentError(
                f"The message must not be longer than {TWEET_MAX_LENGTH} characters "
                f"including the '{TWEET_SUFFIX.strip()}' suffix (got {length})"
            )
        return self._social_post("twitter/post", message)

    def send_facebook_post(self, message: str) -> bool:
        return self._social_post("facebook/post", message)

    def _social_post(self, path: str, message: str) -> bool:
        try:
            response = self.client.request(
                "POST",
                path,
                json={
                    "authToken": self.client.get_user_auth_token().get_token(),
                    "user_name": self._channel_name,
                    "message": message,
                },
                params={"user_name": self._channel_name},
                append_auth_token=False,
                requires_auth=True,
            )
        except SmashcastApiError as exc:
            LOGGER.warning("Posting to %s for %s failed: %s", path, self._channel_name, exc)
            return False
        return _is_success(response)

    # -- hosters ----------------------------------------------------------

    def get_hosting_channels(self, skip_cache: bool = False) -> list[HosterRecord] | None:
        """Return the channels hosting this channel, or None on failure.

        An empty list means nobody hosts the channel.
        """
        if not skip_cache and self._hosters.is_present:
            return self._hosters.get()

        try:
            response = self.client.request(
                "GET",
                f"hosters/{self._channel_name}",
                append_auth_token=False,
                requires_auth=True,
            )
        except SmashcastApiError as exc:
            LOGGER.debug("Fetching hosters of %s failed: %s", self._channel_name, exc)
            return None

        hosters = _parse_records(response, "hosters", HosterRecord)
        if hosters is not None:
            self._hosters.set(hosters)
        return hosters

    def is_hoster(self, user_name: str) -> bool:
        return _contains_user(self.get_hosting_channels(), user_name)

    # -- views ------------------------------------------------------------

    def get_total_views(self, skip_cache: bool = False) -> int | None:
        """Return the total live views, or None on failure.

        A failed refresh drops any previously cached count.
        """
        # TODO: decide whether a failed refresh should be retried once before giving up
        if not skip_cache and self._total_views.is_present:
            return self._total_views.get()

        try:
            response = self.client.request(
                "GET", f"media/views/{self._channel_name}", append_auth_token=False
            )
        except SmashcastApiError as exc:
            LOGGER.debug("Fetching views of %s failed: %s", self._channel_name, exc)
            self._total_views.clear()
            return None

        raw = response.get("total_live_views") if isinstance(response, dict) else None
        views = _parse_view_count(raw)
        self._total_views.set(views)
        return views

    def __str__(self) -> str:
        return self._channel_name

    def __repr__(self) -> str:
        return f"SmashcastChannel({self._channel_name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmashcastChannel):
            return NotImplemented
        return self._channel_name == other._channel_name

    def __hash__(self) -> int:
        return hash(self._channel_name)
