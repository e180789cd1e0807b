"""Lazily downloaded media resources hosted on the Smashcast image server."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from .client import SmashcastClient, get_default_client
from .errors import SmashcastApiError, SmashcastFetchError

LOGGER = logging.getLogger(__name__)


@runtime_checkable
class Downloadable(Protocol):
    """A remote resource whose content can be fetched and stored locally."""

    def get_content(self) -> bytes: ...

    def download_to(self, location: str | Path) -> bool: ...


class Logo:
    """Reference to an image on the media host.

    Nothing is fetched on construction. The first call to :meth:`get_content`
    downloads the image and the bytes are kept for the lifetime of the object;
    build a new ``Logo`` to fetch it again.
    """

    def __init__(self, path: str, *, client: Optional[SmashcastClient] = None) -> None:
        self._path = path
        self._client = client
        self._content: Optional[bytes] = None
        self._lock = threading.Lock()

    @property
    def client(self) -> SmashcastClient:
        if self._client is None:
            self._client = get_default_client()
        return self._client

    @property
    def path(self) -> str:
        """The path relative to the media host."""
        return self._path

    @property
    def url(self) -> str:
        """The absolute location of the image."""
        return self.client.image_url(self._path)

    def get_content(self) -> bytes:
        """Return the image bytes, downloading them on first access.

        Raises:
            SmashcastFetchError: The download failed.
        """
        with self._lock:
            if self._content is not None:
                return self._content

            try:
                content = self.client.fetch_bytes(self.url)
            except SmashcastApiError as exc:
                raise SmashcastFetchError(
                    f"Cannot download logo {self.url}", status_code=exc.status_code
                ) from exc

            self._content = content
            return content

    def download_to(self, location: str | Path) -> bool:
        """Write the image to ``location``. Returns False when nothing could be written.

        Download failures still raise :class:`SmashcastFetchError`.
        """
        content = self.get_content()
        if not content:
            LOGGER.debug("Logo %s has no content, nothing to write", self.url)
            return False

        target = Path(location)
        try:
            target.write_bytes(content)
        except OSError as exc:
            LOGGER.warning("Failed to write logo %s to %s: %s", self.url, target, exc)
            return False
        return True

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"Logo(path={self._path!r})"
