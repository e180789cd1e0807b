from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

import requests

from .auth import AuthToken
from .config import SmashcastConfig
from .errors import SmashcastApiError, SmashcastAuthError
from .utils import build_url, validate_url

LOGGER = logging.getLogger(__name__)

AUTH_TOKEN_PARAM = "authToken"


def _parse_json_response(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        snippet = response.text[:500]
        raise SmashcastApiError(
            f"Failed to parse Smashcast response as JSON ({response.status_code}): {snippet}",
            status_code=response.status_code,
        ) from exc


def _raise_for_error_envelope(payload: Any, status_code: int) -> None:
    # Smashcast reports some failures as 200 with {"error": true, "error_msg": ...}
    if isinstance(payload, dict) and payload.get("error") is True:
        message = payload.get("error_msg") or "unknown error"
        raise SmashcastApiError(f"Smashcast API error: {message}", status_code=status_code)


class SmashcastClient:
    """Thin wrapper around the Smashcast REST API.

    Every call is a single blocking request. Failures surface immediately as
    :class:`SmashcastApiError`; there are no retries and no rate limiting.
    The user auth token, when set, is only ever sent in query parameters or
    JSON bodies and is never logged.
    """

    def __init__(
        self,
        config: Optional[SmashcastConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or SmashcastConfig()
        if not validate_url(self.config.api_url):
            raise SmashcastApiError(f"Invalid Smashcast API URL: {self.config.api_url}")

        self.session = session or requests.Session()
        self._owns_session = session is None
        self._auth_token: Optional[AuthToken] = None
        if self.config.auth_token:
            self._auth_token = AuthToken(self.config.auth_token)

    def set_user_auth_token(self, token: AuthToken | str | None) -> None:
        if isinstance(token, str):
            token = AuthToken(token)
        self._auth_token = token

    def has_user_auth_token(self) -> bool:
        return self._auth_token is not None

    def get_user_auth_token(self) -> AuthToken:
        if self._auth_token is None:
            raise SmashcastAuthError("No user auth token configured")
        return self._auth_token

    def image_url(self, path: str) -> str:
        """Resolve a media path (e.g. ``/static/img/...``) on the image host."""
        return self.config.image_url.rstrip("/") + "/" + path.lstrip("/")

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
        append_auth_token: bool = True,
        requires_auth: bool = False,
    ) -> Any:
        """Issue one API request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the configured API URL.
            json: Optional JSON body.
            params: Optional query parameters.
            append_auth_token: Send the user token as ``authToken`` query parameter when one is set.
            requires_auth: Fail before any network I/O when no user token is set.

        Raises:
            SmashcastAuthError: ``requires_auth`` is set and no token is configured.
            SmashcastApiError: On transport failure, status >= 400, a non-JSON body or an error envelope.
        """
        if requires_auth and self._auth_token is None:
            raise SmashcastAuthError(f"{method.upper()} {path} requires a user auth token")

        url = build_url(self.config.api_url, path)
        merged_params = dict(params or {})
        if append_auth_token and self._auth_token is not None:
            merged_params[AUTH_TOKEN_PARAM] = self._auth_token.get_token()
        headers = {
            "Accept": "application/json",
            "User-Agent": self.config.user_agent,
        }

        LOGGER.debug("Smashcast %s %s", method.upper(), path)

        try:
            response = self.session.request(
                method.upper(),
                url,
                params=merged_params or None,
                json=json,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise SmashcastApiError(f"Smashcast request failed: {exc}") from exc

        if response.status_code >= 400:
            snippet = response.text[:200]
            raise SmashcastApiError(
                f"Smashcast request failed ({response.status_code}): {snippet}",
                status_code=response.status_code,
            )

        payload = _parse_json_response(response)
        _raise_for_error_envelope(payload, response.status_code)
        return payload

    def fetch_bytes(self, url: str) -> bytes:
        """Download the raw body of an absolute URL."""
        LOGGER.debug("Smashcast GET %s", url)
        try:
            response = self.session.get(
                url,
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.timeout,
            )
        except requests.RequestException as exc:
            raise SmashcastApiError(f"Download of {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise SmashcastApiError(
                f"Download of {url} failed ({response.status_code})",
                status_code=response.status_code,
            )
        return response.content

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> SmashcastClient:
        return self

    def __exit__(self, *args) -> None:
        self.close()


_default_client: Optional[SmashcastClient] = None
_default_lock = threading.Lock()


def get_default_client() -> SmashcastClient:
    """Return the process-wide client, creating one with default settings on first use."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = SmashcastClient()
        return _default_client


def set_default_client(client: Optional[SmashcastClient]) -> None:
    """Replace the process-wide client. ``None`` resets it to lazy defaults."""
    global _default_client
    with _default_lock:
        _default_client = client
