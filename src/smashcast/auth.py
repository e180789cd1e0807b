from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthToken:
    """A user session token issued by Smashcast."""

    token: str

    def __post_init__(self) -> None:
        if not self.token or not self.token.strip():
            raise ValueError("Auth token must not be empty")

    def get_token(self) -> str:
        return self.token

    def __str__(self) -> str:
        return self.token

    def __repr__(self) -> str:
        return "AuthToken(token='***')"
