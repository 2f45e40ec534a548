"""OAuth access token."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..config import TOKEN_EXPIRY_MARGIN_SECONDS


class Token(BaseModel):
    """Access token returned by the accounts service.

    ``expires_at`` is not part of the OAuth response: it is stamped when the
    token is received and serialized as unix seconds so a saved token can be
    restored later with ``Spotify.set_token``.
    """

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = Field(..., ge=0)
    expires_at: datetime | None = None
    refresh_token: str | None = None
    scope: str | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("expires_at")
    @classmethod
    def validate_expires_at(cls, v: datetime | None) -> datetime | None:
        """Treat naive datetimes as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @field_serializer("expires_at")
    def serialize_expires_at(self, v: datetime | None) -> int | None:
        return None if v is None else int(v.timestamp())

    @property
    def scopes(self) -> list[str]:
        """Granted scopes as a list."""
        return self.scope.split() if self.scope else []

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the token should be refreshed.

        A token without ``expires_at`` counts as expired, and so does one
        expiring within the next TOKEN_EXPIRY_MARGIN_SECONDS.
        """
        if self.expires_at is None:
            return True
        now = now or datetime.now(timezone.utc)
        return now + timedelta(seconds=TOKEN_EXPIRY_MARGIN_SECONDS) >= self.expires_at

    def stamped(self, now: datetime | None = None) -> Token:
        """Copy of the token with ``expires_at`` computed from ``expires_in``."""
        now = now or datetime.now(timezone.utc)
        return self.model_copy(update={"expires_at": now + timedelta(seconds=self.expires_in)})

    def refreshed_from(self, previous: Token) -> Token:
        """Keep ``previous.refresh_token`` when this token came without one."""
        if self.refresh_token is not None or previous.refresh_token is None:
            return self
        return self.model_copy(update={"refresh_token": previous.refresh_token})
