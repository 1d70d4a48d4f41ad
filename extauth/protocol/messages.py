from __future__ import annotations

from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .constants import ENCODING, FIELD_SEPARATOR, MIN_FIELDS
from .errors import MalformedPayload, TooFewFields

PASSWORD_MASK = "***"


class AuthRequest(BaseModel):
    """A decoded `command:user:server[:password]` request."""

    model_config = ConfigDict(frozen=True)

    command: str = Field(..., description="Command name such as auth or isuser")
    user: str = Field(..., description="Local part of the JID")
    server: str = Field(..., description="Virtual host the user belongs to")
    password: Optional[str] = Field(default=None, repr=False)

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "AuthRequest":
        if len(fields) < MIN_FIELDS:
            raise TooFewFields("Message is too short: " + FIELD_SEPARATOR.join(fields))
        command, user, server = fields[:MIN_FIELDS]
        password = fields[MIN_FIELDS] if len(fields) > MIN_FIELDS else None
        return cls(command=command, user=user, server=server, password=password)

    def describe(self) -> str:
        """JSON rendering for logs; the password never leaves the process."""
        masked = self.model_copy(update={"password": PASSWORD_MASK}) if self.password is not None else self
        return masked.model_dump_json()


def parse_message(payload: bytes) -> AuthRequest:
    """
    Decode a frame payload into an :class:`AuthRequest`.

    The payload is split on every colon; a password that itself contains a colon is
    therefore truncated at its first colon and the remainder is discarded.
    """
    try:
        text = payload.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise MalformedPayload(f"Payload is not valid {ENCODING}: {exc}") from exc
    return AuthRequest.from_fields(text.split(FIELD_SEPARATOR))


__all__ = ["AuthRequest", "PASSWORD_MASK", "parse_message"]
