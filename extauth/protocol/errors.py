from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Response status carried in the second half of every response frame."""

    FAILURE = 0
    SUCCESS = 1

    @classmethod
    def from_outcome(cls, outcome: bool) -> "Status":
        return cls.SUCCESS if outcome else cls.FAILURE


class ProtocolError(Exception):
    """Base class for everything that can go wrong within one request cycle."""

    recoverable = True

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class EndOfStream(ProtocolError):
    """The request stream was closed by the host."""

    recoverable = False


class InvalidLength(ProtocolError):
    """Zero length prefix; the message is dropped."""


class MalformedPayload(ProtocolError):
    """Payload bytes could not be decoded as text."""


class TooFewFields(ProtocolError):
    """Payload carries fewer than command, user and server."""


class ProviderFault(ProtocolError):
    """The authentication provider raised while handling a request."""

    def __init__(self, command: str, cause: BaseException) -> None:
        self.command = command
        self.cause = cause
        super().__init__(f"Provider failed on '{command}': {type(cause).__name__}: {cause}")


class RuntimeFault(ProtocolError):
    """Unexpected error inside a cycle that is not tied to the provider."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"{type(cause).__name__}: {cause}")


class ConfigurationError(Exception):
    """Raised at startup when the process cannot be wired together."""


__all__ = [
    "Status",
    "ProtocolError",
    "EndOfStream",
    "InvalidLength",
    "MalformedPayload",
    "TooFewFields",
    "ProviderFault",
    "RuntimeFault",
    "ConfigurationError",
]
