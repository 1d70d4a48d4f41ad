from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Optional

from extauth.protocol.commands import Capability


class AuthProvider(ABC):
    """
    Core capability every backend must implement.

    ``connection`` is whatever handle the backend needs (a database store, a client
    object...). It is handed over at construction and owned by the provider for the
    lifetime of the process.
    """

    def __init__(self, connection: Optional[Any] = None) -> None:
        self._connection = connection

    @property
    def connection(self) -> Optional[Any]:
        return self._connection

    @abstractmethod
    def authenticate(self, user: str, server: str, password: Optional[str]) -> bool:
        """Handle `auth`."""

    @abstractmethod
    def exists(self, user: str, server: str) -> bool:
        """Handle `isuser`."""

    def close(self) -> None:
        """Release the backend connection, if it can be closed."""
        close = getattr(self._connection, "close", None)
        if callable(close):
            close()


class UserManagement(ABC):
    """Optional capability for providers that can add, change and remove accounts."""

    @abstractmethod
    def set_password(self, user: str, server: str, password: Optional[str]) -> bool:
        """Handle `setpass`."""

    @abstractmethod
    def register(self, user: str, server: str, password: Optional[str]) -> bool:
        """Handle `tryregister`."""

    @abstractmethod
    def remove(self, user: str, server: str) -> bool:
        """Handle `removeuser`."""

    @abstractmethod
    def remove_safely(self, user: str, server: str, password: Optional[str]) -> bool:
        """Handle `removeuser3`: remove only when the password matches."""


def capabilities_of(provider: AuthProvider) -> FrozenSet[Capability]:
    if not isinstance(provider, AuthProvider):
        raise TypeError(f"{type(provider).__name__} does not implement AuthProvider")
    caps = {Capability.CORE}
    if isinstance(provider, UserManagement):
        caps.add(Capability.USER_MANAGEMENT)
    return frozenset(caps)


__all__ = ["AuthProvider", "UserManagement", "capabilities_of"]
