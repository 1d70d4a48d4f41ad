from __future__ import annotations

from typing import List, Optional, Tuple

import pytest

from extauth.providers import AuthProvider, UserManagement


class CoreProvider(AuthProvider):
    """Accepts any password equal to the user name; records every call."""

    def __init__(self, connection=None) -> None:
        super().__init__(connection)
        self.calls: List[Tuple[str, tuple]] = []

    def authenticate(self, user: str, server: str, password: Optional[str]) -> bool:
        self.calls.append(("authenticate", (user, server, password)))
        if user == "bob" and server == "x":
            return True
        return password == user

    def exists(self, user: str, server: str) -> bool:
        self.calls.append(("exists", (user, server)))
        return user in {"alice", "bob"}


class ManagedProvider(CoreProvider, UserManagement):
    def set_password(self, user, server, password):
        self.calls.append(("set_password", (user, server, password)))
        return True

    def register(self, user, server, password):
        self.calls.append(("register", (user, server, password)))
        return user != "alice"

    def remove(self, user, server):
        self.calls.append(("remove", (user, server)))
        return True

    def remove_safely(self, user, server, password):
        self.calls.append(("remove_safely", (user, server, password)))
        return password == "secret"


class FaultyProvider(CoreProvider):
    def authenticate(self, user, server, password):
        if user == "boom":
            raise RuntimeError("backend unavailable")
        return super().authenticate(user, server, password)


@pytest.fixture
def core_provider() -> CoreProvider:
    return CoreProvider()


@pytest.fixture
def managed_provider() -> ManagedProvider:
    return ManagedProvider()


@pytest.fixture
def faulty_provider() -> FaultyProvider:
    return FaultyProvider()
