from __future__ import annotations

import logging
from typing import Optional

from extauth.storage.sqlite_store import SQLiteStore
from extauth.utils.common import digest_matches, random_salt, sha256_hex

from .base import AuthProvider, UserManagement

logger = logging.getLogger(__name__)


class SQLiteAuthProvider(AuthProvider, UserManagement):
    """Accounts kept in a local SQLite file, with full user management."""

    def __init__(self, connection: Optional[SQLiteStore] = None) -> None:
        if connection is None:
            raise ValueError("SQLiteAuthProvider needs a SQLiteStore connection (set EXTAUTH_DB_PATH)")
        super().__init__(connection)

    @property
    def store(self) -> SQLiteStore:
        return self.connection

    def _password_matches(self, user: str, server: str, password: Optional[str]) -> bool:
        if password is None:
            return False
        record = self.store.get_user(user, server)
        if not record:
            return False
        return digest_matches(password, record["salt"], record["password_hash"])

    def authenticate(self, user: str, server: str, password: Optional[str]) -> bool:
        return self._password_matches(user, server, password)

    def exists(self, user: str, server: str) -> bool:
        return self.store.user_exists(user, server)

    def set_password(self, user: str, server: str, password: Optional[str]) -> bool:
        if password is None:
            return False
        salt = random_salt()
        return self.store.update_password(user, server, sha256_hex(password, salt), salt)

    def register(self, user: str, server: str, password: Optional[str]) -> bool:
        if password is None:
            return False
        salt = random_salt()
        try:
            self.store.create_user(user, server, sha256_hex(password, salt), salt)
        except ValueError:
            logger.info("Registration refused, %s@%s already exists", user, server)
            return False
        return True

    def remove(self, user: str, server: str) -> bool:
        return self.store.delete_user(user, server)

    def remove_safely(self, user: str, server: str, password: Optional[str]) -> bool:
        if not self._password_matches(user, server, password):
            return False
        return self.store.delete_user(user, server)


__all__ = ["SQLiteAuthProvider"]
