from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Dict, Optional

from extauth.utils.common import utc_timestamp


class SQLiteStore:
    """SQLite-backed account store keyed by (username, server)."""

    def __init__(self, db_path: str) -> None:
        self.db_path = Path(db_path)
        if not self.db_path.parent.exists():
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row
        self._init_schema()

    def _init_schema(self) -> None:
        self.conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS users (
                username TEXT NOT NULL,
                server TEXT NOT NULL,
                password_hash TEXT NOT NULL,
                salt TEXT NOT NULL,
                created_at INTEGER NOT NULL,
                updated_at INTEGER NOT NULL,
                PRIMARY KEY (username, server)
            );
            """
        )
        self.conn.commit()

    # --- Users -----------------------------------------------------------
    def get_user(self, username: str, server: str) -> Optional[Dict[str, Any]]:
        row = self.conn.execute(
            "SELECT username, server, password_hash, salt, created_at, updated_at FROM users "
            "WHERE username = ? AND server = ?",
            (username, server),
        ).fetchone()
        return dict(row) if row else None

    def user_exists(self, username: str, server: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM users WHERE username = ? AND server = ?",
            (username, server),
        ).fetchone()
        return row is not None

    def create_user(self, username: str, server: str, password_hash: str, salt: str) -> None:
        now = utc_timestamp()
        try:
            with self.conn:
                self.conn.execute(
                    "INSERT INTO users (username, server, password_hash, salt, created_at, updated_at) "
                    "VALUES (?, ?, ?, ?, ?, ?)",
                    (username, server, password_hash, salt, now, now),
                )
        except sqlite3.IntegrityError as exc:
            raise ValueError(f"User {username}@{server} already exists") from exc

    def update_password(self, username: str, server: str, password_hash: str, salt: str) -> bool:
        with self.conn:
            cur = self.conn.execute(
                "UPDATE users SET password_hash = ?, salt = ?, updated_at = ? WHERE username = ? AND server = ?",
                (password_hash, salt, utc_timestamp(), username, server),
            )
        return cur.rowcount > 0

    def delete_user(self, username: str, server: str) -> bool:
        with self.conn:
            cur = self.conn.execute(
                "DELETE FROM users WHERE username = ? AND server = ?",
                (username, server),
            )
        return cur.rowcount > 0

    def close(self) -> None:
        self.conn.close()


__all__ = ["SQLiteStore"]
