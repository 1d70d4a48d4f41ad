from __future__ import annotations

import hashlib
import hmac
import os
import time


def utc_timestamp() -> int:
    """Current UTC timestamp in seconds."""
    return int(time.time())


def random_salt(length: int = 16) -> str:
    """Generate a hex salt of `length` characters."""
    return os.urandom(length // 2).hex()


def sha256_hex(data: str, salt: str = "") -> str:
    """Salted SHA-256 digest used for stored passwords."""
    return hashlib.sha256((salt + data).encode("utf-8")).hexdigest()


def digest_matches(data: str, salt: str, expected: str) -> bool:
    return hmac.compare_digest(sha256_hex(data, salt), expected)


def env_flag(value: str) -> bool:
    """Interpret common truthy strings from the environment."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


__all__ = ["utc_timestamp", "random_salt", "sha256_hex", "digest_matches", "env_flag"]
