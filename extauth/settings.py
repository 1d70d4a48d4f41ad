from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional

from dotenv import load_dotenv

from extauth.log import DEFAULT_ENABLED, Severity, parse_severities
from extauth.utils.common import env_flag

DEFAULT_PROVIDER = "extauth.providers.sqlite:SQLiteAuthProvider"


@dataclass
class Settings:
    """Process settings; every field can be overridden from the environment."""

    log_path: Optional[str] = None
    log_levels: FrozenSet[Severity] = field(default_factory=lambda: DEFAULT_ENABLED)
    provider: str = DEFAULT_PROVIDER
    db_path: Optional[str] = None
    exact_reads: bool = False


SETTINGS = Settings()


def load_settings(env_path: str = ".env", settings: Optional[Settings] = None) -> Settings:
    """Load settings from env/.env into `settings` (the module-level SETTINGS by default)."""
    target = settings if settings is not None else SETTINGS
    if Path(env_path).exists():
        load_dotenv(env_path)
    target.log_path = os.getenv("EXTAUTH_LOG_PATH", target.log_path) or None
    levels = os.getenv("EXTAUTH_LOG_LEVELS")
    if levels:
        target.log_levels = parse_severities(levels)
    target.provider = os.getenv("EXTAUTH_PROVIDER", target.provider)
    target.db_path = os.getenv("EXTAUTH_DB_PATH", target.db_path) or None
    exact = os.getenv("EXTAUTH_EXACT_READS")
    if exact is not None:
        target.exact_reads = env_flag(exact)
    return target


__all__ = ["DEFAULT_PROVIDER", "Settings", "SETTINGS", "load_settings"]
