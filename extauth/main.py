from __future__ import annotations

from typing import Optional

from extauth.core import AuthEngine, open_context
from extauth.providers import AuthProvider, load_provider
from extauth.settings import Settings, load_settings
from extauth.storage import SQLiteStore


def build_provider(settings: Settings) -> AuthProvider:
    """Open the backend connection (if any) and instantiate the configured provider."""
    connection: Optional[SQLiteStore] = SQLiteStore(settings.db_path) if settings.db_path else None
    try:
        return load_provider(settings.provider, connection)
    except Exception:
        if connection is not None:
            connection.close()
        raise


def run(settings: Settings) -> None:
    provider = build_provider(settings)
    with open_context(settings, provider) as context:
        AuthEngine(context).run()


def main() -> int:
    run(load_settings())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
