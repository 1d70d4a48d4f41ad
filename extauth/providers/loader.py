from __future__ import annotations

import importlib
from typing import Any, Optional

from extauth.protocol.errors import ConfigurationError

from .base import AuthProvider


def resolve_provider_class(path: str) -> type:
    """Resolve ``"package.module:ClassName"`` into a provider class."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"Provider path must look like 'module:Class', got {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import provider module {module_name!r}: {exc}") from exc
    try:
        cls = getattr(module, attr)
    except AttributeError as exc:
        raise ConfigurationError(f"Module {module_name!r} has no attribute {attr!r}") from exc
    if not isinstance(cls, type) or not issubclass(cls, AuthProvider):
        raise ConfigurationError(f"{path} is not an AuthProvider subclass")
    return cls


def load_provider(path: str, connection: Optional[Any] = None) -> AuthProvider:
    cls = resolve_provider_class(path)
    try:
        return cls(connection)
    except (TypeError, ValueError) as exc:
        # abstract Core methods left unimplemented, or a missing connection
        raise ConfigurationError(f"Cannot instantiate {path}: {exc}") from exc


__all__ = ["resolve_provider_class", "load_provider"]
