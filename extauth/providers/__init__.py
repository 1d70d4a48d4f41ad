from .base import AuthProvider, UserManagement, capabilities_of
from .loader import load_provider, resolve_provider_class
from .sqlite import SQLiteAuthProvider

__all__ = [
    "AuthProvider",
    "UserManagement",
    "capabilities_of",
    "load_provider",
    "resolve_provider_class",
    "SQLiteAuthProvider",
]
