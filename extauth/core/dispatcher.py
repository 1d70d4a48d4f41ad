from __future__ import annotations

from collections.abc import Callable
from typing import Any, Dict, FrozenSet, Union

from extauth.protocol.commands import COMMAND_CAPABILITIES, Capability, Command, normalize_command
from extauth.protocol.errors import ProviderFault
from extauth.protocol.messages import AuthRequest
from extauth.providers.base import AuthProvider, capabilities_of

Handler = Callable[[AuthRequest], Any]


class CommandDispatcher:
    """Maps protocol commands to provider calls.

    The provider's capabilities are inspected once, here; only commands whose capability
    the provider advertises are registered, so the rest fall through to a plain failure.
    """

    def __init__(self, provider: AuthProvider) -> None:
        self.provider = provider
        self.capabilities: FrozenSet[Capability] = capabilities_of(provider)
        self.manages_users = Capability.USER_MANAGEMENT in self.capabilities
        self._handlers: Dict[str, Handler] = {}

        calls: Dict[str, Handler] = {
            Command.AUTH.value: self._auth,
            Command.ISUSER.value: self._isuser,
            Command.SETPASS.value: self._setpass,
            Command.TRYREGISTER.value: self._tryregister,
            Command.REMOVEUSER.value: self._removeuser,
            Command.REMOVEUSER3.value: self._removeuser3,
        }
        for command, capability in COMMAND_CAPABILITIES.items():
            if capability in self.capabilities:
                self.register(command, calls[command])

    def register(self, command: Union[Command, str], handler: Handler) -> None:
        self._handlers[normalize_command(command)] = handler

    @property
    def commands(self) -> FrozenSet[str]:
        """Commands this dispatcher answers with a provider call."""
        return frozenset(self._handlers)

    def dispatch(self, request: AuthRequest) -> bool:
        handler = self._handlers.get(request.command)
        if handler is None:
            return False
        try:
            outcome = handler(request)
        except Exception as exc:
            raise ProviderFault(request.command, exc) from exc
        return bool(outcome)

    # --- Core ------------------------------------------------------------
    def _auth(self, request: AuthRequest) -> Any:
        return self.provider.authenticate(request.user, request.server, request.password)

    def _isuser(self, request: AuthRequest) -> Any:
        return self.provider.exists(request.user, request.server)

    # --- User management -------------------------------------------------
    def _setpass(self, request: AuthRequest) -> Any:
        return self.provider.set_password(request.user, request.server, request.password)

    def _tryregister(self, request: AuthRequest) -> Any:
        return self.provider.register(request.user, request.server, request.password)

    def _removeuser(self, request: AuthRequest) -> Any:
        return self.provider.remove(request.user, request.server)

    def _removeuser3(self, request: AuthRequest) -> Any:
        return self.provider.remove_safely(request.user, request.server, request.password)


__all__ = ["CommandDispatcher", "Handler"]
