import pytest

from extauth.core import CommandDispatcher
from extauth.protocol import AuthRequest, ProviderFault
from extauth.protocol.commands import Capability
from extauth.providers import AuthProvider


def _request(command, user="alice", server="example.org", password=None):
    return AuthRequest(command=command, user=user, server=server, password=password)


def test_core_commands(core_provider):
    dispatcher = CommandDispatcher(core_provider)
    assert dispatcher.capabilities == {Capability.CORE}
    assert not dispatcher.manages_users
    assert dispatcher.commands == {"auth", "isuser"}

    assert dispatcher.dispatch(_request("auth", password="alice")) is True
    assert dispatcher.dispatch(_request("auth", password="wrong")) is False
    assert dispatcher.dispatch(_request("isuser")) is True
    assert dispatcher.dispatch(_request("isuser", user="mallory")) is False
    assert core_provider.calls[0] == ("authenticate", ("alice", "example.org", "alice"))


def test_user_management_commands_ignored_for_core_provider(core_provider):
    dispatcher = CommandDispatcher(core_provider)
    for command in ("setpass", "tryregister", "removeuser", "removeuser3"):
        assert dispatcher.dispatch(_request(command, password="secret")) is False
    assert core_provider.calls == []


def test_user_management_commands(managed_provider):
    dispatcher = CommandDispatcher(managed_provider)
    assert dispatcher.manages_users
    assert dispatcher.commands == {"auth", "isuser", "setpass", "tryregister", "removeuser", "removeuser3"}

    assert dispatcher.dispatch(_request("setpass", password="new")) is True
    assert dispatcher.dispatch(_request("tryregister", password="pw")) is False
    assert dispatcher.dispatch(_request("tryregister", user="carol", password="pw")) is True
    assert dispatcher.dispatch(_request("removeuser")) is True
    assert dispatcher.dispatch(_request("removeuser3", password="secret")) is True
    assert dispatcher.dispatch(_request("removeuser3", password="nope")) is False

    assert [name for name, _ in managed_provider.calls] == [
        "set_password",
        "register",
        "register",
        "remove",
        "remove_safely",
        "remove_safely",
    ]
    assert managed_provider.calls[3] == ("remove", ("alice", "example.org"))


def test_unknown_command_is_failure(managed_provider):
    dispatcher = CommandDispatcher(managed_provider)
    assert dispatcher.dispatch(_request("frobnicate")) is False
    assert managed_provider.calls == []


def test_provider_fault_is_wrapped(faulty_provider):
    dispatcher = CommandDispatcher(faulty_provider)
    with pytest.raises(ProviderFault) as excinfo:
        dispatcher.dispatch(_request("auth", user="boom", password="x"))
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert excinfo.value.command == "auth"
    assert "backend unavailable" in str(excinfo.value)


def test_truthy_results_are_coerced():
    class LooseProvider(AuthProvider):
        def authenticate(self, user, server, password):
            return 1

        def exists(self, user, server):
            return None

    dispatcher = CommandDispatcher(LooseProvider())
    assert dispatcher.dispatch(_request("auth", password="x")) is True
    assert dispatcher.dispatch(_request("isuser")) is False


def test_rejects_non_provider():
    with pytest.raises(TypeError):
        CommandDispatcher(object())


def test_provider_without_core_methods_cannot_be_built():
    class Incomplete(AuthProvider):
        def authenticate(self, user, server, password):
            return True

    with pytest.raises(TypeError):
        Incomplete()
