from __future__ import annotations

from enum import StrEnum
from typing import Dict, Union


class Capability(StrEnum):
    """Operation groups a provider may implement."""

    CORE = "core"
    USER_MANAGEMENT = "user_management"


class Command(StrEnum):
    """Commands ejabberd sends to an external authentication program."""

    AUTH = "auth"
    ISUSER = "isuser"
    SETPASS = "setpass"
    TRYREGISTER = "tryregister"
    REMOVEUSER = "removeuser"
    REMOVEUSER3 = "removeuser3"


COMMAND_CAPABILITIES: Dict[str, Capability] = {
    Command.AUTH.value: Capability.CORE,
    Command.ISUSER.value: Capability.CORE,
    Command.SETPASS.value: Capability.USER_MANAGEMENT,
    Command.TRYREGISTER.value: Capability.USER_MANAGEMENT,
    Command.REMOVEUSER.value: Capability.USER_MANAGEMENT,
    Command.REMOVEUSER3.value: Capability.USER_MANAGEMENT,
}


def normalize_command(command: Union[str, Command]) -> str:
    """Convert enum/string into canonical command text."""
    return command.value if isinstance(command, Command) else str(command)


__all__ = ["Capability", "Command", "COMMAND_CAPABILITIES", "normalize_command"]
