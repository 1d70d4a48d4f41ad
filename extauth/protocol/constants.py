"""Wire-level constants for the ejabberd external authentication protocol."""

ENCODING = "utf-8"
LENGTH_PREFIX_SIZE = 2  # uint16, big-endian
RESPONSE_LENGTH = 2
FIELD_SEPARATOR = ":"
MIN_FIELDS = 3  # command, user, server
MAX_FRAME_LENGTH = 0xFFFF

__all__ = [
    "ENCODING",
    "LENGTH_PREFIX_SIZE",
    "RESPONSE_LENGTH",
    "FIELD_SEPARATOR",
    "MIN_FIELDS",
    "MAX_FRAME_LENGTH",
]
