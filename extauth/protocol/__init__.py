"""
Protocol package: wire constants, framing helpers, request parsing and the error
taxonomy shared by the engine and providers.
"""

from .commands import COMMAND_CAPABILITIES, Capability, Command, normalize_command
from .constants import ENCODING, FIELD_SEPARATOR, LENGTH_PREFIX_SIZE, MIN_FIELDS, RESPONSE_LENGTH
from .errors import (
    ConfigurationError,
    EndOfStream,
    InvalidLength,
    MalformedPayload,
    ProtocolError,
    ProviderFault,
    RuntimeFault,
    Status,
    TooFewFields,
)
from .framing import decode_length, encode_request, encode_response, read_frame, write_response
from .messages import AuthRequest, parse_message

__all__ = [
    "COMMAND_CAPABILITIES",
    "Capability",
    "Command",
    "normalize_command",
    "ENCODING",
    "FIELD_SEPARATOR",
    "LENGTH_PREFIX_SIZE",
    "MIN_FIELDS",
    "RESPONSE_LENGTH",
    "ConfigurationError",
    "EndOfStream",
    "InvalidLength",
    "MalformedPayload",
    "ProtocolError",
    "ProviderFault",
    "RuntimeFault",
    "Status",
    "TooFewFields",
    "decode_length",
    "encode_request",
    "encode_response",
    "read_frame",
    "write_response",
    "AuthRequest",
    "parse_message",
]
