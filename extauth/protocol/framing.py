from __future__ import annotations

from typing import BinaryIO

from .constants import LENGTH_PREFIX_SIZE, MAX_FRAME_LENGTH, RESPONSE_LENGTH
from .errors import EndOfStream, InvalidLength, Status


def decode_length(header: bytes) -> int:
    """Decode the big-endian uint16 length prefix of a request frame."""
    if len(header) != LENGTH_PREFIX_SIZE:
        raise ValueError(f"Length prefix must be {LENGTH_PREFIX_SIZE} bytes, got {len(header)}")
    return int.from_bytes(header, "big")


def read_frame(stream: BinaryIO, exact: bool = False) -> bytes:
    """
    Read one request frame and return its payload.

    The payload is read with a line-bounded read capped at the declared length, the same
    way ejabberd-side helpers historically consumed it: a payload containing a newline is
    cut short at that newline. Pass ``exact=True`` to read exactly ``length`` bytes instead.
    """
    header = stream.read(LENGTH_PREFIX_SIZE)
    if len(header) < LENGTH_PREFIX_SIZE:
        raise EndOfStream("Pipe broken")

    length = decode_length(header)
    if not length:
        raise InvalidLength("Invalid length value, won't continue reading")

    if exact:
        return stream.read(length)
    return stream.readline(length)


def encode_length(length: int) -> bytes:
    if not (0 <= length <= MAX_FRAME_LENGTH):
        raise ValueError(f"Frame length {length} does not fit in 16 bits")
    return length.to_bytes(LENGTH_PREFIX_SIZE, "big")


def encode_request(payload: bytes) -> bytes:
    """Prefix `payload` with its length, as the host does when it sends a request."""
    return encode_length(len(payload)) + payload


def encode_response(status: bool) -> bytes:
    """Encode a boolean outcome into the 4-byte response frame."""
    code = Status.from_outcome(bool(status))
    return encode_length(RESPONSE_LENGTH) + int(code).to_bytes(RESPONSE_LENGTH, "big")


def write_response(stream: BinaryIO, status: bool) -> bytes:
    """Write and flush a response frame, returning the bytes sent."""
    data = encode_response(status)
    stream.write(data)
    stream.flush()
    return data


__all__ = ["decode_length", "read_frame", "encode_length", "encode_request", "encode_response", "write_response"]
