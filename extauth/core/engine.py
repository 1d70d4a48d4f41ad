from __future__ import annotations

import logging
import sys
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Iterator, Optional

from extauth.log import configure_logging, release_logging
from extauth.protocol.errors import EndOfStream, ProtocolError, ProviderFault, RuntimeFault
from extauth.protocol.framing import read_frame, write_response
from extauth.protocol.messages import parse_message
from extauth.providers.base import AuthProvider
from extauth.settings import Settings

from .dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


class EngineState(Enum):
    RUNNING = "running"
    TERMINATING = "terminating"
    EXITED = "exited"


@dataclass
class EngineContext:
    stdin: BinaryIO
    stdout: BinaryIO
    provider: AuthProvider
    exact_reads: bool = False


@contextmanager
def open_context(
    settings: Settings,
    provider: AuthProvider,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> Iterator[EngineContext]:
    """Acquire the log sink and hand out an engine context.

    On exit the provider connection and the log sink are released, whether the loop
    ended normally or an exception escaped it.
    """
    with ExitStack() as stack:
        stack.callback(provider.close)
        handler = configure_logging(settings.log_path, settings.log_levels)
        stack.callback(release_logging, handler)
        logger.info("Starting auth service...")
        stack.callback(logger.info, "Exiting...")
        yield EngineContext(
            stdin=stdin if stdin is not None else sys.stdin.buffer,
            stdout=stdout if stdout is not None else sys.stdout.buffer,
            provider=provider,
            exact_reads=settings.exact_reads,
        )


class AuthEngine:
    """Strict request/response loop over the context's streams."""

    def __init__(self, context: EngineContext) -> None:
        self.context = context
        self.dispatcher = CommandDispatcher(context.provider)
        self.state = EngineState.RUNNING

    def run(self) -> None:
        logger.info("Entering event loop...")
        logger.info(
            "%s handles: %s",
            type(self.context.provider).__name__,
            ", ".join(sorted(self.dispatcher.commands)),
        )
        while self.state is EngineState.RUNNING:
            self.step()

    def step(self) -> Optional[bytes]:
        """Run one read/parse/dispatch/respond cycle; return the response sent, if any."""
        try:
            payload = read_frame(self.context.stdin, exact=self.context.exact_reads)
        except ProtocolError as exc:
            self._contain(exc)
            return None
        except Exception as exc:
            # closed or unusable stdin never recovers
            self._contain(EndOfStream(f"Input stream failed: {type(exc).__name__}: {exc}"))
            return None

        try:
            request = parse_message(payload)
            logger.debug("Received message: %s", request.describe())
            status = self.dispatcher.dispatch(request)
        except ProtocolError as exc:
            self._contain(exc)
            return None
        except Exception as exc:
            self._contain(RuntimeFault(exc))
            return None

        try:
            response = write_response(self.context.stdout, status)
        except (OSError, ValueError) as exc:
            # broken pipe or closed stdout: ejabberd is gone
            self._contain(EndOfStream(f"Output stream failed: {type(exc).__name__}: {exc}"))
            return None
        logger.debug("Sending response: %s", response.hex())
        return response

    def _contain(self, exc: ProtocolError) -> None:
        if not exc.recoverable:
            self.state = EngineState.TERMINATING
            logger.info("%s, leaving event loop", exc.message)
            self._flush_output()
            self.state = EngineState.EXITED
        elif isinstance(exc, (ProviderFault, RuntimeFault)):
            logger.error("%s", exc.message, exc_info=exc.cause)
        else:
            logger.warning("%s", exc.message)

    def _flush_output(self) -> None:
        try:
            self.context.stdout.flush()
        except (OSError, ValueError) as exc:
            logger.info("Output stream already gone: %s", exc)


__all__ = ["EngineState", "EngineContext", "open_context", "AuthEngine"]
