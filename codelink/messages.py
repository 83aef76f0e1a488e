"""Interpret the stderr stream of a parser process.

Parsers should not generally write to stderr and should instead return their
messages in the JSON result, but a parser may want to report progress before it
finishes (e.g. while compiling on first use). To do that it writes one JSON
object per line with the same shape as a result message::

    {"level": "INFO", "message": "Compiling parser..."}

Anything else on stderr is treated as tool chatter (compiler output and the
like) which is logged at debug level and kept for error suggestions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import ValidationError

from codelink.models import ParserMessage

logger = logging.getLogger("codelink.parser")


@dataclass
class MessageSummary:
    has_errors: bool = False


def handle_messages(messages: Iterable[ParserMessage], log: logging.Logger | None = None) -> MessageSummary:
    """Route parser messages to the log at their own severity."""

    log = log or logger
    summary = MessageSummary()

    for message in messages:
        if message.level == "DEBUG":
            log.debug(message.message)
        elif message.level == "INFO":
            log.info(message.message)
        elif message.level == "WARN":
            log.warning(message.message)
        elif message.level == "ERROR":
            log.error(message.message)
            summary.has_errors = True

    return summary


def parse_message(text: str) -> ParserMessage | None:
    """Return the structured message encoded in ``text``, if it is one."""

    try:
        return ParserMessage.model_validate_json(text)
    except ValidationError:
        return None


class MessageStreamInterpreter:
    """Classify stderr chunks as they arrive from a running parser."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger
        self._messages: list[ParserMessage] = []
        self._stderr_parts: list[str] = []
        self._has_errors = False

    @property
    def messages(self) -> list[ParserMessage]:
        return list(self._messages)

    @property
    def has_errors(self) -> bool:
        return self._has_errors

    @property
    def stderr_text(self) -> str:
        """Unstructured stderr output accumulated so far."""
        return "".join(self._stderr_parts)

    def feed(self, chunk: str) -> ParserMessage | None:
        trimmed = chunk.strip()
        message = parse_message(trimmed)
        if message is None:
            self._stderr_parts.append(chunk)
            self._log.debug(trimmed)
            return None

        self._messages.append(message)
        if handle_messages([message], self._log).has_errors:
            self._has_errors = True
        return message
