"""Public helpers for codelink components."""

from __future__ import annotations

from .errors import (
    CodelinkError,
    MalformedResultError,
    ParserExecutionError,
    ToolchainNotFoundError,
    UnknownParserError,
)
from .messages import MessageStreamInterpreter, handle_messages
from .models import ParserConfig, ParserIdentifier, ParserMessage, ProcessOutcome, RequestMode, RequestPayload
from .parsers import InvocationDescriptor, ParserRegistry, get_registry
from .runner import ParserProcessRunner, call_parser

__all__ = [
    "CodelinkError",
    "InvocationDescriptor",
    "MalformedResultError",
    "MessageStreamInterpreter",
    "ParserConfig",
    "ParserExecutionError",
    "ParserIdentifier",
    "ParserMessage",
    "ParserProcessRunner",
    "ParserRegistry",
    "ProcessOutcome",
    "RequestMode",
    "RequestPayload",
    "ToolchainNotFoundError",
    "UnknownParserError",
    "call_parser",
    "get_registry",
    "handle_messages",
]
