"""Parser registry for codelink."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from codelink.errors import UnknownParserError

from .base import InvocationDescriptor
from .compose import ComposeParser
from .swift import SwiftParser
from .unit_test import UnitTestParser

logger = logging.getLogger("codelink.registry")

FIRST_PARTY_PARSERS: tuple[type[InvocationDescriptor], ...] = (
    SwiftParser,
    ComposeParser,
    UnitTestParser,
)


class ParserRegistry:
    """Read-only mapping from parser identifier to invocation descriptor."""

    def __init__(self, descriptors: Iterable[InvocationDescriptor]) -> None:
        parsers: dict[str, InvocationDescriptor] = {}
        for descriptor in descriptors:
            key = descriptor.name
            if key in parsers:
                raise ValueError(f"Parser '{descriptor.name}' is registered more than once")
            parsers[key] = descriptor
        self._parsers: Mapping[str, InvocationDescriptor] = MappingProxyType(parsers)
        logger.debug("Registered parsers: %s", ", ".join(self._parsers))

    def list_parsers(self) -> list[str]:
        return [descriptor.name for descriptor in self._parsers.values()]

    def get(self, name: str) -> InvocationDescriptor:
        raw = _identifier_text(name)
        if raw not in self._parsers:
            raise UnknownParserError(raw, self.list_parsers())
        return self._parsers[raw]

    def __contains__(self, name: object) -> bool:
        return _identifier_text(name) in self._parsers


def _identifier_text(name: object) -> str:
    return str(getattr(name, "value", name) or "")


_REGISTRY: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = ParserRegistry(parser_cls() for parser_cls in FIRST_PARTY_PARSERS)
    return _REGISTRY


__all__ = [
    "InvocationDescriptor",
    "ParserRegistry",
    "get_registry",
]
