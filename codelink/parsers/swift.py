"""Descriptor for the Swift parser."""

from __future__ import annotations

import os

from codelink.models import ParserConfig, ParserIdentifier, RequestMode
from codelink.toolchain import get_custom_swift_cli_dir, get_swift_parser_dir

from .base import InvocationDescriptor


class SwiftParser(InvocationDescriptor):
    """Run ``figma-swift`` through SwiftPM, or a prebuilt binary when configured."""

    name = ParserIdentifier.SWIFT.value

    async def resolve_command(self, cwd: str | os.PathLike[str], config: ParserConfig, mode: RequestMode) -> str:
        if config.custom_swift_cli_path:
            # An absolute override replaces the working directory rather than nesting under it.
            return str(get_custom_swift_cli_dir(cwd) / config.custom_swift_cli_path)

        package_dir = get_swift_parser_dir(cwd, config.xcodeproj_path)
        return f"swift run --package-path {package_dir} figma-swift"
