"""Invocation descriptors for parser executables."""

from __future__ import annotations

import os
from pathlib import Path

from codelink.models import ParserConfig, RequestMode


class InvocationDescriptor:
    """How to launch one parser executable.

    Subclasses build the command line for their parser and may require the request
    payload to be written to a file instead of stdin by setting
    ``temporary_input_file_path`` (relative to the working directory).
    """

    name: str = "base"
    temporary_input_file_path: str | None = None

    async def resolve_command(self, cwd: str | os.PathLike[str], config: ParserConfig, mode: RequestMode) -> str:
        raise NotImplementedError("Descriptors must implement resolve_command()")

    def input_file(self, cwd: str | os.PathLike[str]) -> Path | None:
        if not self.temporary_input_file_path:
            return None
        return Path(cwd) / self.temporary_input_file_path

    def suggest_fix(self, stderr: str) -> str | None:
        """Hook for descriptors that can explain failures from stderr output."""

        return None
