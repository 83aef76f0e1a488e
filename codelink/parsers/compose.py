"""Descriptor for the Jetpack Compose parser, run as Gradle tasks."""

from __future__ import annotations

import os

from codelink.constants import TEMPORARY_INPUT_FILE_PATH
from codelink.models import ParserConfig, ParserIdentifier, RequestMode
from codelink.suggestions import get_compose_error_suggestion
from codelink.toolchain import get_gradle_wrapper_executable_path, get_gradle_wrapper_path

from .base import InvocationDescriptor

_TASKS = {
    RequestMode.CREATE: "createCodeConnect",
    RequestMode.PARSE: "parseCodeConnect",
}


class ComposeParser(InvocationDescriptor):
    """Gradle tasks cannot read stdin, so the request goes through a file."""

    name = ParserIdentifier.COMPOSE.value
    temporary_input_file_path = TEMPORARY_INPUT_FILE_PATH

    async def resolve_command(self, cwd: str | os.PathLike[str], config: ParserConfig, mode: RequestMode) -> str:
        wrapper_dir = get_gradle_wrapper_path(cwd, config.gradle_wrapper_path)
        gradlew = get_gradle_wrapper_executable_path(wrapper_dir)
        task = _TASKS[RequestMode(mode)]
        return f"{gradlew} -p {wrapper_dir} {task} -PfilePath={self.input_file(cwd)} -q"

    def suggest_fix(self, stderr: str) -> str | None:
        return get_compose_error_suggestion(stderr)
