"""Exception types raised while invoking parser executables."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codelink.models import ProcessOutcome


class CodelinkError(RuntimeError):
    """Base class for codelink failures."""


class UnknownParserError(CodelinkError):
    """Raised when a parser identifier is not registered."""

    def __init__(self, parser: str, valid_parsers: Sequence[str]) -> None:
        self.parser = parser
        self.valid_parsers = list(valid_parsers)
        super().__init__(
            f'Invalid parser specified: "{parser}". Valid parsers are: {", ".join(self.valid_parsers)}.'
        )


class ToolchainNotFoundError(CodelinkError):
    """Raised when a required build tool or parser package cannot be located."""


class ParserExecutionError(CodelinkError):
    """Raised when a parser process exits with a non-zero code."""

    def __init__(
        self,
        returncode: int,
        *,
        suggestion: str | None = None,
        outcome: ProcessOutcome | None = None,
    ) -> None:
        message = f"Parser exited with code {returncode}"
        if suggestion:
            message = f"{message}: {suggestion}"
        super().__init__(message)
        self.returncode = returncode
        self.suggestion = suggestion
        self.outcome = outcome

    @property
    def stdout(self) -> str:
        return self.outcome.stdout if self.outcome else ""

    @property
    def stderr(self) -> str:
        return self.outcome.stderr if self.outcome else ""


class MalformedResultError(CodelinkError):
    """Raised when a successful parser run does not print a JSON object."""

    def __init__(self, message: str, *, stdout: str = "") -> None:
        super().__init__(message)
        self.stdout = stdout
