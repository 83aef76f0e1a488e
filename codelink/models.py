"""Pydantic models for parser configuration, requests and runtime results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParserIdentifier(str, Enum):
    """First-party parser executables known to codelink."""

    SWIFT = "swift"
    COMPOSE = "compose"
    UNIT_TEST = "__unit_test__"


class RequestMode(str, Enum):
    CREATE = "CREATE"
    PARSE = "PARSE"


class ParserConfig(BaseModel):
    """Parser section of a project configuration file.

    ``parser`` is kept as a plain string so that unregistered identifiers reach the
    registry and produce a helpful error listing the valid ones.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    parser: str
    custom_swift_cli_path: str | None = Field(default=None, alias="customSwiftCLIPath")
    xcodeproj_path: str | None = Field(default=None, alias="xcodeprojPath")
    gradle_wrapper_path: str | None = Field(default=None, alias="gradleWrapperPath")

    @field_validator("parser", mode="before")
    @classmethod
    def _normalize_parser(cls, value: object) -> str:
        if isinstance(value, Enum):
            return str(value.value)
        return str(value).strip()


class RequestPayload(BaseModel):
    """JSON request handed to a parser executable."""

    model_config = ConfigDict(frozen=True, extra="allow")

    mode: RequestMode

    def to_json(self) -> str:
        return self.model_dump_json()


class ParserMessage(BaseModel):
    """Structured log entry emitted by a parser on stderr."""

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"]
    message: str


@dataclass
class ProcessOutcome:
    """Everything observed from one parser process run."""

    command: list[str]
    returncode: int
    stdout: str
    stderr: str
    duration_seconds: float
    messages: list[ParserMessage] = field(default_factory=list)
    has_errors: bool = False
