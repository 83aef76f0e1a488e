"""Run parser executables and collect their output."""

from __future__ import annotations

import asyncio
import json
import logging
import os
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from codelink.constants import get_stream_limit
from codelink.errors import CodelinkError, MalformedResultError, ParserExecutionError
from codelink.messages import MessageStreamInterpreter
from codelink.models import ParserConfig, ProcessOutcome, RequestPayload
from codelink.parsers import ParserRegistry, get_registry
from codelink.suggestions import determine_error_suggestion

logger = logging.getLogger("codelink.runner")


class ParserProcessRunner:
    """Spawn one parser process, feed it a request and capture its streams."""

    def __init__(self, *, stream_limit: int | None = None, log: logging.Logger | None = None) -> None:
        self._stream_limit = stream_limit or get_stream_limit()
        self._message_log = log

    async def run(
        self,
        command: str,
        *,
        cwd: str | os.PathLike[str],
        payload: RequestPayload,
        input_file: Path | None = None,
    ) -> ProcessOutcome:
        # Naive whitespace split: paths containing spaces are not supported.
        args = command.split()
        if not args:
            raise CodelinkError("Parser command is empty")

        serialized = payload.to_json()
        interpreter = MessageStreamInterpreter(self._message_log)
        start_time = time.monotonic()

        try:
            if input_file is not None:
                input_file.parent.mkdir(parents=True, exist_ok=True)
                input_file.write_text(serialized, encoding="utf-8")

            logger.debug("Running parser: %s", command)
            logger.debug("Working directory: %s", cwd)

            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE if input_file is None else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(cwd),
                limit=self._stream_limit,
            )

            readers = [
                asyncio.ensure_future(self._read_stdout(process.stdout)),
                asyncio.ensure_future(self._read_stderr(process.stderr, interpreter)),
            ]
            try:
                if input_file is None:
                    await self._write_stdin(process, serialized)
                returncode = await process.wait()
                stdout_bytes, _ = await asyncio.gather(*readers)
            except BaseException:
                for reader in readers:
                    reader.cancel()
                if process.returncode is None:
                    process.kill()
                    await process.wait()
                raise
        finally:
            if input_file is not None:
                input_file.unlink(missing_ok=True)

        duration = time.monotonic() - start_time
        logger.debug("Parser exited with code %s after %.2fs", returncode, duration)

        return ProcessOutcome(
            command=args,
            returncode=returncode,
            stdout=stdout_bytes.decode("utf-8", errors="replace"),
            stderr=interpreter.stderr_text,
            duration_seconds=duration,
            messages=interpreter.messages,
            has_errors=interpreter.has_errors,
        )

    @staticmethod
    async def _write_stdin(process: asyncio.subprocess.Process, serialized: str) -> None:
        stdin = process.stdin
        try:
            stdin.write(serialized.encode("utf-8"))
            await stdin.drain()
        except (BrokenPipeError, ConnectionResetError):
            logger.debug("Parser closed stdin before reading the whole request")
        finally:
            stdin.close()

    @staticmethod
    async def _read_stdout(stream: asyncio.StreamReader) -> bytes:
        return await stream.read()

    @staticmethod
    async def _read_stderr(stream: asyncio.StreamReader, interpreter: MessageStreamInterpreter) -> None:
        # Lines longer than the stream limit are collected piecewise, never truncated.
        pending = b""
        while True:
            try:
                line = await stream.readuntil(b"\n")
            except asyncio.LimitOverrunError as exc:
                pending += await stream.readexactly(exc.consumed)
                continue
            except asyncio.IncompleteReadError as exc:
                line = exc.partial
                if pending or line:
                    interpreter.feed((pending + line).decode("utf-8", errors="replace"))
                break
            interpreter.feed((pending + line).decode("utf-8", errors="replace"))
            pending = b""


def parse_result(stdout: str) -> dict[str, Any]:
    """Decode the JSON object a successful parser prints on stdout."""

    if not stdout.strip():
        raise MalformedResultError("Parser returned empty stdout while a JSON object was expected", stdout=stdout)

    try:
        result = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise MalformedResultError(f"Failed to decode parser JSON output: {exc}", stdout=stdout) from exc

    if not isinstance(result, dict):
        raise MalformedResultError(
            f"Parser output must be a JSON object, got {type(result).__name__}", stdout=stdout
        )
    return result


async def call_parser(
    config: ParserConfig | Mapping[str, Any],
    payload: RequestPayload | Mapping[str, Any],
    cwd: str | os.PathLike[str],
    *,
    registry: ParserRegistry | None = None,
    runner: ParserProcessRunner | None = None,
) -> dict[str, Any]:
    """Invoke the configured parser with ``payload`` and return its JSON result.

    Raises:
        UnknownParserError: ``config.parser`` is not registered.
        ParserExecutionError: the parser exited with a non-zero code.
        MalformedResultError: the parser succeeded but stdout was not a JSON object.
        OSError: the parser executable could not be started.
    """

    if not isinstance(config, ParserConfig):
        config = ParserConfig.model_validate(config)
    if not isinstance(payload, RequestPayload):
        payload = RequestPayload.model_validate(payload)

    registry = registry or get_registry()
    descriptor = registry.get(config.parser)
    command = await descriptor.resolve_command(cwd, config, payload.mode)

    runner = runner or ParserProcessRunner()
    outcome = await runner.run(command, cwd=cwd, payload=payload, input_file=descriptor.input_file(cwd))

    if outcome.returncode != 0:
        suggestion = determine_error_suggestion(outcome.stderr, descriptor.name, registry)
        raise ParserExecutionError(outcome.returncode, suggestion=suggestion, outcome=outcome)

    return parse_result(outcome.stdout)
