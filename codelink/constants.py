"""Internal defaults and constants for codelink."""

from __future__ import annotations

from utils.env import get_env_int

DEFAULT_STREAM_LIMIT = 10 * 1024 * 1024  # 10MB per stream
STREAM_LIMIT_ENV_VAR = "CODELINK_STREAM_LIMIT"

# Relative to the invocation working directory.
TEMPORARY_INPUT_FILE_PATH = "tmp/codelink-parser-input.json.tmp"


def get_stream_limit() -> int:
    """Return the asyncio reader buffer limit, honouring CODELINK_STREAM_LIMIT."""

    limit = get_env_int(STREAM_LIMIT_ENV_VAR, DEFAULT_STREAM_LIMIT)
    return limit if limit > 0 else DEFAULT_STREAM_LIMIT
