"""
Pytest configuration for codelink tests
"""

import sys
import textwrap
from pathlib import Path

import pytest

# Ensure the parent directory is in the Python path for imports
parent_dir = Path(__file__).resolve().parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import utils.env as env_config  # noqa: E402

# Ensure tests operate with runtime environment rather than .env overrides during imports
env_config.reload_env({"CODELINK_FORCE_ENV_OVERRIDE": "false"})

from codelink.parsers.unit_test import UNIT_TEST_PARSER_SCRIPT  # noqa: E402

# Reads the request from stdin and behaves as the request asks:
#   stderr_lines - lines written to stderr, in order
#   stdout       - raw text written to stdout (defaults to echoing the request)
#   exit_code    - process exit code (defaults to 0)
#   wait_for     - file that must appear before the parser exits (exit 3 after 10s)
UNIT_TEST_PARSER_SOURCE = textwrap.dedent(
    """
    import json
    import os
    import sys
    import time

    raw = sys.stdin.read()
    request = json.loads(raw)
    for line in request.get("stderr_lines", []):
        sys.stderr.write(line + "\\n")
        sys.stderr.flush()
    if "wait_for" in request:
        deadline = time.monotonic() + 10
        while not os.path.exists(request["wait_for"]):
            if time.monotonic() > deadline:
                sys.exit(3)
            time.sleep(0.05)
    if "stdout" in request:
        sys.stdout.write(request["stdout"])
    else:
        json.dump({"raw": raw, "request": request}, sys.stdout)
    sys.exit(request.get("exit_code", 0))
    """
)


@pytest.fixture
def project_path(tmp_path):
    """
    Provides a temporary project directory for tests.
    """
    test_dir = tmp_path / "test_workspace"
    test_dir.mkdir(parents=True, exist_ok=True)

    return test_dir


@pytest.fixture
def unit_test_project(project_path):
    """Project directory with the scripted ``__unit_test__`` parser installed."""
    script = project_path / UNIT_TEST_PARSER_SCRIPT
    script.parent.mkdir(parents=True, exist_ok=True)
    script.write_text(UNIT_TEST_PARSER_SOURCE, encoding="utf-8")
    return project_path
