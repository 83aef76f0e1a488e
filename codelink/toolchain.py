"""Locate the build tooling that first-party parsers are run through."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path

from codelink.errors import ToolchainNotFoundError

logger = logging.getLogger("codelink.toolchain")

SWIFT_PACKAGE_MANIFEST = "Package.swift"
GRADLE_WRAPPER_SCRIPT = "gradlew"
GRADLE_WRAPPER_BATCH = "gradlew.bat"


def _walk_up(start: Path) -> Iterator[Path]:
    yield start
    yield from start.parents


def get_custom_swift_cli_dir(cwd: str | os.PathLike[str]) -> Path:
    """Canonical form of the working directory a custom Swift CLI path is relative to."""

    return Path(cwd).resolve()


def get_swift_parser_dir(cwd: str | os.PathLike[str], xcodeproj_path: str | None = None) -> Path:
    """Find the Swift package that builds the ``figma-swift`` parser."""

    base = Path(cwd).resolve()
    if xcodeproj_path:
        project = Path(xcodeproj_path)
        if not project.is_absolute():
            project = base / project
        candidates: Iterator[Path] = iter([project.parent.resolve()])
    else:
        candidates = _walk_up(base)

    for candidate in candidates:
        if (candidate / SWIFT_PACKAGE_MANIFEST).is_file():
            logger.debug("Using Swift package at %s", candidate)
            return candidate

    raise ToolchainNotFoundError(
        f"Could not find a {SWIFT_PACKAGE_MANIFEST} for the Swift parser starting from {base}. "
        "Set xcodeprojPath in your configuration if the package lives elsewhere."
    )


def get_gradle_wrapper_path(cwd: str | os.PathLike[str], gradle_wrapper_path: str | None = None) -> Path:
    """Return the directory holding the Gradle wrapper for a Compose project."""

    base = Path(cwd).resolve()
    if gradle_wrapper_path:
        override = Path(gradle_wrapper_path)
        if not override.is_absolute():
            override = base / override
        override = override.resolve()
        # Accept either the wrapper script itself or its directory.
        if override.is_file():
            override = override.parent
        if _has_wrapper(override):
            return override
        raise ToolchainNotFoundError(
            f"No Gradle wrapper found at {override}. Check gradleWrapperPath in your configuration."
        )

    for candidate in _walk_up(base):
        if _has_wrapper(candidate):
            logger.debug("Using Gradle wrapper in %s", candidate)
            return candidate

    raise ToolchainNotFoundError(
        f"Could not find a Gradle wrapper starting from {base}. "
        "Set gradleWrapperPath in your configuration to the directory containing gradlew."
    )


def get_gradle_wrapper_executable_path(wrapper_dir: str | os.PathLike[str]) -> Path:
    script = GRADLE_WRAPPER_BATCH if sys.platform == "win32" else GRADLE_WRAPPER_SCRIPT
    return Path(wrapper_dir) / script


def _has_wrapper(directory: Path) -> bool:
    return (directory / GRADLE_WRAPPER_SCRIPT).is_file() or (directory / GRADLE_WRAPPER_BATCH).is_file()
