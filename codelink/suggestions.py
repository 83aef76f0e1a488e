"""Turn parser failure output into actionable hints.

Some parsers return the same exit code for unrelated failures. The Compose
parser, for instance, is run through the Gradle wrapper, which exits with 1 for
a missing task just as it does for a broken SDK setup. For those parsers the
unstructured stderr text is matched against known patterns instead.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from codelink.errors import UnknownParserError

if TYPE_CHECKING:
    from codelink.parsers import ParserRegistry

COMPOSE_ERROR_SUGGESTIONS: list[tuple[re.Pattern[str], str]] = [
    (
        re.compile(r"task\b.*\bnot found", re.IGNORECASE),
        "The Code Connect Gradle tasks are not available. Make sure the Code Connect Gradle plugin is "
        "applied to the module containing your components and that gradleWrapperPath points at the "
        "right project.",
    ),
    (
        re.compile(r"SDK location not found|ANDROID_HOME|ANDROID_SDK_ROOT", re.IGNORECASE),
        "Gradle could not find the Android SDK. Set ANDROID_HOME or add sdk.dir to local.properties.",
    ),
    (
        re.compile(
            r"Unsupported class file major version|requires Java \d+|incompatible with Java|JAVA_HOME",
            re.IGNORECASE,
        ),
        "Gradle is running with an unsupported JDK. Point JAVA_HOME at a JDK supported by your Android "
        "Gradle Plugin version.",
    ),
    (
        re.compile(r"Could not resolve (all )?(dependencies|files|artifacts)|Could not resolve [\w.\-]+:", re.IGNORECASE),
        "Gradle failed to resolve dependencies. Check your network connection and repository configuration, "
        "then try running the build once outside of Code Connect.",
    ),
    (
        re.compile(r"GradleWrapperMain|gradle-wrapper\.jar", re.IGNORECASE),
        "The Gradle wrapper is incomplete. Regenerate it with `gradle wrapper` and commit gradle-wrapper.jar.",
    ),
    (
        re.compile(r"permission denied", re.IGNORECASE),
        "The Gradle wrapper is not executable. Run `chmod +x gradlew` in your project.",
    ),
]


def get_compose_error_suggestion(stderr: str) -> str | None:
    if not stderr:
        return None
    for pattern, suggestion in COMPOSE_ERROR_SUGGESTIONS:
        if pattern.search(stderr):
            return suggestion
    return None


def determine_error_suggestion(stderr: str, parser: str, registry: ParserRegistry | None = None) -> str | None:
    """Return a remediation hint for a failed run of ``parser``, if one is known."""

    # Deferred: the Compose descriptor imports this module.
    from codelink.parsers import get_registry

    registry = registry or get_registry()
    try:
        descriptor = registry.get(parser)
    except UnknownParserError:
        return None
    return descriptor.suggest_fix(stderr)
