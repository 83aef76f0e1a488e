import pytest

from codelink.suggestions import COMPOSE_ERROR_SUGGESTIONS, determine_error_suggestion, get_compose_error_suggestion

TASK_SUGGESTION = COMPOSE_ERROR_SUGGESTIONS[0][1]


@pytest.mark.parametrize(
    "stderr",
    [
        "gradle: task not found",
        "FAILURE: Build failed with an exception.\n* What went wrong:\nTask 'parseCodeConnect' not found in root project 'app'.",
    ],
)
def test_missing_task_is_recognised(stderr):
    assert get_compose_error_suggestion(stderr) == TASK_SUGGESTION


def test_sdk_and_jdk_problems_have_distinct_suggestions():
    sdk = get_compose_error_suggestion("SDK location not found. Define a valid SDK location")
    jdk = get_compose_error_suggestion("Unsupported class file major version 65")

    assert sdk and "Android SDK" in sdk
    assert jdk and "JDK" in jdk


def test_unrecognised_output_has_no_suggestion():
    assert get_compose_error_suggestion("BUILD FAILED in 3s") is None
    assert get_compose_error_suggestion("") is None


def test_only_parsers_with_a_classifier_produce_suggestions():
    assert determine_error_suggestion("gradle: task not found", "compose") == TASK_SUGGESTION
    assert determine_error_suggestion("gradle: task not found", "swift") is None
    assert determine_error_suggestion("gradle: task not found", "not-a-parser") is None
