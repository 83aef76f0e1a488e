import pytest
from pydantic import ValidationError

from codelink.constants import DEFAULT_STREAM_LIMIT, STREAM_LIMIT_ENV_VAR, get_stream_limit
from codelink.models import ParserConfig, RequestMode, RequestPayload


def test_stream_limit_defaults_without_override(monkeypatch):
    monkeypatch.delenv(STREAM_LIMIT_ENV_VAR, raising=False)
    assert get_stream_limit() == DEFAULT_STREAM_LIMIT


@pytest.mark.parametrize("raw, expected", [("4096", 4096), ("not-a-number", DEFAULT_STREAM_LIMIT), ("0", DEFAULT_STREAM_LIMIT)])
def test_stream_limit_reads_environment(monkeypatch, raw, expected):
    monkeypatch.setenv(STREAM_LIMIT_ENV_VAR, raw)
    assert get_stream_limit() == expected


def test_parser_config_accepts_project_file_keys():
    config = ParserConfig.model_validate(
        {
            "parser": "compose",
            "gradleWrapperPath": "android",
            "include": ["src/**/*.kt"],
        }
    )

    assert config.gradle_wrapper_path == "android"
    assert config.custom_swift_cli_path is None
    assert config.model_extra == {"include": ["src/**/*.kt"]}


def test_request_payload_is_immutable():
    payload = RequestPayload(mode="CREATE")

    assert payload.mode is RequestMode.CREATE
    with pytest.raises(ValidationError):
        payload.mode = RequestMode.PARSE
