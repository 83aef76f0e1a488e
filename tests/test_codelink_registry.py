import pytest

from codelink.errors import UnknownParserError
from codelink.models import ParserIdentifier
from codelink.parsers import InvocationDescriptor, ParserRegistry, get_registry
from codelink.parsers.compose import ComposeParser
from codelink.parsers.swift import SwiftParser


@pytest.mark.parametrize("identifier", list(ParserIdentifier))
def test_registry_resolves_every_first_party_parser(identifier):
    descriptor = get_registry().get(identifier.value)
    assert descriptor.name == identifier.value


def test_registry_accepts_enum_members():
    assert isinstance(get_registry().get(ParserIdentifier.SWIFT), SwiftParser)
    assert ParserIdentifier.COMPOSE in get_registry()


def test_registry_rejects_unknown_parser_and_lists_valid_ones():
    with pytest.raises(UnknownParserError) as excinfo:
        get_registry().get("kotlin")

    message = str(excinfo.value)
    assert message.startswith('Invalid parser specified: "kotlin".')
    assert "Valid parsers are: swift, compose, __unit_test__." in message
    assert excinfo.value.parser == "kotlin"
    assert excinfo.value.valid_parsers == ["swift", "compose", "__unit_test__"]


def test_registry_is_shared_and_read_only():
    registry = get_registry()
    assert registry is get_registry()
    with pytest.raises(TypeError):
        registry._parsers["extra"] = SwiftParser()


def test_only_compose_uses_a_temporary_input_file(tmp_path):
    registry = get_registry()
    assert registry.get("swift").input_file(tmp_path) is None
    assert registry.get("__unit_test__").input_file(tmp_path) is None

    compose_input = registry.get("compose").input_file(tmp_path)
    assert compose_input == tmp_path / ComposeParser.temporary_input_file_path


def test_custom_registry_rejects_duplicates():
    class Duplicate(InvocationDescriptor):
        name = "swift"

    with pytest.raises(ValueError):
        ParserRegistry([SwiftParser(), Duplicate()])


@pytest.mark.parametrize("name", ["SWIFT", "Compose", " swift"])
def test_registry_matches_identifiers_exactly(name):
    with pytest.raises(UnknownParserError):
        get_registry().get(name)
    assert name not in get_registry()
