"""Tests for plume.serialization — AST dict/JSON round-trip."""

import json

import pytest

from plume import print_ast
from plume.errors import PlumeError, SerializationError
from plume.location import SourceLocation
from plume.nodes import (
    Argument,
    Document,
    Field,
    FieldDefinition,
    InputValueDefinition,
    Name,
    NamedType,
    NonNullType,
    ObjectTypeDefinition,
    OperationDefinition,
    OperationType,
    SelectionSet,
    StringValue,
    Variable,
    VariableDefinition,
)
from plume.serialization import from_dict, from_json, to_dict, to_json


def _name(value: str) -> Name:
    return Name(value=value)


def _sample_document() -> Document:
    return Document(
        definitions=(
            OperationDefinition(
                operation=OperationType.MUTATION,
                name=_name("Like"),
                variable_definitions=(
                    VariableDefinition(
                        variable=Variable(name=_name("id")),
                        type=NonNullType(type=NamedType(name=_name("ID"))),
                    ),
                ),
                selection_set=SelectionSet(
                    selections=(
                        Field(
                            name=_name("like"),
                            arguments=(
                                Argument(name=_name("id"), value=Variable(name=_name("id"))),
                            ),
                            selection_set=SelectionSet(selections=(Field(name=_name("count")),)),
                        ),
                    )
                ),
            ),
            ObjectTypeDefinition(
                description=StringValue(value="A post", block=True),
                name=_name("Post"),
                fields=(
                    FieldDefinition(
                        name=_name("title"),
                        arguments=(
                            InputValueDefinition(
                                name=_name("upper"), type=NamedType(name=_name("Boolean"))
                            ),
                        ),
                        type=NamedType(name=_name("String")),
                    ),
                ),
            ),
        )
    )


class TestToDict:
    def test_includes_kind_discriminator(self) -> None:
        data = to_dict(_name("x"))
        assert data == {"kind": "Name", "location": None, "value": "x"}

    def test_operation_type_is_plain_string(self) -> None:
        data = to_dict(_sample_document())
        assert data["definitions"][0]["operation"] == "mutation"

    def test_sequences_become_lists(self) -> None:
        data = to_dict(_sample_document())
        assert isinstance(data["definitions"], list)
        assert data["definitions"][0]["variable_definitions"][0]["kind"] == "VariableDefinition"


class TestRoundTrip:
    def test_dict_round_trip(self) -> None:
        doc = _sample_document()
        assert from_dict(to_dict(doc)) == doc

    def test_json_round_trip(self) -> None:
        doc = _sample_document()
        assert from_json(to_json(doc)) == doc

    def test_json_output_is_deterministic(self) -> None:
        assert to_json(_sample_document()) == to_json(_sample_document())

    def test_json_indent(self) -> None:
        assert "\n" in to_json(_name("x"), indent=2)

    def test_location_round_trip(self) -> None:
        loc = SourceLocation(lineno=2, col_offset=3, offset=10, end_offset=14, source_name="q.graphql")
        node = Name(value="abc", location=loc)
        restored = from_json(to_json(node))
        assert restored == node
        assert restored.location == loc

    def test_printing_survives_round_trip(self) -> None:
        doc = _sample_document()
        assert print_ast(from_json(to_json(doc))) == print_ast(doc)


class TestForeignJson:
    """Trees in the camelCase layout emitted by graphql-js style tooling."""

    def test_camel_case_keys_and_loc_are_accepted(self) -> None:
        data = {
            "kind": "Document",
            "loc": {"start": 0, "end": 6},
            "definitions": [
                {
                    "kind": "OperationDefinition",
                    "operation": "query",
                    "name": None,
                    "variableDefinitions": [],
                    "directives": [],
                    "selectionSet": {
                        "kind": "SelectionSet",
                        "selections": [
                            {
                                "kind": "Field",
                                "alias": None,
                                "name": {"kind": "Name", "value": "me", "loc": {"start": 2, "end": 4}},
                                "arguments": [],
                                "directives": [],
                                "selectionSet": None,
                            }
                        ],
                    },
                }
            ],
        }
        doc = from_json(json.dumps(data))
        assert isinstance(doc, Document)
        assert doc.definitions[0].operation is OperationType.QUERY
        assert print_ast(doc) == "{\n  me\n}\n"

    def test_type_condition_key(self) -> None:
        node = from_dict(
            {
                "kind": "InlineFragment",
                "typeCondition": {"kind": "NamedType", "name": {"kind": "Name", "value": "User"}},
                "selectionSet": {
                    "kind": "SelectionSet",
                    "selections": [{"kind": "Field", "name": {"kind": "Name", "value": "id"}}],
                },
            }
        )
        assert print_ast(node) == "... on User {\n  id\n}"


class TestErrors:
    def test_missing_kind(self) -> None:
        with pytest.raises(SerializationError, match="kind"):
            from_dict({"value": "x"})

    def test_unknown_kind(self) -> None:
        with pytest.raises(SerializationError, match="Comment"):
            from_dict({"kind": "Comment"})

    def test_missing_required_field(self) -> None:
        with pytest.raises(SerializationError, match="Name"):
            from_dict({"kind": "Name"})

    def test_unknown_operation(self) -> None:
        with pytest.raises(SerializationError, match="operation"):
            from_dict(
                {
                    "kind": "OperationDefinition",
                    "operation": "delete",
                    "selectionSet": {"kind": "SelectionSet", "selections": []},
                }
            )

    def test_incomplete_location(self) -> None:
        with pytest.raises(SerializationError, match="SourceLocation"):
            from_dict({"kind": "Name", "value": "x", "location": {"_type": "SourceLocation"}})

    def test_incomplete_location_in_json(self) -> None:
        data = '{"kind": "Name", "value": "x", "location": {"_type": "SourceLocation", "lineno": 1}}'
        with pytest.raises(SerializationError):
            from_json(data)

    def test_non_object_json(self) -> None:
        with pytest.raises(SerializationError):
            from_json("[1, 2]")

    def test_is_value_error_and_plume_error(self) -> None:
        with pytest.raises(ValueError):
            from_dict({})
        with pytest.raises(PlumeError):
            from_dict({})
