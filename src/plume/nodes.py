"""Typed AST nodes for GraphQL documents.

All AST nodes are frozen dataclasses with slots for:
- Immutability: Safe sharing across threads, never mutated by the printer
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements dispatch on node classes

Every node class carries a ``kind`` class attribute equal to the GraphQL
kind name, and an optional ``location``. Fields are keyword-only so that
optional parts (alias, directives, description, ...) can be left out.

Node Hierarchy:
Node (base)
├── Name
├── Document
├── Executable definitions
│   ├── OperationDefinition, VariableDefinition, Variable
│   ├── SelectionSet, Field, Argument
│   └── FragmentSpread, InlineFragment, FragmentDefinition
├── Values
│   ├── IntValue, FloatValue, StringValue, BooleanValue, NullValue
│   └── EnumValue, ListValue, ObjectValue, ObjectField
├── Directive
├── Type references: NamedType, ListType, NonNullType
├── Type system definitions
│   ├── SchemaDefinition, OperationTypeDefinition
│   ├── ScalarTypeDefinition, ObjectTypeDefinition, InterfaceTypeDefinition
│   ├── UnionTypeDefinition, EnumTypeDefinition, InputObjectTypeDefinition
│   ├── FieldDefinition, InputValueDefinition, EnumValueDefinition
│   └── DirectiveDefinition
└── Type system extensions
    ├── SchemaExtension, ScalarTypeExtension, ObjectTypeExtension
    ├── InterfaceTypeExtension, UnionTypeExtension
    └── EnumTypeExtension, InputObjectTypeExtension

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from plume.location import SourceLocation


class OperationType(StrEnum):
    """Root operation types."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class Node:
    """Base class for all AST nodes."""

    kind: ClassVar[str] = "Node"

    location: SourceLocation | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Name(Node):
    """An identifier."""

    kind: ClassVar[str] = "Name"

    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Document(Node):
    """Root node: a sequence of definitions."""

    kind: ClassVar[str] = "Document"

    definitions: tuple[Definition, ...] = ()


# =============================================================================
# Executable Definitions
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationDefinition(Node):
    """A query, mutation or subscription.

    GraphQL: query Name($id: ID) @dir { field }

    An anonymous query without variables or directives is the shorthand
    ``{ field }``.

    """

    kind: ClassVar[str] = "OperationDefinition"

    operation: OperationType = OperationType.QUERY
    name: Name | None = None
    variable_definitions: tuple[VariableDefinition, ...] = ()
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet


@dataclass(frozen=True, slots=True, kw_only=True)
class VariableDefinition(Node):
    """GraphQL: $id: ID! = 1 @dir"""

    kind: ClassVar[str] = "VariableDefinition"

    variable: Variable
    type: TypeNode
    default_value: Value | None = None
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Variable(Node):
    """GraphQL: $name"""

    kind: ClassVar[str] = "Variable"

    name: Name


@dataclass(frozen=True, slots=True, kw_only=True)
class SelectionSet(Node):
    """Brace-delimited selections of an operation, field or fragment."""

    kind: ClassVar[str] = "SelectionSet"

    selections: tuple[Selection, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Field(Node):
    """GraphQL: alias: name(arg: 1) @dir { sub }"""

    kind: ClassVar[str] = "Field"

    alias: Name | None = None
    name: Name
    arguments: tuple[Argument, ...] = ()
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Argument(Node):
    """GraphQL: name: value"""

    kind: ClassVar[str] = "Argument"

    name: Name
    value: Value


@dataclass(frozen=True, slots=True, kw_only=True)
class FragmentSpread(Node):
    """GraphQL: ...Name @dir"""

    kind: ClassVar[str] = "FragmentSpread"

    name: Name
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class InlineFragment(Node):
    """GraphQL: ... on Type @dir { field }"""

    kind: ClassVar[str] = "InlineFragment"

    type_condition: NamedType | None = None
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet


@dataclass(frozen=True, slots=True, kw_only=True)
class FragmentDefinition(Node):
    """GraphQL: fragment Name on Type @dir { field }

    Variable definitions on fragments are experimental; they are kept so
    that trees using them still print.

    """

    kind: ClassVar[str] = "FragmentDefinition"

    name: Name
    variable_definitions: tuple[VariableDefinition, ...] = ()
    type_condition: NamedType
    directives: tuple[Directive, ...] = ()
    selection_set: SelectionSet


# =============================================================================
# Values
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class IntValue(Node):
    """Integer literal, stored as its source text."""

    kind: ClassVar[str] = "IntValue"

    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class FloatValue(Node):
    """Float literal, stored as its source text."""

    kind: ClassVar[str] = "FloatValue"

    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class StringValue(Node):
    """String literal.

    ``value`` is the decoded string. ``block`` marks a triple-quoted
    block string.

    """

    kind: ClassVar[str] = "StringValue"

    value: str
    block: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class BooleanValue(Node):
    kind: ClassVar[str] = "BooleanValue"

    value: bool


@dataclass(frozen=True, slots=True, kw_only=True)
class NullValue(Node):
    kind: ClassVar[str] = "NullValue"


@dataclass(frozen=True, slots=True, kw_only=True)
class EnumValue(Node):
    kind: ClassVar[str] = "EnumValue"

    value: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ListValue(Node):
    """GraphQL: [1, 2, 3]"""

    kind: ClassVar[str] = "ListValue"

    values: tuple[Value, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectValue(Node):
    """GraphQL: {a: 1, b: 2}"""

    kind: ClassVar[str] = "ObjectValue"

    fields: tuple[ObjectField, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectField(Node):
    kind: ClassVar[str] = "ObjectField"

    name: Name
    value: Value


# =============================================================================
# Directives and Type References
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class Directive(Node):
    """GraphQL: @name(arg: value)"""

    kind: ClassVar[str] = "Directive"

    name: Name
    arguments: tuple[Argument, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NamedType(Node):
    kind: ClassVar[str] = "NamedType"

    name: Name


@dataclass(frozen=True, slots=True, kw_only=True)
class ListType(Node):
    """GraphQL: [Type]"""

    kind: ClassVar[str] = "ListType"

    type: TypeNode


@dataclass(frozen=True, slots=True, kw_only=True)
class NonNullType(Node):
    """GraphQL: Type!"""

    kind: ClassVar[str] = "NonNullType"

    type: NamedType | ListType


# =============================================================================
# Type System Definitions
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class SchemaDefinition(Node):
    """GraphQL: schema @dir { query: Query }"""

    kind: ClassVar[str] = "SchemaDefinition"

    directives: tuple[Directive, ...] = ()
    operation_types: tuple[OperationTypeDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationTypeDefinition(Node):
    """GraphQL: query: Query"""

    kind: ClassVar[str] = "OperationTypeDefinition"

    operation: OperationType
    type: NamedType


@dataclass(frozen=True, slots=True, kw_only=True)
class ScalarTypeDefinition(Node):
    kind: ClassVar[str] = "ScalarTypeDefinition"

    description: StringValue | None = None
    name: Name
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectTypeDefinition(Node):
    """GraphQL: type Name implements A & B @dir { fields }"""

    kind: ClassVar[str] = "ObjectTypeDefinition"

    description: StringValue | None = None
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldDefinition(Node):
    """GraphQL: name(arg: Int = 1): Type @dir"""

    kind: ClassVar[str] = "FieldDefinition"

    description: StringValue | None = None
    name: Name
    arguments: tuple[InputValueDefinition, ...] = ()
    type: TypeNode
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class InputValueDefinition(Node):
    """An argument or input field definition.

    GraphQL: name: Type = default @dir

    """

    kind: ClassVar[str] = "InputValueDefinition"

    description: StringValue | None = None
    name: Name
    type: TypeNode
    default_value: Value | None = None
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class InterfaceTypeDefinition(Node):
    kind: ClassVar[str] = "InterfaceTypeDefinition"

    description: StringValue | None = None
    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class UnionTypeDefinition(Node):
    """GraphQL: union Name @dir = A | B"""

    kind: ClassVar[str] = "UnionTypeDefinition"

    description: StringValue | None = None
    name: Name
    directives: tuple[Directive, ...] = ()
    types: tuple[NamedType, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class EnumTypeDefinition(Node):
    kind: ClassVar[str] = "EnumTypeDefinition"

    description: StringValue | None = None
    name: Name
    directives: tuple[Directive, ...] = ()
    values: tuple[EnumValueDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class EnumValueDefinition(Node):
    kind: ClassVar[str] = "EnumValueDefinition"

    description: StringValue | None = None
    name: Name
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class InputObjectTypeDefinition(Node):
    kind: ClassVar[str] = "InputObjectTypeDefinition"

    description: StringValue | None = None
    name: Name
    directives: tuple[Directive, ...] = ()
    fields: tuple[InputValueDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class DirectiveDefinition(Node):
    """GraphQL: directive @name(arg: Int) repeatable on FIELD | QUERY"""

    kind: ClassVar[str] = "DirectiveDefinition"

    description: StringValue | None = None
    name: Name
    arguments: tuple[InputValueDefinition, ...] = ()
    repeatable: bool = False
    locations: tuple[Name, ...] = ()


# =============================================================================
# Type System Extensions
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class SchemaExtension(Node):
    kind: ClassVar[str] = "SchemaExtension"

    directives: tuple[Directive, ...] = ()
    operation_types: tuple[OperationTypeDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ScalarTypeExtension(Node):
    kind: ClassVar[str] = "ScalarTypeExtension"

    name: Name
    directives: tuple[Directive, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectTypeExtension(Node):
    kind: ClassVar[str] = "ObjectTypeExtension"

    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class InterfaceTypeExtension(Node):
    kind: ClassVar[str] = "InterfaceTypeExtension"

    name: Name
    interfaces: tuple[NamedType, ...] = ()
    directives: tuple[Directive, ...] = ()
    fields: tuple[FieldDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class UnionTypeExtension(Node):
    kind: ClassVar[str] = "UnionTypeExtension"

    name: Name
    directives: tuple[Directive, ...] = ()
    types: tuple[NamedType, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class EnumTypeExtension(Node):
    kind: ClassVar[str] = "EnumTypeExtension"

    name: Name
    directives: tuple[Directive, ...] = ()
    values: tuple[EnumValueDefinition, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class InputObjectTypeExtension(Node):
    kind: ClassVar[str] = "InputObjectTypeExtension"

    name: Name
    directives: tuple[Directive, ...] = ()
    fields: tuple[InputValueDefinition, ...] = ()


# =============================================================================
# Type Aliases
# =============================================================================

# PEP 695 type aliases for the node unions used in field annotations
type Value = (
    Variable
    | IntValue
    | FloatValue
    | StringValue
    | BooleanValue
    | NullValue
    | EnumValue
    | ListValue
    | ObjectValue
)

type TypeNode = NamedType | ListType | NonNullType

type Selection = Field | FragmentSpread | InlineFragment

type TypeSystemDefinition = (
    SchemaDefinition
    | ScalarTypeDefinition
    | ObjectTypeDefinition
    | InterfaceTypeDefinition
    | UnionTypeDefinition
    | EnumTypeDefinition
    | InputObjectTypeDefinition
    | DirectiveDefinition
)

type TypeSystemExtension = (
    SchemaExtension
    | ScalarTypeExtension
    | ObjectTypeExtension
    | InterfaceTypeExtension
    | UnionTypeExtension
    | EnumTypeExtension
    | InputObjectTypeExtension
)

type Definition = (
    OperationDefinition | FragmentDefinition | TypeSystemDefinition | TypeSystemExtension
)

# Every concrete node class, keyed by kind
NODE_TYPES: dict[str, type[Node]] = {
    cls.kind: cls
    for cls in (
        Name,
        Document,
        OperationDefinition,
        VariableDefinition,
        Variable,
        SelectionSet,
        Field,
        Argument,
        FragmentSpread,
        InlineFragment,
        FragmentDefinition,
        IntValue,
        FloatValue,
        StringValue,
        BooleanValue,
        NullValue,
        EnumValue,
        ListValue,
        ObjectValue,
        ObjectField,
        Directive,
        NamedType,
        ListType,
        NonNullType,
        SchemaDefinition,
        OperationTypeDefinition,
        ScalarTypeDefinition,
        ObjectTypeDefinition,
        FieldDefinition,
        InputValueDefinition,
        InterfaceTypeDefinition,
        UnionTypeDefinition,
        EnumTypeDefinition,
        EnumValueDefinition,
        InputObjectTypeDefinition,
        DirectiveDefinition,
        SchemaExtension,
        ScalarTypeExtension,
        ObjectTypeExtension,
        InterfaceTypeExtension,
        UnionTypeExtension,
        EnumTypeExtension,
        InputObjectTypeExtension,
    )
}
