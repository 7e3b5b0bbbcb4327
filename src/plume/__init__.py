"""
plume — GraphQL AST printer for Python

Renders a GraphQL abstract syntax tree back into canonical source text.
Trees built or rewritten in code print as valid, deterministically
formatted GraphQL. Zero runtime dependencies.

Quick Start:
    >>> from plume import print_ast
    >>> from plume.nodes import Document, Field, Name, OperationDefinition, SelectionSet
    >>> doc = Document(definitions=(
    ...     OperationDefinition(selection_set=SelectionSet(selections=(
    ...         Field(name=Name(value="hero")),
    ...     ))),
    ... ))
    >>> print(print_ast(doc))
    {
      hero
    }
    <BLANKLINE>

Trees from other tooling:
    >>> from plume import from_json, print_ast
    >>> text = print_ast(from_json(graphql_js_ast_json))
"""

from plume.blockstring import print_block_string
from plume.config import (
    PrintConfig,
    get_print_config,
    print_config_context,
    reset_print_config,
    set_print_config,
)
from plume.errors import PlumeError, PrintError, SerializationError
from plume.location import SourceLocation
from plume.nodes import (
    NODE_TYPES,
    Argument,
    BooleanValue,
    Definition,
    Directive,
    DirectiveDefinition,
    Document,
    EnumTypeDefinition,
    EnumTypeExtension,
    EnumValue,
    EnumValueDefinition,
    Field,
    FieldDefinition,
    FloatValue,
    FragmentDefinition,
    FragmentSpread,
    InlineFragment,
    InputObjectTypeDefinition,
    InputObjectTypeExtension,
    InputValueDefinition,
    InterfaceTypeDefinition,
    InterfaceTypeExtension,
    IntValue,
    ListType,
    ListValue,
    Name,
    NamedType,
    Node,
    NonNullType,
    NullValue,
    ObjectField,
    ObjectTypeDefinition,
    ObjectTypeExtension,
    ObjectValue,
    OperationDefinition,
    OperationType,
    OperationTypeDefinition,
    ScalarTypeDefinition,
    ScalarTypeExtension,
    SchemaDefinition,
    SchemaExtension,
    Selection,
    SelectionSet,
    StringValue,
    TypeNode,
    UnionTypeDefinition,
    UnionTypeExtension,
    Value,
    Variable,
    VariableDefinition,
)
from plume.printer import Printer, print_ast
from plume.serialization import from_dict, from_json, to_dict, to_json
from plume.visitor import BaseVisitor, Visitor, transform, visit

__version__ = "0.1.0"

__all__ = [
    # Printing
    "print_ast",
    "print_block_string",
    "Printer",
    # Walking
    "BaseVisitor",
    "Visitor",
    "transform",
    "visit",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration
    "PrintConfig",
    "get_print_config",
    "print_config_context",
    "reset_print_config",
    "set_print_config",
    # Errors
    "PlumeError",
    "PrintError",
    "SerializationError",
    # Nodes
    "NODE_TYPES",
    "Argument",
    "BooleanValue",
    "Definition",
    "Directive",
    "DirectiveDefinition",
    "Document",
    "EnumTypeDefinition",
    "EnumTypeExtension",
    "EnumValue",
    "EnumValueDefinition",
    "Field",
    "FieldDefinition",
    "FloatValue",
    "FragmentDefinition",
    "FragmentSpread",
    "InlineFragment",
    "InputObjectTypeDefinition",
    "InputObjectTypeExtension",
    "InputValueDefinition",
    "InterfaceTypeDefinition",
    "InterfaceTypeExtension",
    "IntValue",
    "ListType",
    "ListValue",
    "Name",
    "NamedType",
    "Node",
    "NonNullType",
    "NullValue",
    "ObjectField",
    "ObjectTypeDefinition",
    "ObjectTypeExtension",
    "ObjectValue",
    "OperationDefinition",
    "OperationType",
    "OperationTypeDefinition",
    "ScalarTypeDefinition",
    "ScalarTypeExtension",
    "SchemaDefinition",
    "SchemaExtension",
    "Selection",
    "SelectionSet",
    "SourceLocation",
    "StringValue",
    "TypeNode",
    "UnionTypeDefinition",
    "UnionTypeExtension",
    "Value",
    "Variable",
    "VariableDefinition",
    "__version__",
]
