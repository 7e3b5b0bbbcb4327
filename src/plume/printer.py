"""GraphQL printer: renders an AST back into canonical source text.

The printer is a BaseVisitor[str]. The walker hands every entry a copy of
its node whose children are already rendered, so each ``leave_*`` method
only assembles strings. Formatting is fixed: two-space indentation, one
member per line inside blocks, one blank line between definitions.

Example:
    >>> from plume import print_ast
    >>> from plume.nodes import Field, Name, OperationDefinition, SelectionSet
    >>> op = OperationDefinition(
    ...     selection_set=SelectionSet(selections=(Field(name=Name(value="me")),))
    ... )
    >>> print_ast(op)
    '{\\n  me\\n}'

Thread Safety:
    A Printer holds only its immutable config. Sharing one instance across
    threads is safe, as is calling print_ast() concurrently.

"""

import json
from collections.abc import Sequence

from plume.blockstring import print_block_string
from plume.config import PrintConfig, get_print_config
from plume.errors import PrintError
from plume.nodes import (
    Argument,
    BooleanValue,
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
    SelectionSet,
    StringValue,
    UnionTypeDefinition,
    UnionTypeExtension,
    Variable,
    VariableDefinition,
)
from plume.strings import block, indent, join, wrap
from plume.utils.logger import get_logger
from plume.visitor import BaseVisitor, visit

logger = get_logger(__name__)

# Entries receive nodes whose child fields hold rendered strings, not the
# node types their annotations name.


def _describe(description: str | None, body: str) -> str:
    """Put a rendered description on its own line above body."""
    return join([description, body], "\n")


def _print_arguments(arguments: Sequence[str]) -> str:
    """Print an argument definition list.

    Stays on one line unless an argument spans several lines (usually
    because of a block string description), in which case every argument
    goes on its own indented line.
    """
    if any("\n" in argument for argument in arguments):
        return wrap("(\n", indent(join(arguments, "\n")), "\n)")
    return wrap("(", join(arguments, ", "), ")")


class Printer(BaseVisitor[str]):
    """Rendering table: one ``leave_*`` entry per node kind.

    Unknown kinds raise PrintError rather than passing through.

    """

    __slots__ = ("_config",)

    def __init__(self, config: PrintConfig | None = None) -> None:
        self._config = config if config is not None else get_print_config()

    def leave(self, node: Node, key: str | None) -> str:
        # Block string descriptions print flush, without the extra indent.
        if key == "description" and isinstance(node, StringValue) and node.block:
            return print_block_string(node.value, is_description=True)
        return super().leave(node, key)

    def leave_default(self, node: Node) -> str:
        kind = getattr(node, "kind", type(node).__name__)
        if self._config.log_unknown_kinds:
            logger.warning("No rendering entry for node kind %r", kind)
        raise PrintError(f"Cannot print node of kind {kind!r}", kind=kind, location=node.location)

    def _require_selections(self, node: Node, selection_set: str | None) -> None:
        if self._config.strict and not selection_set:
            raise PrintError(
                f"{node.kind} requires a non-empty selection set",
                kind=node.kind,
                location=node.location,
            )

    def leave_name(self, node: Name) -> str:
        return node.value

    def leave_variable(self, node: Variable) -> str:
        return "$" + node.name

    # -- Document --------------------------------------------------------------

    def leave_document(self, node: Document) -> str:
        return join(node.definitions, "\n\n") + "\n"

    def leave_operation_definition(self, node: OperationDefinition) -> str:
        self._require_selections(node, node.selection_set)
        op = str(node.operation)
        name = node.name
        var_defs = wrap("(", join(node.variable_definitions, ", "), ")")
        directives = join(node.directives, " ")
        # Anonymous queries with no directives or variable definitions
        # use the query shorthand.
        if not name and not directives and not var_defs and op == OperationType.QUERY:
            return node.selection_set or ""
        return join([op, join([name, var_defs]), directives, node.selection_set], " ")

    def leave_variable_definition(self, node: VariableDefinition) -> str:
        return (
            node.variable
            + ": "
            + node.type
            + wrap(" = ", node.default_value)
            + wrap(" ", join(node.directives, " "))
        )

    def leave_selection_set(self, node: SelectionSet) -> str:
        return block(node.selections)

    def leave_field(self, node: Field) -> str:
        head = wrap("", node.alias, ": ") + node.name + wrap("(", join(node.arguments, ", "), ")")
        return join([head, join(node.directives, " "), node.selection_set], " ")

    def leave_argument(self, node: Argument) -> str:
        return node.name + ": " + node.value

    # -- Fragments -------------------------------------------------------------

    def leave_fragment_spread(self, node: FragmentSpread) -> str:
        return "..." + node.name + wrap(" ", join(node.directives, " "))

    def leave_inline_fragment(self, node: InlineFragment) -> str:
        self._require_selections(node, node.selection_set)
        return join(
            [
                "...",
                wrap("on ", node.type_condition),
                join(node.directives, " "),
                node.selection_set,
            ],
            " ",
        )

    def leave_fragment_definition(self, node: FragmentDefinition) -> str:
        self._require_selections(node, node.selection_set)
        var_defs = wrap("(", join(node.variable_definitions, ", "), ")")
        return (
            f"fragment {node.name}{var_defs} on {node.type_condition} "
            f"{wrap('', join(node.directives, ' '), ' ')}"
            f"{node.selection_set}"
        )

    # -- Values ----------------------------------------------------------------

    def leave_int_value(self, node: IntValue) -> str:
        return node.value

    def leave_float_value(self, node: FloatValue) -> str:
        return node.value

    def leave_string_value(self, node: StringValue) -> str:
        if node.block:
            return print_block_string(node.value)
        return json.dumps(node.value, ensure_ascii=False)

    def leave_boolean_value(self, node: BooleanValue) -> str:
        return "true" if node.value else "false"

    def leave_null_value(self, node: NullValue) -> str:
        return "null"

    def leave_enum_value(self, node: EnumValue) -> str:
        return node.value

    def leave_list_value(self, node: ListValue) -> str:
        return "[" + join(node.values, ", ") + "]"

    def leave_object_value(self, node: ObjectValue) -> str:
        return "{" + join(node.fields, ", ") + "}"

    def leave_object_field(self, node: ObjectField) -> str:
        return node.name + ": " + node.value

    # -- Directives and types --------------------------------------------------

    def leave_directive(self, node: Directive) -> str:
        return "@" + node.name + wrap("(", join(node.arguments, ", "), ")")

    def leave_named_type(self, node: NamedType) -> str:
        return node.name

    def leave_list_type(self, node: ListType) -> str:
        return "[" + node.type + "]"

    def leave_non_null_type(self, node: NonNullType) -> str:
        return node.type + "!"

    # -- Type system definitions -----------------------------------------------

    def leave_schema_definition(self, node: SchemaDefinition) -> str:
        return join(["schema", join(node.directives, " "), block(node.operation_types)], " ")

    def leave_operation_type_definition(self, node: OperationTypeDefinition) -> str:
        return str(node.operation) + ": " + node.type

    def leave_scalar_type_definition(self, node: ScalarTypeDefinition) -> str:
        return _describe(
            node.description,
            join(["scalar", node.name, join(node.directives, " ")], " "),
        )

    def leave_object_type_definition(self, node: ObjectTypeDefinition) -> str:
        return _describe(
            node.description,
            join(
                [
                    "type",
                    node.name,
                    wrap("implements ", join(node.interfaces, " & ")),
                    join(node.directives, " "),
                    block(node.fields),
                ],
                " ",
            ),
        )

    def leave_field_definition(self, node: FieldDefinition) -> str:
        return _describe(
            node.description,
            node.name
            + _print_arguments(node.arguments)
            + ": "
            + node.type
            + wrap(" ", join(node.directives, " ")),
        )

    def leave_input_value_definition(self, node: InputValueDefinition) -> str:
        return _describe(
            node.description,
            join(
                [
                    node.name + ": " + node.type,
                    wrap("= ", node.default_value),
                    join(node.directives, " "),
                ],
                " ",
            ),
        )

    def leave_interface_type_definition(self, node: InterfaceTypeDefinition) -> str:
        return _describe(
            node.description,
            join(
                [
                    "interface",
                    node.name,
                    wrap("implements ", join(node.interfaces, " & ")),
                    join(node.directives, " "),
                    block(node.fields),
                ],
                " ",
            ),
        )

    def leave_union_type_definition(self, node: UnionTypeDefinition) -> str:
        return _describe(
            node.description,
            join(
                [
                    "union",
                    node.name,
                    join(node.directives, " "),
                    wrap("= ", join(node.types, " | ")),
                ],
                " ",
            ),
        )

    def leave_enum_type_definition(self, node: EnumTypeDefinition) -> str:
        return _describe(
            node.description,
            join(["enum", node.name, join(node.directives, " "), block(node.values)], " "),
        )

    def leave_enum_value_definition(self, node: EnumValueDefinition) -> str:
        return _describe(node.description, join([node.name, join(node.directives, " ")], " "))

    def leave_input_object_type_definition(self, node: InputObjectTypeDefinition) -> str:
        return _describe(
            node.description,
            join(["input", node.name, join(node.directives, " "), block(node.fields)], " "),
        )

    def leave_directive_definition(self, node: DirectiveDefinition) -> str:
        return _describe(
            node.description,
            "directive @"
            + node.name
            + _print_arguments(node.arguments)
            + (" repeatable" if node.repeatable else "")
            + " on "
            + join(node.locations, " | "),
        )

    # -- Type system extensions ------------------------------------------------

    def leave_schema_extension(self, node: SchemaExtension) -> str:
        return join(
            ["extend schema", join(node.directives, " "), block(node.operation_types)], " "
        )

    def leave_scalar_type_extension(self, node: ScalarTypeExtension) -> str:
        return join(["extend scalar", node.name, join(node.directives, " ")], " ")

    def leave_object_type_extension(self, node: ObjectTypeExtension) -> str:
        return join(
            [
                "extend type",
                node.name,
                wrap("implements ", join(node.interfaces, " & ")),
                join(node.directives, " "),
                block(node.fields),
            ],
            " ",
        )

    def leave_interface_type_extension(self, node: InterfaceTypeExtension) -> str:
        return join(
            [
                "extend interface",
                node.name,
                wrap("implements ", join(node.interfaces, " & ")),
                join(node.directives, " "),
                block(node.fields),
            ],
            " ",
        )

    def leave_union_type_extension(self, node: UnionTypeExtension) -> str:
        return join(
            [
                "extend union",
                node.name,
                join(node.directives, " "),
                wrap("= ", join(node.types, " | ")),
            ],
            " ",
        )

    def leave_enum_type_extension(self, node: EnumTypeExtension) -> str:
        return join(["extend enum", node.name, join(node.directives, " "), block(node.values)], " ")

    def leave_input_object_type_extension(self, node: InputObjectTypeExtension) -> str:
        return join(
            ["extend input", node.name, join(node.directives, " "), block(node.fields)], " "
        )


def print_ast(node: Node, *, config: PrintConfig | None = None) -> str:
    """Render a GraphQL AST as source text.

    Args:
        node: Root of the tree; any node kind may be printed on its own.
        config: Configuration for this call (defaults to the context's config).

    Returns:
        Canonical source text, newline-terminated when node is a Document.

    Raises:
        PrintError: If the tree contains a node that cannot be printed.

    """
    if not isinstance(node, Node):
        msg = f"Expected an AST node, got {type(node).__name__}"
        raise PrintError(msg)
    logger.debug("Printing %s", node.kind)
    text = visit(node, Printer(config))
    logger.debug("Printed %s: %d characters", node.kind, len(text))
    return text


__all__ = ["Printer", "print_ast"]
