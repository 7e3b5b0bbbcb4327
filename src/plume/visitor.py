"""AST walker, visitor base class and transformer for plume.

``visit`` reduces a tree bottom-up: every child node is replaced by the
value the visitor returns for it before the parent is handed to the
visitor. A visitor that returns strings therefore sees each parent with
its children already rendered, which is how the printer works.

Example — count fields by name:

    class FieldCounter(BaseVisitor[object]):
        def __init__(self) -> None:
            self.counts: Counter[str] = Counter()

        def leave_field(self, node: Field) -> object:
            self.counts[node.name.value] += 1
            return node

Note that ``node.name`` above is still a Name node, since ``leave_name``
falls through to ``leave_default``, which returns the node unchanged.

Example — rename a field everywhere:

    def rename(node: Node) -> Node:
        if isinstance(node, Field) and node.name.value == "old":
            return dataclasses.replace(node, name=Name(value="new"))
        return node

    new_doc = transform(doc, rename)

Thread Safety:
    ``visit`` and ``transform`` are pure and keep no state of their own.
    Visitors that accumulate state should not be shared across threads.

"""

import dataclasses
from collections.abc import Callable
from typing import Any, Protocol

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


class Visitor[T](Protocol):
    """Anything ``visit`` can drive: a single post-order ``leave`` callback."""

    def leave(self, node: Node, key: str | None) -> T:
        """Reduce node, whose children are already reduced.

        Args:
            node: Copy of the node with child nodes replaced by their results
            key: Name of the parent field holding the node (None for the root)

        """
        ...


def visit[T](root: Node, visitor: Visitor[T]) -> T:
    """Walk root depth-first and return the visitor's result for it.

    Children are reduced before their parent, in field declaration order,
    and the parent is rebuilt with ``dataclasses.replace`` so field order
    is preserved. The original tree is not modified.

    """
    return _reduce(root, visitor, None)


def _reduce(node: Node, visitor: Visitor[Any], key: str | None) -> Any:
    changes: dict[str, Any] = {}
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        if isinstance(value, Node):
            changes[f.name] = _reduce(value, visitor, f.name)
        elif isinstance(value, tuple) and any(isinstance(item, Node) for item in value):
            changes[f.name] = tuple(
                _reduce(item, visitor, f.name) if isinstance(item, Node) else item
                for item in value
            )
    reduced = dataclasses.replace(node, **changes) if changes else node
    return visitor.leave(reduced, key)


class BaseVisitor[T]:
    """Base visitor with match-based ``leave_*`` dispatch.

    Subclass and override ``leave_*`` methods for the kinds you care about.
    Kinds without an override fall through to ``leave_default``, which
    returns the node unchanged.

    Type parameter ``T`` is the return type of the leave methods.

    """

    __slots__ = ()

    def leave(self, node: Node, key: str | None) -> T:
        """Dispatch to the ``leave_*`` method for node's kind."""
        return self._dispatch(node)

    def leave_default(self, node: Node) -> T:
        """Called for kinds without a specific ``leave_*`` method."""
        return node  # type: ignore[return-value]

    def leave_name(self, node: Name) -> T:
        return self.leave_default(node)

    def leave_document(self, node: Document) -> T:
        return self.leave_default(node)

    # -- Executable definitions ------------------------------------------------

    def leave_operation_definition(self, node: OperationDefinition) -> T:
        return self.leave_default(node)

    def leave_variable_definition(self, node: VariableDefinition) -> T:
        return self.leave_default(node)

    def leave_variable(self, node: Variable) -> T:
        return self.leave_default(node)

    def leave_selection_set(self, node: SelectionSet) -> T:
        return self.leave_default(node)

    def leave_field(self, node: Field) -> T:
        return self.leave_default(node)

    def leave_argument(self, node: Argument) -> T:
        return self.leave_default(node)

    def leave_fragment_spread(self, node: FragmentSpread) -> T:
        return self.leave_default(node)

    def leave_inline_fragment(self, node: InlineFragment) -> T:
        return self.leave_default(node)

    def leave_fragment_definition(self, node: FragmentDefinition) -> T:
        return self.leave_default(node)

    # -- Values ----------------------------------------------------------------

    def leave_int_value(self, node: IntValue) -> T:
        return self.leave_default(node)

    def leave_float_value(self, node: FloatValue) -> T:
        return self.leave_default(node)

    def leave_string_value(self, node: StringValue) -> T:
        return self.leave_default(node)

    def leave_boolean_value(self, node: BooleanValue) -> T:
        return self.leave_default(node)

    def leave_null_value(self, node: NullValue) -> T:
        return self.leave_default(node)

    def leave_enum_value(self, node: EnumValue) -> T:
        return self.leave_default(node)

    def leave_list_value(self, node: ListValue) -> T:
        return self.leave_default(node)

    def leave_object_value(self, node: ObjectValue) -> T:
        return self.leave_default(node)

    def leave_object_field(self, node: ObjectField) -> T:
        return self.leave_default(node)

    # -- Directives and types --------------------------------------------------

    def leave_directive(self, node: Directive) -> T:
        return self.leave_default(node)

    def leave_named_type(self, node: NamedType) -> T:
        return self.leave_default(node)

    def leave_list_type(self, node: ListType) -> T:
        return self.leave_default(node)

    def leave_non_null_type(self, node: NonNullType) -> T:
        return self.leave_default(node)

    # -- Type system definitions -----------------------------------------------

    def leave_schema_definition(self, node: SchemaDefinition) -> T:
        return self.leave_default(node)

    def leave_operation_type_definition(self, node: OperationTypeDefinition) -> T:
        return self.leave_default(node)

    def leave_scalar_type_definition(self, node: ScalarTypeDefinition) -> T:
        return self.leave_default(node)

    def leave_object_type_definition(self, node: ObjectTypeDefinition) -> T:
        return self.leave_default(node)

    def leave_field_definition(self, node: FieldDefinition) -> T:
        return self.leave_default(node)

    def leave_input_value_definition(self, node: InputValueDefinition) -> T:
        return self.leave_default(node)

    def leave_interface_type_definition(self, node: InterfaceTypeDefinition) -> T:
        return self.leave_default(node)

    def leave_union_type_definition(self, node: UnionTypeDefinition) -> T:
        return self.leave_default(node)

    def leave_enum_type_definition(self, node: EnumTypeDefinition) -> T:
        return self.leave_default(node)

    def leave_enum_value_definition(self, node: EnumValueDefinition) -> T:
        return self.leave_default(node)

    def leave_input_object_type_definition(self, node: InputObjectTypeDefinition) -> T:
        return self.leave_default(node)

    def leave_directive_definition(self, node: DirectiveDefinition) -> T:
        return self.leave_default(node)

    # -- Type system extensions ------------------------------------------------

    def leave_schema_extension(self, node: SchemaExtension) -> T:
        return self.leave_default(node)

    def leave_scalar_type_extension(self, node: ScalarTypeExtension) -> T:
        return self.leave_default(node)

    def leave_object_type_extension(self, node: ObjectTypeExtension) -> T:
        return self.leave_default(node)

    def leave_interface_type_extension(self, node: InterfaceTypeExtension) -> T:
        return self.leave_default(node)

    def leave_union_type_extension(self, node: UnionTypeExtension) -> T:
        return self.leave_default(node)

    def leave_enum_type_extension(self, node: EnumTypeExtension) -> T:
        return self.leave_default(node)

    def leave_input_object_type_extension(self, node: InputObjectTypeExtension) -> T:
        return self.leave_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to leave_* methods."""
        match node:
            case Name():
                return self.leave_name(node)
            case Document():
                return self.leave_document(node)
            case OperationDefinition():
                return self.leave_operation_definition(node)
            case VariableDefinition():
                return self.leave_variable_definition(node)
            case Variable():
                return self.leave_variable(node)
            case SelectionSet():
                return self.leave_selection_set(node)
            case Field():
                return self.leave_field(node)
            case Argument():
                return self.leave_argument(node)
            case FragmentSpread():
                return self.leave_fragment_spread(node)
            case InlineFragment():
                return self.leave_inline_fragment(node)
            case FragmentDefinition():
                return self.leave_fragment_definition(node)
            case IntValue():
                return self.leave_int_value(node)
            case FloatValue():
                return self.leave_float_value(node)
            case StringValue():
                return self.leave_string_value(node)
            case BooleanValue():
                return self.leave_boolean_value(node)
            case NullValue():
                return self.leave_null_value(node)
            case EnumValue():
                return self.leave_enum_value(node)
            case ListValue():
                return self.leave_list_value(node)
            case ObjectValue():
                return self.leave_object_value(node)
            case ObjectField():
                return self.leave_object_field(node)
            case Directive():
                return self.leave_directive(node)
            case NamedType():
                return self.leave_named_type(node)
            case ListType():
                return self.leave_list_type(node)
            case NonNullType():
                return self.leave_non_null_type(node)
            case SchemaDefinition():
                return self.leave_schema_definition(node)
            case OperationTypeDefinition():
                return self.leave_operation_type_definition(node)
            case ScalarTypeDefinition():
                return self.leave_scalar_type_definition(node)
            case ObjectTypeDefinition():
                return self.leave_object_type_definition(node)
            case FieldDefinition():
                return self.leave_field_definition(node)
            case InputValueDefinition():
                return self.leave_input_value_definition(node)
            case InterfaceTypeDefinition():
                return self.leave_interface_type_definition(node)
            case UnionTypeDefinition():
                return self.leave_union_type_definition(node)
            case EnumTypeDefinition():
                return self.leave_enum_type_definition(node)
            case EnumValueDefinition():
                return self.leave_enum_value_definition(node)
            case InputObjectTypeDefinition():
                return self.leave_input_object_type_definition(node)
            case DirectiveDefinition():
                return self.leave_directive_definition(node)
            case SchemaExtension():
                return self.leave_schema_extension(node)
            case ScalarTypeExtension():
                return self.leave_scalar_type_extension(node)
            case ObjectTypeExtension():
                return self.leave_object_type_extension(node)
            case InterfaceTypeExtension():
                return self.leave_interface_type_extension(node)
            case UnionTypeExtension():
                return self.leave_union_type_extension(node)
            case EnumTypeExtension():
                return self.leave_enum_type_extension(node)
            case InputObjectTypeExtension():
                return self.leave_input_object_type_extension(node)
            case _:
                return self.leave_default(node)


def transform[N: Node](root: N, fn: Callable[[Node], Node | None]) -> N:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children.

    Return ``None`` from ``fn`` to remove a node. Removed members of a
    sequence field are dropped; a removed single child leaves ``None`` in
    its field. The root cannot be removed; returning None for it, or a
    node of a different class, raises TypeError.

    Args:
        root: The tree to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new tree with the transformation applied. The original is untouched.

    """
    result = _transform_node(root, fn)
    if result is None or type(result) is not type(root):
        msg = f"transform fn must return a {type(root).__name__} for the root"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; filter out removed nodes."""
    changes: dict[str, Any] = {}
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        if isinstance(value, Node):
            new_value = _transform_node(value, fn)
            if new_value is not value:
                changes[f.name] = new_value
        elif isinstance(value, tuple) and any(isinstance(item, Node) for item in value):
            new_items = tuple(
                result
                for item in value
                if (result := _transform_node(item, fn) if isinstance(item, Node) else item)
                is not None
            )
            if new_items != value:
                changes[f.name] = new_items
    return dataclasses.replace(node, **changes) if changes else node


__all__ = ["BaseVisitor", "Visitor", "transform", "visit"]
