"""Immutable AST transform — add __typename to every selection set."""

import dataclasses

from plume import print_ast, transform
from plume.nodes import Document, Field, Name, Node, OperationDefinition, SelectionSet

TYPENAME = Field(name=Name(value="__typename"))


def add_typename(node: Node) -> Node:
    """Append __typename to selection sets that lack it."""
    if isinstance(node, SelectionSet) and TYPENAME not in node.selections:
        return dataclasses.replace(node, selections=(*node.selections, TYPENAME))
    return node


doc = Document(
    definitions=(
        OperationDefinition(
            selection_set=SelectionSet(
                selections=(
                    Field(
                        name=Name(value="viewer"),
                        selection_set=SelectionSet(selections=(Field(name=Name(value="login")),)),
                    ),
                )
            )
        ),
    )
)

print("Original:")
print(print_ast(doc))
print("With __typename:")
print(print_ast(transform(doc, add_typename)))
