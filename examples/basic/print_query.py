"""Build a query in code and print it as GraphQL."""

from plume import print_ast
from plume.nodes import (
    Argument,
    Document,
    Field,
    Name,
    NamedType,
    NonNullType,
    OperationDefinition,
    SelectionSet,
    Variable,
    VariableDefinition,
)

user = Field(
    name=Name(value="user"),
    arguments=(Argument(name=Name(value="id"), value=Variable(name=Name(value="id"))),),
    selection_set=SelectionSet(
        selections=(Field(name=Name(value="id")), Field(name=Name(value="email")))
    ),
)

doc = Document(
    definitions=(
        OperationDefinition(
            name=Name(value="GetUser"),
            variable_definitions=(
                VariableDefinition(
                    variable=Variable(name=Name(value="id")),
                    type=NonNullType(type=NamedType(name=Name(value="ID"))),
                ),
            ),
            selection_set=SelectionSet(selections=(user,)),
        ),
    )
)

print(print_ast(doc), end="")
