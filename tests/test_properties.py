"""Property-based tests for the printer using Hypothesis.

These tests verify invariants that should hold for any well-formed tree:
1. Printing is deterministic
2. Printing survives a JSON round-trip of the tree unchanged
3. Bare fields print as their name, shorthand queries as their selection set
4. Block strings never contain an unescaped closing delimiter
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from plume import print_ast, print_block_string
from plume.nodes import (
    Argument,
    BooleanValue,
    Directive,
    Document,
    EnumValue,
    Field,
    FloatValue,
    IntValue,
    ListValue,
    Name,
    NullValue,
    ObjectField,
    ObjectValue,
    OperationDefinition,
    OperationType,
    SelectionSet,
    StringValue,
    Variable,
)
from plume.serialization import from_json, to_json

names = st.from_regex(r"[_A-Za-z][_0-9A-Za-z]{0,8}", fullmatch=True).map(lambda v: Name(value=v))

scalar_values = st.one_of(
    st.integers(min_value=-(10**6), max_value=10**6).map(lambda i: IntValue(value=str(i))),
    st.floats(allow_nan=False, allow_infinity=False).map(lambda f: FloatValue(value=repr(f))),
    st.text(max_size=20).map(lambda s: StringValue(value=s)),
    st.text(max_size=20).map(lambda s: StringValue(value=s, block=True)),
    st.booleans().map(lambda b: BooleanValue(value=b)),
    st.just(NullValue()),
    names.map(lambda n: EnumValue(value=n.value.upper())),
    names.map(lambda n: Variable(name=n)),
)

values = st.recursive(
    scalar_values,
    lambda children: st.one_of(
        st.lists(children, max_size=3).map(lambda vs: ListValue(values=tuple(vs))),
        st.lists(st.tuples(names, children), max_size=3).map(
            lambda pairs: ObjectValue(
                fields=tuple(ObjectField(name=n, value=v) for n, v in pairs)
            )
        ),
    ),
    max_leaves=6,
)

arguments = st.lists(
    st.builds(Argument, name=names, value=values), max_size=3
).map(tuple)

directives = st.lists(st.builds(Directive, name=names, arguments=arguments), max_size=2).map(tuple)

fields = st.recursive(
    st.builds(Field, name=names),
    lambda children: st.builds(
        Field,
        alias=st.none() | names,
        name=names,
        arguments=arguments,
        directives=directives,
        selection_set=st.none()
        | st.lists(children, min_size=1, max_size=3).map(
            lambda fs: SelectionSet(selections=tuple(fs))
        ),
    ),
    max_leaves=8,
)

operations = st.builds(
    OperationDefinition,
    operation=st.sampled_from(list(OperationType)),
    name=st.none() | names,
    directives=directives,
    selection_set=st.lists(fields, min_size=1, max_size=3).map(
        lambda fs: SelectionSet(selections=tuple(fs))
    ),
)

documents = st.lists(operations, min_size=1, max_size=3).map(
    lambda ops: Document(definitions=tuple(ops))
)


class TestPrinterProperties:
    @given(doc=documents)
    @settings(max_examples=75)
    def test_printing_is_deterministic(self, doc: Document) -> None:
        assert print_ast(doc) == print_ast(doc)

    @given(doc=documents)
    @settings(max_examples=75)
    def test_json_round_trip_prints_identically(self, doc: Document) -> None:
        restored = from_json(to_json(doc))
        assert restored == doc
        assert print_ast(restored) == print_ast(doc)

    @given(doc=documents)
    @settings(max_examples=50)
    def test_document_ends_with_exactly_one_newline(self, doc: Document) -> None:
        printed = print_ast(doc)
        assert printed.endswith("\n")
        assert not printed.endswith("\n\n")

    @given(name=names)
    def test_bare_field_prints_its_name(self, name: Name) -> None:
        assert print_ast(Field(name=name)) == name.value

    @given(selections=st.lists(fields, min_size=1, max_size=3))
    @settings(max_examples=50)
    def test_shorthand_query_is_its_selection_set(self, selections: list[Field]) -> None:
        selection_set = SelectionSet(selections=tuple(selections))
        op = OperationDefinition(selection_set=selection_set)
        assert print_ast(op) == print_ast(selection_set)
        assert print_ast(op).startswith("{\n")


class TestBlockStringProperties:
    @given(value=st.text(alphabet=st.sampled_from(' \t"\nab\\'), max_size=30))
    def test_no_unescaped_closing_delimiter_inside(self, value: str) -> None:
        body = print_block_string(value)[3:-3]
        assert '"""' not in body.replace('\\"""', "")

    @given(value=st.text(alphabet=st.sampled_from(" \tab\""), min_size=1, max_size=20))
    def test_single_line_leading_whitespace_is_kept(self, value: str) -> None:
        printed = print_block_string(value)
        if value[0] in " \t":
            assert printed.startswith('"""' + value[0])
        else:
            assert printed.startswith('"""\n')
