"""Concurrent printing with a shared Printer and with print_ast()."""

from concurrent.futures import ThreadPoolExecutor, as_completed

import pytest

from plume import print_ast
from plume.nodes import Document, Field, Name, OperationDefinition, SelectionSet
from plume.printer import Printer
from plume.visitor import visit


def _doc(index: int) -> Document:
    fields = tuple(Field(name=Name(value=f"f{index}_{i}")) for i in range(index % 5 + 1))
    return Document(
        definitions=(
            OperationDefinition(
                name=Name(value=f"Q{index}"), selection_set=SelectionSet(selections=fields)
            ),
        )
    )


class TestConcurrentPrinting:
    def test_shared_printer_instance(self) -> None:
        docs = [_doc(i) for i in range(40)]
        expected = [print_ast(doc) for doc in docs]
        printer = Printer()

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = {pool.submit(visit, doc, printer): i for i, doc in enumerate(docs)}
            results = {futures[f]: f.result() for f in as_completed(futures)}

        assert [results[i] for i in range(len(docs))] == expected

    def test_print_ast_from_many_threads(self) -> None:
        doc = _doc(3)
        expected = print_ast(doc)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: print_ast(doc), range(50)))

        assert results == [expected] * 50
        assert expected == "query Q3 {\n  f3_0\n  f3_1\n  f3_2\n  f3_3\n}\n"


class TestPrinterState:
    def test_printer_holds_no_instance_dict(self) -> None:
        printer = Printer()
        assert not hasattr(printer, "__dict__")
        with pytest.raises(AttributeError):
            printer.cache = {}  # type: ignore[attr-defined]
