"""Tests for ContextVar-based print configuration."""

import pytest

from plume import print_ast
from plume.config import (
    PrintConfig,
    get_print_config,
    print_config_context,
    reset_print_config,
    set_print_config,
)
from plume.errors import PrintError
from plume.nodes import OperationDefinition, SelectionSet


@pytest.fixture(autouse=True)
def _reset_config():  # type: ignore[no-untyped-def]
    yield
    reset_print_config()


def _empty_operation() -> OperationDefinition:
    return OperationDefinition(selection_set=SelectionSet())


class TestPrintConfig:
    def test_defaults(self) -> None:
        config = PrintConfig()
        assert config.strict is True
        assert config.log_unknown_kinds is True

    def test_frozen(self) -> None:
        config = PrintConfig()
        with pytest.raises(AttributeError):
            config.strict = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = PrintConfig.from_dict({"strict": False, "unknown_key": "ignored"})
        assert config == PrintConfig(strict=False)

    def test_from_dict_empty(self) -> None:
        assert PrintConfig.from_dict({}) == PrintConfig()


class TestConfigContext:
    def test_default_config(self) -> None:
        assert get_print_config() == PrintConfig()

    def test_set_and_reset(self) -> None:
        set_print_config(PrintConfig(strict=False))
        assert get_print_config().strict is False
        reset_print_config()
        assert get_print_config().strict is True

    def test_context_manager_restores_previous(self) -> None:
        set_print_config(PrintConfig(log_unknown_kinds=False))
        with print_config_context(PrintConfig(strict=False)):
            assert get_print_config() == PrintConfig(strict=False)
        assert get_print_config() == PrintConfig(log_unknown_kinds=False)

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with print_config_context(PrintConfig(strict=False)):
                raise RuntimeError("boom")
        assert get_print_config().strict is True


class TestConfigAffectsPrinting:
    def test_strict_rejects_empty_operation(self) -> None:
        with pytest.raises(PrintError):
            print_ast(_empty_operation())

    def test_lenient_context_prints_empty_operation(self) -> None:
        with print_config_context(PrintConfig(strict=False)):
            assert print_ast(_empty_operation()) == ""

    def test_explicit_config_wins_for_one_call(self) -> None:
        assert print_ast(_empty_operation(), config=PrintConfig(strict=False)) == ""
        with pytest.raises(PrintError):
            print_ast(_empty_operation())

    def test_lenient_operation_without_selection_set(self) -> None:
        op = OperationDefinition(selection_set=None)  # type: ignore[arg-type]
        assert print_ast(op, config=PrintConfig(strict=False)) == ""
