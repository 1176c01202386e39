"""Unit tests for cmdbind.core.types and cmdbind.core.errors."""
from __future__ import annotations

import dataclasses

import pytest

from cmdbind.core.errors import (
    CommandBindingError,
    CommandError,
    CommandExecutionError,
    CommandNotBoundError,
    DuplicateCommandError,
    UnsupportedParameterTypeError,
)
from cmdbind.core.types import HandlerDescriptor, ParameterSpec, ParameterType


def _noop() -> None:
    pass


# ===========================================================================
# ParameterType.lookup
# ===========================================================================


class TestParameterTypeLookup:
    def test_member_maps_to_itself(self) -> None:
        for member in ParameterType:
            assert ParameterType.lookup(member) is member

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("int32", ParameterType.INT32),
            ("INT64", ParameterType.INT64),
            ("int", ParameterType.INT32),
            ("long", ParameterType.INT64),
            ("float", ParameterType.FLOAT32),
            ("double", ParameterType.FLOAT64),
            ("char", ParameterType.CHAR),
            ("string", ParameterType.TEXT),
            ("text", ParameterType.TEXT),
        ],
    )
    def test_names_and_aliases(self, name: str, expected: ParameterType) -> None:
        assert ParameterType.lookup(name) is expected

    @pytest.mark.parametrize(
        "builtin, expected",
        [(int, ParameterType.INT64), (float, ParameterType.FLOAT64), (str, ParameterType.TEXT)],
    )
    def test_builtins(self, builtin: type, expected: ParameterType) -> None:
        assert ParameterType.lookup(builtin) is expected

    @pytest.mark.parametrize("declared", [bool, list, "boolean", None, 3, object()])
    def test_unsupported_returns_none(self, declared: object) -> None:
        assert ParameterType.lookup(declared) is None

    def test_label_is_lowercase_value(self) -> None:
        assert ParameterType.FLOAT32.label == "float32"


# ===========================================================================
# ParameterSpec / HandlerDescriptor
# ===========================================================================


class TestParameterSpec:
    def test_option_bound(self) -> None:
        assert ParameterSpec(0, ParameterType.TEXT, "msg").is_option_bound

    def test_unbound(self) -> None:
        assert not ParameterSpec(0, ParameterType.TEXT).is_option_bound

    def test_is_frozen(self) -> None:
        spec = ParameterSpec(0, ParameterType.TEXT, "msg")
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.option = "other"  # type: ignore[misc]


class TestHandlerDescriptor:
    def test_takes_no_arguments_when_no_parameters(self) -> None:
        descriptor = HandlerDescriptor("ping", "", "ping", handler=_noop)
        assert descriptor.takes_no_arguments

    def test_takes_arguments_with_parameters(self) -> None:
        descriptor = HandlerDescriptor(
            "echo", "", "echo", handler=_noop,
            parameters=(ParameterSpec(0, ParameterType.TEXT, "msg"),),
        )
        assert not descriptor.takes_no_arguments

    def test_option_keys_skip_unbound(self) -> None:
        descriptor = HandlerDescriptor(
            "x", "", "x", handler=_noop,
            parameters=(
                ParameterSpec(0, ParameterType.TEXT, "a"),
                ParameterSpec(1, ParameterType.TEXT),
                ParameterSpec(2, ParameterType.INT32, "b"),
            ),
        )
        assert descriptor.option_keys == ("a", "b")

    def test_equality_ignores_handler(self) -> None:
        first = HandlerDescriptor("x", "h", "u", handler=_noop)
        second = HandlerDescriptor("x", "h", "u", handler=lambda: None)
        assert first == second

    def test_is_frozen(self) -> None:
        descriptor = HandlerDescriptor("x", "h", "u", handler=_noop)
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.name = "y"  # type: ignore[misc]


# ===========================================================================
# Error taxonomy
# ===========================================================================


class TestErrors:
    @pytest.mark.parametrize(
        "error",
        [
            CommandNotBoundError("x"),
            UnsupportedParameterTypeError(bool),
            CommandBindingError("abc", ParameterType.INT32),
            CommandExecutionError("failed", "x"),
        ],
    )
    def test_recoverable_errors_share_base(self, error: CommandError) -> None:
        assert isinstance(error, CommandError)

    def test_not_bound_message(self) -> None:
        assert str(CommandNotBoundError("doesnotexist")) == "command 'doesnotexist' is not bound!"

    def test_not_bound_is_lookup_error(self) -> None:
        assert isinstance(CommandNotBoundError("x"), LookupError)

    def test_unsupported_type_names_class(self) -> None:
        error = UnsupportedParameterTypeError(bool)
        assert error.declared_type is bool
        assert "bool" in str(error)

    def test_binding_error_message(self) -> None:
        error = CommandBindingError("abc", ParameterType.INT32, "count")
        assert str(error) == "cannot assign 'abc' to 'int32'!"
        assert error.value == "abc"
        assert error.target is ParameterType.INT32
        assert error.option == "count"

    def test_execution_error_keeps_cause(self) -> None:
        cause = RuntimeError("boom")
        error = CommandExecutionError("failed", "x", cause)
        assert error.cause is cause
        assert error.command_name == "x"

    def test_duplicate_is_not_recoverable(self) -> None:
        error = DuplicateCommandError("twice", "A.first", "A.second")
        assert isinstance(error, ValueError)
        assert not isinstance(error, CommandError)
        assert "twice" in str(error)
        assert "A.first" in str(error) and "A.second" in str(error)
