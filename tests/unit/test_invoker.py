"""Unit tests for cmdbind.dispatch.invoker — invoke."""
from __future__ import annotations

import logging

import pytest

from cmdbind.core.errors import CommandExecutionError
from cmdbind.core.types import HandlerDescriptor, ParameterSpec, ParameterType
from cmdbind.dispatch import invoke

_ONE_TEXT = (ParameterSpec(0, ParameterType.TEXT, "msg"),)


def _fail(msg: str) -> None:
    raise ValueError(f"bad message {msg}")


class TestInvoke:
    def test_zero_parameter_handler_called_without_args(self) -> None:
        descriptor = HandlerDescriptor("ping", "", "ping", handler=lambda: "pong")
        assert invoke(descriptor) == "pong"

    def test_zero_parameter_handler_ignores_args(self) -> None:
        descriptor = HandlerDescriptor("ping", "", "ping", handler=lambda: "pong")
        assert invoke(descriptor, ["ignored"]) == "pong"

    def test_positional_arguments_passed(self) -> None:
        descriptor = HandlerDescriptor("echo", "", "echo", handler=lambda msg: msg * 2, parameters=_ONE_TEXT)
        assert invoke(descriptor, ["ab"]) == "abab"

    def test_wrong_argument_count(self) -> None:
        descriptor = HandlerDescriptor("echo", "", "echo", handler=lambda msg: msg, parameters=_ONE_TEXT)
        with pytest.raises(CommandExecutionError, match="invalid arguments for command 'echo'!") as info:
            invoke(descriptor, [])
        assert isinstance(info.value.cause, TypeError)

    def test_handler_exception_wrapped(self) -> None:
        descriptor = HandlerDescriptor("fail", "", "fail", handler=_fail, parameters=_ONE_TEXT)
        with pytest.raises(CommandExecutionError) as info:
            invoke(descriptor, ["x"])
        error = info.value
        assert str(error) == "command 'fail' failed: ValueError: bad message x"
        assert error.command_name == "fail"
        assert isinstance(error.cause, ValueError)
        assert error.__cause__ is error.cause

    def test_type_error_inside_handler_is_a_failure(self) -> None:
        def handler(msg: str) -> None:
            raise TypeError("inner")

        descriptor = HandlerDescriptor("t", "", "t", handler=handler, parameters=_ONE_TEXT)
        with pytest.raises(CommandExecutionError, match="command 't' failed: TypeError: inner"):
            invoke(descriptor, ["x"])

    def test_exception_without_message(self) -> None:
        def handler() -> None:
            raise KeyError

        descriptor = HandlerDescriptor("k", "", "k", handler=handler)
        with pytest.raises(CommandExecutionError, match="command 'k' failed: KeyError$"):
            invoke(descriptor)

    def test_non_callable_handler(self) -> None:
        descriptor = HandlerDescriptor("n", "", "n", handler=None)  # type: ignore[arg-type]
        with pytest.raises(CommandExecutionError, match="not callable"):
            invoke(descriptor)

    def test_builtin_handler_invoked(self) -> None:
        descriptor = HandlerDescriptor("len", "", "len", handler=len, parameters=_ONE_TEXT)
        assert invoke(descriptor, ["abc"]) == 3

    def test_handler_traceback_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        descriptor = HandlerDescriptor("fail", "", "fail", handler=_fail, parameters=_ONE_TEXT)
        with caplog.at_level(logging.DEBUG, logger="cmdbind.dispatch.invoker"):
            with pytest.raises(CommandExecutionError):
                invoke(descriptor, ["x"])
        assert any(record.exc_info for record in caplog.records)

    def test_keyboard_interrupt_not_wrapped(self) -> None:
        def handler() -> None:
            raise KeyboardInterrupt

        descriptor = HandlerDescriptor("k", "", "k", handler=handler)
        with pytest.raises(KeyboardInterrupt):
            invoke(descriptor)
