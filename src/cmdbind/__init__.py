"""cmdbind — declare command handlers, bind textual options, dispatch safely.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import cmdbind
    from cmdbind import ParameterType, command, option

    class Commands:
        @command("echo", help="Print a message", usage="echo --msg <text>",
                 params=[option("msg")])
        def echo(self, msg: str) -> None:
            print(msg)

    registry = cmdbind.CommandRegistry.from_strategy(Commands())
    dispatcher = cmdbind.Dispatcher(registry, cmdbind.ConsoleMessenger())

    dispatcher.execute_command("echo", {"msg": "hi"})   # prints "hi"
    dispatcher.execute_command("nope", {})              # command 'nope' is not bound!

    cmdbind.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from cmdbind.binding.binder import ParameterBinder
from cmdbind.convenience import CommandShell
from cmdbind.core.conversion import ConversionService, DefaultConversionService, convert
from cmdbind.core.errors import (
    CommandBindingError,
    CommandError,
    CommandExecutionError,
    CommandNotBoundError,
    ConversionError,
    DuplicateCommandError,
    UnsupportedParameterTypeError,
)
from cmdbind.core.types import HandlerDescriptor, ParameterSpec, ParameterType
from cmdbind.dispatch.dispatcher import DispatchResult, DispatchStatus, Dispatcher
from cmdbind.dispatch.invoker import invoke
from cmdbind.dispatch.messaging import ConsoleMessenger, Messenger, RecordingMessenger
from cmdbind.formatter.help import render_command_help, render_help
from cmdbind.registry.decorators import command, option, unbound
from cmdbind.registry.registry import CommandRegistry

__all__ = [
    "__version__",
    "CommandBindingError",
    "CommandError",
    "CommandExecutionError",
    "CommandNotBoundError",
    "CommandRegistry",
    "CommandShell",
    "ConsoleMessenger",
    "ConversionError",
    "ConversionService",
    "DefaultConversionService",
    "DispatchResult",
    "DispatchStatus",
    "Dispatcher",
    "DuplicateCommandError",
    "HandlerDescriptor",
    "Messenger",
    "ParameterBinder",
    "ParameterSpec",
    "ParameterType",
    "RecordingMessenger",
    "UnsupportedParameterTypeError",
    "command",
    "convert",
    "invoke",
    "option",
    "render_command_help",
    "render_help",
    "unbound",
]
