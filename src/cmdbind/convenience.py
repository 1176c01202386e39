"""Convenience API for cmdbind — wire a strategy object into a shell in one line.

Example
-------
::

    from cmdbind import CommandShell

    shell = CommandShell(MyCommands())
    shell.execute("echo", msg="hi")
    print(shell.help())

"""
from __future__ import annotations

from collections.abc import Mapping
from types import ModuleType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdbind.core.conversion import ConversionService
    from cmdbind.dispatch.dispatcher import DispatchResult
    from cmdbind.dispatch.messaging import Messenger


class CommandShell:
    """Registry, binder and dispatcher for one strategy object.

    Parameters
    ----------
    strategy:
        Object (instance, class or module) exposing ``@command`` handlers.
    messenger:
        Where failure messages go. Defaults to a ``ConsoleMessenger``.
    converter:
        Optional replacement conversion service.
    """

    def __init__(
        self,
        strategy: object,
        messenger: "Messenger | None" = None,
        converter: "ConversionService | None" = None,
    ) -> None:
        from cmdbind.dispatch.dispatcher import Dispatcher
        from cmdbind.dispatch.messaging import ConsoleMessenger
        from cmdbind.registry.registry import CommandRegistry

        self._strategy = strategy
        self.registry = CommandRegistry.from_strategy(strategy)
        self.dispatcher = Dispatcher(
            self.registry,
            messenger if messenger is not None else ConsoleMessenger(),
            converter,
        )

    @property
    def commands(self) -> list[str]:
        """Names of all available commands."""
        return self.registry.list_commands()

    def execute(
        self,
        name: str,
        options: Mapping[str, str] | None = None,
        **kwargs: str,
    ) -> "DispatchResult":
        """Run a command and report failures to the messenger.

        Options may be passed as a mapping, as keyword arguments, or both;
        keyword arguments win on conflicts.

        Returns
        -------
        DispatchResult
            The outcome, after its messages have been reported.
        """
        merged = {**(options or {}), **kwargs}
        result = self.dispatcher.dispatch(name, merged)
        self.dispatcher.report(result)
        return result

    def help(self, name: str | None = None) -> str:
        """Return the help listing, or help for one command."""
        from cmdbind.formatter.help import render_command_help, render_help

        if name is None:
            return render_help(self.registry)
        return render_command_help(self.registry.resolve(name))

    def __repr__(self) -> str:
        strategy = self._strategy
        if isinstance(strategy, (type, ModuleType)):
            label = strategy.__name__
        else:
            label = type(strategy).__name__
        return f"CommandShell(strategy={label}, commands={self.commands})"
