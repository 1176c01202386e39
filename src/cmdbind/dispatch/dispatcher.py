"""Command dispatcher: the boundary between a shell loop and its handlers.

``Dispatcher.dispatch`` resolves, binds and invokes one command and returns
a ``DispatchResult`` describing what happened. ``Dispatcher.execute_command``
does the same and turns the result into messages for the user. Neither
lets a ``CommandError`` escape, so one failing command can never take the
surrounding loop down with it.

Messages reported by ``execute_command``:

==================  ====================================================
Outcome             Messages
==================  ====================================================
empty name          none
executed            none
not bound           ``command '<name>' is not bound!``
failed              ``could not execute command '<name>' [<detail>]``
                    followed by ``usage: <usage>``
==================  ====================================================
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto

from cmdbind.binding.binder import ParameterBinder
from cmdbind.core.conversion import ConversionService
from cmdbind.core.errors import CommandError, CommandNotBoundError
from cmdbind.dispatch.invoker import invoke
from cmdbind.dispatch.messaging import Messenger
from cmdbind.registry.registry import CommandRegistry

logger = logging.getLogger(__name__)


class DispatchStatus(Enum):
    """How a single dispatch ended."""

    SKIPPED = auto()
    EXECUTED = auto()
    NOT_BOUND = auto()
    FAILED = auto()


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of one dispatch.

    Parameters
    ----------
    status:
        How the dispatch ended.
    command:
        The requested command name.
    value:
        The handler's return value when ``status`` is ``EXECUTED``.
    error:
        The failure when ``status`` is ``NOT_BOUND`` or ``FAILED``.
    usage:
        Usage text of the resolved command, if it was resolved.
    """

    status: DispatchStatus
    command: str
    value: object = None
    error: CommandError | None = field(default=None)
    usage: str | None = None

    @property
    def ok(self) -> bool:
        """Return True unless the command was unknown or failed."""
        return self.status in (DispatchStatus.SKIPPED, DispatchStatus.EXECUTED)

    def messages(self) -> list[str]:
        """Return the user-facing messages for this outcome."""
        if self.status is DispatchStatus.NOT_BOUND:
            return [str(self.error)]
        if self.status is DispatchStatus.FAILED:
            return [
                f"could not execute command '{self.command}' [{self.error}]",
                f"usage: {self.usage}",
            ]
        return []


class Dispatcher:
    """Route command names to handlers from a ``CommandRegistry``.

    Parameters
    ----------
    registry:
        The command table.
    messenger:
        Receives the messages produced by ``execute_command``.
    converter:
        Conversion service for option values. Defaults to
        ``DefaultConversionService``.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        messenger: Messenger,
        converter: ConversionService | None = None,
    ) -> None:
        self.registry = registry
        self.messenger = messenger
        self.binder = ParameterBinder(converter)

    def dispatch(
        self,
        name: str,
        options: Mapping[str, str] | None = None,
    ) -> DispatchResult:
        """Run ``name`` with ``options`` and describe the outcome.

        Parameters
        ----------
        name:
            The command name. An empty name is skipped.
        options:
            Option key to text value. ``None`` is treated as empty.

        Returns
        -------
        DispatchResult
            Never raises for resolution, binding or invocation failures.
        """
        if not name:
            return DispatchResult(DispatchStatus.SKIPPED, name)

        try:
            descriptor = self.registry.resolve(name)
        except CommandNotBoundError as exc:
            logger.debug("Unknown command %r", name)
            return DispatchResult(DispatchStatus.NOT_BOUND, name, error=exc)

        logger.debug("Dispatching %r with options %s", name, sorted(options or ()))
        try:
            if descriptor.takes_no_arguments:
                value = invoke(descriptor)
            else:
                value = invoke(descriptor, self.binder.bind(descriptor, options))
        except CommandError as exc:
            logger.warning("Command %r failed: %s", name, exc)
            return DispatchResult(
                DispatchStatus.FAILED, name, error=exc, usage=descriptor.usage
            )

        return DispatchResult(
            DispatchStatus.EXECUTED, name, value=value, usage=descriptor.usage
        )

    def execute_command(
        self,
        name: str,
        options: Mapping[str, str] | None = None,
    ) -> None:
        """Run ``name`` with ``options``, reporting failures to the messenger."""
        self.report(self.dispatch(name, options))

    def report(self, result: DispatchResult) -> None:
        """Send the messages for ``result`` to the messenger."""
        for message in result.messages():
            self.messenger.report(message)
