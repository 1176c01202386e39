"""Command registry for cmdbind.

A ``CommandRegistry`` maps command names to ``HandlerDescriptor`` objects.
The whole table is built in the constructor and is read-only afterwards,
so lookups never race with a lazy first-time scan.

Example
-------
Build a registry from a strategy object whose methods carry ``@command``::

    from cmdbind.registry import CommandRegistry

    registry = CommandRegistry.from_strategy(MyCommands())
    descriptor = registry.resolve("echo")

Or from plain decorated functions::

    registry = CommandRegistry.from_functions(echo, repeat)
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType, ModuleType
from typing import Any

from cmdbind.core.errors import CommandNotBoundError, DuplicateCommandError
from cmdbind.core.types import HandlerDescriptor
from cmdbind.registry.decorators import get_command_metadata

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Read-only table of command handlers keyed by command name.

    Parameters
    ----------
    descriptors:
        The descriptors to register. Names must be unique.

    Raises
    ------
    DuplicateCommandError
        If two descriptors share a name.
    """

    def __init__(self, descriptors: Iterable[HandlerDescriptor] = ()) -> None:
        table: dict[str, HandlerDescriptor] = {}
        for descriptor in descriptors:
            existing = table.get(descriptor.name)
            if existing is not None:
                raise DuplicateCommandError(
                    descriptor.name,
                    _describe_handler(existing.handler),
                    _describe_handler(descriptor.handler),
                )
            table[descriptor.name] = descriptor
            logger.debug(
                "Registered command %r -> %s",
                descriptor.name,
                _describe_handler(descriptor.handler),
            )
        self._table = MappingProxyType(table)

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_strategy(cls, strategy: object) -> CommandRegistry:
        """Build a registry from every ``@command`` callable on ``strategy``.

        ``strategy`` may be an instance, a class or a module. A class is
        instantiated with no arguments first, so its handlers are bound
        methods. For a module, only callables defined in that module are
        registered; handlers it merely imports are skipped. Attributes are
        scanned in sorted name order and looked up statically, so properties
        are never evaluated.

        Parameters
        ----------
        strategy:
            The object exposing the command handlers.

        Returns
        -------
        CommandRegistry
            A registry holding one descriptor per decorated callable.

        Raises
        ------
        TypeError
            If ``strategy`` is a class that cannot be built without arguments.
        """
        if isinstance(strategy, type):
            strategy = strategy()
        module_name = strategy.__name__ if isinstance(strategy, ModuleType) else None
        descriptors: list[HandlerDescriptor] = []
        for attribute in sorted(dir(strategy)):
            try:
                raw = inspect.getattr_static(strategy, attribute)
            except AttributeError:
                continue
            metadata = get_command_metadata(raw)
            if metadata is None:
                continue
            if module_name is not None and getattr(raw, "__module__", None) != module_name:
                logger.debug("Skipping %r imported into %s", metadata.name, module_name)
                continue
            descriptors.append(
                HandlerDescriptor(
                    name=metadata.name,
                    help=metadata.help,
                    usage=metadata.usage,
                    handler=getattr(strategy, attribute),
                    parameters=metadata.parameters,
                )
            )
        if not descriptors:
            logger.warning("No commands found on %r", strategy)
        return cls(descriptors)

    @classmethod
    def from_functions(cls, *functions: Callable[..., Any]) -> CommandRegistry:
        """Build a registry from ``@command``-decorated functions.

        Raises
        ------
        TypeError
            If one of ``functions`` carries no command metadata.
        """
        descriptors: list[HandlerDescriptor] = []
        for func in functions:
            metadata = get_command_metadata(func)
            if metadata is None:
                raise TypeError(
                    f"Cannot register {func!r}: it is not decorated with @command."
                )
            descriptors.append(
                HandlerDescriptor(
                    name=metadata.name,
                    help=metadata.help,
                    usage=metadata.usage,
                    handler=func,
                    parameters=metadata.parameters,
                )
            )
        return cls(descriptors)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, name: str) -> HandlerDescriptor:
        """Return the descriptor registered under ``name``.

        Raises
        ------
        CommandNotBoundError
            If no command is registered under ``name``.
        """
        try:
            return self._table[name]
        except KeyError:
            raise CommandNotBoundError(name) from None

    def get(self, name: str) -> HandlerDescriptor | None:
        """Return the descriptor for ``name``, or ``None``."""
        return self._table.get(name)

    def list_commands(self) -> list[str]:
        """Return all command names in alphabetical order."""
        return sorted(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[HandlerDescriptor]:
        """Iterate over descriptors in command-name order."""
        return (self._table[name] for name in self.list_commands())

    def __repr__(self) -> str:
        return f"CommandRegistry(commands={self.list_commands()})"


def _describe_handler(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
