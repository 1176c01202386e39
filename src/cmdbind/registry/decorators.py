"""Declarative command metadata.

``@command`` marks a function or method as a command handler. It only
attaches a ``CommandMetadata`` record to the callable; nothing is
registered until a ``CommandRegistry`` is built from the callable (or
from the object that owns it).

Example
-------
::

    from cmdbind import ParameterType, command, option

    class Commands:
        @command(
            "repeat",
            help="Print a message several times",
            usage="repeat --msg <text> --count <n>",
            params=[option("msg"), option("count", ParameterType.INT32)],
        )
        def repeat(self, msg: str, count: int) -> None:
            for _ in range(count):
                print(msg)
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from cmdbind.core.types import ParameterSpec, ParameterType

F = TypeVar("F", bound=Callable[..., Any])

METADATA_ATTRIBUTE = "__cmdbind_command__"


@dataclass(frozen=True)
class ParameterDeclaration:
    """A parameter as written in ``@command(params=...)``, before it has a position."""

    type: object
    option: str | None = None

    def at(self, position: int) -> ParameterSpec:
        """Return the ``ParameterSpec`` for this declaration at ``position``."""
        return ParameterSpec(position=position, type=self.type, option=self.option)


@dataclass(frozen=True)
class CommandMetadata:
    """Everything ``@command`` records about a handler."""

    name: str
    help: str
    usage: str
    parameters: tuple[ParameterSpec, ...]


def option(key: str, type: object = ParameterType.TEXT) -> ParameterDeclaration:  # noqa: A002
    """Declare a parameter supplied by the option ``key``."""
    if not key:
        raise ValueError("Option key must be a non-empty string.")
    return ParameterDeclaration(type=type, option=key)


def unbound(type: object = ParameterType.TEXT) -> ParameterDeclaration:  # noqa: A002
    """Declare a parameter that cannot be supplied from options."""
    return ParameterDeclaration(type=type, option=None)


def command(
    name: str,
    help: str = "",  # noqa: A002
    usage: str = "",
    params: Iterable[ParameterDeclaration] = (),
) -> Callable[[F], F]:
    """Return a decorator that marks a callable as the handler for ``name``.

    Parameters
    ----------
    name:
        The command name. Must be non-empty.
    help:
        One-line description shown in help listings.
    usage:
        Usage text shown after a failed invocation. Defaults to ``name``.
    params:
        Parameter declarations in the order the handler takes them.

    Returns
    -------
    Callable[[F], F]
        A decorator that returns the callable unchanged apart from the
        attached metadata.

    Raises
    ------
    ValueError
        If ``name`` is empty.
    """
    if not name:
        raise ValueError("Command name must be a non-empty string.")

    metadata = CommandMetadata(
        name=name,
        help=help,
        usage=usage or name,
        parameters=tuple(decl.at(index) for index, decl in enumerate(params)),
    )

    def decorator(func: F) -> F:
        setattr(func, METADATA_ATTRIBUTE, metadata)
        return func

    return decorator


def get_command_metadata(obj: object) -> CommandMetadata | None:
    """Return the metadata attached by ``@command``, or ``None``.

    ``staticmethod`` and ``classmethod`` wrappers are looked through.
    """
    target = getattr(obj, "__func__", obj)
    metadata = getattr(target, METADATA_ATTRIBUTE, None)
    return metadata if isinstance(metadata, CommandMetadata) else None
