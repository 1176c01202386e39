"""Command data model.

A ``HandlerDescriptor`` describes one dispatchable operation: its name,
help and usage text, the ordered ``ParameterSpec`` list, and the callable
that implements it. Descriptors are frozen; a registry creates them once
and never changes them.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ParameterType(Enum):
    """The closed set of value types an option can be converted to."""

    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    CHAR = "char"
    TEXT = "text"

    @property
    def label(self) -> str:
        """Lowercase name used in messages and help output."""
        return self.value

    @classmethod
    def lookup(cls, declared: object) -> ParameterType | None:
        """Map a declared type to a supported member.

        Parameters
        ----------
        declared:
            A ``ParameterType`` member, a type name such as ``"int32"`` or
            ``"double"``, or one of the builtins ``int``, ``float`` and
            ``str``.

        Returns
        -------
        ParameterType | None
            The matching member, or ``None`` if ``declared`` is not supported.
        """
        if isinstance(declared, ParameterType):
            return declared
        if isinstance(declared, str):
            return _NAME_ALIASES.get(declared.lower())
        if isinstance(declared, type):
            return _BUILTIN_ALIASES.get(declared)
        return None


_NAME_ALIASES: dict[str, ParameterType] = {
    **{member.value: member for member in ParameterType},
    "int": ParameterType.INT32,
    "long": ParameterType.INT64,
    "float": ParameterType.FLOAT32,
    "double": ParameterType.FLOAT64,
    "string": ParameterType.TEXT,
    "str": ParameterType.TEXT,
}

# bool is a subclass of int but is intentionally absent.
_BUILTIN_ALIASES: dict[type, ParameterType] = {
    int: ParameterType.INT64,
    float: ParameterType.FLOAT64,
    str: ParameterType.TEXT,
}


@dataclass(frozen=True)
class ParameterSpec:
    """One handler parameter.

    Parameters
    ----------
    position:
        0-based position of the parameter in the handler's signature.
    type:
        The declared value type. Usually a ``ParameterType``; anything
        ``ParameterType.lookup`` does not recognise is rejected at bind time.
    option:
        Key in the options map that supplies this parameter, or ``None``
        when the parameter cannot be bound from options.
    """

    position: int
    type: object
    option: str | None = None

    @property
    def is_option_bound(self) -> bool:
        """Return True if this parameter is supplied from the options map."""
        return self.option is not None


@dataclass(frozen=True)
class HandlerDescriptor:
    """Metadata and callable for one command.

    Parameters
    ----------
    name:
        Unique command name.
    help:
        One-line description of what the command does.
    usage:
        Usage string shown when the command fails.
    handler:
        The callable invoked when the command is dispatched.
    parameters:
        Parameter specifications in declaration order.
    """

    name: str
    help: str
    usage: str
    handler: Callable[..., Any] = field(compare=False, repr=False)
    parameters: tuple[ParameterSpec, ...] = field(default_factory=tuple)

    @property
    def takes_no_arguments(self) -> bool:
        """Return True if the handler declares no parameters."""
        return not self.parameters

    @property
    def option_keys(self) -> tuple[str, ...]:
        """Option keys of all option-bound parameters, in declaration order."""
        return tuple(p.option for p in self.parameters if p.option is not None)
