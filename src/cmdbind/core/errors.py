"""Error types raised while resolving, binding and invoking commands.

Everything the dispatcher recovers from derives from ``CommandError``.
``DuplicateCommandError`` is deliberately outside that hierarchy: it is
raised while a registry is being built, before any dispatch can happen,
and should stop the program rather than be turned into a message.
"""
from __future__ import annotations


class CommandError(Exception):
    """Base class for failures recovered at the dispatcher boundary."""


class CommandNotBoundError(CommandError, LookupError):
    """Raised when no handler is registered under a command name.

    Parameters
    ----------
    command_name:
        The name that was looked up.
    """

    def __init__(self, command_name: str) -> None:
        self.command_name = command_name
        super().__init__(f"command '{command_name}' is not bound!")


class UnsupportedParameterTypeError(CommandError):
    """Raised when a handler declares a parameter type outside the supported set.

    Parameters
    ----------
    declared_type:
        The offending declared type, exactly as it appears on the
        parameter specification.
    """

    def __init__(self, declared_type: object) -> None:
        self.declared_type = declared_type
        super().__init__(
            f"unsupported parameter type '{_type_label(declared_type)}'"
        )


class CommandBindingError(CommandError):
    """Raised when an option value cannot be converted to its declared type.

    Parameters
    ----------
    value:
        The text value supplied in the options map.
    target:
        The declared type the value had to be converted to.
    option:
        The option key the value was supplied under, if known.
    """

    def __init__(self, value: str, target: object, option: str | None = None) -> None:
        self.value = value
        self.target = target
        self.option = option
        super().__init__(f"cannot assign '{value}' to '{_type_label(target)}'!")


class CommandExecutionError(CommandError):
    """Raised when invoking a handler fails for any reason.

    Parameters
    ----------
    message:
        Human-readable description of the failure.
    command_name:
        Name of the command whose handler failed.
    cause:
        The original exception, if there was one.
    """

    def __init__(
        self,
        message: str,
        command_name: str,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.command_name = command_name
        self.cause = cause


class DuplicateCommandError(ValueError):
    """Raised when two handlers are declared under the same command name."""

    def __init__(self, command_name: str, existing: str, duplicate: str) -> None:
        self.command_name = command_name
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Command {command_name!r} is declared by both {existing} and {duplicate}. "
            "Command names must be unique within a registry."
        )


class ConversionError(ValueError):
    """Raised by the conversion service when a text value does not parse."""

    def __init__(self, value: str, target: object, reason: str = "") -> None:
        self.value = value
        self.target = target
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"cannot convert {value!r} to {_type_label(target)}{detail}")


def _type_label(declared: object) -> str:
    # ParameterType members render as their lowercase name, classes as their
    # __name__, anything else through str().
    label = getattr(declared, "label", None)
    if isinstance(label, str):
        return label
    if isinstance(declared, type):
        return declared.__name__
    return str(declared)
