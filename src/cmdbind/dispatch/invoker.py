"""Handler invocation.

``invoke`` calls a descriptor's handler and folds every way the call can
fail into a single ``CommandExecutionError``. The argument list is checked
against the handler's signature before the call so that a wrong argument
count is reported as such rather than as a failure inside the handler.
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Sequence

from cmdbind.core.errors import CommandExecutionError
from cmdbind.core.types import HandlerDescriptor

logger = logging.getLogger(__name__)


def invoke(descriptor: HandlerDescriptor, args: Sequence[object] = ()) -> object:
    """Call the handler of ``descriptor``.

    Parameters
    ----------
    descriptor:
        The command to run.
    args:
        Positional arguments, usually from ``ParameterBinder.bind``.
        Ignored when the descriptor declares no parameters.

    Returns
    -------
    object
        Whatever the handler returns.

    Raises
    ------
    CommandExecutionError
        If the handler is not callable, the arguments do not fit its
        signature, or the handler raises.
    """
    handler = descriptor.handler
    call_args: tuple[object, ...] = () if descriptor.takes_no_arguments else tuple(args)

    if not callable(handler):
        raise CommandExecutionError(
            f"handler for command '{descriptor.name}' is not callable!",
            descriptor.name,
        )

    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError):
        signature = None
    if signature is not None:
        try:
            signature.bind(*call_args)
        except TypeError as exc:
            raise CommandExecutionError(
                f"invalid arguments for command '{descriptor.name}'!",
                descriptor.name,
                exc,
            ) from exc

    try:
        return handler(*call_args)
    except Exception as exc:
        logger.debug("Handler for %r raised", descriptor.name, exc_info=True)
        raise CommandExecutionError(
            f"command '{descriptor.name}' failed: {_describe(exc)}",
            descriptor.name,
            exc,
        ) from exc


def _describe(exc: BaseException) -> str:
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__
