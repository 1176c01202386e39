"""Import strategy objects from ``module:attribute`` paths."""
from __future__ import annotations

import importlib
import logging

logger = logging.getLogger(__name__)


class StrategyLoadError(ImportError):
    """Raised when a strategy path cannot be imported or resolved."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load strategy {path!r}: {reason}")


def load_strategy(path: str) -> object:
    """Import the strategy object named by ``path``.

    Parameters
    ----------
    path:
        ``package.module`` to use the module itself, or
        ``package.module:attribute`` (dotted attributes allowed) to use an
        object inside it. A class is instantiated with no arguments.

    Returns
    -------
    object
        The strategy object.

    Raises
    ------
    StrategyLoadError
        If the module cannot be imported, the attribute does not exist, or
        the class cannot be instantiated without arguments.
    """
    module_name, _, attribute = path.partition(":")
    if not module_name:
        raise StrategyLoadError(path, "missing module name")

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise StrategyLoadError(path, str(exc)) from exc

    for part in filter(None, attribute.split(".")):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise StrategyLoadError(path, f"no attribute {part!r}") from None

    if isinstance(target, type):
        try:
            target = target()
        except TypeError as exc:
            raise StrategyLoadError(path, f"cannot instantiate {target.__name__}: {exc}") from exc

    logger.debug("Loaded strategy %r from %r", target, path)
    return target
