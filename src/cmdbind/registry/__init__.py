"""Command declaration and lookup.

``decorators`` provides the ``@command`` metadata surface; ``registry``
builds the read-only name-to-handler table from decorated callables;
``loader`` imports strategy objects from ``module:attribute`` paths.
"""
from __future__ import annotations

from cmdbind.registry.decorators import (
    CommandMetadata,
    ParameterDeclaration,
    command,
    get_command_metadata,
    option,
    unbound,
)
from cmdbind.registry.loader import StrategyLoadError, load_strategy
from cmdbind.registry.registry import CommandRegistry

__all__ = [
    "CommandMetadata",
    "CommandRegistry",
    "ParameterDeclaration",
    "StrategyLoadError",
    "command",
    "get_command_metadata",
    "load_strategy",
    "option",
    "unbound",
]
