"""Core domain types for cmdbind.

Holds the command data model, the error taxonomy and the text-to-value
conversion service. Submodules in core/ should not import from registry/,
binding/, dispatch/ or cli/.
"""
from __future__ import annotations

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

__all__ = [
    "CommandBindingError",
    "CommandError",
    "CommandExecutionError",
    "CommandNotBoundError",
    "ConversionError",
    "ConversionService",
    "DefaultConversionService",
    "DuplicateCommandError",
    "HandlerDescriptor",
    "ParameterSpec",
    "ParameterType",
    "UnsupportedParameterTypeError",
    "convert",
]
