"""Text-to-value conversion for option values.

Option values always arrive as text. ``convert`` turns one value into the
Python value for a ``ParameterType``:

    - ``INT32`` / ``INT64``: optional sign and ASCII digits, range-checked
    - ``FLOAT32``: parsed, then rounded to single precision
    - ``FLOAT64``: parsed as a Python ``float``
    - ``CHAR``: exactly one character
    - ``TEXT``: returned unchanged

Whitespace is not stripped; ``" 3"`` is not an integer. Infinity and NaN are
accepted only when spelled out (``inf``, ``-infinity``, ``nan``); a literal
such as ``1e400`` that overflows is rejected.
"""
from __future__ import annotations

import math
import re
import struct
from typing import Final, Protocol

from cmdbind.core.errors import ConversionError
from cmdbind.core.types import ParameterType

_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

_INT_BOUNDS: Final[dict[ParameterType, tuple[int, int]]] = {
    ParameterType.INT32: (-(2**31), 2**31 - 1),
    ParameterType.INT64: (-(2**63), 2**63 - 1),
}

_MAX_INT_DIGITS: Final = len(str(2**63))

_NON_FINITE: Final[frozenset[str]] = frozenset({"inf", "infinity", "nan"})


class ConversionService(Protocol):
    """Anything that can turn option text into a typed value."""

    def convert(self, value: str, target: ParameterType) -> object: ...


class DefaultConversionService:
    """``ConversionService`` backed by the module-level ``convert``."""

    def convert(self, value: str, target: ParameterType) -> object:
        return convert(value, target)

    def __repr__(self) -> str:
        return "DefaultConversionService()"


def convert(value: str, target: ParameterType) -> object:
    """Convert ``value`` to the Python value for ``target``.

    Parameters
    ----------
    value:
        The option text.
    target:
        The type to convert to.

    Returns
    -------
    object
        An ``int``, ``float`` or ``str`` depending on ``target``.

    Raises
    ------
    ConversionError
        If ``value`` is not a valid literal for ``target``.
    """
    if target in _INT_BOUNDS:
        return _to_integer(value, target)
    if target is ParameterType.FLOAT32:
        return _to_float32(value)
    if target is ParameterType.FLOAT64:
        return _to_float(value, target)
    if target is ParameterType.CHAR:
        if len(value) != 1:
            raise ConversionError(value, target, "expected exactly one character")
        return value
    if target is ParameterType.TEXT:
        return value
    raise ConversionError(value, target, "no conversion available")


def _to_integer(value: str, target: ParameterType) -> int:
    if not _INTEGER.fullmatch(value):
        raise ConversionError(value, target, "not an integer")
    low, high = _INT_BOUNDS[target]
    # int() refuses very long digit strings; nothing that long is in range.
    if len(value.lstrip("+-").lstrip("0")) > _MAX_INT_DIGITS:
        raise ConversionError(value, target, f"out of range [{low}, {high}]")
    number = int(value)
    if not low <= number <= high:
        raise ConversionError(value, target, f"out of range [{low}, {high}]")
    return number


def _to_float(value: str, target: ParameterType) -> float:
    if value != value.strip() or "_" in value:
        raise ConversionError(value, target, "not a number")
    try:
        number = float(value)
    except ValueError:
        raise ConversionError(value, target, "not a number") from None
    if math.isinf(number) and value.lstrip("+-").lower() not in _NON_FINITE:
        raise ConversionError(value, target, "out of range")
    return number


def _to_float32(value: str) -> float:
    number = _to_float(value, ParameterType.FLOAT32)
    if math.isnan(number) or math.isinf(number):
        return number
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        raise ConversionError(
            value, ParameterType.FLOAT32, "out of single-precision range"
        ) from None
