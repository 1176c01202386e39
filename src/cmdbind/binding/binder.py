"""Binding of option values to handler parameters.

The binder walks a descriptor's parameters in declaration order and builds
the positional argument list for the handler. Parameters without an option
key, and parameters whose key is missing from the options map, are skipped,
so the list can be shorter than the parameter count.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

from cmdbind.core.conversion import ConversionService, DefaultConversionService
from cmdbind.core.errors import (
    CommandBindingError,
    ConversionError,
    UnsupportedParameterTypeError,
)
from cmdbind.core.types import HandlerDescriptor, ParameterType

logger = logging.getLogger(__name__)


class ParameterBinder:
    """Turns an options map into a handler's positional arguments.

    Parameters
    ----------
    converter:
        Service used to convert each option value. Defaults to
        ``DefaultConversionService``.
    """

    def __init__(self, converter: ConversionService | None = None) -> None:
        self._converter = converter if converter is not None else DefaultConversionService()

    @property
    def converter(self) -> ConversionService:
        """The conversion service in use."""
        return self._converter

    def bind(
        self,
        descriptor: HandlerDescriptor,
        options: Mapping[str, str] | None,
    ) -> list[object]:
        """Build the argument list for ``descriptor`` from ``options``.

        Parameters
        ----------
        descriptor:
            The command whose parameters are bound.
        options:
            Option key to text value. ``None`` is treated as empty.

        Returns
        -------
        list[object]
            Converted values for every option-bound parameter whose key is
            present, in declaration order.

        Raises
        ------
        UnsupportedParameterTypeError
            If a parameter to be bound declares a type outside
            ``ParameterType``.
        CommandBindingError
            If an option value cannot be converted. Binding stops at the
            first such value.
        """
        if descriptor.takes_no_arguments or not options:
            return []

        arguments: list[object] = []
        for spec in descriptor.parameters:
            if spec.option is None or spec.option not in options:
                continue
            target = ParameterType.lookup(spec.type)
            if target is None:
                raise UnsupportedParameterTypeError(spec.type)
            value = options[spec.option]
            try:
                arguments.append(self._converter.convert(value, target))
            except ConversionError as exc:
                logger.debug(
                    "Option %r of command %r rejected: %s",
                    spec.option,
                    descriptor.name,
                    exc,
                )
                raise CommandBindingError(value, target, spec.option) from exc

        return arguments
