"""Plain-text help rendering from registry metadata."""
from __future__ import annotations

from cmdbind.core.types import HandlerDescriptor, ParameterType
from cmdbind.registry.registry import CommandRegistry


def render_help(registry: CommandRegistry) -> str:
    """Render an aligned listing of every command's usage and help text.

    Parameters
    ----------
    registry:
        The commands to list.

    Returns
    -------
    str
        One line per command, in name order, under an
        ``Available commands:`` heading.
    """
    descriptors = list(registry)
    if not descriptors:
        return "No commands available."

    width = max(len(d.usage) for d in descriptors)
    lines = ["Available commands:"]
    for descriptor in descriptors:
        if descriptor.help:
            lines.append(f"  {descriptor.usage.ljust(width)} - {descriptor.help}")
        else:
            lines.append(f"  {descriptor.usage}")
    return "\n".join(lines)


def render_command_help(descriptor: HandlerDescriptor) -> str:
    """Render help for a single command, including its options."""
    lines = [descriptor.name]
    if descriptor.help:
        lines.append(f"  {descriptor.help}")
    lines.append(f"usage: {descriptor.usage}")

    bound = [p for p in descriptor.parameters if p.option is not None]
    if bound:
        lines.append("options:")
        width = max(len(p.option or "") for p in bound)
        for spec in bound:
            lines.append(f"  {(spec.option or '').ljust(width)}  {_type_name(spec.type)}")
    return "\n".join(lines)


def _type_name(declared: object) -> str:
    member = ParameterType.lookup(declared)
    if member is not None:
        return member.label
    return f"{getattr(declared, '__name__', declared)} (unsupported)"
