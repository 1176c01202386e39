"""Messaging collaborators.

The dispatcher never prints; it hands user-facing text to a ``Messenger``.
"""
from __future__ import annotations

from typing import Protocol

from rich.console import Console


class Messenger(Protocol):
    """Receives user-visible messages from the dispatcher."""

    def report(self, message: str) -> None: ...


class ConsoleMessenger:
    """Print messages to a Rich console.

    Markup and highlighting are disabled: messages contain literal square
    brackets that Rich would otherwise parse as style tags.

    Parameters
    ----------
    console:
        Console to print to. Defaults to a stderr console.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console(stderr=True)

    def report(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)


class RecordingMessenger:
    """Collect messages in memory, in the order they were reported."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        """Forget all recorded messages."""
        self.messages.clear()

    def __len__(self) -> int:
        return len(self.messages)

    def __repr__(self) -> str:
        return f"RecordingMessenger(messages={self.messages!r})"
