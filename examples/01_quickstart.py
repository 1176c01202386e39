#!/usr/bin/env python3
"""Example: Quickstart — cmdbind

Declare two commands on a strategy object, dispatch them with textual
options, and watch failures turn into messages instead of exceptions.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install cmdbind
"""
from __future__ import annotations

import cmdbind
from cmdbind import ParameterType, command, option


class Commands:
    @command("echo", help="Print a message", usage="echo --msg <text>", params=[option("msg")])
    def echo(self, msg: str) -> None:
        print(msg)

    @command(
        "repeat",
        help="Print a message several times",
        usage="repeat --msg <text> --count <n>",
        params=[option("msg"), option("count", ParameterType.INT32)],
    )
    def repeat(self, msg: str, count: int) -> None:
        for _ in range(count):
            print(msg)


def main() -> None:
    print(f"cmdbind version: {cmdbind.__version__}")

    registry = cmdbind.CommandRegistry.from_strategy(Commands())
    dispatcher = cmdbind.Dispatcher(registry, cmdbind.ConsoleMessenger())

    # Step 1: a successful dispatch
    dispatcher.execute_command("echo", {"msg": "hello"})

    # Step 2: options are converted to the declared types
    dispatcher.execute_command("repeat", {"msg": "hi", "count": "2"})

    # Step 3: failures are reported, never raised
    dispatcher.execute_command("repeat", {"msg": "hi", "count": "lots"})
    dispatcher.execute_command("unknown", {})

    # Step 4: the same outcome as a value
    result = dispatcher.dispatch("repeat", {"count": "nope"})
    print(f"status={result.status.name} ok={result.ok}")


if __name__ == "__main__":
    main()
