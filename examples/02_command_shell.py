#!/usr/bin/env python3
"""Example: CommandShell — cmdbind

Drive a tiny read loop with ``CommandShell``. Each input line is
``<command> key=value ...``; splitting the line is the loop's job, not
the dispatcher's.

Usage:
    python examples/02_command_shell.py

Requirements:
    pip install cmdbind
"""
from __future__ import annotations

import shlex

from cmdbind import CommandShell, ParameterType, command, option


class Calculator:
    def __init__(self) -> None:
        self.total = 0.0

    @command("add", help="Add to the running total", usage="add value=<double>",
             params=[option("value", ParameterType.FLOAT64)])
    def add(self, value: float) -> None:
        self.total += value

    @command("show", help="Show the running total")
    def show(self) -> None:
        print(f"total = {self.total}")

    @command("reset", help="Reset the running total")
    def reset(self) -> None:
        self.total = 0.0


SCRIPT = [
    "add value=2.5",
    "add value=4",
    "show",
    "add value=four",
    "divide value=2",
    "",
    "reset",
    "show",
]


def main() -> None:
    shell = CommandShell(Calculator())
    print(shell.help())
    print()

    for line in SCRIPT:
        print(f"> {line}")
        name, *pairs = shlex.split(line) or [""]
        options = dict(pair.partition("=")[::2] for pair in pairs)
        shell.execute(name, options)


if __name__ == "__main__":
    main()
