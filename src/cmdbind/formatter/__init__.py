"""Help text rendering for registered commands."""
from __future__ import annotations

from cmdbind.formatter.help import render_command_help, render_help

__all__ = ["render_command_help", "render_help"]
