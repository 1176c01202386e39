"""Option-to-parameter binding."""
from __future__ import annotations

from cmdbind.binding.binder import ParameterBinder

__all__ = ["ParameterBinder"]
