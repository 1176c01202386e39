"""Dispatching: resolve, bind, invoke, report."""
from __future__ import annotations

from cmdbind.dispatch.dispatcher import DispatchResult, DispatchStatus, Dispatcher
from cmdbind.dispatch.invoker import invoke
from cmdbind.dispatch.messaging import ConsoleMessenger, Messenger, RecordingMessenger

__all__ = [
    "ConsoleMessenger",
    "DispatchResult",
    "DispatchStatus",
    "Dispatcher",
    "Messenger",
    "RecordingMessenger",
    "invoke",
]
