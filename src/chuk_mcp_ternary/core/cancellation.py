"""
Cooperative cancellation of long-running analysis.

Necklace enumeration, signature analysis and the guide frame search poll
the cancellation event of the current context between steps. When the
event is set they unwind by raising AnalysisCancelledError; all of their
state is local, so nothing is left half-updated.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from chuk_mcp_ternary.constants import ErrorMessages
from chuk_mcp_ternary.errors import AnalysisCancelledError

_cancel_event: ContextVar[threading.Event | None] = ContextVar("cancel_event", default=None)


@contextmanager
def cancellation_scope(event: threading.Event) -> Iterator[threading.Event]:
    """
    Make `event` the cancellation event for analysis run inside the block.

    Example:
        stop = threading.Event()
        with cancellation_scope(stop):
            necklaces_fixed_content([20, 20, 20])  # raises once stop is set
    """
    token = _cancel_event.set(event)
    try:
        yield event
    finally:
        _cancel_event.reset(token)


def check_cancelled() -> None:
    """Raise AnalysisCancelledError if the current cancellation event is set."""
    event = _cancel_event.get()
    if event is not None and event.is_set():
        raise AnalysisCancelledError(ErrorMessages.CANCELLED)
