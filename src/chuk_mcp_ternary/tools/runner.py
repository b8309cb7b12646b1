"""
Bounded execution of analysis work from async tools.

Analysis is CPU-bound, so it runs in a worker thread under a time budget.
Once the budget is spent the worker's cancellation event is set; the long
loops poll it and stop, which frees the thread for later calls.
"""

from __future__ import annotations

import asyncio
import functools
import threading
from collections.abc import Callable
from typing import Any, TypeVar

from chuk_mcp_ternary.constants import ErrorMessages
from chuk_mcp_ternary.core.cancellation import cancellation_scope

T = TypeVar("T")


class AnalysisTimeoutError(TimeoutError):
    """Raised when an analysis exceeds its time budget."""


def _run_cancellable(event: threading.Event, call: Callable[[], T]) -> T:
    with cancellation_scope(event):
        return call()


async def run_bounded(timeout: float, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run a blocking function in a worker thread under a time budget.

    The worker is stopped cooperatively: when the budget runs out, or the
    awaiting task is cancelled, its cancellation event is set and any
    enumeration or frame search inside it stops at its next check. Code
    that never checks the event runs on to completion and its result is
    discarded.

    Raises:
        AnalysisTimeoutError: If the call does not finish within `timeout` seconds
    """
    event = threading.Event()
    call = functools.partial(func, *args, **kwargs)
    try:
        return await asyncio.wait_for(
            asyncio.to_thread(_run_cancellable, event, call), timeout=timeout
        )
    except asyncio.TimeoutError as e:
        raise AnalysisTimeoutError(ErrorMessages.TIMEOUT.format(seconds=timeout)) from e
    finally:
        event.set()
