# src/data_export/cancellation.py

"""
Cooperative cancellation primitives.

A ``CancellationSource`` is held by whoever may abort a run (a CLI signal
handler, a job controller). The run itself only ever sees the read-only
``CancellationToken`` and polls it between records or segments; raising the
signal never interrupts work in flight.

    source = CancellationSource()
    ctx = ExecutionContext(folder, cancellation=source.token, ...)
    ...
    source.cancel()          # from any thread
    ctx.is_canceled()        # -> True from now on
"""

from __future__ import annotations

import threading
from typing import Optional


class CancellationToken:
    """
    Read-only view of a cancellation flag.

    The flag moves from unset to set exactly once and is never reset.
    Reading it never blocks and is safe from any thread.
    """

    __slots__ = ("_event",)

    def __init__(self, event: Optional[threading.Event] = None):
        self._event = event if event is not None else threading.Event()

    @classmethod
    def none(cls) -> "CancellationToken":
        """A token that is never canceled."""
        return cls()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"<CancellationToken canceled={self.is_cancellation_requested}>"


class CancellationSource:
    """Owner side of a cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._token = CancellationToken(self._event)

    @property
    def token(self) -> CancellationToken:
        return self._token

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Raise the signal. Calling it again is a no-op."""
        self._event.set()
