from __future__ import annotations

import threading
import time
from typing import Callable

from .errors import RequestCancelled


class CallContext:
    """Deadline and cancellation for a single API call.

    A context may be shared between threads; ``cancel()`` can be called from
    any of them. Callbacks registered with ``add_cancel_callback`` run in the
    cancelling thread, which is how an in-flight call is woken up.
    """

    def __init__(self, timeout: float | None = None):
        self._deadline = None if timeout is None else time.monotonic() + timeout
        self._cancelled = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[Callable[[], None]] = []

    @classmethod
    def background(cls) -> CallContext:
        return cls()

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        with self._lock:
            if self._cancelled.is_set():
                return
            self._cancelled.set()
            callbacks = list(self._callbacks)
        for callback in callbacks:
            callback()

    def add_cancel_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if not self._cancelled.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def remove_cancel_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def remaining(self) -> float | None:
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    def err(self) -> RequestCancelled | None:
        if self.cancelled:
            return RequestCancelled("context cancelled")
        if self.expired():
            return RequestCancelled("context deadline exceeded")
        return None

    def check(self) -> None:
        err = self.err()
        if err is not None:
            raise err
