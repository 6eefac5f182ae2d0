"""Cancellation tokens for in-flight model requests."""

import threading

from sweather.utils.exceptions import RequestCancelledError


class CancellationToken:
    """One-shot flag shared between a request and whoever may abandon it."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise RequestCancelledError once ``cancel`` has been called."""
        if self._event.is_set():
            raise RequestCancelledError()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"
