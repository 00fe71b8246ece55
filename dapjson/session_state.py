"""Shared termination flag for a debug session."""

from __future__ import annotations

import threading


class SessionState:
    """Thread-safe flag that signals a session should terminate."""

    def __init__(self) -> None:
        self._terminate = False
        self._condition = threading.Condition()

    @property
    def terminate(self) -> bool:
        """Whether termination has been requested."""
        with self._condition:
            return self._terminate

    def request_terminate(self) -> None:
        """Set the termination flag and wake every waiting thread."""
        with self._condition:
            self._terminate = True
            self._condition.notify_all()

    def wait_for_terminate(self, timeout: float | None = None) -> bool:
        """Block until termination is requested or ``timeout`` seconds pass.

        Returns whether termination has been requested.
        """
        with self._condition:
            return self._condition.wait_for(lambda: self._terminate, timeout)