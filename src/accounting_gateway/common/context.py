"""Per-call deadline and cancellation.

A ``CallContext`` travels from the service layer down to the transport. The
transport refuses to start a request once the context is cancelled or its
deadline has passed, caps the HTTP timeout at the time that is left, and
checks again when the response arrives. A blocking request is only cut short
at its timeout; cancelling without a deadline takes effect once it returns.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field


class ContextDone(Exception):
    """Raised by :meth:`CallContext.raise_if_done`."""


@dataclass(frozen=True, slots=True)
class CallContext:
    deadline: float | None = None  # time.monotonic() value
    cancel_event: threading.Event = field(default_factory=threading.Event)

    @classmethod
    def with_timeout(cls, seconds: float) -> "CallContext":
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self.cancel_event.set()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def remaining(self) -> float | None:
        """Seconds until the deadline, or None when there is no deadline."""
        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    def raise_if_done(self) -> None:
        if self.cancelled:
            raise ContextDone("context cancelled")
        left = self.remaining()
        if left is not None and left <= 0:
            raise ContextDone("context deadline exceeded")
