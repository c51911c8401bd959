"""In-memory tracker of outbound CMS requests for development introspection."""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

DEFAULT_CAPACITY = 20


@dataclass
class HttpRequestRecord:
    """One outbound request as shown in the debug panel.

    Attributes:
        url: Full request URL including the query string
        method: HTTP method
        status: HTTP status code, 0 when no response was received
        duration: Elapsed time in milliseconds
        timestamp: When the request started (UTC)
        error: Failure message, None for successful requests
    """

    url: str
    method: str = "GET"
    status: int = 0
    duration: float = 0
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: str | None = None


class RequestTracker:
    """Bounded most-recent-first buffer of HttpRequestRecord entries.

    New records are pushed to the front and the buffer is truncated to
    capacity, so the oldest entries are dropped first. Clients only receive
    a tracker when the site runs in development mode. Access is serialized
    with a lock so worker threads can share one tracker.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._requests: list[HttpRequestRecord] = []
        self._lock = threading.Lock()

    @property
    def requests(self) -> list[HttpRequestRecord]:
        """The live buffer, most recent request first."""
        return self._requests

    def record(self, entry: HttpRequestRecord) -> None:
        with self._lock:
            self._requests.insert(0, entry)
            del self._requests[self.capacity:]

    def clear(self) -> None:
        with self._lock:
            self._requests.clear()

    def __len__(self) -> int:
        return len(self._requests)


# Process-wide tracker, empty at start
default_tracker = RequestTracker()
