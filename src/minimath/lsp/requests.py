"""Latest-request-wins bookkeeping for background compiles.

Every compile is tagged with a request id. A result is published only if
its id is still the newest one issued for the same document; older results
are discarded rather than cancelled.
"""

import itertools
import threading


class RequestTracker:
    def __init__(self):
        self._ids = itertools.count(1)
        self._latest: dict[str, int] = {}
        self._lock = threading.Lock()

    def issue(self, key: str) -> int:
        with self._lock:
            request_id = next(self._ids)
            self._latest[key] = request_id
            return request_id

    def is_current(self, key: str, request_id: int) -> bool:
        with self._lock:
            return self._latest.get(key) == request_id

    def discard(self, key: str):
        with self._lock:
            self._latest.pop(key, None)
