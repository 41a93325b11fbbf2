import threading
import time
import uuid


class MonotonicClock:
    """Wall-clock nanoseconds that never go backwards within the process.

    If the system clock steps back, the last returned value is repeated
    until real time catches up.
    """

    def __init__(self, source=time.time_ns):
        self._source = source
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = self._source()
            if now < self._last:
                now = self._last
            self._last = now
            return now


clock = MonotonicClock()


def new_task_id() -> str:
    return str(uuid.uuid4())
