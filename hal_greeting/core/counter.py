# hal_greeting/core/counter.py

import threading


class AtomicCounter:
    """
    Process-wide id source. Each call to next() hands out a value strictly
    greater than every value handed out before it. There is no reset.
    """

    def __init__(self, seed: int = 1):
        if seed < 1:
            raise ValueError("seed must be >= 1")
        self._next = seed
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    @property
    def peek(self) -> int:
        """Value the next call will return, without consuming it."""
        with self._lock:
            return self._next
