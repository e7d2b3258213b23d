import threading
import time


class InMemoryRateLimiter:
    """
    Fixed-window rate limiter keyed by client and path.
    State is per process; there is no shared store across workers.
    Expired windows are swept at most once per `sweep_interval` seconds.
    """

    def __init__(self, sweep_interval: float = 60.0) -> None:
        self._lock = threading.Lock()
        # key -> (count, window_start, window_seconds)
        self._state: dict[str, tuple[int, float, int]] = {}
        self._sweep_interval = sweep_interval
        self._last_sweep = time.time()

    def _sweep(self, now: float) -> None:
        expired = [k for k, (_, start, window) in self._state.items() if now - start >= window]
        for key in expired:
            del self._state[key]
        self._last_sweep = now

    def allow(self, key: str, limit: int, window_seconds: int) -> tuple[bool, int]:
        """
        Returns (allowed, retry_after_seconds).
        """
        now = time.time()
        with self._lock:
            if now - self._last_sweep >= self._sweep_interval:
                self._sweep(now)
            count, window_start, _ = self._state.get(key, (0, now, window_seconds))
            if now - window_start >= window_seconds:
                count = 0
                window_start = now
            if count >= limit:
                retry_after = max(1, int(window_seconds - (now - window_start)))
                return False, retry_after
            self._state[key] = (count + 1, window_start, window_seconds)
            return True, 0

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._state)

    def reset(self) -> None:
        with self._lock:
            self._state.clear()


rate_limiter = InMemoryRateLimiter()
