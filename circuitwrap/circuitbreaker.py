"""Circuit breaker for callables and for objects whose methods may fail."""

import functools
import threading
import time
from datetime import timedelta


class CircuitOpenError(Exception):
    """Raised when a call is refused because the circuit is open."""

    def __init__(self, name):
        super().__init__(f"{name}: circuit is open")
        self.name = name


class CircuitBreaker:
    """Opens after a run of consecutive failures and closes after an interval."""

    def __init__(self, consecutive_errors, open_interval, ignore_errors=(), name="CircuitBreaker"):
        if isinstance(open_interval, timedelta):
            open_interval = open_interval.total_seconds()
        self.max_consecutive_errors = consecutive_errors
        self.open_interval = float(open_interval)
        self.ignore_errors = tuple(ignore_errors)
        self.name = name
        self.consecutive_errors = 0
        self._closes_at = None
        self._lock = threading.Lock()

    def _is_ignored(self, exc):
        return any(
            isinstance(exc, ignored) if isinstance(ignored, type) else exc is ignored
            for ignored in self.ignore_errors
        )

    def is_open(self):
        """Return True while calls are being refused."""
        with self._lock:
            return self._closes_at is not None and self._closes_at > time.monotonic()

    def reset(self):
        """Close the circuit and forget previous failures."""
        with self._lock:
            self.consecutive_errors = 0
            self._closes_at = None

    def call(self, func, *args, **kwargs):
        """Call func through the breaker, re-raising whatever it raises."""
        if self.is_open():
            raise CircuitOpenError(self.name)
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            if self._is_ignored(exc):
                self.reset()
            else:
                with self._lock:
                    self.consecutive_errors += 1
                    if self.consecutive_errors >= self.max_consecutive_errors:
                        self._closes_at = time.monotonic() + self.open_interval
            raise
        self.reset()
        return result

    def wrap(self, func):
        """Return func guarded by this breaker; usable as a decorator."""

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            return self.call(func, *args, **kwargs)

        return wrapper


class WithCircuitBreaker:
    """Proxy whose method calls on base all share one circuit breaker.

    Extra positional arguments are errors (classes or instances) that reset
    the failure count instead of adding to it.
    """

    def __init__(self, base, consecutive_errors, open_interval, *args):
        self._base = base
        self.breaker = CircuitBreaker(
            consecutive_errors,
            open_interval,
            ignore_errors=args,
            name=f"{type(base).__name__}WithCircuitBreaker",
        )

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        attr = getattr(self._base, name)
        return self.breaker.wrap(attr) if callable(attr) else attr