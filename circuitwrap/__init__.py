"""Thread-safe circuit breaker for callables and objects, in circuitwrap.circuitbreaker."""

__version__ = "0.1.0"
__all__ = ["circuitbreaker"]