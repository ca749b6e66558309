# circuitwrap

A small circuit breaker for Python callables and objects. Its state is
guarded by a lock, so one breaker can be shared between threads.

After a set number of calls in a row have raised, the breaker opens. While
it is open, calls are refused at once with `CircuitOpenError`, and the
wrapped code is not run. When the open interval has passed, the next call
is let through. If that call succeeds, the breaker closes and the error
count goes back to zero. If it fails, the breaker opens again for another
interval.

Whatever the wrapped code raises is always raised again to the caller. Only
subclasses of `Exception` are counted as failures.

## Installation

```
pip install circuitwrap
```

## Wrapping functions

```python
from datetime import timedelta

from circuitwrap.circuitbreaker import CircuitBreaker, CircuitOpenError

breaker = CircuitBreaker(
    consecutive_errors=3,
    open_interval=5.0,          # seconds, or a datetime.timedelta
    ignore_errors=(KeyError,),
    name="inventory",
)

@breaker.wrap
def fetch(item_id):
    ...

try:
    fetch(42)
except CircuitOpenError as exc:
    print(exc)          # "inventory: circuit is open"
    print(exc.name)     # "inventory"

breaker.call(fetch_other, 1, retries=2)   # run any callable through the breaker
breaker.is_open()                         # True while calls are being refused
breaker.reset()                           # close the breaker and clear the count
breaker.consecutive_errors                # failures counted so far
```

`name` defaults to `"CircuitBreaker"` and `ignore_errors` to an empty tuple.

### Ignored errors

Each entry in `ignore_errors` is either an exception class, which matches
any instance of that class or its subclasses, or a particular exception
instance, which matches only that same object. An ignored exception is
still raised to the caller, but it counts as a success: the error count is
reset and the breaker closes.

## Wrapping objects

`WithCircuitBreaker` places one shared breaker in front of every public
callable attribute of an object. Attributes that are not callable are
returned unchanged, and names that start with an underscore are not
forwarded.

```python
from circuitwrap.circuitbreaker import WithCircuitBreaker

client = WithCircuitBreaker(RemoteClient(), 2, 1.0, TimeoutError)
client.get("key")       # goes through the breaker
client.breaker          # the CircuitBreaker behind the proxy
```

The arguments after `open_interval` are the errors to ignore, classes or
instances as above. The breaker is named after the wrapped object's class,
so when the circuit is open the message reads, for example,
`RemoteClientWithCircuitBreaker: circuit is open`.

## What it does not do

- State lives only in memory, inside one process. It is not saved or shared
  between processes.
- Coroutine functions are not supported: wrapping one only guards the
  creation of the coroutine, not the awaiting of it, so errors raised while
  it runs are not counted.
- There is no half-open limit on concurrent trial calls; once the interval
  has passed, every call is let through until one of them fails.

## Running the tests

```
pip install -e ".[test]"
pytest
```