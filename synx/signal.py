"""
SynX Signal - Core Change Notifier
==================================

This module provides the `Signal`, the smallest reactive unit in SynX: one tracked
value plus a set of listener callbacks.

A Signal does two things:

- **Assignment with change detection**: setting a value that is the *same value* as the
  current one (see `same_value`) is a no-op. Anything else is stored and broadcast.
- **Manual broadcast**: `notify()` calls every listener with the current value whether
  or not it changed. Reactive containers use this when their internal state mutates
  while the tracked reference stays the same.

Basic Usage
-----------

```python
from synx import Signal

count = Signal(0)
unsubscribe = count.subscribe(lambda v: print("count:", v))  # prints "count: 0"

count.value = 1   # prints "count: 1"
count.value = 1   # same value, nothing printed
count.notify()    # prints "count: 1"

unsubscribe()
```

Equality
--------

`same_value` follows strict identity semantics with a few value-type exceptions:
strings, bytes and real numbers compare by value, `NaN` equals `NaN` and `0.0` is
distinct from `-0.0`. Every other object (lists, dicts, instances) only equals itself.
"""

import inspect
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")

Listener = Callable[[Any], None]
Unsubscribe = Callable[[], None]


# ============================================================================
# SENTINEL VALUES
# ============================================================================


class _Unset:
    """Sentinel for 'no value yet' in signals and absent container slots."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False


UNSET = _Unset()


# ============================================================================
# EQUALITY
# ============================================================================


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def same_value(a: Any, b: Any) -> bool:
    """
    Strict equality used for change detection.

    Two values are the same when they are the same object, or when both are
    primitives holding the same value. `NaN` is the same as `NaN`, while `0.0`
    and `-0.0` are different.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if assigning `b` over `a` would not be an observable change.
    """
    if a is b:
        return True

    if _is_number(a) and _is_number(b):
        a_nan = a != a
        b_nan = b != b
        if a_nan or b_nan:
            return a_nan and b_nan
        if a == 0 and b == 0:
            return math.copysign(1.0, a) == math.copysign(1.0, b)
        return a == b

    if isinstance(a, (str, bytes)) and type(a) is type(b):
        return a == b

    return False


# ============================================================================
# CONFIGURATION
# ============================================================================


@dataclass(frozen=True)
class SignalOptions:
    """Construction options shared by `Signal`, `Obj` and `Arr`."""

    name: Optional[str] = None
    equals: Callable[[Any, Any], bool] = same_value


_DEFAULT_OPTIONS = SignalOptions()


# ============================================================================
# SIGNAL
# ============================================================================


def _listener_key(callback: Listener) -> Hashable:
    # Identity, except that bound methods match on their instance and function
    if inspect.ismethod(callback):
        return (id(callback.__self__), id(callback.__func__))
    return id(callback)


class Signal(Generic[T]):
    """
    A tracked value with change-detecting assignment and synchronous broadcast.

    Listeners are kept in insertion order and registered at most once, compared
    by identity, so unhashable callables are accepted. Broadcasts iterate over a
    snapshot of the listeners, so a listener may subscribe or unsubscribe (itself
    or others) while a broadcast is running.
    """

    __slots__ = ("_value", "_subscribers", "_options")

    def __init__(self, value: Any = UNSET, options: Optional[SignalOptions] = None):
        self._value = value
        # identity key -> listener, in subscription order
        self._subscribers: Dict[Hashable, Listener] = {}
        self._options = options if options is not None else _DEFAULT_OPTIONS

    @property
    def name(self) -> str:
        return self._options.name or "<unnamed>"

    @property
    def equals(self) -> Callable[[Any, Any], bool]:
        """Equality predicate used for change detection."""
        return self._options.equals

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set_value(new_value)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def set_value(self, new_value: T) -> None:
        """Store `new_value` and broadcast it, unless it is the current value."""
        if self._options.equals(new_value, self._value):
            return
        self._value = new_value
        self.notify()

    def notify(self) -> None:
        """Call every registered listener with the current value."""
        value = self._value
        for callback in list(self._subscribers.values()):
            self._call(callback, value)

    def _call(self, callback: Listener, value: Any) -> None:
        try:
            callback(value)
        except Exception as e:
            logging.error(f"Listener {callback!r} failed on signal {self.name}: {e}")
            raise

    def subscribe(self, callback: Listener) -> Unsubscribe:
        """
        Register a listener.

        If the signal holds a value, the listener is called with it right away,
        before registration completes.

        Args:
            callback: Function called with the current value on every broadcast.

        Returns:
            A function that removes the listener. Calling it more than once is harmless.
        """
        if self._value is not UNSET:
            self._call(callback, self._value)
        self._subscribers[_listener_key(callback)] = callback
        logging.debug(
            f"Subscribed {callback!r} to signal {self.name} "
            f"({len(self._subscribers)} listeners)"
        )

        # Holding the callback keeps its identity key from being reused
        def unsubscribe() -> None:
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Listener) -> None:
        """Remove a listener if it is registered."""
        if self._subscribers.pop(_listener_key(callback), None) is not None:
            logging.debug(f"Unsubscribed {callback!r} from signal {self.name}")

    def __repr__(self) -> str:
        # Containers hold themselves as value; avoid recursing into their repr
        value = self._value
        shown = f"<{type(value).__name__}>" if hasattr(value, "__synx_signal__") else repr(value)
        return f"Signal({self.name}, value={shown})"


def signal_of(container: Any) -> Signal:
    """
    Return the `Signal` owned by a reactive container (`Obj` or `Arr`).

    The signal is kept outside the container's key space, so this accessor is the
    only way to reach it.
    """
    try:
        accessor = type(container).__synx_signal__
    except AttributeError:
        raise TypeError(f"{type(container).__name__} is not a reactive container") from None
    return accessor(container)
