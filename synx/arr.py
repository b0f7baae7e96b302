"""
SynX Arr - Reactive Sequence
============================

`Arr` is a `list` that notifies subscribers whenever its contents change. Everything
a list can do keeps working (indexing, slicing, iteration, `len`, comprehensions,
`sorted(...)`), and every mutating entry point is intercepted.

```python
from synx import Arr

todos = Arr(["write docs", "ship"])

unsubscribe = todos.subscribe(lambda items: print("Todos:", list(items)))

todos.append("celebrate")   # notifies
todos[0] = "write docs"     # same value, no notification
todos.sort()                # notifies only if the order changed
todos.length = 1            # truncates and notifies
```

Change Detection
----------------

- Index writes compare the old and new element with the signal's `equals`.
- Length-changing operations (`append`, `extend`, `insert`, `pop`, `remove`, `clear`,
  `push`, `shift`, `unshift`, `+=`, `*=`, `del`) notify when the length changed.
- Order-changing operations (`sort`, `reverse`, `fill`, `copy_within`, `splice`, slice
  assignment) compare a shallow snapshot taken before the call with the contents after
  it, element by element.

Each call notifies at most once, however many elements it touched. Reactivity is
shallow: mutating an element in place is invisible until `notify()` is called.
"""

import operator
from functools import wraps
from typing import Any, Callable, Iterable, List, Optional

from .signal import Signal, SignalOptions, Unsubscribe


def _resizing(func: Callable) -> Callable:
    """Wrap a list mutator that can only change the contents by changing the length."""

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        old_length = len(self)
        try:
            return func(self, *args, **kwargs)
        finally:
            # A mutator that fails partway may already have changed the list
            if len(self) != old_length:
                self.notify()

    return wrapper


def _reordering(func: Callable) -> Callable:
    """Wrap a list mutator whose effect needs a before/after comparison."""

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        before = list(self)
        try:
            return func(self, *args, **kwargs)
        finally:
            if self._changed_since(before):
                self.notify()

    return wrapper


class Arr(list):
    """
    Reactive sequence facade.

    Owns one `Signal` whose value is the sequence itself. Initial elements are
    copied in at construction without notifying.
    """

    __slots__ = ("__signal",)

    def __init__(
        self,
        data: Optional[Iterable[Any]] = None,
        options: Optional[SignalOptions] = None,
    ):
        super().__init__(data if data is not None else ())
        self.__signal = Signal(self, options)

    def __synx_signal__(self) -> Signal:
        return self.__signal

    def _changed_since(self, before: List[Any]) -> bool:
        if len(before) != len(self):
            return True
        equals = self.__signal.equals
        return any(not equals(old, new) for old, new in zip(before, self))

    # ------------------------------------------------------------------
    # Index and length writes
    # ------------------------------------------------------------------

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            return self._set_slice(index, value)

        old_value = list.__getitem__(self, index)
        list.__setitem__(self, index, value)
        if not self.__signal.equals(value, old_value):
            self.__signal.notify()

    @_reordering
    def _set_slice(self, index: slice, value: Iterable[Any]) -> None:
        list.__setitem__(self, index, value)

    @_resizing
    def __delitem__(self, index):
        list.__delitem__(self, index)

    @property
    def length(self) -> int:
        return len(self)

    @length.setter
    def length(self, new_length: int) -> None:
        new_length = operator.index(new_length)
        if new_length < 0:
            raise ValueError(f"length must be non-negative, got {new_length}")

        old_length = len(self)
        if new_length < old_length:
            list.__delitem__(self, slice(new_length, None))
        elif new_length > old_length:
            list.extend(self, [None] * (new_length - old_length))

        if new_length != old_length:
            self.__signal.notify()

    # ------------------------------------------------------------------
    # Native list mutators
    # ------------------------------------------------------------------

    append = _resizing(list.append)
    extend = _resizing(list.extend)
    insert = _resizing(list.insert)
    pop = _resizing(list.pop)
    remove = _resizing(list.remove)
    clear = _resizing(list.clear)
    __iadd__ = _resizing(list.__iadd__)
    __imul__ = _resizing(list.__imul__)
    sort = _reordering(list.sort)
    reverse = _reordering(list.reverse)

    # ------------------------------------------------------------------
    # Array-style mutators
    # ------------------------------------------------------------------

    @_resizing
    def push(self, *items: Any) -> int:
        """Append `items` to the end and return the new length."""
        list.extend(self, items)
        return len(self)

    @_resizing
    def shift(self) -> Any:
        """Remove and return the first element. Raises IndexError when empty."""
        return list.pop(self, 0)

    @_resizing
    def unshift(self, *items: Any) -> int:
        """Insert `items` at the start, keeping their order, and return the new length."""
        list.__setitem__(self, slice(0, 0), items)
        return len(self)

    @_reordering
    def splice(self, start: int, delete_count: Optional[int] = None, *items: Any) -> List[Any]:
        """
        Remove `delete_count` elements from `start` and insert `items` in their place.

        Negative `start` counts from the end. Omitting `delete_count` removes
        everything from `start` on.

        Returns:
            The removed elements as a plain list.
        """
        size = len(self)
        start = slice(start, None).indices(size)[0]
        if delete_count is None:
            delete_count = size - start
        delete_count = min(max(delete_count, 0), size - start)

        removed = list.__getitem__(self, slice(start, start + delete_count))
        list.__setitem__(self, slice(start, start + delete_count), items)
        return removed

    @_reordering
    def fill(self, value: Any, start: int = 0, end: Optional[int] = None) -> "Arr":
        """Set every element in `[start, end)` to `value`. Returns the sequence."""
        start, end, _ = slice(start, end).indices(len(self))
        for i in range(start, end):
            list.__setitem__(self, i, value)
        return self

    @_reordering
    def copy_within(self, target: int, start: int = 0, end: Optional[int] = None) -> "Arr":
        """
        Copy the elements in `[start, end)` over the elements starting at `target`.

        The length never changes; the copied run is cut short at the end of the
        sequence. Returns the sequence.
        """
        size = len(self)
        target = slice(target, None).indices(size)[0]
        start, end, _ = slice(start, end).indices(size)
        count = min(end - start, size - target)
        if count > 0:
            chunk = list.__getitem__(self, slice(start, start + count))
            list.__setitem__(self, slice(target, target + count), chunk)
        return self

    # ------------------------------------------------------------------
    # Reactivity
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[["Arr"], None]) -> Unsubscribe:
        """
        Subscribe to changes on this sequence.

        The callback is called immediately with the sequence, then again after
        every notifying mutation.
        """
        return self.__signal.subscribe(callback)

    def notify(self) -> None:
        """Broadcast the current state to every subscriber."""
        self.__signal.notify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"

    def __reduce__(self):
        raise TypeError(f"cannot pickle {type(self).__name__!r} object")
