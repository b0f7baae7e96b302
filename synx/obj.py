"""
SynX Obj - Reactive Key/Value Container
=======================================

`Obj` is a mapping that notifies subscribers whenever its observable state changes.
Keys can be read and written with attribute syntax or item syntax:

```python
from synx import Obj

user = Obj({"name": "Alice", "age": 30})

unsubscribe = user.subscribe(lambda u: print("User changed:", dict(u)))

user.name = "Bob"          # notifies
user["age"] = 30           # same value, no notification
user._private = "ignored"  # private key, no notification
del user.age               # notifies
```

Rules
-----

- A write always applies. It notifies only when the new value differs from the
  previous one (per the signal's `equals`) and the key is public.
- A delete notifies only when the key existed and is public.
- Keys starting with `_` are private: stored and read normally, never broadcast.
  Use `notify()` to publish a batch of private or nested changes at once.
- Reactivity is shallow. Mutating a value held in the container (e.g. a nested list)
  is invisible until `notify()` is called.

Attribute reads fall back to the stored keys only when normal attribute lookup
fails, so method names like `keys` or `subscribe` shadow same-named keys. Item
access (`obj["keys"]`) always reaches the stored value.
"""

from collections.abc import MutableMapping
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from .signal import UNSET, Signal, SignalOptions, Unsubscribe


def _is_private(key: Any) -> bool:
    return isinstance(key, str) and key.startswith("_")


class Obj(MutableMapping):
    """
    Reactive key/value facade.

    Owns one `Signal` whose value is the container itself, so listeners always
    receive the live container rather than a snapshot.
    """

    __slots__ = ("__data", "__signal")

    def __init__(
        self,
        data: Optional[Mapping[Any, Any]] = None,
        options: Optional[SignalOptions] = None,
    ):
        object.__setattr__(self, "_Obj__data", {})
        object.__setattr__(self, "_Obj__signal", Signal(self, options))

        # Initial data goes through the reactive write path
        if data:
            self.update(data)

    def __synx_signal__(self) -> Signal:
        return self.__signal

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: Any) -> Any:
        return self.__data[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        old_value = self.__data.get(key, UNSET)
        self.__data[key] = value

        if not _is_private(key) and not self.__signal.equals(value, old_value):
            self.__signal.notify()

    def __delitem__(self, key: Any) -> None:
        # KeyError for a missing key, raised before any notification
        del self.__data[key]

        if not _is_private(key):
            self.__signal.notify()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.__data)

    def __len__(self) -> int:
        return len(self.__data)

    def __contains__(self, key: Any) -> bool:
        return key in self.__data

    def clear(self) -> None:
        """Remove every key, notifying once if a public key was removed."""
        had_public = any(not _is_private(key) for key in self.__data)
        self.__data.clear()
        if had_public:
            self.__signal.notify()

    # ------------------------------------------------------------------
    # Attribute access
    # ------------------------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails
        try:
            return self.__data[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __dir__(self):
        keys = [key for key in self.__data if isinstance(key, str)]
        return sorted(set(super().__dir__()) | set(keys))

    # ------------------------------------------------------------------
    # Reactivity
    # ------------------------------------------------------------------

    def subscribe(self, callback: Callable[["Obj"], None]) -> Unsubscribe:
        """
        Subscribe to changes on this container.

        The callback is called immediately with the container, then again after
        every notifying mutation.

        Args:
            callback: Function receiving this `Obj`.

        Returns:
            Function that stops the subscription.
        """
        return self.__signal.subscribe(callback)

    def notify(self) -> None:
        """Broadcast the current state to every subscriber."""
        self.__signal.notify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__data!r})"

    def __reduce__(self):
        raise TypeError(f"cannot pickle {type(self).__name__!r} object")

    def copy(self) -> Dict[Any, Any]:
        """Return a plain `dict` with the current items."""
        return dict(self.__data)
