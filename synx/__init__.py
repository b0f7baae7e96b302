"""
SynX - Signal-Yielding Notifying Containers

Reactive containers that keep their native Python surface: a mapping (`Obj`) and a
list (`Arr`) that broadcast to subscribers whenever their observable state changes,
built on a small change-detecting notifier (`Signal`).
"""

from .arr import Arr
from .obj import Obj
from .signal import UNSET, Signal, SignalOptions, same_value, signal_of

__version__ = "0.1.0"

__all__ = [
    # Reactive containers
    "Obj",
    "Arr",
    # Notifier
    "Signal",
    "SignalOptions",
    "signal_of",
    # Equality and sentinel
    "same_value",
    "UNSET",
]
