"""Integration tests for SynX reactive containers working together."""

import pytest

from synx import Arr, Obj, Signal


@pytest.mark.integration
@pytest.mark.obj
def test_user_profile_rename_scenario():
    """Renaming to the same name is silent, a real rename broadcasts once"""
    user = Obj({"name": "Alice"})
    received = []
    user.subscribe(lambda u: received.append(u.name))

    user.name = "Alice"
    user.name = "Bob"

    assert received == ["Alice", "Bob"]


@pytest.mark.integration
@pytest.mark.arr
def test_sorting_scenario():
    """Sorting broadcasts only when the order actually changes"""
    already_sorted = Arr([1, 2, 3])
    shuffled = Arr([3, 1, 2])
    sorted_updates = []
    shuffled_updates = []
    already_sorted.subscribe(lambda a: sorted_updates.append(list(a)))
    shuffled.subscribe(lambda a: shuffled_updates.append(list(a)))

    already_sorted.sort()
    shuffled.sort()

    assert sorted_updates == [[1, 2, 3]]
    assert shuffled_updates == [[3, 1, 2], [1, 2, 3]]


@pytest.mark.integration
def test_other_listeners_survive_unsubscribe():
    """Removing one listener leaves the others subscribed"""
    cart = Arr()
    first, second = [], []
    stop_first = cart.subscribe(lambda a: first.append(len(a)))
    cart.subscribe(lambda a: second.append(len(a)))

    cart.append("apple")
    stop_first()
    cart.append("pear")

    assert first == [0, 1]
    assert second == [0, 1, 2]


@pytest.mark.integration
def test_derived_state_kept_in_sync():
    """A listener on a sequence can drive another container"""
    todos = Arr([{"title": "docs", "done": True}])
    summary = Obj({"total": 0, "done": 0})
    summary_updates = []

    def recount(items):
        summary.total = len(items)
        summary.done = sum(1 for item in items if item["done"])

    todos.subscribe(recount)
    summary.subscribe(lambda s: summary_updates.append((s.total, s.done)))

    todos.push({"title": "ship", "done": False})
    todos[1] = {"title": "ship", "done": True}

    assert (summary.total, summary.done) == (2, 2)
    assert summary_updates == [(1, 1), (2, 1), (2, 2)]


@pytest.mark.integration
def test_reentrant_mutation_from_listener():
    """A listener mutating its own container produces a nested broadcast"""
    queue = Arr()
    lengths = []

    def cap(items):
        lengths.append(len(items))
        if len(items) > 2:
            items.shift()

    queue.subscribe(cap)
    for job in ["a", "b", "c", "d"]:
        queue.append(job)

    assert queue == ["c", "d"]
    assert lengths == [0, 1, 2, 3, 2, 3, 2]


@pytest.mark.integration
def test_batched_update_through_private_flag():
    """Private writes plus notify() give one visible update for a batch"""
    position = Obj({"x": 0, "y": 0})
    updates = []

    def on_change(p):
        if not p.get("_updating"):
            updates.append((p.x, p.y))

    position.subscribe(on_change)

    position._updating = True
    position.x = 10
    position.y = 20
    position._updating = False
    position.notify()

    assert updates == [(0, 0), (10, 20)]


@pytest.mark.integration
def test_containers_held_in_a_signal():
    """A plain Signal holding a container broadcasts on replacement only"""
    current = Signal(Arr([1]))
    seen = []
    current.subscribe(lambda a: seen.append(list(a)))

    current.value.append(2)
    current.value = current.value
    current.value = Arr([9])

    assert seen == [[1], [9]]
