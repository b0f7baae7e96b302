from synx import Arr, Obj, Signal

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Defining a signal")
print("-" * 100)
print()

# A signal holds one value and tells its listeners whenever it changes.
current_name = Signal("Alice")

log_on_change = lambda name: print(f"Name is now: {name}")

# Subscribing calls the listener right away with the current value.
unsubscribe = current_name.subscribe(log_on_change)
current_name.value = "Smith"  # Triggers the listener
current_name.value = "Smith"  # Same value, nothing happens

unsubscribe()
current_name.value = "Bob"  # No longer listening

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Reactive objects")
print("-" * 100)
print()

# Obj is a mapping with attribute access that notifies on every real change.
user = Obj({"name": "Alice", "age": 30})

user.subscribe(lambda u: print(f"User changed: {dict(u)}"))

user.name = "Bob"  # Triggers
user.age = 30  # Same value, nothing happens
user._session = "abc123"  # Private key, nothing happens
del user.age  # Triggers

# Nested values are not reactive; publish the change yourself.
user.tags = ["admin"]  # Triggers
user.tags.append("editor")  # Silent
user.notify()  # Triggers

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Reactive arrays")
print("-" * 100)
print()

# Arr is a list that notifies when its contents change.
scores = Arr([3, 1, 2])

scores.subscribe(lambda s: print(f"Scores: {list(s)}"))

scores.append(5)  # Triggers
scores.push()  # Nothing pushed, nothing happens
scores.sort()  # Triggers, order changed
scores.sort()  # Already sorted, nothing happens
scores[0] = 1  # Same value, nothing happens
scores.splice(1, 2, 20, 30)  # Triggers once for the whole splice
scores.length = 2  # Triggers

# Non-mutating operations return plain lists and never notify.
doubled = [s * 2 for s in scores]
print(f"Doubled: {doubled}")
