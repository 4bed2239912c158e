"""A single-value atomic cell.

Readers never take a lock: ``get()`` is one attribute load, which is
atomic under both the GIL and free-threading. Writers replace the whole
value. ``compare_and_set`` holds a lock only for the identity check and
the store, so concurrent writers never lose an update they did not see.
"""

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class AtomicRef(Generic[T]):
    """Holds one immutable value that is swapped as a whole.

    Usage::

        ref = AtomicRef(State(...))
        while True:
            old = ref.get()
            if ref.compare_and_set(old, old.with_change()):
                break
    """

    __slots__ = ("_lock", "_value")

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> T:
        """Return the current value."""
        return self._value

    def set(self, value: T) -> None:
        """Replace the current value unconditionally."""
        with self._lock:
            self._value = value

    def compare_and_set(self, expected: T, new: T) -> bool:
        """Store *new* only if the current value is *expected* (by identity).

        Returns True when the swap happened.
        """
        with self._lock:
            if self._value is not expected:
                return False
            self._value = new
            return True

    def __repr__(self) -> str:
        return f"AtomicRef({self._value!r})"
