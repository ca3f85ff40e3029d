"""
Weak listener list - observers that do not need to unregister.
"""

import threading
import weakref
from inspect import ismethod


class WeakListenerList:
    """
    Ordered, thread-safe collection of weakly referenced listeners.

    Listeners are kept in registration order. Once the application drops
    its last reference to a listener, it is garbage collected and silently
    disappears from the list. Bound methods are held via WeakMethod so the
    entry lives exactly as long as the instance it is bound to.
    """

    def __init__(self):
        self._refs: list[weakref.ref] = []
        self._lock = threading.Lock()

    @staticmethod
    def _make_ref(listener) -> weakref.ref:
        if ismethod(listener):
            return weakref.WeakMethod(listener)
        return weakref.ref(listener)

    @staticmethod
    def _same_listener(a: weakref.ref, b: weakref.ref) -> bool:
        # Identity, not ==: distinct listeners may compare equal
        if type(a) is not type(b):
            return False
        first, second = a(), b()
        if first is None or second is None:
            return False
        if isinstance(a, weakref.WeakMethod):
            return first.__self__ is second.__self__ and first.__func__ == second.__func__
        return first is second

    def add(self, listener) -> bool:
        """Add a listener. Returns False if it is already registered."""
        ref = self._make_ref(listener)
        with self._lock:
            self._prune()
            if any(self._same_listener(r, ref) for r in self._refs):
                return False
            self._refs.append(ref)
            return True

    def get_all(self) -> list:
        """Get all live listeners in registration order."""
        with self._lock:
            self._prune()
            listeners = [ref() for ref in self._refs]
        return [listener for listener in listeners if listener is not None]

    def clear(self):
        """Remove all listeners."""
        with self._lock:
            self._refs.clear()

    def __len__(self) -> int:
        return len(self.get_all())

    def _prune(self):
        self._refs = [ref for ref in self._refs if ref() is not None]
