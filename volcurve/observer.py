"""
Change notification for curves and their dependants.

An :class:`Observable` keeps a registration list of callbacks. Dependants
register a callable taking no arguments and are called once every time the
observable's data is replaced.
"""
import logging
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class Observable:
    """Holds registered listeners and notifies them on demand."""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._listeners_lock = threading.Lock()

    def register_observer(self, listener: Listener) -> Listener:
        """
        Register a listener.

        Registering the same listener twice has no effect.

        Args:
            listener: Callable invoked with no arguments on notification

        Returns:
            The listener, usable as a handle for :meth:`unregister_observer`
        """
        if not callable(listener):
            raise TypeError(f"Listener must be callable: {listener!r}")
        with self._listeners_lock:
            if listener not in self._listeners:
                self._listeners.append(listener)
        return listener

    def unregister_observer(self, listener: Listener) -> bool:
        """Remove a listener. Returns False if it was not registered."""
        with self._listeners_lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return False
        return True

    @property
    def observer_count(self) -> int:
        return len(self._listeners)

    def notify_observers(self) -> None:
        """Call every registered listener once, in registration order."""
        with self._listeners_lock:
            listeners = list(self._listeners)
        logger.debug("Notifying %s observer(s) of %s", len(listeners), self)
        for listener in listeners:
            listener()
