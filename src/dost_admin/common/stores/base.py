from typing import Callable, List


class Store:
    """Mutable state container that broadcasts every change to its listeners.

    Only the store's own methods mutate state; listeners receive the store
    itself and read whatever they need from it.
    """

    def __init__(self):
        self._listeners: List[Callable] = []

    def subscribe(self, listener: Callable) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)
