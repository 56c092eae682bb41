"""
store.py — State Store
=======================
Holds the current AppState and runs every action through the reducer.
The rendering layer subscribes to be told about each new state.

    store = Store()
    unsubscribe = store.subscribe(lambda state: redraw(state))
    store.dispatch(AddNode(x=100, y=80))

Not thread-safe: dispatch from one thread (or one event loop) only.
"""

from typing import Callable, List, Optional

from engine.actions import Action
from engine.reducer import reduce
from engine.state import AppState, initial_state

Listener = Callable[[AppState], None]


class Store:
    def __init__(self, state: Optional[AppState] = None):
        self._state: AppState = state if state is not None else initial_state()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        new_state = reduce(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
