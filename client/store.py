import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from client import reducers
from client.api import ApiClient

logger = logging.getLogger(__name__)

Reducer = Callable[[Any, dict], Any]
Scheduler = Callable[[float, Callable[[], None]], Any]


def thread_scheduler(delay: float, fn: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    timer.start()
    return timer


class History:
    """Navigation stack; actions push the path the UI should move to."""

    def __init__(self, path: str = "/"):
        self.entries: List[str] = [path]

    @property
    def location(self) -> str:
        return self.entries[-1]

    def push(self, path: str) -> None:
        self.entries.append(path)


class Store:
    """
    Holds application state as named slices, each owned by a reducer.

    `dispatch` accepts either an action dict, which runs through every
    reducer, or a callable ("thunk") which is called with the store and may
    perform I/O before dispatching further actions. The return value of
    the thunk is passed back to the caller.
    """

    def __init__(
        self,
        api: ApiClient,
        slices: Optional[Dict[str, Reducer]] = None,
        schedule: Scheduler = thread_scheduler,
    ):
        self.api = api
        self.schedule = schedule
        self._reducers = dict(slices or reducers.ROOT)
        self._state = {name: reducer(None, {}) for name, reducer in self._reducers.items()}
        self._listeners: List[Callable[[dict], None]] = []
        self._lock = threading.Lock()

    @property
    def state(self) -> dict:
        return self._state

    def get_state(self) -> dict:
        return self._state

    def subscribe(self, listener: Callable[[dict], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, action):
        if callable(action):
            return action(self)

        with self._lock:
            self._state = {
                name: reducer(self._state[name], action)
                for name, reducer in self._reducers.items()
            }
            state = self._state
        logger.debug("dispatched %s", action.get("type"))
        for listener in list(self._listeners):
            listener(state)
        return action


def create_store(api: ApiClient, schedule: Scheduler = thread_scheduler) -> Store:
    return Store(api, schedule=schedule)
