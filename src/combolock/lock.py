import logging
from typing import Optional

from .events import ChangeCombination
from .events import Close
from .events import Combination
from .events import DEFAULT_COMBINATION
from .events import Event
from .events import Lock
from .events import Open
from .events import Outcome
from .events import Unlock
from .machine import LockStateMachine
from .machine import default_machine
from .state import INITIAL_STATE
from .state import LockState
from .state import Status
from .state import status

logger = logging.getLogger("ComboLock")


class ComboLock:
    """Combination lock.

    The lock owns its state and combination. It starts open and unlocked
    and is changed in place by the events handed to `handle()`.

    Usage:
        lock = ComboLock(Combination(4, 5, 6))
        lock.close()
        lock.lock()
        lock.unlock(1, 2, 3)  # Rejected(reason='invalid combination')
        lock.unlock(4, 5, 6)  # Accepted(message='Valid combination, unlocked')

    Subclasses may override `on_state_changed()` and `on_rejected()` to
    observe the lock, e.g. to keep an access log.
    """

    def __init__(
        self,
        combination: Optional[Combination] = None,
        machine: Optional[LockStateMachine] = None,
    ):
        self._combination = DEFAULT_COMBINATION if combination is None else combination
        self._machine = default_machine() if machine is None else machine
        self._state = INITIAL_STATE

        if not isinstance(self._combination, Combination):
            raise TypeError(f"Expecting Combination but got {type(self._combination)}.")

    def __str__(self):
        return self._state.label

    def __repr__(self):
        return f"{self.__class__.__name__}(state={self._state!r}, combination={self._combination!r})"

    @property
    def state(self) -> LockState:
        return self._state

    @property
    def machine(self) -> LockStateMachine:
        return self._machine

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def is_locked(self) -> bool:
        return self._state.is_locked

    def status(self) -> Status:
        return status(self._state)

    def handle(self, event: Event) -> Outcome:
        """Apply an event and return its outcome.

        State and combination are replaced together. A rejected event
        leaves the lock untouched.
        """
        previous_state = self._state
        step = self._machine.apply(self._state, self._combination, event)
        self._state = step.state
        self._combination = step.combination

        if step.accepted:
            if previous_state is not step.state:
                self._call_on_state_changed(previous_state, step.state)
        else:
            self._call_on_rejected(event, step.outcome.text)

        return step.outcome

    def open(self) -> Outcome:
        return self.handle(Open())

    def close(self) -> Outcome:
        return self.handle(Close())

    def lock(self) -> Outcome:
        return self.handle(Lock())

    def unlock(self, first: int, second: int, third: int) -> Outcome:
        return self.handle(Unlock(Combination(first, second, third)))

    def change_combination(self, first: int, second: int, third: int) -> Outcome:
        return self.handle(ChangeCombination(Combination(first, second, third)))

    def _call_on_state_changed(self, from_state: LockState, to_state: LockState):
        try:
            self.on_state_changed(from_state, to_state)
        except Exception as error:
            logger.warning("Calling on_state_changed() caused an error: %s", error)
            logger.exception(error)

    def _call_on_rejected(self, event: Event, reason: str):
        try:
            self.on_rejected(event, reason)
        except Exception as error:
            logger.warning("Calling on_rejected() caused an error: %s", error)
            logger.exception(error)

    def on_state_changed(self, from_state: LockState, to_state: LockState):
        """On state changed callback.

        Called after the lock has moved to a different state.
        """

    def on_rejected(self, event: Event, reason: str):
        """Called when an event is rejected."""
