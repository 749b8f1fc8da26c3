import itertools
from typing import Callable
from typing import Optional

from .events import Combination
from .events import Event
from .state import LockState


Guard_Type = Callable[[Event, Combination], bool]
Callback_Type = Callable[[Event, Combination], Combination]


class Transition:
    """Accepting state transition.

    A transition is applicable when the lock is in one of `from_states`,
    the event is an instance of `event` and the optional `guard` returns
    True. If the guard fails, `guard_reason` is reported and the lock
    stays where it is.

    The optional `callback` returns the combination the lock holds after
    the transition. By default the combination is kept.
    """

    _transition_counter = itertools.count(1)

    def __init__(
        self,
        from_states: LockState | list[LockState],
        to_state: LockState,
        event: type[Event],
        message: str,
        name: Optional[str] = None,
        guard: Optional[Guard_Type] = None,
        guard_reason: Optional[str] = None,
        callback: Optional[Callback_Type] = None,
    ):
        transition_number = next(self._transition_counter)
        self.from_states = (
            from_states if isinstance(from_states, list) else [from_states]
        )
        self.to_state = to_state
        self.event = event
        self.message = message
        self.name = name or f"T{transition_number}"
        self.guard = guard
        self.guard_reason = guard_reason
        self.callback = callback

        for state in self.from_states:
            if not isinstance(state, LockState):
                raise ValueError(f"Expecting LockState, got {state}.")

        if not isinstance(to_state, LockState):
            raise ValueError(f"Expecting LockState, got {to_state}.")

        if not (isinstance(event, type) and issubclass(event, Event)):
            raise ValueError(f"Expecting Event type, got {event}.")

        if guard is not None and not guard_reason:
            raise ValueError("Guarded transition requires a guard_reason.")

    def __str__(self):
        return f"{self.name} [guarded]" if self.guard else self.name

    def __repr__(self):
        from_states = ", ".join(repr(s) for s in self.from_states)
        return f"{self.__class__.__name__}([{from_states}] → {self.to_state!r} : {self.name})"

    def can_transition_from(self, from_state: LockState) -> bool:
        """Is transition possible from given state to target state."""
        return from_state in self.from_states

    def is_applicable(self, event: Event, combination: Combination) -> bool:
        """Can transition be applied right now.

        Returns True if there is no guard or the guard accepts the event.
        """
        return self.guard is None or self.guard(event, combination)

    def next_combination(self, event: Event, combination: Combination) -> Combination:
        """Combination the lock holds once this transition is done."""
        if self.callback is None:
            return combination
        return self.callback(event, combination)
