import logging
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError
from .errors import InvalidEventError
from .errors import InvalidStateError
from .events import Accepted
from .events import ChangeCombination
from .events import Close
from .events import Combination
from .events import EVENT_TYPES
from .events import Event
from .events import Lock
from .events import Open
from .events import Outcome
from .events import Rejected
from .events import Unlock
from .state import LockState
from .transition import Callback_Type
from .transition import Guard_Type
from .transition import Transition

logger = logging.getLogger("LockStateMachine")


@dataclass(frozen=True)
class Step:
    """Result of applying an event: the next state, combination and outcome."""

    state: LockState
    combination: Combination
    outcome: Outcome

    def __iter__(self):
        return iter((self.state, self.combination, self.outcome))

    @property
    def accepted(self) -> bool:
        return self.outcome.accepted


def _event_type(event: Event) -> type[Event]:
    for event_type in EVENT_TYPES:
        if isinstance(event, event_type):
            return event_type
    raise InvalidEventError(f"Expecting one of {[e.__name__ for e in EVENT_TYPES]}, got {event!r}.")


def _combination_matches(event: Unlock, combination: Combination) -> bool:
    return event.candidate == combination


def _replace_combination(event: ChangeCombination, combination: Combination) -> Combination:
    return event.new


class LockStateMachine:
    """Combination lock state machine.

    The machine holds the transition table only. The current state and the
    combination are passed in by the caller and `apply()` returns the next
    ones without side effects, so one machine can serve any number of locks.

    Usage:
        machine = LockStateMachine()
        step = machine.apply(LockState.OPEN_UNLOCKED, Combination(), Close())
        step.state    # LockState.CLOSED_UNLOCKED
        step.outcome  # Accepted(message='Lock closed')

    Every event is valid in every state. Events the lock cannot carry out
    are answered with a Rejected outcome and leave the state unchanged.
    """

    def __init__(self):
        self._transitions: list[Transition] = []
        self._rejections: dict[tuple[LockState, type[Event]], str] = {}

        open_unlocked = LockState.OPEN_UNLOCKED
        closed_unlocked = LockState.CLOSED_UNLOCKED
        closed_locked = LockState.CLOSED_LOCKED

        # Define transitions
        self.close = self.connect(open_unlocked, closed_unlocked, Close, "Lock closed", name="close")
        self.open = self.connect(closed_unlocked, open_unlocked, Open, "Lock opened", name="open")
        self.lock = self.connect(closed_unlocked, closed_locked, Lock, "Locked", name="lock")
        self.unlock = self.connect(
            closed_locked,
            closed_unlocked,
            Unlock,
            "Valid combination, unlocked",
            name="unlock",
            guard=_combination_matches,
            guard_reason="invalid combination",
        )
        self.change_combination = self.connect(
            open_unlocked,
            open_unlocked,
            ChangeCombination,
            "Combination changed",
            name="set",
            callback=_replace_combination,
        )

        # Define rejections
        self.reject(open_unlocked, Open, "already open")
        self.reject(open_unlocked, Lock, "must close first")
        self.reject([open_unlocked, closed_unlocked], Unlock, "already unlocked")
        self.reject([closed_unlocked, closed_locked], Close, "already closed")
        self.reject(closed_unlocked, ChangeCombination, "must be open")
        self.reject(closed_locked, Open, "locked, cannot open")
        self.reject(closed_locked, Lock, "already locked")
        self.reject(closed_locked, ChangeCombination, "must be open and unlocked")

        self.validate()

    def __str__(self):
        return self.__class__.__name__

    def connect(
        self,
        from_states: LockState | list[LockState],
        to_state: LockState,
        event: type[Event],
        message: str,
        name: Optional[str] = None,
        guard: Optional[Guard_Type] = None,
        guard_reason: Optional[str] = None,
        callback: Optional[Callback_Type] = None,
    ) -> Transition:
        """Register a state transition between given states.

        The transition is taken when `event` is applied while the lock is in
        one of `from_states` and the optional `guard` accepts the event.
        `message` is returned as the Accepted outcome.

        Calling connect() equals to:
            transition = Transition(from_states, to_state, event, message, ...)
            machine.add_transition(transition)

        Returns the created transition object.
        """
        transition = Transition(
            from_states=from_states,
            to_state=to_state,
            event=event,
            message=message,
            name=name,
            guard=guard,
            guard_reason=guard_reason,
            callback=callback,
        )
        self.add_transition(transition)
        return transition

    def add_transition(self, transition: Transition):
        """Register a transition object."""
        if not isinstance(transition, Transition):
            raise ConfigurationError(f"Expecting Transition but got {transition}.")
        for state in transition.from_states:
            self._check_unique(state, transition.event)
        self._transitions.append(transition)

    def reject(
        self,
        states: LockState | list[LockState],
        event: type[Event],
        reason: str,
    ):
        """Register the reason `event` is refused in the given states."""
        for state in states if isinstance(states, list) else [states]:
            if not isinstance(state, LockState):
                raise ConfigurationError(f"Expecting LockState, got {state}.")
            self._check_unique(state, event)
            self._rejections[(state, event)] = reason

    def _check_unique(self, state: LockState, event: type[Event]):
        if (state, event) in self._rejections or self._find_transition(state, event):
            raise ConfigurationError(
                f"Event '{event.name}' is already handled in state '{state!r}'."
            )

    def _find_transition(self, state: LockState, event: type[Event]) -> Optional[Transition]:
        for t in self._transitions:
            if t.event is event and t.can_transition_from(state):
                return t
        return None

    def validate(self):
        """Check that every state has an answer to every event.

        Raises ConfigurationError listing the uncovered pairs.
        """
        missing = [
            f"{state!r}/{event.name}"
            for state in LockState
            for event in EVENT_TYPES
            if (state, event) not in self._rejections and not self._find_transition(state, event)
        ]
        if missing:
            raise ConfigurationError(
                f"{self} does not handle: {', '.join(missing)}."
            )
        self._log_states()

    def _log_states(self):
        lines = [f"{self} states and transitions:"]
        for t in self.transitions():
            from_states = f"[{', '.join([repr(s) for s in t.from_states])}]"
            line = f"  {from_states} → {t.to_state!r} : {t}"
            lines.append(line)
        logger.debug("\n".join(lines))

    def transitions(self) -> list[Transition]:
        """Get transitions as a list."""
        return self._transitions

    def events(self, state: LockState) -> list[type[Event]]:
        """Get the event types accepted in the given state.

        Guarded transitions are included; whether they succeed depends on
        the event.
        """
        return [e for e in EVENT_TYPES if self._find_transition(state, e)]

    def apply(self, state: LockState, combination: Combination, event: Event) -> Step:
        """Apply an event to a lock in the given state.

        Returns the next state and combination together with the outcome.
        A rejected event returns the given state and combination unchanged.

        Subclasses of the five events follow the rules of the event they
        extend.

        Raises InvalidStateError or InvalidEventError if called with
        something that is not a LockState or one of the lock events.
        """
        if not isinstance(state, LockState):
            raise InvalidStateError(f"Expecting LockState, got {state!r}.")

        event_type = _event_type(event)

        logger.debug("Applying '%s' in state %r.", event, state)

        transition = self._find_transition(state, event_type)

        if transition is not None:
            if transition.is_applicable(event, combination):
                step = Step(
                    state=transition.to_state,
                    combination=transition.next_combination(event, combination),
                    outcome=Accepted(transition.message),
                )
                logger.debug("State changed from %r to %r.", state, step.state)
                return step
            reason = transition.guard_reason
        else:
            try:
                reason = self._rejections[(state, event_type)]
            except KeyError:
                raise InvalidStateError(
                    f"No rule for '{event}' in state {state!r}."
                ) from None

        logger.debug("Rejected '%s' in state %r: %s.", event, state, reason)
        return Step(state=state, combination=combination, outcome=Rejected(reason))


def apply(state: LockState, combination: Combination, event: Event) -> Step:
    """Apply an event using the default lock state machine."""
    return default_machine().apply(state, combination, event)


_default_machine: Optional[LockStateMachine] = None


def default_machine() -> LockStateMachine:
    """Shared LockStateMachine instance."""
    global _default_machine
    if _default_machine is None:
        _default_machine = LockStateMachine()
    return _default_machine
