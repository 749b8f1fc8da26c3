from dataclasses import dataclass
from enum import Enum

from .errors import InvalidStateError


class LockState(Enum):
    """LockState represents the configuration of a combination lock.

    The lock is always in exactly one of three states. A lock that is
    open and locked at the same time cannot be represented.

    Usage:
        state = LockState.OPEN_UNLOCKED
        state.is_open    # True
        state.is_locked  # False
        state.label      # "Unlocked and Open"
    """

    OPEN_UNLOCKED = "OpenUnlocked"
    CLOSED_UNLOCKED = "ClosedUnlocked"
    CLOSED_LOCKED = "ClosedLocked"

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return self.value

    @property
    def is_open(self) -> bool:
        """Is the shackle open."""
        return self is LockState.OPEN_UNLOCKED

    @property
    def is_locked(self) -> bool:
        """Is the lock secured."""
        return self is LockState.CLOSED_LOCKED

    @property
    def label(self) -> str:
        """Human readable name of the state."""
        return _LABELS[self]


_LABELS = {
    LockState.OPEN_UNLOCKED: "Unlocked and Open",
    LockState.CLOSED_UNLOCKED: "Unlocked and Closed",
    LockState.CLOSED_LOCKED: "Locked",
}

INITIAL_STATE = LockState.OPEN_UNLOCKED


@dataclass(frozen=True)
class Status:
    """Status of a lock as shown to the user."""

    is_open: bool
    is_locked: bool
    label: str


def status(state: LockState) -> Status:
    """Derive the status of the given state.

    Raises InvalidStateError if `state` is not a LockState.
    """
    if not isinstance(state, LockState):
        raise InvalidStateError(f"Expecting LockState, got {state!r}.")
    return Status(is_open=state.is_open, is_locked=state.is_locked, label=state.label)
