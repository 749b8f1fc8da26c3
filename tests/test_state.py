import pytest

from combolock import InvalidStateError
from combolock import LockState
from combolock import Status
from combolock import status


def test_states():
    assert [s.value for s in LockState] == ["OpenUnlocked", "ClosedUnlocked", "ClosedLocked"]


def test_status():
    assert status(LockState.OPEN_UNLOCKED) == Status(True, False, "Unlocked and Open")
    assert status(LockState.CLOSED_UNLOCKED) == Status(False, False, "Unlocked and Closed")
    assert status(LockState.CLOSED_LOCKED) == Status(False, True, "Locked")


def test_never_open_and_locked():
    for state in LockState:
        assert not (state.is_open and state.is_locked)


def test_names():
    assert str(LockState.CLOSED_LOCKED) == "Locked"
    assert repr(LockState.CLOSED_LOCKED) == "ClosedLocked"


def test_invalid_state():
    with pytest.raises(InvalidStateError):
        status("OpenUnlocked")
