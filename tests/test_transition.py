import pytest

from combolock import ChangeCombination
from combolock import Close
from combolock import Combination
from combolock import LockState
from combolock import LockStateMachine
from combolock import Transition
from combolock import Unlock


def test_can_transition():
    machine = LockStateMachine()

    assert machine.close.can_transition_from(LockState.OPEN_UNLOCKED) == True
    assert machine.close.can_transition_from(LockState.CLOSED_UNLOCKED) == False
    assert machine.close.can_transition_from(LockState.CLOSED_LOCKED) == False


def test_name():
    machine = LockStateMachine()
    transition = Transition(LockState.OPEN_UNLOCKED, LockState.CLOSED_UNLOCKED, Close, "closed")

    assert machine.unlock.name == "unlock"
    assert str(machine.unlock) == "unlock [guarded]"
    assert transition.name.startswith("T")


def test_is_applicable():
    machine = LockStateMachine()

    assert machine.close.is_applicable(Close(), Combination())
    assert machine.unlock.is_applicable(Unlock(Combination(1, 2, 3)), Combination(1, 2, 3))
    assert not machine.unlock.is_applicable(Unlock(Combination(1, 2, 4)), Combination(1, 2, 3))


def test_next_combination():
    machine = LockStateMachine()
    old = Combination(1, 2, 3)
    new = Combination(4, 5, 6)

    assert machine.close.next_combination(Close(), old) is old
    assert machine.change_combination.next_combination(ChangeCombination(new), old) is new


def test_usage():
    machine = LockStateMachine()

    assert LockState.CLOSED_UNLOCKED in machine.lock.from_states
    assert machine.lock.to_state is LockState.CLOSED_LOCKED
    assert machine.lock.message == "Locked"


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Transition("open", LockState.CLOSED_UNLOCKED, Close, "closed")

    with pytest.raises(ValueError):
        Transition(LockState.OPEN_UNLOCKED, None, Close, "closed")

    with pytest.raises(ValueError):
        Transition(LockState.OPEN_UNLOCKED, LockState.CLOSED_UNLOCKED, Close(), "closed")

    with pytest.raises(ValueError):
        Transition(
            LockState.CLOSED_LOCKED,
            LockState.CLOSED_UNLOCKED,
            Unlock,
            "unlocked",
            guard=lambda event, combination: True,
        )
