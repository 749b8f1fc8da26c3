from combolock import Close, Combination, Lock, LockState, Unlock, apply

# apply() does not keep any state. It returns the next state and
# combination and leaves it to the caller to store them.
state = LockState.OPEN_UNLOCKED
combination = Combination(1, 2, 3)

for event in [Lock(), Close(), Lock(), Unlock(Combination(3, 2, 1)), Unlock(combination)]:
    state, combination, outcome = apply(state, combination, event)
    print(f"{str(event):<8} {outcome.text:<30} → {state!r}")
