from combolock import ComboLock, Combination

# Create a lock with a combination. New locks are open and unlocked.
lock = ComboLock(Combination(4, 5, 6))

# Close and lock it
print(lock.close())
print(lock.lock())

# Wrong combination is rejected, the lock stays locked
print(lock.unlock(1, 2, 3))

# Right combination unlocks
print(lock.unlock(4, 5, 6))
print(f"Current state: {lock.state}")
