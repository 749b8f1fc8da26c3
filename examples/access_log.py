from dataclasses import dataclass
from datetime import datetime

from combolock import ComboLock, Event, LockState


@dataclass
class Entry:
    """Access log entry."""
    event: str
    when: str


class LoggedLock(ComboLock):
    """Lock that records state changes and refused attempts."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.access_log: list[Entry] = []

    def on_state_changed(self, from_state: LockState, to_state: LockState):
        self.access_log.append(Entry(to_state.label, datetime.now().isoformat()))

    def on_rejected(self, event: Event, reason: str):
        self.access_log.append(Entry(f"{event} refused: {reason}", datetime.now().isoformat()))


lock = LoggedLock()
lock.close()
lock.lock()
lock.unlock(9, 9, 9)
lock.unlock(0, 0, 0)
lock.open()

for entry in lock.access_log:
    print(f"Event: {entry.event}, Time: {entry.when}")
