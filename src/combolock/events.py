from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass
from typing import Iterator

from .errors import CombinationError


MIN_VALUE = -128
MAX_VALUE = 127


@dataclass(frozen=True)
class Combination:
    """Combination of three dial values.

    Combinations are compared by exact positional equality, so
    Combination(1, 2, 3) does not match Combination(3, 2, 1).
    """

    first: int = 0
    second: int = 0
    third: int = 0

    def __post_init__(self):
        for value in self:
            if isinstance(value, bool) or not isinstance(value, int):
                raise CombinationError(f"Expecting int, got {value!r}.")
            if not MIN_VALUE <= value <= MAX_VALUE:
                raise CombinationError(
                    f"Combination values must be between {MIN_VALUE} and {MAX_VALUE}, got {value}."
                )

    def __iter__(self) -> Iterator[int]:
        return iter((self.first, self.second, self.third))

    def __repr__(self) -> str:
        return f"({self.first}, {self.second}, {self.third})"

    @classmethod
    def of(cls, values) -> "Combination":
        """Create combination from an iterable of exactly three values."""
        values = tuple(values)
        if len(values) != 3:
            raise CombinationError(f"Expecting three values, got {len(values)}.")
        return cls(*values)


DEFAULT_COMBINATION = Combination()


class Event:
    """Base for events applied to the lock."""

    name: str = "event"

    def __init_subclass__(cls, name=None, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.name = name or cls.__name__.lower()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Open(Event, name="open"):
    """Open the shackle."""


@dataclass(frozen=True)
class Close(Event, name="close"):
    """Close the shackle."""


@dataclass(frozen=True)
class Lock(Event, name="lock"):
    """Secure a closed lock."""


@dataclass(frozen=True)
class Unlock(Event, name="unlock"):
    """Release a locked lock with a candidate combination."""

    candidate: Combination


@dataclass(frozen=True)
class ChangeCombination(Event, name="set"):
    """Replace the combination of an open lock."""

    new: Combination


EVENT_TYPES: tuple[type[Event], ...] = (Open, Close, Lock, Unlock, ChangeCombination)


@dataclass(frozen=True)
class Outcome(ABC):
    """Result of applying an event.

    Use `accepted` to tell an Accepted outcome from a Rejected one and
    `text` to get the explanation in either case.
    """

    accepted = False

    @property
    @abstractmethod
    def text(self) -> str:
        """Message of an Accepted outcome, reason of a Rejected one."""


@dataclass(frozen=True)
class Accepted(Outcome):
    """The event was applied."""

    message: str
    accepted = True

    @property
    def text(self) -> str:
        return self.message


@dataclass(frozen=True)
class Rejected(Outcome):
    """The event is not allowed in the current state.

    Rejections are regular results; the lock is left unchanged.
    """

    reason: str

    @property
    def text(self) -> str:
        return self.reason
