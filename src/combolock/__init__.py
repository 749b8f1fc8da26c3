from ._version import __version__
from .errors import *
from .events import Combination
from .events import Event
from .events import Open
from .events import Close
from .events import Lock
from .events import Unlock
from .events import ChangeCombination
from .events import Outcome
from .events import Accepted
from .events import Rejected
from .state import LockState
from .state import Status
from .state import status
from .transition import Transition
from .machine import LockStateMachine
from .machine import Step
from .machine import apply
from .lock import ComboLock
