import logging
from typing import Callable
from typing import Optional

from .diagram import OVERVIEW
from .diagram import create_state_diagram
from .diagram import draw
from .diagram import show_state_diagram
from .errors import CommandError
from .errors import CombinationError
from .errors import MissingValuesError
from .errors import NotNumericError
from .errors import UnknownCommandError
from .events import ChangeCombination
from .events import Close
from .events import Combination
from .events import DEFAULT_COMBINATION
from .events import Event
from .events import Lock
from .events import Open
from .events import Outcome
from .events import Unlock
from .lock import ComboLock

logger = logging.getLogger("CommandDriver")

PROMPT = "Enter command: "

# Seconds the browser gets to load the diagram page before it is deleted.
SHOW_DELAY = 1.0

HELP = f"""Lock State Machine Demo Help Info

This demo program simulates a mechanical combination lock via a finite state machine.

State Diagram:
{OVERVIEW}
Possible Commands:

    new [<number> <number> <number>]
        Creates a new lock. Uses the given combination if provided, otherwise 0 0 0.

    set <number> <number> <number>
        Changes the lock's combination. Lock must be unlocked and open.

    open
        Opens the lock's shackle. Lock must be closed and unlocked.

    close
        Closes the lock's shackle.

    lock
        Secures the lock. Lock must be closed.

    unlock <number> <number> <number>
        Unsecures the lock if the numbers match the lock's combination.
        Lock must be locked.

    info, status
        Prints information about the lock's state.

    debug
        Prints extended information about the lock and its state.

    diagram [show]
        Prints the state diagram in Mermaid syntax. 'show' opens it in a web browser.

    quit, exit
        Exits the program.

    help, h, ?
        Displays this help information."""


def parse_combination(tokens: list[str]) -> Combination:
    """Parse the three combination values following a command word.

    `tokens` is the whole command line split on whitespace; tokens[1:4]
    are used and the rest ignored.

    Raises MissingValuesError, NotNumericError or CombinationError.
    """
    values = tokens[1:4]
    if len(values) < 3:
        raise MissingValuesError("Three numeric values required")
    try:
        numbers = [int(value) for value in values]
    except ValueError:
        raise NotNumericError("All values must be numeric") from None
    return Combination(*numbers)


class CommandDriver:
    """Interactive command loop for a ComboLock.

    Turns command lines into events, hands them to the lock and writes
    the outcome followed by a drawing of the lock.

    Usage:
        driver = CommandDriver()
        driver.execute("close")
        driver.execute("lock")
        driver.run()  # reads commands from stdin until 'exit'
    """

    def __init__(
        self,
        lock: Optional[ComboLock] = None,
        write: Callable[[str], None] = print,
    ):
        self.lock = ComboLock() if lock is None else lock
        self._write = write
        self._commands: dict[str, Callable[[list[str]], bool]] = {
            "new": self._new,
            "set": self._event_command(lambda tokens: ChangeCombination(parse_combination(tokens))),
            "open": self._event_command(lambda tokens: Open()),
            "close": self._event_command(lambda tokens: Close()),
            "lock": self._event_command(lambda tokens: Lock()),
            "unlock": self._event_command(lambda tokens: Unlock(parse_combination(tokens))),
            "info": self._status,
            "status": self._status,
            "debug": self._debug,
            "diagram": self._diagram,
            "exit": self._exit,
            "quit": self._exit,
            "help": self._help,
            "h": self._help,
            "?": self._help,
        }

    def info(self, message: str):
        self._write(f"[INFO] {message}")

    def error(self, message: str):
        self._write(f"[ERROR] {message}")

    def done(self, message: str):
        self._write(f"[DONE] {message}")

    def report(self, outcome: Outcome):
        """Write an outcome as a success or an error line."""
        if outcome.accepted:
            self.done(outcome.text)
        else:
            self.error(outcome.text)

    def show_status(self):
        self._write(draw(self.lock.state))

    def execute(self, line: str) -> bool:
        """Execute a single command line.

        Returns False when the loop should stop.
        """
        tokens = line.split()
        if not tokens:
            return True

        command = tokens[0].lower()
        logger.debug("Executing %r.", line.strip())

        try:
            handler = self._commands.get(command)
            if handler is None:
                raise UnknownCommandError(
                    f"Unknown command ({line.strip()}) ('help' for help)"
                )
            return handler(tokens)
        except (CommandError, CombinationError) as error:
            self.error(str(error))
            return True

    def run(self, read: Callable[[str], str] = input):
        """Read and execute commands until 'exit' or end of input."""
        self._write("Finite State Machine Lock Demo\n")
        self.show_status()

        while True:
            try:
                line = read(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._write("")
                break

            if not self.execute(line):
                break

            self._write("")

        logger.debug("Command loop finished.")

    def _event_command(self, build: Callable[[list[str]], Event]) -> Callable[[list[str]], bool]:
        def handler(tokens: list[str]) -> bool:
            self.report(self.lock.handle(build(tokens)))
            self.show_status()
            return True

        return handler

    def _new(self, tokens: list[str]) -> bool:
        combination = DEFAULT_COMBINATION

        if len(tokens) > 1:
            try:
                combination = parse_combination(tokens)
            except (CommandError, CombinationError) as error:
                self.error(str(error))

        if combination is DEFAULT_COMBINATION:
            self.info("Creating a new lock using default combination (0 0 0)...")
        else:
            self.info("Creating a new lock using provided combination (* * *)...")

        self.lock = self.lock.__class__(combination, machine=self.lock.machine)
        self.show_status()
        return True

    def _status(self, tokens: list[str]) -> bool:
        self.show_status()
        return True

    def _debug(self, tokens: list[str]) -> bool:
        self._write(repr(self.lock))
        return True

    def _diagram(self, tokens: list[str]) -> bool:
        if len(tokens) > 1 and tokens[1].lower() == "show":
            show_state_diagram(self.lock.machine, delay=SHOW_DELAY)
        else:
            self._write(create_state_diagram(self.lock.machine))
        return True

    def _help(self, tokens: list[str]) -> bool:
        self.info(HELP)
        return True

    def _exit(self, tokens: list[str]) -> bool:
        return False
