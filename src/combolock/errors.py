class LockError(Exception):
    """Generic base for combination lock errors."""


class ConfigurationError(LockError):
    """Configuration error.

    Raised for example if the transition table does not cover every
    state and event pair.
    """


class InvalidStateError(LockError):
    """Raised if a lock state is not one of the known states.

    The transition table is total, so this always indicates a programming
    error rather than a user mistake.
    """


class InvalidEventError(LockError):
    """Raised if something other than an event is applied."""


class CombinationError(LockError, ValueError):
    """Raised if combination values are out of range or not integers."""


class CommandError(LockError):
    """Generic base for command line input errors.

    Command errors are reported to the user by the command driver and
    never reach the state machine.
    """


class MissingValuesError(CommandError):
    """Raised if a command needs three values but fewer were given."""


class NotNumericError(CommandError):
    """Raised if a combination value is not an integer."""


class UnknownCommandError(CommandError):
    """Raised for unrecognized commands."""
