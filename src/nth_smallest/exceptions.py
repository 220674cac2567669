"""Exception hierarchy for nth-smallest.

All exceptions derive from NthSmallestError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class NthSmallestError(Exception):
    """Base exception for all nth-smallest errors."""


class InvalidArgumentError(NthSmallestError):
    """Caller-supplied input was rejected before any computation.

    Raised for an empty dataset or a rank outside ``1..len(dataset)``.
    The message is safe to surface verbatim to clients.
    """


class InternalInvariantError(NthSmallestError):
    """The selection engine reached an impossible state.

    Raised when quickselect is asked to work on an index range outside the
    buffer. Never a user error: it signals a defect in the engine and aborts
    the current call.
    """


class ConfigValidationError(NthSmallestError):
    """Configuration field validation failed.

    Raised when the configured selection strategy is not registered.
    """


class SourceAccessError(NthSmallestError):
    """The data source could not be read.

    Base class for failures that stem from the caller-supplied source
    reference; the boundary reports them as client errors.
    """


class SourceNotFoundError(SourceAccessError):
    """The source path does not exist."""


class NotAFileError(SourceAccessError):
    """The source path points at a directory, not a file."""


class WrongFormatError(SourceAccessError):
    """The source is not a recognised or readable tabular file."""
