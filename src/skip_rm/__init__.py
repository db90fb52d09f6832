"""skip-rm — skip important files and dirs before handing arguments to rm."""

__version__ = "0.1.0"


class SkipRmError(Exception):
    """User-facing startup error.

    Raised for a missing or invalid configuration, an unreadable pattern
    list, a malformed pattern, or a command that cannot be started. The
    message is printed to stderr and the process exits with code 1.
    """
