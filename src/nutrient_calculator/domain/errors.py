"""Application error types."""


class PersistenceFailure(RuntimeError):
    """A store read, write or subscription poll failed."""


class SessionStateError(RuntimeError):
    """The requested action is not allowed in the current session state."""
