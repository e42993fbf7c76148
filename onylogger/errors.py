class OnyloggerError(Exception):
    """Base class for onylogger errors."""

class NoSelectionError(OnyloggerError):
    """Raised when the option selector exits without a choice."""

    def __init__(self, message: str = "no option was selected"):
        super().__init__(message)

class EmptyOptionsError(OnyloggerError, ValueError):
    """Raised when the option selector is given nothing to choose from."""

class SpinnerStateError(OnyloggerError, RuntimeError):
    """Raised when a spinner is started twice or restarted after stopping."""
