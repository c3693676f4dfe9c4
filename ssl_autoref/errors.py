class AutoRefError(Exception):
    """Base class for errors raised by the AutoRef."""


class ProfileError(AutoRefError):
    """Raised when a profile file is malformed."""
