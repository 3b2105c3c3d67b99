"""Error taxonomy for recipe generation and persistence."""


class LeftoverChefError(Exception):
    """Base error for the application."""


class ValidationError(LeftoverChefError):
    """Raised when generation input cannot produce a recipe."""


class RemoteUnavailable(LeftoverChefError):
    """Raised when the remote generator is missing, unreachable or timed out."""


class MalformedRemoteResponse(LeftoverChefError):
    """Raised when the remote generator returns unusable content."""


class PersistenceWriteFailure(LeftoverChefError):
    """Raised by storage adapters when a value cannot be written."""


class PersistenceReadCorruption(LeftoverChefError):
    """Raised when a stored value cannot be decoded."""


class PersistenceReadFailure(LeftoverChefError):
    """Raised when storage cannot be reached to read a value."""
