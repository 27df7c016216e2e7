"""Exception types for Källkollen."""


class KallkollenError(Exception):
    """Base class for all Källkollen errors."""


class InvalidTransitionError(KallkollenError):
    """A session operation was called from a stage where it is not allowed."""


class ContentConfigurationError(KallkollenError):
    """The static fallback content is missing items or malformed."""
