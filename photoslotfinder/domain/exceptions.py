"""
Domain-specific exception hierarchy for the photoslot finder application.
"""


class PhotoslotError(Exception):
    """Base class for all application-level errors."""


class InvalidDurationError(PhotoslotError):
    """Raised when a requested booking duration is not a valid number of minutes."""


class RosterError(PhotoslotError):
    """Raised when roster data cannot be loaded or validated."""
