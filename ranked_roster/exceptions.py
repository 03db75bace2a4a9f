"""
Exception classes for the ranked roster system.

Centralized location for all custom exceptions to avoid circular imports.
"""


class RosterError(Exception):
    """Base exception for all roster-related errors."""
    pass


class ValidationError(RosterError):
    """Raised when user-supplied names, scores or seed data are invalid."""
    pass


class ConfigurationError(RosterError):
    """Base exception for configuration-related errors."""
    pass


class CapacityError(RosterError):
    """Raised when the roster already holds the maximum number of entries."""
    pass


class RosterBusyError(RosterError):
    """Raised when an intent arrives while another one is still being applied."""
    pass
