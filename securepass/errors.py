"""
securepass.errors
Exception types raised by the generator and surfaced by the CLI / web API.
"""


class SecurePassError(Exception):
    """Base class for all securepass errors."""


class InvalidRequest(SecurePassError, ValueError):
    """Raised when generation options are out of bounds or inconsistent."""


class RandomSourceUnavailable(SecurePassError, RuntimeError):
    """Raised when the OS secure random source is missing or failing."""
