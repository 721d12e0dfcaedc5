"""
Custom exceptions for pwgen.
"""


class PwgenException(Exception):
    """Base exception for pwgen."""

    pass


class ValidationError(PwgenException):
    """Invalid or conflicting password configuration."""

    pass


class EmptyCharsetError(PwgenException):
    """No character class resolved to a non-empty charset."""

    pass


class InsufficientLengthError(PwgenException):
    """Length is too short to include every required character class."""

    pass


class EntropySourceError(PwgenException):
    """Secure randomness is unavailable."""

    pass
