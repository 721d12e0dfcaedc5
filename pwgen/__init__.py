"""
pwgen - cryptographically secure password generator.
"""

from .exceptions import (
    PwgenException,
    ValidationError,
    EmptyCharsetError,
    InsufficientLengthError,
    EntropySourceError,
)
from .utils.validation import PasswordConfig, validate_config, MAX_LENGTH
from .utils.password_generator import PasswordGenerator, generate_password

__version__ = "0.1.0"

__all__ = [
    "PwgenException",
    "ValidationError",
    "EmptyCharsetError",
    "InsufficientLengthError",
    "EntropySourceError",
    "PasswordConfig",
    "validate_config",
    "MAX_LENGTH",
    "PasswordGenerator",
    "generate_password",
]
