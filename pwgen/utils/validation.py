"""
Configuration validation for pwgen.
"""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ValidationError

MAX_LENGTH = 4096
DEFAULT_LENGTH = 12


@dataclass(frozen=True)
class PasswordConfig:
    """Normalized, immutable password configuration."""

    length: int = DEFAULT_LENGTH
    digits: bool = False
    symbols: bool = False
    only_digits: bool = False

    def __post_init__(self) -> None:
        error_msg = get_validation_error_message(self.length, self.digits, self.symbols, self.only_digits)
        if error_msg:
            raise ValidationError(error_msg)


def get_validation_error_message(length: int,
                                 digits: bool = False,
                                 symbols: bool = False,
                                 only_digits: bool = False) -> Optional[str]:
    """
    Get a descriptive error message for an invalid configuration.

    Args:
        length: Requested password length
        digits: Include digits
        symbols: Include symbols
        only_digits: Digits-only mode

    Returns:
        Error message, or None if the configuration is valid
    """
    if isinstance(length, bool) or not isinstance(length, int):
        return "Length must be an integer"

    if length < 1:
        return "Length must be greater than zero"

    if length > MAX_LENGTH:
        return f"Length must be less than or equal to {MAX_LENGTH}"

    if only_digits and (digits or symbols):
        return "Conflicting options: --only-digits cannot be combined with --digits or --symbols"

    return None


def validate_config(length: int = DEFAULT_LENGTH,
                    digits: bool = False,
                    symbols: bool = False,
                    only_digits: bool = False) -> PasswordConfig:
    """
    Validate raw options and build a PasswordConfig.

    Raises:
        ValidationError: If the length is out of bounds or the flags conflict
    """
    error_msg = get_validation_error_message(length, digits, symbols, only_digits)
    if error_msg:
        raise ValidationError(error_msg)

    return PasswordConfig(
        length=length,
        digits=bool(digits),
        symbols=bool(symbols),
        only_digits=bool(only_digits),
    )
