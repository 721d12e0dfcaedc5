"""
Character classes and charset assembly.
"""

import logging
from typing import List, Tuple

from ..exceptions import EmptyCharsetError, InsufficientLengthError
from .validation import PasswordConfig

logger = logging.getLogger(__name__)

LETTERS_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LETTERS_LOWER = "abcdefghijklmnopqrstuvwxyz"
LETTERS = LETTERS_UPPER + LETTERS_LOWER
DIGITS = "0123456789"
SYMBOLS = "!@#$%&*_+-=.?"


def build_charset(config: PasswordConfig) -> Tuple[str, List[str]]:
    """
    Build the sampling charset and the list of required sets.

    Letters form a single required group: either case satisfies it.

    Args:
        config: Validated password configuration

    Returns:
        Tuple of (charset, required_sets)
    """
    if config.only_digits:
        return DIGITS, [DIGITS]

    charset = LETTERS
    required_sets = [LETTERS]

    if config.digits:
        charset += DIGITS
        required_sets.append(DIGITS)

    if config.symbols:
        charset += SYMBOLS
        required_sets.append(SYMBOLS)

    return charset, required_sets


def assemble_charset(config: PasswordConfig) -> Tuple[str, List[str]]:
    """
    Build the charset and check it can satisfy the configuration.

    Raises:
        EmptyCharsetError: If no characters are available
        InsufficientLengthError: If length cannot hold one character per required set
    """
    charset, required_sets = build_charset(config)

    if not charset:
        raise EmptyCharsetError("Empty charset: enable at least one character class")

    if config.length < len(required_sets):
        raise InsufficientLengthError(
            f"Length must be at least {len(required_sets)} to include all required classes"
        )

    logger.debug(f"Charset of {len(charset)} characters, {len(required_sets)} required sets")
    return charset, required_sets


def describe_charset(config: PasswordConfig) -> str:
    """Get human-readable description of the enabled character classes."""
    if config.only_digits:
        return "digits only"

    parts = ["letters"]
    if config.digits:
        parts.append("digits")
    if config.symbols:
        parts.append("symbols")

    return ", ".join(parts)
