"""
Secure password generation utilities.
"""

import logging
from typing import List, Optional

from .charset import assemble_charset, describe_charset
from .sampler import SecureSampler
from .validation import DEFAULT_LENGTH, PasswordConfig, validate_config

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate secure passwords with a guaranteed character of each required class."""

    def __init__(self, config: PasswordConfig, sampler: Optional[SecureSampler] = None):
        """
        Initialize password generator.

        Args:
            config: Validated password configuration
            sampler: Secure sampler used for every random decision

        Raises:
            EmptyCharsetError: If no characters are available
            InsufficientLengthError: If the length cannot hold every required class
        """
        self.config = config
        self.sampler = sampler or SecureSampler()

        # Build character set
        self.charset, self.required_sets = assemble_charset(config)

    def generate(self) -> str:
        """
        Generate a secure password.

        Returns:
            Generated password string

        Raises:
            EntropySourceError: If secure randomness is unavailable
        """
        logger.debug(f"Generating {self.config.length}-character password ({self.get_charset_info()})")

        # One character from each required set guarantees class coverage
        password_chars: List[str] = [self.sampler.choice(chars) for chars in self.required_sets]

        for _ in range(len(password_chars), self.config.length):
            password_chars.append(self.sampler.choice(self.charset))

        # Required characters sit at the front until shuffled
        self.sampler.shuffle(password_chars)

        return "".join(password_chars)

    def meets_requirements(self, password: str) -> bool:
        """
        Check if password satisfies the configuration.

        Args:
            password: Password to check

        Returns:
            True if the length matches, every character is in the charset
            and every required set is represented
        """
        if len(password) != self.config.length:
            return False

        if any(c not in self.charset for c in password):
            return False

        password_chars = set(password)
        return all(password_chars & set(chars) for chars in self.required_sets)

    def get_charset_info(self) -> str:
        """Get human-readable description of character set."""
        return describe_charset(self.config)


def generate_password(length: int = DEFAULT_LENGTH,
                      digits: bool = False,
                      symbols: bool = False,
                      only_digits: bool = False) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (1-4096)
        digits: Include digits
        symbols: Include symbols
        only_digits: Use digits only

    Returns:
        Generated password string
    """
    config = validate_config(
        length=length,
        digits=digits,
        symbols=symbols,
        only_digits=only_digits
    )

    return PasswordGenerator(config).generate()
