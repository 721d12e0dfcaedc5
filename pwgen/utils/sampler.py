"""
Cryptographically secure sampling primitives.

All random decisions (character draws and shuffle partners) go through
SecureSampler so that an entropy failure surfaces as EntropySourceError
instead of falling back to a non-secure generator.
"""

import secrets
from typing import Callable, List, Optional, Sequence, TypeVar

from ..exceptions import EntropySourceError

T = TypeVar("T")


class SecureSampler:
    """Uniform index selection backed by the OS CSPRNG."""

    def __init__(self, randbelow: Optional[Callable[[int], int]] = None):
        """
        Initialize sampler.

        Args:
            randbelow: Function returning a uniform int in [0, n).
                Defaults to secrets.randbelow; override only in tests.
        """
        self._randbelow = randbelow or secrets.randbelow

    def index(self, n: int) -> int:
        """
        Draw a uniformly random index in [0, n).

        Raises:
            ValueError: If n is less than 1
            EntropySourceError: If the entropy source fails
        """
        if n < 1:
            raise ValueError("Cannot sample from an empty range")

        try:
            return self._randbelow(n)
        except (OSError, NotImplementedError) as e:
            raise EntropySourceError(f"Secure random source unavailable: {e}") from e

    def choice(self, sequence: Sequence[T]) -> T:
        """Draw a uniformly random element from a non-empty sequence."""
        if not sequence:
            raise ValueError("Cannot choose from an empty sequence")

        return sequence[self.index(len(sequence))]

    def shuffle(self, items: List[T]) -> None:
        """Shuffle items in place (Fisher-Yates)."""
        for i in range(len(items) - 1, 0, -1):
            j = self.index(i + 1)
            items[i], items[j] = items[j], items[i]
