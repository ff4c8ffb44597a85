"""Entropy sources for rolling dice.

The evaluator only needs one operation: the next die value in [1, sides].
Anything with a ``roll_die`` method works, which keeps the evaluator
indifferent to where its randomness comes from.

Seeded rolls use CPython's ``random.Random`` (Mersenne Twister, MT19937)
seeded with the 32 seed bytes read as a big-endian unsigned integer. Each
die is ``Random.randint(1, sides)``, which maps generator output onto the
range by rejection sampling over ``getrandbits``, so there is no modulo
bias. For a given seed the sequence is the same on every platform and
every run.
"""

import random
from typing import Protocol

from .exceptions import InvalidSeedError

SEED_LENGTH = 32


class RandomSource(Protocol):
    """Produces die values."""

    def roll_die(self, sides: int) -> int:
        """Return the next value in [1, sides]."""
        ...


class AmbientRandomSource:
    """Rolls from the process-wide ``random`` module generator."""

    def roll_die(self, sides: int) -> int:
        return random.randint(1, sides)


class SeededRandomSource:
    """Rolls from a private generator derived only from a 32-byte seed."""

    def __init__(self, seed: bytes) -> None:
        """Initialize the generator.

        Args:
            seed: Exactly 32 bytes

        Raises:
            InvalidSeedError: If the seed is not 32 bytes long
        """
        if len(seed) != SEED_LENGTH:
            raise InvalidSeedError(len(seed))
        self._rng = random.Random(int.from_bytes(seed, "big"))

    def roll_die(self, sides: int) -> int:
        return self._rng.randint(1, sides)
