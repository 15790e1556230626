"""
Random sources used by the password engine.

A random source supplies uniformly distributed integers in ``[0, bound)``.
The engine only ever calls ``draw_uniform``, so any object with that method
can be injected, which is how tests replace the OS generator with a fixed
sequence.
"""

import secrets
import logging
from typing import Iterable, List, Protocol

from ..exceptions import EntropyError, RangeConversionError


logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Capability supplying uniform integers in ``[0, bound)``."""

    def draw_uniform(self, bound: int) -> int:
        ...


class SystemRandomSource:
    """Random source backed by the operating system CSPRNG."""

    def draw_uniform(self, bound: int) -> int:
        """
        Draw a uniform integer in ``[0, bound)``.

        Args:
            bound: Exclusive upper bound, must be positive

        Returns:
            Random integer

        Raises:
            RangeConversionError: If bound is not a positive integer
            EntropyError: If the OS entropy source is unavailable
        """
        check_bound(bound)

        try:
            return secrets.randbelow(bound)
        except (OSError, NotImplementedError) as e:
            raise EntropyError(f"random source failed: {e}") from e


class FixedRandomSource:
    """Random source replaying a fixed sequence of values."""

    def __init__(self, values: Iterable[int]):
        """
        Initialize with the values to replay.

        Args:
            values: Integers returned by successive draws, in order
        """
        self.values: List[int] = list(values)
        self.position = 0
        self.bounds: List[int] = []

    def draw_uniform(self, bound: int) -> int:
        check_bound(bound)
        self.bounds.append(bound)

        if self.position >= len(self.values):
            raise EntropyError("fixed random source exhausted")

        value = self.values[self.position]
        self.position += 1
        return value

    @property
    def remaining(self) -> int:
        """Number of values not yet drawn."""
        return len(self.values) - self.position


def check_bound(bound: int) -> None:
    """Reject bounds that cannot describe a non-empty range."""
    if isinstance(bound, bool) or not isinstance(bound, int) or bound <= 0:
        raise RangeConversionError(f"draw bound must be a positive integer, got {bound!r}")


def draw_checked(source: RandomSource, bound: int) -> int:
    """
    Draw from a source and verify the result lies in ``[0, bound)``.

    Args:
        source: Random source to draw from
        bound: Exclusive upper bound

    Returns:
        Random integer in range

    Raises:
        RangeConversionError: If the bound or the drawn value is out of range
        EntropyError: If the source fails
    """
    check_bound(bound)
    value = source.draw_uniform(bound)

    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < bound:
        logger.debug(f"Random source returned {value!r} for bound {bound}")
        raise RangeConversionError(f"random value {value!r} outside [0, {bound})")

    return value
