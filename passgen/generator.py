"""
Password generation engine.

Passwords are built one character at a time: each character is drawn
uniformly from its pool and inserted at a uniformly random position of the
password built so far, so digits and symbols are spread through the result
instead of collecting at the end.
"""

import logging
from typing import List, NamedTuple, Optional, Protocol, Sequence, Set, Tuple, Type

from . import charsets
from .exceptions import (
    DigitsExceedsAvailableError,
    ExceedsTotalLengthError,
    LettersExceedsAvailableError,
    PasswordGenerationError,
    SymbolsExceedsAvailableError,
)
from .utils.random_source import RandomSource, SystemRandomSource, draw_checked
from .utils.validation import normalize_pool, validate_count


logger = logging.getLogger(__name__)


class PoolConfig(NamedTuple):
    """
    Custom character pools. Unset or empty pools use the defaults.

    Repeated characters within a pool are kept once, so every distinct
    character is equally likely: in "aab" the letter a is drawn half the
    time, not two thirds of the time.
    """
    lower: Optional[str] = None
    upper: Optional[str] = None
    digits: Optional[str] = None
    symbols: Optional[str] = None


class GenerationRequest(NamedTuple):
    """Parameters of a single password generation."""
    total_length: int
    num_digits: int = 0
    num_symbols: int = 0
    exclude_uppercase: bool = False
    allow_repeat: bool = False


class PasswordGenerator(Protocol):
    """Anything that can generate a password, real engine or test double."""

    def generate(self, total_length: int, num_digits: int, num_symbols: int,
                 exclude_uppercase: bool = False, allow_repeat: bool = False) -> str:
        ...


class PasswordEngine:
    """Generate passwords from four immutable character pools."""

    LOWER_LETTERS = charsets.LOWER_LETTERS
    UPPER_LETTERS = charsets.UPPER_LETTERS
    DIGITS = charsets.DIGITS
    SYMBOLS = charsets.SYMBOLS

    def __init__(self,
                 pools: Optional[PoolConfig] = None,
                 random_source: Optional[RandomSource] = None):
        """
        Initialize the engine.

        Construction never fails. Empty pools are only rejected by the
        availability checks in generate().

        Args:
            pools: Custom pools, any unset pool falls back to its default
            random_source: Source of uniform integers (default: OS CSPRNG)
        """
        pools = pools or PoolConfig()

        self._lower = self._load_pool("lower", pools.lower, self.LOWER_LETTERS)
        self._upper = self._load_pool("upper", pools.upper, self.UPPER_LETTERS)
        self._digits = self._load_pool("digits", pools.digits, self.DIGITS)
        self._symbols = self._load_pool("symbols", pools.symbols, self.SYMBOLS)

        self._letters = tuple(dict.fromkeys(self._lower + self._upper))

        self.random_source: RandomSource = random_source or SystemRandomSource()

    @staticmethod
    def _load_pool(name: str, chars: Optional[str], default: str) -> Tuple[str, ...]:
        """Normalize one pool, logging fallbacks and dropped repeats."""
        pool = normalize_pool(chars, default)

        if not chars:
            logger.debug(f"Using default {name} pool")
        elif len(pool) < len(chars):
            logger.debug(f"Dropped {len(chars) - len(pool)} repeated characters from {name} pool")

        return pool

    @property
    def lower_letters(self) -> str:
        return "".join(self._lower)

    @property
    def upper_letters(self) -> str:
        return "".join(self._upper)

    @property
    def digits(self) -> str:
        return "".join(self._digits)

    @property
    def symbols(self) -> str:
        return "".join(self._symbols)

    def generate(self, total_length: int, num_digits: int, num_symbols: int,
                 exclude_uppercase: bool = False, allow_repeat: bool = False) -> str:
        """
        Generate a password.

        Args:
            total_length: Total number of characters in the password
            num_digits: Number of digits to include
            num_symbols: Number of symbols to include
            exclude_uppercase: Draw letters from the lower pool only
            allow_repeat: Allow characters to appear more than once

        Returns:
            Generated password string

        Raises:
            RangeConversionError: If a count is not a non-negative integer
            ExceedsTotalLengthError: If digits and symbols exceed total_length
            LettersExceedsAvailableError: If too many unique letters are needed
            DigitsExceedsAvailableError: If too many unique digits are needed
            SymbolsExceedsAvailableError: If too many unique symbols are needed
            EntropyError: If the random source fails
        """
        validate_count("total_length", total_length)
        validate_count("num_digits", num_digits)
        validate_count("num_symbols", num_symbols)

        letters = self._lower if exclude_uppercase else self._letters

        num_letters = total_length - (num_digits + num_symbols)
        if num_letters < 0:
            raise ExceedsTotalLengthError()

        if not allow_repeat:
            if num_letters > len(letters):
                raise LettersExceedsAvailableError()

            if num_digits > len(self._digits):
                raise DigitsExceedsAvailableError()

            if num_symbols > len(self._symbols):
                raise SymbolsExceedsAvailableError()

        result: List[str] = []
        used: Set[str] = set()

        self._draw_into(result, used, letters, num_letters, allow_repeat,
                        LettersExceedsAvailableError)
        self._draw_into(result, used, self._digits, num_digits, allow_repeat,
                        DigitsExceedsAvailableError)
        self._draw_into(result, used, self._symbols, num_symbols, allow_repeat,
                        SymbolsExceedsAvailableError)

        return "".join(result)

    def generate_request(self, request: GenerationRequest) -> str:
        """Generate a password from a GenerationRequest."""
        return self.generate(*request)

    def _draw_into(self, result: List[str], used: Set[str], pool: Sequence[str],
                   count: int, allow_repeat: bool,
                   exhausted: Type[PasswordGenerationError]) -> None:
        """Draw count characters from pool, inserting each at a random position."""
        if count == 0:
            return

        if not allow_repeat:
            # Overlapping custom pools can use up characters of a later pool
            unused = sum(1 for c in pool if c not in used)
            if unused < count:
                raise exhausted()

        drawn = 0
        while drawn < count:
            ch = random_element(pool, self.random_source)

            if not allow_repeat and ch in used:
                continue

            random_insert(result, ch, self.random_source)
            used.add(ch)
            drawn += 1


def random_element(pool: Sequence[str], source: RandomSource) -> str:
    """
    Pick one character uniformly from a pool.

    Args:
        pool: Sequence of single characters
        source: Random source

    Returns:
        The chosen character
    """
    return pool[draw_checked(source, len(pool))]


def random_insert(chars: List[str], ch: str, source: RandomSource) -> None:
    """
    Insert a character at a uniformly random position, ends included.

    Args:
        chars: Characters built so far, modified in place
        ch: Character to insert
        source: Random source
    """
    if not chars:
        chars.append(ch)
        return

    chars.insert(draw_checked(source, len(chars) + 1), ch)


def generate(total_length: int,
             num_digits: int = 0,
             num_symbols: int = 0,
             exclude_uppercase: bool = False,
             allow_repeat: bool = False) -> str:
    """
    Convenience function to generate a password with the default pools.

    Args:
        total_length: Total number of characters in the password
        num_digits: Number of digits to include
        num_symbols: Number of symbols to include
        exclude_uppercase: Draw letters from the lower pool only
        allow_repeat: Allow characters to appear more than once

    Returns:
        Generated password string
    """
    engine = PasswordEngine()

    return engine.generate(
        total_length,
        num_digits,
        num_symbols,
        exclude_uppercase=exclude_uppercase,
        allow_repeat=allow_repeat
    )


generate_password = generate
