"""
passgen - cryptographically secure password generation.

Provides a password engine with configurable character pools and a
package-level generate() shortcut using the default pools.
"""

from .charsets import DIGITS, LOWER_LETTERS, SYMBOLS, UPPER_LETTERS
from .exceptions import (
    DigitsExceedsAvailableError,
    EntropyError,
    ExceedsTotalLengthError,
    LettersExceedsAvailableError,
    PasswordGenerationError,
    RangeConversionError,
    SymbolsExceedsAvailableError,
)
from .generator import (
    GenerationRequest,
    PasswordEngine,
    PasswordGenerator,
    PoolConfig,
    generate,
    generate_password,
)
from .mock import MockGenerator
from .utils import FixedRandomSource, RandomSource, SystemRandomSource

__version__ = "0.1.0"

__all__ = [
    'DIGITS',
    'LOWER_LETTERS',
    'SYMBOLS',
    'UPPER_LETTERS',
    'DigitsExceedsAvailableError',
    'EntropyError',
    'ExceedsTotalLengthError',
    'LettersExceedsAvailableError',
    'PasswordGenerationError',
    'RangeConversionError',
    'SymbolsExceedsAvailableError',
    'GenerationRequest',
    'PasswordEngine',
    'PasswordGenerator',
    'PoolConfig',
    'generate',
    'generate_password',
    'MockGenerator',
    'FixedRandomSource',
    'RandomSource',
    'SystemRandomSource',
]
