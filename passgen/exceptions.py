"""
Custom exceptions for passgen.
"""


class PasswordGenerationError(Exception):
    """Base exception for passgen."""

    message = "password generation failed"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.message)


class ExceedsTotalLengthError(PasswordGenerationError):
    """Digits and symbols together exceed the requested total length."""

    message = "number of digits and symbols must be less than total length"


class LettersExceedsAvailableError(PasswordGenerationError):
    """More unique letters requested than the letter pool holds."""

    message = "number of letters exceeds available letters and repeats are not allowed"


class DigitsExceedsAvailableError(PasswordGenerationError):
    """More unique digits requested than the digit pool holds."""

    message = "number of digits exceeds available digits and repeats are not allowed"


class SymbolsExceedsAvailableError(PasswordGenerationError):
    """More unique symbols requested than the symbol pool holds."""

    message = "number of symbols exceeds available symbols and repeats are not allowed"


class EntropyError(PasswordGenerationError):
    """The random source failed."""

    message = "random source failed"


class RangeConversionError(PasswordGenerationError):
    """A numeric value could not be represented in the required range."""

    message = "value cannot be represented in the required range"
