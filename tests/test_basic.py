"""
Basic functionality tests for passgen.
"""

import pytest

from passgen.exceptions import (
    DigitsExceedsAvailableError,
    EntropyError,
    ExceedsTotalLengthError,
    LettersExceedsAvailableError,
    PasswordGenerationError,
    RangeConversionError,
    SymbolsExceedsAvailableError,
)
from passgen.utils.validation import (
    get_pool_warning,
    is_count,
    normalize_pool,
    validate_count,
)


class TestValidation:
    """Test input validation."""

    def test_valid_counts(self):
        """Test that non-negative integers pass validation."""
        for value in [0, 1, 16, 1000]:
            assert is_count(value), f"{value!r} should be a valid count"
            assert validate_count("length", value) == value

    def test_invalid_counts(self):
        """Test that other values fail validation."""
        invalid_counts = [
            -1,
            2.0,
            "8",
            None,
            True,
        ]

        for value in invalid_counts:
            assert not is_count(value), f"{value!r} should be an invalid count"

    def test_validate_count_message(self):
        """Test the error raised for an invalid count."""
        with pytest.raises(RangeConversionError, match="num_digits must be a non-negative integer"):
            validate_count("num_digits", -3)

    def test_normalize_pool(self):
        """Test pool normalization."""
        assert normalize_pool("abc", "xyz") == ("a", "b", "c")
        assert normalize_pool("", "xyz") == ("x", "y", "z")
        assert normalize_pool(None, "xyz") == ("x", "y", "z")
        assert normalize_pool("abcabd", "xyz") == ("a", "b", "c", "d")

    def test_normalize_pool_code_points(self):
        """Test that pools are split on characters, not bytes."""
        pool = normalize_pool("a€ß字", "")

        assert pool == ("a", "€", "ß", "字")
        assert len(pool) == 4

    def test_pool_warning(self):
        """Test warnings for repeated pool characters."""
        assert get_pool_warning(None) is None
        assert get_pool_warning("") is None
        assert get_pool_warning("abc") is None
        assert get_pool_warning("abcab") == "Pool contains repeated characters: a, b"


class TestExceptions:
    """Test the error taxonomy."""

    def test_hierarchy(self):
        """Test that every error derives from the base error."""
        for error in [
            ExceedsTotalLengthError,
            LettersExceedsAvailableError,
            DigitsExceedsAvailableError,
            SymbolsExceedsAvailableError,
            EntropyError,
            RangeConversionError,
        ]:
            assert issubclass(error, PasswordGenerationError)

    def test_default_messages(self):
        """Test the fixed message of each error kind."""
        assert str(ExceedsTotalLengthError()) == (
            "number of digits and symbols must be less than total length"
        )
        assert str(LettersExceedsAvailableError()) == (
            "number of letters exceeds available letters and repeats are not allowed"
        )
        assert str(DigitsExceedsAvailableError()) == (
            "number of digits exceeds available digits and repeats are not allowed"
        )
        assert str(SymbolsExceedsAvailableError()) == (
            "number of symbols exceeds available symbols and repeats are not allowed"
        )

    def test_custom_message(self):
        """Test overriding the message."""
        assert str(EntropyError("no entropy")) == "no entropy"

    def test_kinds_are_distinct(self):
        """Test that error kinds do not catch each other."""
        with pytest.raises(DigitsExceedsAvailableError):
            try:
                raise DigitsExceedsAvailableError()
            except SymbolsExceedsAvailableError:
                pytest.fail("DigitsExceedsAvailableError caught as SymbolsExceedsAvailableError")
