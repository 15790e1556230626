"""
Input validation utilities for passgen.
"""

from typing import Optional, Tuple

from ..exceptions import RangeConversionError


def is_count(value: object) -> bool:
    """
    Check whether a value can be used as a character count.

    Args:
        value: The value to check

    Returns:
        True if value is a non-negative integer, False otherwise
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False

    return value >= 0


def validate_count(name: str, value: object) -> int:
    """
    Validate a character count.

    Args:
        name: Parameter name, used in the error message
        value: The count to validate

    Returns:
        The count unchanged

    Raises:
        RangeConversionError: If the count is negative or not an integer
    """
    if not is_count(value):
        raise RangeConversionError(f"{name} must be a non-negative integer, got {value!r}")

    return value  # type: ignore[return-value]


def normalize_pool(chars: Optional[str], default: str) -> Tuple[str, ...]:
    """
    Normalize a character pool into a tuple of distinct code points.

    Args:
        chars: Custom pool characters, or None/empty for the default
        default: Pool used when chars is unset

    Returns:
        Tuple of single characters in first-occurrence order
    """
    if not chars:
        chars = default

    # dict keeps insertion order
    return tuple(dict.fromkeys(chars))


def get_pool_warning(chars: Optional[str]) -> Optional[str]:
    """
    Get a descriptive warning for a custom pool with repeated characters.

    Args:
        chars: The custom pool

    Returns:
        Warning message, or None if the pool has no repeats
    """
    if not chars:
        return None

    repeated = sorted({c for c in chars if chars.count(c) > 1})
    if not repeated:
        return None

    return f"Pool contains repeated characters: {', '.join(repeated)}"
