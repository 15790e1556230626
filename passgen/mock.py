"""
Test double for code that depends on a password generator.
"""

from typing import Any, Dict, List, Optional

from .exceptions import PasswordGenerationError


class MockGenerator:
    """Generator returning a fixed result or raising a fixed error."""

    def __init__(self, result: str = "", error: Optional[PasswordGenerationError] = None):
        """
        Initialize the mock.

        Args:
            result: Password returned by every generate() call
            error: Exception raised by every generate() call, if set
        """
        self.result = result
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def generate(self, total_length: int, num_digits: int, num_symbols: int,
                 exclude_uppercase: bool = False, allow_repeat: bool = False) -> str:
        self.calls.append({
            "total_length": total_length,
            "num_digits": num_digits,
            "num_symbols": num_symbols,
            "exclude_uppercase": exclude_uppercase,
            "allow_repeat": allow_repeat,
        })

        if self.error is not None:
            raise self.error

        return self.result
