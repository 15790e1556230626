"""
Random sources and input validation for passgen.
"""

from .random_source import FixedRandomSource, RandomSource, SystemRandomSource

__all__ = ['FixedRandomSource', 'RandomSource', 'SystemRandomSource']
