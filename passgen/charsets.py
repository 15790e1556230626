"""
Default character pools.
"""

# Lowercase letters.
LOWER_LETTERS = "abcdefghijklmnopqrstuvwxyz"

# Uppercase letters.
UPPER_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Permitted digits.
DIGITS = "0123456789"

# Symbols.
SYMBOLS = "~!@#$%^&*()_+`-={}|[]\\:\"<>?,./"
