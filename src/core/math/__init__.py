"""
Core math modules

Разложение целых чисел по основанию (двоичные цифры для Term).
"""

# Radix conversion
from src.core.math.radix import (
    BINARY_RADIX,
    digits_to_number,
    number_digits,
)

__all__ = [
    # Radix — Constants
    "BINARY_RADIX",
    # Radix — Functions
    "digits_to_number",
    "number_digits",
]
