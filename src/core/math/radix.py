"""
Radix — Разложение целого числа по основанию

Конверсия неотрицательного целого ↔ последовательность цифр по основанию radix
(по умолчанию 2), старший разряд первым.

КОНВЕНЦИЯ ДЛЯ НУЛЯ:
    number_digits(0) == [0] — ровно одна нулевая цифра, не пустой список.

Отрицательные числа не определены и отклоняются (ValueError).
"""

from typing import Final, List, Sequence


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание двоичной системы (используется Term)
BINARY_RADIX: Final[int] = 2


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def _validate_radix(radix: int) -> None:
    if radix < 2:
        raise ValueError(f"radix must be >= 2, got {radix}")


def number_digits(value: int, radix: int = BINARY_RADIX) -> List[int]:
    """
    Разложение целого на цифры по основанию, старший разряд первым.

    Args:
        value: Неотрицательное целое
        radix: Основание (>= 2, default: 2)

    Returns:
        Список цифр без ведущих нулей; для 0 возвращает [0]

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
        ValueError: Если value < 0 или radix < 2

    Examples:
        >>> number_digits(5)
        [1, 0, 1]
        >>> number_digits(0)
        [0]
        >>> number_digits(255, 16)
        [15, 15]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    _validate_radix(radix)

    if value == 0:
        return [0]

    digits: List[int] = []
    while value > 0:
        value, remainder = divmod(value, radix)
        digits.append(remainder)
    digits.reverse()
    return digits


def digits_to_number(digits: Sequence[int], radix: int = BINARY_RADIX) -> int:
    """
    Обратная конверсия: цифры (старший разряд первым) → целое.

    Args:
        digits: Последовательность цифр в диапазоне [0, radix)
        radix: Основание (>= 2, default: 2)

    Returns:
        Целое число; пустая последовательность даёт 0

    Raises:
        ValueError: Если цифра вне [0, radix) или radix < 2
    """
    _validate_radix(radix)

    total = 0
    for digit in digits:
        if not 0 <= digit < radix:
            raise ValueError(f"digit {digit} out of range for radix {radix}")
        total = total * radix + digit
    return total
