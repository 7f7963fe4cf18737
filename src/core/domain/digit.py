"""
Digit — Троичная цифра терма (SET / UNSET / DON'T-CARE)

Элемент вектора терма в минимизации Quine–McCluskey:
- SET — логическая 1
- UNSET — логический 0
- DONT_CARE — значение не важно (появляется только в импликантах)

Сравнение только по значению. Порядка и арифметики нет.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class Digit(str, Enum):
    """Троичная цифра терма.

    Значение enum — печатный символ цифры.
    """

    SET = "1"
    UNSET = "0"
    DONT_CARE = "-"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_bit(cls, bit: int) -> "Digit":
        """
        Конверсия двоичного разряда в цифру: 0 → UNSET, 1 → SET.

        Args:
            bit: Двоичный разряд (0 или 1)

        Returns:
            Соответствующая цифра

        Raises:
            ValueError: Если bit не 0 и не 1
        """
        if bit == 0:
            return cls.UNSET
        if bit == 1:
            return cls.SET
        raise ValueError(f"Binary digit must be 0 or 1, got {bit!r}")

    def to_bit(self) -> int:
        """
        Обратная конверсия: SET → 1, UNSET → 0.

        Raises:
            ValueError: Для DONT_CARE (нет единственного двоичного значения)
        """
        if self is Digit.SET:
            return 1
        if self is Digit.UNSET:
            return 0
        raise ValueError(f"Digit {self.name} has no binary value")
