"""
Term — Модель минтерма / импликанта

Immutable Pydantic модель: упорядоченный вектор троичных цифр (Digit).

Хранение: старший разряд первым (digits[0] — MSB).
Адресация: младший разряд первым (get_digit(0) — разряд 2^0).
Перевод индекса выполняется только в get_digit.

Терм — конечная запись бесконечного вектора: любая позиция за пределами
хранимой длины читается как UNSET.
"""

from typing import Any, Sequence, Tuple, Union

from pydantic import BaseModel, Field

from src.core.domain.digit import Digit
from src.core.math.radix import BINARY_RADIX, digits_to_number, number_digits


# Состояние для конструктора: целое или явная последовательность цифр
TermState = Union[int, Sequence[Digit]]

# Маркер отсутствия state: keyword-форма Term(digits=...)
_NO_STATE: Any = object()


# =============================================================================
# TERM MODEL
# =============================================================================


class Term(BaseModel):
    """
    Минтерм или импликант.

    Создаётся один раз (из целого или из списка цифр) и далее только читается.
    Равенство структурное по хранимому кортежу: Term(1) != Term([UNSET, SET]),
    хотя оба представляют одно и то же значение.

    Examples:
        >>> Term(5).get_digit(0)
        <Digit.SET: '1'>
        >>> Term.count_differences(Term(0b0000), Term(0b1010))
        2
    """

    digits: Tuple[Digit, ...] = Field(
        default=(), description="Цифры терма, старший разряд первым"
    )

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __init__(self, state: TermState = _NO_STATE, **data: Any) -> None:
        """
        Args:
            state: Неотрицательное целое или последовательность Digit (MSB первым).
                Если не задан, используется keyword-форма Term(digits=...).

        Raises:
            TypeError: Если state не int и не последовательность цифр
                или state передан вместе с digits
            ValueError: Если state — отрицательное целое
        """
        if state is not _NO_STATE:
            if "digits" in data:
                raise TypeError("Term accepts either state or digits, not both")
            if isinstance(state, int):
                data["digits"] = Term.get_digits_from_number(state)
            elif isinstance(state, (str, bytes)) or not isinstance(state, Sequence):
                raise TypeError(
                    f"Term state must be int or sequence of Digit, got {type(state).__name__}"
                )
            else:
                data["digits"] = tuple(state)
        super().__init__(**data)

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @staticmethod
    def get_digits_from_number(value: int) -> Tuple[Digit, ...]:
        """
        Двоичное разложение целого в цифры, старший разряд первым.

        Ноль даёт (UNSET,) — см. number_digits.

        Raises:
            TypeError: Если value не int (включая bool)
            ValueError: Если value < 0
        """
        return tuple(Digit.from_bit(bit) for bit in number_digits(value, BINARY_RADIX))

    # -------------------------------------------------------------------------
    # Доступ к цифрам
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Число хранимых цифр (не логическая ширина терма)."""
        return len(self.digits)

    def get_digit(self, idx: int) -> Digit:
        """
        Цифра в логической позиции idx (0 — младший разряд).

        Для любой позиции >= length возвращает UNSET.

        Raises:
            TypeError: Если idx не int (bool тоже отклоняется)
            ValueError: Если idx < 0
        """
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise TypeError(f"Digit index must be int, got {type(idx).__name__}")
        if idx < 0:
            raise ValueError(f"Digit index must be non-negative, got {idx}")

        length = len(self.digits)
        if idx >= length:
            return Digit.UNSET
        return self.digits[length - idx - 1]

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    @staticmethod
    def count_differences(left: "Term", right: "Term") -> int:
        """
        Число позиций, в которых цифры двух термов различаются.

        Короткий терм дополняется UNSET до длины длинного.

        Args:
            left: Первый терм
            right: Второй терм

        Returns:
            Количество различающихся позиций (>= 0)

        Examples:
            >>> Term.count_differences(Term(0b0000), Term(0b1010))
            2
        """
        length = max(left.length, right.length)
        total = 0
        for i in range(length):
            if left.get_digit(i) != right.get_digit(i):
                total += 1
        return total

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_int(self) -> int:
        """
        Целое значение терма (сумма 2^i по позициям SET).

        Raises:
            ValueError: Если в терме есть DONT_CARE
        """
        if Digit.DONT_CARE in self.digits:
            raise ValueError(f"Term '{self}' contains DONT_CARE and has no integer value")
        return digits_to_number([digit.to_bit() for digit in self.digits], BINARY_RADIX)

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self.digits)
