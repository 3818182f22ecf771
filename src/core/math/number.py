"""
Number / Real / Complex — абстракции числовых возможностей

Набор операций, на который может опираться обобщённый численный код:
- Number: замкнутость по +, -, *, /, унарному минусу; равенство; repr; копирование
- Real: маркер вещественного скаляра (без дополнительных операций)
- Complex: конструирование из (re, im), доступ к частям, сопряжение

Функция, написанная против Complex, работает одинаково для c32 и c64:

    def go(a: ComplexT, b: ComplexT, c: ComplexT) -> ComplexT:
        return (a + b) * (a - b) / c
"""

from abc import ABC, abstractmethod
from typing import Any, Final, TypeVar

import numpy as np

# =============================================================================
# NUMBER
# =============================================================================


class Number(ABC):
    """
    Число.

    Каждая операция возвращает значение того же типа.
    """

    @abstractmethod
    def __add__(self, other: Any) -> Any: ...

    @abstractmethod
    def __sub__(self, other: Any) -> Any: ...

    @abstractmethod
    def __mul__(self, other: Any) -> Any: ...

    @abstractmethod
    def __truediv__(self, other: Any) -> Any: ...

    @abstractmethod
    def __neg__(self) -> Any: ...

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __repr__(self) -> str: ...

    @abstractmethod
    def __copy__(self) -> Any: ...


# =============================================================================
# REAL
# =============================================================================


class Real(Number):
    """Вещественное число (маркер)."""


# Нативные скаляры уже удовлетворяют контракту Number
REAL_SCALAR_TYPES: Final[tuple[type, ...]] = (float, int, np.float32, np.float64)

for _scalar_type in REAL_SCALAR_TYPES:
    Real.register(_scalar_type)


def is_real(value: object) -> bool:
    """
    Проверка, является ли значение вещественным скаляром.

    bool исключён, хотя формально является подклассом int.
    """
    return isinstance(value, Real) and not isinstance(value, bool)


# =============================================================================
# COMPLEX
# =============================================================================


class Complex(Number):
    """
    Комплексное число.

    Подкласс задаёт real_type — тип скаляра, из которого состоят
    вещественная и мнимая части.
    """

    real_type: type

    @classmethod
    @abstractmethod
    def new(cls, re: Any, im: Any) -> "Complex":
        """Создание числа из вещественной и мнимой частей."""

    @abstractmethod
    def re(self) -> Any:
        """Вещественная часть."""

    @abstractmethod
    def re_mut(self) -> np.ndarray:
        """
        Изменяемый доступ к вещественной части.

        Returns:
            0-d view на хранилище значения; запись через view[...] = x
            меняет только вещественную часть исходного числа
        """

    @abstractmethod
    def im(self) -> Any:
        """Мнимая часть."""

    @abstractmethod
    def im_mut(self) -> np.ndarray:
        """Изменяемый доступ к мнимой части (см. re_mut)."""

    def conj(self) -> "Complex":
        """Комплексное сопряжение: (re, im) → (re, -im)."""
        return self.new(self.re(), -self.im())


ComplexT = TypeVar("ComplexT", bound=Complex)
