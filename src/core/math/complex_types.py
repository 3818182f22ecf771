"""
c32 / c64 — комплексные числа фиксированной точности

Пара (re, im) из скаляров numpy.float32 или numpy.float64:
- Хранилище: 0-d структурированный массив numpy без паддинга
  (itemsize = 2 * itemsize скаляра, выравнивание = выравнивание скаляра)
- Арифметика: +, -, *, / с комплексным и вещественным операндом в обоих порядках
- Все вычисления в нативной точности скаляра (IEEE 754)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операции не изменяют операнды, результат всегда новое значение
2. Деление на нулевой знаменатель даёт inf/nan, а не исключение
3. c32 и c64 напрямую не смешиваются (TypeError), нужна явная конверсия
4. Равенство покомпонентное, без epsilon (nan != nan)
"""

import functools
import logging
from collections.abc import Callable, Iterable
from typing import Any, Final

import numpy as np
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from src.core.math.number import Complex, is_real

logger = logging.getLogger(__name__)

# =============================================================================
# LAYOUT
# =============================================================================

RE_FIELD: Final[str] = "re"
IM_FIELD: Final[str] = "im"


def pair_dtype(real_type: type) -> np.dtype:
    """
    Структурированный dtype пары (re, im).

    align=True даёт выравнивание скаляра; паддинга между полями нет,
    так как оба поля одного типа.
    """
    return np.dtype([(RE_FIELD, real_type), (IM_FIELD, real_type)], align=True)


def _ieee(method: Callable[..., Any]) -> Callable[..., Any]:
    """
    Покомпонентная арифметика без предупреждений numpy.

    Переполнение, деление на ноль и nan дают inf/nan молча, как нативный float.
    """

    @functools.wraps(method)
    def wrapper(*args: Any) -> Any:
        with np.errstate(all="ignore"):
            return method(*args)

    return wrapper


# =============================================================================
# GENERIC IMPLEMENTATION
# =============================================================================


class _ComplexPair(Complex):
    """
    Общая реализация для обеих точностей.

    Конкретный тип задаётся ключевым аргументом класса:

        class c32(_ComplexPair, real_type=np.float32): ...
    """

    real_type: type
    dtype: np.dtype

    # numpy-скаляр слева (np.float64(2) - z) должен отдать операцию нашему __rsub__
    __array_ufunc__ = None

    def __init_subclass__(cls, real_type: type, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.real_type = real_type
        cls.dtype = pair_dtype(real_type)

    def __init__(self, re: Any, im: Any) -> None:
        data = np.empty((), dtype=self.dtype)
        data[RE_FIELD] = re
        data[IM_FIELD] = im
        self._data = data

    # -------------------------------------------------------------------------
    # Complex
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, re: Any, im: Any) -> Any:
        return cls(re, im)

    def re(self) -> Any:
        return self._data[RE_FIELD][()]

    def re_mut(self) -> np.ndarray:
        return self._data[RE_FIELD]

    def im(self) -> Any:
        return self._data[IM_FIELD][()]

    def im_mut(self) -> np.ndarray:
        return self._data[IM_FIELD]

    # -------------------------------------------------------------------------
    # Операнды
    # -------------------------------------------------------------------------

    def _same(self, other: Any) -> bool:
        return type(other) is type(self)

    def _real(self, other: Any) -> Any:
        """
        Приведение вещественного операнда к точности значения.

        Python int/float приводятся к real_type, если представимы:
        int вне диапазона float поднимает OverflowError, как и float(10**400).

        Returns:
            Скаляр real_type или None, если операнд не поддерживается
            (numpy-скаляр другой точности, bool, нечисловой объект)
        """
        if isinstance(other, np.generic):
            return other if type(other) is self.real_type else None
        if is_real(other):
            return self.real_type(other)
        return None

    # -------------------------------------------------------------------------
    # Сложение
    # -------------------------------------------------------------------------

    @_ieee
    def __add__(self, other: Any) -> Any:
        if self._same(other):
            return self.new(self.re() + other.re(), self.im() + other.im())
        r = self._real(other)
        if r is None:
            return NotImplemented
        return self.new(self.re() + r, self.im())

    @_ieee
    def __radd__(self, other: Any) -> Any:
        r = self._real(other)
        if r is None:
            return NotImplemented
        return self.new(r + self.re(), self.im())

    # -------------------------------------------------------------------------
    # Вычитание
    # -------------------------------------------------------------------------

    @_ieee
    def __sub__(self, other: Any) -> Any:
        if self._same(other):
            return self.new(self.re() - other.re(), self.im() - other.im())
        r = self._real(other)
        if r is None:
            return NotImplemented
        return self.new(self.re() - r, self.im())

    @_ieee
    def __rsub__(self, other: Any) -> Any:
        r = self._real(other)
        if r is None:
            return NotImplemented
        # r - (re + im·i) = (r - re) - im·i
        return self.new(r - self.re(), -self.im())

    # -------------------------------------------------------------------------
    # Умножение
    # -------------------------------------------------------------------------

    @_ieee
    def __mul__(self, other: Any) -> Any:
        if self._same(other):
            return self.new(
                self.re() * other.re() - self.im() * other.im(),
                self.im() * other.re() + self.re() * other.im(),
            )
        r = self._real(other)
        if r is None:
            return NotImplemented
        return self.new(self.re() * r, self.im() * r)

    @_ieee
    def __rmul__(self, other: Any) -> Any:
        r = self._real(other)
        if r is None:
            return NotImplemented
        return self.new(self.re() * r, self.im() * r)

    # -------------------------------------------------------------------------
    # Деление
    # -------------------------------------------------------------------------

    @_ieee
    def __truediv__(self, other: Any) -> Any:
        if self._same(other):
            denominator = other.re() * other.re() + other.im() * other.im()
            if denominator == 0:
                logger.debug("Division by zero denominator: %r / %r", self, other)
            return self.new(
                (self.re() * other.re() + self.im() * other.im()) / denominator,
                (self.im() * other.re() - self.re() * other.im()) / denominator,
            )
        r = self._real(other)
        if r is None:
            return NotImplemented
        if r == 0:
            logger.debug("Division by zero denominator: %r / %r", self, r)
        return self.new(self.re() / r, self.im() / r)

    @_ieee
    def __rtruediv__(self, other: Any) -> Any:
        r = self._real(other)
        if r is None:
            return NotImplemented
        denominator = self.re() * self.re() + self.im() * self.im()
        if denominator == 0:
            logger.debug("Division by zero denominator: %r / %r", r, self)
        return self.new((r * self.re()) / denominator, (-r * self.im()) / denominator)

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    @_ieee
    def __neg__(self) -> Any:
        return self.new(-self.re(), -self.im())

    def __pos__(self) -> Any:
        return self.__copy__()

    # -------------------------------------------------------------------------
    # Равенство, представление, копирование
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not self._same(other):
            return NotImplemented
        return bool(self.re() == other.re() and self.im() == other.im())  # type: ignore[attr-defined]

    # Значение изменяемо через re_mut/im_mut
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.re()}, {self.im()})"

    def __copy__(self) -> Any:
        return self.new(self.re(), self.im())

    def __complex__(self) -> complex:
        return complex(float(self.re()), float(self.im()))

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_complex(cls, value: Any) -> Any:
        """
        Явная конверсия в данную точность.

        Args:
            value: Любое Complex-значение (в т.ч. другой точности) или builtin complex

        Returns:
            Новое значение типа cls

        Raises:
            TypeError: Если value не комплексное число
        """
        if isinstance(value, Complex):
            return cls.new(value.re(), value.im())
        if isinstance(value, complex):
            return cls.new(value.real, value.imag)
        raise TypeError(f"Cannot convert {type(value).__name__} to {cls.__name__}")

    @classmethod
    def as_array(cls, values: Iterable[Any]) -> np.ndarray:
        """
        Упаковка последовательности значений в плотный массив numpy.

        Размер массива из N значений равен размеру массива из 2N скаляров.

        Raises:
            TypeError: Если среди values есть значение другого типа
        """
        pairs = []
        for value in values:
            if type(value) is not cls:
                raise TypeError(f"Expected {cls.__name__}, got {type(value).__name__}")
            pairs.append((value.re(), value.im()))
        return np.array(pairs, dtype=cls.dtype)

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Поддержка c32/c64 как поля Pydantic модели."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._to_pair, info_arg=False
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> Any:
        if type(value) is cls:
            return value
        if isinstance(value, Complex):
            raise ValueError(
                f"{type(value).__name__} cannot be used as {cls.__name__} "
                f"without explicit conversion"
            )
        if isinstance(value, (list, tuple)) and len(value) == 2 and all(is_real(p) for p in value):
            return cls.new(value[0], value[1])
        raise ValueError(f"Expected {cls.__name__} or (re, im) pair, got {value!r}")

    @staticmethod
    def _to_pair(value: "_ComplexPair") -> list[float]:
        return [float(value.re()), float(value.im())]


# =============================================================================
# CONCRETE TYPES
# =============================================================================


class c32(_ComplexPair, real_type=np.float32):
    """Комплексное число с 32-битными частями."""


class c64(_ComplexPair, real_type=np.float64):
    """Комплексное число с 64-битными частями."""
