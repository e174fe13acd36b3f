"""
Numeric Traits — Числовые контракты скалярного типа

Набор runtime-checkable протоколов, описывающих возможности, которые
числовой тип предоставляет обобщённому коду:
- SupportsIdentity: аддитивная/мультипликативная единица
- Bounded: минимальное/максимальное значение
- CheckedArithmetic: арифметика с None вместо непредставимого результата
- PrimitiveCast: приведение к примитивным целым/float типам

Complex реализует все протоколы один раз для любого FloatFormat.

Также модуль содержит перечисления примитивных типов (PrimitiveKind) и
математических констант (FloatConstant).
"""

import math
from enum import Enum
from functools import reduce
from typing import Iterable, Protocol, TypeVar, runtime_checkable

# =============================================================================
# ПРИМИТИВНЫЕ ТИПЫ
# =============================================================================


class PrimitiveKind(str, Enum):
    """Примитивный тип, в который (из которого) выполняется приведение"""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"
    F32 = "f32"
    F64 = "f64"

    @property
    def is_float(self) -> bool:
        return self in (PrimitiveKind.F32, PrimitiveKind.F64)

    @property
    def bits(self) -> int:
        """Разрядность; isize/usize считаются 64-битными."""
        if self in (PrimitiveKind.ISIZE, PrimitiveKind.USIZE):
            return 64
        return int(self.value[1:])

    @property
    def is_signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def int_bounds(self) -> tuple[int, int]:
        """Диапазон [min, max] целого типа."""
        if self.is_float:
            raise ValueError(f"{self.value} is not an integer kind")
        if self.is_signed:
            return -(2 ** (self.bits - 1)), 2 ** (self.bits - 1) - 1
        return 0, 2**self.bits - 1


def float_to_int_checked(value: float, kind: PrimitiveKind) -> int | None:
    """
    Checked-приведение float → целое с отбрасыванием дробной части.

    Returns:
        int или None, если value NaN/Inf или вне диапазона kind

    Examples:
        >>> float_to_int_checked(3.9, PrimitiveKind.I8)
        3
        >>> float_to_int_checked(300.0, PrimitiveKind.U8) is None
        True
        >>> float_to_int_checked(-0.5, PrimitiveKind.U8)
        0
    """
    if not math.isfinite(value):
        return None

    low, high = kind.int_bounds
    result = math.trunc(value)
    if result < low or result > high:
        return None
    return result


def float_to_int_saturating(value: float, kind: PrimitiveKind) -> int:
    """
    Насыщающее приведение float → целое (семантика `as`-каста).

    NaN → 0, значения вне диапазона прижимаются к границам.
    """
    if math.isnan(value):
        return 0

    low, high = kind.int_bounds
    if value <= low:
        return low
    if value >= high:
        return high
    return math.trunc(value)


# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================


class FloatConstant(float, Enum):
    """Математические константы, поднимаемые в комплексную область"""

    E = math.e
    PI = math.pi
    TAU = math.tau
    SQRT_2 = math.sqrt(2.0)
    LN_2 = math.log(2.0)
    LN_10 = math.log(10.0)
    LOG2_E = math.log2(math.e)
    LOG10_E = math.log10(math.e)
    LOG2_10 = math.log2(10.0)
    LOG10_2 = math.log10(2.0)
    FRAC_1_PI = 1.0 / math.pi
    FRAC_2_PI = 2.0 / math.pi
    FRAC_2_SQRT_PI = 2.0 / math.sqrt(math.pi)
    FRAC_1_SQRT_2 = 1.0 / math.sqrt(2.0)
    FRAC_PI_2 = math.pi / 2.0
    FRAC_PI_3 = math.pi / 3.0
    FRAC_PI_4 = math.pi / 4.0
    FRAC_PI_6 = math.pi / 6.0
    FRAC_PI_8 = math.pi / 8.0


# =============================================================================
# ПРОТОКОЛЫ
# =============================================================================

T = TypeVar("T")
C = TypeVar("C", bound="CheckedArithmetic")


@runtime_checkable
class SupportsIdentity(Protocol):
    """Аддитивная и мультипликативная единица"""

    def is_zero(self) -> bool: ...

    def is_one(self) -> bool: ...


@runtime_checkable
class Bounded(Protocol):
    """Тип с минимальным и максимальным значением"""

    @classmethod
    def min_value(cls): ...

    @classmethod
    def max_value(cls): ...


@runtime_checkable
class CheckedArithmetic(Protocol):
    """Арифметика, возвращающая None вместо непредставимого результата"""

    def checked_add(self: T, other: T) -> T | None: ...

    def checked_sub(self: T, other: T) -> T | None: ...

    def checked_mul(self: T, other: T) -> T | None: ...

    def checked_div(self: T, other: T) -> T | None: ...

    def checked_neg(self: T) -> T | None: ...


@runtime_checkable
class PrimitiveCast(Protocol):
    """Приведение к примитивным типам"""

    def to_primitive(self, kind: PrimitiveKind) -> int | float | None: ...

    def as_primitive(self, kind: PrimitiveKind) -> int | float: ...


# =============================================================================
# ОБОБЩЁННЫЕ ОПЕРАЦИИ
# =============================================================================


def _fold_checked(values: Iterable[C], step) -> C | None:
    def combine(acc: C | None, item: C) -> C | None:
        if acc is None:
            return None
        return step(acc, item)

    items = iter(values)
    try:
        first = next(items)
    except StopIteration:
        raise ValueError("at least one value is required") from None
    return reduce(combine, items, first)


def checked_sum(values: Iterable[C]) -> C | None:
    """
    Сумма значений через checked_add.

    Returns:
        Сумма или None, если хотя бы одно промежуточное сложение неудачно

    Raises:
        ValueError: Если values пуст
    """
    return _fold_checked(values, lambda acc, item: acc.checked_add(item))


def checked_product(values: Iterable[C]) -> C | None:
    """Произведение значений через checked_mul (None при первой неудаче)."""
    return _fold_checked(values, lambda acc, item: acc.checked_mul(item))
