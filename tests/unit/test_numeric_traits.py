"""
Тесты числовых контрактов

Проверяет:
1. PrimitiveKind: разрядность и диапазоны
2. Checked и насыщающие приведения float → целое
3. FloatConstant
4. Runtime-протоколы и обобщённые checked_sum/checked_product
"""

import math

import pytest

from src.core.domain import (
    Bounded,
    CheckedArithmetic,
    Complex,
    FloatConstant,
    PrimitiveCast,
    PrimitiveKind,
    SupportsIdentity,
    checked_product,
    checked_sum,
    float_to_int_checked,
    float_to_int_saturating,
)


class TestPrimitiveKind:
    """Тесты для PrimitiveKind"""

    def test_bits(self) -> None:
        """Разрядность; isize/usize — 64 бита"""
        assert PrimitiveKind.I8.bits == 8
        assert PrimitiveKind.U128.bits == 128
        assert PrimitiveKind.ISIZE.bits == 64
        assert PrimitiveKind.USIZE.bits == 64

    def test_int_bounds(self) -> None:
        """Диапазоны целых типов"""
        assert PrimitiveKind.I8.int_bounds == (-128, 127)
        assert PrimitiveKind.U8.int_bounds == (0, 255)
        assert PrimitiveKind.I64.int_bounds == (-(2**63), 2**63 - 1)

    def test_float_kind_has_no_int_bounds(self) -> None:
        """F32/F64 не имеют целого диапазона"""
        assert PrimitiveKind.F32.is_float
        with pytest.raises(ValueError, match="not an integer kind"):
            PrimitiveKind.F64.int_bounds


class TestFloatToInt:
    """Тесты приведений float → целое"""

    def test_checked_truncates(self) -> None:
        """Дробная часть отбрасывается"""
        assert float_to_int_checked(3.9, PrimitiveKind.I8) == 3
        assert float_to_int_checked(-3.9, PrimitiveKind.I8) == -3
        assert float_to_int_checked(-0.5, PrimitiveKind.U8) == 0

    def test_checked_out_of_range(self) -> None:
        """Вне диапазона или NaN/Inf → None"""
        assert float_to_int_checked(300.0, PrimitiveKind.U8) is None
        assert float_to_int_checked(-1.0, PrimitiveKind.U32) is None
        assert float_to_int_checked(float("nan"), PrimitiveKind.I32) is None
        assert float_to_int_checked(math.inf, PrimitiveKind.I128) is None

    def test_saturating(self) -> None:
        """Насыщение к границам, NaN → 0"""
        assert float_to_int_saturating(300.0, PrimitiveKind.U8) == 255
        assert float_to_int_saturating(-5.0, PrimitiveKind.U8) == 0
        assert float_to_int_saturating(float("nan"), PrimitiveKind.I16) == 0
        assert float_to_int_saturating(math.inf, PrimitiveKind.I64) == 2**63 - 1
        assert float_to_int_saturating(-7.8, PrimitiveKind.I8) == -7


class TestFloatConstant:
    """Тесты для FloatConstant"""

    def test_values(self) -> None:
        """Значения совпадают с math"""
        assert FloatConstant.PI == math.pi
        assert FloatConstant.TAU == 2 * math.pi
        assert FloatConstant.FRAC_PI_4 == pytest.approx(math.pi / 4)
        assert FloatConstant.LOG2_10 == pytest.approx(math.log2(10))

    def test_members_are_distinct(self) -> None:
        """Ни одна константа не является alias другой"""
        assert len(FloatConstant) == 19


class TestProtocols:
    """Тесты runtime-протоколов"""

    def test_complex_implements_all(self) -> None:
        """Complex реализует все контракты"""
        value = Complex(1, 2)
        assert isinstance(value, SupportsIdentity)
        assert isinstance(value, Bounded)
        assert isinstance(value, CheckedArithmetic)
        assert isinstance(value, PrimitiveCast)

    def test_float_is_not_checked(self) -> None:
        """Встроенный float не реализует CheckedArithmetic"""
        assert not isinstance(1.0, CheckedArithmetic)


class TestCheckedFold:
    """Тесты для checked_sum/checked_product"""

    def test_sum(self) -> None:
        """Сумма нескольких значений"""
        values = [Complex(1, 2), Complex(3, -1), Complex(0.5, 0.5)]
        assert checked_sum(values) == Complex(4.5, 1.5)

    def test_sum_overflow(self) -> None:
        """Переполнение на любом шаге → None"""
        values = [Complex.max_value(), Complex.max_value(), Complex(-1, -1)]
        assert checked_sum(values) is None

    def test_product(self) -> None:
        """Произведение: i · i · i = -i"""
        assert checked_product([Complex.i()] * 3) == Complex(0, -1)

    def test_single_value(self) -> None:
        """Одно значение возвращается как есть"""
        assert checked_product([Complex(2, 3)]) == Complex(2, 3)

    def test_empty_raises(self) -> None:
        """Пустой вход → ValueError"""
        with pytest.raises(ValueError, match="at least one value"):
            checked_sum([])
