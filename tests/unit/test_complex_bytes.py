"""
Тесты бинарной раскладки и побайтовых операций Complex

Проверяет:
1. as_bytes/from_bytes и контракт длины (SizeMismatchError)
2. bitand/bitor/bitxor и их операторы
3. Индексацию компонент через bool
"""

import logging
import struct

import pytest

from src.core.domain import Complex, SizeMismatchError
from src.core.math.float_format import FloatFormat


class TestBytes:
    """Тесты as_bytes/from_bytes"""

    def test_layout_f64(self) -> None:
        """real, затем imaginary; little-endian binary64"""
        c = Complex(1, 2)
        assert c.as_bytes() == struct.pack("<dd", 1.0, 2.0)
        assert bytes(c) == c.as_bytes()
        assert Complex.size_of() == 16

    def test_layout_f32(self) -> None:
        """binary32: 8 байт"""
        c = Complex(1.5, -2, FloatFormat.F32)
        assert c.as_bytes() == struct.pack("<ff", 1.5, -2.0)
        assert Complex.size_of(FloatFormat.F32) == 8

    @pytest.mark.parametrize(
        "value",
        [
            Complex(1, 2),
            Complex(-0.0, 1e-310),
            Complex(float("inf"), -123.456),
            Complex(0.1, -0.3, FloatFormat.F32),
        ],
    )
    def test_round_trip(self, value: Complex) -> None:
        """from_bytes(as_bytes(a)) == a"""
        restored = Complex.from_bytes(value.as_bytes(), value.precision)
        assert restored == value
        assert restored.as_bytes() == value.as_bytes()

    def test_nan_round_trip_is_bit_identical(self) -> None:
        """NaN не равен себе, но байты совпадают"""
        value = Complex(float("nan"), 1)
        assert Complex.from_bytes(value.as_bytes()).as_bytes() == value.as_bytes()

    def test_accepts_bytearray(self) -> None:
        """Буфер может быть bytearray/memoryview"""
        data = bytearray(Complex(3, 4).as_bytes())
        assert Complex.from_bytes(data) == Complex(3, 4)
        assert Complex.from_bytes(memoryview(bytes(data))) == Complex(3, 4)

    @pytest.mark.parametrize("length", [0, 8, 15, 17, 32])
    def test_size_mismatch(self, length: int) -> None:
        """Неверная длина → SizeMismatchError"""
        with pytest.raises(SizeMismatchError, match="size mismatch") as exc_info:
            Complex.from_bytes(b"\x00" * length)
        assert exc_info.value.expected == 16
        assert exc_info.value.actual == length

    def test_size_mismatch_is_value_error(self) -> None:
        """SizeMismatchError — ValueError"""
        with pytest.raises(ValueError):
            Complex.from_bytes(b"\x00" * 16, FloatFormat.F32)

    def test_size_mismatch_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Отказ фиксируется в debug-логе"""
        caplog.set_level(logging.DEBUG, logger="src.core.domain.complex_number")
        with pytest.raises(SizeMismatchError):
            Complex.from_bytes(b"\x00" * 3)
        assert "from_bytes rejected 3 bytes" in caplog.text


class TestBitwise:
    """Тесты побайтовых операций"""

    @pytest.mark.parametrize(
        "value",
        [Complex(1, 2), Complex(-3.75, 1e100), Complex(0.1, 0.2, FloatFormat.F32)],
    )
    def test_and_or_with_self(self, value: Complex) -> None:
        """a & a == a, a | a == a"""
        assert value & value == value
        assert value | value == value

    @pytest.mark.parametrize(
        "value",
        [Complex(1, 2), Complex(-3.75, 1e100), Complex(0.1, 0.2, FloatFormat.F32)],
    )
    def test_xor_with_self_is_zero_bits(self, value: Complex) -> None:
        """a ^ a — все биты нулевые"""
        result = value ^ value
        assert result.as_bytes() == b"\x00" * Complex.size_of(value.precision)
        assert result.is_zero()
        assert result.is_sign_positive() == (True, True)

    def test_and_clears_sign_bit(self) -> None:
        """1.0 & -1.0 = 1.0 (знаковый бит только у одного операнда)"""
        assert Complex(1, -2) & Complex(-1, 2) == Complex(1, 2)

    def test_or_sets_sign_bit(self) -> None:
        """1.0 | -1.0 = -1.0"""
        assert Complex(1, -2) | Complex(-1, 2) == Complex(-1, -2)

    def test_xor_leaves_sign_bit(self) -> None:
        """1.0 ^ -1.0 = -0.0"""
        result = Complex(1, 2) ^ Complex(-1, -2)
        assert result.is_zero()
        assert result.is_sign_negative() == (True, True)

    def test_method_forms(self) -> None:
        """bitand/bitor/bitxor совпадают с операторами"""
        x, y = Complex(1, -2), Complex(-1, 2)
        assert x.bitand(y) == x & y
        assert x.bitor(y) == x | y
        assert x.bitxor(y).as_bytes() == (x ^ y).as_bytes()

    def test_in_place(self) -> None:
        """&=, |=, ^= перепривязывают имя"""
        c = Complex(1, -2)
        c &= Complex(-1, 2)
        assert c == Complex(1, 2)
        c |= Complex(-1, -2)
        assert c == Complex(-1, -2)
        c ^= c
        assert c.is_zero()

    def test_mixed_precision_rejected(self) -> None:
        """Операнды разного формата → SizeMismatchError"""
        with pytest.raises(SizeMismatchError):
            Complex(1, 2) & Complex(1, 2, FloatFormat.F32)

    def test_non_complex_operand(self) -> None:
        """Скаляр не поддерживается"""
        with pytest.raises(TypeError):
            Complex(1, 2) & 1


class TestIndexing:
    """Тесты индексации компонент"""

    def test_bool_index(self) -> None:
        """False → real, True → imaginary"""
        c = Complex(5, 6)
        assert c[False] == 5.0
        assert c[True] == 6.0

    def test_int_equivalents(self) -> None:
        """0/1 эквивалентны False/True"""
        c = Complex(5, 6)
        assert c[0] == c[False]
        assert c[1] == c[True]

    @pytest.mark.parametrize("index", [2, -1, "real", 0.0])
    def test_invalid_index(self, index: object) -> None:
        """Прочие индексы → IndexError"""
        with pytest.raises(IndexError):
            Complex(5, 6)[index]

    def test_with_component(self) -> None:
        """Функциональная замена компоненты"""
        c = Complex(5, 6)
        assert c.with_component(False, 1) == Complex(1, 6)
        assert c.with_component(True, -1) == Complex(5, -1)
        assert c == Complex(5, 6)
