"""
FloatFormat — Формат компоненты комплексного числа

Complex параметризован типом компоненты. В Python float всегда binary64,
поэтому тип компоненты моделируется явным перечислением форматов хранения:
- F32: IEEE-754 binary32 (4 байта)
- F64: IEEE-754 binary64 (8 байт)

Формат определяет:
- Приведение значения к формату хранения (округление binary32, overflow → ±Inf)
- Бинарную раскладку (little-endian, фиксированный размер)
- Границы (max finite, min positive normal)
- Кратчайшее десятичное представление, однозначно восстанавливающее значение
"""

import math
import struct
import sys
from enum import Enum
from typing import Final

# =============================================================================
# ГРАНИЦЫ ФОРМАТОВ
# =============================================================================

F32_MAX: Final[float] = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
F32_MIN_POSITIVE: Final[float] = 2.0**-126
F64_MAX: Final[float] = sys.float_info.max
F64_MIN_POSITIVE: Final[float] = sys.float_info.min

# Максимум значащих цифр, достаточный для однозначного round-trip
F32_MAX_DIGITS: Final[int] = 9


# =============================================================================
# FLOAT FORMAT
# =============================================================================


class FloatFormat(str, Enum):
    """Формат хранения компоненты"""

    F32 = "f32"
    F64 = "f64"

    @property
    def struct_code(self) -> str:
        return "f" if self is FloatFormat.F32 else "d"

    @property
    def byte_size(self) -> int:
        """Размер одной компоненты в байтах."""
        return 4 if self is FloatFormat.F32 else 8

    @property
    def max_value(self) -> float:
        """Максимальное конечное значение."""
        return F32_MAX if self is FloatFormat.F32 else F64_MAX

    @property
    def min_value(self) -> float:
        """Минимальное конечное значение (= -max_value)."""
        return -self.max_value

    @property
    def min_positive_normal(self) -> float:
        return F32_MIN_POSITIVE if self is FloatFormat.F32 else F64_MIN_POSITIVE

    def coerce(self, value: float) -> float:
        """
        Приведение значения к формату хранения.

        Для F32 значение округляется до ближайшего binary32; значения за
        пределами диапазона становятся ±Inf (struct.pack в этом случае
        бросает OverflowError).

        Args:
            value: Исходное значение (int или float)

        Returns:
            float, точно представимый в формате
        """
        value = float(value)
        if self is FloatFormat.F64 or not math.isfinite(value):
            return value

        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def pack(self, value: float) -> bytes:
        """Бинарное представление компоненты (little-endian)."""
        return struct.pack("<" + self.struct_code, self.coerce(value))

    def unpack(self, data: bytes) -> float:
        """Обратное к pack; длина data должна быть равна byte_size."""
        return struct.unpack("<" + self.struct_code, data)[0]

    def is_normal(self, value: float) -> bool:
        """Finite, ненулевое и не subnormal."""
        return math.isfinite(value) and abs(value) >= self.min_positive_normal

    def is_subnormal(self, value: float) -> bool:
        return value != 0.0 and abs(value) < self.min_positive_normal

    def shortest_repr(self, value: float) -> str:
        """
        Кратчайшая десятичная запись, восстанавливающая value в этом формате.

        Для F64 это repr(); для F32 перебираются длины мантиссы до 9 цифр
        (0.1 в binary32 печатается как '0.1', а не '0.10000000149011612').
        """
        if self is FloatFormat.F64 or not math.isfinite(value):
            return repr(value)

        for digits in range(1, F32_MAX_DIGITS + 1):
            text = f"{value:.{digits}g}"
            if self.coerce(float(text)) == value:
                return text
        return repr(value)

    @classmethod
    def wider(cls, a: "FloatFormat", b: "FloatFormat") -> "FloatFormat":
        """Формат, в который продвигается результат смешанной операции."""
        if a is cls.F64 or b is cls.F64:
            return cls.F64
        return cls.F32
