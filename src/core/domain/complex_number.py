"""
Complex — Комплексное число над форматом компоненты

Immutable Pydantic модель: упорядоченная пара (real, imaginary) компонент
формата FloatFormat (F32 или F64).

Покрывает:
- Конструкторы и константы (zero, one, i, полярная форма, FloatConstant)
- Арифметику комплекс/комплекс и комплекс/скаляр
- Модуль, аргумент, ln/exp/log, степени (целая, вещественная, комплексная)
- Покомпонентные "naive" операции (abs, signum, round/floor/ceil/trunc, copysign)
- Побайтовые операции над фиксированной бинарной раскладкой
- Числовые контракты (Bounded, Checked*, приведения к примитивам)

ВАЖНЫЕ СОГЛАШЕНИЯ:
1. Арифметика следует IEEE-754: деление на ноль, NaN и переполнение
   не бросают исключений, а распространяются покомпонентно
2. Скаляр в addf/subf сдвигает только real; mulf/divf масштабируют обе компоненты
3. abs() — покомпонентный модуль, НЕ amplitude()
4. Смешанные операции F32/F64 продвигаются в F64
5. Бинарная раскладка: little-endian, real затем imaginary
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.domain.formatting import format_debug, format_display
from src.core.domain.numeric_traits import (
    FloatConstant,
    PrimitiveKind,
    float_to_int_checked,
    float_to_int_saturating,
)
from src.core.math.float_format import FloatFormat
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    checked_add,
    checked_div,
    checked_mul,
    checked_neg,
    checked_sub,
    ieee_ceil,
    ieee_cos,
    ieee_div,
    ieee_exp,
    ieee_floor,
    ieee_ln,
    ieee_pow,
    ieee_round,
    ieee_signum,
    ieee_sin,
    ieee_sqrt,
    ieee_trunc,
    is_close,
    is_sign_negative,
)

logger = logging.getLogger(__name__)

Scalar = int | float


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SizeMismatchError(ValueError):
    """
    Длина байтового буфера не совпадает с размером бинарной раскладки.

    Бросается from_bytes и побайтовыми операциями над операндами разного
    формата.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"size mismatch: expected {expected} bytes, got {actual}")


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ComplexConfig:
    """Конфигурация приближённого сравнения Complex.

    Толерантности применяются к каждой компоненте независимо.
    """

    # Относительная толерантность
    rel_tol: float = EPS_FLOAT_COMPARE_REL

    # Абсолютная толерантность
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        for name in ("rel_tol", "abs_tol"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite non-negative float, got {value}")


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число (real, imaginary).

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    Компоненты приводятся к формату precision при создании; NaN/Inf
    допустимы и не нормализуются.
    """

    precision: FloatFormat = Field(FloatFormat.F64, description="Формат компоненты")
    real: float = Field(0.0, description="Действительная часть")
    imaginary: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    def __init__(
        self,
        real: Scalar = 0.0,
        imaginary: Scalar = 0.0,
        precision: FloatFormat = FloatFormat.F64,
    ) -> None:
        super().__init__(real=real, imaginary=imaginary, precision=precision)

    @field_validator("real", "imaginary")
    @classmethod
    def coerce_to_precision(cls, v: float, info: ValidationInfo) -> float:
        """Округление компоненты до формата хранения."""
        precision = info.data.get("precision", FloatFormat.F64)
        return precision.coerce(v)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_real(cls, real: Scalar, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        return cls(real, 0.0, precision)

    @classmethod
    def zero(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        return cls(0.0, 0.0, precision)

    @classmethod
    def one(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        return cls(1.0, 0.0, precision)

    @classmethod
    def i(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        """Мнимая единица."""
        return cls(0.0, 1.0, precision)

    @classmethod
    def default(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        return cls.zero(precision)

    @classmethod
    def from_argument_amplitude(
        cls,
        argument: Scalar,
        amplitude: Scalar,
        precision: FloatFormat = FloatFormat.F64,
    ) -> "Complex":
        """
        Полярная форма → прямоугольная: (r·cos θ, r·sin θ).

        Args:
            argument: Аргумент θ (радианы)
            amplitude: Модуль r
        """
        return cls(amplitude * ieee_cos(argument), amplitude * ieee_sin(argument), precision)

    @classmethod
    def from_tuple(
        cls, parts: tuple[Scalar, Scalar], precision: FloatFormat = FloatFormat.F64
    ) -> "Complex":
        real, imaginary = parts
        return cls(real, imaginary, precision)

    @classmethod
    def from_builtin(cls, value: complex, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        """Конверсия из встроенного complex."""
        return cls(value.real, value.imag, precision)

    @classmethod
    def min_value(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        """Покомпонентный минимум формата."""
        return cls(precision.min_value, precision.min_value, precision)

    @classmethod
    def max_value(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        """Покомпонентный максимум формата."""
        return cls(precision.max_value, precision.max_value, precision)

    @classmethod
    def constant(
        cls, name: FloatConstant | str, precision: FloatFormat = FloatFormat.F64
    ) -> "Complex":
        """
        Математическая константа как чисто действительное число.

        Args:
            name: Член FloatConstant или его имя ('PI', 'E', ...)
        """
        if isinstance(name, str) and not isinstance(name, FloatConstant):
            name = FloatConstant[name]
        return cls.from_real(float(name), precision)

    @classmethod
    def pi(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        return cls.constant(FloatConstant.PI, precision)

    @classmethod
    def e(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        return cls.constant(FloatConstant.E, precision)

    @classmethod
    def tau(cls, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        return cls.constant(FloatConstant.TAU, precision)

    def to_tuple(self) -> tuple[float, float]:
        return self.real, self.imaginary

    def extract_real(self) -> "Complex":
        return Complex(self.real, 0.0, self.precision)

    def extract_imaginary(self) -> "Complex":
        return Complex(0.0, self.imaginary, self.precision)

    def with_component(self, index: bool, value: Scalar) -> "Complex":
        """Копия с заменённой компонентой (False → real, True → imaginary)."""
        if self._component_index(index):
            return Complex(self.real, value, self.precision)
        return Complex(value, self.imaginary, self.precision)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.real == 0.0 and self.imaginary == 0.0

    def is_one(self) -> bool:
        return self.real == 1.0 and self.imaginary == 0.0

    def is_i(self) -> bool:
        return self.real == 0.0 and self.imaginary == 1.0

    def is_pure_real(self) -> bool:
        return self.imaginary == 0.0

    def is_pure_imaginary(self) -> bool:
        return self.real == 0.0

    def is_nan(self) -> tuple[bool, bool]:
        return math.isnan(self.real), math.isnan(self.imaginary)

    def is_finite(self) -> tuple[bool, bool]:
        return math.isfinite(self.real), math.isfinite(self.imaginary)

    def is_normal(self) -> tuple[bool, bool]:
        return self.precision.is_normal(self.real), self.precision.is_normal(self.imaginary)

    def is_subnormal(self) -> tuple[bool, bool]:
        return self.precision.is_subnormal(self.real), self.precision.is_subnormal(self.imaginary)

    def is_sign_positive(self) -> tuple[bool, bool]:
        return not is_sign_negative(self.real), not is_sign_negative(self.imaginary)

    def is_sign_negative(self) -> tuple[bool, bool]:
        return is_sign_negative(self.real), is_sign_negative(self.imaginary)

    def is_close(self, other: "Complex", config: ComplexConfig | None = None) -> bool:
        """
        Покомпонентное приближённое сравнение.

        Args:
            other: Второе число
            config: Толерантности (опционально, используется default)
        """
        config = config or ComplexConfig()
        return is_close(
            self.real, other.real, rel_tol=config.rel_tol, abs_tol=config.abs_tol
        ) and is_close(
            self.imaginary, other.imaginary, rel_tol=config.rel_tol, abs_tol=config.abs_tol
        )

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _promote(self, other: "Complex") -> FloatFormat:
        return FloatFormat.wider(self.precision, other.precision)

    def add(self, other: "Complex") -> "Complex":
        return Complex(
            self.real + other.real, self.imaginary + other.imaginary, self._promote(other)
        )

    def sub(self, other: "Complex") -> "Complex":
        return Complex(
            self.real - other.real, self.imaginary - other.imaginary, self._promote(other)
        )

    def mul(self, other: "Complex") -> "Complex":
        """
        Произведение (ar·br − ai·bi, ar·bi + ai·br).

        Каждое промежуточное произведение и сумма округляются до формата
        хранения, так что F32 переполняется так же, как binary32.
        """
        precision = self._promote(other)
        coerce = precision.coerce
        return Complex(
            coerce(self.real * other.real) - coerce(self.imaginary * other.imaginary),
            coerce(self.real * other.imaginary) + coerce(self.imaginary * other.real),
            precision,
        )

    def div(self, other: "Complex") -> "Complex":
        """
        Деление через сопряжённое: (a · conj(b)) / |b|².

        Деление на нулевое число даёт NaN/Inf покомпонентно. Промежуточные
        значения округляются до формата хранения, как в mul.
        """
        precision = self._promote(other)
        coerce = precision.coerce
        denominator = coerce(
            coerce(other.real * other.real) + coerce(other.imaginary * other.imaginary)
        )
        real_numerator = coerce(
            coerce(self.real * other.real) + coerce(self.imaginary * other.imaginary)
        )
        imaginary_numerator = coerce(
            coerce(self.imaginary * other.real) - coerce(self.real * other.imaginary)
        )
        return Complex(
            ieee_div(real_numerator, denominator),
            ieee_div(imaginary_numerator, denominator),
            precision,
        )

    def addf(self, other: Scalar) -> "Complex":
        """Сдвиг по действительной оси: imaginary не меняется."""
        return Complex(self.real + self.precision.coerce(other), self.imaginary, self.precision)

    def subf(self, other: Scalar) -> "Complex":
        """Сдвиг по действительной оси: imaginary не меняется."""
        return Complex(self.real - self.precision.coerce(other), self.imaginary, self.precision)

    def mulf(self, other: Scalar) -> "Complex":
        scalar = self.precision.coerce(other)
        return Complex(self.real * scalar, self.imaginary * scalar, self.precision)

    def divf(self, other: Scalar) -> "Complex":
        scalar = self.precision.coerce(other)
        return Complex(
            ieee_div(self.real, scalar), ieee_div(self.imaginary, scalar), self.precision
        )

    def neg(self) -> "Complex":
        return Complex(-self.real, -self.imaginary, self.precision)

    def conj(self) -> "Complex":
        return Complex(self.real, -self.imaginary, self.precision)

    def _squared_norm(self) -> float:
        """re² + im² с округлением каждого шага до формата хранения."""
        coerce = self.precision.coerce
        return coerce(coerce(self.real * self.real) + coerce(self.imaginary * self.imaginary))

    def inv(self) -> "Complex":
        """Обратное число: conj / |z|²."""
        divisor = self._squared_norm()
        return Complex(
            ieee_div(self.real, divisor), ieee_div(-self.imaginary, divisor), self.precision
        )

    recip = inv

    # -------------------------------------------------------------------------
    # Модуль и трансцендентные функции
    # -------------------------------------------------------------------------

    def amplitude(self) -> float:
        """Модуль |z| = sqrt(re² + im²)."""
        return self.precision.coerce(ieee_sqrt(self._squared_norm()))

    def argument(self) -> float:
        """Аргумент atan2(im, re) в диапазоне (-π, π]."""
        return self.precision.coerce(math.atan2(self.imaginary, self.real))

    def ln(self) -> "Complex":
        """Главная ветвь натурального логарифма."""
        return Complex(ieee_ln(self.amplitude()), self.argument(), self.precision)

    def exp(self) -> "Complex":
        coerce = self.precision.coerce
        exp_real = coerce(ieee_exp(self.real))
        return Complex(
            exp_real * coerce(ieee_cos(self.imaginary)),
            exp_real * coerce(ieee_sin(self.imaginary)),
            self.precision,
        )

    def log(self, base: Scalar) -> "Complex":
        """Логарифм по действительному основанию: ln(z) / ln(base)."""
        return self.ln().div(Complex.from_real(base, self.precision).ln())

    def powi(self, exponent: int) -> "Complex":
        """
        Целая степень (бинарное возведение, O(log n) умножений).

        Отрицательная степень возводит inv(z) в |exponent|.

        Raises:
            TypeError: Если exponent не int
        """
        if not isinstance(exponent, int):
            raise TypeError(f"powi exponent must be int, got {type(exponent).__name__}")

        result = Complex.one(self.precision)
        if exponent >= 0:
            base, remaining = self, exponent
        else:
            base, remaining = self.inv(), -exponent

        while remaining > 0:
            if remaining % 2 == 1:
                result = result.mul(base)
            base = base.mul(base)
            remaining //= 2

        return result

    def powf(self, exponent: Scalar) -> "Complex":
        """Действительная степень: exp(ln(z) · x)."""
        return self.ln().mul(Complex.from_real(exponent, self.precision)).exp()

    def pow(self, other: "Complex") -> "Complex":
        """
        Комплексная степень z^w через полярную форму.

        Для z = r·e^(iθ), w = a + bi:
            |z^w| = r^a · exp(-b·θ)
            arg(z^w) = b·ln(r) + a·θ
        """
        r = self.amplitude()
        theta = self.argument()
        amplitude = ieee_pow(r, other.real) * ieee_exp(-other.imaginary * theta)
        argument = other.imaginary * ieee_ln(r) + other.real * theta
        return Complex.from_argument_amplitude(argument, amplitude, self._promote(other))

    # -------------------------------------------------------------------------
    # Покомпонентные операции
    # -------------------------------------------------------------------------

    def _map(self, func: Callable[[float], float]) -> "Complex":
        return Complex(func(self.real), func(self.imaginary), self.precision)

    def abs(self) -> "Complex":
        """Покомпонентный модуль (для модуля числа см. amplitude)."""
        return self._map(abs)

    def signum(self) -> "Complex":
        return self._map(ieee_signum)

    def naive_round(self) -> "Complex":
        return self._map(ieee_round)

    def naive_floor(self) -> "Complex":
        return self._map(ieee_floor)

    def naive_ceil(self) -> "Complex":
        return self._map(ieee_ceil)

    def naive_trunc(self) -> "Complex":
        return self._map(ieee_trunc)

    def copysign(self, sign: "Complex") -> "Complex":
        return Complex(
            math.copysign(self.real, sign.real),
            math.copysign(self.imaginary, sign.imaginary),
            self.precision,
        )

    # -------------------------------------------------------------------------
    # Бинарная раскладка
    # -------------------------------------------------------------------------

    @staticmethod
    def size_of(precision: FloatFormat = FloatFormat.F64) -> int:
        """Размер бинарной раскладки в байтах."""
        return 2 * precision.byte_size

    def as_bytes(self) -> bytes:
        """Раскладка: real, затем imaginary; little-endian."""
        return self.precision.pack(self.real) + self.precision.pack(self.imaginary)

    @classmethod
    def from_bytes(cls, data: bytes, precision: FloatFormat = FloatFormat.F64) -> "Complex":
        """
        Восстановление из бинарной раскладки.

        Raises:
            SizeMismatchError: Если len(data) != size_of(precision)
        """
        data = bytes(data)
        expected = cls.size_of(precision)
        if len(data) != expected:
            logger.debug(
                "from_bytes rejected %d bytes for %s (expected %d)",
                len(data),
                precision.value,
                expected,
            )
            raise SizeMismatchError(expected, len(data))

        width = precision.byte_size
        return cls(precision.unpack(data[:width]), precision.unpack(data[width:]), precision)

    def _bitwise(self, other: "Complex", op: Callable[[int, int], int]) -> "Complex":
        if self.precision is not other.precision:
            raise SizeMismatchError(self.size_of(self.precision), other.size_of(other.precision))

        combined = bytes(op(a, b) for a, b in zip(self.as_bytes(), other.as_bytes()))
        return Complex.from_bytes(combined, self.precision)

    def bitand(self, other: "Complex") -> "Complex":
        return self._bitwise(other, lambda a, b: a & b)

    def bitor(self, other: "Complex") -> "Complex":
        return self._bitwise(other, lambda a, b: a | b)

    def bitxor(self, other: "Complex") -> "Complex":
        return self._bitwise(other, lambda a, b: a ^ b)

    # -------------------------------------------------------------------------
    # Checked-арифметика
    # -------------------------------------------------------------------------

    def _checked_failed(self, operation: str, other: "Complex | None" = None) -> None:
        logger.debug("checked_%s failed: %r, %r", operation, self, other)
        return None

    def checked_add(self, other: "Complex") -> "Complex | None":
        precision = self._promote(other)
        real = checked_add(self.real, other.real, precision.coerce)
        imaginary = checked_add(self.imaginary, other.imaginary, precision.coerce)
        if real is None or imaginary is None:
            return self._checked_failed("add", other)
        return Complex(real, imaginary, precision)

    def checked_sub(self, other: "Complex") -> "Complex | None":
        precision = self._promote(other)
        real = checked_sub(self.real, other.real, precision.coerce)
        imaginary = checked_sub(self.imaginary, other.imaginary, precision.coerce)
        if real is None or imaginary is None:
            return self._checked_failed("sub", other)
        return Complex(real, imaginary, precision)

    def checked_mul(self, other: "Complex") -> "Complex | None":
        precision = self._promote(other)
        coerce = precision.coerce
        products = (
            checked_mul(self.real, other.real, coerce),
            checked_mul(self.imaginary, other.imaginary, coerce),
            checked_mul(self.real, other.imaginary, coerce),
            checked_mul(self.imaginary, other.real, coerce),
        )
        if any(p is None for p in products):
            return self._checked_failed("mul", other)

        rr, ii, ri, ir = products
        real = checked_sub(rr, ii, coerce)
        imaginary = checked_add(ri, ir, coerce)
        if real is None or imaginary is None:
            return self._checked_failed("mul", other)
        return Complex(real, imaginary, precision)

    def checked_div(self, other: "Complex") -> "Complex | None":
        precision = self._promote(other)
        coerce = precision.coerce
        products = (
            checked_mul(other.real, other.real, coerce),
            checked_mul(other.imaginary, other.imaginary, coerce),
            checked_mul(self.real, other.real, coerce),
            checked_mul(self.imaginary, other.imaginary, coerce),
            checked_mul(self.imaginary, other.real, coerce),
            checked_mul(self.real, other.imaginary, coerce),
        )
        if any(p is None for p in products):
            return self._checked_failed("div", other)

        bb_rr, bb_ii, rr, ii, ir, ri = products
        denominator = checked_add(bb_rr, bb_ii, coerce)
        real_numerator = checked_add(rr, ii, coerce)
        imaginary_numerator = checked_sub(ir, ri, coerce)
        if denominator is None or real_numerator is None or imaginary_numerator is None:
            return self._checked_failed("div", other)

        real = checked_div(real_numerator, denominator, coerce)
        imaginary = checked_div(imaginary_numerator, denominator, coerce)
        if real is None or imaginary is None:
            return self._checked_failed("div", other)
        return Complex(real, imaginary, precision)

    def checked_neg(self) -> "Complex | None":
        real = checked_neg(self.real, self.precision.coerce)
        imaginary = checked_neg(self.imaginary, self.precision.coerce)
        if real is None or imaginary is None:
            return self._checked_failed("neg")
        return Complex(real, imaginary, self.precision)

    # -------------------------------------------------------------------------
    # Приведения (только действительная часть)
    # -------------------------------------------------------------------------

    def to_primitive(self, kind: PrimitiveKind) -> int | float | None:
        """
        Checked-приведение действительной части; imaginary отбрасывается.

        Returns:
            Значение kind или None, если real NaN/Inf или вне диапазона
        """
        if kind.is_float:
            return FloatFormat(kind.value).coerce(self.real)
        return float_to_int_checked(self.real, kind)

    def as_primitive(self, kind: PrimitiveKind) -> int | float:
        """Насыщающее приведение действительной части (NaN → 0)."""
        if kind.is_float:
            return FloatFormat(kind.value).coerce(self.real)
        return float_to_int_saturating(self.real, kind)

    @classmethod
    def from_primitive(
        cls,
        value: Scalar,
        kind: PrimitiveKind,
        precision: FloatFormat = FloatFormat.F64,
    ) -> "Complex | None":
        """
        Чисто действительное число из значения примитивного типа.

        Returns:
            None, если value вне диапазона kind или конечное значение
            не представимо конечным числом в precision
        """
        if kind.is_float:
            try:
                primitive = FloatFormat(kind.value).coerce(value)
            except OverflowError:
                return None
            if math.isfinite(value) and not math.isfinite(primitive):
                return None
            return cls.num_cast(primitive, precision)

        low, high = kind.int_bounds
        if not isinstance(value, int) or not low <= value <= high:
            return None
        return cls.num_cast(value, precision)

    @classmethod
    def num_cast(cls, value: Any, precision: FloatFormat = FloatFormat.F64) -> "Complex | None":
        """
        Обобщённое приведение числа (int, float, Complex) к Complex.

        Complex-аргумент теряет мнимую часть. NaN/Inf проходят как есть;
        конечное значение, переполняющее precision, даёт None.

        Raises:
            TypeError: Если value не число
        """
        if isinstance(value, Complex):
            value = value.real

        if not isinstance(value, (int, float)):
            raise TypeError(f"cannot cast {type(value).__name__} to Complex")

        try:
            real = precision.coerce(value)
        except OverflowError:
            return None
        if math.isfinite(value) and not math.isfinite(real):
            return None
        return cls.from_real(real, precision)

    # -------------------------------------------------------------------------
    # Протокол Python
    # -------------------------------------------------------------------------

    @staticmethod
    def _component_index(index: Any) -> bool:
        if not isinstance(index, int) or index not in (0, 1):
            raise IndexError(f"component index must be a bool, got {index!r}")
        return bool(index)

    def __getitem__(self, index: bool) -> float:
        """c[False] → real, c[True] → imaginary."""
        return self.imaginary if self._component_index(index) else self.real

    def __repr__(self) -> str:
        return format_debug(self.real, self.imaginary, self.precision)

    def __str__(self) -> str:
        return format_display(self.real, self.imaginary, self.precision)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self.real == other.real and self.imaginary == other.imaginary
        if isinstance(other, (int, float, complex)):
            return complex(self.real, self.imaginary) == other
        return NotImplemented

    def __hash__(self) -> int:
        # hash(complex) с NaN зависит от адреса временного объекта
        if math.isnan(self.real) or math.isnan(self.imaginary):
            return hash((self.real, self.imaginary))
        return hash(complex(self.real, self.imaginary))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __float__(self) -> float:
        return self.real

    def __int__(self) -> int:
        return math.trunc(self.real)

    def __bytes__(self) -> bytes:
        return self.as_bytes()

    def _as_complex(self, other: Any) -> "Complex | None":
        if isinstance(other, Complex):
            return other
        if isinstance(other, complex):
            return Complex.from_builtin(other, self.precision)
        return None

    def _binary(
        self,
        other: Any,
        complex_op: Callable[["Complex", "Complex"], "Complex"],
        scalar_op: Callable[["Complex", Scalar], "Complex"],
    ) -> "Complex":
        if isinstance(other, (int, float)):
            return scalar_op(self, other)
        operand = self._as_complex(other)
        if operand is None:
            return NotImplemented
        return complex_op(self, operand)

    def __add__(self, other: Any) -> "Complex":
        return self._binary(other, Complex.add, Complex.addf)

    def __radd__(self, other: Any) -> "Complex":
        return self._binary(other, lambda a, b: b.add(a), Complex.addf)

    def __sub__(self, other: Any) -> "Complex":
        return self._binary(other, Complex.sub, Complex.subf)

    def __rsub__(self, other: Any) -> "Complex":
        return self._binary(
            other,
            lambda a, b: b.sub(a),
            lambda a, x: Complex.from_real(x, a.precision).sub(a),
        )

    def __mul__(self, other: Any) -> "Complex":
        return self._binary(other, Complex.mul, Complex.mulf)

    def __rmul__(self, other: Any) -> "Complex":
        return self._binary(other, lambda a, b: b.mul(a), Complex.mulf)

    def __truediv__(self, other: Any) -> "Complex":
        return self._binary(other, Complex.div, Complex.divf)

    def __rtruediv__(self, other: Any) -> "Complex":
        return self._binary(
            other,
            lambda a, b: b.div(a),
            lambda a, x: Complex.from_real(x, a.precision).div(a),
        )

    def __pow__(self, exponent: Any) -> "Complex":
        if isinstance(exponent, int):
            return self.powi(exponent)
        if isinstance(exponent, float):
            return self.powf(exponent)
        operand = self._as_complex(exponent)
        if operand is None:
            return NotImplemented
        return self.pow(operand)

    def __rpow__(self, base: Any) -> "Complex":
        if isinstance(base, (int, float)):
            return Complex.from_real(base, self.precision).pow(self)
        operand = self._as_complex(base)
        if operand is None:
            return NotImplemented
        return operand.pow(self)

    def __neg__(self) -> "Complex":
        return self.neg()

    def __pos__(self) -> "Complex":
        return self

    def __invert__(self) -> "Complex":
        """~z — сопряжённое число."""
        return self.conj()

    def __abs__(self) -> "Complex":
        return self.abs()

    def __round__(self, ndigits: int | None = None) -> "Complex":
        if ndigits is not None:
            raise TypeError("Complex rounding does not support ndigits")
        return self.naive_round()

    def __floor__(self) -> "Complex":
        return self.naive_floor()

    def __ceil__(self) -> "Complex":
        return self.naive_ceil()

    def __trunc__(self) -> "Complex":
        return self.naive_trunc()

    def __and__(self, other: Any) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.bitand(other)

    def __or__(self, other: Any) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.bitor(other)

    def __xor__(self, other: Any) -> "Complex":
        if not isinstance(other, Complex):
            return NotImplemented
        return self.bitxor(other)
