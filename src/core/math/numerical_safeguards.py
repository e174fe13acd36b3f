"""
Numerical Safeguards — IEEE-754 Scalar Primitives

Модуль содержит скалярные примитивы, на которых построена арифметика
Complex:
- IEEE-754 версии функций math (деление, ln, exp, pow, sin/cos), которые
  никогда не бросают исключений, а возвращают NaN/Inf как аппаратный float
- Округление в семантике IEEE (round half away from zero, сохранение знака нуля)
- Checked-арифметика: None вместо непредставимого результата
- Epsilon-сравнения float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна IEEE-функция не бросает ZeroDivisionError/ValueError/OverflowError
2. NaN пропагирует, ±Inf сохраняет знак
3. Checked-операции возвращают None, если операнд или результат не finite
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Callable, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

INF: Final[float] = float("inf")
NAN: Final[float] = float("nan")


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN и не Inf).

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def is_sign_negative(value: float) -> bool:
    """Знаковый бит установлен (включая -0.0 и NaN с битом знака)."""
    return math.copysign(1.0, value) < 0


# =============================================================================
# IEEE-754 ФУНКЦИИ
# =============================================================================


def ieee_div(numerator: float, denominator: float) -> float:
    """
    Деление по IEEE-754.

    Python бросает ZeroDivisionError для x / 0.0, аппаратный float — нет:
    - 0/0, NaN/0 → NaN
    - x/±0 → ±Inf (знак = произведение знаков)

    Examples:
        >>> ieee_div(1.0, 0.0)
        inf
        >>> ieee_div(1.0, -0.0)
        -inf
        >>> ieee_div(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator) or math.isnan(denominator):
        return NAN

    negative = is_sign_negative(numerator) != is_sign_negative(denominator)
    return -INF if negative else INF


def ieee_ln(value: float) -> float:
    """
    Натуральный логарифм по IEEE-754.

    ln(±0) = -Inf, ln(x < 0) = NaN, ln(+Inf) = +Inf.
    """
    if math.isnan(value):
        return NAN
    if value == 0.0:
        return -INF
    if value < 0.0:
        return NAN
    return math.log(value)


def ieee_exp(value: float) -> float:
    """Экспонента; переполнение даёт +Inf вместо OverflowError."""
    try:
        return math.exp(value)
    except OverflowError:
        return INF


def ieee_sin(value: float) -> float:
    """sin(±Inf) = NaN."""
    if math.isinf(value):
        return NAN
    return math.sin(value)


def ieee_cos(value: float) -> float:
    """cos(±Inf) = NaN."""
    if math.isinf(value):
        return NAN
    return math.cos(value)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def ieee_pow(base: float, exponent: float) -> float:
    """
    Степень по IEEE-754 (C pow).

    math.pow бросает исключения там, где C pow возвращает значение:
    - pow(±0, y < 0) → ±Inf (знак сохраняется только для нечётного целого y)
    - pow(x < 0, нецелое y) → NaN
    - переполнение → ±Inf

    Examples:
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-0.0, -1.0)
        -inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(INF, base)
            return INF
        return NAN


def ieee_sqrt(value: float) -> float:
    """sqrt(x < 0) = NaN."""
    if value < 0.0:
        return NAN
    return math.sqrt(value)


# =============================================================================
# ОКРУГЛЕНИЕ (IEEE)
# =============================================================================
# math.floor/ceil/trunc возвращают int: теряется знак нуля, а для NaN/Inf
# бросаются исключения. Функции ниже возвращают float и сохраняют -0.0.


def _keep_zero_sign(result: float, value: float) -> float:
    if result == 0.0:
        return math.copysign(0.0, value)
    return result


def ieee_trunc(value: float) -> float:
    """Отбрасывание дробной части."""
    if not math.isfinite(value):
        return value
    return _keep_zero_sign(float(math.trunc(value)), value)


def ieee_floor(value: float) -> float:
    """Округление вниз."""
    if not math.isfinite(value):
        return value
    return _keep_zero_sign(float(math.floor(value)), value)


def ieee_ceil(value: float) -> float:
    """Округление вверх."""
    if not math.isfinite(value):
        return value
    return _keep_zero_sign(float(math.ceil(value)), value)


def ieee_round(value: float) -> float:
    """
    Округление half away from zero (в отличие от banker's rounding round()).

    Examples:
        >>> ieee_round(2.5)
        3.0
        >>> ieee_round(-2.5)
        -3.0
        >>> ieee_round(0.49999999999999994)
        0.0
    """
    if not math.isfinite(value):
        return value

    truncated = ieee_trunc(value)
    # value - truncated точно представимо для любого finite float
    if abs(value - truncated) >= 0.5:
        truncated += math.copysign(1.0, value)
    return _keep_zero_sign(truncated, value)


def ieee_signum(value: float) -> float:
    """
    Знак числа: 1.0 для +0.0 и положительных, -1.0 для -0.0 и отрицательных,
    NaN для NaN.
    """
    if math.isnan(value):
        return NAN
    return math.copysign(1.0, value)


# =============================================================================
# CHECKED-АРИФМЕТИКА
# =============================================================================

Coerce = Callable[[float], float]


def _identity(value: float) -> float:
    return value


def _checked(result: float, coerce: Coerce | None, *operands: float) -> float | None:
    if not all(math.isfinite(op) for op in operands):
        return None

    stored = (coerce or _identity)(result)
    if not math.isfinite(stored):
        return None
    return stored


def checked_add(a: float, b: float, coerce: Coerce | None = None) -> float | None:
    """
    Сложение с проверкой представимости.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        coerce: Приведение результата к формату хранения (например, binary32)

    Returns:
        Сумма или None, если операнд или результат не finite

    Examples:
        >>> checked_add(1.0, 2.0)
        3.0
        >>> checked_add(1e308, 1e308) is None
        True
    """
    return _checked(a + b, coerce, a, b)


def checked_sub(a: float, b: float, coerce: Coerce | None = None) -> float | None:
    """Вычитание с проверкой представимости."""
    return _checked(a - b, coerce, a, b)


def checked_mul(a: float, b: float, coerce: Coerce | None = None) -> float | None:
    """Умножение с проверкой представимости."""
    return _checked(a * b, coerce, a, b)


def checked_div(a: float, b: float, coerce: Coerce | None = None) -> float | None:
    """
    Деление с проверкой представимости.

    Деление на ноль (в том числе -0.0) — всегда None.
    """
    if b == 0.0:
        return None
    return _checked(ieee_div(a, b), coerce, a, b)


def checked_neg(a: float, coerce: Coerce | None = None) -> float | None:
    """Смена знака; None только для NaN/Inf."""
    return _checked(-a, coerce, a)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Бесконечности равны только себе, NaN не равен ничему.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    if math.isnan(a) or math.isnan(b):
        return False

    if math.isinf(a) or math.isinf(b):
        return a == b

    diff = abs(a - b)
    return diff <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
