"""
Formatting — Текстовые представления Complex

Два фиксированных формата, совместимых с существующими потребителями вывода:
- debug:   Complex { real: 1.0, imaginary: -2.5i }
- display: ( + 1 - 2.5i )

Числа печатаются кратчайшей записью, однозначно восстанавливающей значение
в формате компоненты. Debug сохраняет '.0' у целых значений и переходит на
экспоненциальную запись вне [1e-4, 1e16); display всегда позиционный.
"""

import math
from decimal import Decimal
from typing import Final

from src.core.math.float_format import FloatFormat
from src.core.math.numerical_safeguards import is_sign_negative

# Границы позиционной записи в debug-формате
DEBUG_EXP_LOWER: Final[float] = 1e-4
DEBUG_EXP_UPPER: Final[float] = 1e16


def _special(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    return None


def _positional(number: Decimal) -> str:
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _scientific(number: Decimal) -> str:
    sign, digits, exponent = number.normalize().as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(d) for d in digits[1:])
    power = exponent + len(digits) - 1
    return f"{'-' if sign else ''}{mantissa}e{power}"


def format_debug_component(value: float, precision: FloatFormat) -> str:
    """
    Debug-запись компоненты.

    Examples:
        >>> format_debug_component(1.0, FloatFormat.F64)
        '1.0'
        >>> format_debug_component(1e16, FloatFormat.F64)
        '1e16'
        >>> format_debug_component(1.5e-5, FloatFormat.F64)
        '1.5e-5'
    """
    special = _special(value)
    if special is not None:
        return special

    number = Decimal(precision.shortest_repr(value))
    magnitude = abs(value)
    if magnitude != 0.0 and (magnitude < DEBUG_EXP_LOWER or magnitude >= DEBUG_EXP_UPPER):
        return _scientific(number)

    text = _positional(number)
    if "." not in text:
        text += ".0"
    if is_sign_negative(value) and not text.startswith("-"):
        text = "-" + text
    return text


def format_display_component(value: float, precision: FloatFormat) -> str:
    """
    Display-запись компоненты: позиционная, без '.0' у целых.

    Examples:
        >>> format_display_component(1.0, FloatFormat.F64)
        '1'
        >>> format_display_component(2.5, FloatFormat.F64)
        '2.5'
    """
    special = _special(value)
    if special is not None:
        return special
    return _positional(Decimal(precision.shortest_repr(value)))


def format_debug(real: float, imaginary: float, precision: FloatFormat) -> str:
    return (
        f"Complex {{ real: {format_debug_component(real, precision)}, "
        f"imaginary: {format_debug_component(imaginary, precision)}i }}"
    )


def format_display(real: float, imaginary: float, precision: FloatFormat) -> str:
    """
    Display-форма: знаки берутся из знакового бита, модули — через abs.

    Examples:
        >>> format_display(1.0, -2.0, FloatFormat.F64)
        '( + 1 - 2i )'
    """
    real_sign = "-" if is_sign_negative(real) else "+"
    imaginary_sign = "-" if is_sign_negative(imaginary) else "+"
    return (
        f"( {real_sign} {format_display_component(abs(real), precision)} "
        f"{imaginary_sign} {format_display_component(abs(imaginary), precision)}i )"
    )
