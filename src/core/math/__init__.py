"""
Core math modules

Скалярные IEEE-754 примитивы и форматы компонент.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Checked arithmetic
    checked_add,
    checked_div,
    checked_mul,
    checked_neg,
    checked_sub,
    # IEEE functions
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
    # Comparisons
    is_close,
    is_sign_negative,
    is_valid_float,
)

# Float Format
from src.core.math.float_format import (
    F32_MAX,
    F32_MIN_POSITIVE,
    F64_MAX,
    F64_MIN_POSITIVE,
    FloatFormat,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Checked arithmetic
    "checked_add",
    "checked_div",
    "checked_mul",
    "checked_neg",
    "checked_sub",
    # Numerical Safeguards — IEEE functions
    "ieee_ceil",
    "ieee_cos",
    "ieee_div",
    "ieee_exp",
    "ieee_floor",
    "ieee_ln",
    "ieee_pow",
    "ieee_round",
    "ieee_signum",
    "ieee_sin",
    "ieee_sqrt",
    "ieee_trunc",
    # Numerical Safeguards — Comparisons
    "is_close",
    "is_sign_negative",
    "is_valid_float",
    # Float Format
    "F32_MAX",
    "F32_MIN_POSITIVE",
    "F64_MAX",
    "F64_MIN_POSITIVE",
    "FloatFormat",
]
