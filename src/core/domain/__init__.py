"""
Domain value types.

Contains the Complex value type, its numeric-trait contracts and text forms.
"""

from src.core.domain.complex_number import Complex, ComplexConfig, SizeMismatchError
from src.core.domain.formatting import format_debug, format_display
from src.core.domain.numeric_traits import (
    Bounded,
    CheckedArithmetic,
    FloatConstant,
    PrimitiveCast,
    PrimitiveKind,
    SupportsIdentity,
    checked_product,
    checked_sum,
    float_to_int_checked,
    float_to_int_saturating,
)

__all__ = [
    # Complex model
    "Complex",
    "ComplexConfig",
    "SizeMismatchError",
    # Formatting
    "format_debug",
    "format_display",
    # Numeric traits
    "Bounded",
    "CheckedArithmetic",
    "FloatConstant",
    "PrimitiveCast",
    "PrimitiveKind",
    "SupportsIdentity",
    "checked_product",
    "checked_sum",
    "float_to_int_checked",
    "float_to_int_saturating",
]
