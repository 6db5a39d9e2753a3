"""
Core math modules

Числовые примитивы: классификация числовых типов и floored division.
"""

# Floored Division
from src.core.math.floored_division import (
    DivisionByZero,
    DivModResult,
    floor_div,
    floor_divmod,
    floor_mod,
)

# Numeric Kind
from src.core.math.numeric_kind import (
    INTEGER_KINDS,
    NUMBER_KINDS,
    REAL_KINDS,
    NumericKind,
    classify,
    is_complex,
    is_fixed_point,
    is_floating_point,
    is_integer,
    is_number,
    is_real,
    is_signed_integer,
    is_unsigned_integer,
)

__all__ = [
    # Floored Division — Exceptions
    "DivisionByZero",
    # Floored Division — Types
    "DivModResult",
    # Floored Division — Functions
    "floor_div",
    "floor_divmod",
    "floor_mod",
    # Numeric Kind — Constants
    "INTEGER_KINDS",
    "NUMBER_KINDS",
    "REAL_KINDS",
    # Numeric Kind — Types
    "NumericKind",
    # Numeric Kind — Functions
    "classify",
    "is_complex",
    "is_fixed_point",
    "is_floating_point",
    "is_integer",
    "is_number",
    "is_real",
    "is_signed_integer",
    "is_unsigned_integer",
]
