"""
Numeric Kind — классификация значений по числовому типу

Модуль определяет, к какой категории чисел относится произвольное значение.
Классификация замкнута и исчерпывающая: любое значение получает ровно один
NumericKind, неподдерживаемые значения — NOT_A_NUMBER (это не ошибка).

Соответствие типов Python:
- numpy.signedinteger (int8..int64)            → SIGNED_INTEGER
- numpy.unsignedinteger (uint8..uint64)        → UNSIGNED_INTEGER
- int и прочие numbers.Integral                → ARBITRARY_PRECISION_INTEGER
- float, numpy.floating, Decimal, numbers.Real → FLOATING_POINT
- complex, numpy.complexfloating               → COMPLEX
- bool, None, str и всё остальное              → NOT_A_NUMBER

bool исключён явно: в Python это подкласс int, но не число по смыслу.
"""

import numbers
from decimal import Decimal
from enum import Enum
from typing import Any, Final

import numpy as np


# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Категория числового значения"""

    SIGNED_INTEGER = "signed_integer"
    UNSIGNED_INTEGER = "unsigned_integer"
    FLOATING_POINT = "floating_point"
    ARBITRARY_PRECISION_INTEGER = "arbitrary_precision_integer"
    COMPLEX = "complex"
    NOT_A_NUMBER = "not_a_number"


INTEGER_KINDS: Final[frozenset[NumericKind]] = frozenset(
    {
        NumericKind.SIGNED_INTEGER,
        NumericKind.UNSIGNED_INTEGER,
        NumericKind.ARBITRARY_PRECISION_INTEGER,
    }
)

REAL_KINDS: Final[frozenset[NumericKind]] = INTEGER_KINDS | {NumericKind.FLOATING_POINT}

NUMBER_KINDS: Final[frozenset[NumericKind]] = REAL_KINDS | {NumericKind.COMPLEX}


# =============================================================================
# CLASSIFIER
# =============================================================================


def classify(value: Any) -> NumericKind:
    """
    Классификация значения по числовому типу.

    Чистая тотальная функция: исключений не бросает.

    Порядок проверок важен: numpy-скаляры фиксированной ширины проверяются
    раньше numbers.Integral, а bool — раньше всего остального.

    Args:
        value: Произвольное значение

    Returns:
        NumericKind

    Examples:
        >>> classify(5)
        <NumericKind.ARBITRARY_PRECISION_INTEGER: 'arbitrary_precision_integer'>
        >>> classify(np.uint8(5))
        <NumericKind.UNSIGNED_INTEGER: 'unsigned_integer'>
        >>> classify("5")
        <NumericKind.NOT_A_NUMBER: 'not_a_number'>
    """
    if isinstance(value, (bool, np.bool_)):
        return NumericKind.NOT_A_NUMBER

    if isinstance(value, np.signedinteger):
        return NumericKind.SIGNED_INTEGER

    if isinstance(value, np.unsignedinteger):
        return NumericKind.UNSIGNED_INTEGER

    if isinstance(value, numbers.Integral):
        return NumericKind.ARBITRARY_PRECISION_INTEGER

    # Decimal не зарегистрирован как numbers.Real
    if isinstance(value, (numbers.Real, Decimal)):
        return NumericKind.FLOATING_POINT

    if isinstance(value, numbers.Complex):
        return NumericKind.COMPLEX

    return NumericKind.NOT_A_NUMBER


# =============================================================================
# PREDICATES
# =============================================================================


def is_signed_integer(value: Any) -> bool:
    """Знаковое целое фиксированной ширины (numpy)."""
    return classify(value) is NumericKind.SIGNED_INTEGER


def is_unsigned_integer(value: Any) -> bool:
    """Беззнаковое целое фиксированной ширины (numpy)."""
    return classify(value) is NumericKind.UNSIGNED_INTEGER


def is_floating_point(value: Any) -> bool:
    """Нецелое вещественное (float, numpy.floating, Decimal, Fraction)."""
    return classify(value) is NumericKind.FLOATING_POINT


def is_fixed_point(value: Any) -> bool:
    """
    Десятичное число с фиксированной точкой (Decimal).

    Подмножество FLOATING_POINT: отдельного NumericKind нет.
    """
    return isinstance(value, Decimal)


def is_complex(value: Any) -> bool:
    return classify(value) is NumericKind.COMPLEX


def is_integer(value: Any) -> bool:
    """SIGNED_INTEGER ∪ UNSIGNED_INTEGER ∪ ARBITRARY_PRECISION_INTEGER."""
    return classify(value) in INTEGER_KINDS


def is_real(value: Any) -> bool:
    """Целое или FLOATING_POINT."""
    return classify(value) in REAL_KINDS


def is_number(value: Any) -> bool:
    """Вещественное или комплексное."""
    return classify(value) in NUMBER_KINDS
