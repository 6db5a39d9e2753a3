"""
Floored Division — деление с остатком знака делителя

Модуль реализует целочисленное деление и остаток по правилу floored division:
- Остаток всегда равен нулю или имеет знак делителя
- |остаток| < |делитель|
- quotient * divisor + remainder == dividend (точно)

В отличие от усечённого деления (truncated division), floored division даёт
регулярный цикл по отрицательным и положительным значениям, что позволяет
писать, например, floor_mod(n, 2) == 1 для проверки нечётности при любом знаке n.

Python int/float уже делят с округлением вниз, но decimal.Decimal усекает,
поэтому коррекция знака применяется всегда после нативных операторов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. floor_div и floor_mod — проекции floor_divmod, никогда не вычисляются отдельно
2. Делитель 0 → DivisionByZero до какого-либо нативного деления
"""

from typing import Any, NamedTuple


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """Делитель равен нулю в floored division."""

    def __init__(self, dividend: Any):
        self.dividend = dividend
        super().__init__(f"Floored division of {dividend!r} by zero")


# =============================================================================
# RESULT
# =============================================================================


class DivModResult(NamedTuple):
    """Пара (частное, остаток) одного floored деления."""

    quotient: Any
    remainder: Any


# =============================================================================
# FLOORED DIVISION
# =============================================================================


def floor_divmod(a: Any, b: Any) -> DivModResult:
    """
    Частное и остаток floored division.

    Алгоритм:
        q, r = a // b, a % b   (нативное деление типа)
        если r и b ненулевые и разных знаков: r += b; q -= 1
        если после округления r == b: r = 0 (знак b); q += 1

    Для float/Decimal в последнем случае q * b + r совпадает с a
    с точностью до округления, а не точно.

    Args:
        a: Делимое (int, float, Decimal, Fraction, numpy scalar)
        b: Делитель того же семейства типов

    Returns:
        DivModResult(quotient, remainder)

    Raises:
        DivisionByZero: если b == 0

    Examples:
        >>> floor_divmod(-7, 3)
        DivModResult(quotient=-3, remainder=2)
        >>> floor_divmod(7, -3)
        DivModResult(quotient=-3, remainder=-2)
        >>> from decimal import Decimal
        >>> floor_divmod(Decimal(-7), Decimal(3))
        DivModResult(quotient=Decimal('-3'), remainder=Decimal('2'))
    """
    if b == 0:
        raise DivisionByZero(a)

    quotient = a // b
    remainder = a % b

    if (remainder < 0 and b > 0) or (remainder > 0 and b < 0):
        remainder += b
        quotient -= 1

    # float/Decimal: r + b может округлиться ровно до b (например -1e-20 % 3.0)
    if remainder == b:
        remainder = b * 0
        quotient += 1

    return DivModResult(quotient, remainder)


def floor_div(a: Any, b: Any) -> Any:
    """
    Частное floored division.

    Raises:
        DivisionByZero: если b == 0
    """
    return floor_divmod(a, b).quotient


def floor_mod(a: Any, b: Any) -> Any:
    """
    Остаток floored division (знак делителя).

    Examples:
        >>> floor_mod(-1, 5)
        4
        >>> floor_mod(1, -5)
        -4

    Raises:
        DivisionByZero: если b == 0
    """
    return floor_divmod(a, b).remainder
