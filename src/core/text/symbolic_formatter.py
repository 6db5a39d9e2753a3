"""
Symbolic Formatter — вывод значений надстрочными/подстрочными символами

Конвейер одного вызова format(specifier, value):
1. None → пустая строка (при любом спецификаторе)
2. Разбор спецификатора (su[pb][0-2]?)
3. Рендеринг значения в промежуточную строку:
   - str используется как есть
   - числа рендерятся по NumericKind (таблица рендереров)
   - прочее через str(value)
4. Транслитерация по карте выбранного режима

Правила рендеринга чисел:
- Целые (любой целочисленный NumericKind) → десятичные цифры со знаком
- Нецелые в superscript → общий формат: для float кратчайшие цифры,
  заглавная 'E' в порядке (general_format); Decimal, Fraction, complex через format(value, "")
- Нецелые в subscript → фиксированная точка без дробной части (".0f")

Подстрочный режим не имеет глифа для 'E', поэтому экспоненциальная запись
в subscript невозможна: это ограничение представления, а не ошибка.

Состояния между вызовами нет, кроме двух неизменяемых карт символов.
"""

import math
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping

import numpy as np

from src.core.domain.format_specifier import (
    FormatSpecifier,
    InvalidCharAction,
    ScriptMode,
)
from src.core.log import get_logger
from src.core.math.numeric_kind import NumericKind, classify
from src.core.text.character_maps import SUBSCRIPT_MAP, SUPERSCRIPT_MAP
from src.core.text.transliteration import transliterate

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Порог десятичного порядка для экспоненциальной записи в общем формате
# (по умолчанию 15, как для float64)
GENERAL_FORMAT_PRECISION: Final[Mapping[type, int]] = MappingProxyType(
    {
        np.float32: 7,
        np.float16: 5,
    }
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class TypeMismatch(TypeError):
    """Formatter вызван с чужим токеном привязки."""

    pass


# =============================================================================
# CAPABILITY TOKEN
# =============================================================================


@dataclass(frozen=True)
class ProviderToken:
    """
    Токен привязки к конкретному экземпляру SymbolicFormatter.

    Каждый formatter создаёт собственный токен; вызов format с токеном
    другого formatter отклоняется.
    """

    key: str = field(default_factory=lambda: uuid.uuid4().hex)


# =============================================================================
# RENDERERS
# =============================================================================

Renderer = Callable[[Any, ScriptMode], str]


def _render_integer(value: Any, mode: ScriptMode) -> str:
    return str(int(value))


def general_format(value: Any) -> str:
    """
    Общий формат двоичного числа с плавающей точкой.

    Кратчайшие цифры, однозначно восстанавливающие значение; без хвоста '.0'.
    Экспоненциальная запись, если десятичный порядок <= -5 или >= точности типа
    (15 для float64, 7 для float32, 5 для float16): заглавная 'E', знак и
    минимум две цифры порядка.

    Args:
        value: float или numpy.floating

    Returns:
        Строка общего формата

    Examples:
        >>> general_format(2.0)
        '2'
        >>> general_format(2.5e20)
        '2.5E+20'
        >>> general_format(2.5e-7)
        '2.5E-07'
        >>> general_format(0.0001)
        '0.0001'
    """
    if not math.isfinite(value):
        return str(value)

    # str() numpy-скаляра даёт кратчайшие цифры его собственной точности
    sign, digit_tuple, exponent = Decimal(str(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    magnitude = len(digits) - 1 + exponent
    precision = GENERAL_FORMAT_PRECISION.get(type(value), 15)

    if -5 < magnitude < precision:
        if exponent >= 0:
            text = digits + "0" * exponent
        else:
            point = len(digits) + exponent
            if point > 0:
                text = f"{digits[:point]}.{digits[point:]}"
            else:
                text = "0." + "0" * -point + digits
    else:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        text = f"{mantissa}E{'-' if magnitude < 0 else '+'}{abs(magnitude):02d}"

    return f"-{text}" if sign else text


def _render_non_integer(value: Any, mode: ScriptMode) -> str:
    if mode is ScriptMode.SUBSCRIPT:
        return format(value, ".0f")
    if isinstance(value, (float, np.floating)):
        return general_format(value)
    # Decimal, Fraction, complex: собственный общий формат типа
    return format(value, "")


def _render_default(value: Any, mode: ScriptMode) -> str:
    logger.debug("Rendering %s via str()", type(value).__name__)
    return str(value)


RENDERERS: Final[Mapping[NumericKind, Renderer]] = {
    NumericKind.SIGNED_INTEGER: _render_integer,
    NumericKind.UNSIGNED_INTEGER: _render_integer,
    NumericKind.ARBITRARY_PRECISION_INTEGER: _render_integer,
    NumericKind.FLOATING_POINT: _render_non_integer,
    NumericKind.COMPLEX: _render_non_integer,
    NumericKind.NOT_A_NUMBER: _render_default,
}


def render_value(value: Any, mode: ScriptMode) -> str:
    """
    Рендеринг значения в промежуточную строку до транслитерации.

    Args:
        value: Строка, число или произвольный объект
        mode: Режим вывода (влияет на формат нецелых чисел)

    Returns:
        Промежуточная строка (пустая для None)

    Examples:
        >>> render_value(2.5e20, ScriptMode.SUPERSCRIPT)
        '2.5E+20'
        >>> render_value(2.5, ScriptMode.SUBSCRIPT)
        '2'
    """
    if value is None:
        return ""

    if isinstance(value, str):
        return value

    text = RENDERERS[classify(value)](value, mode)
    return text or ""


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatterConfig:
    """Конфигурация SymbolicFormatter.

    По умолчанию используются общие неизменяемые карты символов процесса.
    """

    # Действие, если в спецификаторе нет цифры
    default_action: InvalidCharAction = InvalidCharAction.SKIP

    superscript_map: Mapping[str, str] = SUPERSCRIPT_MAP
    subscript_map: Mapping[str, str] = SUBSCRIPT_MAP

    def __post_init__(self) -> None:
        # Копия переданной карты только для чтения
        for name in ("superscript_map", "subscript_map"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))


# =============================================================================
# FORMATTER
# =============================================================================


class SymbolicFormatter:
    """Форматирование чисел и строк надстрочными/подстрочными символами.

    Допустимые спецификаторы: sup, sup0, sup1, sup2, sub, sub0, sub1, sub2
    (регистр не важен). Цифра задаёт действие для символа без отображения:
      0 = исключение InvalidCharacter
      1 = пропустить символ (по умолчанию)
      2 = оставить исходный символ
    """

    def __init__(self, config: FormatterConfig | None = None):
        """Инициализация formatter.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or FormatterConfig()
        self._token = ProviderToken()

    @property
    def token(self) -> ProviderToken:
        """Токен привязки этого экземпляра."""
        return self._token

    def char_map(self, mode: ScriptMode) -> Mapping[str, str]:
        """Карта символов для режима."""
        if mode is ScriptMode.SUPERSCRIPT:
            return self.config.superscript_map
        return self.config.subscript_map

    def parse(self, specifier: str | None) -> FormatSpecifier:
        """Разбор спецификатора с default_action из конфигурации."""
        return FormatSpecifier.parse(specifier, default_action=self.config.default_action)

    def format(
        self,
        specifier: str | None,
        value: Any,
        token: ProviderToken | None = None,
    ) -> str:
        """Форматирование значения надстрочными или подстрочными символами.

        Целые выводятся десятичными цифрами со знаком. Нецелые: общий формат
        для sup, фиксированная точка без дробной части для sub.

        Args:
            specifier: Спецификатор формата (su[pb][0-2]?)
            value: Число, строка, None или произвольный объект
            token: Токен привязки (None для прямого вызова)

        Returns:
            Преобразованная строка

        Raises:
            TypeMismatch: если передан токен другого formatter
            InvalidFormatSpecifier: если спецификатор не соответствует грамматике
            InvalidCharacter: если действие FAIL и встретился символ без отображения

        Examples:
            >>> SymbolicFormatter().format("sup", -5)
            '⁻⁵'
        """
        if token is not None and token != self._token:
            raise TypeMismatch("Provider token does not belong to this formatter")

        # None → пустая строка при любом спецификаторе
        if value is None:
            return ""

        spec = self.parse(specifier)
        return self.render(spec, value)

    def render(self, spec: FormatSpecifier, value: Any) -> str:
        """Рендеринг и транслитерация по уже разобранному спецификатору."""
        text = render_value(value, spec.mode)
        if not text:
            return ""
        return transliterate(text, self.char_map(spec.mode), spec.action)


# Общий formatter процесса (stateless, безопасен для конкурентного использования)
DEFAULT_FORMATTER: Final[SymbolicFormatter] = SymbolicFormatter()


# =============================================================================
# CONVENIENCE
# =============================================================================


def format_scripted(specifier: str | None, value: Any) -> str:
    """
    format через общий formatter процесса.

    Examples:
        >>> format_scripted("sup", 123)
        '¹²³'
        >>> format_scripted("sub", 9)
        '₈'
    """
    return DEFAULT_FORMATTER.format(specifier, value)


def to_superscript(value: Any, action: InvalidCharAction = InvalidCharAction.SKIP) -> str:
    """
    Строка или число → надстрочные символы.

    Examples:
        >>> to_superscript("x2")
        '²'
        >>> to_superscript("x2", InvalidCharAction.KEEP_ORIGINAL)
        'x²'
    """
    spec = FormatSpecifier(mode=ScriptMode.SUPERSCRIPT, action=action)
    return DEFAULT_FORMATTER.render(spec, value)


def to_subscript(value: Any, action: InvalidCharAction = InvalidCharAction.SKIP) -> str:
    """
    Строка или число → подстрочные символы.

    Examples:
        >>> to_subscript("CH3OH", InvalidCharAction.KEEP_ORIGINAL)
        'CH₃OH'
    """
    spec = FormatSpecifier(mode=ScriptMode.SUBSCRIPT, action=action)
    return DEFAULT_FORMATTER.render(spec, value)
