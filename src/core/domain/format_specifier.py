"""
FormatSpecifier — разобранный спецификатор формата sup/sub

Грамматика (без учёта регистра): su[pb][0-2]?
- "sup" → надстрочный режим (superscript)
- "sub" → подстрочный режим (subscript)
- необязательная цифра → действие для символа без отображения:
  0 = FAIL, 1 = SKIP (по умолчанию), 2 = KEEP_ORIGINAL

Immutable Pydantic модель, создаётся один раз на вызов format.
"""

import re
from enum import Enum, IntEnum
from typing import Final

from pydantic import BaseModel, Field, ValidationError


# =============================================================================
# CONSTANTS
# =============================================================================

SPECIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"su([pb])([0-2])?", re.IGNORECASE)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFormatSpecifier(ValueError):
    """Спецификатор не соответствует грамматике su[pb][0-2]?."""

    def __init__(self, specifier: object):
        self.specifier = specifier
        super().__init__(
            f"Invalid format specifier {specifier!r}. Must be 'sup' for superscript or "
            f"'sub' for subscript, optionally followed by a single-digit action code (0-2)."
        )


# =============================================================================
# ENUMS
# =============================================================================


class ScriptMode(str, Enum):
    """Режим вывода"""

    SUPERSCRIPT = "sup"
    SUBSCRIPT = "sub"


class InvalidCharAction(IntEnum):
    """Действие для символа, отсутствующего в карте символов"""

    FAIL = 0
    SKIP = 1
    KEEP_ORIGINAL = 2


# =============================================================================
# FORMAT SPECIFIER MODEL
# =============================================================================


class FormatSpecifier(BaseModel):
    """
    Разобранный спецификатор формата.

    Содержит режим (sup/sub) и действие для невалидных символов.
    """

    mode: ScriptMode = Field(..., description="Надстрочный или подстрочный режим")
    action: InvalidCharAction = Field(
        InvalidCharAction.SKIP, description="Действие для символа без отображения"
    )

    model_config = {"frozen": True}

    @classmethod
    def parse(
        cls,
        specifier: str | None,
        default_action: InvalidCharAction = InvalidCharAction.SKIP,
    ) -> "FormatSpecifier":
        """
        Разбор строки спецификатора.

        Args:
            specifier: Строка вида sup, sub, sup0..sup2, sub0..sub2 (любой регистр)
            default_action: Действие, если цифра не указана

        Returns:
            FormatSpecifier

        Raises:
            InvalidFormatSpecifier: если строка не соответствует грамматике

        Examples:
            >>> FormatSpecifier.parse("SUB2").to_text()
            'sub2'
        """
        if not isinstance(specifier, str):
            raise InvalidFormatSpecifier(specifier)

        match = SPECIFIER_PATTERN.fullmatch(specifier)
        if match is None:
            raise InvalidFormatSpecifier(specifier)

        mode_letter, action_digit = match.groups()
        mode = ScriptMode.SUPERSCRIPT if mode_letter.lower() == "p" else ScriptMode.SUBSCRIPT
        action = default_action if action_digit is None else InvalidCharAction(int(action_digit))

        try:
            return cls(mode=mode, action=action)
        except ValidationError as e:
            raise InvalidFormatSpecifier(specifier) from e

    def to_text(self) -> str:
        """Каноническая запись, например 'sup1'."""
        return f"{self.mode.value}{self.action.value}"
