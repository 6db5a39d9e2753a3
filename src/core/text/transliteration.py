"""
Character Transliteration — посимвольная замена по карте символов

Каждый символ входной строки заменяется по карте. Для символа без отображения
поведение задаётся InvalidCharAction:
- FAIL          → InvalidCharacter (частичный результат не возвращается)
- SKIP          → символ опускается
- KEEP_ORIGINAL → символ выводится без изменений

Операция без побочных эффектов, O(n).
"""

from typing import Mapping

from src.core.domain.format_specifier import InvalidCharAction
from src.core.log import get_logger

logger = get_logger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidCharacter(ValueError):
    """Символ отсутствует в карте при действии FAIL."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Invalid character {char!r} at position {position}, not found in character map"
        )


# =============================================================================
# TRANSLITERATE
# =============================================================================


def transliterate(
    text: str,
    char_map: Mapping[str, str],
    action: InvalidCharAction = InvalidCharAction.SKIP,
) -> str:
    """
    Замена символов строки по карте символов.

    Args:
        text: Исходная строка
        char_map: Карта символ → замена
        action: Действие для символа без отображения (default: SKIP)

    Returns:
        Преобразованная строка

    Raises:
        InvalidCharacter: если action=FAIL и встретился символ без отображения

    Examples:
        >>> from src.core.text.character_maps import SUBSCRIPT_MAP
        >>> transliterate("CH4", SUBSCRIPT_MAP, InvalidCharAction.KEEP_ORIGINAL)
        'CH₄'
        >>> transliterate("CH4", SUBSCRIPT_MAP)
        '₄'
    """
    action = InvalidCharAction(action)
    chars: list[str] = []
    skipped = 0

    for position, char in enumerate(text):
        replacement = char_map.get(char)
        if replacement is not None:
            chars.append(replacement)
        elif action is InvalidCharAction.FAIL:
            raise InvalidCharacter(char, position)
        elif action is InvalidCharAction.KEEP_ORIGINAL:
            chars.append(char)
        else:
            skipped += 1

    if skipped:
        logger.debug("Skipped %d unmapped character(s) in %r", skipped, text)

    return "".join(chars)
