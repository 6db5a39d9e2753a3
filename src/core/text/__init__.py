"""
Text modules

Транслитерация символов и форматирование надстрочными/подстрочными символами.
"""

from src.core.text.character_maps import SUBSCRIPT_MAP, SUPERSCRIPT_MAP
from src.core.text.string_formatter import ScriptStringFormatter
from src.core.text.symbolic_formatter import (
    DEFAULT_FORMATTER,
    FormatterConfig,
    ProviderToken,
    SymbolicFormatter,
    TypeMismatch,
    format_scripted,
    general_format,
    render_value,
    to_subscript,
    to_superscript,
)
from src.core.text.transliteration import InvalidCharacter, transliterate

__all__ = [
    # Character maps
    "SUBSCRIPT_MAP",
    "SUPERSCRIPT_MAP",
    # Transliteration
    "InvalidCharacter",
    "transliterate",
    # Symbolic Formatter
    "DEFAULT_FORMATTER",
    "FormatterConfig",
    "ProviderToken",
    "SymbolicFormatter",
    "TypeMismatch",
    "format_scripted",
    "general_format",
    "render_value",
    "to_subscript",
    "to_superscript",
    # string.Formatter binding
    "ScriptStringFormatter",
]
