"""
ScriptStringFormatter — привязка SymbolicFormatter к string.Formatter

Поля подстановки со спецификатором su[pb][0-2]? форматируются через
собственный SymbolicFormatter (с его токеном привязки), остальные
стандартным mini-language Python.

    >>> ScriptStringFormatter().format("x{0:sup}", 2)
    'x²'
    >>> ScriptStringFormatter().format("{0:sub2} / {1:.2f}", "H2O", 1.5)
    'H₂O / 1.50'
"""

import string
from typing import Any

from src.core.domain.format_specifier import SPECIFIER_PATTERN
from src.core.text.symbolic_formatter import FormatterConfig, SymbolicFormatter


class ScriptStringFormatter(string.Formatter):
    """string.Formatter с поддержкой спецификаторов sup/sub."""

    def __init__(self, config: FormatterConfig | None = None):
        super().__init__()
        self.symbolic = SymbolicFormatter(config)

    def format_field(self, value: Any, format_spec: str) -> str:
        if SPECIFIER_PATTERN.fullmatch(format_spec):
            return self.symbolic.format(format_spec, value, token=self.symbolic.token)
        return super().format_field(value, format_spec)
