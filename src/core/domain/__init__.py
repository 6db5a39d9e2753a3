"""
Domain models and value objects.

Contains the parsed format specifier and its enums.
"""

from src.core.domain.format_specifier import (
    SPECIFIER_PATTERN,
    FormatSpecifier,
    InvalidCharAction,
    InvalidFormatSpecifier,
    ScriptMode,
)

__all__ = [
    "SPECIFIER_PATTERN",
    "FormatSpecifier",
    "InvalidCharAction",
    "InvalidFormatSpecifier",
    "ScriptMode",
]
