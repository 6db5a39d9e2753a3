"""
Logging — единая настройка логгеров core

Все модули core пишут через stdlib logging с RichHandler на stderr.
Handler навешивается один раз на именованный логгер; повторный вызов
get_logger возвращает уже настроенный экземпляр.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

_RICH_CONSOLE: Console | None = None


def get_rich_console() -> Console:
    """Общий Console(stderr=True) для всех RichHandler."""
    global _RICH_CONSOLE
    if _RICH_CONSOLE is None:
        _RICH_CONSOLE = Console(stderr=True)
    return _RICH_CONSOLE


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Логгер с RichHandler.

    Args:
        name: Имя логгера (обычно имя модуля)
        level: Уровень логирования при первой настройке

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        logger.addHandler(RichHandler(console=get_rich_console(), show_path=False))
        # Под pytest caplog навешивает handler на root logger
        logger.propagate = "pytest" in sys.modules
    return logger
