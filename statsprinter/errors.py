"""
Ошибки, которые показываются пользователю без трассировки.

CLI перехватывает StatsPrinterError и его наследников, печатает сообщение
в stderr и завершается с кодом 2. Всё остальное (в том числе исключения
из обработчиков хуков) распространяется как есть.
"""

from __future__ import annotations


class StatsPrinterError(Exception):
    """
    Base class for user-facing errors in stats-printer.

    The user can fix these: an unreadable statistics file,
    an invalid printer configuration and so on.
    """
    pass


class StatsLoadError(StatsPrinterError):
    """Файл статистики не удалось прочитать или он не соответствует схеме."""
    pass


class ConfigError(StatsPrinterError):
    """Ошибка в конфигурации принтера (stats-printer.yaml)."""
    pass


__all__ = ["StatsPrinterError", "StatsLoadError", "ConfigError"]
