"""
stats-printer: детерминированный текстовый отчёт по статистике сборки.

Движок (StatsPrinter) обходит дерево статистики и на каждом узле
обращается к реестру хуков (HookRegistry); стандартный формат отчёта
задаётся плагином DefaultStatsPrinterPlugin.
"""

from .api import create_printer, render_stats
from .context import PrinterContext
from .errors import ConfigError, StatsLoadError, StatsPrinterError
from .hooks import HookCategory, HookRegistry, StatsPrinterPlugin, Tap
from .printer import StatsPrinter
from .rules import DefaultStatsPrinterPlugin
from .types import PrintOptions

__all__ = [
    # Engine
    "StatsPrinter",
    "PrinterContext",
    "HookCategory",
    "HookRegistry",
    "StatsPrinterPlugin",
    "Tap",
    "DefaultStatsPrinterPlugin",

    # API
    "PrintOptions",
    "create_printer",
    "render_stats",

    # Errors
    "StatsPrinterError",
    "StatsLoadError",
    "ConfigError",
]
