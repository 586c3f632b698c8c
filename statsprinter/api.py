"""
Удобная точка входа: отрисовать дерево статистики одной функцией.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from .context import PrinterContext
from .hooks import HookRegistry, StatsPrinterPlugin
from .printer import StatsPrinter
from .rules import DefaultStatsPrinterPlugin
from .stats.schema import Compilation, to_stats_dict
from .types import PrintOptions


def create_printer(plugins: Iterable[StatsPrinterPlugin] = ()) -> StatsPrinter:
    """
    Принтер со стандартным набором правил и дополнительными плагинами.

    Плагины регистрируются после стандартных правил: их обработчики
    дописываются в конец цепочек.
    """
    registry = HookRegistry()
    registry.register_plugin(DefaultStatsPrinterPlugin())
    for plugin in plugins:
        registry.register_plugin(plugin)
    return StatsPrinter(registry)


def render_stats(
    stats: Any,
    options: Optional[PrintOptions] = None,
    plugins: Iterable[StatsPrinterPlugin] = (),
    printer: Optional[StatsPrinter] = None,
) -> str:
    """
    Рендерит компиляцию в текст.

    Args:
        stats: Модель Compilation или JSON-подобный словарь
        options: Опции печати (цвета)
        plugins: Дополнительные плагины (игнорируются, если передан printer)
        printer: Готовый принтер для повторного использования

    Returns:
        Итоговый текст отчёта без завершающих переводов строки
        (пустая строка, если печатать нечего)
    """
    if isinstance(stats, Compilation):
        stats = to_stats_dict(stats)
    elif not isinstance(stats, Mapping):
        raise TypeError(f"stats must be a Compilation or a mapping, got {type(stats).__name__}")

    printer = printer if printer is not None else create_printer(plugins)
    context = PrinterContext(options=options or PrintOptions())
    text = printer.print("compilation", stats, context) or ""
    return text.rstrip("\n")


__all__ = ["create_printer", "render_stats"]
