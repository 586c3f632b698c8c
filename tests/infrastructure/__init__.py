"""
Общая инфраструктура тестов stats-printer.

Модули:
- file_utils: создание файлов статистики и конфигов
- stats_builders: компактные билдеры узлов дерева статистики
- printing_utils: рендер и очистка ANSI
- cli_utils: запуск CLI в подпроцессе
"""

from .cli_utils import run_cli
from .file_utils import write, write_json
from .printing_utils import render, strip_ansi
from .stats_builders import asset, chunk, compilation, error, logging_group, log_entry, module

__all__ = [
    # File utilities
    "write", "write_json",

    # Stats builders
    "asset", "chunk", "compilation", "error", "logging_group", "log_entry", "module",

    # Printing
    "render", "strip_ansi",

    # CLI
    "run_cli",
]
