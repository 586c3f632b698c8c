"""
Утилиты рендера для тестов.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from statsprinter import PrintOptions, StatsPrinterPlugin, render_stats

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def render(stats: Any, colors: Any = False, plugins: Iterable[StatsPrinterPlugin] = ()) -> str:
    """Рендерит компиляцию стандартным принтером."""
    return render_stats(stats, PrintOptions(colors=colors), plugins=plugins)


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


__all__ = ["render", "strip_ansi"]
