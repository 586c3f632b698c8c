"""
Цвета ANSI для отчёта.

Цветовая функция оборачивает текст стартовой последовательностью и
всегда закрывает его парой сбросов ESC[39m ESC[22m. Если внутри текста
уже встречаются сбросы (вложенная раскраска), после них цвет
переоткрывается, чтобы внешний цвет не «обрывался» на вложенном фрагменте.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

ColorFn = Callable[[Any], Any]
ColorsOption = Union[bool, Mapping[str, str], None]

COLOR_NAMES = ("bold", "yellow", "red", "green", "cyan", "magenta")

AVAILABLE_COLORS: Dict[str, str] = {
    "bold": "\u001b[1m",
    "yellow": "\u001b[1m\u001b[33m",
    "red": "\u001b[1m\u001b[31m",
    "green": "\u001b[1m\u001b[32m",
    "cyan": "\u001b[1m\u001b[36m",
    "magenta": "\u001b[1m\u001b[35m",
}

COLOR_END = "\u001b[39m\u001b[22m"
ESCAPE_START = "\u001b["

_RESETS_RE = re.compile(r"((\u001b\[39m|\u001b\[22m|\u001b\[0m)+)")


def _identity(text: Any) -> Any:
    return text


def make_color(start: Optional[str]) -> ColorFn:
    """Создаёт цветовую функцию; пустой `start` означает «без цвета»."""
    if not start:
        return _identity

    def colorize(text: Any) -> str:
        if isinstance(text, str):
            text = _RESETS_RE.sub(lambda m: m.group(1) + start, text)
        return f"{start}{text}{COLOR_END}"

    return colorize


def resolve_color_starts(colors: ColorsOption) -> Dict[str, Optional[str]]:
    """
    Вычисляет стартовые последовательности для всех цветов.

    - False/None: цвета выключены;
    - True: стандартная палитра;
    - mapping (в том числе пустой): переопределения по имени, остальные
      цвета стандартные. Неизвестные имена игнорируются.
    """
    if not isinstance(colors, Mapping) and not colors:
        return {name: None for name in COLOR_NAMES}

    overrides: Mapping[str, str] = colors if isinstance(colors, Mapping) else {}
    unknown = set(overrides) - set(COLOR_NAMES)
    if unknown:
        logger.debug(f"Ignoring unknown color overrides: {sorted(unknown)}")

    starts: Dict[str, Optional[str]] = {}
    for name in COLOR_NAMES:
        override = overrides.get(name)
        starts[name] = override if isinstance(override, str) else AVAILABLE_COLORS[name]
    return starts


@dataclass(frozen=True)
class ColorPalette:
    """Набор цветовых функций, используемых правилами печати."""
    bold: ColorFn = _identity
    yellow: ColorFn = _identity
    red: ColorFn = _identity
    green: ColorFn = _identity
    cyan: ColorFn = _identity
    magenta: ColorFn = _identity

    @classmethod
    def plain(cls) -> "ColorPalette":
        return cls()

    @classmethod
    def from_option(cls, colors: ColorsOption) -> "ColorPalette":
        starts = resolve_color_starts(colors)
        return cls(**{name: make_color(start) for name, start in starts.items()})


__all__ = [
    "AVAILABLE_COLORS",
    "COLOR_END",
    "COLOR_NAMES",
    "ESCAPE_START",
    "ColorFn",
    "ColorPalette",
    "ColorsOption",
    "make_color",
    "resolve_color_starts",
]
