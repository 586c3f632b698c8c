"""
Подсветка сообщений об ошибках.

Правила применяются по порядку объявления, каждое делает один проход по всему
сообщению (все непересекающиеся совпадения). Подсвечивается только
захваченная группа, а не всё совпадение. Сообщения, уже содержащие
ANSI-последовательности, возвращаются как есть.
"""

from __future__ import annotations

import re
from typing import List, Pattern, Tuple

from .colors import ESCAPE_START, ColorPalette

_A = re.ASCII
_AI = re.ASCII | re.IGNORECASE

ERROR_HIGHLIGHTS: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"(Did you mean .+)", _A), "green"),
    (re.compile(r"(Set 'mode' option to 'development' or 'production')", _A), "green"),
    (re.compile(r"(\(module has no exports\))", _A), "red"),
    (re.compile(r"\(possible exports: (.+)\)", _A), "green"),
    (re.compile(r"(?:^|\n)(.* doesn't exist)", _A), "red"),
    (re.compile(r"('\w+' option has not been set)", _A), "red"),
    (re.compile(r"(Emitted value instead of an instance of Error)", _A), "yellow"),
    (re.compile(r"(Used? .+ instead)", _AI), "yellow"),
    (re.compile(r"\b(deprecated|must|required)\b", _A), "yellow"),
    (re.compile(r"\b(BREAKING CHANGE)\b", _AI), "red"),
    (
        re.compile(
            r"\b(error|failed|unexpected|invalid|not found|not supported|not available"
            r"|not possible|not implemented|doesn't support|conflict|conflicting"
            r"|not existing|duplicate)\b",
            _AI,
        ),
        "red",
    ),
]


def format_error(message: str, palette: ColorPalette) -> str:
    if ESCAPE_START in message:
        return message

    for pattern, color_name in ERROR_HIGHLIGHTS:
        color = getattr(palette, color_name)

        def _wrap(match: re.Match, _color=color) -> str:
            content = match.group(1)
            return match.group(0).replace(content, _color(content), 1)

        message = pattern.sub(_wrap, message)
    return message


__all__ = ["ERROR_HIGHLIGHTS", "format_error"]
