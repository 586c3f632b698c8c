"""
Текстовые примитивы для сборки фрагментов отчёта.

Здесь живут отступы, склейка строк и счётчики «скрытых» элементов;
правила печати собирают из них свои joiner-ы.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence

_LINE_START_RE = re.compile(r"\n([^\n])")
_LEADING_NEWLINES_RE = re.compile(r"^\n+")


@dataclass(frozen=True)
class PrintedElement:
    """Отрисованное поле объекта: имя поля и его текст (None: поле подавлено)."""
    element: str
    content: Optional[str]


def plural(n: Any, singular: str, plural_form: str) -> str:
    return singular if n == 1 else plural_form


def more_count(items: Optional[Sequence[Any]], count: Any) -> str:
    """"+ N", если видимый список не пуст (N скрыто дополнительно), иначе просто "N"."""
    return f"+ {count}" if items else f"{count}"


def map_lines(text: str, fn: Callable[[str], str]) -> str:
    return "\n".join(fn(line) for line in text.split("\n"))


def indent(text: str, prefix: str, no_prefix_in_first_line: bool = False) -> str:
    """
    Добавляет `prefix` к каждой непустой строке после перевода строки.

    Первая строка получает префикс, если текст не начинается с "\\n"
    и не задан `no_prefix_in_first_line`.
    """
    rest = _LINE_START_RE.sub(lambda m: "\n" + prefix + m.group(1), text)
    if no_prefix_in_first_line:
        return rest
    lead = "" if text[:1] == "\n" else prefix
    return lead + rest


def _contents(items: Iterable[Any]) -> List[str]:
    return [item for item in items if item]


# ---- joiners для массивов (списки уже отрисованных строк) ----

def items_join_one_line(items: Sequence[Optional[str]], *_: Any) -> str:
    return " ".join(_contents(items))


def items_join_one_line_brackets(items: Sequence[Optional[str]], *_: Any) -> Optional[str]:
    return f"({' '.join(_contents(items))})" if items else None


def items_join_more_spacing(items: Sequence[Optional[str]], *_: Any) -> str:
    return "\n\n".join(_contents(items))


def items_join_comma(items: Sequence[Optional[str]], *_: Any) -> str:
    return ", ".join(_contents(items))


def items_join_comma_brackets(items: Sequence[Optional[str]], *_: Any) -> Optional[str]:
    return f"({', '.join(_contents(items))})" if items else None


def items_join_comma_brackets_with_name(name: str):
    def joiner(items: Sequence[Optional[str]], *_: Any) -> Optional[str]:
        return f"({name}: {', '.join(_contents(items))})" if items else None
    return joiner


# ---- joiners для объектов (списки PrintedElement) ----

def join_one_line(items: Sequence[Optional[PrintedElement]], *_: Any) -> str:
    return " ".join(item.content for item in items if item and item.content)


def join_in_brackets(items: Sequence[Optional[PrintedElement]], *_: Any) -> str:
    """
    Первая группа полей идёт через пробел, группы после "separator!" в скобках через запятую.

    Пример для профиля модуля: "12 ms (resolving: 3 ms, building: 9 ms)".
    """
    res: List[str] = []
    # 0: ещё ничего, 1: в первой группе, 2/3: после разделителя (без/с содержимым до),
    # 4: внутри открытой скобки
    mode = 0
    for item in items:
        if item is None:
            continue
        if item.element == "separator!":
            if mode in (0, 1):
                mode += 2
            elif mode == 4:
                res.append(")")
                mode = 3
        if not item.content:
            continue
        if mode == 0:
            mode = 1
        elif mode == 1:
            res.append(" ")
        elif mode == 2:
            res.append("(")
            mode = 4
        elif mode == 3:
            res.append(" (")
            mode = 4
        elif mode == 4:
            res.append(", ")
        res.append(item.content)
    if mode == 4:
        res.append(")")
    return "".join(res)


def join_explicit_new_line(items: Sequence[Optional[PrintedElement]], indenter: str) -> str:
    """
    Склеивает фрагменты через пробел, уважая явные переводы строк.

    Фрагмент, оканчивающийся на "\\n", начинает новую строку для следующего;
    фрагмент, начинающийся с "\\n", не получает разделяющего пробела.
    Продолжения строк (кроме первого фрагмента) получают отступ `indenter`.
    """
    first_in_line = True
    first = True
    out: List[str] = []
    for item in items:
        if not item or not item.content:
            continue
        content = indent(item.content, "" if first else indenter, not first_in_line)
        if first_in_line:
            content = _LEADING_NEWLINES_RE.sub("", content, count=1)
        if not content:
            continue
        first = False
        no_joiner = first_in_line or content.startswith("\n")
        first_in_line = content.endswith("\n")
        out.append(content if no_joiner else f" {content}")
    return "".join(out).strip()


__all__ = [
    "PrintedElement",
    "plural",
    "more_count",
    "map_lines",
    "indent",
    "items_join_one_line",
    "items_join_one_line_brackets",
    "items_join_more_spacing",
    "items_join_comma",
    "items_join_comma_brackets",
    "items_join_comma_brackets_with_name",
    "join_one_line",
    "join_in_brackets",
    "join_explicit_new_line",
]
