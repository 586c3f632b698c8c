"""
Адресация позиций в дереве статистики (selector keys).

Ключ представляет собой путь через точку:
  • "asset.name"             : поле объекта;
  • "compilation.assets[]"   : «каждый элемент» массива;
  • "compilation.summary!"   : синтетическая позиция без поля в данных;
  • "loggingEntry(warn).loggingEntry.message": вариант полиморфного типа.

Полный тип узла при рендеринге строится из имён полей и имён элементов,
например "compilation.assets[].asset.name". Обработчики ищутся по всем
суффиксам этого пути, от самого точного к самому общему.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

ARRAY_SUFFIX = "[]"
SYNTHETIC_SUFFIX = "!"

_VARIANT_RE = re.compile(r"^(?P<name>[^.()]+)\((?P<tag>[^)]*)\)$")


def levels(type_path: str) -> List[str]:
    """
    Все уровни поиска обработчиков для типа, от точного к общему.

    "compilation.assets[].asset.name" ->
    ["compilation.assets[].asset.name", "assets[].asset.name", "asset.name", "name"]
    """
    parts = type_path.split(".")
    return [".".join(parts[i:]) for i in range(len(parts))]


def element_type(type_path: str, element: str) -> str:
    return f"{type_path}.{element}"


def items_type(type_path: str) -> str:
    return f"{type_path}{ARRAY_SUFFIX}"


def item_type(type_path: str, item_name: Optional[str]) -> str:
    """Тип элемента массива: "<type>[].<itemName>" либо "<type>[]" без имени."""
    base = items_type(type_path)
    return f"{base}.{item_name}" if item_name else base


def is_synthetic(element: str) -> bool:
    return element.endswith(SYNTHETIC_SUFFIX)


def variant_item_name(type_name: str, discriminant: Optional[str]) -> str:
    """
    Имя элемента для полиморфного типа.

    "loggingEntry", "warn" -> "loggingEntry(warn).loggingEntry": поиск по уровням
    сначала находит обработчики варианта, затем общего типа.
    """
    if not discriminant:
        return type_name
    return f"{type_name}({discriminant}).{type_name}"


def split_variant(segment: str) -> Tuple[str, Optional[str]]:
    """"loggingEntry(warn)" -> ("loggingEntry", "warn"); обычный сегмент -> (segment, None)."""
    m = _VARIANT_RE.match(segment)
    if not m:
        return segment, None
    return m.group("name"), m.group("tag")


__all__ = [
    "ARRAY_SUFFIX",
    "SYNTHETIC_SUFFIX",
    "levels",
    "element_type",
    "items_type",
    "item_type",
    "is_synthetic",
    "variant_item_name",
    "split_variant",
]
