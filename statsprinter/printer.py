"""
Движок рендеринга статистики.

Рекурсивно обходит дерево статистики и на каждом узле консультируется
с реестром хуков (HookRegistry). Порядок для узла типа T со значением v:

  1. print-цепочка по уровням T; первый не-None результат становится текстом узла.
  2. Иначе, если v является массивом: sortItems, затем для каждого элемента
     getItemName (по уровням "T[]") и рекурсия в "T[].<itemName>";
     строки склеиваются printItems (по умолчанию через "\\n").
  3. Иначе, если v является объектом: список ключей, sortElements, рекурсия в "T.<key>"
     для каждого ключа, склейка фрагментов printElements (по умолчанию через "\\n").
  4. result-конвейер по уровням T применяется к итоговому тексту.

Исключения обработчиков не перехватываются.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from .context import PrinterContext
from .formatting import PrintedElement, format_number
from .hooks import Handler, HookCategory, HookRegistry
from .selector_keys import element_type, item_type, items_type, levels

logger = logging.getLogger(__name__)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _as_text(printed: Any) -> str:
    if isinstance(printed, str):
        return printed
    if isinstance(printed, (int, float)) and not isinstance(printed, bool):
        return format_number(printed)
    return str(printed)


class RenderPass:
    """
    Один проход рендеринга: реестр плюс кэш обработчиков по уровням типов.

    Кэш живёт ровно один проход, поэтому регистрации между проходами
    всегда видны, а параллельные проходы не делят изменяемого состояния.
    """

    def __init__(self, registry: HookRegistry):
        self.registry = registry
        self._level_handlers: Dict[Tuple[HookCategory, str], Tuple[Handler, ...]] = {}

    def _handlers(self, category: HookCategory, type_path: str) -> Tuple[Handler, ...]:
        key = (category, type_path)
        handlers = self._level_handlers.get(key)
        if handlers is None:
            handlers = tuple(
                tap.fn
                for level in levels(type_path)
                for tap in self.registry.chain(category, level)
            )
            self._level_handlers[key] = handlers
        return handlers

    def _bail(self, category: HookCategory, type_path: str, *args: Any) -> Any:
        for fn in self._handlers(category, type_path):
            result = fn(*args)
            if result is not None:
                return result
        return None

    def _waterfall(self, category: HookCategory, type_path: str, data: Any, context: PrinterContext) -> Any:
        for fn in self._handlers(category, type_path):
            result = fn(data, context)
            if result is not None:
                data = result
        return data

    def print(self, type_path: str, value: Any, base_context: PrinterContext) -> Optional[str]:
        context = base_context.derive(type=type_path, render_pass=self)
        context.refs[type_path] = value

        printed = self._bail(HookCategory.PRINT, type_path, value, context)
        if printed is not None:
            printed = _as_text(printed)
        elif _is_array(value):
            printed = self._print_items(type_path, value, context)
        elif isinstance(value, Mapping):
            printed = self._print_elements(type_path, value, context)

        return self._waterfall(HookCategory.RESULT, type_path, printed, context)

    def _print_items(self, type_path: str, value: Any, context: PrinterContext) -> Optional[str]:
        items = list(value)
        if not items:
            return None
        self._bail(HookCategory.SORT_ITEMS, type_path, items, context)

        printed_items: List[Optional[str]] = []
        for index, item in enumerate(items):
            item_context = context.derive(index=index)
            item_name = self._bail(HookCategory.GET_ITEM_NAME, items_type(type_path), item, item_context)
            if item_name:
                item_context.refs[item_name] = item
            printed_items.append(self.print(item_type(type_path, item_name), item, item_context))

        printed = self._bail(HookCategory.PRINT_ITEMS, type_path, printed_items, context)
        if printed is None:
            contents = [text for text in printed_items if text]
            if contents:
                printed = "\n".join(contents)
        return printed

    def _print_elements(self, type_path: str, value: Mapping, context: PrinterContext) -> Optional[str]:
        elements = list(value.keys())
        self._bail(HookCategory.SORT_ELEMENTS, type_path, elements, context)

        printed_elements: List[PrintedElement] = []
        for element in elements:
            element_value = value.get(element)
            element_context = context.derive(parent=value, element=element)
            element_context.refs[element] = element_value
            content = self.print(element_type(type_path, element), element_value, element_context)
            printed_elements.append(PrintedElement(element=element, content=content))

        printed = self._bail(HookCategory.PRINT_ELEMENTS, type_path, printed_elements, context)
        if printed is None:
            contents = [item.content for item in printed_elements if item.content]
            if contents:
                printed = "\n".join(contents)
        return printed


class StatsPrinter:
    """
    Точка входа движка.

    `print()` без привязанного к проходу контекста начинает новый проход;
    вызовы изнутри обработчиков (через ctx.print) продолжают текущий.
    """

    def __init__(self, registry: Optional[HookRegistry] = None):
        self.registry = registry if registry is not None else HookRegistry()

    def print(self, type_path: str, value: Any, context: Optional[PrinterContext] = None) -> Optional[str]:
        if context is not None and context.render_pass is not None:
            return context.render_pass.print(type_path, value, context)

        render_pass = RenderPass(self.registry)
        base = context if context is not None else PrinterContext()
        logger.debug(f"Render pass started for '{type_path}' ({len(self.registry.plugins)} plugins)")
        return render_pass.print(type_path, value, base)


__all__ = ["StatsPrinter", "RenderPass"]
