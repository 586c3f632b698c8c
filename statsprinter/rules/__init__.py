"""
Стандартный набор правил печати статистики.

DefaultStatsPrinterPlugin регистрирует в реестре все обработчики,
необходимые для канонического текстового отчёта: печать полей, порядок
полей, имена элементов, склейку массивов и объектов, пост-обработку.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from ..context import PrinterContext
from ..formatting import ColorPalette, is_number
from ..hooks import HookCategory, HookRegistry, StatsPrinterPlugin
from .item_names import ITEM_NAMES, item_name_getter
from .joiners import SIMPLE_ELEMENT_JOINERS, SIMPLE_ITEMS_JOINER
from .modifiers import RESULT_MODIFIER
from .orders import PREFERRED_ORDERS, compare_ids, create_order, preferred_order_sorter
from .printers import all_printers

logger = logging.getLogger(__name__)


def install_palette(compilation: Any, ctx: PrinterContext) -> Optional[str]:
    """
    Настраивает контекст компиляции: палитру цветов из опций и опорное время.

    Опорное время берётся у компиляции верхнего уровня; дочерние
    компиляции его не переопределяют. Ничего не печатает.
    """
    ctx.palette = ColorPalette.from_option(ctx.options.colors)
    if ctx.time_reference is None and isinstance(compilation, Mapping):
        time = compilation.get("time")
        if is_number(time):
            ctx.time_reference = time
    return None


class DefaultStatsPrinterPlugin(StatsPrinterPlugin):

    @property
    def name(self) -> str:
        return "DefaultStatsPrinterPlugin"

    def apply(self, registry: HookRegistry) -> None:
        registry.tap(HookCategory.PRINT, "compilation", install_palette, name=self.name)

        for printers in all_printers():
            registry.tap_all(HookCategory.PRINT, printers, name=self.name)

        for key, preferred_order in PREFERRED_ORDERS.items():
            registry.tap(HookCategory.SORT_ELEMENTS, key, preferred_order_sorter(preferred_order), name=self.name)

        for key, item_name in ITEM_NAMES.items():
            registry.tap(HookCategory.GET_ITEM_NAME, key, item_name_getter(item_name), name=self.name)

        registry.tap_all(HookCategory.PRINT_ITEMS, SIMPLE_ITEMS_JOINER, name=self.name)
        registry.tap_all(HookCategory.PRINT_ELEMENTS, SIMPLE_ELEMENT_JOINERS, name=self.name)
        registry.tap_all(HookCategory.RESULT, RESULT_MODIFIER, name=self.name)

        logger.debug(f"{self.name}: default rule set applied")


__all__ = [
    "DefaultStatsPrinterPlugin",
    "install_palette",
    "PREFERRED_ORDERS",
    "ITEM_NAMES",
    "create_order",
    "compare_ids",
]
