"""
Имена типов элементов массивов (getItemName).

Имя элемента определяет, какими обработчиками рисуется каждый элемент:
элемент "compilation.assets[]" рисуется как "…assets[].asset" и получает
правила "asset.*". Записи логов полиморфны: имя строится по уровню
записи, так что сначала применяются правила варианта
("loggingEntry(warn).loggingEntry.*"), а затем общие ("loggingEntry.*").
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, Union

from ..context import PrinterContext
from ..selector_keys import variant_item_name

ItemName = Union[str, Callable[[Any, PrinterContext], str]]


def _logging_entry_name(entry: Any, ctx: PrinterContext) -> str:
    level = entry.get("type") if isinstance(entry, Mapping) else None
    return variant_item_name("loggingEntry", str(level) if level else None)


ITEM_NAMES: Dict[str, ItemName] = {
    "compilation.assets[]": "asset",
    "compilation.modules[]": "module",
    "compilation.chunks[]": "chunk",
    "compilation.entrypoints[]": "chunkGroup",
    "compilation.namedChunkGroups[]": "chunkGroup",
    "compilation.errors[]": "error",
    "compilation.warnings[]": "error",
    "compilation.logging[]": "loggingGroup",
    "compilation.children[]": "compilation",
    "asset.related[]": "asset",
    "asset.children[]": "asset",
    "asset.chunks[]": "assetChunk",
    "asset.auxiliaryChunks[]": "assetChunk",
    "asset.chunkNames[]": "assetChunkName",
    "asset.chunkIdHints[]": "assetChunkIdHint",
    "asset.auxiliaryChunkNames[]": "assetChunkName",
    "asset.auxiliaryChunkIdHints[]": "assetChunkIdHint",
    "chunkGroup.assets[]": "chunkGroupAsset",
    "chunkGroup.auxiliaryAssets[]": "chunkGroupAsset",
    "chunkGroupChild.assets[]": "chunkGroupAsset",
    "chunkGroupChild.auxiliaryAssets[]": "chunkGroupAsset",
    "chunkGroup.children[]": "chunkGroupChildGroup",
    "chunkGroupChildGroup.children[]": "chunkGroupChild",
    "module.modules[]": "module",
    "module.children[]": "module",
    "module.reasons[]": "moduleReason",
    "moduleReason.children[]": "moduleReason",
    "module.issuerPath[]": "moduleIssuer",
    "chunk.origins[]": "chunkOrigin",
    "chunk.modules[]": "module",
    "loggingGroup.entries[]": _logging_entry_name,
    "loggingEntry.children[]": _logging_entry_name,
    "error.moduleTrace[]": "moduleTraceItem",
    "moduleTraceItem.dependencies[]": "moduleTraceDependency",
}


def item_name_getter(item_name: ItemName) -> Callable[[Any, PrinterContext], str]:
    if callable(item_name):
        return item_name

    def constant(item: Any, ctx: PrinterContext) -> str:
        return item_name

    return constant


__all__ = ["ITEM_NAMES", "ItemName", "item_name_getter"]
