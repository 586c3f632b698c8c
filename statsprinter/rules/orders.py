"""
Порядок полей объектов (sortElements) в стандартном отчёте.

Ключи из списка предпочтительного порядка выводятся первыми и в его
порядке; синтетические ключи ("separator!", "summary!", ...) вставляются
всегда, даже если в объекте их нет. Остальные ключи сохраняют исходный
относительный порядок и идут следом.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Sequence, TypeVar

from ..context import PrinterContext
from ..selector_keys import is_synthetic

T = TypeVar("T")

ERROR_PREFERRED_ORDER: List[str] = [
    "compilerPath",
    "chunkId",
    "chunkEntry",
    "chunkInitial",
    "file",
    "separator!",
    "moduleName",
    "loc",
    "separator!",
    "message",
    "separator!",
    "details",
    "separator!",
    "stack",
    "separator!",
    "missing",
    "separator!",
    "moduleTrace",
]

PREFERRED_ORDERS: Dict[str, List[str]] = {
    "compilation": [
        "name",
        "hash",
        "rspackVersion",
        "time",
        "builtAt",
        "env",
        "publicPath",
        "assets",
        "filteredAssets",
        "entrypoints",
        "namedChunkGroups",
        "chunks",
        "modules",
        "filteredModules",
        "children",
        "logging",
        "warnings",
        "warningsInChildren!",
        "filteredWarningDetailsCount",
        "errors",
        "errorsInChildren!",
        "filteredErrorDetailsCount",
        "summary!",
        "needAdditionalPass",
    ],
    "asset": [
        "type",
        "name",
        "size",
        "chunks",
        "auxiliaryChunks",
        "emitted",
        "comparedForEmit",
        "cached",
        "info",
        "isOverSizeLimit",
        "chunkNames",
        "auxiliaryChunkNames",
        "chunkIdHints",
        "auxiliaryChunkIdHints",
        "related",
        "filteredRelated",
        "children",
        "filteredChildren",
    ],
    "asset.info": [
        "immutable",
        "sourceFilename",
        "copied",
        "javascriptModule",
        "development",
        "hotModuleReplacement",
    ],
    "chunkGroup": [
        "kind!",
        "name",
        "isOverSizeLimit",
        "assetsSize",
        "auxiliaryAssetsSize",
        "is!",
        "assets",
        "filteredAssets",
        "auxiliaryAssets",
        "filteredAuxiliaryAssets",
        "separator!",
        "children",
    ],
    "chunkGroupAsset": ["name", "size"],
    "chunkGroupChildGroup": ["type", "children"],
    "chunkGroupChild": ["assets", "chunks", "name"],
    "module": [
        "type",
        "name",
        "identifier",
        "id",
        "layer",
        "sizes",
        "chunks",
        "depth",
        "cacheable",
        "orphan",
        "runtime",
        "optional",
        "dependent",
        "built",
        "codeGenerated",
        "cached",
        "assets",
        "failed",
        "warnings",
        "errors",
        "children",
        "filteredChildren",
        "providedExports",
        "usedExports",
        "optimizationBailout",
        "reasons",
        "filteredReasons",
        "issuerPath",
        "profile",
        "modules",
        "filteredModules",
    ],
    "moduleReason": [
        "active",
        "type",
        "userRequest",
        "moduleId",
        "module",
        "resolvedModule",
        "loc",
        "explanation",
        "children",
        "filteredChildren",
    ],
    "module.profile": [
        "total",
        "separator!",
        "resolving",
        "restoring",
        "integration",
        "building",
        "storing",
        "additionalResolving",
        "additionalIntegration",
    ],
    "chunk": [
        "id",
        "runtime",
        "files",
        "names",
        "idHints",
        "sizes",
        "parents",
        "siblings",
        "children",
        "childrenByOrder",
        "entry",
        "initial",
        "rendered",
        "recorded",
        "reason",
        "separator!",
        "origins",
        "separator!",
        "modules",
        "separator!",
        "filteredModules",
    ],
    "chunkOrigin": ["request", "moduleId", "moduleName", "loc"],
    "error": ERROR_PREFERRED_ORDER,
    "warning": ERROR_PREFERRED_ORDER,
    "chunk.childrenByOrder[]": ["type", "children"],
    "loggingGroup": [
        "debug",
        "name",
        "separator!",
        "entries",
        "separator!",
        "filteredEntries",
    ],
    "loggingEntry": ["message", "trace", "children"],
}


def create_order(elements: List[str], preferred_order: Sequence[str]) -> List[str]:
    """Переупорядочивает `elements` на месте по предпочтительному порядку."""
    original = list(elements)
    present = set(elements)
    used = set()
    elements.clear()
    for element in preferred_order:
        if is_synthetic(element) or element in present:
            elements.append(element)
            used.add(element)
    for element in original:
        if element not in used:
            elements.append(element)
    return elements


def preferred_order_sorter(preferred_order: Sequence[str]) -> Callable[[List[str], PrinterContext], None]:
    def sort_elements(elements: List[str], ctx: PrinterContext) -> None:
        create_order(elements, preferred_order)
    return sort_elements


def _type_rank(value: Any) -> str:
    # числа раньше строк, как при сравнении имён типов "number" < "string"
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__


def compare_ids(a: Any, b: Any) -> int:
    rank_a, rank_b = _type_rank(a), _type_rank(b)
    if rank_a != rank_b:
        return -1 if rank_a < rank_b else 1
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        return 0
    return 0


def sort_by_ids(items: Sequence[T], key: Callable[[T], Any]) -> List[T]:
    return sorted(items, key=cmp_to_key(lambda x, y: compare_ids(key(x), key(y))))


__all__ = [
    "ERROR_PREFERRED_ORDER",
    "PREFERRED_ORDERS",
    "create_order",
    "preferred_order_sorter",
    "compare_ids",
    "sort_by_ids",
]
