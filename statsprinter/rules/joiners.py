"""
Склейка отрисованных фрагментов: массивов (printItems) и объектов (printElements).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..context import PrinterContext
from ..formatting.text import (
    PrintedElement,
    indent,
    items_join_comma,
    items_join_comma_brackets,
    items_join_comma_brackets_with_name,
    items_join_more_spacing,
    items_join_one_line,
    items_join_one_line_brackets,
    join_explicit_new_line,
    join_in_brackets,
    join_one_line,
)

ItemsJoiner = Callable[[Sequence[Optional[str]], PrinterContext], Optional[str]]
ElementsJoiner = Callable[[Sequence[PrintedElement], PrinterContext], Optional[str]]

Elements = Sequence[Optional[PrintedElement]]


def _issuer_path(items: Sequence[Optional[str]], ctx: PrinterContext) -> str:
    return " ".join(f"{item} ->" for item in items if item)


def _compilation_children(items: Sequence[Optional[str]], ctx: PrinterContext) -> str:
    return indent(items_join_more_spacing(items), "  ")


def _logging_entry_children(items: Sequence[Optional[str]], ctx: PrinterContext) -> str:
    return indent("\n".join(item for item in items if item), "  ", False)


SIMPLE_ITEMS_JOINER: Dict[str, ItemsJoiner] = {
    "chunk.parents": items_join_one_line,
    "chunk.siblings": items_join_one_line,
    "chunk.children": items_join_one_line,
    "chunk.names": items_join_comma_brackets,
    "chunk.idHints": items_join_comma_brackets_with_name("id hint"),
    "chunk.runtime": items_join_comma_brackets_with_name("runtime"),
    "chunk.files": items_join_comma,
    "chunk.childrenByOrder": items_join_one_line,
    "chunk.childrenByOrder[].children": items_join_one_line,
    "chunkGroup.assets": items_join_one_line,
    "chunkGroup.auxiliaryAssets": items_join_one_line_brackets,
    "chunkGroupChildGroup.children": items_join_comma,
    "chunkGroupChild.assets": items_join_one_line,
    "chunkGroupChild.auxiliaryAssets": items_join_one_line_brackets,
    "asset.chunks": items_join_comma,
    "asset.auxiliaryChunks": items_join_comma_brackets,
    "asset.chunkNames": items_join_comma_brackets_with_name("name"),
    "asset.auxiliaryChunkNames": items_join_comma_brackets_with_name("auxiliary name"),
    "asset.chunkIdHints": items_join_comma_brackets_with_name("id hint"),
    "asset.auxiliaryChunkIdHints": items_join_comma_brackets_with_name("auxiliary id hint"),
    "module.chunks": items_join_one_line,
    "module.issuerPath": _issuer_path,
    "compilation.errors": items_join_more_spacing,
    "compilation.warnings": items_join_more_spacing,
    "compilation.logging": items_join_more_spacing,
    "compilation.children": _compilation_children,
    "moduleTraceItem.dependencies": items_join_one_line,
    "loggingEntry.children": _logging_entry_children,
}


# ==================== объекты ====================

# Поля компиляции, отделяемые от соседей пустой строкой
_SPACED_COMPILATION_ELEMENTS = {
    "warnings",
    "filteredWarningDetailsCount",
    "errors",
    "filteredErrorDetailsCount",
    "logging",
}


def _on_own_lines(item: PrintedElement) -> PrintedElement:
    """Оборачивает фрагмент переводами строк: он займёт отдельный блок."""
    return dataclasses.replace(item, content=f"\n{item.content}\n")


def _join_compilation(items: Elements, ctx: PrinterContext) -> str:
    result: List[str] = []
    last_need_more = False
    for item in items:
        if not item or not item.content:
            continue
        need_more_space = item.element in _SPACED_COMPILATION_ELEMENTS
        if result:
            result.append("\n\n" if need_more_space or last_need_more else "\n")
        result.append(item.content)
        last_need_more = need_more_space
    if last_need_more:
        result.append("\n")
    return "".join(result)


def _join_asset(items: Elements, ctx: PrinterContext) -> str:
    return join_explicit_new_line(
        [
            _on_own_lines(item)
            if item and item.element in ("related", "children") and item.content
            else item
            for item in items
        ],
        "  ",
    )


_MODULE_BLOCK_ELEMENTS = {
    "providedExports",
    "usedExports",
    "optimizationBailout",
    "reasons",
    "issuerPath",
    "profile",
    "children",
    "modules",
}


def _join_module(items: Elements, ctx: PrinterContext) -> str:
    module = ctx.ref("module")
    module = module if isinstance(module, Mapping) else {}
    has_name = False
    prepared: List[Optional[PrintedElement]] = []
    for item in items:
        if item is None:
            continue
        if item.element == "id":
            # id, совпадающий с именем, печатается один раз
            if module and module.get("id") == module.get("name"):
                if has_name:
                    prepared.append(None)
                    continue
                if item.content:
                    has_name = True
        elif item.element == "name":
            if has_name:
                prepared.append(None)
                continue
            if item.content:
                has_name = True
        elif item.element in _MODULE_BLOCK_ELEMENTS and item.content:
            item = _on_own_lines(item)
        prepared.append(item)
    return join_explicit_new_line(prepared, "  ")


def _join_chunk(items: Elements, ctx: PrinterContext) -> str:
    has_entry = False
    kept: List[Optional[PrintedElement]] = []
    for item in items:
        if item is None:
            continue
        if item.element == "entry":
            if item.content:
                has_entry = True
        elif item.element == "initial" and has_entry:
            continue
        kept.append(item)
    return f"chunk {join_explicit_new_line(kept, '  ')}"


def _join_children_by_order_item(items: Elements, ctx: PrinterContext) -> str:
    return f"({join_one_line(items)})"


def _join_chunk_group(items: Elements, ctx: PrinterContext) -> str:
    return join_explicit_new_line(items, "  ")


def _join_module_reason(items: Elements, ctx: PrinterContext) -> str:
    reason = ctx.ref("moduleReason")
    reason = reason if isinstance(reason, Mapping) else {}
    has_name = False
    prepared: List[Optional[PrintedElement]] = []
    for item in items:
        if item is None:
            continue
        if item.element == "moduleId":
            if reason and reason.get("moduleId") == reason.get("module") and item.content:
                has_name = True
        elif item.element == "module":
            if has_name:
                continue
        elif item.element == "resolvedModule":
            if reason and reason.get("module") == reason.get("resolvedModule"):
                continue
        elif item.element == "children" and item.content:
            item = _on_own_lines(item)
        prepared.append(item)
    return join_explicit_new_line(prepared, "  ")


def _join_chunk_origin(items: Elements, ctx: PrinterContext) -> str:
    return f"> {join_one_line(items)}"


def _join_problem(is_error: bool) -> ElementsJoiner:
    def joiner(items: Elements, ctx: PrinterContext) -> str:
        header = ctx.red("ERROR") if is_error else ctx.yellow("WARNING")
        return f"{header} in {join_explicit_new_line(items, '')}"
    return joiner


def _join_logging_group(items: Elements, ctx: PrinterContext) -> str:
    return join_explicit_new_line(items, "").rstrip()


def _join_module_trace_item(items: Elements, ctx: PrinterContext) -> str:
    return f" @ {join_one_line(items)}"


SIMPLE_ELEMENT_JOINERS: Dict[str, ElementsJoiner] = {
    "compilation": _join_compilation,
    "asset": _join_asset,
    "asset.info": join_one_line,
    "module": _join_module,
    "chunk": _join_chunk,
    "chunk.childrenByOrder[]": _join_children_by_order_item,
    "chunkGroup": _join_chunk_group,
    "chunkGroupAsset": join_one_line,
    "chunkGroupChildGroup": join_one_line,
    "chunkGroupChild": join_one_line,
    "moduleReason": _join_module_reason,
    "module.profile": join_in_brackets,
    "moduleIssuer": join_one_line,
    "chunkOrigin": _join_chunk_origin,
    "errors[].error": _join_problem(True),
    "warnings[].error": _join_problem(False),
    "loggingGroup": _join_logging_group,
    "moduleTraceItem": _join_module_trace_item,
    "moduleTraceDependency": join_one_line,
}


__all__ = ["ItemsJoiner", "ElementsJoiner", "SIMPLE_ITEMS_JOINER", "SIMPLE_ELEMENT_JOINERS"]
