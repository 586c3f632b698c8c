"""
Печать отдельных полей (print-хуки) стандартного отчёта.

Каждый обработчик получает значение поля и контекст и возвращает
фрагмент текста либо None (поле подавлено). Отсутствующие или
некорректные данные никогда не приводят к исключению: фрагмент просто
не печатается.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional

from ..context import PrinterContext
from ..formatting import (
    get_module_name,
    get_resource_name,
    is_number,
    is_valid_id,
    map_lines,
    more_count,
    plural,
    print_sizes,
)
from ..formatting.colors import ESCAPE_START
from .orders import sort_by_ids

FieldPrinter = Callable[[Any, PrinterContext], Optional[str]]

DETAILS_HINT = "Use 'stats.errorDetails: true' resp. '--stats-error-details' to show it."
CHILDREN_HINT = " (Use 'stats.children: true' resp. '--stats-children' for more details)"


def _mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _count(value: Any) -> int:
    """Неотрицательный счётчик; всё нечисловое считается нулём."""
    if not is_number(value):
        return 0
    return value if value > 0 else 0


def _filtered(noun: str, items_ref: Callable[[PrinterContext], Any], qualifier: str = "") -> FieldPrinter:
    """
    Печать счётчика скрытых элементов: "+ N <noun>" при непустом видимом
    списке и "N <noun>" при пустом. Ноль подавляет фрагмент.
    """
    def printer(count: Any, ctx: PrinterContext) -> Optional[str]:
        n = _count(count)
        if not n:
            return None
        label = plural(n, noun, f"{noun}s")
        if qualifier:
            label = f"{qualifier} {label}"
        return f"{more_count(items_ref(ctx), n)} {label}"

    return printer


def _flag(text: str, color: Optional[str] = None) -> FieldPrinter:
    """Флаг "[text]" (опционально цветной), если значение истинно."""
    def printer(value: Any, ctx: PrinterContext) -> Optional[str]:
        if not value:
            return None
        flag = ctx.format_flag(text)
        return getattr(ctx, color)(flag) if color else flag
    return printer


def _identity(value: Any, ctx: PrinterContext) -> Any:
    return value


def _chunk_id(value: Any, ctx: PrinterContext) -> str:
    return ctx.format_chunk_id(value)


def _module_id(value: Any, ctx: PrinterContext) -> Optional[str]:
    return ctx.format_module_id(value) if is_valid_id(value) else None


def _separator(value: Any, ctx: PrinterContext) -> str:
    return "\n"


def _time(value: Any, ctx: PrinterContext) -> Optional[str]:
    if not is_number(value):
        return None
    return ctx.format_time(value)


def _labelled_time(label: str, optional: bool = False) -> FieldPrinter:
    def printer(value: Any, ctx: PrinterContext) -> Optional[str]:
        if optional and not value:
            return None
        text = _time(value, ctx)
        return f"{label}: {text}" if text is not None else None
    return printer


def _sizes(sizes: Any, ctx: PrinterContext) -> Optional[str]:
    return print_sizes(_mapping(sizes), ctx.format_size)


# ==================== compilation ====================

def _compilation_summary(_: Any, ctx: PrinterContext) -> Optional[str]:
    root = ctx.type == "compilation.summary!"
    compilation = ctx.compilation
    name = compilation.get("name")
    hash_ = compilation.get("hash")
    version = compilation.get("rspackVersion")
    time = compilation.get("time")
    built_at = compilation.get("builtAt")
    errors_count = compilation.get("errorsCount")
    warnings_count = compilation.get("warningsCount")

    n_warnings = _count(warnings_count)
    n_errors = _count(errors_count)
    warnings_message = ctx.yellow(f"{n_warnings} {plural(n_warnings, 'warning', 'warnings')}") if n_warnings else ""
    errors_message = ctx.red(f"{n_errors} {plural(n_errors, 'error', 'errors')}") if n_errors else ""
    time_message = f" in {ctx.format_time(time)}" if root and is_number(time) and time else ""
    hash_message = f" ({hash_})" if hash_ else ""
    built_at_message = f"{ctx.format_date_time(built_at)}: " if root and is_number(built_at) and built_at else ""
    version_message = f"Rspack {version}" if root and version else ""

    if root and name:
        name_message = ctx.bold(name)
    elif name:
        name_message = f"Child {ctx.bold(name)}"
    else:
        name_message = "" if root else "Child"

    if name_message and version_message:
        subject_message = f"{name_message} ({version_message})"
    else:
        subject_message = version_message or name_message or "Rspack"

    no_problems = errors_count == 0 and warnings_count == 0
    if errors_message and warnings_message:
        status_message = f"compiled with {errors_message} and {warnings_message}"
    elif errors_message:
        status_message = f"compiled with {errors_message}"
    elif warnings_message:
        status_message = f"compiled with {warnings_message}"
    elif no_problems:
        status_message = f"compiled {ctx.green('successfully')}"
    else:
        status_message = "compiled"

    if (
        built_at_message
        or version_message
        or errors_message
        or warnings_message
        or no_problems
        or time_message
        or hash_message
    ):
        return f"{built_at_message}{subject_message} {status_message}{time_message}{hash_message}"
    return None


def _details_count(singular: str, many: str, color: Optional[str] = None) -> FieldPrinter:
    def printer(count: Any, ctx: PrinterContext) -> Optional[str]:
        n = _count(count)
        if not n:
            return None
        text = f"{n} {plural(n, singular, many)} detailed information that is not shown.\n{DETAILS_HINT}"
        return getattr(ctx, color)(text) if color else text
    return printer


def _env(env: Any, ctx: PrinterContext) -> Optional[str]:
    if env is None:
        return None
    return f"Environment (--env): {ctx.bold(json.dumps(env, indent=2, ensure_ascii=False))}"


def _public_path(public_path: Any, ctx: PrinterContext) -> str:
    return f"PublicPath: {ctx.bold(public_path or '(none)')}"


def _group_names(groups: Any) -> set:
    if isinstance(groups, Mapping):
        return set(groups)
    if isinstance(groups, (list, tuple)):
        return {_mapping(g).get("name") for g in groups}
    return set()


def _entrypoints(entrypoints: Any, ctx: PrinterContext) -> Optional[str]:
    if isinstance(entrypoints, Mapping):
        return ctx.print(ctx.type, list(entrypoints.values()), ctx.derive(chunk_group_kind="Entrypoint"))
    ctx.chunk_group_kind = "Entrypoint"
    return None


def _named_chunk_groups(named_chunk_groups: Any, ctx: PrinterContext) -> Optional[str]:
    if isinstance(named_chunk_groups, Mapping):
        entrypoint_names = _group_names(ctx.compilation.get("entrypoints"))
        groups = [
            group for name, group in named_chunk_groups.items()
            if name not in entrypoint_names
        ]
        return ctx.print(ctx.type, groups, ctx.derive(chunk_group_kind="Chunk Group"))
    ctx.chunk_group_kind = "Chunk Group"
    return None


def _logging(logging_groups: Any, ctx: PrinterContext) -> Optional[str]:
    if not isinstance(logging_groups, Mapping):
        return None
    groups = [{**_mapping(value), "name": name} for name, value in logging_groups.items()]
    return ctx.print(ctx.type, groups, ctx)


def _problems_in_children(count_key: str, list_key: str, singular: str, many: str, color: str) -> FieldPrinter:
    """
    "<N> WARNINGS in child compilations": разница между общим счётчиком и
    видимым списком, если дочерние компиляции не выводятся.
    """
    def printer(_: Any, ctx: PrinterContext) -> Optional[str]:
        compilation = ctx.compilation
        total = _count(compilation.get(count_key))
        visible = compilation.get(list_key)
        if compilation.get("children") is not None or not total or not isinstance(visible, (list, tuple)):
            return None
        hidden = total - len(visible)
        if hidden <= 0:
            return None
        return getattr(ctx, color)(
            f"{hidden} {plural(hidden, singular, many)} in child compilations{CHILDREN_HINT}"
        )
    return printer


COMPILATION_PRINTERS: Dict[str, FieldPrinter] = {
    "compilation.summary!": _compilation_summary,
    "compilation.filteredWarningDetailsCount": _details_count("warning has", "warnings have"),
    "compilation.filteredErrorDetailsCount": _details_count("error has", "errors have", "yellow"),
    "compilation.env": _env,
    "compilation.publicPath": _public_path,
    "compilation.entrypoints": _entrypoints,
    "compilation.namedChunkGroups": _named_chunk_groups,
    "compilation.assetsByChunkName": lambda value, ctx: "",
    "compilation.filteredModules": _filtered("module", lambda ctx: ctx.compilation.get("modules")),
    "compilation.filteredAssets": _filtered("asset", lambda ctx: ctx.compilation.get("assets")),
    "compilation.logging": _logging,
    "compilation.warningsInChildren!": _problems_in_children(
        "warningsCount", "warnings", "WARNING", "WARNINGS", "yellow"
    ),
    "compilation.errorsInChildren!": _problems_in_children(
        "errorsCount", "errors", "ERROR", "ERRORS", "red"
    ),
}


# ==================== asset ====================

def _asset(ctx: PrinterContext) -> Mapping:
    return _mapping(ctx.ref("asset"))


def _asset_name(name: Any, ctx: PrinterContext) -> str:
    return ctx.format_filename(name, bool(_asset(ctx).get("isOverSizeLimit")))


def _asset_size(size: Any, ctx: PrinterContext) -> str:
    text = ctx.format_size(size)
    return ctx.yellow(text) if _asset(ctx).get("isOverSizeLimit") else text


def _source_filename(source_filename: Any, ctx: PrinterContext) -> Optional[str]:
    if not source_filename:
        return None
    return ctx.format_flag("from source file" if source_filename is True else f"from: {source_filename}")


ASSET_PRINTERS: Dict[str, FieldPrinter] = {
    "asset.type": _identity,
    "asset.name": _asset_name,
    "asset.size": _asset_size,
    "asset.emitted": _flag("emitted", "green"),
    "asset.comparedForEmit": _flag("compared for emit", "yellow"),
    "asset.cached": _flag("cached", "green"),
    "asset.isOverSizeLimit": _flag("big", "yellow"),
    "asset.info.immutable": _flag("immutable", "green"),
    "asset.info.javascriptModule": _flag("javascript module"),
    "asset.info.sourceFilename": _source_filename,
    "asset.info.copied": _flag("copied", "green"),
    "asset.info.development": _flag("dev", "green"),
    "asset.info.hotModuleReplacement": _flag("hmr", "green"),
    "asset.separator!": _separator,
    "asset.filteredRelated": _filtered("asset", lambda ctx: _asset(ctx).get("related"), "related"),
    "asset.filteredChildren": _filtered("asset", lambda ctx: _asset(ctx).get("children")),
    "assetChunk": _chunk_id,
    "assetChunkName": _identity,
    "assetChunkIdHint": _identity,
}


# ==================== module ====================

def _module(ctx: PrinterContext) -> Mapping:
    return _mapping(ctx.ref("module"))


def _module_type(module_type: Any, ctx: PrinterContext) -> Optional[str]:
    return module_type if module_type != "module" else None


def _module_name(name: Any, ctx: PrinterContext) -> str:
    prefix, resource = get_module_name(str(name)) if name is not None else ("", "")
    return f"{prefix}{ctx.bold(resource)}"


def _module_layer(layer: Any, ctx: PrinterContext) -> Optional[str]:
    return ctx.format_layer(layer) if layer else None


def _module_depth(depth: Any, ctx: PrinterContext) -> Optional[str]:
    return ctx.format_flag(f"depth {depth}") if depth is not None else None


def _module_cacheable(cacheable: Any, ctx: PrinterContext) -> Optional[str]:
    return ctx.red(ctx.format_flag("not cacheable")) if cacheable is False else None


def _module_assets(assets: Any, ctx: PrinterContext) -> Optional[str]:
    if not isinstance(assets, (list, tuple)) or not assets:
        return None
    n = len(assets)
    return ctx.magenta(ctx.format_flag(f"{n} {plural(n, 'asset', 'assets')}"))


def _problem_flag(singular: str, many: str, color: str) -> FieldPrinter:
    def printer(value: Any, ctx: PrinterContext) -> Optional[str]:
        paint = getattr(ctx, color)
        if value is True:
            return paint(ctx.format_flag(many))
        if not value:
            return None
        return paint(ctx.format_flag(f"{value} {plural(value, singular, many)}"))
    return printer


def _provided_exports(provided_exports: Any, ctx: PrinterContext) -> Optional[str]:
    if not isinstance(provided_exports, (list, tuple)):
        return None
    if not provided_exports:
        return ctx.cyan(ctx.format_flag("no exports"))
    return ctx.cyan(ctx.format_flag(f"exports: {', '.join(map(str, provided_exports))}"))


def _used_exports(used_exports: Any, ctx: PrinterContext) -> Optional[str]:
    if used_exports is True:
        return None
    if used_exports is None:
        return ctx.cyan(ctx.format_flag("used exports unknown"))
    if used_exports is False:
        return ctx.cyan(ctx.format_flag("module unused"))
    if isinstance(used_exports, (list, tuple)):
        if not used_exports:
            return ctx.cyan(ctx.format_flag("no exports used"))
        provided = _module(ctx).get("providedExports")
        if isinstance(provided, (list, tuple)) and len(provided) == len(used_exports):
            return ctx.cyan(ctx.format_flag("all exports used"))
        return ctx.cyan(ctx.format_flag(f"only some exports used: {', '.join(map(str, used_exports))}"))
    return None


def _issuer_path(issuer_path: Any, ctx: PrinterContext) -> Optional[str]:
    # Цепочка издателей печатается только вместе с профилем модуля
    return None if _module(ctx).get("profile") else ""


MODULE_PRINTERS: Dict[str, FieldPrinter] = {
    "module.type": _module_type,
    "module.id": _module_id,
    "module.name": _module_name,
    "module.identifier": lambda identifier, ctx: "",
    "module.layer": _module_layer,
    "module.sizes": _sizes,
    "module.chunks[]": _chunk_id,
    "module.depth": _module_depth,
    "module.cacheable": _module_cacheable,
    "module.orphan": _flag("orphan", "yellow"),
    "module.runtime": _flag("runtime", "yellow"),
    "module.optional": _flag("optional", "yellow"),
    "module.dependent": _flag("dependent", "cyan"),
    "module.built": _flag("built", "yellow"),
    "module.codeGenerated": _flag("code generated", "yellow"),
    "module.buildTimeExecuted": _flag("build time executed", "green"),
    "module.cached": _flag("cached", "green"),
    "module.assets": _module_assets,
    "module.warnings": _problem_flag("warning", "warnings", "yellow"),
    "module.errors": _problem_flag("error", "errors", "red"),
    "module.providedExports": _provided_exports,
    "module.usedExports": _used_exports,
    "module.optimizationBailout[]": lambda bailout, ctx: ctx.yellow(bailout),
    "module.issuerPath": _issuer_path,
    "module.filteredModules": _filtered("module", lambda ctx: _module(ctx).get("modules"), "nested"),
    "module.filteredReasons": _filtered("reason", lambda ctx: _module(ctx).get("reasons")),
    "module.filteredChildren": _filtered("module", lambda ctx: _module(ctx).get("children")),
    "module.separator!": _separator,

    "moduleIssuer.id": lambda module_id, ctx: ctx.format_module_id(module_id),
    "moduleIssuer.profile.total": _time,

    "module.profile.total": _time,
    "module.profile.resolving": _labelled_time("resolving"),
    "module.profile.restoring": _labelled_time("restoring"),
    "module.profile.integration": _labelled_time("integration"),
    "module.profile.building": _labelled_time("building"),
    "module.profile.storing": _labelled_time("storing"),
    "module.profile.additionalResolving": _labelled_time("additional resolving", optional=True),
    "module.profile.additionalIntegration": _labelled_time("additional integration", optional=True),
}


# ==================== moduleReason ====================

def _reason_user_request(user_request: Any, ctx: PrinterContext) -> str:
    return ctx.cyan(get_resource_name(str(user_request)))


def _reason_active(active: Any, ctx: PrinterContext) -> Optional[str]:
    return None if active else ctx.format_flag("inactive")


MODULE_REASON_PRINTERS: Dict[str, FieldPrinter] = {
    "moduleReason.type": _identity,
    "moduleReason.userRequest": _reason_user_request,
    "moduleReason.moduleId": _module_id,
    "moduleReason.module": lambda module, ctx: ctx.magenta(module),
    "moduleReason.loc": _identity,
    "moduleReason.explanation": lambda explanation, ctx: ctx.cyan(explanation),
    "moduleReason.active": _reason_active,
    "moduleReason.resolvedModule": lambda module, ctx: ctx.magenta(module),
    "moduleReason.filteredChildren": _filtered(
        "reason", lambda ctx: _mapping(ctx.ref("moduleReason")).get("children")
    ),
}


# ==================== chunkGroup ====================

def _chunk_group(ctx: PrinterContext) -> Mapping:
    return _mapping(ctx.ref("chunkGroup"))


def _chunk_group_asset_size(size: Any, ctx: PrinterContext) -> Optional[str]:
    group = _chunk_group(ctx)
    assets = group.get("assets") or ()
    auxiliary_assets = group.get("auxiliaryAssets") or ()
    if len(assets) > 1 or len(auxiliary_assets) > 0:
        return ctx.format_size(size)
    return None


def _chunk_group_children(children: Any, ctx: PrinterContext) -> Optional[str]:
    if not isinstance(children, Mapping):
        return None
    groups = [{"type": key, "children": value} for key, value in children.items()]
    return ctx.print(ctx.type, groups, ctx)


def _chunk_group_child_name(name: Any, ctx: PrinterContext) -> Optional[str]:
    return f"(name: {name})" if name else None


CHUNK_GROUP_PRINTERS: Dict[str, FieldPrinter] = {
    "chunkGroup.kind!": lambda _, ctx: ctx.chunk_group_kind,
    "chunkGroup.separator!": _separator,
    "chunkGroup.name": lambda name, ctx: ctx.bold(name),
    "chunkGroup.isOverSizeLimit": _flag("big", "yellow"),
    "chunkGroup.assetsSize": lambda size, ctx: ctx.format_size(size) if size else None,
    "chunkGroup.auxiliaryAssetsSize": lambda size, ctx: f"({ctx.format_size(size)})" if size else None,
    "chunkGroup.filteredAssets": _filtered("asset", lambda ctx: _chunk_group(ctx).get("assets")),
    "chunkGroup.filteredAuxiliaryAssets": _filtered(
        "asset", lambda ctx: _chunk_group(ctx).get("auxiliaryAssets"), "auxiliary"
    ),
    "chunkGroup.is!": lambda _, ctx: "=",
    "chunkGroupAsset.name": lambda asset, ctx: ctx.green(asset),
    "chunkGroupAsset.size": _chunk_group_asset_size,
    "chunkGroup.children": _chunk_group_children,
    "chunkGroupChildGroup.type": lambda group_type, ctx: f"{group_type}:",
    "chunkGroupChild.assets[]": lambda file, ctx: ctx.format_filename(file),
    "chunkGroupChild.chunks[]": _chunk_id,
    "chunkGroupChild.name": _chunk_group_child_name,
}


# ==================== chunk ====================

def _valid_chunk_id(chunk_id: Any, ctx: PrinterContext) -> Optional[str]:
    return ctx.format_chunk_id(chunk_id) if is_valid_id(chunk_id) else None


def _directed_chunk_id(direction: str) -> FieldPrinter:
    def printer(chunk_id: Any, ctx: PrinterContext) -> str:
        return ctx.format_chunk_id(chunk_id, direction)
    return printer


def _children_by_order(children_by_order: Any, ctx: PrinterContext) -> Optional[str]:
    if not isinstance(children_by_order, Mapping):
        return None
    # группы упорядочены по ключу порядка
    items = [{"type": key, "children": value} for key, value in children_by_order.items()]
    items = sort_by_ids(items, key=lambda item: item["type"])
    return ctx.print(ctx.type, items, ctx)


CHUNK_PRINTERS: Dict[str, FieldPrinter] = {
    "chunk.id": _chunk_id,
    "chunk.files[]": lambda file, ctx: ctx.format_filename(file),
    "chunk.names[]": _identity,
    "chunk.idHints[]": _identity,
    "chunk.runtime[]": _identity,
    "chunk.sizes": _sizes,
    "chunk.parents[]": _directed_chunk_id("parent"),
    "chunk.siblings[]": _directed_chunk_id("sibling"),
    "chunk.children[]": _directed_chunk_id("child"),
    "chunk.childrenByOrder": _children_by_order,
    "chunk.childrenByOrder[].type": lambda order_type, ctx: f"{order_type}:",
    "chunk.childrenByOrder[].children[]": _valid_chunk_id,
    "chunk.entry": _flag("entry", "yellow"),
    "chunk.initial": _flag("initial", "yellow"),
    "chunk.rendered": _flag("rendered", "green"),
    "chunk.recorded": _flag("recorded", "green"),
    "chunk.reason": lambda reason, ctx: ctx.yellow(reason) if reason else None,
    "chunk.filteredModules": _filtered("module", lambda ctx: _mapping(ctx.ref("chunk")).get("modules"), "chunk"),
    "chunk.separator!": _separator,

    "chunkOrigin.request": _identity,
    "chunkOrigin.moduleId": _module_id,
    "chunkOrigin.moduleName": lambda module_name, ctx: ctx.bold(module_name),
    "chunkOrigin.loc": _identity,
}


# ==================== error / warning ====================

def _error_module_name(module_name: Any, ctx: PrinterContext) -> str:
    module_name = str(module_name)
    if "!" in module_name:
        return f"{ctx.bold(module_name.rsplit('!', 1)[1])} ({module_name})"
    return f"{ctx.bold(module_name)}"


def _error_message(message: Any, ctx: PrinterContext) -> str:
    message = str(message)
    if ESCAPE_START in message:
        return message
    return ctx.bold(ctx.format_error(message))


ERROR_PRINTERS: Dict[str, FieldPrinter] = {
    "error.file": lambda file, ctx: ctx.bold(file),
    "error.moduleName": _error_module_name,
    "error.loc": lambda loc, ctx: ctx.green(loc),
    "error.message": _error_message,
    "error.details": lambda details, ctx: ctx.format_error(str(details)),
    "error.stack": _identity,
    "error.separator!": _separator,
    "moduleTraceItem.originName": _identity,
    "moduleTraceDependency.loc": _identity,
}


# ==================== logging ====================

def _log_lines(marker: str, color: Optional[str] = None) -> FieldPrinter:
    """Каждая строка сообщения получает маркер уровня ("<w> ", "<e> ", ...)."""
    def printer(message: Any, ctx: PrinterContext) -> str:
        paint = getattr(ctx, color) if color else None
        return map_lines(str(message), lambda line: f"{marker}{paint(line) if paint else line}")
    return printer


def _logging_group(logging_group: Any, ctx: PrinterContext) -> Optional[str]:
    entries = _mapping(logging_group).get("entries")
    return "" if not entries else None


def _trace_line(trace: Any, ctx: PrinterContext) -> Optional[str]:
    return map_lines(str(trace), lambda line: f"| {line}") if trace else None


LOGGING_PRINTERS: Dict[str, FieldPrinter] = {
    "loggingEntry(error).loggingEntry.message": _log_lines("<e> ", "red"),
    "loggingEntry(warn).loggingEntry.message": _log_lines("<w> ", "yellow"),
    "loggingEntry(info).loggingEntry.message": _log_lines("<i> ", "green"),
    "loggingEntry(log).loggingEntry.message": _log_lines("    ", "bold"),
    "loggingEntry(debug).loggingEntry.message": _log_lines("    "),
    "loggingEntry(trace).loggingEntry.message": _log_lines("    "),
    "loggingEntry(status).loggingEntry.message": _log_lines("<s> ", "magenta"),
    "loggingEntry(profile).loggingEntry.message": _log_lines("<p> ", "magenta"),
    "loggingEntry(profileEnd).loggingEntry.message": _log_lines("</p> ", "magenta"),
    "loggingEntry(time).loggingEntry.message": _log_lines("<t> ", "magenta"),
    "loggingEntry(cache).loggingEntry.message": _log_lines("<c> ", "magenta"),
    "loggingEntry(group).loggingEntry.message": _log_lines("<-> ", "cyan"),
    "loggingEntry(groupCollapsed).loggingEntry.message": _log_lines("<+> ", "cyan"),
    "loggingEntry(clear).loggingEntry": lambda entry, ctx: "    -------",
    "loggingEntry(groupCollapsed).loggingEntry.children": lambda children, ctx: "",
    "loggingEntry.trace[]": _trace_line,

    "loggingGroup": _logging_group,
    "loggingGroup.debug": lambda flag, ctx: ctx.red("DEBUG") if flag else None,
    "loggingGroup.name": lambda name, ctx: ctx.bold(f"LOG from {name}"),
    "loggingGroup.separator!": _separator,
    "loggingGroup.filteredEntries": lambda n, ctx: f"+ {n} hidden lines" if _count(n) else None,
}


def all_printers() -> List[Dict[str, FieldPrinter]]:
    return [
        COMPILATION_PRINTERS,
        ASSET_PRINTERS,
        MODULE_PRINTERS,
        MODULE_REASON_PRINTERS,
        CHUNK_GROUP_PRINTERS,
        CHUNK_PRINTERS,
        ERROR_PRINTERS,
        LOGGING_PRINTERS,
    ]


__all__ = [
    "FieldPrinter",
    "COMPILATION_PRINTERS",
    "ASSET_PRINTERS",
    "MODULE_PRINTERS",
    "MODULE_REASON_PRINTERS",
    "CHUNK_GROUP_PRINTERS",
    "CHUNK_PRINTERS",
    "ERROR_PRINTERS",
    "LOGGING_PRINTERS",
    "all_printers",
]
