"""
Типизированная схема дерева статистики.

Модели описывают поля, которые понимает стандартный набор правил.
Дополнительные поля разрешены (extra="allow") и доходят до принтера без
изменений, их могут печатать плагины. Ключи записаны в camelCase, как в
JSON-выводе компилятора.
"""

from __future__ import annotations

import enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Id = Union[int, str]


class StatsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class LogType(str, enum.Enum):
    """Уровень записи лога: дискриминант полиморфных правил печати."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    LOG = "log"
    DEBUG = "debug"
    TRACE = "trace"
    STATUS = "status"
    PROFILE = "profile"
    PROFILE_END = "profileEnd"
    TIME = "time"
    CACHE = "cache"
    GROUP = "group"
    GROUP_COLLAPSED = "groupCollapsed"
    CLEAR = "clear"


# ---- Assets ----

class AssetInfo(StatsModel):
    immutable: Optional[bool] = None
    copied: Optional[bool] = None
    development: Optional[bool] = None
    hot_module_replacement: Optional[bool] = None
    javascript_module: Optional[bool] = None
    source_filename: Optional[Union[bool, str]] = None


class Asset(StatsModel):
    type: Optional[str] = None
    name: str
    size: Optional[float] = None
    emitted: Optional[bool] = None
    compared_for_emit: Optional[bool] = None
    cached: Optional[bool] = None
    is_over_size_limit: Optional[bool] = None
    info: Optional[AssetInfo] = None
    chunks: Optional[List[Id]] = None
    auxiliary_chunks: Optional[List[Id]] = None
    chunk_names: Optional[List[str]] = None
    chunk_id_hints: Optional[List[str]] = None
    auxiliary_chunk_names: Optional[List[str]] = None
    auxiliary_chunk_id_hints: Optional[List[str]] = None
    related: Optional[List["Asset"]] = None
    filtered_related: Optional[int] = None
    children: Optional[List["Asset"]] = None
    filtered_children: Optional[int] = None


# ---- Modules ----

class ModuleProfile(StatsModel):
    total: Optional[float] = None
    resolving: Optional[float] = None
    restoring: Optional[float] = None
    integration: Optional[float] = None
    building: Optional[float] = None
    storing: Optional[float] = None
    additional_resolving: Optional[float] = None
    additional_integration: Optional[float] = None


class ModuleIssuer(StatsModel):
    id: Optional[Id] = None
    name: Optional[str] = None
    identifier: Optional[str] = None
    profile: Optional[ModuleProfile] = None


class ModuleReason(StatsModel):
    active: Optional[bool] = None
    type: Optional[str] = None
    user_request: Optional[str] = None
    module_id: Optional[Id] = None
    module: Optional[str] = None
    resolved_module: Optional[str] = None
    loc: Optional[str] = None
    explanation: Optional[str] = None
    children: Optional[List["ModuleReason"]] = None
    filtered_children: Optional[int] = None


class Module(StatsModel):
    type: Optional[str] = None
    id: Optional[Id] = None
    name: Optional[str] = None
    identifier: Optional[str] = None
    layer: Optional[str] = None
    size: Optional[float] = None
    sizes: Optional[Dict[str, float]] = None
    chunks: Optional[List[Id]] = None
    depth: Optional[int] = None
    cacheable: Optional[bool] = None
    orphan: Optional[bool] = None
    runtime: Optional[bool] = None
    optional: Optional[bool] = None
    dependent: Optional[bool] = None
    built: Optional[bool] = None
    code_generated: Optional[bool] = None
    build_time_executed: Optional[bool] = None
    cached: Optional[bool] = None
    assets: Optional[List[str]] = None
    failed: Optional[bool] = None
    warnings: Optional[Union[bool, int]] = None
    errors: Optional[Union[bool, int]] = None
    provided_exports: Optional[List[str]] = None
    used_exports: Optional[Union[bool, List[str]]] = None
    optimization_bailout: Optional[List[str]] = None
    reasons: Optional[List[ModuleReason]] = None
    filtered_reasons: Optional[int] = None
    issuer_path: Optional[List[ModuleIssuer]] = None
    profile: Optional[ModuleProfile] = None
    modules: Optional[List["Module"]] = None
    filtered_modules: Optional[int] = None
    children: Optional[List["Module"]] = None
    filtered_children: Optional[int] = None


# ---- Chunks ----

class ChunkOrigin(StatsModel):
    request: Optional[str] = None
    module_id: Optional[Id] = None
    module_name: Optional[str] = None
    loc: Optional[str] = None


class Chunk(StatsModel):
    id: Optional[Id] = None
    files: Optional[List[str]] = None
    names: Optional[List[str]] = None
    id_hints: Optional[List[str]] = None
    runtime: Optional[List[str]] = None
    sizes: Optional[Dict[str, float]] = None
    parents: Optional[List[Id]] = None
    siblings: Optional[List[Id]] = None
    children: Optional[List[Id]] = None
    children_by_order: Optional[Dict[str, List[Id]]] = None
    entry: Optional[bool] = None
    initial: Optional[bool] = None
    rendered: Optional[bool] = None
    recorded: Optional[bool] = None
    reason: Optional[str] = None
    origins: Optional[List[ChunkOrigin]] = None
    modules: Optional[List[Module]] = None
    filtered_modules: Optional[int] = None


class ChunkGroupAsset(StatsModel):
    name: str
    size: Optional[float] = None


class ChunkGroupChild(StatsModel):
    assets: Optional[List[ChunkGroupAsset]] = None
    chunks: Optional[List[Id]] = None
    name: Optional[str] = None


class ChunkGroup(StatsModel):
    name: Optional[str] = None
    chunks: Optional[List[Id]] = None
    is_over_size_limit: Optional[bool] = None
    assets_size: Optional[float] = None
    auxiliary_assets_size: Optional[float] = None
    assets: Optional[List[ChunkGroupAsset]] = None
    filtered_assets: Optional[int] = None
    auxiliary_assets: Optional[List[ChunkGroupAsset]] = None
    filtered_auxiliary_assets: Optional[int] = None
    children: Optional[Dict[str, List[ChunkGroupChild]]] = None


# ---- Errors / warnings ----

class ModuleTraceDependency(StatsModel):
    loc: Optional[str] = None


class ModuleTraceItem(StatsModel):
    origin_name: Optional[str] = None
    module_name: Optional[str] = None
    dependencies: Optional[List[ModuleTraceDependency]] = None


class StatsError(StatsModel):
    file: Optional[str] = None
    module_name: Optional[str] = None
    loc: Optional[str] = None
    message: str = ""
    details: Optional[str] = None
    stack: Optional[str] = None
    module_trace: Optional[List[ModuleTraceItem]] = None


# ---- Logging ----

class LoggingEntry(StatsModel):
    type: Union[LogType, str] = Field(union_mode="left_to_right")
    message: Optional[str] = None
    trace: Optional[List[str]] = None
    children: Optional[List["LoggingEntry"]] = None


class LoggingGroup(StatsModel):
    name: Optional[str] = None
    debug: Optional[bool] = None
    entries: List[LoggingEntry] = Field(default_factory=list)
    filtered_entries: Optional[int] = None


# ---- Compilation ----

class Compilation(StatsModel):
    name: Optional[str] = None
    hash: Optional[str] = None
    version: Optional[str] = None
    rspack_version: Optional[str] = None
    time: Optional[float] = None
    built_at: Optional[float] = None
    env: Optional[Dict[str, Any]] = None
    public_path: Optional[str] = None
    assets: Optional[List[Asset]] = None
    filtered_assets: Optional[int] = None
    assets_by_chunk_name: Optional[Dict[str, List[str]]] = None
    entrypoints: Optional[Union[Dict[str, ChunkGroup], List[ChunkGroup]]] = None
    named_chunk_groups: Optional[Union[Dict[str, ChunkGroup], List[ChunkGroup]]] = None
    chunks: Optional[List[Chunk]] = None
    modules: Optional[List[Module]] = None
    filtered_modules: Optional[int] = None
    children: Optional[List["Compilation"]] = None
    logging: Optional[Union[Dict[str, LoggingGroup], List[LoggingGroup]]] = None
    warnings: Optional[List[StatsError]] = None
    warnings_count: Optional[int] = None
    filtered_warning_details_count: Optional[int] = None
    errors: Optional[List[StatsError]] = None
    errors_count: Optional[int] = None
    filtered_error_details_count: Optional[int] = None
    need_additional_pass: Optional[bool] = None


for _model in (Asset, ModuleReason, Module, LoggingEntry, Compilation):
    _model.model_rebuild()


def to_stats_dict(compilation: Compilation) -> Dict[str, Any]:
    """
    JSON-представление для принтера: только заданные поля, ключи в camelCase.

    Явный null остаётся (для правил он значим), незаданные поля отсутствуют.
    """
    return compilation.model_dump(by_alias=True, exclude_unset=True, mode="json")


__all__ = [
    "StatsModel",
    "LogType",
    "AssetInfo",
    "Asset",
    "ModuleProfile",
    "ModuleIssuer",
    "ModuleReason",
    "Module",
    "ChunkOrigin",
    "Chunk",
    "ChunkGroupAsset",
    "ChunkGroupChild",
    "ChunkGroup",
    "ModuleTraceDependency",
    "ModuleTraceItem",
    "StatsError",
    "LoggingEntry",
    "LoggingGroup",
    "Compilation",
    "to_stats_dict",
]
