from .load import load_stats, load_stats_dict, parse_stats, read_stats_text
from .schema import (
    Asset,
    Chunk,
    ChunkGroup,
    Compilation,
    LoggingEntry,
    LoggingGroup,
    LogType,
    Module,
    ModuleReason,
    StatsError,
    to_stats_dict,
)

__all__ = [
    # Schema
    "Asset",
    "Chunk",
    "ChunkGroup",
    "Compilation",
    "LoggingEntry",
    "LoggingGroup",
    "LogType",
    "Module",
    "ModuleReason",
    "StatsError",
    "to_stats_dict",

    # Loading
    "load_stats",
    "load_stats_dict",
    "parse_stats",
    "read_stats_text",
]
