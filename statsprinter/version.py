from __future__ import annotations

from importlib import metadata

DIST_NAME = "stats-printer"
UNKNOWN_VERSION = "0.0.0"


def tool_version() -> str:
    """Версия установленного дистрибутива; вне установки возвращается 0.0.0."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return UNKNOWN_VERSION


__all__ = ["DIST_NAME", "tool_version"]
