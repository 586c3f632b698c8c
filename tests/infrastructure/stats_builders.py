"""
Билдеры узлов дерева статистики.

Возвращают JSON-подобные словари с camelCase-ключами; незаданные поля
отсутствуют (как в выводе компилятора).
"""

from __future__ import annotations

from typing import Any, Dict


def _node(**fields: Any) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if v is not None}


def compilation(**fields: Any) -> Dict[str, Any]:
    return _node(**fields)


def asset(name: str, size: int, **fields: Any) -> Dict[str, Any]:
    return _node(type="asset", name=name, size=size, **fields)


def module(name: str, **fields: Any) -> Dict[str, Any]:
    return _node(name=name, **fields)


def chunk(chunk_id: Any, **fields: Any) -> Dict[str, Any]:
    return _node(id=chunk_id, **fields)


def error(message: str, **fields: Any) -> Dict[str, Any]:
    return _node(message=message, **fields)


def log_entry(level: str, message: str, **fields: Any) -> Dict[str, Any]:
    return _node(type=level, message=message, **fields)


def logging_group(*entries: Dict[str, Any], **fields: Any) -> Dict[str, Any]:
    return _node(entries=list(entries), **fields)


__all__ = ["compilation", "asset", "module", "chunk", "error", "log_entry", "logging_group"]
