"""
Загрузка дерева статистики из файла (JSON или YAML).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import StatsLoadError
from .schema import Compilation, to_stats_dict

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")
_YAML_SUFFIXES = {".yaml", ".yml"}


def parse_stats(raw: Any, source: str = "<stats>") -> Compilation:
    """Проверяет сырое дерево по схеме и возвращает модель компиляции."""
    if not isinstance(raw, dict):
        raise StatsLoadError(f"Stats must be a mapping at top level: {source}")
    try:
        return Compilation.model_validate(raw)
    except ValidationError as e:
        raise StatsLoadError(f"Invalid stats in {source}:\n{e}") from e


def read_stats_text(text: str, source: str = "<stats>", yaml: bool = False) -> Compilation:
    try:
        raw = _yaml.load(text) if yaml else json.loads(text)
    except (json.JSONDecodeError, YAMLError) as e:
        raise StatsLoadError(f"Failed to parse stats {source}: {e}") from e
    return parse_stats(raw, source)


def load_stats(path: Path) -> Compilation:
    """
    Читает файл статистики.

    Формат определяется по расширению: .yaml/.yml читаются как YAML, остальное как JSON.

    Raises:
        StatsLoadError: Файл не найден, не парсится или не проходит схему
    """
    if not path.is_file():
        raise StatsLoadError(f"Stats file not found: {path}")
    logger.debug(f"Loading stats from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StatsLoadError(f"Failed to read stats file {path}: {e}") from e
    return read_stats_text(text, str(path), yaml=path.suffix.lower() in _YAML_SUFFIXES)


def load_stats_dict(path: Path) -> Dict[str, Any]:
    return to_stats_dict(load_stats(path))


__all__ = ["parse_stats", "read_stats_text", "load_stats", "load_stats_dict"]
