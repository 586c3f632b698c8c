"""
Конфигурация принтера (stats-printer.yaml).

Пример:

    colors:
      green: "\\u001b[32m"
      red: "\\u001b[31m"

`colors`: true/false или отображение «имя цвета -> стартовая ANSI-последовательность».
Отсутствие файла означает настройки по умолчанию.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .types import PrintOptions

logger = logging.getLogger(__name__)

CONFIG_FILE = "stats-printer.yaml"

_yaml = YAML(typ="safe")


class PrinterConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    colors: Union[bool, Dict[str, str]] = False

    def to_options(self) -> PrintOptions:
        return PrintOptions(colors=self.colors)


def _read_yaml_map(path: Path) -> dict:
    """Читает YAML файл и возвращает словарь."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def load_config(path: Optional[Path] = None) -> PrinterConfig:
    """
    Загружает конфигурацию принтера.

    Args:
        path: Явный путь к файлу; по умолчанию stats-printer.yaml в текущем каталоге

    Raises:
        ConfigError: Файл некорректен
    """
    cfg_path = path if path is not None else Path.cwd() / CONFIG_FILE
    if path is not None and not cfg_path.is_file():
        raise ConfigError(f"Config file not found: {cfg_path}")

    raw = _read_yaml_map(cfg_path)
    logger.debug(f"Printer config from {cfg_path}: {sorted(raw)}")
    try:
        return PrinterConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {cfg_path}:\n{e}") from e


__all__ = ["CONFIG_FILE", "PrinterConfig", "load_config"]
