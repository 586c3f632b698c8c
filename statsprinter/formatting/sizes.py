from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Optional

from .numeric import to_precision

_ABBREVIATIONS = ("bytes", "KiB", "MiB", "GiB")


def format_size(size: Any) -> str:
    """
    Человекочитаемый размер: 3 значащие цифры в bytes/KiB/MiB/GiB.

    1200 -> "1.17 KiB", 1000 -> "1000 bytes", 0 -> "0 bytes".
    """
    if isinstance(size, bool) or not isinstance(size, (int, float)) or math.isnan(size):
        return "unknown size"
    if size <= 0:
        return "0 bytes"
    index = math.floor(math.log(size) / math.log(1024))
    index = max(0, min(index, len(_ABBREVIATIONS) - 1))
    return f"{to_precision(size / 1024 ** index)} {_ABBREVIATIONS[index]}"


def print_sizes(
    sizes: Mapping[str, Any],
    formatter: Callable[[Any], str] = format_size,
) -> Optional[str]:
    """
    Размеры по типам источника.

    Один тип печатается без подписи, несколько печатаются как "<size> (<type>)" через пробел.
    """
    if not isinstance(sizes, Mapping):
        return None
    keys = list(sizes)
    if len(keys) > 1:
        return " ".join(f"{formatter(sizes[key])} ({key})" for key in keys)
    if len(keys) == 1:
        return formatter(sizes[keys[0]])
    return None


__all__ = ["format_size", "print_sizes"]
