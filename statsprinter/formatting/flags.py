"""
Обёртки идентификаторов, флагов и слоёв.
"""

from __future__ import annotations

from typing import Any, Optional

from .colors import ColorPalette

_CHUNK_ID_BRACKETS = {
    None: ("{", "}"),
    "parent": ("<{", "}>"),
    "sibling": ("={", "}="),
    "child": (">{", "}<"),
}


def is_valid_id(value: Any) -> bool:
    """Идентификатор печатается, если он числовой (включая 0) или непустой."""
    if isinstance(value, bool):
        return value
    return isinstance(value, (int, float)) or bool(value)


def format_chunk_id(chunk_id: Any, palette: ColorPalette, direction: Optional[str] = None) -> str:
    """Id чанка в фигурных скобках; направление (parent/sibling/child) меняет скобки."""
    opening, closing = _CHUNK_ID_BRACKETS.get(direction, _CHUNK_ID_BRACKETS[None])
    return f"{opening}{palette.yellow(chunk_id)}{closing}"


def format_module_id(module_id: Any) -> str:
    return f"[{module_id}]"


def format_filename(filename: Any, palette: ColorPalette, oversize: bool = False) -> str:
    return (palette.yellow if oversize else palette.green)(filename)


def format_flag(flag: str) -> str:
    return f"[{flag}]"


def format_layer(layer: str) -> str:
    return f"(in {layer})"


__all__ = [
    "is_valid_id",
    "format_chunk_id",
    "format_module_id",
    "format_filename",
    "format_flag",
    "format_layer",
]
