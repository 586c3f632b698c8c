"""
Контекст одного прохода рендеринга.

Контекст создаётся заново на каждом уровне рекурсии (поверхностная копия
родительского) и несёт:
  • палитру цветов и функции форматирования;
  • опорное время (timeReference) для раскраски длительностей;
  • ссылки на объекты-предки по имени типа ("compilation", "module", "chunk", ...);
  • позицию текущего узла (type, parent, element, index).

Изменять контекст может только движок и обработчики текущего уровня;
изменения не видны родительским уровням.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from .formatting import (
    ColorPalette,
    format_chunk_id,
    format_date_time,
    format_error,
    format_filename,
    format_flag,
    format_layer,
    format_module_id,
    format_size,
    format_time,
)
from .types import PrintOptions

if TYPE_CHECKING:
    from .printer import RenderPass


@dataclass
class PrinterContext:
    type: str = ""
    options: PrintOptions = field(default_factory=PrintOptions)
    palette: ColorPalette = field(default_factory=ColorPalette.plain)
    time_reference: Optional[float] = None
    # вид группы чанков: "Entrypoint" | "Chunk Group"
    chunk_group_kind: Optional[str] = None
    refs: Dict[str, Any] = field(default_factory=dict)
    parent: Any = None
    element: Optional[str] = None
    index: Optional[int] = None
    # Произвольные значения плагинов
    extras: Dict[str, Any] = field(default_factory=dict)
    render_pass: Optional["RenderPass"] = field(default=None, repr=False, compare=False)

    def derive(self, **changes: Any) -> "PrinterContext":
        """Копия контекста для вложенного уровня; словари копируются поверхностно."""
        changes.setdefault("refs", dict(self.refs))
        changes.setdefault("extras", dict(self.extras))
        return dataclasses.replace(self, **changes)

    def ref(self, name: str, default: Any = None) -> Any:
        """Объект-предок (или значение поля) по имени: ctx.ref("module")."""
        value = self.refs.get(name)
        return default if value is None else value

    @property
    def compilation(self) -> Dict[str, Any]:
        return self.ref("compilation", {})

    def print(self, type_path: str, value: Any, context: Optional["PrinterContext"] = None) -> Optional[str]:
        """Рекурсивный вызов движка изнутри обработчика (в рамках текущего прохода)."""
        if self.render_pass is None:
            raise RuntimeError("PrinterContext is not bound to a render pass")
        return self.render_pass.print(type_path, value, context if context is not None else self)

    # ---- Цвета ----

    def bold(self, text: Any) -> Any:
        return self.palette.bold(text)

    def yellow(self, text: Any) -> Any:
        return self.palette.yellow(text)

    def red(self, text: Any) -> Any:
        return self.palette.red(text)

    def green(self, text: Any) -> Any:
        return self.palette.green(text)

    def cyan(self, text: Any) -> Any:
        return self.palette.cyan(text)

    def magenta(self, text: Any) -> Any:
        return self.palette.magenta(text)

    # ---- Форматирование ----

    def format_size(self, size: Any) -> str:
        return format_size(size)

    def format_time(self, time: float, bold_quantity: bool = False) -> str:
        return format_time(time, self.palette, self.time_reference, bold_quantity)

    def format_date_time(self, timestamp_ms: float) -> str:
        return format_date_time(timestamp_ms, self.palette)

    def format_chunk_id(self, chunk_id: Any, direction: Optional[str] = None) -> str:
        return format_chunk_id(chunk_id, self.palette, direction)

    def format_module_id(self, module_id: Any) -> str:
        return format_module_id(module_id)

    def format_filename(self, filename: Any, oversize: bool = False) -> str:
        return format_filename(filename, self.palette, oversize)

    def format_flag(self, flag: str) -> str:
        return format_flag(flag)

    def format_layer(self, layer: str) -> str:
        return format_layer(layer)

    def format_error(self, message: str) -> str:
        return format_error(message, self.palette)


__all__ = ["PrinterContext"]
