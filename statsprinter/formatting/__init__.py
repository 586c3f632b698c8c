"""
Примитивы форматирования: чистые функции от скалярных значений отчёта.
"""

from .colors import AVAILABLE_COLORS, COLOR_NAMES, ColorPalette, make_color, resolve_color_starts
from .flags import (
    format_chunk_id,
    format_filename,
    format_flag,
    format_layer,
    format_module_id,
    is_valid_id,
)
from .highlight import format_error
from .names import get_module_name, get_resource_name
from .numeric import format_number, is_number
from .sizes import format_size, print_sizes
from .text import PrintedElement, indent, map_lines, more_count, plural
from .timing import format_date_time, format_time

__all__ = [
    # Colors
    "AVAILABLE_COLORS",
    "COLOR_NAMES",
    "ColorPalette",
    "make_color",
    "resolve_color_starts",

    # Scalars
    "format_number",
    "is_number",
    "format_size",
    "print_sizes",
    "format_time",
    "format_date_time",
    "format_chunk_id",
    "format_module_id",
    "format_filename",
    "format_flag",
    "format_layer",
    "format_error",
    "is_valid_id",

    # Names
    "get_resource_name",
    "get_module_name",

    # Text
    "PrintedElement",
    "indent",
    "map_lines",
    "more_count",
    "plural",
]
