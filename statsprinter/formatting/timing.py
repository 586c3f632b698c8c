"""
Форматирование длительностей и моментов времени.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from .colors import ColorPalette
from .numeric import Number, format_number, to_fixed


def time_bucket(time: Number, time_reference: Number) -> Optional[str]:
    """
    Имя цвета для длительности относительно опорного времени.

    Пороги равны 1/16, 1/8, 1/4 и 1/2 от опорного времени;
    меньше 1/16 без цвета, далее bold → green → yellow → red.
    """
    if time < time_reference / 16:
        return None
    if time < time_reference / 8:
        return "bold"
    if time < time_reference / 4:
        return "green"
    if time < time_reference / 2:
        return "yellow"
    return "red"


def format_time(
    time: Number,
    palette: ColorPalette,
    time_reference: Optional[Number] = None,
    bold_quantity: bool = False,
) -> str:
    """
    Длительность в миллисекундах.

    При наличии опорного времени (и несовпадении с ним) печатается "<n> ms"
    с цветом по порогам. Иначе "<n> ms", а свыше 1000 ms "<n.nn> s".
    """
    unit = " ms"
    if time_reference and time != time_reference:
        text = f"{format_number(time)}{unit}"
        bucket = time_bucket(time, time_reference)
        if bucket is None:
            return text
        return getattr(palette, bucket)(text)

    time_str = format_number(time)
    if time > 1000:
        time_str = to_fixed(time / 1000, 2)
        unit = " s"
    return f"{palette.bold(time_str) if bold_quantity else time_str}{unit}"


def format_date_time(timestamp_ms: Number, palette: ColorPalette) -> str:
    """Момент времени (мс с эпохи) в локальной зоне: "YYYY-MM-DD HH:MM:SS", время: жирным."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000)
    date = moment.strftime("%Y-%m-%d")
    clock = moment.strftime("%H:%M:%S")
    return f"{date} {palette.bold(clock)}"


__all__ = ["format_time", "format_date_time", "time_bucket"]
