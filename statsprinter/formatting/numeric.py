"""
Числовые представления в отчёте.

Отчёт печатает числа так, как их печатает JSON-совместимый вывод:
целые без дробной части, дробные без хвостовых нулей. Округление идёт
«половина вверх» по точному значению числа.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Union

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """Число в смысле статистики: int или float, но не bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_number(value: Number) -> str:
    """Печатает число без хвостовой «.0» у целых значений."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _plain(value: Decimal) -> str:
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text


def to_precision(value: Number, digits: int = 3) -> str:
    """
    Округляет до `digits` значащих цифр и отбрасывает хвостовые нули.

    Примеры: 1.171875 -> "1.17", 1000 -> "1000", 1.125 -> "1.13".
    """
    if value == 0:
        return "0"
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(exact.adjusted() - digits + 1)
    return _plain(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def to_fixed(value: Number, places: int = 2) -> str:
    """Фиксированное число знаков после запятой (хвостовые нули сохраняются)."""
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


__all__ = ["Number", "is_number", "format_number", "to_precision", "to_fixed"]
