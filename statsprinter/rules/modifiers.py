from __future__ import annotations

from typing import Callable, Dict, Optional

from ..context import PrinterContext
from ..formatting.text import indent

ResultModifier = Callable[[Optional[str], PrinterContext], Optional[str]]


def _nested_modules(result: Optional[str], ctx: PrinterContext) -> Optional[str]:
    # вложенные модули (конкатенация) выделяются маркером "| " на каждой строке
    return indent(result, "| ") if result is not None else None


RESULT_MODIFIER: Dict[str, ResultModifier] = {
    "module.modules": _nested_modules,
}

__all__ = ["ResultModifier", "RESULT_MODIFIER"]
