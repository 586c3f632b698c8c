from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Union

# ---- Aliases for clarity ----
ColorsSetting = Union[bool, Mapping[str, str]]  # True | False | {"green": "\u001b[32m", ...}


# -----------------------------
@dataclass(frozen=True)
class PrintOptions:
    # False: без цвета, True: стандартная палитра,
    # mapping: переопределение стартовых ANSI-кодов по имени цвета
    colors: ColorsSetting = False


__all__ = ["ColorsSetting", "PrintOptions"]
