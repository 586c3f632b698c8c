"""
Реестр хуков принтера статистики.

Для каждой категории хуков хранится отображение
  selector key -> упорядоченная цепочка обработчиков.

Категории и их дисциплина вызова (см. StatsPrinter):
  • print          (value, ctx) -> str | None    : первый не-None побеждает
  • sortElements   (keys, ctx)  -> None          : перестановка ключей объекта на месте
  • sortItems      (items, ctx) -> None          : перестановка элементов массива на месте
  • getItemName    (item, ctx)  -> str | None    : первый не-None побеждает
  • printItems     (strings, ctx) -> str | None  : первый не-None побеждает
  • printElements  (elements, ctx) -> str | None : первый не-None побеждает
  • result         (text, ctx)  -> str | None    : конвейер: каждый получает результат предыдущего

Сортировки выполняются в порядке регистрации, каждая может полностью
переупорядочить список; итог зависит от порядка регистрации.
"""

from __future__ import annotations

import enum
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

logger = logging.getLogger(__name__)


class HookCategory(str, enum.Enum):
    PRINT = "print"
    SORT_ELEMENTS = "sortElements"
    SORT_ITEMS = "sortItems"
    GET_ITEM_NAME = "getItemName"
    PRINT_ITEMS = "printItems"
    PRINT_ELEMENTS = "printElements"
    RESULT = "result"


CategoryLike = Union[HookCategory, str]
Handler = Callable[..., Any]


@dataclass(frozen=True)
class Tap:
    """Зарегистрированный обработчик: имя источника (плагина) и функция."""
    name: str
    fn: Handler


class HookRegistry:
    """
    Таблица обработчиков: категория -> selector key -> цепочка Tap.

    Единственный механизм настройки формата отчёта: плагины добавляют
    обработчики к любым ключам, в том числе к уже занятым (в конец цепочки).
    """

    def __init__(self):
        self._chains: Dict[HookCategory, Dict[str, List[Tap]]] = {c: {} for c in HookCategory}
        self.plugins: List[StatsPrinterPlugin] = []
        logger.debug("HookRegistry initialized")

    def tap(self, category: CategoryLike, key: str, fn: Handler, name: str = "anonymous") -> None:
        """Добавляет обработчик в конец цепочки `category`/`key`."""
        if not callable(fn):
            raise TypeError(f"Hook handler for {category}:{key} must be callable, got {type(fn).__name__}")
        cat = HookCategory(category)
        self._chains[cat].setdefault(key, []).append(Tap(name=name, fn=fn))
        logger.debug(f"Tapped {cat.value}:{key} ({name})")

    def tap_all(self, category: CategoryLike, handlers: Mapping[str, Handler], name: str = "anonymous") -> None:
        """Регистрирует набор обработчиков одной категории."""
        for key, fn in handlers.items():
            self.tap(category, key, fn, name=name)

    def chain(self, category: CategoryLike, key: str) -> Tuple[Tap, ...]:
        """Цепочка обработчиков ключа в порядке регистрации (пустая, если нет)."""
        return tuple(self._chains[HookCategory(category)].get(key, ()))

    def has(self, category: CategoryLike, key: str) -> bool:
        return bool(self._chains[HookCategory(category)].get(key))

    def keys(self, category: CategoryLike) -> List[str]:
        return list(self._chains[HookCategory(category)])

    def register_plugin(self, plugin: StatsPrinterPlugin) -> None:
        """
        Регистрирует плагин и все его обработчики.

        Raises:
            ValueError: Если плагин с таким именем уже зарегистрирован
        """
        if any(p.name == plugin.name for p in self.plugins):
            raise ValueError(f"Plugin '{plugin.name}' already registered")

        logger.debug(f"Registering plugin: {plugin.name}")
        self.plugins.append(plugin)
        plugin.apply(self)
        logger.debug(f"Plugin '{plugin.name}' registered successfully")


class StatsPrinterPlugin(ABC):
    """
    Базовый интерфейс плагина принтера.

    Плагин получает реестр в `apply()` и добавляет в него свои обработчики.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Возвращает имя плагина."""
        pass

    @abstractmethod
    def apply(self, registry: HookRegistry) -> None:
        """Регистрирует обработчики плагина в реестре."""
        pass


__all__ = ["HookCategory", "Tap", "Handler", "HookRegistry", "StatsPrinterPlugin"]
