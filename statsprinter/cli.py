from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .api import create_printer, render_stats
from .config import load_config
from .errors import StatsPrinterError
from .hooks import HookCategory
from .stats import load_stats_dict
from .types import PrintOptions
from .version import tool_version

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stats-printer",
        description="Текстовый отчёт по статистике сборки",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--debug", action="store_true", help="подробный лог в stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_render = sub.add_parser("render", help="Отрисовать файл статистики (JSON/YAML)")
    sp_render.add_argument("stats", help="путь к файлу статистики")
    sp_render.add_argument(
        "--config",
        metavar="PATH",
        help="файл настроек принтера (по умолчанию ./stats-printer.yaml, если есть)",
    )
    colors = sp_render.add_mutually_exclusive_group()
    colors.add_argument("--colors", dest="colors", action="store_true", default=None, help="включить ANSI-цвета")
    colors.add_argument("--no-colors", dest="colors", action="store_false", help="выключить ANSI-цвета")

    sp_keys = sub.add_parser("keys", help="Ключи стандартных правил по категории хуков (JSON)")
    sp_keys.add_argument("category", choices=[c.value for c in HookCategory], help="категория хуков")

    return p


def _setup_logging(debug: bool) -> None:
    root = logging.getLogger("statsprinter")
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not root.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(h)


def _options(ns: argparse.Namespace) -> PrintOptions:
    cfg = load_config(Path(ns.config) if ns.config else None)
    options = cfg.to_options()
    # флаги CLI приоритетнее файла
    if ns.colors is not None:
        options = PrintOptions(colors=ns.colors)
    return options


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(ns.debug))

    try:
        if ns.cmd == "render":
            options = _options(ns)
            stats = load_stats_dict(Path(ns.stats))
            logger.debug(f"Rendering {ns.stats} (colors={options.colors!r})")
            text = render_stats(stats, options)
            if text:
                sys.stdout.write(text.rstrip("\n") + "\n")
            return 0

        if ns.cmd == "keys":
            registry = create_printer().registry
            sys.stdout.write(json.dumps(registry.keys(ns.category), ensure_ascii=False))
            return 0

    except StatsPrinterError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
