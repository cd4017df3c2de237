"""CLI entry point for foodlog."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from .app_logging import configure_logging
from .config import FoodlogConfig, load_config
from .diary import FoodLogParser
from .numbers import json_value
from .nutrition import NutritionAggregator, render_day, summary_line
from .nutrition.report import render_catalog_line, render_product
from .products import ProductRecord, find_product, load_catalog


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="foodlog",
        description="Дневник питания: подсчёт БЖУ по markdown-файлам продуктов",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="путь к файлу настроек (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="подробный журнал"
    )

    sub = parser.add_subparsers(dest="command")

    # products
    products_parser = sub.add_parser("products", help="список продуктов")
    products_parser.add_argument(
        "dir", nargs="?", default=None, help="каталог продуктов"
    )
    products_parser.add_argument("--json", action="store_true", help="вывод в JSON")

    # show
    show_parser = sub.add_parser("show", help="показать продукт")
    show_parser.add_argument("name", help="название продукта (имя файла)")
    show_parser.add_argument(
        "--products", type=str, default=None, help="каталог продуктов"
    )

    # day
    day_parser = sub.add_parser("day", help="подсчитать БЖУ за день")
    day_parser.add_argument(
        "log", nargs="?", default=None, help="файл дневника питания"
    )
    day_parser.add_argument(
        "--products", type=str, default=None, help="каталог продуктов"
    )
    day_parser.add_argument("--json", action="store_true", help="вывод в JSON")
    day_parser.add_argument(
        "--write", action="store_true",
        help="дописать итог дня в раздел **Итого:** дневника",
    )
    day_parser.add_argument(
        "--pdf", type=str, default=None, metavar="FILE",
        help="сохранить отчёт в PDF",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    config = load_config(args.config)
    configure_logging("DEBUG" if args.verbose else config.logging.level)

    match args.command:
        case "products":
            _cmd_products(config, args)
        case "show":
            _cmd_show(config, args)
        case "day":
            _cmd_day(config, args)


def _load_products(config: FoodlogConfig, directory: str | None) -> list[ProductRecord]:
    root = directory or config.products.dir
    try:
        return load_catalog(
            root,
            extensions=config.products.extensions,
            exclude=config.products.exclude,
        )
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)


def _json_dict(items) -> dict:
    return {key: json_value(value) for key, value in items}


def _cmd_products(config: FoodlogConfig, args) -> None:
    products = _load_products(config, args.dir)

    if args.json:
        data = [
            {"name": p.name, "blocks": asdict(p.blocks, dict_factory=_json_dict)}
            for p in products
        ]
        print(json.dumps(data, ensure_ascii=False, indent=2, allow_nan=False))
        return

    if not products:
        print("Продукты не найдены.")
        return
    print(f"Найдено продуктов: {len(products)}")
    for product in products:
        print(f"  {render_catalog_line(product)}")


def _cmd_show(config: FoodlogConfig, args) -> None:
    products = _load_products(config, args.products)
    product = find_product(products, args.name)
    if product is None:
        print(f"Продукт не найден: {args.name}", file=sys.stderr)
        sys.exit(1)
    print(render_product(product))


def _cmd_day(config: FoodlogConfig, args) -> None:
    log_path = args.log or config.diary.path
    if not log_path:
        print("Не указан файл дневника питания.", file=sys.stderr)
        sys.exit(1)

    log_path = Path(log_path)
    try:
        # newline="" keeps CRLF logs intact when the summary is written back
        with open(log_path, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Не удалось прочитать дневник {log_path}: {e}", file=sys.stderr)
        sys.exit(1)

    products = _load_products(config, args.products)
    entries = FoodLogParser().parse(text)
    day = NutritionAggregator(products).aggregate(entries)
    prefix = config.report.summary_prefix

    if args.json:
        print(json.dumps(
            day.summary_dict(), ensure_ascii=False, indent=2, allow_nan=False
        ))
    else:
        print(render_day(day, prefix=prefix))

    if args.write:
        if FoodLogParser.has_summary(text):
            updated = FoodLogParser.add_to_summary(
                text, summary_line(day.total, prefix=prefix)
            )
            with open(log_path, "w", encoding="utf-8", newline="") as f:
                f.write(updated)
            print(f"Итог записан в {log_path}")
        else:
            print(
                f"В дневнике {log_path} нет раздела **Итого:**, итог не записан",
                file=sys.stderr,
            )

    if args.pdf:
        from .pdf import generate_pdf

        try:
            pdf_path = generate_pdf(
                day,
                args.pdf,
                title=f"Дневник питания: {log_path.stem}",
                font_path=config.report.font_path,
            )
            print(f"PDF сохранён: {pdf_path}")
        except (ImportError, FileNotFoundError) as e:
            print(f"Ошибка создания PDF: {e}", file=sys.stderr)
