"""TOML configuration loader."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .nutrition.report import DEFAULT_SUMMARY_PREFIX
from .products.catalog import DEFAULT_EXCLUDE, DEFAULT_EXTENSIONS


@dataclass
class ProductsConfig:
    dir: str = "products"
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))


@dataclass
class DiaryConfig:
    path: str = ""


@dataclass
class ReportConfig:
    summary_prefix: str = DEFAULT_SUMMARY_PREFIX
    font_path: str = ""


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class FoodlogConfig:
    products: ProductsConfig = field(default_factory=ProductsConfig)
    diary: DiaryConfig = field(default_factory=DiaryConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_level(name: object) -> str:
    """Upper-cased level name, or WARNING when logging does not know it."""
    level = str(name).upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return LoggingConfig.level


def load_config(path: str | Path | None = None) -> FoodlogConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Paths left empty in the file can be set via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    prd = raw.get("products", {})
    dia = raw.get("diary", {})
    rep = raw.get("report", {})
    log = raw.get("logging", {})

    # Resolve paths: config file → environment variable → default
    products_dir = (
        prd.get("dir", "")
        or os.environ.get("FOODLOG_PRODUCTS_DIR", "")
        or ProductsConfig.dir
    )
    diary_path = dia.get("path", "") or os.environ.get("FOODLOG_DIARY", "")

    return FoodlogConfig(
        products=ProductsConfig(
            dir=products_dir,
            extensions=prd.get("extensions", list(DEFAULT_EXTENSIONS)),
            exclude=prd.get("exclude", list(DEFAULT_EXCLUDE)),
        ),
        diary=DiaryConfig(path=diary_path),
        report=ReportConfig(
            summary_prefix=rep.get("summary_prefix", DEFAULT_SUMMARY_PREFIX),
            font_path=rep.get("font_path", ""),
        ),
        logging=LoggingConfig(
            level=_resolve_level(log.get("level", LoggingConfig.level)),
        ),
    )
