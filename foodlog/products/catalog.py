"""Product catalog loader: walks a directory of markdown product files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .document import parse_document
from .models import ProductRecord

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".md",)
DEFAULT_EXCLUDE: tuple[str, ...] = ("_readme",)


def _log_walk_error(error: OSError) -> None:
    logger.error("Не удалось прочитать каталог %s: %s", error.filename, error.strerror)


def iter_product_files(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Iterable[Path]:
    """Yield product files under ``root`` at any depth, in sorted order."""
    exts = tuple(extensions)
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(exts):
                yield Path(dirpath) / filename


def load_product(path: str | Path) -> ProductRecord:
    """Read and parse a single product file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    parsed = parse_document(content)
    return ProductRecord(name=path.stem, content=parsed.content, blocks=parsed.blocks)


def load_catalog(
    root: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
) -> list[ProductRecord]:
    """Load every product file under ``root``.

    Files whose name without extension is in ``exclude`` are skipped.
    A file that cannot be read is logged and skipped; the scan goes on.

    Raises:
        FileNotFoundError: If ``root`` is not an existing directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Каталог продуктов не найден: {root}")

    excluded = set(exclude)
    products: list[ProductRecord] = []
    for path in iter_product_files(root, extensions):
        if path.stem in excluded:
            continue
        try:
            products.append(load_product(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Ошибка при обработке файла %s: %s", path, e)

    logger.info("Загружено продуктов: %d (%s)", len(products), root)
    return products


def find_product(
    products: Iterable[ProductRecord], name: str
) -> ProductRecord | None:
    """First product with exactly this name, or None."""
    for product in products:
        if product.name == name:
            return product
    return None
