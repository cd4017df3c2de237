"""Product document parser: splits markdown into labelled sections."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import replace

from .blocks import (
    parse_composition_block,
    parse_nutrition_block,
    parse_price_block,
    parse_recipe_block,
)
from .models import ParsedDocument, ProductBlocks

logger = logging.getLogger(__name__)

# **Пищевая ценность**
_HEADER_PATTERN = re.compile(r"\*\*(.*?)\*\*")

# Section label (lowercased) → (ProductBlocks field, parser)
SECTION_PARSERS: dict[str, tuple[str, Callable]] = {
    "пищевая ценность": ("nutrition", parse_nutrition_block),
    "цена": ("price", parse_price_block),
    "состав": ("ingredients", parse_composition_block),
    "рецепт": ("recipe", parse_recipe_block),
}


def _apply_section(
    label: str, lines: list[str], blocks: ProductBlocks
) -> ProductBlocks:
    target = SECTION_PARSERS.get(label)
    if target is None:
        logger.debug("Неизвестный раздел пропущен: %r", label)
        return blocks
    field_name, parser = target
    block = parser(lines)
    if block is None:
        return blocks
    return replace(blocks, **{field_name: block})


def parse_document(content: str) -> ParsedDocument:
    """Parse a product document into its structured blocks.

    A line containing ``**label**`` opens a section and closes the previous
    one. Only the non-empty trimmed lines inside a section are kept.
    Unknown labels still close the previous section but yield no block.
    """
    blocks = ProductBlocks()
    current: str | None = None
    section: list[str] = []

    for raw_line in content.split("\n"):
        line = raw_line.strip()
        header = _HEADER_PATTERN.search(line)

        if header:
            if current:
                blocks = _apply_section(current, section, blocks)
            current = header.group(1).lower()
            section = []
        elif line and current:
            section.append(line)

    if current:
        blocks = _apply_section(current, section, blocks)

    return ParsedDocument(content=content, blocks=blocks)
