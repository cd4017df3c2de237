"""Plain-text rendering of catalogs and day reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..numbers import format_number

if TYPE_CHECKING:
    from ..products.models import ProductRecord
    from .aggregator import DayNutrition, NutritionTotals

DEFAULT_SUMMARY_PREFIX = "Ж/Б/У/Ккал"

_BLOCK_TITLES = {
    "nutrition": "Пищевая ценность",
    "price": "Цена",
    "ingredients": "Состав",
    "recipe": "Рецепт",
}


def summary_line(
    total: NutritionTotals, prefix: str = DEFAULT_SUMMARY_PREFIX
) -> str:
    """Day total as a single log line, e.g. ``Ж/Б/У/Ккал: 13/20/30/400``."""
    return f"{prefix}: {total.as_fpcc()}"


def render_day(day: DayNutrition, prefix: str = DEFAULT_SUMMARY_PREFIX) -> str:
    """One line per product, then the day total."""
    if not day.products:
        return "Нет продуктов с известной пищевой ценностью."
    width = max(len(name) for name in day.products)
    lines = [f"{prefix}:"]
    for name, totals in day.products.items():
        lines.append(f"  {name:<{width}}  {totals.as_fpcc()}")
    lines.append("")
    lines.append(f"Итого за день: {day.total.as_fpcc()}")
    return "\n".join(lines)


def render_catalog_line(product: ProductRecord) -> str:
    parts = [product.name]
    nutrition = product.blocks.nutrition
    if nutrition is not None:
        parts.append(nutrition.values.as_fpcc())
        if nutrition.portion_size is not None:
            parts.append(f"порция {format_number(nutrition.portion_size)}")
    price = product.blocks.price
    if price is not None and price.latest is not None:
        parts.append(f"цена {price.latest.price} ({price.latest.date})")
    return "  ".join(parts)


def render_product(product: ProductRecord) -> str:
    """Product blocks in their document line form."""
    lines = [f"# {product.name}"]
    for name in product.blocks.present():
        block = getattr(product.blocks, name)
        lines.append("")
        lines.append(f"**{_BLOCK_TITLES[name]}**")
        lines.extend(block.to_lines())
    return "\n".join(lines)
