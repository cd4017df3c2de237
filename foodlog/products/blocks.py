"""Parsers for the labelled sections of a product document.

Each parser takes the non-empty, trimmed lines of one section and returns a
block. Lines that do not fit the section grammar are dropped, never raised.
"""

from __future__ import annotations

import re

from ..numbers import to_number
from .models import (
    Ingredient,
    IngredientsBlock,
    NutritionBlock,
    NutritionValues,
    PriceBlock,
    PriceEntry,
    RecipeBlock,
)

# - [[2023-01-01]] 100
_PRICE_PATTERN = re.compile(r"- \[\[(.*?)\]\] (\d+)", re.ASCII)

# - Мука - 200г
_COMPOSITION_PATTERN = re.compile(r"- (.*?) - (.*)")

# 1) Смешать ингредиенты
_STEP_NUMBER_PATTERN = re.compile(r"^\d+\)\s*", re.ASCII)


def _optional_number(lines: list[str], index: int) -> float | None:
    """Numeric value of ``lines[index]``; missing, zero or NaN give None."""
    if index >= len(lines):
        return None
    value = to_number(lines[index])
    # NaN != NaN, so this also rejects non-numeric text
    if value != value or value == 0:
        return None
    return value


def parse_nutrition_values(text: str) -> NutritionValues:
    """Parse ``F/P/C/Cal``. Missing or non-numeric parts become NaN."""
    parts = text.split("/")
    parts += [None] * (4 - len(parts))
    fats, proteins, carbohydrates, calories = parts[:4]
    return NutritionValues(
        fats=to_number(fats),
        proteins=to_number(proteins),
        carbohydrates=to_number(carbohydrates),
        calories=to_number(calories),
    )


def parse_nutrition_block(lines: list[str]) -> NutritionBlock | None:
    """Parse the ``пищевая ценность`` section.

    Line 0 holds fats/proteins/carbohydrates/calories per 100 units,
    line 1 the portion size and line 2 the total weight.
    Returns None when the section has no lines at all.
    """
    if not lines:
        return None
    return NutritionBlock(
        values=parse_nutrition_values(lines[0]),
        portion_size=_optional_number(lines, 1),
        total_weight=_optional_number(lines, 2),
    )


def parse_price_block(lines: list[str]) -> PriceBlock:
    prices: list[PriceEntry] = []
    for line in lines:
        if not line.startswith("-"):
            continue
        m = _PRICE_PATTERN.search(line)
        if m:
            prices.append(PriceEntry(date=m.group(1), price=int(m.group(2))))
    return PriceBlock(prices=tuple(prices))


def parse_composition_block(lines: list[str]) -> IngredientsBlock:
    items: list[Ingredient] = []
    for line in lines:
        if not line.startswith("-"):
            continue
        m = _COMPOSITION_PATTERN.search(line)
        if m:
            items.append(Ingredient(name=m.group(1), amount=m.group(2)))
    return IngredientsBlock(items=tuple(items))


def parse_recipe_block(lines: list[str]) -> RecipeBlock:
    return RecipeBlock(
        steps=tuple(_STEP_NUMBER_PATTERN.sub("", line).strip() for line in lines)
    )
