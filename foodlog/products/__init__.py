"""Markdown product documents: block parsers, document parser and catalog."""

from .blocks import (
    parse_composition_block,
    parse_nutrition_block,
    parse_price_block,
    parse_recipe_block,
)
from .catalog import find_product, load_catalog, load_product
from .document import parse_document
from .models import (
    Ingredient,
    IngredientsBlock,
    NutritionBlock,
    NutritionValues,
    ParsedDocument,
    PriceBlock,
    PriceEntry,
    ProductBlocks,
    ProductRecord,
    RecipeBlock,
)

__all__ = [
    "parse_document",
    "parse_nutrition_block",
    "parse_price_block",
    "parse_composition_block",
    "parse_recipe_block",
    "load_catalog",
    "load_product",
    "find_product",
    "ProductRecord",
    "ProductBlocks",
    "ParsedDocument",
    "NutritionBlock",
    "NutritionValues",
    "PriceBlock",
    "PriceEntry",
    "IngredientsBlock",
    "Ingredient",
    "RecipeBlock",
]
