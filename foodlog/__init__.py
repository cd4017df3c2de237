"""Food diary nutrition calculator over markdown product files."""

from .config import FoodlogConfig, load_config
from .diary import FoodEntry, FoodLogParser, ParserState
from .nutrition import DayNutrition, NutritionAggregator, NutritionTotals
from .products import (
    ProductBlocks,
    ProductRecord,
    load_catalog,
    parse_document,
)

__all__ = [
    "parse_document",
    "load_catalog",
    "ProductRecord",
    "ProductBlocks",
    "FoodLogParser",
    "FoodEntry",
    "ParserState",
    "NutritionAggregator",
    "NutritionTotals",
    "DayNutrition",
    "FoodlogConfig",
    "load_config",
]
