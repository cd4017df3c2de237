"""Daily food log parsing."""

from .parser import (
    SUMMARY_MARKER,
    FoodEntry,
    FoodLogParser,
    ParserState,
    parse_food_line,
    split_quantity,
)

__all__ = [
    "FoodLogParser",
    "FoodEntry",
    "ParserState",
    "SUMMARY_MARKER",
    "parse_food_line",
    "split_quantity",
]
