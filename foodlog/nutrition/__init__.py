"""Nutrition aggregation for daily food logs."""

from .aggregator import (
    DayNutrition,
    NutritionAggregator,
    NutritionTotals,
    entry_nutrition,
    scale_value,
)
from .report import render_day, summary_line

__all__ = [
    "NutritionAggregator",
    "NutritionTotals",
    "DayNutrition",
    "entry_nutrition",
    "scale_value",
    "render_day",
    "summary_line",
]
