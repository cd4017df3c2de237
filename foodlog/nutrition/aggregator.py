"""Joins a parsed food log against the product catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..diary.parser import FoodEntry
from ..numbers import format_number, json_value, round_half_up
from ..products.models import NutritionBlock, ProductRecord
from .report import render_day

logger = logging.getLogger(__name__)

_FIELDS = ("fats", "proteins", "carbohydrates", "calories")


@dataclass(frozen=True)
class NutritionTotals:
    """Rounded macros. A NaN field means some input was not numeric."""

    fats: int | float = 0
    proteins: int | float = 0
    carbohydrates: int | float = 0
    calories: int | float = 0

    def __add__(self, other: NutritionTotals) -> NutritionTotals:
        if not isinstance(other, NutritionTotals):
            return NotImplemented
        return NutritionTotals(
            fats=self.fats + other.fats,
            proteins=self.proteins + other.proteins,
            carbohydrates=self.carbohydrates + other.carbohydrates,
            calories=self.calories + other.calories,
        )

    def as_fpcc(self) -> str:
        """Render as ``fats/proteins/carbohydrates/calories``."""
        return "/".join(format_number(getattr(self, f)) for f in _FIELDS)

    def to_dict(self) -> dict:
        """Field dict for JSON; NaN fields become None."""
        return {f: json_value(getattr(self, f)) for f in _FIELDS}


@dataclass
class DayNutrition:
    """Per-product totals for one log, in first-eaten order, plus the day sum."""

    products: dict[str, NutritionTotals] = field(default_factory=dict)

    @property
    def total(self) -> NutritionTotals:
        return sum(self.products.values(), NutritionTotals())

    def summary_dict(self) -> dict:
        """Return a summary dict for JSON serialization."""
        return {
            "products": {
                name: totals.to_dict() for name, totals in self.products.items()
            },
            "total": self.total.to_dict(),
        }

    def display(self) -> str:
        return render_day(self)


def scale_value(value: float, quantity: float, portion: float = 1) -> int | float:
    """Scale a per-100-units value to the eaten amount, rounded."""
    return round_half_up(value / 100 * quantity * portion)


def entry_nutrition(entry: FoodEntry, nutrition: NutritionBlock) -> NutritionTotals:
    """Nutrition of a single log entry.

    An entry with a unit is an absolute amount; without one the quantity
    counts portions of ``portion_size`` units (1 when not set).
    """
    portion = 1 if entry.unit else (nutrition.portion_size or 1)
    values = nutrition.values
    return NutritionTotals(
        fats=scale_value(values.fats, entry.quantity, portion),
        proteins=scale_value(values.proteins, entry.quantity, portion),
        carbohydrates=scale_value(values.carbohydrates, entry.quantity, portion),
        calories=scale_value(values.calories, entry.quantity, portion),
    )


class NutritionAggregator:
    """Computes per-product and day totals for food log entries."""

    def __init__(self, products: Iterable[ProductRecord]) -> None:
        self._index: dict[str, ProductRecord] = {}
        for product in products:
            # First product wins for duplicate names
            self._index.setdefault(product.name, product)

    def lookup(self, name: str) -> ProductRecord | None:
        return self._index.get(name)

    def aggregate(self, entries: Iterable[FoodEntry]) -> DayNutrition:
        day = DayNutrition()
        for entry in entries:
            product = self.lookup(entry.name)
            if product is None or product.blocks.nutrition is None:
                logger.debug("Нет данных о пищевой ценности: %s", entry.name)
                continue

            totals = entry_nutrition(entry, product.blocks.nutrition)
            previous = day.products.get(entry.name)
            day.products[entry.name] = (
                totals if previous is None else previous + totals
            )
        return day
