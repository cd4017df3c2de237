"""Data models for parsed product documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..numbers import format_number


@dataclass(frozen=True)
class NutritionValues:
    """Macros per 100 units of product."""

    fats: float
    proteins: float
    carbohydrates: float
    calories: float

    def as_fpcc(self) -> str:
        """Render as ``fats/proteins/carbohydrates/calories``."""
        return "/".join(
            format_number(v)
            for v in (self.fats, self.proteins, self.carbohydrates, self.calories)
        )


@dataclass(frozen=True)
class NutritionBlock:
    values: NutritionValues
    portion_size: float | None = None
    total_weight: float | None = None

    def to_lines(self) -> list[str]:
        lines = [self.values.as_fpcc()]
        if self.portion_size is not None or self.total_weight is not None:
            lines.append(format_number(self.portion_size or 0))
        if self.total_weight is not None:
            lines.append(format_number(self.total_weight))
        return lines


@dataclass(frozen=True)
class PriceEntry:
    date: str  # free-form token, e.g. "2023-01-01"
    price: int


@dataclass(frozen=True)
class PriceBlock:
    prices: tuple[PriceEntry, ...] = ()

    @property
    def latest(self) -> PriceEntry | None:
        return self.prices[-1] if self.prices else None

    def to_lines(self) -> list[str]:
        return [f"- [[{p.date}]] {p.price}" for p in self.prices]


@dataclass(frozen=True)
class Ingredient:
    name: str
    amount: str  # unit stays embedded, e.g. "200г"


@dataclass(frozen=True)
class IngredientsBlock:
    items: tuple[Ingredient, ...] = ()

    def to_lines(self) -> list[str]:
        return [f"- {i.name} - {i.amount}" for i in self.items]


@dataclass(frozen=True)
class RecipeBlock:
    steps: tuple[str, ...] = ()

    def to_lines(self) -> list[str]:
        return [f"{n}) {step}" for n, step in enumerate(self.steps, 1)]


@dataclass(frozen=True)
class ProductBlocks:
    nutrition: NutritionBlock | None = None
    price: PriceBlock | None = None
    ingredients: IngredientsBlock | None = None
    recipe: RecipeBlock | None = None

    def present(self) -> list[str]:
        """Names of the blocks found in the document."""
        return [
            name
            for name in ("nutrition", "price", "ingredients", "recipe")
            if getattr(self, name) is not None
        ]


@dataclass(frozen=True)
class ParsedDocument:
    content: str
    blocks: ProductBlocks = field(default_factory=ProductBlocks)


@dataclass(frozen=True)
class ProductRecord:
    """A product file from the catalog, keyed by its file name."""

    name: str
    content: str
    blocks: ProductBlocks = field(default_factory=ProductBlocks)
