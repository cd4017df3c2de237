"""Tests for text rendering."""

from foodlog.nutrition.aggregator import DayNutrition, NutritionTotals
from foodlog.nutrition.report import (
    render_catalog_line,
    render_day,
    render_product,
    summary_line,
)
from foodlog.numbers import format_number, round_half_up, to_number
from foodlog.products.document import parse_document
from foodlog.products.models import ProductRecord

DOCUMENT = """\
**Пищевая ценность**
5/10/30/203
100
450

**Цена**
- [[2023-01-01]] 100
- [[2023-02-01]] 120

**Состав**
- Мука - 200г

**Рецепт**
1) Смешать
2) Выпекать
"""


def _record(name, content):
    parsed = parse_document(content)
    return ProductRecord(name=name, content=parsed.content, blocks=parsed.blocks)


def test_summary_line():
    total = NutritionTotals(13, 20, 30, 400)
    assert summary_line(total) == "Ж/Б/У/Ккал: 13/20/30/400"
    assert summary_line(total, prefix="F/P/C/Cal") == "F/P/C/Cal: 13/20/30/400"


def test_render_day():
    day = DayNutrition(products={
        "Молоко": NutritionTotals(13, 8, 12, 150),
        "Хлеб": NutritionTotals(1, 8, 50, 250),
    })
    lines = render_day(day).splitlines()
    assert lines[0] == "Ж/Б/У/Ккал:"
    assert lines[1] == "  Молоко  13/8/12/150"
    assert lines[2] == "  Хлеб    1/8/50/250"
    assert lines[-1] == "Итого за день: 14/16/62/400"
    assert day.display() == render_day(day)


def test_render_empty_day():
    assert "Нет продуктов" in render_day(DayNutrition())


def test_render_catalog_line():
    line = render_catalog_line(_record("Блины", DOCUMENT))
    assert line == "Блины  5/10/30/203  порция 100  цена 120 (2023-02-01)"


def test_render_catalog_line_without_blocks():
    assert render_catalog_line(_record("Пусто", "")) == "Пусто"


def test_render_product_round_trip():
    product = _record("Блины", DOCUMENT)
    rendered = render_product(product)
    assert rendered.splitlines()[0] == "# Блины"
    assert parse_document(rendered).blocks == product.blocks


def test_numbers_helpers():
    assert to_number(" 12 ") == 12
    assert to_number("") == 0
    assert format_number(to_number("abc")) == "NaN"
    assert format_number(2.5) == "2.5"
    assert format_number(3.0) == "3"
    assert round_half_up(-2.5) == -2
    assert round_half_up(2.5) == 3


def test_to_number_accepts_plain_notation_only():
    assert to_number("1e1") == 10
    assert to_number(".5") == 0.5
    assert to_number("-3") == -3
    assert to_number("Infinity") == float("inf")
    for text in ("1_000", "infinity", "inf", "nan", "٥", "0x10"):
        assert format_number(to_number(text)) == "NaN", text


def test_display_renders_day():
    day = DayNutrition(products={"Суп": NutritionTotals(10, 8, 20, 160)})
    assert day.display() == render_day(day)
