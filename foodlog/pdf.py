"""PDF rendering of day reports using ReportLab."""

from __future__ import annotations

from pathlib import Path

from .nutrition.aggregator import DayNutrition
from .numbers import format_number

# Font search paths by platform
_FONT_SEARCH_PATHS = [
    # DejaVu (Debian/Ubuntu)
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    # DejaVu (Fedora/RHEL, Arch)
    "/usr/share/fonts/dejavu-sans-fonts/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    # Liberation / Noto
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
    # macOS
    "/Library/Fonts/Arial Unicode.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
]


def _find_cyrillic_font(font_path: str = "") -> str:
    """Find a Cyrillic-capable TrueType font on the system."""
    candidates = [font_path] if font_path else []
    for path in candidates + _FONT_SEARCH_PATHS:
        if Path(path).exists():
            return path
    raise FileNotFoundError(
        "Не найден шрифт с кириллицей. Установите один из них:\n"
        "  Ubuntu/Debian: sudo apt install fonts-dejavu-core\n"
        "  Fedora/RHEL:   sudo dnf install dejavu-sans-fonts\n"
        "или укажите [report] font_path в файле настроек"
    )


def _register_font(font_path: str = "") -> str:
    """Register the font with ReportLab and return the font name."""
    from reportlab.pdfbase import pdfmetrics
    from reportlab.pdfbase.ttfonts import TTFont

    font_name = "ReportFont"
    pdfmetrics.registerFont(TTFont(font_name, _find_cyrillic_font(font_path)))
    return font_name


def generate_pdf(
    day: DayNutrition,
    output_path: str | Path,
    *,
    title: str = "Дневник питания",
    font_path: str = "",
) -> Path:
    """Generate a PDF table of per-product and day totals.

    Raises:
        ImportError: If reportlab is not installed.
        FileNotFoundError: If no Cyrillic font is found.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError(
            "Нужен reportlab: pip install 'foodlog[pdf]'"
        )

    font_name = _register_font(font_path)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "Title_RU",
        parent=styles["Title"],
        fontName=font_name,
        fontSize=18,
        leading=24,
    )
    body_style = ParagraphStyle(
        "Body_RU",
        parent=styles["Normal"],
        fontName=font_name,
        fontSize=9,
        leading=13,
    )

    elements: list = []
    elements.append(Paragraph(title, title_style))
    elements.append(Spacer(1, 6 * mm))

    if not day.products:
        elements.append(
            Paragraph("Нет продуктов с известной пищевой ценностью.", body_style)
        )
        doc.build(elements)
        return output_path

    table_data = [["Продукт", "Жиры", "Белки", "Углеводы", "Ккал"]]
    for name, totals in day.products.items():
        table_data.append([name] + _totals_row(totals))
    table_data.append(["Итого"] + _totals_row(day.total))

    table_style = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4A90D9")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("BACKGROUND", (0, -1), (-1, -1), colors.HexColor("#E67E22")),
        ("TEXTCOLOR", (0, -1), (-1, -1), colors.white),
        ("FONTNAME", (0, 0), (-1, -1), font_name),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -2), [colors.white, colors.HexColor("#F5F5F5")]),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
    ])
    col_widths = [70 * mm, 25 * mm, 25 * mm, 25 * mm, 25 * mm]
    t = Table(table_data, colWidths=col_widths)
    t.setStyle(table_style)
    elements.append(t)

    doc.build(elements)
    return output_path


def _totals_row(totals) -> list[str]:
    return [
        format_number(totals.fats),
        format_number(totals.proteins),
        format_number(totals.carbohydrates),
        format_number(totals.calories),
    ]
