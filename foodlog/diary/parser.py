"""Daily food log parser.

A log is a markdown list of product links with optional amounts::

    - [[Молоко]] - 250г
    - [[Хлеб]] - 2
    - [[Яблоко]]

    **Итого:**
    ...

Everything after the ``**Итого:**`` marker is the summary section and is
never read as food entries.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

from ..numbers import to_number

logger = logging.getLogger(__name__)

SUMMARY_MARKER = "**итого:**"

_FOOD_ROW_PATTERN = re.compile(r"- \[\[(.+?)\]\]( - (.+))?$")
_QUANTITY_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)(\D+)?$", re.ASCII)
_LINE_ENDING_PATTERN = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class FoodEntry:
    """One eaten product.

    ``unit`` set means ``quantity`` is an absolute amount (e.g. grams);
    without it ``quantity`` counts portions.
    """

    name: str
    quantity: float = 1.0
    unit: str | None = None


class ParserState(enum.Enum):
    COLLECTING = "collecting"
    DONE = "done"


def is_summary_marker(line: str) -> bool:
    return line.strip().lower() == SUMMARY_MARKER


def _first_line_ending(text: str) -> str:
    match = _LINE_ENDING_PATTERN.search(text)
    return match.group() if match else "\n"


def split_quantity(text: str) -> tuple[float, str | None]:
    """Split ``"250г"`` into ``(250.0, "г")``.

    Text that is not a number with an optional non-digit suffix is coerced
    as a whole, giving NaN when it is not numeric.
    """
    m = _QUANTITY_PATTERN.match(text)
    if m:
        unit = m.group(2).strip() if m.group(2) else ""
        return float(m.group(1)), unit or None
    return to_number(text), None


def parse_food_line(line: str) -> FoodEntry | None:
    """Parse a single ``- [[name]] - amount`` line, None if it is not one."""
    if not line.strip().startswith("- [["):
        return None

    m = _FOOD_ROW_PATTERN.search(line)
    if not m:
        logger.debug("Строка не распознана: %r", line)
        return None

    quantity_text = (m.group(3) or "").strip() or "1"
    quantity, unit = split_quantity(quantity_text)
    return FoodEntry(name=m.group(1), quantity=quantity, unit=unit)


class FoodLogParser:
    """Parser for a day's food log.

    Usage:
        parser = FoodLogParser()
        entries = parser.parse(text)
        parser.summary_lines  # raw lines after the summary marker
    """

    def __init__(self) -> None:
        self._entries: list[FoodEntry] = []
        self._summary: list[str] = []
        self._state = ParserState.COLLECTING

    @property
    def state(self) -> ParserState:
        return self._state

    @property
    def entries(self) -> list[FoodEntry]:
        return list(self._entries)

    @property
    def summary_lines(self) -> list[str]:
        return list(self._summary)

    def parse(self, text: str) -> list[FoodEntry]:
        """Parse log text into entries in file order."""
        self._entries = []
        self._summary = []
        self._state = ParserState.COLLECTING

        for line in text.splitlines():
            match self._state:
                case ParserState.COLLECTING:
                    if is_summary_marker(line):
                        self._state = ParserState.DONE
                        continue
                    entry = parse_food_line(line)
                    if entry is not None:
                        self._entries.append(entry)
                case ParserState.DONE:
                    self._summary.append(line)

        return self.entries

    @staticmethod
    def has_summary(text: str) -> bool:
        return any(is_summary_marker(line) for line in text.splitlines())

    @staticmethod
    def add_to_summary(text: str, new_line: str) -> str:
        """Insert ``new_line`` right after the summary marker.

        The inserted line takes the marker's line ending, so CRLF logs
        stay CRLF. Returns the text unchanged when it has no summary marker.
        """
        lines = text.splitlines(keepends=True)
        for i, line in enumerate(lines):
            body = line.splitlines()[0]
            if not is_summary_marker(body):
                continue
            ending = line[len(body):]
            if ending:
                lines.insert(i + 1, new_line + ending)
            else:
                # Marker is the last line and has no ending of its own
                ending = _first_line_ending(text)
                lines[i] = line + ending
                lines.insert(i + 1, new_line)
            break
        return "".join(lines)
