"""Parser for the spreadsheet CSV export (timestamp, date, lunch, dinner)."""

import csv
import io
import logging
import re

from meal_tracker.exceptions import StoreReadError
from meal_tracker.models import MealRecord

logger = logging.getLogger(__name__)

# Positions used when the header does not name the columns
POSITIONAL_COLUMNS = {"date": 1, "lunch": 2, "dinner": 3}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_count(cell: str) -> int | None:
    """Leading integer of a cell ("2", " 1 ", "2.0"). None when there is none."""
    match = _LEADING_INT.match(cell)
    if not match:
        return None
    return int(match.group(1))


def _clean(cell: str) -> str:
    return cell.replace('"', "").strip()


def column_positions(header: list[str]) -> dict[str, int]:
    """Map record fields to column indexes, by header name when possible."""
    names = [_clean(h).lower() for h in header]
    if all(field in names for field in POSITIONAL_COLUMNS):
        return {field: names.index(field) for field in POSITIONAL_COLUMNS}
    logger.warning("Export header %s lacks date/lunch/dinner names, using positions", header)
    return dict(POSITIONAL_COLUMNS)


def parse_export(text: str) -> list[MealRecord]:
    """
    Parse CSV export text into records, in export order.
    First line is the header. Rows without a date are dropped and
    counts with no leading integer default to 0.
    """
    try:
        rows = list(csv.reader(io.StringIO(text)))
    except csv.Error as e:
        raise StoreReadError(f"Malformed export: {e}") from e
    if not rows:
        return []

    positions = column_positions(rows[0])
    records: list[MealRecord] = []
    for line_no, row in enumerate(rows[1:], start=2):
        cells = [_clean(c) for c in row]

        def cell(field: str) -> str:
            idx = positions[field]
            return cells[idx] if idx < len(cells) else ""

        date = cell("date")
        if not date:
            continue
        counts: dict[str, int] = {}
        for field in ("lunch", "dinner"):
            value = parse_count(cell(field))
            if value is None:
                logger.warning(
                    "Export line %d: %s %r is not a number, using 0",
                    line_no,
                    field,
                    cell(field),
                )
                value = 0
            counts[field] = value
        records.append(MealRecord(date=date, **counts))
    return records
