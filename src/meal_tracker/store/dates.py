"""Date text handling shared by the stores. Users, the form and the sheet spell days differently."""

from datetime import datetime

DATE_INPUT_FORMATS = ("%m/%d/%Y", "%Y-%m-%d", "%Y/%m/%d", "%m-%d-%Y")


def parse_day(text: str) -> str | None:
    """YYYY-MM-DD for a recognized date shape, None otherwise."""
    value = text.strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(value, fmt).strftime("%Y-%m-%d")
        except ValueError:
            continue
    return None


def day_key(text: str) -> str:
    """Comparison key: "3/4/2024" and "2024-03-04" give the same key."""
    return parse_day(text) or text.strip()
