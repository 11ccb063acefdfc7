from datetime import date
from typing import Optional

from domain.entities import Priority

NO_DUE_DATE = "No due date"


def ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_due_date(value: Optional[date]) -> str:
    """Long date with an ordinal day, e.g. "October 19th, 2026"."""
    if value is None:
        return NO_DUE_DATE
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year}"


def format_priority(value: Optional[Priority]) -> str:
    return f"Priority: {value.value if value else 'None'}"
