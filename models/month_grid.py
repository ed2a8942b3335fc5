"""Month grid of days for the month view and the mini calendar."""

from datetime import date, timedelta
from typing import Optional

from pydantic import BaseModel, Field

from models.availability import DayStatus, classify_day


class GridDay(BaseModel):
    """One cell of a month grid.

    Args:
        day: The calendar date.
        in_month: Whether the date belongs to the displayed month.
        status: Past/today/future classification.
        is_selected: Whether this is the currently selected date.
    """

    day: date = Field(description="The calendar date")
    in_month: bool = Field(description="Whether the date is in the displayed month")
    status: DayStatus = Field(description="Past/today/future classification")
    is_selected: bool = Field(default=False, description="Whether the date is selected")


def month_start(day: date) -> date:
    """Return the first day of the month containing day."""
    return day.replace(day=1)


def shift_month(day: date, months: int) -> date:
    """Return the first day of the month `months` away from day's month.

    Args:
        day: Any date in the reference month.
        months: Number of months to move (negative moves backwards).

    Returns:
        First day of the target month.
    """
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_grid(
    month: date,
    today: Optional[date] = None,
    selected: Optional[date] = None,
) -> list[GridDay]:
    """Build the Sunday-first grid of whole weeks covering a month.

    The grid starts on the Sunday on or before the 1st and ends on the
    Saturday on or after the last day, so its length is always a multiple of
    seven.

    Args:
        month: Any date in the month to display.
        today: The current day (system date when None).
        selected: The selected date to flag, if any.

    Returns:
        Grid cells in display order.
    """
    today = today or date.today()
    first = month_start(month)
    last = shift_month(first, 1) - timedelta(days=1)

    # date.weekday(): Monday=0 ... Sunday=6
    grid_start = first - timedelta(days=(first.weekday() + 1) % 7)
    grid_end = last + timedelta(days=(5 - last.weekday()) % 7)

    cells = []
    current = grid_start
    while current <= grid_end:
        cells.append(
            GridDay(
                day=current,
                in_month=current.month == first.month,
                status=classify_day(current, today),
                is_selected=selected is not None and current == selected,
            )
        )
        current += timedelta(days=1)
    return cells
