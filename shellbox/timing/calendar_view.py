"""
Month calendar layout for the ``cal`` command.
"""
import calendar
import datetime
from typing import List, Optional

from rich.table import Table


def month_grid(year: int, month: int, first_weekday: int = 0) -> List[List[int]]:
    """
    Return the weeks of a month as lists of seven day numbers.

    Days belonging to the neighbouring months are 0.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return calendar.Calendar(firstweekday=first_weekday).monthdayscalendar(year, month)


def render_month(year: int, month: int, today: Optional[datetime.date] = None, first_weekday: int = 0) -> Table:
    """Build a rich table for one month, highlighting ``today`` when it falls inside it."""
    grid = month_grid(year, month, first_weekday)
    today = today or datetime.date.today()

    table = Table(title=f"{calendar.month_name[month]} {year}", header_style="bold magenta")
    for offset in range(7):
        day_index = (first_weekday + offset) % 7
        table.add_column(calendar.day_abbr[day_index][:2], justify="right")

    for week in grid:
        cells = []
        for day in week:
            if day == 0:
                cells.append("")
            elif (year, month, day) == (today.year, today.month, today.day):
                cells.append(f"[reverse bold]{day}[/reverse bold]")
            else:
                cells.append(str(day))
        table.add_row(*cells)
    return table
