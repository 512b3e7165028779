import datetime

import pytest
from rich.console import Console

from shellbox.timing.calendar_view import month_grid, render_month


def test_leap_february_has_29_days():
    grid = month_grid(2024, 2)
    days = [d for week in grid for d in week if d]
    assert days == list(range(1, 30))
    assert all(len(week) == 7 for week in grid)


def test_first_weekday_shifts_padding():
    # 1 September 2024 was a Sunday.
    monday_first = month_grid(2024, 9, first_weekday=0)
    sunday_first = month_grid(2024, 9, first_weekday=6)
    assert monday_first[0] == [0, 0, 0, 0, 0, 0, 1]
    assert sunday_first[0][0] == 1


@pytest.mark.parametrize("month", [0, 13])
def test_invalid_month_raises(month):
    with pytest.raises(ValueError):
        month_grid(2024, month)


def test_render_month_highlights_today():
    table = render_month(2024, 2, today=datetime.date(2024, 2, 14))
    assert table.title == "February 2024"
    cells = [cell for column in table.columns for cell in column.cells]
    assert "[reverse bold]14[/reverse bold]" in cells
    assert "14" not in cells

    console = Console(record=True, width=80)
    console.print(table)
    assert "29" in console.export_text()


def test_render_month_without_today_in_month():
    table = render_month(2024, 3, today=datetime.date(2024, 2, 14))
    cells = [cell for column in table.columns for cell in column.cells]
    assert not any("reverse" in cell for cell in cells)
    assert [c.header for c in table.columns][0] == "Mo"
