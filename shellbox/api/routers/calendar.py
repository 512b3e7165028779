import calendar as std_calendar
from typing import List

from fastapi import APIRouter, HTTPException, Path, Query
from pydantic import BaseModel

from shellbox.timing.calendar_view import month_grid

router = APIRouter(
    prefix="/calendar",
    tags=["Calendar"],
)


class MonthResponse(BaseModel):
    year: int
    month: int
    month_name: str
    first_weekday: int
    weeks: List[List[int]]


@router.get("/{year}/{month}", response_model=MonthResponse, summary="Lay out one month")
async def get_month(year: int = Path(..., ge=1, le=9999), month: int = Path(...),
                    first_weekday: int = Query(0, ge=0, le=6)):
    """
    Returns the weeks of the month, padding days outside it with 0.
    """
    try:
        weeks = month_grid(year, month, first_weekday)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return MonthResponse(year=year, month=month, month_name=std_calendar.month_name[month],
                         first_weekday=first_weekday, weeks=weeks)
