# core/stats.py

from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Iterable

from models.habit import DayStats, WeekData

def completion_rate(completed: int, total: int) -> int:
    """Percentage rounded half up; 0 when there is nothing to complete"""
    if total <= 0:
        return 0
    rate = Decimal(completed * 100) / Decimal(total)
    return int(rate.quantize(Decimal(1), rounding=ROUND_HALF_UP))

def day_stats(date: str, completed: int, total: int) -> DayStats:
    """
    Summary of one calendar day

    total is the number of habits that exist now, not on that date.
    """
    return DayStats(
        date=date,
        completed=completed,
        total=total,
        completion_rate=completion_rate(completed, total),
    )

def week_stats(dates: Iterable[str], completed_on: Callable[[str], int], total: int) -> WeekData:
    days = [day_stats(date, completed_on(date), total) for date in dates]
    return WeekData(
        start_date=days[0].date if days else "",
        end_date=days[-1].date if days else "",
        days=days,
    )
