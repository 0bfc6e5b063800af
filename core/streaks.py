# core/streaks.py

from typing import Iterable

from utils.datetime_utils import previous_day, parse_date

def calculate_streak(completed_dates: Iterable[str], today: str) -> int:
    """
    Consecutive completed days ending today

    YYYY-MM-DD strings sort chronologically, so a descending string sort
    gives newest first. A day without a completion today means no streak.
    """
    sorted_dates = sorted(set(completed_dates), reverse=True)

    streak = 0
    current_date = today
    for completed_date in sorted_dates:
        if completed_date == current_date:
            streak += 1
            current_date = previous_day(current_date)
        else:
            break

    return streak

def longest_streak(completed_dates: Iterable[str]) -> int:
    """Longest run of consecutive completed days anywhere in the history"""
    ordinals = sorted({parse_date(d).toordinal() for d in completed_dates})
    if not ordinals:
        return 0

    max_streak = 1
    current = 1
    for i in range(1, len(ordinals)):
        if ordinals[i] == ordinals[i - 1] + 1:
            current += 1
            max_streak = max(max_streak, current)
        else:
            current = 1

    return max_streak
