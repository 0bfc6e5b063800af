from core.stats import completion_rate, day_stats, week_stats
from utils.datetime_utils import week_dates


def test_one_of_three_rounds_to_33():
    stats = day_stats("2025-06-20", 1, 3)
    assert stats.completion_rate == 33
    assert stats.to_dict() == {"date": "2025-06-20", "completed": 1, "total": 3, "completionRate": 33}


def test_rounding_is_half_up():
    assert completion_rate(2, 3) == 67
    assert completion_rate(1, 8) == 13
    assert completion_rate(1, 200) == 1


def test_no_habits_means_zero_rate():
    assert day_stats("2025-06-20", 0, 0).completion_rate == 0


def test_week_stats_covers_seven_days_oldest_first():
    dates = week_dates("2025-06-20")
    assert dates[0] == "2025-06-14"
    assert dates[-1] == "2025-06-20"

    counts = {"2025-06-20": 2, "2025-06-18": 1}
    week = week_stats(dates, lambda d: counts.get(d, 0), 2)

    assert week.start_date == "2025-06-14"
    assert week.end_date == "2025-06-20"
    assert len(week.days) == 7
    assert week.days[-1].completion_rate == 100
    assert week.days[-3].completion_rate == 50
    assert week.days[0].completed == 0
