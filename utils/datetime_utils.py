from datetime import date, datetime, timedelta
from typing import List, Optional, Union
import pytz

DATE_FORMAT = "%Y-%m-%d"
UTC_TZ = pytz.utc

def get_timezone(name: Optional[str] = None):
    return pytz.timezone(name) if name else UTC_TZ

def now_local(tz_name: Optional[str] = None) -> datetime:
    return datetime.now(get_timezone(tz_name))

def now_iso() -> str:
    return datetime.now(UTC_TZ).isoformat()

def format_date(dt: Union[date, datetime], fmt: str = DATE_FORMAT) -> str:
    return dt.strftime(fmt)

def today_str(tz_name: Optional[str] = None) -> str:
    return now_local(tz_name).strftime(DATE_FORMAT)

def add_days(dt: datetime, days: int) -> datetime:
    return dt + timedelta(days=days)

def parse_date(date_str: str, fmt: str = DATE_FORMAT) -> datetime:
    return datetime.strptime(date_str, fmt)

def is_valid_date_str(date_str: str) -> bool:
    """True for fixed-width YYYY-MM-DD calendar dates"""
    if not isinstance(date_str, str) or len(date_str) != 10:
        return False
    try:
        parse_date(date_str)
    except ValueError:
        return False
    return True

def shift_date_str(date_str: str, days: int) -> str:
    """Move a YYYY-MM-DD string by a number of calendar days"""
    return format_date(add_days(parse_date(date_str), days))

def previous_day(date_str: str) -> str:
    return shift_date_str(date_str, -1)

def week_dates(today: str) -> List[str]:
    """The seven dates ending with today, oldest first"""
    return [shift_date_str(today, -offset) for offset in range(6, -1, -1)]

def day_name(date_str: str) -> str:
    return parse_date(date_str).strftime("%a")

def formatted_date(date_str: str) -> str:
    """Long form for display, e.g. 'Monday, January 15, 2024'"""
    dt = parse_date(date_str)
    return f"{dt.strftime('%A, %B')} {dt.day}, {dt.year}"
