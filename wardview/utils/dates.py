"""
Date Utilities
Consistent parsing and display formatting for dates, times and timestamps

Formatters never raise: input that cannot be parsed is returned unchanged
(display helpers) or as an empty string (client/input helpers).
"""
from datetime import date, datetime, timedelta
from typing import Any, Optional

_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%Y/%m/%d", "%B %d, %Y", "%b %d, %Y")
_DATETIME_FORMATS = ("%Y-%m-%d %H:%M", "%Y-%m-%d %H:%M:%S", "%m/%d/%Y %H:%M")


def parse_date(value: Any) -> Optional[datetime]:
    """Parse the date and datetime shapes found in hospital records"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    for fmt in _DATETIME_FORMATS + _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def format_date_for_display(date_string: Optional[str]) -> str:
    """Long human-readable date, e.g. 'June 10, 2024'"""
    if not date_string:
        return ""

    parsed = parse_date(date_string)
    if parsed is None:
        return date_string

    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_time_for_display(time_string: Optional[str]) -> str:
    """Normalize 24-hour 'HH:MM' to 'H:MM AM/PM'"""
    if not time_string:
        return ""
    if "AM" in time_string or "PM" in time_string:
        return time_string

    hours, _, minutes = time_string.partition(":")
    if not hours or not minutes:
        return time_string
    try:
        hour = int(hours)
    except ValueError:
        return time_string
    if not 0 <= hour <= 23:
        return time_string

    period = "AM" if hour < 12 else "PM"
    display_hour = hour % 12 or 12
    return f"{display_hour}:{minutes} {period}"


def format_relative_timestamp(timestamp: Optional[str], now: Optional[datetime] = None) -> str:
    """'Today at HH:MM', 'Yesterday at HH:MM' or an absolute date and time"""
    if not timestamp:
        return ""

    parsed = parse_date(timestamp)
    if parsed is None:
        return timestamp

    now = now or datetime.now(parsed.tzinfo)
    clock = f"{parsed:%H:%M}"
    if parsed.date() == now.date():
        return f"Today at {clock}"
    if parsed.date() == now.date() - timedelta(days=1):
        return f"Yesterday at {clock}"
    return f"{parsed:%m/%d/%Y} {clock}"


def format_date_for_client(date_string: Optional[str]) -> str:
    """YYYY-MM-DD for client-side parsing; 'TBD' is kept as is"""
    if not date_string:
        return ""
    if date_string == "TBD":
        return date_string

    parsed = parse_date(date_string)
    if parsed is None:
        return ""
    return parsed.strftime("%Y-%m-%d")


def format_date_for_input(date_string: Optional[str]) -> str:
    if not date_string:
        return ""
    parsed = parse_date(date_string)
    return parsed.strftime("%Y-%m-%d") if parsed else ""


def get_today_formatted() -> str:
    return date.today().isoformat()


def is_same_day(first: Any, second: Any) -> bool:
    a, b = parse_date(first), parse_date(second)
    if a is None or b is None:
        return False
    return a.date() == b.date()


def is_future_date(date_string: Any, today: Optional[date] = None) -> bool:
    parsed = parse_date(date_string)
    if parsed is None:
        return False
    return parsed.date() > (today or date.today())


def ensure_number(value: Any, default: float = 0) -> float:
    """Coerce a value to a number, falling back to the default"""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if number != number or number in (float("inf"), float("-inf")):
        return default
    if isinstance(value, float):
        return number
    return int(number) if number.is_integer() else number
