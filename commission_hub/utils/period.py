import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Tuple

from commission_hub.schemas.report import ReportPeriod
from commission_hub.utils.exceptions import ValidationFailed


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last day of the month"""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def resolve_period(year: Optional[int] = None, month: Optional[int] = None,
                   today: Optional[date] = None) -> ReportPeriod:
    """
    Build the report period, a missing year or month falls back to the current one

    Raises:
        ValidationFailed: month outside 1..12 or year outside 1..9999
    """
    today = today or date.today()
    year = today.year if year is None else year
    month = today.month if month is None else month

    errors = []
    if not 1 <= year <= 9999:
        errors.append("Year must be between 1 and 9999")
    if not 1 <= month <= 12:
        errors.append("Month must be between 1 and 12")
    if errors:
        raise ValidationFailed(errors)

    start_date, end_date = month_bounds(year, month)
    return ReportPeriod(
        year=year,
        month=month,
        month_name=calendar.month_name[month],
        start_date=start_date,
        end_date=end_date,
    )


def period_range(period: ReportPeriod) -> Tuple[datetime, datetime]:
    """Half-open timestamp range [first day 00:00, first day of next month 00:00)"""
    start = datetime.combine(period.start_date, datetime.min.time())
    if period.end_date == date.max:
        return start, datetime.max
    end = datetime.combine(period.end_date + timedelta(days=1), datetime.min.time())
    return start, end


def iter_days(period: ReportPeriod) -> Iterator[date]:
    for day in range(1, period.days_in_month + 1):
        yield date(period.year, period.month, day)


def to_day(value) -> date:
    """Truncate a timestamp to its calendar day"""
    if isinstance(value, datetime):
        return value.date()
    return value
