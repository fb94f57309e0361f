"""Utility functions for Project Tracker."""

import calendar
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Final

#: The date format used for input and display.
DATE_FORMAT: Final[str] = "%Y-%m-%d"


def add_months(day: date, months: int) -> date:
    """
    Shift ``day`` by a whole number of months.

    If the target month is shorter, the result is clamped to its last day,
    so January 31 plus one month is the last day of February.

    Args:
        day: The starting date
        months: Number of months to add; may be negative

    Returns:
        The shifted date

    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def parse_date(value: str) -> date:
    """
    Parse a ``yyyy-mm-dd`` string.

    Raises:
        ValueError: If ``value`` is not a valid date in that format

    """
    return datetime.strptime(value.strip(), DATE_FORMAT).date()  # noqa: DTZ007


def format_date(value: date) -> str:
    """
    Format ``value`` as ``yyyy-mm-dd``.
    """
    return value.strftime(DATE_FORMAT)


def parse_price(value: str) -> Decimal:
    """
    Parse a price such as ``150000`` or ``1499.50``.

    Raises:
        ValueError: If ``value`` is not a finite number

    """
    try:
        price = Decimal(value.strip().replace(" ", ""))
    except InvalidOperation as e:
        msg = f"Not a number: {value!r}"
        raise ValueError(msg) from e
    if not price.is_finite():
        msg = f"Not a number: {value!r}"
        raise ValueError(msg)
    return price


def decimal_places(value: Decimal) -> int:
    """
    Count the significant decimal places of ``value``.

    Trailing zeros do not count, so ``1.50`` has one place and ``100`` none.
    """
    exponent = value.normalize().as_tuple().exponent
    return max(0, -int(exponent))


def format_price(value: Decimal) -> str:
    """
    Format ``value`` with thousands separators and two decimals.
    """
    return f"{value:,.2f}"
