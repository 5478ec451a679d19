"""Core utility functions for the application"""

import math
import re
from datetime import date
from typing import Any, Optional, Union

from app.core.config import config


ONES = [
    "",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
]

TENS = [
    "",
    "",
    "Twenty",
    "Thirty",
    "Forty",
    "Fifty",
    "Sixty",
    "Seventy",
    "Eighty",
    "Ninety",
]

# Indian numbering groups, most significant first
GROUPS = [
    (10_000_000, "Crore"),
    (100_000, "Lakh"),
    (1_000, "Thousand"),
]


def parse_amount(value: Any) -> float:
    """
    Coerce a form value to a float, treating blank or non-numeric input as 0.

    Args:
        value: Raw value from the client (number, numeric string, blank, None)

    Returns:
        float: The parsed value, or 0.0 when it cannot be read as a number
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0

    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0

    # NaN, inf and overflowed input such as 1e400
    if not math.isfinite(number):
        return 0.0

    return number


def parse_date(value: Union[date, str, None]) -> Optional[date]:
    """Read an ISO `YYYY-MM-DD` string (or a date) into a date; blank is None."""
    if value is None or isinstance(value, date):
        return value

    value = value.strip()
    if not value:
        return None

    return date.fromisoformat(value)


def inclusive_day_span(
    from_date: Union[date, str, None], to_date: Union[date, str, None]
) -> Optional[int]:
    """
    Count the days between two dates, both ends included.

    The same date for both ends counts as 1 day.

    Args:
        from_date: Start of the billing period (date, ISO string or blank)
        to_date: End of the billing period (date, ISO string or blank)

    Returns:
        Optional[int]: Day count, or None when either date is missing
        or the period ends before it starts
    """
    start = parse_date(from_date)
    end = parse_date(to_date)

    if start is None or end is None or end < start:
        return None

    return (end - start).days + 1


def _hundreds_to_words(n: int) -> str:
    """Convert a number below 1000 to words."""
    words = ""
    if n > 99:
        words += ONES[n // 100] + " Hundred "
        n %= 100

    if n > 19:
        words += TENS[n // 10] + " " + ONES[n % 10]
    else:
        words += ONES[n]

    return words


def _indian_words(n: int) -> str:
    words = ""
    for size, label in GROUPS:
        count = n // size
        n %= size
        if count > 0:
            # crore counts above 999 are spelled with their own lakh/thousand groups
            part = _indian_words(count) if count > 999 else _hundreds_to_words(count)
            words += f"{part} {label} "

    if n > 0:
        words += _hundreds_to_words(n)

    return words


def number_to_words(amount: int) -> str:
    """
    Convert a whole rupee amount to English words using crore/lakh grouping.

    Zero is returned as plain "Zero", every other amount ends with " Only".

    Args:
        amount: Non-negative integer (round the total before calling)

    Returns:
        str: e.g. "Twenty Nine Thousand Thirty Five Only"

    Raises:
        ValueError: If amount is negative
    """
    amount = int(amount)
    if amount < 0:
        raise ValueError("amount must be non-negative")

    if amount == 0:
        return "Zero"

    words = re.sub(r"\s+", " ", _indian_words(amount)).strip()
    return words + " Only"


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves going up."""
    return math.floor(value + 0.5)


def format_currency(value: float, symbol: Optional[str] = None) -> str:
    """
    Format an amount for display with two decimals.

    Args:
        value: Amount to format
        symbol: Currency prefix (defaults to the configured symbol)

    Returns:
        str: Formatted amount (e.g., "₹29034.55")
    """
    if symbol is None:
        symbol = config.currency_symbol
    return f"{symbol}{value:.2f}"


def format_invoice_date(date_obj: date) -> str:
    """
    Format a date object for invoice display.

    Args:
        date_obj: The date to format

    Returns:
        str: Formatted date (e.g., "21-Aug-2023")
    """
    return date_obj.strftime("%d-%b-%Y")
