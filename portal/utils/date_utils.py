"""
Date utility functions for age and report date handling.
"""
from datetime import date, datetime, timezone
from typing import Optional


def today() -> date:
    """Current calendar date."""
    return date.today()


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def utcnow() -> datetime:
    """
    Current UTC time as a naive datetime.

    Timestamp columns are stored without a zone and always hold UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def calculate_age(date_of_birth: date, as_of: Optional[date] = None) -> int:
    """
    Age in completed years.

    One year is subtracted when the birthday has not yet been reached in
    the year of ``as_of``. A future ``date_of_birth`` gives a negative age.

    Args:
        date_of_birth: Date of birth
        as_of: Reference date (defaults to today)

    Returns:
        Number of completed birthdays
    """
    as_of = as_of or today()
    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def iso_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()


def parse_date_string(date_str: str) -> Optional[date]:
    """
    Parse date string to date object.
    Handles multiple formats.

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date or None if invalid
    """
    formats = [
        "%Y-%m-%d",  # YYYY-MM-DD (ISO format)
        "%d-%m-%Y",  # DD-MM-YYYY
        "%d/%m/%Y",  # DD/MM/YYYY
        "%Y/%m/%d",  # YYYY/MM/DD
    ]

    for fmt in formats:
        try:
            return datetime.strptime(date_str.strip(), fmt).date()
        except ValueError:
            continue

    return None
