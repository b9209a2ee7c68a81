import math
import re
from datetime import datetime, time, date as dt_date
from typing import Optional
from utils.constants import TIME_FORMAT, DATE_FORMAT


_TIME_SHAPE = re.compile(r"\d{2}:\d{2}")
_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")
_INDEX_SHAPE = re.compile(r"[+-]?\d+")
_HOURS_SHAPE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_time(value: Optional[str]) -> time:
    """
    Parse a time of day written as HH:MM (two digits each).

    Raises:
        ValueError: If the value is missing or not a valid time of day.
    """
    if value is None or not _TIME_SHAPE.fullmatch(value):
        raise ValueError(f"Could not parse time string '{value}'")
    return datetime.strptime(value, TIME_FORMAT).time()


def parse_date(value: Optional[str]) -> dt_date:
    """
    Parse a calendar date written as YYYY-MM-DD.

    Raises:
        ValueError: If the value is missing or not a real calendar date.
    """
    if value is None or not _DATE_SHAPE.fullmatch(value):
        raise ValueError(f"Could not parse date string '{value}'")
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_index(value: Optional[str]) -> int:
    """Convert a 1-based index as typed by the user into a 0-based one."""
    if value is None or not _INDEX_SHAPE.fullmatch(value):
        raise ValueError(f"Could not parse index '{value}'")
    return int(value) - 1


def parse_hours(value: Optional[str]) -> float:
    """Parse a decimal number of hours; sign is kept, nan/inf are rejected."""
    if value is None or not _HOURS_SHAPE.fullmatch(value):
        raise ValueError(f"Could not parse hours '{value}'")
    hours = float(value)
    if not math.isfinite(hours):
        raise ValueError(f"Hours must be a finite number, got '{value}'")
    return hours


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def format_date(value: dt_date) -> str:
    return value.strftime(DATE_FORMAT)


def intervals_overlap(start_a: time, end_a: time, start_b: time, end_b: time) -> bool:
    """
    Half-open intervals [start, end) overlap unless one ends at or before the
    other starts. Touching endpoints are not an overlap.
    """
    return not (end_a <= start_b or start_a >= end_b)
