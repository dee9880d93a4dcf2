"""Orthodox Easter (Pascha) calculation and the date rules derived from it.

Easter is computed on the Julian reckoning with a century correction term,
which lands directly on the civil (Gregorian) calendar date.
Algorithm valid for years after 1582.
"""

from datetime import date, timedelta
from numbers import Integral

FIRST_VALID_YEAR = 1583

SUNDAY = 6  # date.weekday()


class InvalidYear(ValueError):
    """Raised when a year falls outside the algorithm's domain (<= 1582)."""

    def __init__(self, year: int):
        self.year = year
        super().__init__(f"Algorithm invalid before April 1583 (got year {year})")


def check_year(year: int) -> int:
    """Validate a year and return it as a plain int (numpy integers accepted)."""
    if isinstance(year, bool) or not isinstance(year, Integral):
        raise TypeError(f"year must be an integer, got {type(year).__name__}")
    year = int(year)
    if year < FIRST_VALID_YEAR:
        raise InvalidYear(year)
    return year


def compute_easter(year: int) -> date:
    """
    Calculate Orthodox Easter Sunday for a year after 1582.

    Algorithm:
    1. Century correction e (flat 10 up to 1600)
    2. Lunar cycle position G, epact-like correction I, weekday correction J
    3. p = I - J + e, then day and month straight from p

    Args:
        year: Year (> 1582)

    Returns:
        Civil date of Orthodox Easter Sunday

    Raises:
        InvalidYear: if year <= 1582
    """
    year = check_year(year)

    e = 10
    if year > 1600:
        y2 = year // 100
        e = 10 + y2 - 16 - (y2 - 16) // 4

    g = year % 19
    i = (19 * g + 15) % 30
    j = (year + year // 4 + i) % 7
    p = i - j + e

    day = 1 + (p + 27 + (p + 6) // 40) % 31
    # 1-based: p <= 33 is April, p >= 34 is May
    month = 3 + (p + 26) // 30

    # day can exceed the month length (June 31 when p == 64); roll it over
    return date(year, month, 1) + timedelta(days=day - 1)


def orthodox_easter(year: int) -> date:
    """Orthodox Easter date for a year (see compute_easter)."""
    return compute_easter(year)


def next_or_same_sunday(day: date) -> date:
    """Return day if it is a Sunday, otherwise the first Sunday after it."""
    return day + timedelta(days=(SUNDAY - day.weekday()) % 7)


def offset(easter: date, days: int) -> date:
    """Date lying a signed number of days away from Easter."""
    return easter + timedelta(days=days)


def days_from_easter(day: date, easter: date) -> int:
    """Signed number of days from Easter to day (inverse of offset)."""
    return (day - easter).days


def resolve_saint_george(year: int, easter: date) -> date:
    """
    Saint George: May 23, unless that is not before Easter.

    A feast that would fall on or after Easter is transposed to Easter + 1.
    """
    candidate = date(year, 5, 23)
    if candidate < easter:
        return candidate
    return offset(easter, 1)


def resolve_mark_evangelist(year: int, george: date, easter: date) -> date:
    """
    Mark the Evangelist: May 25, unless that is not before the (resolved)
    Saint George date, in which case Easter + 2.
    """
    candidate = date(year, 5, 25)
    if candidate < george:
        return candidate
    return offset(easter, 2)
