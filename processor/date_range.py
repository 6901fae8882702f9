"""Parser for the MM/DD/YYYY date ranges carried in listing subtitles."""
import logging

from processor.models import ParsedDateRange

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = ' - '


def parse_date_range(date_range: str) -> ParsedDateRange:
    """
    Parse a date range such as "06\\/08\\/2025 - 06\\/09\\/2025".

    A single date is used as both start and end. Dates are reassembled as
    YYYY-MM-DD without checking that they exist on the calendar.

    Args:
        date_range: Date range text, slashes possibly escaped

    Returns:
        ParsedDateRange, with both dates None if parsing fails
    """
    try:
        cleaned = date_range.replace('\\/', '/')
        dates = cleaned.split(RANGE_SEPARATOR)

        start_date = _to_iso(dates[0])
        end_date = _to_iso(dates[1]) if len(dates) > 1 and dates[1].strip() else start_date

        return ParsedDateRange(start_date=start_date, end_date=end_date)

    except (AttributeError, ValueError) as e:
        logger.warning(f"Error parsing date range {date_range!r}: {e}")
        return ParsedDateRange(start_date=None, end_date=None)


def _to_iso(date_str: str) -> str:
    """Convert MM/DD/YYYY to YYYY-MM-DD."""
    parts = [part.strip() for part in date_str.strip().split('/')]
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        raise ValueError(f"expected MM/DD/YYYY, got {date_str!r}")

    month, day, year = (int(part) for part in parts)
    return f"{year:04d}-{month:02d}-{day:02d}"
