"""Heuristic parser for US meet venue addresses."""
import logging
import re

from processor.models import ParsedAddress

logger = logging.getLogger(__name__)

COUNTRY = "United States of America"
UNKNOWN = "Unknown"

_REPEATED_COMMA = re.compile(r',\s*,')
_STARTS_WITH_DIGIT = re.compile(r'^\d')
_UNIT_DESIGNATOR = re.compile(r'Suite|Unit|Apt|#', re.IGNORECASE)


def parse_address(address: str) -> ParsedAddress:
    """
    Split a free-text address into venue, street, city, state and zip.

    Supported shapes (comma separated):
        "7051 Commerce Circle, Pleasanton, California, United States of America, 94588"
        "Fort Worth Convention Center, 1201 Houston Street, Fort Worth, Texas, United States of America, 76102"
        "CrossFit Revamped, 9385 Washington Blvd., Suite B-C, Laurel, Maryland, United States of America, 20723"

    Never raises. Addresses that don't fit any shape come back with the
    original text as the street and "Unknown" city, state and zip.

    Args:
        address: Address string from the API

    Returns:
        ParsedAddress with every field populated
    """
    try:
        # e.g. "8439 NE Columbia Ct,, Portland"
        cleaned = _REPEATED_COMMA.sub(',', address)
        parts = cleaned.split(', ')

        if len(parts) < 4:
            logger.warning(f"Could not parse address: {address}")
            return _unparsed(address)

        zip_code = parts[-1]
        state = _find_state(parts)

        if _STARTS_WITH_DIGIT.match(parts[0]):
            return ParsedAddress(
                venue_name='',
                street=parts[0],
                city=parts[1],
                state=state,
                zip=zip_code
            )

        street = parts[1]
        city = parts[2]
        if len(parts) >= 6 and _UNIT_DESIGNATOR.search(parts[2]):
            street = f"{parts[1]}, {parts[2]}"
            city = parts[3]

        return ParsedAddress(
            venue_name=parts[0],
            street=street,
            city=city,
            state=state,
            zip=zip_code
        )

    except Exception as e:
        logger.warning(f"Error parsing address {address!r}: {e}")
        return _unparsed(address)


def _find_state(parts: list[str]) -> str:
    """State precedes the country token when present, else the zip."""
    if COUNTRY in parts:
        index = parts.index(COUNTRY)
        if index > 0:
            return parts[index - 1]
    return parts[-2]


def _unparsed(address) -> ParsedAddress:
    return ParsedAddress(
        venue_name='',
        street='' if address is None else str(address),
        city=UNKNOWN,
        state=UNKNOWN,
        zip=UNKNOWN
    )
