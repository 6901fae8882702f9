"""Meet processor for normalizing raw listings into storable records."""
import logging
from typing import List, Optional

from processor.address_parser import parse_address
from processor.date_range import parse_date_range
from processor.models import MeetRecord, RawListing
from processor.regions import get_state_abbreviation, map_time_zone

logger = logging.getLogger(__name__)


class MeetProcessor:
    """Processor for turning API listings into MeetRecord objects."""

    STATUS_UPCOMING = 'upcoming'

    def process_listings(self, listings: List[RawListing]) -> List[MeetRecord]:
        """
        Transform raw listings and drop those without usable dates.

        Args:
            listings: List of RawListing objects from the API client

        Returns:
            List of MeetRecord objects with both dates set
        """
        records = []

        for listing in listings:
            try:
                records.append(self.transform_listing(listing))
            except Exception as e:
                logger.warning(
                    f"Failed to process listing '{listing.name}': {e}"
                )
                continue

        valid_records = [
            record for record in records
            if record.start_date and record.end_date
        ]

        dropped = len(records) - len(valid_records)
        if dropped:
            logger.warning(f"Dropped {dropped} listings with invalid dates")

        for record in valid_records:
            if record.start_date > record.end_date:
                logger.warning(
                    f"Meet '{record.name}' ends before it starts: "
                    f"{record.start_date} - {record.end_date}"
                )

        logger.info(
            f"Processed {len(valid_records)} valid meets out of "
            f"{len(listings)} total listings"
        )
        return valid_records

    def transform_listing(self, listing: RawListing) -> MeetRecord:
        """
        Transform a single listing.

        Dates may come back as None; process_listings filters those out.

        Args:
            listing: Raw listing

        Returns:
            MeetRecord object
        """
        address = parse_address(listing.address)
        dates = parse_date_range(listing.subtitle)

        return MeetRecord(
            name=listing.name,
            venue_name=self._venue_name(address.venue_name, listing.name),
            venue_street=address.street,
            venue_city=address.city,
            venue_state=get_state_abbreviation(address.state),
            venue_zip=address.zip,
            time_zone=map_time_zone(address.state),
            start_date=dates.start_date,
            end_date=dates.end_date,
            status=self.STATUS_UPCOMING,
            external_id=listing.external_id
        )

    def _venue_name(self, parsed_venue: Optional[str], meet_name: str) -> str:
        # Street-first addresses have no venue, so the meet name stands in
        return parsed_venue or meet_name
