"""API client for USA Weightlifting meet listings."""
import json
import logging
from typing import Any, List, Optional

import requests

from processor.models import RawListing

logger = logging.getLogger(__name__)


class USAWMeetsClient:
    """Client for the public Sport80 meet widget of USA Weightlifting."""

    BASE_URL = "https://usaweightlifting.sport80.com/api/public/widget/data/new/1"
    PARAMS = {
        'p': 0,
        'i': 20,
        's': 'WSO',
        'l': '',
        'd': 10,
        'f': ''
    }

    def __init__(self, timeout: int = 30, session: Optional[requests.Session] = None):
        """
        Initialize the API client.

        Args:
            timeout: HTTP request timeout in seconds (default: 30)
            session: Optional requests session to reuse
        """
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_meets(self) -> List[RawListing]:
        """
        Fetch upcoming meet listings.

        Returns:
            List of RawListing objects, empty if the body can't be decoded

        Raises:
            requests.RequestException: On transport errors or non-2xx status
        """
        logger.info("Fetching meets data from the API")

        response = self.session.get(
            self.BASE_URL,
            params=self.PARAMS,
            timeout=self.timeout
        )
        response.raise_for_status()

        payload = self._decode_body(response)
        if payload is None:
            return []

        items = payload.get('data') if isinstance(payload, dict) else None
        if not isinstance(items, list):
            logger.warning("API response has no 'data' list")
            return []

        listings = []
        for item in items:
            listing = self._parse_listing(item)
            if listing:
                listings.append(listing)

        logger.info(f"Fetched {len(listings)} meets from the API")
        return listings

    def _decode_body(self, response: requests.Response) -> Any:
        """
        Decode the response body.

        The widget sometimes returns the document as a JSON string holding
        escaped JSON, or as plain text. Either way the string is decoded a
        second time.

        Returns:
            Decoded payload, or None if the string can't be decoded
        """
        try:
            payload = response.json()
        except ValueError:
            payload = response.text

        if isinstance(payload, str):
            try:
                payload = json.loads(payload)
            except ValueError as e:
                logger.error(f"Error parsing JSON response: {e}")
                return None

        return payload

    def _parse_listing(self, item: Any) -> Optional[RawListing]:
        """
        Build a RawListing from one API item.

        Returns:
            RawListing or None if the item has no name
        """
        if not isinstance(item, dict) or not item.get('name'):
            logger.warning(f"Skipping malformed listing: {item!r}")
            return None

        external_id = item.get('id')
        return RawListing(
            external_id=str(external_id) if external_id is not None else None,
            name=item['name'],
            address=item.get('address') or '',
            subtitle=item.get('subtitle') or ''
        )
