"""Unit tests for USAWMeetsClient."""
import json

import pytest
import responses
from requests.exceptions import ConnectionError, HTTPError

from listings.retry import retry
from listings.usaw_client import USAWMeetsClient

API_URL = USAWMeetsClient.BASE_URL

SAMPLE_PAYLOAD = {
    "data": [
        {
            "id": 4521,
            "name": "2025 Maryland Open",
            "address": (
                "CrossFit Revamped, 9385 Washington Blvd., Suite B-C, Laurel, "
                "Maryland, United States of America, 20723"
            ),
            "subtitle": "06\\/08\\/2025 - 06\\/08\\/2025"
        },
        {
            "id": 4522,
            "name": "Pleasanton Summer Classic",
            "address": (
                "7051 Commerce Circle, Pleasanton, California, "
                "United States of America, 94588"
            ),
            "subtitle": "07\\/12\\/2025 - 07\\/13\\/2025"
        }
    ]
}


class TestUSAWMeetsClient:
    """Test cases for USAWMeetsClient class."""

    @responses.activate
    def test_fetch_meets_success(self):
        """Test fetching an already structured JSON body."""
        responses.add(responses.GET, API_URL, json=SAMPLE_PAYLOAD, status=200)

        client = USAWMeetsClient(timeout=30)
        listings = client.fetch_meets()

        assert len(listings) == 2
        assert listings[0].external_id == '4521'
        assert listings[0].name == '2025 Maryland Open'
        assert listings[0].address.startswith('CrossFit Revamped')
        assert listings[0].subtitle == '06\\/08\\/2025 - 06\\/08\\/2025'
        assert listings[1].name == 'Pleasanton Summer Classic'

    @responses.activate
    def test_fetch_meets_sends_fixed_query(self):
        """Test the single fixed-size request parameters."""
        responses.add(responses.GET, API_URL, json={"data": []}, status=200)

        USAWMeetsClient().fetch_meets()

        assert len(responses.calls) == 1
        url = responses.calls[0].request.url
        assert 'p=0' in url
        assert 'i=20' in url
        assert 's=WSO' in url
        assert 'd=10' in url

    @responses.activate
    def test_fetch_meets_string_encoded_body(self):
        """Test a body that is a JSON string holding the document."""
        responses.add(
            responses.GET,
            API_URL,
            body=json.dumps(json.dumps(SAMPLE_PAYLOAD)),
            status=200,
            content_type='application/json'
        )

        listings = USAWMeetsClient().fetch_meets()

        assert [listing.name for listing in listings] == [
            '2025 Maryland Open',
            'Pleasanton Summer Classic'
        ]

    @responses.activate
    def test_fetch_meets_plain_text_body(self):
        """Test a JSON document served as text/plain."""
        responses.add(
            responses.GET,
            API_URL,
            body=json.dumps(SAMPLE_PAYLOAD),
            status=200,
            content_type='text/plain'
        )

        listings = USAWMeetsClient().fetch_meets()

        assert len(listings) == 2

    @responses.activate
    def test_fetch_meets_undecodable_string(self):
        """Test that a string body that isn't JSON yields no listings."""
        responses.add(
            responses.GET,
            API_URL,
            body=json.dumps("<html>maintenance</html>"),
            status=200,
            content_type='application/json'
        )

        assert USAWMeetsClient().fetch_meets() == []

    @responses.activate
    def test_fetch_meets_missing_data_key(self):
        responses.add(responses.GET, API_URL, json={"items": []}, status=200)

        assert USAWMeetsClient().fetch_meets() == []

    @responses.activate
    def test_fetch_meets_skips_malformed_items(self):
        """Test that items without a name are skipped."""
        payload = {
            "data": [
                {"id": 1, "address": "nowhere", "subtitle": "01/01/2025"},
                "not a listing",
                {"id": 2, "name": "Valid Meet"}
            ]
        }
        responses.add(responses.GET, API_URL, json=payload, status=200)

        listings = USAWMeetsClient().fetch_meets()

        assert len(listings) == 1
        assert listings[0].name == 'Valid Meet'
        assert listings[0].address == ''
        assert listings[0].subtitle == ''

    @responses.activate
    def test_fetch_meets_server_error_raises(self):
        """Test that non-2xx responses raise for the retry wrapper."""
        responses.add(responses.GET, API_URL, body="Server Error", status=500)

        with pytest.raises(HTTPError):
            USAWMeetsClient().fetch_meets()

    @responses.activate
    def test_fetch_meets_with_retry_success(self):
        """Test retry logic succeeds after initial failures."""
        responses.add(responses.GET, API_URL, body="Server Error", status=500)
        responses.add(responses.GET, API_URL, body="Server Error", status=503)
        responses.add(responses.GET, API_URL, json=SAMPLE_PAYLOAD, status=200)

        client = USAWMeetsClient()
        delays = []
        listings = retry(client.fetch_meets, sleep=delays.append)

        assert len(listings) == 2
        assert len(responses.calls) == 3
        assert delays == [2, 4]

    @responses.activate
    def test_fetch_meets_all_retries_fail(self):
        """Test that the error propagates when all retries fail."""
        for _ in range(3):
            responses.add(
                responses.GET,
                API_URL,
                body=ConnectionError("Connection refused")
            )

        client = USAWMeetsClient()

        with pytest.raises(ConnectionError):
            retry(client.fetch_meets, sleep=lambda delay: None)

        assert len(responses.calls) == 3
