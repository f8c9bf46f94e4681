"""Tests for the disaster backend client.

Uses the `responses` library to mock HTTP requests.
"""

import json

import pytest
import requests
import responses

from disaster_alerts.core.errors import InitialLoadError, RegistrationError, SubscriptionError
from disaster_alerts.core.subscription import PushSubscriptionRecord
from disaster_alerts.shell.disaster_api_client import DisasterApiClient


BASE_URL = "https://backend.example.com"
EVENTS_URL = f"{BASE_URL}/events/earthquake"
SUBSCRIBE_URL = f"{BASE_URL}/subscribe"

TEST_RECORD = PushSubscriptionRecord(
    endpoint="https://push.example.com/send/abc123",
    keys={"p256dh": "BPk3...", "auth": "tBHI..."},
)


class TestDisasterApiClientUrls:
    """Tests for URL construction."""

    def test_trailing_slash_is_stripped(self):
        client = DisasterApiClient(base_url=BASE_URL + "/")
        assert client.events_url("earthquake") == EVENTS_URL
        assert client.subscribe_url == SUBSCRIBE_URL


class TestDisasterApiClientFetchEvents:
    """Tests for DisasterApiClient.fetch_events()."""

    @responses.activate
    def test_returns_records(self):
        """Successful fetch returns the JSON array."""
        records = [{"id": "a", "location": "X"}, {"id": "b", "location": "Y"}]
        responses.add(responses.GET, EVENTS_URL, json=records, status=200)

        client = DisasterApiClient(base_url=BASE_URL)
        result = client.fetch_events("earthquake")

        assert result == records

    @responses.activate
    def test_server_error_raises_initial_load_error(self):
        responses.add(responses.GET, EVENTS_URL, json={"error": "boom"}, status=500)

        client = DisasterApiClient(base_url=BASE_URL)
        with pytest.raises(InitialLoadError):
            client.fetch_events("earthquake")

    @responses.activate
    def test_connection_error_raises_initial_load_error(self):
        responses.add(
            responses.GET,
            EVENTS_URL,
            body=requests.ConnectionError("Connection refused"),
        )

        client = DisasterApiClient(base_url=BASE_URL)
        with pytest.raises(InitialLoadError, match="Connection refused"):
            client.fetch_events("earthquake")

    @responses.activate
    def test_non_list_body_raises_initial_load_error(self):
        responses.add(responses.GET, EVENTS_URL, json={"events": []}, status=200)

        client = DisasterApiClient(base_url=BASE_URL)
        with pytest.raises(InitialLoadError, match="expected a list"):
            client.fetch_events("earthquake")

    @responses.activate
    def test_invalid_json_raises_initial_load_error(self):
        responses.add(responses.GET, EVENTS_URL, body="<html>oops</html>", status=200)

        client = DisasterApiClient(base_url=BASE_URL)
        with pytest.raises(InitialLoadError):
            client.fetch_events("earthquake")


class TestDisasterApiClientRegisterSubscription:
    """Tests for DisasterApiClient.register_subscription()."""

    @responses.activate
    def test_posts_subscription_json(self):
        """Subscription is sent in the platform's JSON form."""
        responses.add(responses.POST, SUBSCRIBE_URL, json={}, status=201)

        client = DisasterApiClient(base_url=BASE_URL)
        client.register_subscription(TEST_RECORD)

        assert len(responses.calls) == 1
        body = json.loads(responses.calls[0].request.body)
        assert body == {
            "endpoint": "https://push.example.com/send/abc123",
            "expirationTime": None,
            "keys": {"p256dh": "BPk3...", "auth": "tBHI..."},
        }

    @responses.activate
    def test_rejection_raises_registration_error(self):
        responses.add(responses.POST, SUBSCRIBE_URL, body="bad subscription", status=400)

        client = DisasterApiClient(base_url=BASE_URL)
        with pytest.raises(RegistrationError, match="400"):
            client.register_subscription(TEST_RECORD)

    @responses.activate
    def test_timeout_raises_registration_error(self):
        responses.add(
            responses.POST,
            SUBSCRIBE_URL,
            body=requests.Timeout("Request timed out"),
        )

        client = DisasterApiClient(base_url=BASE_URL)
        with pytest.raises(RegistrationError, match="timed out"):
            client.register_subscription(TEST_RECORD)

    def test_registration_error_is_subscription_error(self):
        """Registration failures belong to the subscription failure family."""
        assert issubclass(RegistrationError, SubscriptionError)
