"""Disaster Backend Client - Imperative Shell.

This module handles HTTP communication with the disaster alerts backend:
the bulk events fetch and the push subscription registration.
All I/O is contained here; parsing and merge logic is in the core module.
"""

import logging
from typing import Any

import requests

from disaster_alerts.core.config import DEFAULT_BASE_URL
from disaster_alerts.core.errors import InitialLoadError, RegistrationError
from disaster_alerts.core.subscription import PushSubscriptionRecord


logger = logging.getLogger(__name__)


# Default timeout for API requests (seconds)
DEFAULT_TIMEOUT = 30


class DisasterApiClient:
    """Client for the disaster alerts backend.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize backend client.

        Args:
            base_url: Backend base URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def events_url(self, category: str) -> str:
        """URL of the bulk events endpoint for a category."""
        return f"{self.base_url}/events/{category}"

    @property
    def subscribe_url(self) -> str:
        """URL of the push registration endpoint."""
        return f"{self.base_url}/subscribe"

    def fetch_events(self, category: str) -> list[dict[str, Any]]:
        """Fetch all current events for a category.

        This method performs HTTP I/O.

        Args:
            category: Disaster category, e.g. 'earthquake'

        Returns:
            Raw event records from the backend

        Raises:
            InitialLoadError: On transport failure, non-2xx status,
                or a body that is not a JSON array
        """
        url = self.events_url(category)
        logger.info("Fetching %s events from %s", category, url)

        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            logger.error("Failed to fetch %s events: %s", category, str(e))
            raise InitialLoadError(f"Failed to fetch {category} events: {e}") from e
        except ValueError as e:
            logger.error("Events response was not JSON: %s", str(e))
            raise InitialLoadError(f"Invalid events response: {e}") from e

        if not isinstance(data, list):
            logger.error("Events response was %s, expected a list", type(data).__name__)
            raise InitialLoadError(
                f"Invalid events response: expected a list, got {type(data).__name__}"
            )

        logger.info("Fetched %d %s events", len(data), category)
        return data

    def register_subscription(self, record: PushSubscriptionRecord) -> None:
        """Register a push subscription with the backend.

        This method performs HTTP I/O.

        Args:
            record: Subscription issued by the platform

        Raises:
            RegistrationError: On transport failure or non-2xx status
        """
        logger.info("Registering push subscription with backend")

        try:
            response = requests.post(
                self.subscribe_url,
                json=record.to_dict(),
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
        except requests.Timeout as e:
            logger.error("Subscription registration timed out")
            raise RegistrationError("Registration request timed out") from e
        except requests.RequestException as e:
            logger.error("Subscription registration failed: %s", str(e))
            raise RegistrationError(f"Registration request failed: {e}") from e

        if not response.ok:
            logger.warning(
                "Registration endpoint returned %d - %s",
                response.status_code,
                response.text,
            )
            raise RegistrationError(
                f"Registration rejected: {response.status_code} {response.text}"
            )

        logger.info("Push subscription registered")
