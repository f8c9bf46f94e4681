"""Notification Subscriber - Wires push capability and backend registration.

This module drives the user-triggered sequence that turns on push
delivery: permission request, service worker readiness, push
subscription, and backend registration. Every failure is caught here and
turned into a state transition; nothing propagates to the caller.
"""

import logging
from dataclasses import dataclass

from disaster_alerts.core.errors import SubscriptionError
from disaster_alerts.core.subscription import (
    PermissionResult,
    SubscriptionState,
    can_enable,
    initial_state,
    url_base64_to_bytes,
)
from disaster_alerts.shell.disaster_api_client import DisasterApiClient
from disaster_alerts.shell.push_capability import PushCapability


logger = logging.getLogger(__name__)


@dataclass
class EnableResult:
    """Result of an enable() call.

    Attributes:
        state: Subscription state after the call
        attempted: False if the call was a no-op for the current state
        error: Error message if the flow failed or was declined
    """
    state: SubscriptionState
    attempted: bool
    error: str | None = None

    @property
    def success(self) -> bool:
        """Returns True if notifications are enabled."""
        return self.state == SubscriptionState.GRANTED


class NotificationSubscriber:
    """Coordinates the notification opt-in lifecycle.

    The initial state is read once at construction. enable() runs only
    from DEFAULT or FAILED; every other state makes it a no-op.
    """

    def __init__(
        self,
        capability: PushCapability,
        api_client: DisasterApiClient,
        server_key: str | None,
    ) -> None:
        """Initialize subscriber and read the platform's current permission.

        Args:
            capability: Platform push facility
            api_client: Backend client used for registration
            server_key: Server public key (base64url); None means unsupported
        """
        self.capability = capability
        self.api_client = api_client
        self.server_key = server_key
        self.last_error: str | None = None

        supported = capability.is_supported()
        permission = capability.current_permission() if supported else PermissionResult.UNKNOWN
        self._state = initial_state(supported, server_key, permission)

        logger.info("Notification subscriber initial state: %s", self._state.value)

    @property
    def state(self) -> SubscriptionState:
        return self._state

    def _transition(self, state: SubscriptionState) -> None:
        logger.debug("Subscription state %s -> %s", self._state.value, state.value)
        self._state = state

    def _fail(self, message: str) -> EnableResult:
        logger.error(message)
        self.last_error = message
        self._transition(SubscriptionState.FAILED)
        return EnableResult(state=self._state, attempted=True, error=message)

    def enable(self) -> EnableResult:
        """Turn on push notifications.

        Steps:
        1. Request permission (anything but granted ends in DENIED)
        2. Wait for the service worker registration
        3. Create a user-visible push subscription with the server key
        4. Register the subscription with the backend

        Returns:
            EnableResult describing the outcome
        """
        if not can_enable(self._state):
            logger.info("enable() ignored in state %s", self._state.value)
            return EnableResult(state=self._state, attempted=False)

        self.last_error = None
        self._transition(SubscriptionState.REQUESTING)

        # Step 1: Permission
        try:
            permission = self.capability.request_permission()
        except Exception as e:
            return self._fail(f"Permission request failed: {e}")

        if permission != PermissionResult.GRANTED:
            message = f"Notification permission {getattr(permission, 'value', permission)}"
            logger.info(message)
            self.last_error = message
            self._transition(SubscriptionState.DENIED)
            return EnableResult(state=self._state, attempted=True, error=message)

        # Steps 2-4: Subscribe and register
        try:
            self.capability.wait_until_ready()

            try:
                server_key = url_base64_to_bytes(self.server_key or "")
            except ValueError as e:
                raise SubscriptionError(str(e)) from e

            record = self.capability.subscribe(
                application_server_key=server_key,
                user_visible_only=True,
            )
            self.api_client.register_subscription(record)
        except Exception as e:
            # Platform implementations may raise anything, not only SubscriptionError
            return self._fail(f"Failed to enable notifications: {e}")

        self._transition(SubscriptionState.GRANTED)
        logger.info("Subscribed to push notifications")
        return EnableResult(state=self._state, attempted=True)
