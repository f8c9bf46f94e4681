"""Push Capability - Imperative Shell.

Interface to the platform's notification permission and push
subscription facilities. The subscriber only talks to the platform
through this interface so it can be swapped for a fake in tests.
"""

from typing import Protocol

from disaster_alerts.core.errors import UnsupportedPlatform
from disaster_alerts.core.subscription import PermissionResult, PushSubscriptionRecord


class PushCapability(Protocol):
    """Platform push facility.

    Implementations may block on any call; the subscriber imposes no
    timeout.
    """

    def is_supported(self) -> bool:
        """True if service workers and push subscriptions are available."""
        ...

    def current_permission(self) -> PermissionResult:
        """Read the platform's notification permission."""
        ...

    def request_permission(self) -> PermissionResult:
        """Ask the user for notification permission."""
        ...

    def wait_until_ready(self) -> None:
        """Block until the service worker registration is active."""
        ...

    def subscribe(
        self,
        application_server_key: bytes,
        user_visible_only: bool = True,
    ) -> PushSubscriptionRecord:
        """Create (or return the existing) push subscription."""
        ...


class UnsupportedPushCapability:
    """Capability for environments without push support, such as a terminal."""

    def is_supported(self) -> bool:
        return False

    def current_permission(self) -> PermissionResult:
        return PermissionResult.UNKNOWN

    def request_permission(self) -> PermissionResult:
        raise UnsupportedPlatform("Push notifications are not supported here")

    def wait_until_ready(self) -> None:
        raise UnsupportedPlatform("No service worker registration available")

    def subscribe(
        self,
        application_server_key: bytes,
        user_visible_only: bool = True,
    ) -> PushSubscriptionRecord:
        raise UnsupportedPlatform("Push subscriptions are not supported here")
