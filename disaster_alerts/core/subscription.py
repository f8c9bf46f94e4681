"""Push subscription models and state rules - Pure functions.

This module defines the notification permission values, the subscription
state machine's states, and the pure helpers the subscriber uses:
deciding the initial state, deciding whether enable() may run, and
decoding the server public key.
"""

import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PermissionResult(str, Enum):
    """Platform notification permission values."""
    UNKNOWN = "unknown"
    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"


class SubscriptionState(str, Enum):
    """States of the notification subscription lifecycle."""
    UNSUPPORTED = "unsupported"
    DEFAULT = "default"
    REQUESTING = "requesting"
    GRANTED = "granted"
    DENIED = "denied"
    FAILED = "failed"


# States from which enable() is allowed to run
ENABLEABLE_STATES = frozenset({SubscriptionState.DEFAULT, SubscriptionState.FAILED})

# States that end the lifecycle for the session
TERMINAL_STATES = frozenset({
    SubscriptionState.UNSUPPORTED,
    SubscriptionState.GRANTED,
    SubscriptionState.DENIED,
})


@dataclass(frozen=True)
class PushSubscriptionRecord:
    """Delivery descriptor issued by the platform.

    Attributes:
        endpoint: Opaque delivery URL
        keys: Encryption material (typically 'p256dh' and 'auth')
        expiration_time: Expiry in epoch milliseconds, if the platform set one
    """
    endpoint: str
    keys: dict[str, str] = field(default_factory=dict)
    expiration_time: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the platform's JSON form for the backend."""
        return {
            "endpoint": self.endpoint,
            "expirationTime": self.expiration_time,
            "keys": dict(self.keys),
        }


def initial_state(
    supported: bool,
    server_key: str | None,
    permission: PermissionResult,
) -> SubscriptionState:
    """Decide the subscriber's state at startup.

    Pure function.

    Args:
        supported: Whether the platform has service worker and push support
        server_key: Configured server public key (None/empty if absent)
        permission: Platform permission read once at startup

    Returns:
        Initial SubscriptionState
    """
    if not supported or not server_key:
        return SubscriptionState.UNSUPPORTED

    if permission == PermissionResult.GRANTED:
        return SubscriptionState.GRANTED
    if permission == PermissionResult.DENIED:
        return SubscriptionState.DENIED

    return SubscriptionState.DEFAULT


def can_enable(state: SubscriptionState) -> bool:
    """Return True if enable() may start from this state."""
    return state in ENABLEABLE_STATES


def url_base64_to_bytes(value: str) -> bytes:
    """Decode a base64url string (padding optional) into bytes.

    Pure function.

    Args:
        value: Base64url-encoded key, e.g. a VAPID public key

    Returns:
        Decoded bytes

    Raises:
        ValueError: If the value is not valid base64url
    """
    padding = "=" * (-len(value) % 4)
    try:
        return base64.b64decode(value + padding, altchars=b"-_", validate=True)
    except ValueError as e:
        raise ValueError(f"Invalid base64url key: {e}") from e
