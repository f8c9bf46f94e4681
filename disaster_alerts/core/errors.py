"""Error taxonomy shared by the core and the shell.

Shell clients raise these; the subscriber and controller catch them at
their boundary and turn them into state changes and result objects.
"""


class DisasterAlertsError(Exception):
    """Base class for all disaster alerts errors."""


class InitialLoadError(DisasterAlertsError):
    """The bulk fetch of current events failed."""


class ChannelError(DisasterAlertsError):
    """The live channel was used after it was closed."""


class SubscriptionError(DisasterAlertsError):
    """Service worker readiness, push subscription, or registration failed."""


class RegistrationError(SubscriptionError):
    """The backend rejected the push subscription registration."""


class UnsupportedPlatform(DisasterAlertsError):
    """The platform lacks push support or no server key is configured."""
