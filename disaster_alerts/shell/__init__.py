"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Disaster backend client (HTTP)
- Live channel (in-process message queue)
- Push capability interface (platform)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from disaster_alerts.shell.disaster_api_client import DisasterApiClient
from disaster_alerts.shell.live_channel import QueueChannel
from disaster_alerts.shell.push_capability import PushCapability, UnsupportedPushCapability
from disaster_alerts.shell.config_loader import load_config, Config

__all__ = [
    "DisasterApiClient",
    "QueueChannel",
    "PushCapability",
    "UnsupportedPushCapability",
    "load_config",
    "Config",
]
