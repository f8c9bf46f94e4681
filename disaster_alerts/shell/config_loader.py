"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The Config model is defined in disaster_alerts/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from disaster_alerts.core.config import Config, DEFAULT_BASE_URL


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a value that may be a ${VAR} environment placeholder.

    Args:
        value: Value to resolve

    Returns:
        Resolved value, or the original placeholder if the variable is unset
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    key = _resolve_value(data.get("vapid_public_key"))
    if isinstance(key, str) and key.startswith("${"):
        # Unresolved placeholder: treat as no key
        key = None

    return Config(
        base_url=_resolve_value(data.get("base_url", DEFAULT_BASE_URL)),
        vapid_public_key=key or None,
        category=data.get("category", "earthquake"),
        page_size=int(data.get("page_size", 10)),
        request_timeout_seconds=int(data.get("request_timeout_seconds", 30)),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: category=%s, base_url=%s, push key %s",
        config.category,
        config.base_url,
        "set" if config.vapid_public_key else "not set",
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Environment variables:
        DISASTER_API_BASE_URL: Backend base address
        VAPID_PUBLIC_KEY: Push server public key (base64url)
        DISASTER_CATEGORY: Category to follow
        PAGE_SIZE: Events per page
        REQUEST_TIMEOUT: HTTP timeout in seconds

    Returns:
        Config object from environment
    """
    return Config(
        base_url=os.environ.get("DISASTER_API_BASE_URL", DEFAULT_BASE_URL),
        vapid_public_key=os.environ.get("VAPID_PUBLIC_KEY") or None,
        category=os.environ.get("DISASTER_CATEGORY", "earthquake"),
        page_size=int(os.environ.get("PAGE_SIZE", "10")),
        request_timeout_seconds=int(os.environ.get("REQUEST_TIMEOUT", "30")),
    )
