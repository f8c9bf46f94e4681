"""Command-line Entry Point.

This module provides a terminal client for the disaster alerts backend.
It's a thin wrapper that loads configuration, wires the controller, and
prints one page of events with the notification status.
"""

import argparse
import logging
import os
import sys

from disaster_alerts.controller import SynchronizationController
from disaster_alerts.core.config import Config, validate_config
from disaster_alerts.core.formatter import format_notification_state, format_page
from disaster_alerts.shell.config_loader import load_config, load_config_from_env
from disaster_alerts.shell.disaster_api_client import DisasterApiClient
from disaster_alerts.shell.live_channel import QueueChannel
from disaster_alerts.shell.push_capability import UnsupportedPushCapability
from disaster_alerts.subscriber import NotificationSubscriber


logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL."""
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _get_config(args: argparse.Namespace) -> Config:
    """Load configuration from file or environment."""
    if args.env:
        config = load_config_from_env()
    else:
        config = load_config(args.config)

    if args.category:
        config.category = args.category

    return config


def build_controller(config: Config) -> SynchronizationController:
    """Wire the controller and its collaborators from configuration."""
    api_client = DisasterApiClient(
        base_url=config.base_url,
        timeout=config.request_timeout_seconds,
    )
    subscriber = NotificationSubscriber(
        capability=UnsupportedPushCapability(),
        api_client=api_client,
        server_key=config.vapid_public_key,
    )
    return SynchronizationController(
        api_client=api_client,
        channel=QueueChannel(),
        subscriber=subscriber,
        category=config.category,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show current disaster alerts from the backend",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config file (default: CONFIG_PATH or config/config.yaml)",
    )
    parser.add_argument(
        "--env",
        action="store_true",
        help="Load configuration from environment variables only",
    )
    parser.add_argument(
        "--category",
        help="Disaster category to show (default from config)",
    )
    parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number to show (default: 1)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the terminal client.

    Returns:
        Process exit code (1 if the config or page is invalid or the initial load failed)
    """
    configure_logging()
    args = parse_args(argv)

    if args.page < 1:
        print("Error: --page must be 1 or greater", file=sys.stderr)
        return 1

    config = _get_config(args)

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("%s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            print(f"Config error in {error.field}: {error.message}", file=sys.stderr)
        return 1

    with build_controller(config) as controller:
        result = controller.start()
        controller.pump()

        total_pages = controller.store.page_count(config.page_size)
        if args.page > total_pages:
            print(
                f"Error: --page {args.page} is past the last page ({total_pages})",
                file=sys.stderr,
            )
            return 1

        page = controller.store.page(config.page_size, args.page)
        print(format_page(page, config.category))
        print()
        print(f"Notifications: {format_notification_state(controller.notification_state)}")

    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
