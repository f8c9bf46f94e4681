"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field
from urllib.parse import urlparse

from disaster_alerts.core.subscription import url_base64_to_bytes


DEFAULT_BASE_URL = "https://disaster-backend-tyrg.onrender.com"


@dataclass
class Config:
    """Application configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        base_url: Backend base address for events and push registration
        vapid_public_key: Server public key (base64url); None disables push
        category: Disaster category to display and follow
        page_size: Events per page
        request_timeout_seconds: Timeout for backend HTTP requests
    """
    base_url: str = DEFAULT_BASE_URL
    vapid_public_key: str | None = None
    category: str = "earthquake"
    page_size: int = 10
    request_timeout_seconds: int = 30


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_base_url(base_url: str) -> list[ValidationError]:
    """Validate the backend base URL.

    Pure function.

    Args:
        base_url: URL to validate

    Returns:
        List of validation errors (empty if valid)
    """
    parsed = urlparse(base_url or "")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return [ValidationError(
            field="base_url",
            message=f"Base URL must be an http(s) URL, got '{base_url}'",
        )]
    return []


def validate_server_key(key: str | None) -> list[ValidationError]:
    """Validate the push server public key.

    Pure function. A missing key is only a warning: notifications are
    reported as unsupported in that case.

    Args:
        key: Base64url server public key

    Returns:
        List of validation errors/warnings
    """
    if not key or key.startswith("${"):
        return [ValidationError(
            field="vapid_public_key",
            message="Server public key not set; push notifications will be unsupported",
            severity="warning",
        )]

    try:
        url_base64_to_bytes(key)
    except ValueError as e:
        return [ValidationError(
            field="vapid_public_key",
            message=str(e),
        )]

    return []


def validate_config(config: Config) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors: list[ValidationError] = []

    errors.extend(validate_base_url(config.base_url))
    errors.extend(validate_server_key(config.vapid_public_key))

    if not config.category:
        errors.append(ValidationError(
            field="category",
            message="Category must not be empty",
        ))

    if config.page_size < 1:
        errors.append(ValidationError(
            field="page_size",
            message=f"Page size must be positive, got {config.page_size}",
        ))

    if config.request_timeout_seconds <= 0:
        errors.append(ValidationError(
            field="request_timeout_seconds",
            message=f"Request timeout must be positive, got {config.request_timeout_seconds}",
        ))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
