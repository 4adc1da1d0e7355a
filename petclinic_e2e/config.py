"""
Test configuration for the pet-clinic end-to-end suites
Values come from the environment (optionally a .env file)
"""

import os
import logging
from dataclasses import dataclass, field
from urllib.parse import urlparse
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


def _env_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class TestConfig:
    """End-to-end testing configuration"""

    __test__ = False  # keep pytest from collecting this as a test class

    # REST backend
    api_base_url: str = field(default_factory=lambda: _env_str('PETCLINIC_API_BASE_URL', 'http://localhost:9966/petclinic/api'))
    api_username: str = field(default_factory=lambda: _env_str('PETCLINIC_API_USERNAME', ''))
    api_password: str = field(default_factory=lambda: _env_str('PETCLINIC_API_PASSWORD', ''))
    request_timeout: float = field(default_factory=lambda: _env_float('PETCLINIC_REQUEST_TIMEOUT', 30.0))
    max_retries: int = field(default_factory=lambda: _env_int('PETCLINIC_MAX_RETRIES', 3))
    retry_delay: float = field(default_factory=lambda: _env_float('PETCLINIC_RETRY_DELAY', 1.0))
    health_endpoint: str = field(default_factory=lambda: _env_str('PETCLINIC_HEALTH_ENDPOINT', '/pettypes'))
    nonexistent_id: int = field(default_factory=lambda: _env_int('PETCLINIC_NONEXISTENT_ID', 9999))

    # Angular frontend
    ui_base_url: str = field(default_factory=lambda: _env_str('PETCLINIC_UI_BASE_URL', 'http://localhost:4200'))
    browser: str = field(default_factory=lambda: _env_str('PETCLINIC_BROWSER', 'chromium'))
    headless: bool = field(default_factory=lambda: _env_bool('PETCLINIC_HEADLESS', True))
    ui_timeout: float = field(default_factory=lambda: _env_float('PETCLINIC_UI_TIMEOUT', 10.0))
    ui_settle_delay: float = field(default_factory=lambda: _env_float('PETCLINIC_UI_SETTLE_DELAY', 2.5))

    # Performance thresholds (seconds)
    create_operation_threshold: float = field(default_factory=lambda: _env_float('PERF_THRESHOLD_CREATE_OPERATION', 3.0))
    read_operation_threshold: float = field(default_factory=lambda: _env_float('PERF_THRESHOLD_READ_OPERATION', 2.0))
    update_operation_threshold: float = field(default_factory=lambda: _env_float('PERF_THRESHOLD_UPDATE_OPERATION', 2.0))
    delete_operation_threshold: float = field(default_factory=lambda: _env_float('PERF_THRESHOLD_DELETE_OPERATION', 2.0))

    log_level: str = field(default_factory=lambda: _env_str('PETCLINIC_LOG_LEVEL', 'INFO'))

    @property
    def basic_auth(self) -> tuple[str, str] | None:
        if self.api_username:
            return (self.api_username, self.api_password)
        return None

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        for name in ("api_base_url", "ui_base_url"):
            parsed = urlparse(getattr(self, name))
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(f"{name} must be an http(s) URL, got {getattr(self, name)!r}")

        if self.request_timeout <= 0:
            errors.append("request_timeout must be positive")
        if self.ui_timeout <= 0:
            errors.append("ui_timeout must be positive")
        if self.max_retries < 0:
            errors.append("max_retries must not be negative")
        if self.retry_delay < 0 or self.ui_settle_delay < 0:
            errors.append("delays must not be negative")
        if bool(self.api_username) != bool(self.api_password):
            errors.append("PETCLINIC_API_USERNAME and PETCLINIC_API_PASSWORD must be set together")
        if self.browser not in SUPPORTED_BROWSERS:
            errors.append(f"browser must be one of {', '.join(SUPPORTED_BROWSERS)}")
        if not self.health_endpoint.startswith("/"):
            errors.append("health_endpoint must start with '/'")

        return errors


def get_config() -> TestConfig:
    """Get validated test configuration"""
    config = TestConfig()
    errors = config.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for suite runs"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
