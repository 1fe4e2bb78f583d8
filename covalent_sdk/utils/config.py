"""
config.py

This module contains the SDK configuration. `Config` holds process-wide defaults
loaded from environment variables, while `ClientConfig` is the immutable
per-client configuration handed to every executor, backoff policy and paginator.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from covalent_sdk.utils.api_key_validator import ApiKeyValidator

DEFAULT_BASE_URL = "https://api.covalenthq.com"
DEFAULT_MAX_RETRIES = 5
DEFAULT_BASE_DELAY_MS = 1000
DEFAULT_USER_AGENT = "com.covalenthq.sdk.python/0.1.0"


class Config:
    """
    Configuration class that loads all settings from environment variables.

    Attributes:
        API_KEY (str): The Covalent API key.
        BASE_URL (str): The base URL of the Covalent API.
        REQUEST_TIMEOUT (int): The timeout for HTTP requests in seconds.
        MAX_RETRIES (int): The maximum number of attempts for rate-limited requests.
        BASE_DELAY_MS (int): The base delay of the exponential backoff in milliseconds.
        DEBUG (bool): A flag to log every request with its status and latency.
        ENVIRONMENT (str): The application environment (e.g., 'development', 'production').
        LOG_LEVEL (str): The logging level for the SDK loggers.
        LOG_FILE (str): Optional path of a log file; empty disables file logging.
        SENTRY_DSN (str): The DSN for Sentry error tracking.
        SENTRY_ENABLED (bool): A flag to enable or disable Sentry.
        SENTRY_ENVIRONMENT (str): The Sentry environment.
        SENTRY_TRACES_SAMPLE_RATE (float): The traces sample rate for Sentry.
    """

    def __init__(self):
        """
        Initializes the configuration from environment variables.
        """
        # Covalent API Configuration
        self.API_KEY = os.getenv("COVALENT_API_KEY", "")
        self.BASE_URL = os.getenv("COVALENT_BASE_URL", DEFAULT_BASE_URL)

        # Request Configuration
        self.REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))
        self.MAX_RETRIES = int(os.getenv("MAX_RETRIES", str(DEFAULT_MAX_RETRIES)))
        self.BASE_DELAY_MS = int(os.getenv("BASE_DELAY_MS", str(DEFAULT_BASE_DELAY_MS)))
        self.DEBUG = os.getenv("COVALENT_DEBUG", "false").lower() == "true"

        # Environment Settings
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        self.LOG_FILE = os.getenv("LOG_FILE", "")

        # Sentry Configuration
        self.SENTRY_DSN = os.getenv("SENTRY_DSN", "")
        self.SENTRY_ENABLED = os.getenv("SENTRY_ENABLED", "false").lower() == "true"
        self.SENTRY_ENVIRONMENT = os.getenv("SENTRY_ENVIRONMENT", self.ENVIRONMENT)
        self.SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "1.0"))

    def validate(self) -> bool:
        """
        Validates that the required configuration values are set.

        Returns:
            bool: True if the configuration is valid.

        Raises:
            ValueError: If a required configuration is missing or invalid.
        """
        errors = []

        if not self.API_KEY:
            errors.append("COVALENT_API_KEY is required but not set")

        if self.REQUEST_TIMEOUT <= 0:
            errors.append("REQUEST_TIMEOUT must be positive")

        if self.MAX_RETRIES < 0:
            errors.append("MAX_RETRIES must be non-negative")

        if self.BASE_DELAY_MS < 0:
            errors.append("BASE_DELAY_MS must be non-negative")

        if self.SENTRY_ENABLED and not self.SENTRY_DSN:
            errors.append("SENTRY_DSN is required when SENTRY_ENABLED is true")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        return True

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the configuration to a dictionary.

        Returns:
            Dict[str, Any]: A dictionary containing all configuration values.
        """
        return {
            key: value
            for key, value in self.__dict__.items()
            if not key.startswith("_")
        }


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable settings owned by one client instance.

    Attributes:
        api_key (str): The API key sent as a bearer token.
        is_key_valid (bool): Result of validating `api_key` locally.
        debug (bool): Whether each request logs its URL, status and latency.
        base_url (str): The API root used to build endpoint URLs.
        max_retries (int): Attempt budget of the exponential backoff.
        base_delay_ms (int): Base delay of the exponential backoff.
        timeout (float): Per-request timeout in seconds.
        user_agent (str): Value of the X-Requested-With header.
    """
    api_key: str
    is_key_valid: bool
    debug: bool = False
    base_url: str = DEFAULT_BASE_URL
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay_ms: int = DEFAULT_BASE_DELAY_MS
    timeout: float = 30
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def create(cls, api_key: Optional[str] = None, debug: Optional[bool] = None,
               max_retries: Optional[int] = None, base_delay_ms: Optional[int] = None,
               base_url: Optional[str] = None, timeout: Optional[float] = None) -> "ClientConfig":
        """
        Builds a client configuration, filling omitted values from the environment.

        :param api_key: The API key; defaults to COVALENT_API_KEY.
        :param debug: Debug flag; defaults to COVALENT_DEBUG.
        :param max_retries: Backoff attempt budget; 0 or None selects the default.
        :param base_delay_ms: Backoff base delay in milliseconds.
        :param base_url: API root; defaults to COVALENT_BASE_URL.
        :param timeout: Request timeout in seconds; defaults to REQUEST_TIMEOUT.
        :return: A frozen ClientConfig.
        """
        config = get_config()
        key = api_key if api_key is not None else config.API_KEY
        return cls(
            api_key=key,
            is_key_valid=ApiKeyValidator(key).is_valid_api_key(),
            debug=config.DEBUG if debug is None else debug,
            base_url=(base_url or config.BASE_URL).rstrip("/"),
            max_retries=max_retries or config.MAX_RETRIES or DEFAULT_MAX_RETRIES,
            base_delay_ms=config.BASE_DELAY_MS if base_delay_ms is None else base_delay_ms,
            timeout=config.REQUEST_TIMEOUT if timeout is None else timeout,
        )


# Global configuration instance
_config = None


def get_config() -> Config:
    """
    Gets the global configuration instance.

    This function ensures that the configuration is loaded only once and returns
    the same instance on subsequent calls.

    Returns:
        Config: The global configuration object.
    """
    global _config
    if _config is None:
        _config = Config()
    return _config


LOG_LEVEL = get_config().LOG_LEVEL
LOG_FILE = get_config().LOG_FILE
