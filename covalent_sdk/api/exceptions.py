"""
exceptions.py

Errors raised by the request layer. Single-page calls raise them directly;
streams deliver them as the final error record.
"""

from typing import Optional

from covalent_sdk.utils.api_key_validator import INVALID_API_KEY_MESSAGE

DEFAULT_ERROR_MESSAGE = "default error message"


class CovalentError(Exception):
    """Base exception for all SDK errors."""

    pass


class AuthError(CovalentError):
    """The API key is missing or malformed. Detected before any network call."""

    error_code = 401

    def __init__(self, message: str = INVALID_API_KEY_MESSAGE):
        super().__init__(message)
        self.error_message = message


class TransportError(CovalentError):
    """The connection attempt itself failed (DNS, connect, write, timeout)."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class RateLimitExhausted(CovalentError):
    """
    A rate-limited or non-2xx response persisted until the retry budget ran out.

    Attributes:
        max_retries (int): The attempt budget that was exhausted.
        status_code (Optional[int]): The last HTTP status seen.
        retry_count (int): The retry counter when the policy gave up.
    """

    def __init__(self, max_retries: int, status_code: Optional[int] = None,
                 retry_count: Optional[int] = None):
        super().__init__(f"max retries exceeded: {max_retries}")
        self.max_retries = max_retries
        self.status_code = status_code
        self.retry_count = max_retries if retry_count is None else retry_count


class DecodeError(CovalentError):
    """The response body did not parse into the expected envelope shape."""

    pass


class ApiError(CovalentError):
    """
    The envelope decoded but reports `error: true`.

    Attributes:
        error_code (Optional[int]): The server's error code.
        error_message (str): The server's message, or a fixed default when absent.
    """

    def __init__(self, error_code: Optional[int], error_message: Optional[str]):
        self.error_code = error_code
        self.error_message = error_message if error_message is not None else DEFAULT_ERROR_MESSAGE
        super().__init__(f"An error occurred {error_code}: {self.error_message}")


class PaginationError(CovalentError):
    """A pagination link was requested but the page does not carry one."""

    pass
