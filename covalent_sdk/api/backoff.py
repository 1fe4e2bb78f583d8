"""
backoff.py

Exponential backoff for rate-limited requests. The policy re-issues a GET until
the server answers with a 2xx status or the attempt budget is spent. Any status
outside [200, 300) is retried, not only 429. Connection failures are raised
immediately and never retried.
"""

import time
from typing import Optional

import requests

from covalent_sdk.api.exceptions import RateLimitExhausted, TransportError
from covalent_sdk.utils.config import ClientConfig, DEFAULT_MAX_RETRIES
from covalent_sdk.utils.debugger import debug_output, start_timer
from covalent_sdk.utils.logger import get_logger
from covalent_sdk.utils.sentry import record_retry

logger = get_logger(__name__)


def is_retryable_status(status_code: int) -> bool:
    """
    :param status_code: An HTTP status code.
    :return: True for 429 and every other status outside [200, 300).
    """
    return status_code == 429 or status_code < 200 or status_code >= 300


class ExponentialBackoff:
    """
    Retry state for one logical request.

    Attributes:
        retry_count (int): Starts at 1 and grows by one per retry.
        max_retries (int): The attempt budget; the policy gives up once
            `retry_count` reaches it.
        base_delay_ms (int): Each retry first increments `retry_count`, then
            waits `2 ** retry_count * base_delay_ms` milliseconds.
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        Initializes the backoff policy from a client configuration.

        :param config: The owning client's configuration.
        :param session: HTTP session to send requests through.
        """
        self.api_key = config.api_key
        self.debug = config.debug
        self.user_agent = config.user_agent
        self.timeout = config.timeout
        self.max_retries = config.max_retries or DEFAULT_MAX_RETRIES
        self.base_delay_ms = config.base_delay_ms
        self.retry_count = 1
        self.session = session if session is not None else requests.Session()

    def set_num_attempts(self, retry_count: int) -> None:
        self.retry_count = retry_count

    def execute(self, url: str) -> requests.Response:
        """
        Issues a GET against `url`, retrying with exponential delays.

        :param url: The complete request URL, query string included.
        :return: The first response with a 2xx status.
        :raises RateLimitExhausted: If the retry budget is consumed.
        :raises TransportError: If a connection attempt fails.
        """
        while True:
            start_time = start_timer(self.debug)
            response = self._make_request(url)
            debug_output(url, response.status_code, start_time)

            if not is_retryable_status(response.status_code):
                return response

            status_code = response.status_code
            response.close()

            if self.retry_count >= self.max_retries:
                logger.error(f"Giving up on {url} after {self.retry_count} attempts "
                             f"(last status {status_code})")
                raise RateLimitExhausted(self.max_retries, status_code, self.retry_count)

            self.retry_count += 1
            delay_ms = (2 ** self.retry_count) * self.base_delay_ms
            logger.warning(f"Request to {url} returned {status_code}, "
                           f"retrying in {delay_ms}ms (attempt {self.retry_count}/{self.max_retries})")
            record_retry(url, status_code, self.retry_count, delay_ms)
            time.sleep(delay_ms / 1000)

    def _make_request(self, url: str) -> requests.Response:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "X-Requested-With": self.user_agent,
        }
        try:
            return self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TransportError(str(e), url=url) from e
