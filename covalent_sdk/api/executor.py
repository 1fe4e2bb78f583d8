"""
executor.py

Performs one logical GET against the API and decodes the response envelope.
An immediate 429 hands the original request URL to `ExponentialBackoff`; the
winning response, whichever branch produced it, is decoded exactly once.
"""

from typing import Any, Dict, Optional, Type

import requests

from covalent_sdk.api.backoff import ExponentialBackoff
from covalent_sdk.api.exceptions import AuthError, TransportError
from covalent_sdk.api.response import ResponseEnvelope, decode_envelope
from covalent_sdk.utils.config import ClientConfig
from covalent_sdk.utils.debugger import debug_output, start_timer
from covalent_sdk.utils.logger import get_logger

logger = get_logger(__name__)


class RequestExecutor:
    """
    RequestExecutor sends authenticated GET requests on behalf of one client.
    """

    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None):
        """
        :param config: The owning client's configuration.
        :param session: HTTP session shared by this client's requests.
        """
        self.config = config
        self.session = session if session is not None else requests.Session()

    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "X-Requested-With": self.config.user_agent,
        }

    def new_backoff(self) -> ExponentialBackoff:
        return ExponentialBackoff(self.config, session=self.session)

    def fetch(self, url: str, params: Optional[Dict[str, Any]] = None,
              data_model: Optional[Type[Any]] = None) -> ResponseEnvelope:
        """
        Fetches `url` with `params` and decodes the envelope.

        :param url: The endpoint URL, or a complete link URL.
        :param params: Query parameters; None sends the URL unchanged.
        :param data_model: Type of the envelope's `data`; None keeps plain JSON.
        :return: The decoded envelope. Envelope-level errors are not raised here.
        :raises AuthError: If the client's API key is invalid.
        :raises TransportError: If the connection attempt fails.
        :raises RateLimitExhausted: If retries after a 429 are exhausted.
        :raises DecodeError: If the body is not a valid envelope.
        """
        if not self.config.is_key_valid:
            raise AuthError()

        request = requests.Request("GET", url, params=params, headers=self.headers())
        prepared = self.session.prepare_request(request)

        start_time = start_timer(self.config.debug)
        try:
            response = self.session.send(prepared, timeout=self.config.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {prepared.url} failed: {e}")
            raise TransportError(str(e), url=prepared.url) from e
        debug_output(prepared.url, response.status_code, start_time)

        if response.status_code == 429:
            response.close()
            logger.info(f"Rate limited on {prepared.url}, backing off")
            response = self.new_backoff().execute(prepared.url)

        try:
            return decode_envelope(response.content, data_model)
        finally:
            response.close()

    def close(self) -> None:
        self.session.close()
