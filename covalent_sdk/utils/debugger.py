"""
debugger.py

Per-request debug output. Callers capture a start time only when their client
runs in debug mode; a missing start time turns `debug_output` into a no-op.
"""

import time
from typing import Optional

from covalent_sdk.utils.logger import get_logger

logger = get_logger(__name__)


def start_timer(debug: bool) -> Optional[float]:
    """
    :param debug: The client's debug flag.
    :return: A perf-counter timestamp when debugging, otherwise None.
    """
    return time.perf_counter() if debug else None


def debug_output(url: str, response_status: int, start_time: Optional[float]) -> None:
    """
    Logs the request URL, response code and response time.

    :param url: The requested URL.
    :param response_status: The HTTP status code of the response.
    :param start_time: Value returned by `start_timer`; None skips logging.
    """
    if start_time is None:
        return

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(f"Request URL: {url} | Response code: {response_status} | "
                 f"Response time: {elapsed_ms:.2f}ms")
