"""
sentry.py

Optional Sentry reporting for the SDK. Retries leave breadcrumbs and terminal
stream errors are captured with SDK tags: the client user agent, the failing
request URL and the API error code where the error carries them.

Everything here is a no-op until `init_sentry` succeeds, which requires
SENTRY_ENABLED and SENTRY_DSN in the environment.
"""

from typing import Optional

import sentry_sdk

from covalent_sdk.utils.config import DEFAULT_USER_AGENT, get_config
from covalent_sdk.utils.logger import get_logger

logger = get_logger(__name__)

RELEASE = "covalent-api-sdk@0.1.0"

_sentry_initialized = False


def init_sentry(user_agent: str = DEFAULT_USER_AGENT) -> bool:
    """
    Starts Sentry reporting when it is enabled in the configuration.

    :param user_agent: Client identifier attached to every event as `sdk.user_agent`.
    :return: True if reporting is active.
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    config = get_config()
    if not config.SENTRY_ENABLED:
        logger.debug("Sentry reporting disabled")
        return False
    if not config.SENTRY_DSN:
        logger.warning("SENTRY_ENABLED is set without SENTRY_DSN; reporting stays off")
        return False

    try:
        sentry_sdk.init(
            dsn=config.SENTRY_DSN,
            environment=config.SENTRY_ENVIRONMENT,
            traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
            release=RELEASE,
            send_default_pii=False,
        )
        sentry_sdk.set_tag("sdk.user_agent", user_agent)
    except Exception as e:
        logger.error(f"Sentry initialization failed: {e}")
        return False

    _sentry_initialized = True
    logger.info(f"Sentry reporting active ({config.SENTRY_ENVIRONMENT})")
    return True


def capture_exception(error: Exception, stream_name: Optional[str] = None) -> Optional[str]:
    """
    Reports an SDK error, tagged with what the error knows about the failing request.

    Args:
        error (Exception): The error that ended a call or a stream.
        stream_name (Optional[str]): The stream the error terminated, if any.

    Returns:
        Optional[str]: The Sentry event ID, or None when not reported.
    """
    if not _sentry_initialized:
        return None

    try:
        with sentry_sdk.new_scope() as scope:
            scope.set_tag("covalent.error", type(error).__name__)
            if stream_name:
                scope.set_tag("covalent.stream", stream_name)
            url = getattr(error, "url", None)
            if url:
                scope.set_tag("request.url", url)
            error_code = getattr(error, "error_code", None)
            if error_code is not None:
                scope.set_tag("api.error_code", str(error_code))
            return sentry_sdk.capture_exception(error)
    except Exception as e:
        logger.error(f"Could not report {type(error).__name__} to Sentry: {e}")
        return None


def record_retry(url: str, status_code: int, retry_count: int, delay_ms: int) -> None:
    """
    Leaves a breadcrumb for one backoff retry.
    """
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.add_breadcrumb(
            category="http.retry",
            level="warning",
            message=f"HTTP {status_code}, retry {retry_count} in {delay_ms}ms",
            data={"url": url, "status_code": status_code, "retry_count": retry_count, "delay_ms": delay_ms},
        )
    except Exception as e:
        logger.error(f"Could not record retry breadcrumb: {e}")


def close_sentry(timeout: int = 2) -> None:
    """
    Flushes pending events and turns reporting off.

    :param timeout: Seconds to wait for pending events.
    """
    global _sentry_initialized

    if not _sentry_initialized:
        return

    try:
        sentry_sdk.flush(timeout=timeout)
    except Exception as e:
        logger.error(f"Sentry flush failed: {e}")
    _sentry_initialized = False
