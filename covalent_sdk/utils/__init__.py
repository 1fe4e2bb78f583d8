"""
Utilities Module

This module provides configuration management, logging, Sentry integration,
API key validation and decoders for string-encoded API values.
"""

from covalent_sdk.utils.config import ClientConfig, Config, get_config
from covalent_sdk.utils.logger import get_logger
from covalent_sdk.utils.api_key_validator import ApiKeyValidator, INVALID_API_KEY_MESSAGE
from covalent_sdk.utils.value_types import BigInt, CustomDate, parse_big_int, parse_date
from covalent_sdk.utils.sentry import (
    init_sentry,
    capture_exception,
    record_retry,
    close_sentry
)

__all__ = [
    'ClientConfig',
    'Config',
    'get_config',
    'get_logger',
    'ApiKeyValidator',
    'INVALID_API_KEY_MESSAGE',
    'BigInt',
    'CustomDate',
    'parse_big_int',
    'parse_date',
    'init_sentry',
    'capture_exception',
    'record_retry',
    'close_sentry'
]
