"""
covalent_sdk

Python SDK for the Covalent unified blockchain data API, with rate-limit
backoff, automatic pagination and background streaming of paginated results.
"""

from covalent_sdk.api.exceptions import (
    ApiError,
    AuthError,
    CovalentError,
    DecodeError,
    PaginationError,
    RateLimitExhausted,
    TransportError,
)
from covalent_sdk.api.response import ResponseEnvelope
from covalent_sdk.client import CovalentClient
from covalent_sdk.quotes import Quote
from covalent_sdk.streaming import RecordStream, StreamRecord

__version__ = "0.1.0"

__all__ = [
    'CovalentClient',
    'Quote',
    'ResponseEnvelope',
    'RecordStream',
    'StreamRecord',
    'ApiError',
    'AuthError',
    'CovalentError',
    'DecodeError',
    'PaginationError',
    'RateLimitExhausted',
    'TransportError',
]
