"""
API Module

This module provides the request layer of the SDK: the response envelope, the
exponential backoff policy, the request executor and the error taxonomy.
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
from covalent_sdk.api.response import CursorLinks, Page, PaginationMetadata, ResponseEnvelope, decode_envelope
from covalent_sdk.api.backoff import ExponentialBackoff
from covalent_sdk.api.executor import RequestExecutor

__all__ = [
    'ApiError',
    'AuthError',
    'CovalentError',
    'DecodeError',
    'PaginationError',
    'RateLimitExhausted',
    'TransportError',
    'CursorLinks',
    'Page',
    'PaginationMetadata',
    'ResponseEnvelope',
    'decode_envelope',
    'ExponentialBackoff',
    'RequestExecutor',
]
