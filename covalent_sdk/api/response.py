"""
response.py

Pydantic models for the response envelope that wraps every endpoint's payload,
together with the pagination metadata embedded in list-shaped payloads.

Every endpoint answers with `{data, error, error_code, error_message}`. List
payloads additionally carry either `pagination` (page-number style) or `links`
(prev/next URL style) next to their `items`.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from covalent_sdk.api.exceptions import ApiError, DecodeError

T = TypeVar("T")


class PaginationMetadata(BaseModel):
    """
    Page-number pagination metadata.

    Attributes:
        has_more (Optional[bool]): True if there is another page.
        page_number (Optional[int]): The requested page number.
        page_size (Optional[int]): The requested number of items on the page.
        total_count (Optional[int]): The total number of items across all pages.
    """
    model_config = ConfigDict(frozen=True)

    has_more: Optional[bool] = None
    page_number: Optional[int] = None
    page_size: Optional[int] = None
    total_count: Optional[int] = None


class CursorLinks(BaseModel):
    """
    Link pagination metadata. Each link is a complete, directly fetchable URL.
    """
    model_config = ConfigDict(frozen=True)

    prev: Optional[str] = None
    next: Optional[str] = None


class Page(BaseModel, Generic[T]):
    """
    A list-shaped payload. Endpoint-specific fields are kept as extras.
    """
    model_config = ConfigDict(extra="allow")

    items: List[T] = Field(default_factory=list)
    pagination: Optional[PaginationMetadata] = None
    links: Optional[CursorLinks] = None


class ResponseEnvelope(BaseModel, Generic[T]):
    """
    The wrapper every endpoint returns.

    `error` is true when `error_code` and `error_message` describe a failure;
    otherwise `data` holds the payload.
    """
    model_config = ConfigDict(frozen=True)

    data: Optional[T] = None
    error: bool = False
    error_code: Optional[int] = None
    error_message: Optional[str] = None

    def raise_for_error(self) -> "ResponseEnvelope[T]":
        """
        :return: The envelope itself when it reports success.
        :raises ApiError: If the envelope reports an error.
        """
        if self.error:
            raise ApiError(self.error_code, self.error_message)
        return self


def decode_envelope(body: Union[bytes, str], data_model: Optional[Type[Any]] = None) -> ResponseEnvelope:
    """
    Decodes a response body into an envelope.

    :param body: The raw response body.
    :param data_model: Type of `data`; None keeps plain JSON values.
    :return: The decoded envelope.
    :raises DecodeError: If the body is not valid JSON for the envelope shape.
    """
    envelope_type = ResponseEnvelope[data_model] if data_model is not None else ResponseEnvelope[Any]
    try:
        return envelope_type.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Failed to decode response envelope: {e}") from e


def _field(data: Any, name: str) -> Any:
    if data is None:
        return None
    if isinstance(data, dict):
        return data.get(name)
    return getattr(data, name, None)


def extract_items(data: Any) -> List[Any]:
    """
    :param data: A page payload, either a dict or a `Page`.
    :return: The page's items, empty when absent.
    """
    return list(_field(data, "items") or [])


def extract_pagination(data: Any) -> PaginationMetadata:
    """
    :param data: A page payload, either a dict or a `Page`.
    :return: The page's pagination metadata; empty metadata when absent.
    :raises DecodeError: If the metadata has the wrong shape.
    """
    raw = _field(data, "pagination")
    if isinstance(raw, PaginationMetadata):
        return raw
    try:
        return PaginationMetadata.model_validate(raw or {})
    except ValidationError as e:
        raise DecodeError(f"Invalid pagination metadata: {e}") from e


def extract_links(data: Any) -> CursorLinks:
    """
    :param data: A page payload, either a dict or a `Page`.
    :return: The page's links; empty links when absent.
    :raises DecodeError: If the links have the wrong shape.
    """
    raw = _field(data, "links")
    if isinstance(raw, CursorLinks):
        return raw
    try:
        return CursorLinks.model_validate(raw or {})
    except ValidationError as e:
        raise DecodeError(f"Invalid pagination links: {e}") from e
