"""
Shared plumbing for endpoint services: URL building, query parameter encoding,
single-page fetches and streaming over either pagination style.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type

from covalent_sdk.api.executor import RequestExecutor
from covalent_sdk.api.response import ResponseEnvelope
from covalent_sdk.pagination import LinkCursorPaginator, PageCursorPaginator
from covalent_sdk.streaming import RecordStream, produce
from covalent_sdk.utils.config import ClientConfig


def build_params(**options: Any) -> Dict[str, Any]:
    """
    Encodes keyword options as API query parameters.

    `page_size` becomes `page-size`, a trailing underscore is dropped
    (`from_` becomes `from`), booleans become `true`/`false`, enums use their
    value, and None options are omitted.

    :return: The query parameters.
    """
    params: Dict[str, Any] = {}
    for name, value in options.items():
        if value is None:
            continue
        key = name.rstrip("_").replace("_", "-")
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, Enum):
            value = value.value
        params[key] = value
    return params


class ServiceBase:
    """
    Base class of the endpoint services.

    Attributes:
        config (ClientConfig): The owning client's configuration.
        executor (RequestExecutor): The client's request executor.
    """

    def __init__(self, config: ClientConfig, executor: RequestExecutor):
        self.config = config
        self.executor = executor

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}/v1/{path.lstrip('/')}"

    def _fetch(self, url: str, params: Optional[Dict[str, Any]] = None,
               data_model: Optional[Type[Any]] = None) -> ResponseEnvelope:
        return self.executor.fetch(url, params or None, data_model=data_model).raise_for_error()

    def _page_paginator(self, url: str, params: Dict[str, Any],
                        item_model: Optional[Type[Any]] = None) -> PageCursorPaginator:
        return PageCursorPaginator(self.executor, url, params, item_model=item_model)

    def _link_paginator(self, url: str, params: Dict[str, Any],
                        item_model: Optional[Type[Any]] = None,
                        direction: str = "next") -> LinkCursorPaginator:
        return LinkCursorPaginator(self.executor, url, params, item_model=item_model, direction=direction)

    def _stream_pages(self, url: str, params: Dict[str, Any],
                      item_model: Optional[Type[Any]] = None) -> RecordStream:
        return produce(self._page_paginator(url, params, item_model), name=f"{type(self).__name__}-pages")

    def _stream_links(self, url: str, params: Dict[str, Any],
                      item_model: Optional[Type[Any]] = None,
                      direction: str = "next") -> RecordStream:
        return produce(self._link_paginator(url, params, item_model, direction),
                       name=f"{type(self).__name__}-links")
