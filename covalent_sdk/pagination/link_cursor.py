"""
Link pagination.

The server returns complete `prev`/`next` URLs with each page. The first request
uses the caller's URL and parameters; every later request fetches the server
link verbatim, without reapplying the caller's parameters.
"""

from typing import Any, Dict, Iterator, Optional, Type

from covalent_sdk.api.executor import RequestExecutor
from covalent_sdk.api.response import ResponseEnvelope, extract_links
from covalent_sdk.pagination.base import Paginator
from covalent_sdk.utils.logger import get_logger

logger = get_logger(__name__)

DIRECTIONS = ("next", "prev")


class LinkCursorPaginator(Paginator):
    """
    Walks an endpoint that paginates with `links.prev` / `links.next`.

    Attributes:
        direction (str): Which link to follow, "next" or "prev".
    """

    def __init__(self, executor: RequestExecutor, url: str,
                 params: Optional[Dict[str, Any]] = None,
                 item_model: Optional[Type[Any]] = None,
                 direction: str = "next") -> None:
        if direction not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got {direction!r}")
        super().__init__(executor, url, params=params, item_model=item_model)
        self.direction = direction

    def pages(self) -> Iterator[ResponseEnvelope]:
        url: Optional[str] = self.url
        params: Optional[Dict[str, Any]] = self.params or None
        while url:
            envelope = self._fetch_page(url, params)
            yield envelope

            url = getattr(extract_links(envelope.data), self.direction)
            params = None
            if url:
                logger.debug(f"Following {self.direction} link {url}")
