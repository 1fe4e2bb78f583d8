"""
Page-number pagination.

The client owns an integer page index: it is seeded from the caller's
`page-number` parameter (0 when absent), sent with every request, and
incremented while the server reports `pagination.has_more`.
"""

from typing import Iterator

from covalent_sdk.api.response import ResponseEnvelope, extract_items, extract_pagination
from covalent_sdk.pagination.base import Paginator
from covalent_sdk.utils.logger import get_logger

logger = get_logger(__name__)

PAGE_NUMBER_PARAM = "page-number"


class PageCursorPaginator(Paginator):
    """
    Walks an endpoint that paginates with `page-number` and `has_more`.

    Every call to `pages()` starts again from the seeded page; no position is
    remembered between walks.
    """

    def start_page(self) -> int:
        """
        :return: The page number given in the parameters, or 0.
        :raises ValueError: If the given page number is not an integer.
        """
        raw = self.params.get(PAGE_NUMBER_PARAM)
        if raw is None or raw == "":
            return 0
        return int(raw)

    def pages(self) -> Iterator[ResponseEnvelope]:
        page = self.start_page()
        while True:
            params = {**self.params, PAGE_NUMBER_PARAM: page}
            envelope = self._fetch_page(self.url, params)
            pagination = extract_pagination(envelope.data)
            logger.debug(f"Fetched page {page} of {self.url} "
                         f"({len(extract_items(envelope.data))} items, has_more={pagination.has_more})")
            yield envelope

            if not pagination.has_more:
                return
            page += 1
